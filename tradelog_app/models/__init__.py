"""
Report data models.

Plain dataclasses describing the per-item analysis and run metadata that the
report formatter serializes.
"""
