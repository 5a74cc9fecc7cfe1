"""
Data ingestion and record classification primitives.

Handles reading trade log rows from CSV, the canonical record models, and the
low-level parsers used to pull prices and intent out of message text.
"""
