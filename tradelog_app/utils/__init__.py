"""
Utility functions module.

Time Semantics:
- Message timestamps from the CSV are authoritative for data spans
- Wall-clock time is only used for run metadata (run epoch, processing time)
"""
