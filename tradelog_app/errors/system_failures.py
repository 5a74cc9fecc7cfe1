"""
System failure error classifications for unrecoverable errors.

These exceptions abort the analysis run; no partial report is produced.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable pipeline failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InputFileError(SystemFailureError):
    """Input file is missing, unreadable or not decodable."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


class CatalogCompileError(SystemFailureError):
    """An item catalog pattern failed to compile."""

    def __init__(self, message: str, item_name: Optional[str] = None,
                 pattern: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.item_name = item_name
        self.pattern = pattern


class SerializationFailureError(SystemFailureError):
    """Report could not be rendered or written."""

    def __init__(self, message: str, output_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.output_format = output_format


class ConfigurationError(SystemFailureError):
    """Configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
