"""
System failure error classifications for unrecoverable errors.

These exceptions terminate the render request that raised them; no partial
output is produced.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class DataSourceFailureError(SystemFailureError):
    """A required dataset could not be loaded at all."""

    def __init__(self, message: str, dataset: Optional[str] = None,
                 source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.dataset = dataset
        self.source = source


class ConfigurationError(SystemFailureError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
