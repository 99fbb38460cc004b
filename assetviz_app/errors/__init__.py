"""
Error classification for the aggregation pipeline.

Data quality errors are absorbed inside aggregation; system failures escalate
to the caller and abort the render request.
"""

from .data_quality import (
    DataQualityError,
    MalformedRowError,
)
from .system_failures import (
    SystemFailureError,
    DataSourceFailureError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedRowError",
    # System Failures
    "SystemFailureError",
    "DataSourceFailureError",
    "ConfigurationError",
]
