"""Core stream processing and error taxonomy."""

from .errors import (
    ActivityAnalysisError,
    InvalidBoundsError,
    InvalidStreamError,
    ZoneConfigurationError,
    ConfigurationError,
)
from .processing import PreparedStream, clamp_bounds, preprocess_stream

__all__ = [
    "ActivityAnalysisError",
    "InvalidBoundsError",
    "InvalidStreamError",
    "ZoneConfigurationError",
    "ConfigurationError",
    "PreparedStream",
    "clamp_bounds",
    "preprocess_stream",
]
