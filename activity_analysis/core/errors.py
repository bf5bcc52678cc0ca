"""Exceptions raised by the activity analysis core."""


class ActivityAnalysisError(ValueError):
    """Base class for every error the analysis raises."""


class InvalidBoundsError(ActivityAnalysisError):
    """Requested analysis window is out of range or inverted."""

    def __init__(self, bounds, stream_length: int):
        self.bounds = bounds
        self.stream_length = stream_length
        super().__init__(f"Invalid bounds {bounds!r} for a stream of {stream_length} samples")


class InvalidStreamError(ActivityAnalysisError):
    """Stream channels are misaligned or the time channel goes backwards."""


class ZoneConfigurationError(ActivityAnalysisError):
    """Zone boundaries are not ascending, contiguous half-open intervals."""


class ConfigurationError(ActivityAnalysisError):
    """Athlete settings are unusable (e.g. missing or non-positive weight)."""
