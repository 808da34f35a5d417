"""Library error types"""


class SlugifyError(ValueError):
    """Base class for slugsmith errors."""


class InvalidRandomnessLength(SlugifyError):
    """Random suffix requested with a length that cannot hold the separator."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"randomness_length must be >= 1 when randomness is enabled, got {length}")


class ConfigError(SlugifyError):
    """Defaults file could not be read or parsed."""
