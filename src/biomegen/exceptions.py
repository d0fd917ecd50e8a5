"""Custom exceptions for map generation."""


class BiomegenError(Exception):
    """Base exception for map generation errors."""

    pass


class ConfigurationError(BiomegenError, ValueError):
    """Raised when a generation configuration is invalid."""

    pass


class UnknownPresetError(ConfigurationError, KeyError):
    """Raised when a preset name is not registered."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class InvariantViolationError(BiomegenError, RuntimeError):
    """Raised when a fixpoint pass fails to settle within its iteration cap."""

    pass
