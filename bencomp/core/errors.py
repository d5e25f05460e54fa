"""Error types raised by bencomp."""


class BencompError(Exception):
    """Base class for all bencomp errors."""


class ConfigurationError(BencompError, ValueError):
    """Invalid or contradictory configuration, detected before any work starts."""


class GenerationError(BencompError, RuntimeError):
    """Input generation could not be set up or completed."""


class InputError(BencompError, ValueError):
    """Benchmark input could not be acquired or is empty."""
