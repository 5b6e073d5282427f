"""Error types raised by the analysis layer."""


class InvalidArgument(ValueError):
    """Raised when an analyzer input or operation parameter is invalid."""
