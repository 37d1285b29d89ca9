class Error(Exception):
    """Base class for coseverify errors."""


class UnsupportedAlgorithm(Error):
    """Raised when an algorithm is unknown or not accepted by policy."""


class IncompatibleKey(Error):
    """Raised when an algorithm cannot be used with the supplied key type."""

    def __init__(self, message: str = "Incompatible algorithm and key"):
        super().__init__(message)


__all__ = ["Error", "UnsupportedAlgorithm", "IncompatibleKey"]
