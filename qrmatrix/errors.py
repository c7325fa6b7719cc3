"""
Error types raised by the QR code pipeline.

Invalid input is rejected with InvalidParameterError, capacity problems that
the caller asked to hear about raise CapacityExceededError, and anything that
points at a broken table or placement bug raises InternalInvariantError.
"""


class QRError(Exception):
    """Base class for every error raised by qrmatrix."""


class InvalidParameterError(QRError, ValueError):
    """A version, correction level, mask id or character is out of range."""


class CapacityExceededError(QRError, ValueError):
    """The payload does not fit the requested symbol."""


class InternalInvariantError(QRError, RuntimeError):
    """Raised when the encoder reaches a state that valid tables never produce."""
