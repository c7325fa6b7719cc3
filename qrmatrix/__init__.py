"""
qrmatrix: byte-mode QR code symbols (ISO/IEC 18004) as module matrices.
"""

from .config import QROptions
from .errors import CapacityExceededError, InternalInvariantError, InvalidParameterError, QRError
from .generator import QRSymbol, choose_version, make_qr
from .module import Module
from .profile import CorrectionLevel, SymbolProfile

__all__ = [
    "CapacityExceededError",
    "CorrectionLevel",
    "InternalInvariantError",
    "InvalidParameterError",
    "Module",
    "QRError",
    "QROptions",
    "QRSymbol",
    "SymbolProfile",
    "choose_version",
    "make_qr",
]
