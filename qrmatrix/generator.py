"""
Top-level QR code generation: payload in, finished module matrix out.
"""

import logging
from typing import NamedTuple

from . import penalty
from .config import QROptions
from .encoding import byte_mode_encoding, to_latin1
from .errors import CapacityExceededError
from .matrix import best_mask_candidate, build_matrix
from .profile import MAX_VERSION, MIN_VERSION, CorrectionLevel, SymbolProfile

logger = logging.getLogger(__name__)


class QRSymbol(NamedTuple):
    matrix: tuple
    version: int
    correction_level: CorrectionLevel
    mask: int
    score: int

    @property
    def size(self) -> int:
        return len(self.matrix)


def choose_version(length: int, correction_level) -> int:
    """
    Pick the smallest version whose byte-mode capacity holds length bytes.

    @param length: Payload length in bytes
    @param correction_level: Error correction level
    @return: Version number (1-40)
    """
    for version in range(MIN_VERSION, MAX_VERSION + 1):
        if length <= SymbolProfile(version, correction_level).max_input_length:
            return version
    raise CapacityExceededError(f"The input is too long for a version {MAX_VERSION} QR code")


def make_qr(payload, version=None, correction_level=CorrectionLevel.LOW, mask=None, strict=False,
            options: QROptions = None) -> QRSymbol:
    """
    Encode a payload into a QR code matrix.

    @param payload: Text (ISO-8859-1) or bytes to encode
    @param version: QR code version (1-40), None for the smallest that fits
    @param correction_level: CorrectionLevel, letter or name
    @param mask: Mask id (0-7), None for the lowest penalty mask
    @param strict: Raise CapacityExceededError instead of truncating
    @param options: Pre-built options, overriding the keyword arguments
    @return: The finished symbol with its parameters and penalty score
    """
    if options is None:
        options = QROptions.create(version, correction_level, mask, strict)

    data = to_latin1(payload)
    version = options.version
    if version is None:
        version = choose_version(len(data), options.correction_level)
        logger.debug("Using version %d for %d bytes", version, len(data))

    profile = SymbolProfile(version, options.correction_level)
    bits = byte_mode_encoding(data, profile, options.strict)

    if options.mask is None:
        mask_id, matrix, score = best_mask_candidate(profile, bits)
    else:
        mask_id = options.mask
        matrix = build_matrix(profile, bits, mask_id)
        score = penalty.evaluate(matrix)

    return QRSymbol(matrix, version, profile.correction_level, mask_id, score)
