"""
BCH codes protecting the format and version information.
"""

from .errors import InternalInvariantError, InvalidParameterError
from .masks import check_mask
from .profile import CorrectionLevel, check_version

FORMAT_GENERATOR = 0b10100110111
FORMAT_MASK = 0b101010000010010
FORMAT_LENGTH = 15

VERSION_GENERATOR = 0x1F25
VERSION_LENGTH = 18
MIN_VERSION_INFO = 7


def bch_remainder(value: int, generator: int) -> int:
    """
    Reduce value modulo generator over GF(2) by repeated XOR-shift.

    @param value: Dividend, already shifted left by the generator degree
    @param generator: Generator polynomial as an integer
    @return: Remainder, strictly shorter than the generator
    """
    degree = generator.bit_length() - 1
    if degree <= 0:
        raise InternalInvariantError(f"BCH generator {generator:#x} has no significant bits")
    while value.bit_length() > degree:
        value ^= generator << (value.bit_length() - 1 - degree)
    return value


def format_bits(correction_level, mask_id: int) -> int:
    """
    Build the 15-bit format information word.

    @param correction_level: Error correction level of the symbol
    @param mask_id: Mask pattern identifier (0-7)
    @return: Masked BCH(15,5) codeword, bit 14 is sent first
    """
    level = CorrectionLevel.parse(correction_level)
    data = (level.format_indicator << 3) | check_mask(mask_id)
    shifted = data << 10
    return (shifted | bch_remainder(shifted, FORMAT_GENERATOR)) ^ FORMAT_MASK


def version_bits(version: int) -> int:
    """
    Build the 18-bit version information word (versions 7 and above).

    @param version: QR code version
    @return: BCH(18,6) codeword, bit 17 is the most significant
    """
    check_version(version)
    if version < MIN_VERSION_INFO:
        raise InvalidParameterError(f"Version information only exists from version {MIN_VERSION_INFO}")
    shifted = version << 12
    return shifted | bch_remainder(shifted, VERSION_GENERATOR)


def bits_of(value: int, length: int) -> list[bool]:
    """Expand an integer into length booleans, most significant bit first."""
    return [bool((value >> (length - 1 - i)) & 1) for i in range(length)]


def format_sequence(correction_level, mask_id: int) -> list[bool]:
    return bits_of(format_bits(correction_level, mask_id), FORMAT_LENGTH)
