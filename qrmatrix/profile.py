"""
Size-dependent constants of a QR code symbol.

Everything that depends on the version (1-40) and the error correction level
is derived here: matrix size, alignment pattern coordinates, Reed-Solomon
block layout and the maximum byte-mode payload.
"""

from enum import Enum
from typing import NamedTuple

from .errors import InvalidParameterError

MIN_VERSION = 1
MAX_VERSION = 40

# First alignment coordinate sits on the timing pattern line
ALIGNMENT_FIRST_POSITION = 6


class CorrectionLevel(Enum):
    """
    Error correction level with its 2-bit format indicator.

    The ordinal is the column used in the ECC characteristics tables.
    """
    LOW = (0, 0b01)
    MEDIUM = (1, 0b00)
    QUARTILE = (2, 0b11)
    HIGH = (3, 0b10)

    def __init__(self, ordinal, format_indicator):
        self.ordinal = ordinal
        self.format_indicator = format_indicator

    @property
    def letter(self) -> str:
        return self.name[0]

    @classmethod
    def parse(cls, value) -> "CorrectionLevel":
        """
        Accept a CorrectionLevel, its letter ("L", "M", "Q", "H") or its name.

        @param value: Level to convert
        @return: Matching CorrectionLevel member
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            for level in cls:
                if key in (level.name, level.letter):
                    return level
        raise InvalidParameterError(f"Unknown error correction level: {value!r}")


# Error correction codewords per block, indexed [level.ordinal][version - 1]
ECC_CODEWORDS_PER_BLOCK = (
    # LOW
    (7, 10, 15, 20, 26, 18, 20, 24, 30, 18,
     20, 24, 26, 30, 22, 24, 28, 30, 28, 28,
     28, 28, 30, 30, 26, 28, 30, 30, 30, 30,
     30, 30, 30, 30, 30, 30, 30, 30, 30, 30),
    # MEDIUM
    (10, 16, 26, 18, 24, 16, 18, 22, 22, 26,
     30, 22, 22, 24, 24, 28, 28, 26, 26, 26,
     26, 28, 28, 28, 28, 28, 28, 28, 28, 28,
     28, 28, 28, 28, 28, 28, 28, 28, 28, 28),
    # QUARTILE
    (13, 22, 18, 26, 18, 24, 18, 22, 20, 24,
     28, 26, 24, 20, 30, 24, 28, 28, 26, 30,
     28, 30, 30, 30, 30, 28, 30, 30, 30, 30,
     30, 30, 30, 30, 30, 30, 30, 30, 30, 30),
    # HIGH
    (17, 28, 22, 16, 22, 28, 26, 26, 24, 28,
     24, 28, 22, 24, 24, 30, 28, 28, 26, 28,
     30, 24, 30, 30, 30, 30, 30, 30, 30, 30,
     30, 30, 30, 30, 30, 30, 30, 30, 30, 30),
)

# Number of Reed-Solomon blocks, indexed [level.ordinal][version - 1]
NUM_ERROR_CORRECTION_BLOCKS = (
    # LOW
    (1, 1, 1, 1, 1, 2, 2, 2, 2, 4,
     4, 4, 4, 4, 6, 6, 6, 6, 7, 8,
     8, 9, 9, 10, 12, 12, 12, 13, 14, 15,
     16, 17, 18, 19, 19, 20, 21, 22, 24, 25),
    # MEDIUM
    (1, 1, 1, 2, 2, 4, 4, 4, 5, 5,
     5, 8, 9, 9, 10, 10, 11, 13, 14, 16,
     17, 17, 18, 20, 21, 23, 25, 26, 28, 29,
     31, 33, 35, 37, 38, 40, 43, 45, 47, 49),
    # QUARTILE
    (1, 1, 2, 2, 4, 4, 6, 6, 8, 8,
     8, 10, 12, 16, 12, 17, 16, 18, 21, 20,
     23, 23, 25, 27, 29, 34, 34, 35, 38, 40,
     43, 45, 48, 51, 53, 56, 59, 62, 65, 68),
    # HIGH
    (1, 1, 2, 4, 4, 4, 5, 6, 8, 8,
     11, 11, 16, 16, 18, 16, 19, 21, 25, 25,
     25, 34, 30, 32, 35, 37, 40, 42, 45, 48,
     51, 54, 57, 60, 63, 66, 70, 74, 77, 81),
)

# Total codewords (data + ECC) held by each version, indexed [version - 1]
TOTAL_CODEWORDS = (
    26, 44, 70, 100, 134, 172, 196, 242, 292, 346,
    404, 466, 532, 581, 655, 733, 815, 901, 991, 1085,
    1156, 1258, 1364, 1474, 1588, 1706, 1828, 1921, 2051, 2185,
    2323, 2465, 2611, 2761, 2876, 3034, 3196, 3362, 3532, 3706,
)


class BlockGroup(NamedTuple):
    block_count: int
    data_codewords: int


class ECCBlockSpec(NamedTuple):
    """
    Reed-Solomon block layout of one (version, level) pair.

    Groups are ordered shortest data blocks first.
    """
    groups: tuple
    ecc_per_block: int

    @property
    def block_count(self) -> int:
        return sum(g.block_count for g in self.groups)

    @property
    def data_codewords(self) -> int:
        return sum(g.block_count * g.data_codewords for g in self.groups)

    @property
    def ecc_codewords(self) -> int:
        return self.ecc_per_block * self.block_count

    @property
    def total_codewords(self) -> int:
        return self.data_codewords + self.ecc_codewords

    def block_lengths(self) -> list[int]:
        """Data length of every block in placement order."""
        return [g.data_codewords for g in self.groups for _ in range(g.block_count)]


def check_version(version) -> int:
    """
    Validate a QR code version.

    @param version: Candidate version number
    @return: The version as an int
    """
    if isinstance(version, bool) or not isinstance(version, int):
        raise InvalidParameterError(f"Version must be an integer, got {version!r}")
    if version < MIN_VERSION or version > MAX_VERSION:
        raise InvalidParameterError(
            f"QR code versions must be within {MIN_VERSION} and {MAX_VERSION} included (got {version})")
    return version


def matrix_size(version: int) -> int:
    return 17 + 4 * check_version(version)


def alignment_positions(version: int) -> tuple:
    """
    Compute the alignment pattern centre coordinates for a version.

    The patterns are spread evenly between the timing pattern and the opposite
    edge. The second to last coordinate is rounded down to an even value so the
    patterns stay in phase with the timing pattern; any leftover spacing ends up
    between the timing pattern and the first pattern to its right.

    @param version: QR code version (1-40)
    @return: Sorted coordinates shared by rows and columns, empty for version 1
    """
    check_version(version)
    if version == 1:
        return ()

    count = version // 7 + 2
    last = matrix_size(version) - ALIGNMENT_FIRST_POSITION - 1
    # integer division rounded to nearest, then forced even
    second_last = ((ALIGNMENT_FIRST_POSITION + last * (count - 2) + (count - 1) // 2) // (count - 1)) & ~1
    step = last - second_last
    second = last - (count - 2) * step
    return (ALIGNMENT_FIRST_POSITION,) + tuple(second + i * step for i in range(count - 1))


def ecc_block_spec(version: int, level: CorrectionLevel) -> ECCBlockSpec:
    """
    Look up the Reed-Solomon block layout for a version and level.

    When the codewords do not divide evenly, the first group holds the shorter
    blocks and the second group holds blocks one data codeword longer.

    @param version: QR code version (1-40)
    @param level: Error correction level
    @return: Block layout for the symbol
    """
    check_version(version)
    level = CorrectionLevel.parse(level)
    blocks = NUM_ERROR_CORRECTION_BLOCKS[level.ordinal][version - 1]
    ecc = ECC_CODEWORDS_PER_BLOCK[level.ordinal][version - 1]
    total = TOTAL_CODEWORDS[version - 1]

    long_blocks = total % blocks
    short_data = total // blocks - ecc
    groups = [BlockGroup(blocks - long_blocks, short_data)]
    if long_blocks:
        groups.append(BlockGroup(long_blocks, short_data + 1))
    return ECCBlockSpec(tuple(groups), ecc)


class SymbolProfile:
    """
    Immutable bundle of every constant a (version, level) pair determines.
    """

    __slots__ = ("version", "correction_level", "size", "alignment_positions", "blocks")

    def __init__(self, version: int, correction_level=CorrectionLevel.LOW):
        check_version(version)
        level = CorrectionLevel.parse(correction_level)
        object.__setattr__(self, "version", version)
        object.__setattr__(self, "correction_level", level)
        object.__setattr__(self, "size", matrix_size(version))
        object.__setattr__(self, "alignment_positions", alignment_positions(version))
        object.__setattr__(self, "blocks", ecc_block_spec(version, level))

    def __setattr__(self, name, value):
        raise AttributeError("SymbolProfile is immutable")

    def __eq__(self, other):
        if not isinstance(other, SymbolProfile):
            return NotImplemented
        return (self.version, self.correction_level) == (other.version, other.correction_level)

    def __hash__(self):
        return hash((self.version, self.correction_level))

    def __repr__(self):
        return f"SymbolProfile(version={self.version}, correction_level={self.correction_level.name})"

    @property
    def length_field_bits(self) -> int:
        # byte mode character count indicator
        return 8 if self.version < 10 else 16

    @property
    def header_bytes(self) -> int:
        return 2 if self.version < 10 else 3

    @property
    def data_codewords(self) -> int:
        return self.blocks.data_codewords

    @property
    def ecc_codewords(self) -> int:
        return self.blocks.ecc_codewords

    @property
    def ecc_per_block(self) -> int:
        return self.blocks.ecc_per_block

    @property
    def total_codewords(self) -> int:
        return self.blocks.total_codewords

    @property
    def max_input_length(self) -> int:
        """Largest byte-mode payload that fits without truncation."""
        return self.data_codewords - self.header_bytes
