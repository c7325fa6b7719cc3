"""
QR code matrix construction.

Builds the module grid in ordered passes: finder patterns, alignment
patterns, timing patterns, the dark module, format and version information,
then the masked data bits. Matrices are indexed m[row][col].
"""

import logging

from . import penalty
from .bch import FORMAT_LENGTH, VERSION_LENGTH, MIN_VERSION_INFO, format_sequence, version_bits
from .errors import InternalInvariantError
from .masks import MASK_COUNT, check_mask, should_invert
from .module import DARK, LIGHT, UNSET, Module
from .patterns import PATTERNS, Anchor, Pattern, anchor_offset
from .profile import SymbolProfile

logger = logging.getLogger(__name__)

TIMING_LINE = 6


def initialise_matrix(size: int) -> list[list[Module]]:
    """
    Create an empty QR code matrix with every module UNSET.

    @param size: Dimension of square matrix (size x size)
    @return: 2D list representing empty QR code grid
    """
    return [[UNSET] * size for _ in range(size)]


def add_pattern(m, pattern: Pattern, anchor: Anchor, row: int, col: int, end_row=None, end_col=None):
    """
    Paste a function pattern into the matrix.

    Fixed patterns are placed so that their anchor lands on (row, col) and get
    a light border where they require one. Repeating patterns are tiled from
    (row, col) to (end_row, end_col) inclusive over modules that are still unset.

    @param m: QR code matrix
    @param pattern: Pattern to paste
    @param anchor: Anchor of the pattern that (row, col) refers to
    @param row: Anchor row
    @param col: Anchor column
    @param end_row: Last row covered by a repeating pattern
    @param end_col: Last column covered by a repeating pattern
    """
    spec = PATTERNS[pattern]
    size = len(m)

    if spec.is_repeating:
        if end_row is None or end_col is None:
            raise ValueError("Repeating patterns need an end coordinate")
        for r in range(row, end_row + 1):
            for c in range(col, end_col + 1):
                if m[r][c] == UNSET:
                    m[r][c] = Module(spec.matrix[(r - row) % spec.height][(c - col) % spec.width])
        return

    off_r, off_c = anchor_offset(anchor, spec.height, spec.width)
    top, left = row - off_r, col - off_c
    for dr in range(spec.height):
        for dc in range(spec.width):
            m[top + dr][left + dc] = Module(spec.matrix[dr][dc])

    if spec.has_border:
        for r in range(top - 1, top + spec.height + 1):
            for c in range(left - 1, left + spec.width + 1):
                on_ring = r in (top - 1, top + spec.height) or c in (left - 1, left + spec.width)
                if on_ring and 0 <= r < size and 0 <= c < size:
                    m[r][c] = LIGHT


def add_finder_patterns(m):
    size = len(m)
    add_pattern(m, Pattern.FINDER, Anchor.NORTH_WEST, 0, 0)
    add_pattern(m, Pattern.FINDER, Anchor.NORTH_EAST, 0, size)
    add_pattern(m, Pattern.FINDER, Anchor.SOUTH_WEST, size, 0)


def add_alignment_patterns(m, profile: SymbolProfile):
    """
    Place an alignment pattern on every coordinate pair not covered by a finder.

    @param m: QR code matrix
    @param profile: Symbol profile giving the alignment coordinates
    """
    positions = profile.alignment_positions
    for r in positions:
        for c in positions:
            if m[r][c] == UNSET:
                add_pattern(m, Pattern.ALIGNMENT, Anchor.CENTER, r, c)


def add_timing_patterns(m):
    last = len(m) - 9
    add_pattern(m, Pattern.TIMING_ROW, Anchor.WEST, TIMING_LINE, 8, TIMING_LINE, last)
    add_pattern(m, Pattern.TIMING_COL, Anchor.NORTH, 8, TIMING_LINE, last, TIMING_LINE)


def add_dark_module(m):
    m[len(m) - 8][8] = DARK


def format_positions(size: int, i: int) -> tuple:
    """
    Module pair holding format bit i (0 is the most significant bit).

    @param size: Matrix size
    @param i: Bit index in transmission order
    @return: ((row, col) near the top-left finder, (row, col) of the split copy)
    """
    first_col = i if i < 6 else i + 1 if i == 6 else 8
    first_row = 14 - i if i > 8 else i - 1 if i == 8 else 8
    second_row = size - 1 - i if i < 7 else 8
    second_col = 8 if i < 7 else size - 15 + i
    return (first_row, first_col), (second_row, second_col)


def add_format_information(m, correction_level, mask_id: int):
    """
    Write both copies of the format information.

    @param m: QR code matrix
    @param correction_level: Error correction level of the symbol
    @param mask_id: Mask pattern identifier (0-7)
    """
    size = len(m)
    for i, bit in enumerate(format_sequence(correction_level, mask_id)):
        for r, c in format_positions(size, i):
            m[r][c] = Module.of(bit)


def add_version_information(m, version: int):
    """
    Write both 6x3 copies of the version information (version 7 and up).

    Bit k, counted from the least significant end, goes to row k // 3 and
    column size - 11 + k % 3 next to the top-right finder. The copy next to
    the bottom-left finder is its mirror across the diagonal.
    """
    if version < MIN_VERSION_INFO:
        return
    size = len(m)
    bits = version_bits(version)
    for k in range(VERSION_LENGTH):
        dark = Module.of((bits >> k) & 1)
        a, b = size - 11 + k % 3, k // 3
        m[b][a] = dark
        m[a][b] = dark


def construct_matrix(profile: SymbolProfile, mask_id: int) -> list[list[Module]]:
    """
    Create a matrix holding every function pattern and the format information.

    Data modules are left UNSET.

    @param profile: Symbol profile
    @param mask_id: Mask pattern recorded in the format information
    @return: Partially built QR code matrix
    """
    m = initialise_matrix(profile.size)
    add_finder_patterns(m)
    add_alignment_patterns(m, profile)
    add_timing_patterns(m)
    add_dark_module(m)
    add_format_information(m, profile.correction_level, mask_id)
    add_version_information(m, profile.version)
    return m


def data_path(size: int):
    """
    Yield the data module coordinates in placement order.

    Two-column strips are walked from the right edge, alternating upwards and
    downwards, skipping the vertical timing pattern column.
    """
    up = True
    col = size - 1
    while col > 0:
        if col == TIMING_LINE:
            col -= 1
            continue
        rows = range(size - 1, -1, -1) if up else range(size)
        for r in rows:
            for c in (col, col - 1):
                yield r, c
        up = not up
        col -= 2


def add_data_information(m, bits, mask_id=None):
    """
    Thread the encoded bits through every unset module.

    Modules left over once the bits run out are filled with light raw bits
    before masking.

    @param m: QR code matrix from construct_matrix
    @param bits: Encoded data bits in transmission order
    @param mask_id: Mask pattern (0-7), or None to leave the data unmasked
    """
    bit_idx = 0
    for r, c in data_path(len(m)):
        if m[r][c] != UNSET:
            continue
        raw = bits[bit_idx] if bit_idx < len(bits) else False
        bit_idx += 1
        m[r][c] = Module.of(bool(raw) != should_invert(mask_id, c, r))

    if bit_idx < len(bits):
        raise InternalInvariantError(
            f"Matrix ran out of data modules with {len(bits) - bit_idx} bits left to place")


def freeze(m) -> tuple:
    """
    Return an immutable copy of a finished matrix.
    """
    for row in m:
        if UNSET in row:
            raise InternalInvariantError("Matrix still holds unset modules")
    return tuple(tuple(row) for row in m)


def build_matrix(profile: SymbolProfile, bits, mask_id: int) -> tuple:
    m = construct_matrix(profile, check_mask(mask_id))
    add_data_information(m, bits, mask_id)
    return freeze(m)


def best_mask_candidate(profile: SymbolProfile, bits) -> tuple:
    """
    Build the matrix under every mask and keep the lowest penalty.

    Ties go to the lowest mask id.

    @param profile: Symbol profile
    @param bits: Encoded data bits
    @return: (mask_id, matrix, score)
    """
    best = None
    for mask_id in range(MASK_COUNT):
        matrix = build_matrix(profile, bits, mask_id)
        score = penalty.evaluate(matrix)
        logger.debug("Mask %d scored %d", mask_id, score)
        if best is None or score < best[2]:
            best = (mask_id, matrix, score)
    logger.debug("Mask chosen: %d (score %d)", best[0], best[2])
    return best


def find_best_mask(profile: SymbolProfile, bits) -> int:
    """
    Find the mask that minimises the penalty score.

    @param profile: Symbol profile
    @param bits: Encoded data bits
    @return: Mask id (0-7)
    """
    return best_mask_candidate(profile, bits)[0]


def render_matrix(profile: SymbolProfile, bits, mask_id=None) -> tuple:
    """
    Create the finished matrix of a QR code.

    @param profile: Symbol profile
    @param bits: Encoded data bits
    @param mask_id: Mask pattern (0-7), or None to pick the best one
    @return: Immutable matrix of LIGHT and DARK modules
    """
    if mask_id is None:
        return best_mask_candidate(profile, bits)[1]
    return build_matrix(profile, bits, mask_id)
