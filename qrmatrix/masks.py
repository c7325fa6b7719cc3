"""
The eight data mask patterns.

Each mask is a function of (col, row) telling whether a data module is
inverted. Rows and columns count from the top-left corner.
"""

from .errors import InvalidParameterError

MASK_COUNT = 8
NO_MASK = -1

MASK_FUNCTIONS = (
    lambda c, r: (r + c) % 2 == 0,
    lambda c, r: r % 2 == 0,
    lambda c, r: c % 3 == 0,
    lambda c, r: (r + c) % 3 == 0,
    lambda c, r: (r // 2 + c // 3) % 2 == 0,
    lambda c, r: (r * c) % 2 + (r * c) % 3 == 0,
    lambda c, r: ((r * c) % 2 + (r * c) % 3) % 2 == 0,
    lambda c, r: ((r + c) % 2 + (r * c) % 3) % 2 == 0,
)


def check_mask(mask_id) -> int:
    """
    Validate a mask identifier.

    @param mask_id: Candidate mask id
    @return: The mask id as an int
    """
    if isinstance(mask_id, bool) or not isinstance(mask_id, int) or not 0 <= mask_id < MASK_COUNT:
        raise InvalidParameterError(f"Mask id must be within 0 and {MASK_COUNT - 1} included (got {mask_id!r})")
    return mask_id


def should_invert(mask_id, col: int, row: int) -> bool:
    """
    Tell whether the data module at (col, row) is flipped by a mask.

    @param mask_id: Mask pattern (0-7), or None / NO_MASK for an unmasked matrix
    @param col: Column index
    @param row: Row index
    @return: True when the raw bit must be inverted
    """
    if mask_id is None or mask_id == NO_MASK:
        return False
    return MASK_FUNCTIONS[mask_id](col, row)
