"""
Mask evaluation following the four penalty rules of ISO/IEC 18004.
"""

from .module import DARK, LIGHT

PENALTY_N1 = 3
PENALTY_N2 = 3
PENALTY_N3 = 40
PENALTY_N4 = 10

# 1:1:3:1:1 finder-like run with four light modules on one side and a single
# light module on the other. Lines are scanned with one light module of
# padding at each end, standing for the area around the symbol.
FINDER_LIKE_PATTERNS = (
    (LIGHT, LIGHT, LIGHT, LIGHT, DARK, LIGHT, DARK, DARK, DARK, LIGHT, DARK, LIGHT),
    (LIGHT, DARK, LIGHT, DARK, DARK, DARK, LIGHT, DARK, LIGHT, LIGHT, LIGHT, LIGHT),
)


def _lines(m):
    """Yield every row followed by every column."""
    yield from (list(row) for row in m)
    yield from ([row[c] for row in m] for c in range(len(m)))


def score_runs(m) -> int:
    """
    Rule 1: runs of five or more same-coloured modules in a row or column.

    Each run scores N1 plus one point per module beyond the fifth.
    """
    score = 0
    for line in _lines(m):
        run = 0
        previous = None
        for cell in line:
            if cell == previous:
                run += 1
                continue
            if run >= 5:
                score += PENALTY_N1 + (run - 5)
            run = 1
            previous = cell
        if run >= 5:
            score += PENALTY_N1 + (run - 5)
    return score


def score_blocks(m) -> int:
    """Rule 2: every 2x2 block of one colour scores N2."""
    score = 0
    for r in range(len(m) - 1):
        for c in range(len(m) - 1):
            if m[r][c] == m[r][c + 1] == m[r + 1][c] == m[r + 1][c + 1]:
                score += PENALTY_N2
    return score


def score_finder_like(m) -> int:
    """Rule 3: finder-like sequences in rows and columns score N3 each."""
    score = 0
    width = len(FINDER_LIKE_PATTERNS[0])
    for line in _lines(m):
        padded = [LIGHT] + line + [LIGHT]
        for i in range(len(padded) - width + 1):
            window = tuple(padded[i:i + width])
            for pattern in FINDER_LIKE_PATTERNS:
                if window == pattern:
                    score += PENALTY_N3
    return score


def score_balance(m) -> int:
    """
    Rule 4: N4 for every full 5% step the dark ratio strays from 50%.
    """
    total = len(m) * len(m)
    dark = sum(cell == DARK for row in m for cell in row)
    return PENALTY_N4 * (abs(2 * dark - total) * 10 // total)


def rule_scores(m) -> tuple:
    """
    Score a finished matrix rule by rule.

    @param m: QR code matrix with every module LIGHT or DARK
    @return: (N1, N2, N3, N4) penalty terms
    """
    return score_runs(m), score_blocks(m), score_finder_like(m), score_balance(m)


def evaluate(m) -> int:
    """
    Calculate the penalty score of a QR code matrix.

    Evaluation rules:
    1. Consecutive modules in row/column
    2. 2x2 blocks of same colour
    3. Finder-like patterns
    4. Dark/light module balance

    @param m: QR code matrix to evaluate
    @return: Calculated penalty score (lower is better)
    """
    return sum(rule_scores(m))
