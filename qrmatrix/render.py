"""
Turn a finished QR code matrix into terminal text or a Pillow image.
"""

from PIL import Image, ImageDraw

from .module import DARK
from .utils import parse_colour

QUIET_ZONE = 4


def _padded(m, border: int):
    size = len(m) + 2 * border
    rows = [[False] * size for _ in range(border)]
    for row in m:
        rows.append([False] * border + [cell == DARK for cell in row] + [False] * border)
    rows.extend([False] * size for _ in range(border))
    return rows


def matrix_to_text(m, fg_char='██', bg_char='  ', border: int = 0, fg_colour='', bg_colour='',
                   reset_colour='\033[0m') -> str:
    """
    Render a QR code matrix as lines of text.

    @param m: QR code matrix
    @param fg_char: Characters drawn for a dark module
    @param bg_char: Characters drawn for a light module
    @param border: Light modules added around the symbol
    @param fg_colour: ANSI escape placed before dark modules
    @param bg_colour: ANSI escape placed before light modules
    @param reset_colour: ANSI escape closing every line when colours are used
    @return: Multi-line string, one line per module row
    """
    fg = f"{fg_colour}{fg_char}"
    bg = f"{bg_colour}{bg_char}"
    end = reset_colour if fg_colour or bg_colour else ''
    return "\n".join(''.join(fg if v else bg for v in row) + end for row in _padded(m, border))


def matrix_to_image(m, scale: int = 10, border: int = QUIET_ZONE, fg_colour='black', bg_colour='white') -> Image.Image:
    """
    Draw a QR code matrix with Pillow.

    @param m: QR code matrix
    @param scale: Pixels per module
    @param border: Quiet zone width in modules
    @param fg_colour: Colour of dark modules (see utils.parse_colour)
    @param bg_colour: Colour of light modules
    @return: RGB image of (size + 2 * border) * scale pixels per side
    """
    if scale < 1:
        raise ValueError(f"Scale must be at least 1 (got {scale})")
    fg_rgb = parse_colour(fg_colour, (0, 0, 0))
    bg_rgb = parse_colour(bg_colour, (255, 255, 255))

    rows = _padded(m, border)
    img = Image.new("RGB", (len(rows) * scale, len(rows) * scale), bg_rgb)
    draw = ImageDraw.Draw(img)
    for r, row in enumerate(rows):
        for c, dark in enumerate(row):
            if dark:
                x, y = c * scale, r * scale
                draw.rectangle([x, y, x + scale - 1, y + scale - 1], fill=fg_rgb)
    return img


def save_matrix_as_image(m, filename="qr_output.png", scale: int = 10, border: int = QUIET_ZONE,
                         fg_colour='black', bg_colour='white'):
    """
    Save the QR code matrix as a PNG image.

    @param m: QR code matrix
    @param filename: Path, or binary stream such as io.BytesIO
    @param scale: Pixels per module
    @param border: Quiet zone width in modules
    @param fg_colour: Colour of dark modules
    @param bg_colour: Colour of light modules
    """
    img = matrix_to_image(m, scale=scale, border=border, fg_colour=fg_colour, bg_colour=bg_colour)
    if hasattr(filename, "write"):
        img.save(filename, format="PNG")
    else:
        img.save(filename)
