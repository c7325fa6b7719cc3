import io

import pytest
from PIL import Image

from qrmatrix import make_qr
from qrmatrix.module import DARK, LIGHT
from qrmatrix.render import matrix_to_image, matrix_to_text, save_matrix_as_image
from qrmatrix.utils import parse_colour

SMALL = ((DARK, LIGHT), (LIGHT, DARK))


def test_matrix_to_text():
    assert matrix_to_text(SMALL, fg_char="#", bg_char=".") == "#.\n.#"
    assert matrix_to_text(SMALL, fg_char="#", bg_char=".", border=1) == "....\n.#..\n..#.\n...."


def test_matrix_to_text_with_colours():
    text = matrix_to_text(SMALL, fg_char="#", bg_char=".", fg_colour="\033[30m", bg_colour="\033[97m")
    assert text.splitlines()[0] == "\033[30m#\033[97m.\033[0m"


def test_matrix_to_image_size_and_pixels():
    img = matrix_to_image(SMALL, scale=3, border=1, fg_colour="#ff0000", bg_colour="white")
    assert img.size == (12, 12)
    assert img.getpixel((0, 0)) == (255, 255, 255)
    assert img.getpixel((3, 3)) == (255, 0, 0)
    assert img.getpixel((5, 5)) == (255, 0, 0)
    assert img.getpixel((6, 3)) == (255, 255, 255)


def test_matrix_to_image_rejects_bad_scale():
    with pytest.raises(ValueError):
        matrix_to_image(SMALL, scale=0)


def test_save_matrix_to_stream_and_file(tmp_path):
    symbol = make_qr("image", version=1, mask=0)
    stream = io.BytesIO()
    save_matrix_as_image(symbol.matrix, stream, scale=2)
    stream.seek(0)
    assert Image.open(stream).size == ((21 + 8) * 2, (21 + 8) * 2)

    target = tmp_path / "qr.png"
    save_matrix_as_image(symbol.matrix, str(target), scale=1, border=0)
    assert Image.open(target).size == (21, 21)


@pytest.mark.parametrize("value, expected", [
    ("#00ff80", (0, 255, 128)),
    ("Grey", (128, 128, 128)),
    (31, (128, 0, 0)),
    ("[92m", (0, 255, 0)),
    ("\033[34m", (0, 0, 128)),
    ((1, 2, 3), (1, 2, 3)),
])
def test_parse_colour(value, expected):
    assert parse_colour(value) == expected


@pytest.mark.parametrize("value", ["", None, "#12", "nonsense", 12])
def test_parse_colour_default(value):
    assert parse_colour(value, (9, 9, 9)) == (9, 9, 9)


@pytest.mark.parametrize("value, expected", [
    (41, (128, 0, 0)),
    ("[47m", (192, 192, 192)),
    ("\033[107m", (255, 255, 255)),
])
def test_parse_colour_background_codes(value, expected):
    assert parse_colour(value) == expected


def test_named_colours_match_bright_palette():
    assert parse_colour("white") == parse_colour(97)
    assert parse_colour("red") == parse_colour(91)
    assert parse_colour("black") == parse_colour(30)
    assert parse_colour("gray") == parse_colour("grey") == parse_colour(90)
