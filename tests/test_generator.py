import pytest

from qrmatrix import (
    CapacityExceededError, CorrectionLevel, InvalidParameterError, QROptions, choose_version, make_qr,
)
from qrmatrix.penalty import evaluate


def test_hello_auto_mask_has_lowest_score():
    symbol = make_qr("HELLO", version=1, correction_level=CorrectionLevel.MEDIUM)
    scores = [make_qr("HELLO", version=1, correction_level="M", mask=m).score for m in range(8)]
    assert 0 <= symbol.mask < 8
    assert symbol.score == min(scores)
    assert symbol.mask == scores.index(min(scores))
    assert symbol.score == evaluate(symbol.matrix)
    assert make_qr("HELLO", version=1, correction_level="M").mask == symbol.mask


def test_same_request_gives_identical_matrices():
    first = make_qr("repeatable", version=5, correction_level="Q", mask=4)
    second = make_qr("repeatable", version=5, correction_level="Q", mask=4)
    assert first == second


def test_version_is_chosen_from_capacity():
    assert make_qr("x" * 17).version == 1
    assert make_qr("x" * 18).version == 2
    assert make_qr("x" * 14, correction_level="M").version == 1
    assert make_qr("x" * 15, correction_level="M").version == 2
    assert choose_version(2953, CorrectionLevel.LOW) == 40


def test_payload_too_long_for_any_version():
    with pytest.raises(CapacityExceededError):
        make_qr("x" * 2954)


def test_strict_mode():
    with pytest.raises(CapacityExceededError):
        make_qr("x" * 18, version=1, strict=True)
    assert make_qr("x" * 18, version=1).version == 1


def test_options_object():
    options = QROptions.create(version="auto", correction_level="h", mask="auto")
    assert options == QROptions(None, CorrectionLevel.HIGH, None, False)
    symbol = make_qr("opts", options=options)
    assert symbol.correction_level is CorrectionLevel.HIGH
    assert symbol.version == 1


@pytest.mark.parametrize("kwargs", [
    {"version": 0},
    {"version": 41},
    {"mask": 8},
    {"mask": -1},
    {"correction_level": "X"},
])
def test_invalid_parameters(kwargs):
    with pytest.raises(InvalidParameterError):
        make_qr("abc", **kwargs)


def test_text_outside_latin1_is_rejected():
    with pytest.raises(InvalidParameterError):
        make_qr("€uro")
