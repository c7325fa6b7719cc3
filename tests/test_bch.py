import pytest

from qrmatrix.bch import (
    FORMAT_GENERATOR, FORMAT_MASK, VERSION_GENERATOR, bch_remainder, bits_of, format_bits, format_sequence,
    version_bits,
)
from qrmatrix.errors import InternalInvariantError, InvalidParameterError
from qrmatrix.profile import CorrectionLevel

# Format strings for EC level L, mask patterns 0-7
FORMAT_STRINGS_L = [
    '111011111000100', '111001011110011', '111110110101010', '111100010011101',
    '110011000101111', '110001100011000', '110110001000001', '110100101110110'
]


@pytest.mark.parametrize("mask_id", range(8))
def test_low_level_format_strings(mask_id):
    bits = format_sequence(CorrectionLevel.LOW, mask_id)
    assert ''.join('1' if b else '0' for b in bits) == FORMAT_STRINGS_L[mask_id]


def test_medium_mask_zero_is_the_xor_mask():
    assert format_bits(CorrectionLevel.MEDIUM, 0) == FORMAT_MASK


@pytest.mark.parametrize("level", list(CorrectionLevel))
@pytest.mark.parametrize("mask_id", range(8))
def test_format_bits_are_bch_codewords(level, mask_id):
    unmasked = format_bits(level, mask_id) ^ FORMAT_MASK
    assert unmasked >> 15 == 0
    assert bch_remainder(unmasked, FORMAT_GENERATOR) == 0
    assert unmasked >> 10 == (level.format_indicator << 3) | mask_id


@pytest.mark.parametrize("version, expected", [
    (7, 0x07C94),
    (8, 0x085BC),
    (40, 0x28C69),
])
def test_known_version_bits(version, expected):
    assert version_bits(version) == expected


@pytest.mark.parametrize("version", range(7, 41))
def test_version_bits_are_bch_codewords(version):
    bits = version_bits(version)
    assert bits >> 12 == version
    assert bch_remainder(bits, VERSION_GENERATOR) == 0


def test_version_bits_need_version_seven():
    with pytest.raises(InvalidParameterError):
        version_bits(6)


@pytest.mark.parametrize("mask_id", [-1, 8, None, "1"])
def test_format_bits_reject_bad_mask(mask_id):
    with pytest.raises(InvalidParameterError):
        format_bits(CorrectionLevel.LOW, mask_id)


@pytest.mark.parametrize("generator", [0, 1])
def test_degenerate_generator_is_an_internal_error(generator):
    with pytest.raises(InternalInvariantError):
        bch_remainder(0b1011, generator)


def test_bits_of():
    assert bits_of(0b1011, 6) == [False, False, True, False, True, True]
