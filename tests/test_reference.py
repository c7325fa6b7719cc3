import pytest

from qrmatrix import CorrectionLevel, SymbolProfile, make_qr
from qrmatrix.module import DARK
from qrmatrix.profile import ecc_block_spec

qrcode = pytest.importorskip("qrcode")
from qrcode.base import rs_blocks  # noqa: E402
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q  # noqa: E402
from qrcode.util import MODE_8BIT_BYTE, QRData  # noqa: E402

REFERENCE_LEVELS = {
    CorrectionLevel.LOW: ERROR_CORRECT_L,
    CorrectionLevel.MEDIUM: ERROR_CORRECT_M,
    CorrectionLevel.QUARTILE: ERROR_CORRECT_Q,
    CorrectionLevel.HIGH: ERROR_CORRECT_H,
}


def reference_matrix(data: bytes, version, level, mask_id):
    """Encode with the qrcode library in byte mode with a fixed mask."""
    qr = qrcode.QRCode(version=version, error_correction=REFERENCE_LEVELS[level], border=0, mask_pattern=mask_id)
    qr.add_data(QRData(data, mode=MODE_8BIT_BYTE))
    qr.make(fit=False)
    return [[bool(cell) for cell in row] for row in qr.get_matrix()]


def as_bools(matrix):
    return [[cell == DARK for cell in row] for row in matrix]


def test_empty_low_version_one_matches_reference():
    symbol = make_qr("", version=1, correction_level=CorrectionLevel.LOW, mask=0)
    assert symbol.size == 21
    assert as_bools(symbol.matrix) == reference_matrix(b"", 1, CorrectionLevel.LOW, 0)


@pytest.mark.parametrize("version", [1, 2, 3, 4])
@pytest.mark.parametrize("mask_id", range(8))
def test_empty_payload_matches_reference(version, mask_id):
    symbol = make_qr(b"", version=version, correction_level="L", mask=mask_id)
    assert as_bools(symbol.matrix) == reference_matrix(b"", version, CorrectionLevel.LOW, mask_id)


@pytest.mark.parametrize("payload, version, level, mask_id", [
    (b"HELLO", 1, CorrectionLevel.MEDIUM, 2),
    (b"https://example.com/qr", 3, CorrectionLevel.QUARTILE, 4),
    (bytes(range(256)), 12, CorrectionLevel.LOW, 1),
    (b"version info" * 5, 7, CorrectionLevel.HIGH, 6),
    ("Grüße aus Zürich".encode("iso-8859-1"), 8, CorrectionLevel.MEDIUM, 3),
    (b"sixteen bit length field", 10, CorrectionLevel.QUARTILE, 5),
    (b"two block groups " * 8, 14, CorrectionLevel.QUARTILE, 7),
    (b"x" * 500, 25, CorrectionLevel.HIGH, 0),
])
def test_payloads_match_reference(payload, version, level, mask_id):
    symbol = make_qr(payload, version=version, correction_level=level, mask=mask_id)
    assert as_bools(symbol.matrix) == reference_matrix(payload, version, level, mask_id)


@pytest.mark.parametrize("version, level", [
    (1, CorrectionLevel.LOW),
    (6, CorrectionLevel.HIGH),
    (9, CorrectionLevel.MEDIUM),
    (10, CorrectionLevel.LOW),
    (20, CorrectionLevel.QUARTILE),
    (40, CorrectionLevel.HIGH),
])
def test_full_capacity_matches_reference(version, level):
    payload = bytes((i * 7 + 3) % 256 for i in range(SymbolProfile(version, level).max_input_length))
    symbol = make_qr(payload, version=version, correction_level=level, mask=version % 8)
    assert as_bools(symbol.matrix) == reference_matrix(payload, version, level, version % 8)


def test_truncated_payload_matches_reference_of_prefix():
    limit = SymbolProfile(2, CorrectionLevel.MEDIUM).max_input_length
    payload = b"0123456789abcdef" * 4
    symbol = make_qr(payload, version=2, correction_level="M", mask=1)
    assert as_bools(symbol.matrix) == reference_matrix(payload[:limit], 2, CorrectionLevel.MEDIUM, 1)


@pytest.mark.parametrize("version", range(1, 41))
@pytest.mark.parametrize("level", list(CorrectionLevel))
def test_block_layout_matches_reference(version, level):
    expected = rs_blocks(version, REFERENCE_LEVELS[level])
    spec = ecc_block_spec(version, level)
    assert spec.block_count == len(expected)
    assert spec.block_lengths() == [block.data_count for block in expected]
    assert {block.total_count - block.data_count for block in expected} == {spec.ecc_per_block}
    assert SymbolProfile(version, level).data_codewords == sum(block.data_count for block in expected)
