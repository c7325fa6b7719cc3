"""
Per-request encoding options.
"""

from typing import NamedTuple, Optional

from .masks import check_mask
from .profile import CorrectionLevel, check_version

AUTO = "auto"


class QROptions(NamedTuple):
    """
    Settings of a single encode call.

    version None picks the smallest version that fits the payload, mask None
    picks the mask with the lowest penalty, strict turns truncation of an
    oversized payload into an error.
    """
    version: Optional[int] = None
    correction_level: CorrectionLevel = CorrectionLevel.LOW
    mask: Optional[int] = None
    strict: bool = False

    @classmethod
    def create(cls, version=None, correction_level=CorrectionLevel.LOW, mask=None, strict=False) -> "QROptions":
        """
        Validate and normalise raw option values.

        @param version: QR code version (1-40) or None / "auto"
        @param correction_level: CorrectionLevel, letter or name
        @param mask: Mask id (0-7) or None / "auto"
        @param strict: Raise instead of truncating oversized payloads
        @return: Validated options
        """
        if version == AUTO:
            version = None
        if mask == AUTO:
            mask = None
        return cls(
            version=None if version is None else check_version(version),
            correction_level=CorrectionLevel.parse(correction_level),
            mask=None if mask is None else check_mask(mask),
            strict=bool(strict),
        )
