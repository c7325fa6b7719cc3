"""
Colour of a single matrix module.
"""

from enum import IntEnum


class Module(IntEnum):
    """
    UNSET only exists while a matrix is being built.

    LIGHT and DARK compare equal to 0 and 1, so pattern bitmaps can be written
    straight into a matrix.
    """
    UNSET = -1
    LIGHT = 0
    DARK = 1

    @classmethod
    def of(cls, dark) -> "Module":
        return cls.DARK if dark else cls.LIGHT


UNSET = Module.UNSET
LIGHT = Module.LIGHT
DARK = Module.DARK
