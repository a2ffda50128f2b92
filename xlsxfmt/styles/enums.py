"""Enumerations and identifier types used by cell styles."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import NewType

DirectStyleID = NewType("DirectStyleID", int)
DiffStyleID = NewType("DiffStyleID", int)
NamedStyleID = NewType("NamedStyleID", int)


def _camel_case(name: str) -> str:
    head, *tail = name.lower().split("_")
    return head + "".join(part.capitalize() for part in tail)


class _LabeledEnum(IntEnum):
    """Integer enumeration whose members also carry their spreadsheet label."""

    @property
    def label(self) -> str:
        """The label used for this value in a workbook."""
        return _camel_case(self.name)

    @classmethod
    def from_label(cls, label: str):
        """Return the member whose label is ``label``."""
        for member in cls:
            if member.label == label:
                return member
        raise ValueError(f"unknown {cls.__name__} value: {label!r}")

    def __str__(self) -> str:
        return self.label


class HAlign(_LabeledEnum):
    """Horizontal alignment of cell content."""

    GENERAL = 1
    LEFT = 2
    CENTER = 3
    RIGHT = 4
    FILL = 5
    JUSTIFY = 6
    CENTER_CONTINUOUS = 7
    DISTRIBUTED = 8


class VAlign(_LabeledEnum):
    """Vertical alignment of cell content."""

    TOP = 1
    CENTER = 2
    BOTTOM = 3
    JUSTIFY = 4
    DISTRIBUTED = 5


class BorderStyle(_LabeledEnum):
    """Line style of a border segment."""

    NONE = 1
    THIN = 2
    MEDIUM = 3
    DASHED = 4
    DOTTED = 5
    THICK = 6
    DOUBLE = 7
    HAIR = 8
    MEDIUM_DASHED = 9
    DASH_DOT = 10
    MEDIUM_DASH_DOT = 11
    DASH_DOT_DOT = 12
    MEDIUM_DASH_DOT_DOT = 13
    SLANT_DASH_DOT = 14


class GradientType(_LabeledEnum):
    """Kind of gradient fill."""

    LINEAR = 0
    PATH = 1


class PatternType(_LabeledEnum):
    """Pattern of a pattern fill."""

    NONE = 1
    SOLID = 2
    MEDIUM_GRAY = 3
    DARK_GRAY = 4
    LIGHT_GRAY = 5
    DARK_HORIZONTAL = 6
    DARK_VERTICAL = 7
    DARK_DOWN = 8
    DARK_UP = 9
    DARK_GRID = 10
    DARK_TRELLIS = 11
    LIGHT_HORIZONTAL = 12
    LIGHT_VERTICAL = 13
    LIGHT_DOWN = 14
    LIGHT_UP = 15
    LIGHT_GRID = 16
    LIGHT_TRELLIS = 17
    GRAY125 = 18
    GRAY0625 = 19


class FontCharset(IntEnum):
    """Character set of a font."""

    ANSI = 0
    DEFAULT = 1
    SYMBOL = 2
    MAC = 77
    SHIFTJIS = 128
    HANGUL = 129
    JOHAB = 130
    GB2312 = 134
    CHINESEBIG5 = 136
    GREEK = 161
    TURKISH = 162
    VIETNAMESE = 163
    HEBREW = 177
    ARABIC = 178
    BALTIC = 186
    RUSSIAN = 204
    THAI = 222
    EASTEUROPE = 238
    OEM = 255


class FontFamily(IntEnum):
    """Font family classification."""

    ROMAN = 1
    SWISS = 2
    MODERN = 3
    SCRIPT = 4
    DECORATIVE = 5


class _StrEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class FontScheme(_StrEnum):
    """Theme font scheme a font belongs to."""

    NONE = "none"
    MINOR = "minor"
    MAJOR = "major"


class FontEffect(_StrEnum):
    """Vertical positioning effect of a font."""

    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"


class UnderlineType(_StrEnum):
    """Underline style of a font."""

    SINGLE = "single"
    DOUBLE = "double"
    SINGLE_ACCOUNTING = "singleAccounting"
    DOUBLE_ACCOUNTING = "doubleAccounting"
    NONE = "none"