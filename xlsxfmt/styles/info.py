"""Style information model and conversion into stylesheet parts."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Callable, NamedTuple, Optional, Union

from .enums import (
    BorderStyle,
    DirectStyleID,
    FontEffect,
    FontFamily,
    FontScheme,
    GradientType,
    HAlign,
    PatternType,
    UnderlineType,
    VAlign,
)

DEFAULT_DIRECT_STYLE = DirectStyleID(0)

BUILTIN_NUMBER_FORMATS: dict[int, str] = {
    0: "General",
    1: "0",
    2: "0.00",
    3: "#,##0",
    4: "#,##0.00",
    5: "($#,##0_);($#,##0)",
    6: "($#,##0_);[RED]($#,##0)",
    7: "($#,##0.00_);($#,##0.00)",
    8: "($#,##0.00_);[RED]($#,##0.00_)",
    9: "0%",
    10: "0.00%",
    11: "0.00E+00",
    12: "# ?/?",
    13: "# ??/??",
    14: "mm-dd-yy",
    15: "d-mmm-yy",
    16: "d-mmm",
    17: "mmm-yy",
    18: "h:mm AM/PM",
    19: "h:mm:ss AM/PM",
    20: "h:mm",
    21: "h:mm:ss",
    22: "m/d/yy h:mm",
    37: "#,##0 ;(#,##0)",
    38: "#,##0 ;[RED](#,##0)",
    39: "#,##0.00;(#,##0.00)",
    40: "#,##0.00;[RED](#,##0.00)",
    45: "mm:ss",
    46: "[h]:mm:ss",
    47: "mmss.0",
    48: "##0.0E+0",
    49: "@",
}

_BUILTIN_NUMBER_FORMAT_IDS = {code: fid for fid, code in BUILTIN_NUMBER_FORMATS.items()}


@dataclass
class Color:
    """A colour reference."""

    rgb: str = ""
    indexed: Optional[int] = None
    theme: Optional[int] = None
    tint: float = 0.0


def new_color(rgb: str) -> Color:
    """Build a colour from ``#RRGGBB``, ``RRGGBB`` or ``AARRGGBB``."""
    value = rgb.lstrip("#").upper()
    if len(value) == 6:
        value = "FF" + value
    return Color(rgb=value)


@dataclass
class NumberFormat:
    id: int = 0
    code: str = ""


@dataclass
class Font:
    name: str = ""
    family: Union[FontFamily, int] = 0
    bold: bool = False
    italic: bool = False
    strike: bool = False
    shadow: bool = False
    condense: bool = False
    extend: bool = False
    color: Optional[Color] = None
    size: float = 0.0
    underline: Union[UnderlineType, str] = ""
    effect: Union[FontEffect, str] = ""
    scheme: Union[FontScheme, str] = ""
    charset: int = 0


@dataclass
class PatternFill:
    type: Union[PatternType, int] = 0
    color: Optional[Color] = None
    background: Optional[Color] = None


@dataclass
class GradientStop:
    position: float = 0.0
    color: Optional[Color] = None


@dataclass
class GradientFill:
    type: GradientType = GradientType.LINEAR
    degree: float = 0.0
    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0
    stop: list[GradientStop] = field(default_factory=list)


@dataclass
class Fill:
    pattern: Optional[PatternFill] = None
    gradient: Optional[GradientFill] = None


@dataclass
class BorderSegment:
    type: Union[BorderStyle, int] = 0
    color: Optional[Color] = None


@dataclass
class Border:
    left: Optional[BorderSegment] = None
    right: Optional[BorderSegment] = None
    top: Optional[BorderSegment] = None
    bottom: Optional[BorderSegment] = None
    diagonal: Optional[BorderSegment] = None
    vertical: Optional[BorderSegment] = None
    horizontal: Optional[BorderSegment] = None
    diagonal_up: bool = False
    diagonal_down: bool = False
    outline: bool = False


_SEGMENTS = ("left", "right", "top", "bottom", "diagonal", "vertical", "horizontal")


@dataclass
class CellAlignment:
    horizontal: Union[HAlign, int] = 0
    vertical: Union[VAlign, int] = 0
    wrap_text: bool = False
    justify_last_line: bool = False
    shrink_to_fit: bool = False
    text_rotation: int = 0
    indent: int = 0
    relative_indent: int = 0
    reading_order: int = 0


@dataclass
class CellProtection:
    locked: bool = False
    hidden: bool = False


@dataclass
class NamedStyleInfo:
    name: str = ""
    builtin_id: Optional[int] = None


def _blank_fill() -> Fill:
    return Fill(pattern=PatternFill(), gradient=GradientFill())


def _blank_border() -> Border:
    return Border(**{name: BorderSegment() for name in _SEGMENTS})


@dataclass
class DiffStyle:
    """Differential style: every part present, each initially empty."""

    number_format: NumberFormat = field(default_factory=NumberFormat)
    font: Font = field(default_factory=Font)
    fill: Fill = field(default_factory=_blank_fill)
    border: Border = field(default_factory=_blank_border)
    alignment: CellAlignment = field(default_factory=CellAlignment)
    protection: CellProtection = field(default_factory=CellProtection)


StyleOption = Callable[["StyleInfo"], None]


class StyleInfo:
    """Combined styling information for a cell, built from options."""

    def __init__(self, *options: StyleOption) -> None:
        self.style = DiffStyle()
        self.named = NamedStyleInfo()
        self.set(*options)

    def set(self, *options: StyleOption) -> None:
        """Apply options to this style."""
        for option in options:
            option(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleInfo):
            return NotImplemented
        return self.style == other.style and self.named == other.named

    def __repr__(self) -> str:
        return f"StyleInfo(style={self.style!r}, named={self.named!r})"


class UnpackedStyle(NamedTuple):
    """Non-empty parts of a style; empty parts are ``None``."""

    font: Optional[Font]
    fill: Optional[Fill]
    alignment: Optional[CellAlignment]
    number_format: Optional[NumberFormat]
    protection: Optional[CellProtection]
    border: Optional[Border]
    named: Optional[NamedStyleInfo]


def _copy_if_set(value, empty):
    if value is None or value == empty:
        return None
    return copy.deepcopy(value)


def unpack(info: StyleInfo) -> UnpackedStyle:
    """Split a style into independent copies of its non-empty parts."""
    style = info.style

    border = copy.deepcopy(style.border)
    for name in _SEGMENTS:
        setattr(border, name, _copy_if_set(getattr(style.border, name), BorderSegment()))
    if border == Border():
        border = None

    fill = Fill(
        pattern=_copy_if_set(style.fill.pattern, PatternFill()),
        gradient=_copy_if_set(style.fill.gradient, GradientFill()),
    )
    if fill == Fill():
        fill = None

    return UnpackedStyle(
        font=_copy_if_set(style.font, Font()),
        fill=fill,
        alignment=_copy_if_set(style.alignment, CellAlignment()),
        number_format=_copy_if_set(style.number_format, NumberFormat()),
        protection=_copy_if_set(style.protection, CellProtection()),
        border=border,
        named=_copy_if_set(info.named, NamedStyleInfo()),
    )


def to_rich_font(info: StyleInfo) -> Optional[Font]:
    """Return a copy of the style's font for rich text, or ``None`` if empty."""
    return _copy_if_set(info.style.font, Font())


def number_format(code: str) -> StyleOption:
    """Option setting a custom number format, using a built-in id when the code matches one."""

    def apply(info: StyleInfo) -> None:
        info.style.number_format = NumberFormat(
            id=_BUILTIN_NUMBER_FORMAT_IDS.get(code, -1), code=code
        )

    return apply


def number_format_id(format_id: int) -> StyleOption:
    """Option setting an existing or built-in number format by id."""

    def apply(info: StyleInfo) -> None:
        info.style.number_format = NumberFormat(
            id=format_id, code=BUILTIN_NUMBER_FORMATS.get(format_id, "")
        )

    return apply