"""Built-in named styles and the option that applies a named style."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from .info import StyleInfo, StyleOption

__all__ = ["NamedStyle", "named_style"]

_ROW_LEVEL_ID = 1
_COL_LEVEL_ID = 2


class NamedStyle(IntEnum):
    """Built-in named styles, including pseudo styles for outline levels."""

    NORMAL = 0
    COMMA = 3
    CURRENCY = 4
    PERCENT = 5
    COMMA0 = 6
    CURRENCY0 = 7
    HYPERLINK = 8
    HYPERLINK_FOLLOWED = 9
    NOTE = 10
    WARNING = 11
    TITLE = 15
    HEADING1 = 16
    HEADING2 = 17
    HEADING3 = 18
    HEADING4 = 19
    INPUT = 20
    OUTPUT = 21
    CALCULATION = 22
    CHECK_CELL = 23
    LINKED_CELL = 24
    TOTAL = 25
    GOOD = 26
    BAD = 27
    NEUTRAL = 28
    ACCENT1 = 29
    ACCENT1_20 = 30
    ACCENT1_40 = 31
    ACCENT1_60 = 32
    ACCENT2 = 33
    ACCENT2_20 = 34
    ACCENT2_40 = 35
    ACCENT2_60 = 36
    ACCENT3 = 37
    ACCENT3_20 = 38
    ACCENT3_40 = 39
    ACCENT3_60 = 40
    ACCENT4 = 41
    ACCENT4_20 = 42
    ACCENT4_40 = 43
    ACCENT4_60 = 44
    ACCENT5 = 45
    ACCENT5_20 = 46
    ACCENT5_40 = 47
    ACCENT5_60 = 48
    ACCENT6 = 49
    ACCENT6_20 = 50
    ACCENT6_40 = 51
    ACCENT6_60 = 52
    EXPLANATORY = 53
    ROW_LEVEL1 = 155
    ROW_LEVEL2 = 156
    ROW_LEVEL3 = 157
    ROW_LEVEL4 = 158
    ROW_LEVEL5 = 159
    ROW_LEVEL6 = 160
    ROW_LEVEL7 = 161
    COL_LEVEL1 = 263
    COL_LEVEL2 = 264
    COL_LEVEL3 = 265
    COL_LEVEL4 = 266
    COL_LEVEL5 = 267
    COL_LEVEL6 = 268
    COL_LEVEL7 = 269

    @property
    def label(self) -> str:
        """The default name of this built-in style."""
        return _LABELS[self]

    @property
    def builtin_id(self) -> int:
        """The built-in id stored in a workbook; outline pseudo styles share one id each."""
        if NamedStyle.ROW_LEVEL1 <= self <= NamedStyle.ROW_LEVEL7:
            return _ROW_LEVEL_ID
        if NamedStyle.COL_LEVEL1 <= self <= NamedStyle.COL_LEVEL7:
            return _COL_LEVEL_ID
        return int(self)


def _labels() -> dict[NamedStyle, str]:
    labels = {
        NamedStyle.NORMAL: "Normal",
        NamedStyle.COMMA: "Comma",
        NamedStyle.CURRENCY: "Currency",
        NamedStyle.PERCENT: "Percent",
        NamedStyle.COMMA0: "Comma[0]",
        NamedStyle.CURRENCY0: "Currency[0]",
        NamedStyle.HYPERLINK: "Hyperlink",
        NamedStyle.HYPERLINK_FOLLOWED: "Followed Hyperlink",
        NamedStyle.NOTE: "Note",
        NamedStyle.WARNING: "Warning Text",
        NamedStyle.TITLE: "Title",
        NamedStyle.HEADING1: "Heading 1",
        NamedStyle.HEADING2: "Heading 2",
        NamedStyle.HEADING3: "Heading 3",
        NamedStyle.HEADING4: "Heading 4",
        NamedStyle.INPUT: "Input",
        NamedStyle.OUTPUT: "Output",
        NamedStyle.CALCULATION: "Calculation",
        NamedStyle.CHECK_CELL: "CheckCell",
        NamedStyle.LINKED_CELL: "LinkedCell",
        NamedStyle.TOTAL: "Total",
        NamedStyle.GOOD: "Good",
        NamedStyle.BAD: "Bad",
        NamedStyle.NEUTRAL: "Neutral",
        NamedStyle.EXPLANATORY: "Explanatory Text",
    }
    for n in range(1, 7):
        base = NamedStyle[f"ACCENT{n}"]
        labels[base] = f"Accent{n}"
        for pct in (20, 40, 60):
            labels[NamedStyle[f"ACCENT{n}_{pct}"]] = f"{pct}% - Accent{n}"
    for level in range(1, 8):
        labels[NamedStyle[f"ROW_LEVEL{level}"]] = f"RowLevel_{level}"
        labels[NamedStyle[f"COL_LEVEL{level}"]] = f"ColLevel_{level}"
    return labels


_LABELS = _labels()


def named_style(name: Union[str, NamedStyle]) -> StyleOption:
    """Option that sets a custom (by name) or built-in named style."""

    def apply(info: StyleInfo) -> None:
        if isinstance(name, NamedStyle):
            info.named.builtin_id = name.builtin_id
            info.named.name = name.label
        elif isinstance(name, str):
            if not name:
                raise ValueError("you must provide a name for custom named style")
            info.named.builtin_id = None
            info.named.name = name
        else:
            raise TypeError(
                "unsupported format of named style (name of custom style or built-in type only)"
            )

    return apply