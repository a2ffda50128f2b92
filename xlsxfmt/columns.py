"""Column settings of a worksheet, addressed by 0-based index."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Optional

__all__ = ["Col", "Columns"]


@dataclass
class Col:
    """Settings for a run of columns; ``min`` and ``max`` are 1-based and inclusive."""

    min: int = 0
    max: int = 0
    width: float = 0.0
    custom_width: bool = False
    style: int = 0
    outline_level: int = 0
    hidden: bool = False
    collapsed: bool = False
    phonetic: bool = False

    @property
    def is_grouped(self) -> bool:
        """True if these settings cover more than one column."""
        return self.min != self.max

    def covers(self, number: int) -> bool:
        """True if the 1-based column ``number`` falls within this run."""
        return self.min <= number <= self.max


@dataclass
class Columns:
    """Column settings of a sheet."""

    items: list[Col] = field(default_factory=list)

    def resolve(self, index: int) -> Col:
        """Return settings for the single column at 0-based ``index``, creating them if needed.

        A column inside a grouped run gets its own entry copied from that run.
        """
        number = index + 1

        existing: Optional[Col] = next(
            (c for c in self.items if not c.is_grouped and c.min == number), None
        )
        if existing is not None:
            return existing

        group = next((c for c in self.items if c.covers(number)), None)
        if group is not None:
            data = dataclasses.replace(group, min=number, max=number)
        else:
            data = Col(min=number, max=number)

        self.items.append(data)
        return data

    def delete(self, index: int) -> None:
        """Remove the single column at 0-based ``index``; grouped runs covering it shrink by one."""
        number = index + 1
        kept = []
        for c in self.items:
            if not c.is_grouped and c.min == number:
                continue
            if c.covers(number):
                c.max -= 1
            kept.append(c)
        self.items = kept