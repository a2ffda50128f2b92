"""Conditional formatting: a set of rules applied to a set of ranges."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from ..styles.info import StyleInfo
from .rule import ConditionalRule, RuleError, RuleInfo, RuleOption, from_rule

__all__ = [
    "ConditionalFormatting",
    "ConditionalFormat",
    "FormatOption",
    "pivot",
    "refs",
    "add_rule",
    "unpack",
]


@dataclass
class ConditionalFormatting:
    """Conditional formatting as stored in a worksheet."""

    bounds: list[str] = field(default_factory=list)
    rules: list[ConditionalRule] = field(default_factory=list)
    pivot: bool = False


FormatOption = Callable[["ConditionalFormat"], None]


class ConditionalFormat:
    """Conditional formatting being built from options."""

    def __init__(self, *options: FormatOption) -> None:
        self.formatting = ConditionalFormatting()
        self.rules: list[RuleInfo] = []
        self.set(*options)

    def set(self, *options: FormatOption) -> None:
        """Apply options to this conditional formatting."""
        for option in options:
            option(self)

    def validate(self) -> None:
        """Raise ``RuleError`` if the formatting or any of its rules is invalid."""
        if not self.formatting.bounds:
            raise RuleError("no any refs for conditional formatting")
        if not self.rules:
            raise RuleError("no any rules for conditional formatting")
        for position, info in enumerate(self.rules):
            rule, _ = from_rule(info)
            if rule.type is None:
                raise RuleError(f"conditional rule#{position}: no type")
            if rule.priority < 1:
                raise RuleError(
                    f"conditional rule#{position}: priority({rule.priority}) can't be lower than 1"
                )
            info.validate()


def pivot(info: ConditionalFormat) -> None:
    """Option: mark the formatting as belonging to a pivot table."""
    info.formatting.pivot = True


def refs(*references: str) -> FormatOption:
    """Option: add ranges the formatting applies to."""

    def apply(info: ConditionalFormat) -> None:
        info.formatting.bounds.extend(str(ref) for ref in references)

    return apply


def add_rule(*options: RuleOption) -> FormatOption:
    """Option: add a rule built from ``options``, with the next priority."""

    def apply(info: ConditionalFormat) -> None:
        rule_info = RuleInfo(*options)
        rule, _ = from_rule(rule_info)
        rule.priority = len(info.rules) + 1
        info.rules.append(rule_info)

    return apply


def unpack(
    info: ConditionalFormat,
) -> tuple[Optional[ConditionalFormatting], Optional[list[Optional[StyleInfo]]]]:
    """Return the formatting with its rules filled in and the style of each rule."""
    if not info.rules:
        return None, None
    pairs = [from_rule(rule_info) for rule_info in info.rules]
    info.formatting.rules = [rule for rule, _ in pairs]
    return info.formatting, [style for _, style in pairs]