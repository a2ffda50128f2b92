"""Rules driven by a value: top/bottom ranks, formulas, text and cell comparisons."""

from __future__ import annotations

import math
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from ..styles.info import StyleInfo
from .rule import (
    BaseRule,
    ConditionalRule,
    ConditionOperator,
    ConditionType,
    RuleError,
    RuleInfo,
    RuleOption,
)

__all__ = [
    "TopRule",
    "BottomRule",
    "FormulaRule",
    "TextRule",
    "ValueRule",
    "top",
    "bottom",
    "formula",
    "text",
    "value",
]

_ISO8601 = "%Y-%m-%dT%H:%M:%S"


class _RankRule(BaseRule):
    """Shared behaviour of the top and bottom rank rules."""

    _name = ""
    _bottom = False

    def _new_rule(self) -> ConditionalRule:
        return ConditionalRule(type=ConditionType.TOP10, rank=10, bottom=self._bottom)

    def _default(self, info: RuleInfo) -> None:
        self._ensure(info)

    def _value(self, rank: int, settings: tuple) -> RuleOption:
        def apply(info: RuleInfo) -> None:
            self._ensure(info)
            info.rule.rank = rank
            for setting in settings:
                if isinstance(setting, str):
                    if setting == "%":
                        info.rule.percent = True
                elif isinstance(setting, StyleInfo):
                    info.style = setting

        return apply

    def _validate(self, info: RuleInfo) -> None:
        rank = info.rule.rank
        if info.rule.percent:
            if rank < 1 or rank > 100:
                raise RuleError(f"{self._name}: value({rank}) should be between (1 - 100)")
        elif rank < 1 or rank > 1000:
            raise RuleError(f"{self._name}: value({rank}) should be between 1 and 1000")


class TopRule(_RankRule):
    """Rule matching the highest ranked values."""

    _name = "top"
    _bottom = False

    def default(self, info: RuleInfo) -> None:
        """Option: use the default rank of 10 items."""
        self._default(info)

    def value(self, rank: int, *settings: Any) -> RuleOption:
        """Option: set the rank; ``"%"`` makes it a percentage, a style is applied on match."""
        return self._value(rank, settings)

    def validate(self, info: RuleInfo) -> None:
        """Raise ``RuleError`` if the rank is out of range."""
        self._validate(info)


class BottomRule(_RankRule):
    """Rule matching the lowest ranked values."""

    _name = "bottom"
    _bottom = True

    def default(self, info: RuleInfo) -> None:
        """Option: use the default rank of 10 items."""
        self._default(info)

    def value(self, rank: int, *settings: Any) -> RuleOption:
        """Option: set the rank; ``"%"`` makes it a percentage, a style is applied on match."""
        return self._value(rank, settings)

    def validate(self, info: RuleInfo) -> None:
        """Raise ``RuleError`` if the rank is out of range."""
        self._validate(info)


class FormulaRule(BaseRule):
    """Rule matching cells for which an expression is true."""

    def _new_rule(self) -> ConditionalRule:
        return ConditionalRule(type=ConditionType.EXPRESSION)

    def expression(self, formula: str, *settings: Any) -> RuleOption:
        """Option: set the expression; a style among ``settings`` is applied on match."""

        def apply(info: RuleInfo) -> None:
            self._ensure(info)
            info.rule.formula = [self._escape(formula)]
            for setting in settings:
                if isinstance(setting, StyleInfo):
                    info.style = setting

        return apply

    def validate(self, info: RuleInfo) -> None:
        """Raise ``RuleError`` if there is no expression."""
        if not info.rule.formula or not info.rule.formula[0]:
            raise RuleError("formula: no expression to use as rule")


class TextRule(BaseRule):
    """Rule matching cells by their text."""

    def _option(
        self,
        value: str,
        template: str,
        rule_type: ConditionType,
        operator: ConditionOperator,
        settings: tuple,
    ) -> RuleOption:
        def apply(info: RuleInfo) -> None:
            self._ensure(info)
            info.rule.type = rule_type
            info.rule.operator = operator
            info.rule.text = value
            expr = template.replace(":length:", str(len(value.encode("utf-8"))))
            expr = expr.replace("%s", self._escape(value), 1)
            info.rule.formula = [expr]
            for setting in settings:
                if isinstance(setting, StyleInfo):
                    info.style = setting

        return apply

    def contains(self, text: str, *settings: Any) -> RuleOption:
        return self._option(
            text,
            'NOT(ISERROR(SEARCH("%s",:cell:)))',
            ConditionType.CONTAINS_TEXT,
            ConditionOperator.CONTAINS_TEXT,
            settings,
        )

    def not_contains(self, text: str, *settings: Any) -> RuleOption:
        return self._option(
            text,
            'ISERROR(SEARCH("%s",:cell:))',
            ConditionType.NOT_CONTAINS_TEXT,
            ConditionOperator.NOT_CONTAINS,
            settings,
        )

    def begins_with(self, text: str, *settings: Any) -> RuleOption:
        return self._option(
            text,
            'LEFT(:cell:,:length:)="%s"',
            ConditionType.BEGINS_WITH,
            ConditionOperator.BEGINS_WITH,
            settings,
        )

    def ends_with(self, text: str, *settings: Any) -> RuleOption:
        return self._option(
            text,
            'RIGHT(:cell:,:length:)="%s"',
            ConditionType.ENDS_WITH,
            ConditionOperator.ENDS_WITH,
            settings,
        )

    def validate(self, info: RuleInfo) -> None:
        """Raise ``RuleError`` if there is no text to look for."""
        if not info.rule.text:
            raise RuleError("text: no text to look for")


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    rendered = format(Decimal(repr(number)), "f")
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return rendered


def _to_text(item: Any) -> str:
    if isinstance(item, bool):
        return "1" if item else "0"
    if isinstance(item, int):
        return str(item)
    if isinstance(item, float):
        return _format_float(item)
    if isinstance(item, (bytes, bytearray)):
        return bytes(item).decode("utf-8")
    if isinstance(item, (datetime, date)):
        return item.strftime(_ISO8601)
    if isinstance(item, str):
        return item
    return str(item)


class ValueRule(BaseRule):
    """Rule comparing cell values with given values or formulas."""

    def _new_rule(self) -> ConditionalRule:
        return ConditionalRule(type=ConditionType.CELL_IS)

    def _option(
        self,
        values: tuple,
        operator: ConditionOperator,
        style: Optional[StyleInfo],
    ) -> RuleOption:
        def apply(info: RuleInfo) -> None:
            self._ensure(info)
            info.rule.operator = operator
            for item in values:
                rendered = _to_text(item)
                if rendered.startswith("="):
                    rendered = rendered[1:]
                if rendered:
                    info.rule.formula.append(rendered)
            info.style = style

        return apply

    def between(self, low: Any, high: Any, style: Optional[StyleInfo]) -> RuleOption:
        return self._option((low, high), ConditionOperator.BETWEEN, style)

    def not_between(self, low: Any, high: Any, style: Optional[StyleInfo]) -> RuleOption:
        return self._option((low, high), ConditionOperator.NOT_BETWEEN, style)

    def equal(self, value: Any, style: Optional[StyleInfo]) -> RuleOption:
        return self._option((value,), ConditionOperator.EQUAL, style)

    def not_equal(self, value: Any, style: Optional[StyleInfo]) -> RuleOption:
        return self._option((value,), ConditionOperator.NOT_EQUAL, style)

    def greater(self, value: Any, style: Optional[StyleInfo]) -> RuleOption:
        return self._option((value,), ConditionOperator.GREATER_THAN, style)

    def less(self, value: Any, style: Optional[StyleInfo]) -> RuleOption:
        return self._option((value,), ConditionOperator.LESS_THAN, style)

    def greater_or_equal(self, value: Any, style: Optional[StyleInfo]) -> RuleOption:
        return self._option((value,), ConditionOperator.GREATER_THAN_OR_EQUAL, style)

    def less_or_equal(self, value: Any, style: Optional[StyleInfo]) -> RuleOption:
        return self._option((value,), ConditionOperator.LESS_THAN_OR_EQUAL, style)

    def validate(self, info: RuleInfo) -> None:
        """Raise ``RuleError`` if there is no value to compare with."""
        if not info.rule.formula or not info.rule.formula[0]:
            raise RuleError("value: no criteria or value for rule")


top = TopRule()
bottom = BottomRule()
formula = FormulaRule()
text = TextRule()
value = ValueRule()