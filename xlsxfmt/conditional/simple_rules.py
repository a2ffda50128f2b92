"""Rules that need little configuration: averages, blanks, errors, duplicates and dates."""

from __future__ import annotations

from typing import Optional

from ..styles.info import StyleInfo
from .rule import (
    BaseRule,
    ConditionalRule,
    ConditionType,
    RuleInfo,
    RuleOption,
    TimePeriod,
)

__all__ = [
    "AverageRule",
    "BlanksRule",
    "DuplicateRule",
    "ErrorsRule",
    "NoBlanksRule",
    "NoErrorsRule",
    "UniqueRule",
    "TimePeriodRule",
    "average",
    "blanks",
    "duplicate",
    "errors",
    "no_blanks",
    "no_errors",
    "unique",
    "time_period",
]


class AverageRule(BaseRule):
    """Rule comparing cells with the average of the range."""

    def _new_rule(self) -> ConditionalRule:
        return ConditionalRule(type=ConditionType.ABOVE_AVERAGE)

    def _option(
        self,
        style: Optional[StyleInfo],
        *,
        below: bool = False,
        equal: bool = False,
        std_dev: Optional[int] = None,
    ) -> RuleOption:
        def apply(info: RuleInfo) -> None:
            self._ensure(info)
            if below:
                info.rule.above_average = False
            if equal:
                info.rule.equal_average = True
            if std_dev is not None:
                info.rule.std_dev = std_dev
            info.style = style

        return apply

    def above(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(style)

    def equal_or_above(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(style, equal=True)

    def below(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(style, below=True)

    def equal_or_below(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(style, below=True, equal=True)

    def std_dev_above(self, n: int, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(style, std_dev=n)

    def std_dev_below(self, n: int, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(style, below=True, std_dev=n)


class _StyledRule(BaseRule):
    """A rule of fixed type and formula that only takes a style."""

    _type: ConditionType
    _formula: Optional[str] = None

    def _new_rule(self) -> ConditionalRule:
        formula = [self._formula] if self._formula is not None else []
        return ConditionalRule(type=self._type, formula=formula)

    def _styled(self, style: Optional[StyleInfo]) -> RuleOption:
        def apply(info: RuleInfo) -> None:
            self._ensure(info)
            info.style = style

        return apply


class BlanksRule(_StyledRule):
    """Rule matching blank cells."""

    _type = ConditionType.CONTAINS_BLANKS
    _formula = "LEN(TRIM(:cell:))=0"

    def styles(self, style: Optional[StyleInfo]) -> RuleOption:
        """Option: style applied to matching cells."""
        return self._styled(style)


class NoBlanksRule(_StyledRule):
    """Rule matching non-blank cells."""

    _type = ConditionType.NOT_CONTAINS_BLANKS
    _formula = "LEN(TRIM(:cell:))>0"

    def styles(self, style: Optional[StyleInfo]) -> RuleOption:
        """Option: style applied to matching cells."""
        return self._styled(style)


class ErrorsRule(_StyledRule):
    """Rule matching cells with errors."""

    _type = ConditionType.CONTAINS_ERRORS
    _formula = "ISERROR(:cell:)"

    def styles(self, style: Optional[StyleInfo]) -> RuleOption:
        """Option: style applied to matching cells."""
        return self._styled(style)


class NoErrorsRule(_StyledRule):
    """Rule matching cells without errors."""

    _type = ConditionType.NOT_CONTAINS_ERRORS
    _formula = "NOT(ISERROR(:cell:))"

    def styles(self, style: Optional[StyleInfo]) -> RuleOption:
        """Option: style applied to matching cells."""
        return self._styled(style)


class DuplicateRule(_StyledRule):
    """Rule matching duplicated values."""

    _type = ConditionType.DUPLICATE_VALUES

    def styles(self, style: Optional[StyleInfo]) -> RuleOption:
        """Option: style applied to matching cells."""
        return self._styled(style)


class UniqueRule(_StyledRule):
    """Rule matching unique values."""

    _type = ConditionType.UNIQUE_VALUES

    def styles(self, style: Optional[StyleInfo]) -> RuleOption:
        """Option: style applied to matching cells."""
        return self._styled(style)


class TimePeriodRule(BaseRule):
    """Rule matching dates in a period relative to today."""

    def _new_rule(self) -> ConditionalRule:
        return ConditionalRule(type=ConditionType.TIME_PERIOD)

    def _option(
        self, style: Optional[StyleInfo], formula: str, period: TimePeriod
    ) -> RuleOption:
        def apply(info: RuleInfo) -> None:
            self._ensure(info)
            info.rule.time_period = period
            info.rule.formula = [formula]
            info.style = style

        return apply

    def today(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(style, "FLOOR(:cell:,1)=TODAY()", TimePeriod.TODAY)

    def yesterday(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(style, "FLOOR(:cell:,1)=TODAY()-1", TimePeriod.YESTERDAY)

    def tomorrow(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(style, "FLOOR(:cell:,1)=TODAY()+1", TimePeriod.TOMORROW)

    def last_7_days(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(
            style,
            "AND(TODAY()-FLOOR(:cell:,1)<=6,FLOOR(:cell:,1)<=TODAY())",
            TimePeriod.LAST_7_DAYS,
        )

    def this_week(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(
            style,
            "AND(TODAY()-ROUNDDOWN(:cell:,0)<=WEEKDAY(TODAY())-1,"
            "ROUNDDOWN(:cell:,0)-TODAY()<=7-WEEKDAY(TODAY()))'",
            TimePeriod.THIS_WEEK,
        )

    def last_week(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(
            style,
            "AND(TODAY()-ROUNDDOWN(:cell:,0)>=(WEEKDAY(TODAY())),"
            "TODAY()-ROUNDDOWN(:cell:,0)<(WEEKDAY(TODAY())+7))'",
            TimePeriod.LAST_WEEK,
        )

    def next_week(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(
            style,
            "AND(ROUNDDOWN(:cell:,0)-TODAY()>(7-WEEKDAY(TODAY())),"
            "ROUNDDOWN(:cell:,0)-TODAY()<(15-WEEKDAY(TODAY())))'",
            TimePeriod.NEXT_WEEK,
        )

    def this_month(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(
            style,
            "AND(MONTH(:cell:)=MONTH(TODAY()),YEAR(:cell:)=YEAR(TODAY()))'",
            TimePeriod.THIS_MONTH,
        )

    def last_month(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(
            style,
            "AND(MONTH(:cell:)=MONTH(TODAY())-1,OR(YEAR(:cell:)=YEAR(TODAY()),"
            "AND(MONTH(:cell:)=1,YEAR(A1)=YEAR(TODAY())-1)))'",
            TimePeriod.LAST_MONTH,
        )

    def next_month(self, style: Optional[StyleInfo]) -> RuleOption:
        return self._option(
            style,
            "AND(MONTH(:cell:)=MONTH(TODAY())+1,OR(YEAR(:cell:)=YEAR(TODAY()),"
            "AND(MONTH(:cell:)=12,YEAR(:cell:)=YEAR(TODAY())+1)))'",
            TimePeriod.NEXT_MONTH,
        )


average = AverageRule()
blanks = BlanksRule()
duplicate = DuplicateRule()
errors = ErrorsRule()
no_blanks = NoBlanksRule()
no_errors = NoErrorsRule()
unique = UniqueRule()
time_period = TimePeriodRule()