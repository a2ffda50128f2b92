"""Conditional formatting rules: data model, rule container and base rule."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, Optional, Protocol

from ..styles.info import Color, StyleInfo

__all__ = [
    "RuleError",
    "ConditionValueType",
    "IconSetType",
    "ConditionType",
    "ConditionOperator",
    "TimePeriod",
    "ConditionValue",
    "ColorScale",
    "DataBar",
    "IconSet",
    "ConditionalRule",
    "RuleInfo",
    "RuleOption",
    "from_rule",
    "BaseRule",
]


class RuleError(ValueError):
    """Raised when a conditional rule is not valid."""


class ConditionValueType(IntEnum):
    """Kind of a threshold value used by scales, data bars and icon sets."""

    NUMBER = 1
    PERCENT = 2
    HIGHEST = 3
    LOWEST = 4
    FORMULA = 5
    PERCENTILE = 6

    @property
    def label(self) -> str:
        """The label used for this value in a workbook."""
        return _VALUE_TYPE_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "ConditionValueType":
        """Return the member whose label is ``label``."""
        for member, text in _VALUE_TYPE_LABELS.items():
            if text == label:
                return member
        raise ValueError(f"unknown {cls.__name__} value: {label!r}")

    def is_allowed(self, *allowed: "ConditionValueType") -> bool:
        """True if this type is one of ``allowed``."""
        return self in allowed

    def __str__(self) -> str:
        return self.label


_VALUE_TYPE_LABELS = {
    ConditionValueType.NUMBER: "num",
    ConditionValueType.PERCENT: "percent",
    ConditionValueType.HIGHEST: "max",
    ConditionValueType.LOWEST: "min",
    ConditionValueType.FORMULA: "formula",
    ConditionValueType.PERCENTILE: "percentile",
}

_THREE_ICONS_MARK = 1
_FOUR_ICONS_MARK = 10
_FIVE_ICONS_MARK = 16


class IconSetType(IntEnum):
    """Icon set used by an icon set rule."""

    THREE_ARROWS = 2
    THREE_ARROWS_GRAY = 3
    THREE_FLAGS = 4
    THREE_TRAFFIC_LIGHTS1 = 5
    THREE_TRAFFIC_LIGHTS2 = 6
    THREE_SIGNS = 7
    THREE_SYMBOLS = 8
    THREE_SYMBOLS2 = 9
    FOUR_ARROWS = 11
    FOUR_ARROWS_GRAY = 12
    FOUR_RED_TO_BLACK = 13
    FOUR_RATING = 14
    FOUR_TRAFFIC_LIGHTS = 15
    FIVE_ARROWS = 17
    FIVE_ARROWS_GRAY = 18
    FIVE_RATING = 19
    FIVE_QUARTERS = 20

    @property
    def label(self) -> str:
        """The label used for this icon set in a workbook."""
        return _ICON_SET_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "IconSetType":
        """Return the member whose label is ``label``."""
        for member, text in _ICON_SET_LABELS.items():
            if text == label:
                return member
        raise ValueError(f"unknown {cls.__name__} value: {label!r}")

    @property
    def icon_count(self) -> int:
        """Number of icons in this set."""
        if _THREE_ICONS_MARK < self < _FOUR_ICONS_MARK:
            return 3
        if _FOUR_ICONS_MARK < self < _FIVE_ICONS_MARK:
            return 4
        return 5

    def __str__(self) -> str:
        return self.label


_ICON_SET_LABELS = {
    IconSetType.THREE_ARROWS: "3Arrows",
    IconSetType.THREE_ARROWS_GRAY: "3ArrowsGray",
    IconSetType.THREE_FLAGS: "3Flags",
    IconSetType.THREE_TRAFFIC_LIGHTS1: "3TrafficLights1",
    IconSetType.THREE_TRAFFIC_LIGHTS2: "3TrafficLights2",
    IconSetType.THREE_SIGNS: "3Signs",
    IconSetType.THREE_SYMBOLS: "3Symbols",
    IconSetType.THREE_SYMBOLS2: "3Symbols2",
    IconSetType.FOUR_ARROWS: "4Arrows",
    IconSetType.FOUR_ARROWS_GRAY: "4ArrowsGray",
    IconSetType.FOUR_RED_TO_BLACK: "4RedToBlack",
    IconSetType.FOUR_RATING: "4Rating",
    IconSetType.FOUR_TRAFFIC_LIGHTS: "4TrafficLights",
    IconSetType.FIVE_ARROWS: "5Arrows",
    IconSetType.FIVE_ARROWS_GRAY: "5ArrowsGray",
    IconSetType.FIVE_RATING: "5Rating",
    IconSetType.FIVE_QUARTERS: "5Quarters",
}


class _StrEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class ConditionType(_StrEnum):
    """Kind of a conditional formatting rule."""

    ABOVE_AVERAGE = "aboveAverage"
    BEGINS_WITH = "beginsWith"
    CELL_IS = "cellIs"
    COLOR_SCALE = "colorScale"
    CONTAINS_BLANKS = "containsBlanks"
    CONTAINS_ERRORS = "containsErrors"
    CONTAINS_TEXT = "containsText"
    DATA_BAR = "dataBar"
    DUPLICATE_VALUES = "duplicateValues"
    ENDS_WITH = "endsWith"
    EXPRESSION = "expression"
    ICON_SET = "iconSet"
    NOT_CONTAINS_BLANKS = "notContainsBlanks"
    NOT_CONTAINS_ERRORS = "notContainsErrors"
    NOT_CONTAINS_TEXT = "notContainsText"
    TIME_PERIOD = "timePeriod"
    TOP10 = "top10"
    UNIQUE_VALUES = "uniqueValues"


class ConditionOperator(_StrEnum):
    """Comparison operator of a rule."""

    LESS_THAN = "lessThan"
    LESS_THAN_OR_EQUAL = "lessThanOrEqual"
    EQUAL = "equal"
    NOT_EQUAL = "notEqual"
    GREATER_THAN_OR_EQUAL = "greaterThanOrEqual"
    GREATER_THAN = "greaterThan"
    BETWEEN = "between"
    NOT_BETWEEN = "notBetween"
    CONTAINS_TEXT = "containsText"
    NOT_CONTAINS = "notContains"
    BEGINS_WITH = "beginsWith"
    ENDS_WITH = "endsWith"


class TimePeriod(_StrEnum):
    """Relative date period of a time period rule."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"
    LAST_7_DAYS = "last7Days"
    THIS_MONTH = "thisMonth"
    LAST_MONTH = "lastMonth"
    NEXT_MONTH = "nextMonth"
    THIS_WEEK = "thisWeek"
    LAST_WEEK = "lastWeek"
    NEXT_WEEK = "nextWeek"


@dataclass
class ConditionValue:
    type: Optional[ConditionValueType] = None
    value: str = ""
    greater_than_equal: Optional[bool] = None


@dataclass
class ColorScale:
    values: list[ConditionValue] = field(default_factory=list)
    colors: list[Color] = field(default_factory=list)


@dataclass
class DataBar:
    values: list[ConditionValue] = field(default_factory=list)
    color: Optional[Color] = None
    min_length: int = 0
    max_length: int = 0
    show_value: Optional[bool] = None


@dataclass
class IconSet:
    type: Optional[IconSetType] = None
    values: list[ConditionValue] = field(default_factory=list)
    show_value: Optional[bool] = None
    reverse: bool = False


@dataclass
class ConditionalRule:
    """A single conditional formatting rule as stored in a worksheet."""

    type: Optional[ConditionType] = None
    operator: Optional[ConditionOperator] = None
    formula: list[str] = field(default_factory=list)
    style: Optional[int] = None
    priority: int = 0
    stop_if_true: bool = False
    above_average: Optional[bool] = None
    equal_average: bool = False
    std_dev: int = 0
    rank: int = 0
    bottom: bool = False
    percent: bool = False
    text: str = ""
    time_period: Optional[TimePeriod] = None
    color_scale: Optional[ColorScale] = None
    data_bar: Optional[DataBar] = None
    icon_set: Optional[IconSet] = None


class _Validator(Protocol):
    def validate(self, info: "RuleInfo") -> None: ...


RuleOption = Callable[["RuleInfo"], None]


class RuleInfo:
    """A conditional rule together with its style, built from options."""

    def __init__(self, *options: RuleOption) -> None:
        self.initialized = False
        self.rule = ConditionalRule()
        self.style: Optional[StyleInfo] = None
        self.validator: Optional[_Validator] = None
        self.set(*options)

    def set(self, *options: RuleOption) -> None:
        """Apply options to this rule."""
        for option in options:
            option(self)

    def validate(self) -> None:
        """Raise ``RuleError`` if the rule's kind finds it invalid."""
        if self.validator is not None:
            self.validator.validate(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleInfo):
            return NotImplemented
        return (
            self.initialized == other.initialized
            and self.rule == other.rule
            and self.style == other.style
            and self.validator is other.validator
        )

    def __repr__(self) -> str:
        return (
            f"RuleInfo(initialized={self.initialized!r}, rule={self.rule!r}, "
            f"style={self.style!r}, validator={self.validator!r})"
        )


def from_rule(info: RuleInfo) -> tuple[ConditionalRule, Optional[StyleInfo]]:
    """Return the underlying rule and its style."""
    return info.rule, info.style


class BaseRule:
    """Common behaviour of all rule kinds."""

    def _new_rule(self) -> ConditionalRule:
        return ConditionalRule()

    def _ensure(self, info: RuleInfo) -> None:
        if not info.initialized:
            info.initialized = True
            info.validator = self
            info.rule = self._new_rule()

    @staticmethod
    def _escape(value: str) -> str:
        return value.replace('"', '""')

    def stop_if_true(self, info: RuleInfo) -> None:
        """Option: stop evaluating lower-priority rules when this one matches."""
        info.rule.stop_if_true = True

    def validate(self, info: RuleInfo) -> None:
        """Accept any rule."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"