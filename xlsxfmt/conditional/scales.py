"""Rules that grade a range: colour scales, data bars and icon sets."""

from __future__ import annotations

from typing import Any

from ..styles.info import new_color
from .rule import (
    BaseRule,
    ColorScale,
    ConditionalRule,
    ConditionType,
    ConditionValue,
    ConditionValueType,
    DataBar,
    IconSet,
    IconSetType,
    RuleError,
    RuleInfo,
    RuleOption,
)

__all__ = [
    "ColorScale2Rule",
    "ColorScale3Rule",
    "DataBarRule",
    "IconSetRule",
    "color_scale2",
    "color_scale3",
    "data_bar",
    "icon_set",
]

_MIN_ALLOWED = (
    ConditionValueType.LOWEST,
    ConditionValueType.NUMBER,
    ConditionValueType.PERCENT,
    ConditionValueType.FORMULA,
    ConditionValueType.PERCENTILE,
)

_MAX_ALLOWED = (
    ConditionValueType.NUMBER,
    ConditionValueType.PERCENT,
    ConditionValueType.FORMULA,
    ConditionValueType.PERCENTILE,
    ConditionValueType.HIGHEST,
)

_ICON_ALLOWED = (
    ConditionValueType.NUMBER,
    ConditionValueType.PERCENT,
    ConditionValueType.FORMULA,
    ConditionValueType.PERCENTILE,
)


def _check_type(name: str, value: ConditionValue, allowed: tuple, what: str) -> None:
    if value.type not in allowed:
        raise RuleError(f"{name}: Not allowed type '{value.type}' for {what}")


class _ColorScaleRule(BaseRule):
    """Shared behaviour of two- and three-colour scales."""

    _name = ""
    _defaults: tuple = ()

    def _new_rule(self) -> ConditionalRule:
        values = []
        colors = []
        for value_type, value, rgb in self._defaults:
            values.append(ConditionValue(type=value_type, value=value))
            colors.append(new_color(rgb))
        return ConditionalRule(
            type=ConditionType.COLOR_SCALE,
            color_scale=ColorScale(values=values, colors=colors),
        )

    def _set_value(self, position: int, value: str, settings: tuple) -> RuleOption:
        def apply(info: RuleInfo) -> None:
            self._ensure(info)
            scale = info.rule.color_scale
            scale.values[position].value = value
            for setting in settings:
                if isinstance(setting, ConditionValueType):
                    scale.values[position].type = setting
                elif isinstance(setting, str):
                    scale.colors[position] = new_color(setting)

        return apply

    def _validate_ends(self, info: RuleInfo) -> None:
        values = info.rule.color_scale.values
        _check_type(self._name, values[0], _MIN_ALLOWED, "min value")
        _check_type(self._name, values[-1], _MAX_ALLOWED, "max value")


class ColorScale2Rule(_ColorScaleRule):
    """Two-colour scale."""

    _name = "colorScale2"
    _defaults = (
        (ConditionValueType.LOWEST, "", "#FF7128"),
        (ConditionValueType.HIGHEST, "", "#FFEF9C"),
    )

    def default(self, info: RuleInfo) -> None:
        """Option: use the default scale."""
        self._ensure(info)

    def min(self, value: str, *settings: Any) -> RuleOption:
        """Option: set the lowest point; a string setting is its colour."""
        return self._set_value(0, value, settings)

    def max(self, value: str, *settings: Any) -> RuleOption:
        """Option: set the highest point; a string setting is its colour."""
        return self._set_value(1, value, settings)

    def validate(self, info: RuleInfo) -> None:
        """Raise ``RuleError`` if the end points use types not allowed there."""
        self._validate_ends(info)


class ColorScale3Rule(_ColorScaleRule):
    """Three-colour scale."""

    _name = "colorScale3"
    _defaults = (
        (ConditionValueType.LOWEST, "", "#F8696B"),
        (ConditionValueType.PERCENTILE, "50", "#FFEB84"),
        (ConditionValueType.HIGHEST, "", "#63BE7B"),
    )

    def default(self, info: RuleInfo) -> None:
        """Option: use the default scale."""
        self._ensure(info)

    def min(self, value: str, *settings: Any) -> RuleOption:
        """Option: set the lowest point; a string setting is its colour."""
        return self._set_value(0, value, settings)

    def mid(self, value: str, *settings: Any) -> RuleOption:
        """Option: set the middle point; a string setting is its colour."""
        return self._set_value(1, value, settings)

    def max(self, value: str, *settings: Any) -> RuleOption:
        """Option: set the highest point; a string setting is its colour."""
        return self._set_value(2, value, settings)

    def validate(self, info: RuleInfo) -> None:
        """Raise ``RuleError`` if the end points use types not allowed there."""
        self._validate_ends(info)


class DataBarRule(BaseRule):
    """Data bar drawn inside each cell."""

    def _new_rule(self) -> ConditionalRule:
        return ConditionalRule(
            type=ConditionType.DATA_BAR,
            data_bar=DataBar(
                values=[
                    ConditionValue(type=ConditionValueType.LOWEST),
                    ConditionValue(type=ConditionValueType.HIGHEST),
                ],
                color=new_color("#638EC6"),
                min_length=10,
                max_length=90,
            ),
        )

    def default(self, info: RuleInfo) -> None:
        """Option: use the default data bar."""
        self._ensure(info)

    def _set_value(self, position: int, value: str, settings: tuple) -> RuleOption:
        def apply(info: RuleInfo) -> None:
            self._ensure(info)
            point = info.rule.data_bar.values[position]
            point.value = value
            for setting in settings:
                if isinstance(setting, ConditionValueType):
                    point.type = setting

        return apply

    def min(self, value: str, *settings: Any) -> RuleOption:
        """Option: set the shortest bar's value."""
        return self._set_value(0, value, settings)

    def max(self, value: str, *settings: Any) -> RuleOption:
        """Option: set the longest bar's value."""
        return self._set_value(1, value, settings)

    def color(self, rgb: str) -> RuleOption:
        """Option: set the bar colour."""

        def apply(info: RuleInfo) -> None:
            self._ensure(info)
            info.rule.data_bar.color = new_color(rgb)

        return apply

    def bar_only(self, info: RuleInfo) -> None:
        """Option: hide the cell value and show the bar only."""
        self._ensure(info)
        info.rule.data_bar.show_value = False

    def validate(self, info: RuleInfo) -> None:
        """Raise ``RuleError`` if the end points use types not allowed there."""
        values = info.rule.data_bar.values
        _check_type("dataBar", values[0], _MIN_ALLOWED, "min value")
        _check_type("dataBar", values[1], _MAX_ALLOWED, "max value")


class IconSetRule(BaseRule):
    """Icon set shown in each cell."""

    def _new_rule(self) -> ConditionalRule:
        rule = ConditionalRule(
            type=ConditionType.ICON_SET,
            icon_set=IconSet(type=IconSetType.THREE_TRAFFIC_LIGHTS1),
        )
        self._reset_values(rule)
        return rule

    @staticmethod
    def _reset_values(rule: ConditionalRule) -> None:
        total = rule.icon_set.type.icon_count
        rule.icon_set.values = [
            ConditionValue(type=ConditionValueType.PERCENT, value=str(i * 100 // total))
            for i in range(total)
        ]

    def default(self, info: RuleInfo) -> None:
        """Option: use the default icon set."""
        self._ensure(info)

    def type(self, icon_set_type: IconSetType) -> RuleOption:
        """Option: choose the icon set; thresholds are reset to even percentages."""

        def apply(info: RuleInfo) -> None:
            self._ensure(info)
            info.rule.icon_set.type = icon_set_type
            self._reset_values(info.rule)

        return apply

    def reverse_icons(self, info: RuleInfo) -> None:
        """Option: reverse the order of icons."""
        self._ensure(info)
        info.rule.icon_set.reverse = True

    def icons_only(self, info: RuleInfo) -> None:
        """Option: hide the cell value and show the icon only."""
        self._ensure(info)
        info.rule.icon_set.show_value = False

    def value(self, index: int, value: str, *settings: Any) -> RuleOption:
        """Option: set a threshold counted from the highest; ``">"`` makes it strict."""

        def apply(info: RuleInfo) -> None:
            self._ensure(info)
            values = info.rule.icon_set.values
            total = len(values) - 1
            if index < 0 or index >= total:
                return
            point = values[total - index]
            for setting in settings:
                if isinstance(setting, ConditionValueType):
                    point.type = setting
                elif isinstance(setting, str) and setting == ">":
                    point.greater_than_equal = False
            point.value = value

        return apply

    def validate(self, info: RuleInfo) -> None:
        """Raise ``RuleError`` if a threshold uses a type not allowed for icon sets."""
        for position, point in enumerate(info.rule.icon_set.values):
            if point.type not in _ICON_ALLOWED:
                raise RuleError(
                    f"iconSet: Not allowed type '{point.type}' for value at index {position}"
                )


color_scale2 = ColorScale2Rule()
color_scale3 = ColorScale3Rule()
data_bar = DataBarRule()
icon_set = IconSetRule()