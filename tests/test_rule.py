import pytest

from xlsxfmt.conditional.rule import (
    BaseRule,
    ConditionalRule,
    ConditionType,
    ConditionValueType,
    IconSetType,
    RuleError,
    RuleInfo,
    from_rule,
)
from xlsxfmt.styles.info import StyleInfo


class _Rejecting(BaseRule):
    def validate(self, info):
        raise RuleError("rejected")


ICON_SET_LABELS = [
    "3Arrows",
    "3ArrowsGray",
    "3Flags",
    "3TrafficLights1",
    "3TrafficLights2",
    "3Signs",
    "3Symbols",
    "3Symbols2",
    "4Arrows",
    "4ArrowsGray",
    "4RedToBlack",
    "4Rating",
    "4TrafficLights",
    "5Arrows",
    "5ArrowsGray",
    "5Rating",
    "5Quarters",
]


def test_value_type_labels():
    assert ConditionValueType.from_label("num") is ConditionValueType.NUMBER
    assert ConditionValueType.from_label("max") is ConditionValueType.HIGHEST
    assert ConditionValueType.from_label("min") is ConditionValueType.LOWEST
    assert str(ConditionValueType.PERCENTILE) == "percentile"


@pytest.mark.parametrize("member", list(ConditionValueType))
def test_value_type_label_round_trip(member):
    assert ConditionValueType.from_label(member.label) is member


def test_value_type_unknown_label():
    with pytest.raises(ValueError):
        ConditionValueType.from_label("bogus")


def test_is_allowed():
    assert ConditionValueType.NUMBER.is_allowed(
        ConditionValueType.NUMBER, ConditionValueType.PERCENT
    )
    assert not ConditionValueType.LOWEST.is_allowed(ConditionValueType.HIGHEST)


def test_icon_set_labels():
    assert IconSetType.from_label("3Arrows") is IconSetType.THREE_ARROWS
    assert IconSetType.from_label("4RedToBlack") is IconSetType.FOUR_RED_TO_BLACK
    assert IconSetType.from_label("5Quarters") is IconSetType.FIVE_QUARTERS


@pytest.mark.parametrize("member", list(IconSetType))
def test_icon_set_label_round_trip(member):
    assert IconSetType.from_label(member.label) is member


@pytest.mark.parametrize("label", ICON_SET_LABELS)
def test_icon_count_matches_label_prefix(label):
    assert IconSetType.from_label(label).icon_count == int(label[0])


def test_rule_info_defaults():
    info = RuleInfo()
    assert info.initialized is False
    assert info.rule == ConditionalRule()
    assert info.style is None
    assert info.validator is None


def test_validate_without_validator_is_silent():
    info = RuleInfo()
    assert info.validate() is None
    assert info.validator is None


def test_set_applies_options_in_order():
    seen = []
    info = RuleInfo(lambda r: seen.append(1))
    info.set(lambda r: seen.append(2), lambda r: seen.append(3))
    assert seen == [1, 2, 3]


def test_ensure_initializes_once():
    base = BaseRule()
    info = RuleInfo()
    base._ensure(info)
    first = info.rule
    base._ensure(info)
    assert info.initialized is True
    assert info.validator is base
    assert info.rule is first


def test_validate_delegates():
    info = RuleInfo(_Rejecting()._ensure)
    with pytest.raises(RuleError, match="rejected"):
        info.validate()


def test_stop_if_true():
    info = RuleInfo(BaseRule().stop_if_true)
    assert info.rule.stop_if_true is True


def test_from_rule_returns_same_objects():
    style = StyleInfo()
    info = RuleInfo()
    info.style = style
    info.rule.type = ConditionType.CELL_IS
    rule, got_style = from_rule(info)
    assert rule is info.rule
    assert got_style is style


def test_escape_doubles_quotes():
    assert BaseRule._escape('a"b') == 'a""b'


def test_rule_info_equality():
    base = BaseRule()
    a = RuleInfo(base._ensure)
    b = RuleInfo(base._ensure)
    assert a == b
    b.rule.rank = 5
    assert not a == b