import pytest

from xlsxfmt.conditional.rule import ConditionType, RuleInfo, TimePeriod, from_rule
from xlsxfmt.conditional.simple_rules import (
    average,
    blanks,
    duplicate,
    errors,
    no_blanks,
    no_errors,
    time_period,
    unique,
)
from xlsxfmt.styles.info import StyleInfo
from xlsxfmt.styles.options import font


@pytest.fixture
def style():
    return StyleInfo(font.bold)


def test_average_above(style):
    info = RuleInfo(average.above(style))
    rule, got = from_rule(info)
    assert rule.type is ConditionType.ABOVE_AVERAGE
    assert rule.above_average is None
    assert rule.equal_average is False
    assert got is style
    assert info.validator is average


def test_average_equal_or_above(style):
    rule, _ = from_rule(RuleInfo(average.equal_or_above(style)))
    assert rule.equal_average is True
    assert rule.above_average is None


def test_average_below(style):
    rule, _ = from_rule(RuleInfo(average.below(style)))
    assert rule.above_average is False
    assert rule.equal_average is False


def test_average_equal_or_below(style):
    rule, _ = from_rule(RuleInfo(average.equal_or_below(style)))
    assert rule.above_average is False
    assert rule.equal_average is True


def test_average_std_dev(style):
    above, _ = from_rule(RuleInfo(average.std_dev_above(2, style)))
    below, _ = from_rule(RuleInfo(average.std_dev_below(3, style)))
    assert above.std_dev == 2
    assert above.above_average is None
    assert below.std_dev == 3
    assert below.above_average is False


def test_options_accumulate_on_one_rule(style):
    info = RuleInfo(average.below(style), average.stop_if_true)
    assert info.rule.above_average is False
    assert info.rule.stop_if_true is True


@pytest.mark.parametrize(
    "kind, rule_type, formula",
    [
        (blanks, ConditionType.CONTAINS_BLANKS, ["LEN(TRIM(:cell:))=0"]),
        (no_blanks, ConditionType.NOT_CONTAINS_BLANKS, ["LEN(TRIM(:cell:))>0"]),
        (errors, ConditionType.CONTAINS_ERRORS, ["ISERROR(:cell:)"]),
        (no_errors, ConditionType.NOT_CONTAINS_ERRORS, ["NOT(ISERROR(:cell:))"]),
        (duplicate, ConditionType.DUPLICATE_VALUES, []),
        (unique, ConditionType.UNIQUE_VALUES, []),
    ],
)
def test_styled_rules(kind, rule_type, formula, style):
    info = RuleInfo(kind.styles(style))
    assert info.rule.type is rule_type
    assert info.rule.formula == formula
    assert info.style is style
    assert info.validator is kind
    assert info.validate() is None and info.initialized is True


def test_styled_rules_do_not_share_formula_lists(style):
    a = RuleInfo(blanks.styles(style))
    b = RuleInfo(blanks.styles(style))
    a.rule.formula.append("X")
    assert b.rule.formula == ["LEN(TRIM(:cell:))=0"]


def test_time_period_today(style):
    info = RuleInfo(time_period.today(style))
    assert info.rule.type is ConditionType.TIME_PERIOD
    assert info.rule.time_period is TimePeriod.TODAY
    assert info.rule.formula == ["FLOOR(:cell:,1)=TODAY()"]
    assert info.style is style


@pytest.mark.parametrize(
    "method, period",
    [
        ("yesterday", TimePeriod.YESTERDAY),
        ("tomorrow", TimePeriod.TOMORROW),
        ("last_7_days", TimePeriod.LAST_7_DAYS),
        ("this_week", TimePeriod.THIS_WEEK),
        ("last_week", TimePeriod.LAST_WEEK),
        ("next_week", TimePeriod.NEXT_WEEK),
        ("this_month", TimePeriod.THIS_MONTH),
        ("last_month", TimePeriod.LAST_MONTH),
        ("next_month", TimePeriod.NEXT_MONTH),
    ],
)
def test_time_periods(method, period, style):
    info = RuleInfo(getattr(time_period, method)(style))
    assert info.rule.time_period is period
    assert len(info.rule.formula) == 1
    assert ":cell:" in info.rule.formula[0]


def test_time_period_last_override(style):
    info = RuleInfo(time_period.today(style), time_period.tomorrow(None))
    assert info.rule.time_period is TimePeriod.TOMORROW
    assert info.rule.formula == ["FLOOR(:cell:,1)=TODAY()+1"]
    assert info.style is None