import pytest

from xlsxfmt.styles.enums import (
    BorderStyle,
    FontCharset,
    FontFamily,
    FontScheme,
    GradientType,
    HAlign,
    PatternType,
    UnderlineType,
    VAlign,
)


def test_halign_labels():
    labels = [
        "general",
        "left",
        "center",
        "right",
        "fill",
        "justify",
        "centerContinuous",
        "distributed",
    ]
    assert [HAlign.from_label(label) for label in labels] == list(HAlign)


def test_valign_labels():
    labels = ["top", "center", "bottom", "justify", "distributed"]
    assert [VAlign.from_label(label) for label in labels] == list(VAlign)


def test_border_style_labels():
    assert BorderStyle.from_label("mediumDashDotDot") is BorderStyle.MEDIUM_DASH_DOT_DOT
    assert BorderStyle.from_label("slantDashDot") is BorderStyle.SLANT_DASH_DOT
    assert BorderStyle.from_label("dashDot") is BorderStyle.DASH_DOT


def test_pattern_labels():
    assert PatternType.from_label("gray0625") is PatternType.GRAY0625
    assert PatternType.from_label("gray125") is PatternType.GRAY125
    assert PatternType.from_label("lightTrellis") is PatternType.LIGHT_TRELLIS
    assert str(PatternType.DARK_DOWN) == "darkDown"


def test_gradient_labels():
    assert GradientType.from_label("linear") is GradientType.LINEAR
    assert GradientType.from_label("path") is GradientType.PATH


def test_label_round_trip():
    assert [HAlign.from_label(m.label) for m in HAlign] == list(HAlign)
    assert [VAlign.from_label(m.label) for m in VAlign] == list(VAlign)
    assert [BorderStyle.from_label(m.label) for m in BorderStyle] == list(BorderStyle)
    assert [GradientType.from_label(m.label) for m in GradientType] == list(GradientType)
    assert [PatternType.from_label(m.label) for m in PatternType] == list(PatternType)


def test_zero_is_reserved_for_unset():
    with pytest.raises(ValueError):
        HAlign(0)
    with pytest.raises(ValueError):
        VAlign(0)
    with pytest.raises(ValueError):
        BorderStyle(0)
    with pytest.raises(ValueError):
        PatternType(0)


def test_unknown_label_raises():
    with pytest.raises(ValueError):
        HAlign.from_label("no-such-value")
    with pytest.raises(ValueError):
        VAlign.from_label("no-such-value")
    with pytest.raises(ValueError):
        BorderStyle.from_label("no-such-value")
    with pytest.raises(ValueError):
        GradientType.from_label("no-such-value")
    with pytest.raises(ValueError):
        PatternType.from_label("no-such-value")


def test_charset_constants():
    assert FontCharset.OEM == 255
    assert FontCharset.RUSSIAN == 204
    assert FontCharset.ANSI == 0
    assert FontCharset(77) is FontCharset.MAC


def test_font_family_value():
    assert FontFamily(5) is FontFamily.DECORATIVE


def test_string_enums():
    assert FontScheme("minor") is FontScheme.MINOR
    assert str(UnderlineType.SINGLE_ACCOUNTING) == "singleAccounting"
    assert {u.value for u in UnderlineType} == {
        "single",
        "double",
        "singleAccounting",
        "doubleAccounting",
        "none",
    }