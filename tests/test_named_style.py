import pytest

from xlsxfmt.styles.info import NamedStyleInfo, StyleInfo, unpack
from xlsxfmt.styles.named_style import NamedStyle, named_style


def test_custom_name():
    style = StyleInfo(named_style("My Style"))
    assert style.named == NamedStyleInfo(name="My Style", builtin_id=None)


def test_builtin_hyperlink():
    style = StyleInfo(named_style(NamedStyle.HYPERLINK))
    assert style.named.name == "Hyperlink"
    assert style.named.builtin_id == int(NamedStyle.HYPERLINK)


def test_custom_name_clears_builtin_id():
    style = StyleInfo(named_style(NamedStyle.TITLE), named_style("Other"))
    assert style.named == NamedStyleInfo(name="Other")


def test_row_levels_share_builtin_id():
    ids = {StyleInfo(named_style(NamedStyle[f"ROW_LEVEL{n}"])).named.builtin_id for n in range(1, 8)}
    assert len(ids) == 1
    assert StyleInfo(named_style(NamedStyle.ROW_LEVEL3)).named.name == "RowLevel_3"


def test_col_levels_share_builtin_id_distinct_from_rows():
    col_ids = {StyleInfo(named_style(NamedStyle[f"COL_LEVEL{n}"])).named.builtin_id for n in range(1, 8)}
    row_id = StyleInfo(named_style(NamedStyle.ROW_LEVEL1)).named.builtin_id
    assert len(col_ids) == 1
    assert row_id not in col_ids
    assert StyleInfo(named_style(NamedStyle.COL_LEVEL7)).named.name == "ColLevel_7"


def test_accent_labels():
    assert StyleInfo(named_style(NamedStyle.ACCENT1_20)).named.name == "20% - Accent1"
    assert StyleInfo(named_style(NamedStyle.ACCENT6)).named.name == "Accent6"


def test_every_member_has_label():
    names = [StyleInfo(named_style(member)).named.name for member in NamedStyle]
    assert len(set(names)) == len(names)
    assert all(names)


def test_ordinary_builtin_id_is_member_value():
    for member in (NamedStyle.NORMAL, NamedStyle.EXPLANATORY, NamedStyle.GOOD):
        assert StyleInfo(named_style(member)).named.builtin_id == int(member)


def test_named_style_survives_unpack():
    style = StyleInfo(named_style(NamedStyle.GOOD))
    assert unpack(style).named == NamedStyleInfo(name="Good", builtin_id=int(NamedStyle.GOOD))


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        StyleInfo(named_style(""))


def test_plain_int_rejected():
    with pytest.raises(TypeError):
        StyleInfo(named_style(8))


def test_other_type_rejected():
    with pytest.raises(TypeError):
        StyleInfo(named_style(None))