# xlsxfmt

Data models for how XLSX spreadsheet cells look. The package covers direct
cell styles, built-in and custom named styles, conditional formatting rules
and worksheet column definitions. Everything is plain Python: dataclasses
and enums, which you build up with small option callables.

## Installation

```
pip install xlsxfmt
```

The package has no runtime dependencies.

## Styles

`xlsxfmt.styles.info.StyleInfo` holds a `DiffStyle` with a font, fill,
border, alignment, number format and protection, and a `NamedStyleInfo`. An
option is a callable that takes a `StyleInfo` and changes it. You can pass
options to the constructor or to `set`.

The module `xlsxfmt.styles.options` provides ready instances of the option
groups: `alignment`, `border`, `fill`, `font` and `protection`. These are
instances of `AlignmentOptions`, `BorderOptions`, `FillOptions`,
`FontOptions` and `ProtectionOptions`. Flag options such as `font.bold` or
`alignment.wrap_text` are passed as they are. Options that take a value,
such as `font.size(10)`, return an option.

```python
from xlsxfmt.styles.enums import HAlign, BorderStyle
from xlsxfmt.styles.info import StyleInfo, unpack, number_format_id
from xlsxfmt.styles.options import alignment, border, font

style = StyleInfo(
    font.name("Calibri"),
    font.size(10),
    font.bold,
    alignment.halign(HAlign.CENTER),
    border.type(BorderStyle.THIN),
    border.color("#FF00FF"),
    number_format_id(8),
)

parts = unpack(style)   # UnpackedStyle; parts left unset are None
print(parts.font.name, parts.alignment.horizontal, parts.number_format.code)
```

Things to know about the options:

- Colours are given as `#RRGGBB`, `RRGGBB` or `AARRGGBB`. `new_color` stores
  them as upper-case `AARRGGBB`, with alpha `FF` added where it is missing.
- `border.type` and `border.color` apply to the top, bottom, left and right
  segments. Each segment can also be set on its own, for example
  `border.diagonal.type(...)`.
- A fill holds either a pattern or a gradient. A `fill.pattern.*` option
  clears the gradient, and a `fill.gradient.*` option clears the pattern.
  `fill.color`, `fill.background` and `fill.type` act on the pattern.
- `font.default` applies Calibri 11, Swiss family, minor scheme.
- `font.charset` ignores values outside the `FontCharset.ANSI` to
  `FontCharset.OEM` range.
- `number_format(code)` uses the id of the matching built-in format, or `-1`
  for a custom code. `number_format_id(id)` fills in the built-in code where
  one is known.

`unpack` returns independent copies of the parts of a style that are not
empty. `to_rich_font` returns a copy of the style's font, or `None` if the
font is empty.

### Named styles

`xlsxfmt.styles.named_style.named_style` is an option that takes either a
`NamedStyle` member or the name of a custom style. A built-in style sets the
built-in id and the default label. The `ROW_LEVEL*` and `COL_LEVEL*` pseudo
styles keep their own labels but share the row-level and column-level
built-in ids. An empty custom name raises `ValueError`. Any other type raises
`TypeError`.

The enums in `xlsxfmt.styles.enums` are `HAlign`, `VAlign`, `BorderStyle`,
`PatternType`, `GradientType`, `FontFamily`, `FontCharset`, `FontScheme`,
`FontEffect` and `UnderlineType`. The integer enums that have a spreadsheet
spelling expose it as `label`, and `from_label` maps a spelling back to its
member.

## Conditional formatting

A `xlsxfmt.conditional.rule.RuleInfo` is built from rule options. Each rule
kind has a helper class, and its module holds a ready instance of it:

- `xlsxfmt.conditional.simple_rules`:
  - `average` (`AverageRule`)
  - `blanks`, `no_blanks`
  - `errors`, `no_errors`
  - `duplicate`, `unique`
  - `time_period` (`TimePeriodRule`)
- `xlsxfmt.conditional.ranked_rules`:
  - `top`, `bottom`
  - `formula`
  - `text`
  - `value` (`ValueRule`)
- `xlsxfmt.conditional.scales`:
  - `color_scale2`, `color_scale3`
  - `data_bar`
  - `icon_set`

`xlsxfmt.conditional.formatting.ConditionalFormat` groups rules and the
ranges they apply to. You build one with the options `refs`, `add_rule` and
`pivot`.

```python
from xlsxfmt.conditional.formatting import ConditionalFormat, add_rule, refs, unpack
from xlsxfmt.conditional.ranked_rules import value
from xlsxfmt.conditional.scales import color_scale2

fmt = ConditionalFormat(
    refs("A1:A10"),
    add_rule(value.greater(100, None)),
    add_rule(color_scale2.min("1", "#110000"), color_scale2.max("10", "#001100")),
)
fmt.validate()              # raises RuleError (a ValueError) when invalid
formatting, styles = unpack(fmt)
```

- **Priority.** `add_rule` gives each rule a priority from its position,
  starting at 1.
- **Validation.** `validate` fails when the format has no ranges or no
  rules. It also checks every rule and fails if the rule has no type or a
  priority below 1, or if the rule's kind rejects it. Examples of rejection
  are a rank out of range, a missing formula or text, or a threshold type
  not allowed at that point.
- **Unpacking.** `unpack` returns the `ConditionalFormatting` with its
  `ConditionalRule` list filled in, and the style of each rule. It returns
  `(None, None)` if there are no rules.

## Columns

`xlsxfmt.columns.Columns` keeps a sheet's `Col` entries. Indexes given to
its methods are 0-based. The `min` and `max` of a `Col` are 1-based and
inclusive.

- `resolve(index)` returns the entry for that single column. If the column
  lies inside a grouped run, the entry is a new one copied from the run. If
  nothing covers the column, the entry is a fresh one.
- `delete(index)` removes the single-column entry and shrinks each grouped
  run that covers the column by one.

```python
from xlsxfmt.columns import Columns

cols = Columns()
col = cols.resolve(5)
col.width = 32
```

## What this package does not do

This package only describes formatting. It does not:

- read or write workbook files;
- serialise to XML;
- assign style ids in a stylesheet;
- merge adjacent column entries;
- replace the `:cell:` placeholder that some rule formulas carry.

That is left to whatever writes the workbook.

## Running the tests

```
pip install -e .[test]
pytest
```