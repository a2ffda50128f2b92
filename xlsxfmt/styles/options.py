"""Option builders for styles: alignment, border, fill, font and protection."""

from __future__ import annotations

from .enums import (
    BorderStyle,
    FontCharset,
    FontEffect,
    FontFamily,
    FontScheme,
    GradientType,
    HAlign,
    PatternType,
    UnderlineType,
    VAlign,
)
from .info import GradientFill, GradientStop, PatternFill, StyleInfo, StyleOption, new_color

__all__ = [
    "AlignmentOptions",
    "BorderSegmentOptions",
    "BorderOptions",
    "PatternOptions",
    "GradientOptions",
    "FillOptions",
    "FontOptions",
    "ProtectionOptions",
    "alignment",
    "border",
    "fill",
    "font",
    "protection",
]


class AlignmentOptions:
    """Options that change the alignment of a style."""

    def valign(self, value: VAlign) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            info.style.alignment.vertical = value

        return apply

    def halign(self, value: HAlign) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            info.style.alignment.horizontal = value

        return apply

    def text_rotation(self, angle: int) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            info.style.alignment.text_rotation = angle

        return apply

    def wrap_text(self, info: StyleInfo) -> None:
        info.style.alignment.wrap_text = True

    def indent(self, value: int) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            info.style.alignment.indent = value

        return apply

    def relative_indent(self, value: int) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            info.style.alignment.relative_indent = value

        return apply

    def justify_last_line(self, info: StyleInfo) -> None:
        info.style.alignment.justify_last_line = True

    def shrink_to_fit(self, info: StyleInfo) -> None:
        info.style.alignment.shrink_to_fit = True

    def reading_order(self, value: int) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            info.style.alignment.reading_order = value

        return apply


class BorderSegmentOptions:
    """Options for one named segment of a border."""

    def __init__(self, segment: str) -> None:
        self._segment = segment

    def type(self, style: BorderStyle) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            getattr(info.style.border, self._segment).type = style

        return apply

    def color(self, rgb: str) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            getattr(info.style.border, self._segment).color = new_color(rgb)

        return apply


_OUTER_SEGMENTS = ("top", "bottom", "left", "right")


class BorderOptions:
    """Options that change the border of a style."""

    def __init__(self) -> None:
        self.top = BorderSegmentOptions("top")
        self.bottom = BorderSegmentOptions("bottom")
        self.left = BorderSegmentOptions("left")
        self.right = BorderSegmentOptions("right")
        self.diagonal = BorderSegmentOptions("diagonal")
        self.vertical = BorderSegmentOptions("vertical")
        self.horizontal = BorderSegmentOptions("horizontal")

    def diagonal_up(self, info: StyleInfo) -> None:
        info.style.border.diagonal_up = True

    def diagonal_down(self, info: StyleInfo) -> None:
        info.style.border.diagonal_down = True

    def outline(self, info: StyleInfo) -> None:
        info.style.border.outline = True

    def type(self, style: BorderStyle) -> StyleOption:
        """Set the line style of the top, bottom, left and right segments."""

        def apply(info: StyleInfo) -> None:
            for name in _OUTER_SEGMENTS:
                getattr(info.style.border, name).type = style

        return apply

    def color(self, rgb: str) -> StyleOption:
        """Set the colour of the top, bottom, left and right segments."""

        def apply(info: StyleInfo) -> None:
            for name in _OUTER_SEGMENTS:
                getattr(info.style.border, name).color = new_color(rgb)

        return apply


def _use_pattern(info: StyleInfo) -> PatternFill:
    info.style.fill.gradient = GradientFill()
    if info.style.fill.pattern is None:
        info.style.fill.pattern = PatternFill()
    return info.style.fill.pattern


def _use_gradient(info: StyleInfo) -> GradientFill:
    info.style.fill.pattern = PatternFill()
    if info.style.fill.gradient is None:
        info.style.fill.gradient = GradientFill()
    return info.style.fill.gradient


class PatternOptions:
    """Options for a pattern fill; each clears any gradient fill."""

    def color(self, rgb: str) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            _use_pattern(info).color = new_color(rgb)

        return apply

    def background(self, rgb: str) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            _use_pattern(info).background = new_color(rgb)

        return apply

    def type(self, pattern_type: PatternType) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            _use_pattern(info).type = pattern_type

        return apply


class GradientOptions:
    """Options for a gradient fill; each clears any pattern fill."""

    def type(self, gradient_type: GradientType) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            _use_gradient(info).type = gradient_type

        return apply

    def degree(self, degree: float) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            _use_gradient(info).degree = degree

        return apply

    def left(self, value: float) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            _use_gradient(info).left = value

        return apply

    def right(self, value: float) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            _use_gradient(info).right = value

        return apply

    def top(self, value: float) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            _use_gradient(info).top = value

        return apply

    def bottom(self, value: float) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            _use_gradient(info).bottom = value

        return apply

    def stop(self, position: float, rgb: str) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            _use_gradient(info).stop.append(
                GradientStop(position=position, color=new_color(rgb))
            )

        return apply


class FillOptions:
    """Options for the fill of a style; only one kind of fill is kept."""

    def __init__(self) -> None:
        self.pattern = PatternOptions()
        self.gradient = GradientOptions()

    def color(self, rgb: str) -> StyleOption:
        return self.pattern.color(rgb)

    def background(self, rgb: str) -> StyleOption:
        return self.pattern.background(rgb)

    def type(self, pattern_type: PatternType) -> StyleOption:
        return self.pattern.type(pattern_type)


class FontOptions:
    """Options that change the font of a style."""

    def name(self, name: str) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            info.style.font.name = name

        return apply

    def default(self, info: StyleInfo) -> None:
        """Apply the default workbook font."""
        f = info.style.font
        f.family = FontFamily.SWISS
        f.scheme = FontScheme.MINOR
        f.name = "Calibri"
        f.size = 11.0

    def bold(self, info: StyleInfo) -> None:
        info.style.font.bold = True

    def italic(self, info: StyleInfo) -> None:
        info.style.font.italic = True

    def strikeout(self, info: StyleInfo) -> None:
        info.style.font.strike = True

    def superscript(self, info: StyleInfo) -> None:
        info.style.font.effect = FontEffect.SUPERSCRIPT

    def subscript(self, info: StyleInfo) -> None:
        info.style.font.effect = FontEffect.SUBSCRIPT

    def shadow(self, info: StyleInfo) -> None:
        info.style.font.shadow = True

    def condense(self, info: StyleInfo) -> None:
        info.style.font.condense = True

    def extend(self, info: StyleInfo) -> None:
        info.style.font.extend = True

    def family(self, family: FontFamily) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            info.style.font.family = family

        return apply

    def color(self, rgb: str) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            info.style.font.color = new_color(rgb)

        return apply

    def size(self, size: float) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            info.style.font.size = float(size)

        return apply

    def underline(self, underline: UnderlineType) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            info.style.font.underline = underline

        return apply

    def scheme(self, scheme: FontScheme) -> StyleOption:
        def apply(info: StyleInfo) -> None:
            info.style.font.scheme = scheme

        return apply

    def charset(self, charset: int) -> StyleOption:
        """Set the charset; values outside the ANSI..OEM range are ignored."""

        def apply(info: StyleInfo) -> None:
            if FontCharset.ANSI <= charset <= FontCharset.OEM:
                info.style.font.charset = int(charset)

        return apply


class ProtectionOptions:
    """Options that change the protection of a style."""

    def hidden(self, info: StyleInfo) -> None:
        info.style.protection.hidden = True

    def locked(self, info: StyleInfo) -> None:
        info.style.protection.locked = True


alignment = AlignmentOptions()
border = BorderOptions()
fill = FillOptions()
font = FontOptions()
protection = ProtectionOptions()