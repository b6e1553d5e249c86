"""
The layout engine. Text is appended as styled runs, one run at a time, and
the glyphs are accumulated per line with coordinates relative to that line.
Only when all text is in, ``Layout.glyphs()`` resolves the alignment and
stacks the lines, because both depend on information that is not known
while appending: the width of the widest line, and the final ascent and
descent of each line (a larger font may still be appended to it).
"""

import numbers
import unicodedata

from ..utils import logger, assert_type
from ..utils.enums import HorizontalAlign, LineHeightMode
from ._settings import LayoutSettings


class StyledText:
    """A run of text with a single style.

    Parameters:
        text (str): the text. Newlines start a new line, other control
            characters are ignored.
        font_size (float): the font size in pixels.
        font_index (int): the index of the font in the fonts passed to
            ``Layout.append()``.
        user_data (object): an arbitrary payload that is attached to each
            glyph produced from this run, e.g. a color.
    """

    __slots__ = ["font_index", "font_size", "text", "user_data"]

    def __init__(self, text, font_size, font_index=0, user_data=None):
        if not isinstance(text, str):
            raise TypeError("StyledText text should be str.")
        if isinstance(font_index, bool) or not isinstance(font_index, int):
            raise TypeError("StyledText font_index should be int.")
        if isinstance(font_size, bool) or not isinstance(font_size, numbers.Real):
            raise TypeError("StyledText font_size should be a number.")
        if not font_size > 0:
            raise ValueError(f"StyledText font_size must be positive, got {font_size}.")
        self.text = text
        self.font_size = float(font_size)
        self.font_index = font_index
        self.user_data = user_data

    def __repr__(self):
        return f"<StyledText {self.text!r} size={self.font_size:0.5g} font={self.font_index}>"


class GlyphPosition:
    """The placement of one glyph in a text block. Immutable.

    The x and y are the top-left corner of the glyph's bitmap, with y
    pointing down from the top of the block.
    """

    __slots__ = [
        "_char",
        "_font_index",
        "_font_size",
        "_height",
        "_user_data",
        "_width",
        "_x",
        "_y",
    ]

    def __init__(self, char, x, y, width, height, font_index, font_size, user_data):
        self._char = char
        self._x = float(x)
        self._y = float(y)
        self._width = int(width)
        self._height = int(height)
        self._font_index = font_index
        self._font_size = font_size
        self._user_data = user_data

    def __repr__(self):
        return f"<GlyphPosition {self._char!r} at ({self._x:0.5g}, {self._y:0.5g}) size {self._width}x{self._height}>"

    @property
    def char(self):
        """The character this glyph represents."""
        return self._char

    @property
    def x(self):
        """The left edge of the bitmap."""
        return self._x

    @property
    def y(self):
        """The top edge of the bitmap."""
        return self._y

    @property
    def width(self):
        """The width of the bitmap in pixels."""
        return self._width

    @property
    def height(self):
        """The height of the bitmap in pixels."""
        return self._height

    @property
    def font_index(self):
        """The index of the font this glyph is rendered with."""
        return self._font_index

    @property
    def font_size(self):
        """The font size this glyph is rendered at."""
        return self._font_size

    @property
    def user_data(self):
        """The payload of the styled run this glyph came from."""
        return self._user_data


class Line:
    """A line of text. Glyph positions are relative to the line's left
    edge and baseline until ``Layout.glyphs()``.
    This is an internal object (not public).
    """

    __slots__ = ["ascent", "descent", "gap", "glyphs", "width"]

    def __init__(self):
        # The pen position, i.e. the sum of the advances so far
        self.width = 0.0
        # The highest a glyph extends above the baseline, typically positive
        self.ascent = 0.0
        # The lowest a glyph descends below the baseline, typically negative
        self.descent = 0.0
        # The space between this line's descent and the next line's ascent
        self.gap = 0.0
        # Tuples (char, x, ymin, width, height, font_index, font_size, user_data)
        self.glyphs = []

    def __repr__(self):
        return f"<Line {len(self.glyphs)} glyphs, width {self.width:0.5g}, height {self.height():0.5g}>"

    @property
    def is_empty(self):
        return not self.glyphs

    def height(self):
        """The height of this line including the gap."""
        return self.ascent - self.descent + self.gap


class Layout:
    """Lay out styled runs of text.

    Append runs of text with ``append()``, then get the placed glyphs with
    ``glyphs()``. The layout can be appended to any number of times, but
    ``glyphs()`` finalizes it: after that the layout cannot be used.

    Parameters:
        settings (LayoutSettings): the settings. Default ``LayoutSettings()``.
    """

    def __init__(self, settings=None):
        assert_type("settings", settings, None, LayoutSettings)
        self._settings = settings or LayoutSettings()
        self._lines = [Line()]

    def __repr__(self):
        if self._lines is None:
            return f"<Layout (finalized) at {hex(id(self))}>"
        return (
            f"<Layout with {len(self._lines)} lines, {self.width():0.5g}x{self.height():0.5g}"
            f" at {hex(id(self))}>"
        )

    def _check_not_finalized(self):
        if self._lines is None:
            raise RuntimeError("Cannot use a Layout after glyphs() has been called.")

    @property
    def settings(self):
        """The ``LayoutSettings`` of this layout."""
        return self._settings

    @property
    def line_count(self):
        """The number of lines so far. There is always at least one."""
        self._check_not_finalized()
        return len(self._lines)

    @property
    def is_finalized(self):
        """Whether ``glyphs()`` has been called."""
        return self._lines is None

    def append(self, fonts, styled):
        """Append a run of styled text.

        Parameters:
            fonts (sequence): the font-metrics providers. The run's
                ``font_index`` must be a valid, non-negative index into it.
            styled (StyledText): the text to append.

        Raises ``LineMetricsError`` when the font has no line metrics and
        the line height policy needs them. Characters appended before the
        error stay on their lines.
        """
        self._check_not_finalized()
        assert_type("styled", styled, StyledText)

        if not 0 <= styled.font_index < len(fonts):
            raise IndexError(
                f"Font index {styled.font_index} out of range for {len(fonts)} fonts."
            )
        font = fonts[styled.font_index]
        font_size = styled.font_size

        line_height = self._settings.line_height
        mode = line_height.mode
        uses_line_metrics = line_height.uses_line_metrics

        logger.debug(
            f"Appending {len(styled.text)} chars at {font_size}px with font {styled.font_index}"
        )

        line = self._lines[-1]
        for char in styled.text:
            if char == "\n":
                line = Line()
                self._lines.append(line)
                continue
            elif unicodedata.category(char) == "Cc":
                continue

            metrics = font.metrics(char, font_size)

            # Resolve the line's vertical metrics; these can only grow
            if uses_line_metrics:
                line_metrics = font.line_metrics(font_size)
                line.ascent = max(line.ascent, line_metrics.ascent)
                line.descent = min(line.descent, line_metrics.descent)
            else:
                bounds = metrics.get_visual_bounds()
                line.ascent = max(line.ascent, bounds.top)
                line.descent = min(line.descent, bounds.bottom)
            if mode == LineHeightMode.font_default:
                line.gap = max(line.gap, line_metrics.line_gap)
            else:
                line.gap = line_height.get_gap(line.ascent, line.descent)

            kern = 0.0
            if line.glyphs:
                kern = font.kern(line.glyphs[-1][0], char, font_size) or 0.0

            # The y is the bottom of the bitmap relative to the baseline. It
            # can only be turned into a block position once the line's ascent
            # is final.
            line.glyphs.append(
                (
                    char,
                    max(0.0, kern + metrics.xmin + line.width),
                    metrics.ymin,
                    metrics.width,
                    metrics.height,
                    styled.font_index,
                    font_size,
                    styled.user_data,
                )
            )

            # The clamp on x above does not affect the pen position
            line.width += metrics.advance_width

    def width(self):
        """The width of the widest line."""
        self._check_not_finalized()
        return max(line.width for line in self._lines)

    def height(self):
        """The total height of all lines. An empty line takes the height of
        the nearest non-empty line before it.
        """
        self._check_not_finalized()
        height = 0.0
        last_height = 0.0
        for line in self._lines:
            if not line.is_empty:
                last_height = line.height()
            height += last_height
        return height

    def glyphs(self):
        """Finalize the layout and get the list of ``GlyphPosition`` objects,
        in reading order. The layout cannot be used after this.
        """
        self._check_not_finalized()
        align = self._settings.horizontal_align
        block_width = self.width()
        lines = self._lines
        self._lines = None

        result = []
        baseline = 0.0
        last_height = 0.0
        for line in lines:
            if line.is_empty:
                baseline += last_height
                continue

            last_height = line.height()
            baseline += line.ascent

            if align == HorizontalAlign.center:
                x_offset = (block_width - line.width) / 2
            elif align == HorizontalAlign.right:
                x_offset = block_width - line.width
            else:
                x_offset = 0.0

            for char, x, ymin, width, height, font_index, font_size, data in line.glyphs:
                # Flip the bottom offset to point down, and move to the top edge
                y = ymin * -1 + baseline - height
                result.append(
                    GlyphPosition(
                        char, x + x_offset, y, width, height, font_index, font_size, data
                    )
                )

            baseline += -line.descent + line.gap

        return result
