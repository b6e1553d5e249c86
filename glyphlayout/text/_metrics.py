"""
The contract between the layout engine and a font-metrics provider.

A provider answers three questions for a single font: what are the
metrics of a character at a given size, what are the line metrics at a
given size, and what is the kerning between two characters. All distances
are in pixels, with y pointing up from the baseline.
"""


class LineMetricsError(RuntimeError):
    """Raised when a font has no horizontal line metrics."""


class OutlineBounds:
    """The visual bounding box of a glyph outline, relative to its origin."""

    __slots__ = ["height", "width", "xmin", "ymin"]

    def __init__(self, xmin=0.0, ymin=0.0, width=0.0, height=0.0):
        self.xmin = float(xmin)
        self.ymin = float(ymin)
        self.width = float(width)
        self.height = float(height)

    def __repr__(self):
        return f"<OutlineBounds({self.xmin:0.5g}, {self.ymin:0.5g}, {self.width:0.5g}, {self.height:0.5g})>"

    def __eq__(self, other):
        if not isinstance(other, OutlineBounds):
            return NotImplemented
        return (self.xmin, self.ymin, self.width, self.height) == (
            other.xmin,
            other.ymin,
            other.width,
            other.height,
        )

    @property
    def top(self):
        """The highest point of the outline, above the baseline if positive."""
        return self.ymin + self.height

    @property
    def bottom(self):
        """The lowest point of the outline, below the baseline if negative."""
        return self.ymin


class GlyphMetrics:
    """The metrics of one character, rendered at one size.

    Parameters:
        advance_width (float): how far the pen moves after this glyph.
        xmin (int): left edge of the bitmap relative to the pen position.
        ymin (int): bottom edge of the bitmap relative to the baseline.
        width (int): the width of the bitmap in pixels.
        height (int): the height of the bitmap in pixels.
        bounds (OutlineBounds, optional): the visual bounds of the outline.
    """

    __slots__ = ["advance_width", "bounds", "height", "width", "xmin", "ymin"]

    def __init__(self, advance_width, xmin, ymin, width, height, bounds=None):
        self.advance_width = float(advance_width)
        self.xmin = int(xmin)
        self.ymin = int(ymin)
        self.width = int(width)
        self.height = int(height)
        self.bounds = bounds

    def __repr__(self):
        return (
            f"<GlyphMetrics advance={self.advance_width:0.5g} "
            f"xmin={self.xmin} ymin={self.ymin} size={self.width}x{self.height}>"
        )

    def get_visual_bounds(self):
        """The outline bounds, or the bitmap box if the provider has none."""
        if self.bounds is not None:
            return self.bounds
        return OutlineBounds(self.xmin, self.ymin, self.width, self.height)


class LineMetrics:
    """The line metrics of a font at one size.

    The ascent is typically positive and the descent typically negative.
    The line gap is the recommended space between the descent of one line
    and the ascent of the next.
    """

    __slots__ = ["ascent", "descent", "line_gap"]

    def __init__(self, ascent, descent, line_gap):
        self.ascent = float(ascent)
        self.descent = float(descent)
        self.line_gap = float(line_gap)

    def __repr__(self):
        return f"<LineMetrics ascent={self.ascent:0.5g} descent={self.descent:0.5g} line_gap={self.line_gap:0.5g}>"

    @property
    def new_line_size(self):
        """The distance between the baselines of two consecutive lines."""
        return self.ascent - self.descent + self.line_gap


class FontMetrics:
    """Base class for font-metrics providers.

    Subclasses implement ``metrics()`` and ``line_metrics()``, and
    optionally ``kern()``. Providers are expected to be side-effect free,
    so a single instance can be shared by many layouts.

    What a provider returns for a character that the font does not
    support is up to the provider. The ``FontFile`` provider returns the
    metrics of the font's "notdef" glyph.
    """

    def metrics(self, char, font_size):
        """Get the ``GlyphMetrics`` for the given character at the given size."""
        raise NotImplementedError()

    def line_metrics(self, font_size):
        """Get the ``LineMetrics`` at the given size.

        Raises ``LineMetricsError`` if the font has no horizontal metrics.
        """
        raise NotImplementedError()

    def kern(self, left, right, font_size):
        """Get the horizontal kerning between two characters, or None if
        the font has no kerning information for this pair.
        """
        return None
