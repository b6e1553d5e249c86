from ..utils.enums import HorizontalAlign, LineHeightMode


class LineHeight:
    """A policy for the ascent, descent and gap of a line.

    Parameters:
        mode (str | LineHeightMode): 'font_default', 'ratio' or 'tight_fit'.
        factor (float): the line advance as a multiple of ``ascent + |descent|``.
            Ignored (and set to 1) for 'font_default'. A factor below 1 gives a
            negative gap, pulling the lines closer together.

    Use the constructors ``font_default()``, ``ratio()`` and ``tight_fit()``
    for readability.
    """

    __slots__ = ["_factor", "_mode"]

    def __init__(self, mode="font_default", factor=1.0):
        if not isinstance(mode, str):
            raise TypeError("Line height mode must be a str.")
        mode = mode.lower().replace("-", "_")
        if mode not in LineHeightMode.__fields__:
            raise ValueError(
                f"Line height mode must be one of {LineHeightMode}. Got {mode!r}."
            )
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            raise TypeError("Line height factor must be a number.")
        self._mode = LineHeightMode[mode]
        self._factor = 1.0 if mode == "font_default" else float(factor)

    @classmethod
    def font_default(cls):
        """Use the font-reported ascent, descent and line gap directly."""
        return cls("font_default")

    @classmethod
    def ratio(cls, factor):
        """Use the font-reported ascent and descent, with a gap such that
        the line advance is ``(ascent + |descent|) * factor``.
        """
        return cls("ratio", factor)

    @classmethod
    def tight_fit(cls, factor):
        """Derive ascent and descent from the glyphs on the line, with a gap
        such that the line advance is ``(ascent + |descent|) * factor``.
        """
        return cls("tight_fit", factor)

    def __repr__(self):
        if self._mode == "font_default":
            return "<LineHeight font_default>"
        return f"<LineHeight {self._mode} {self._factor:0.5g}>"

    def __eq__(self, other):
        if not isinstance(other, LineHeight):
            return NotImplemented
        return (self._mode, self._factor) == (other._mode, other._factor)

    def __hash__(self):
        return hash((self._mode, self._factor))

    @property
    def mode(self):
        """The ``LineHeightMode``."""
        return self._mode

    @property
    def factor(self):
        """The factor to scale the line advance with."""
        return self._factor

    @property
    def uses_line_metrics(self):
        """Whether this policy needs the line metrics of the font."""
        return self._mode != LineHeightMode.tight_fit

    def get_gap(self, ascent, descent):
        """Get the gap that makes the line advance ``(ascent + |descent|) * factor``."""
        size = ascent + abs(descent)
        return size * self._factor - size


class LayoutSettings:
    """The settings of a layout. Immutable.

    Parameters:
        horizontal_align (str | HorizontalAlign): how lines are aligned
            relative to each-other. Can be 'left', 'center' or 'right'.
            Default 'left'.
        line_height (LineHeight | float): the line height policy. A number
            is shorthand for ``LineHeight.ratio(number)``. Default
            ``LineHeight.font_default()``.
    """

    def __init__(self, horizontal_align=None, *, line_height=None):
        # Check alignment
        if horizontal_align is None:
            horizontal_align = "left"
        if not isinstance(horizontal_align, str):
            raise TypeError("Horizontal align must be a None or str.")
        horizontal_align = horizontal_align.lower().replace("-", "_")
        if horizontal_align not in HorizontalAlign.__fields__:
            raise ValueError(
                f"Horizontal align must be one of {HorizontalAlign}. Got {horizontal_align!r}."
            )

        # Check line height
        if line_height is None:
            line_height = LineHeight.font_default()
        elif isinstance(line_height, (int, float)) and not isinstance(
            line_height, bool
        ):
            line_height = LineHeight.ratio(line_height)
        elif not isinstance(line_height, LineHeight):
            cls = type(line_height).__name__
            raise TypeError(f"Line height must be a LineHeight or number, not '{cls}'")

        self._kwargs = {
            "horizontal_align": HorizontalAlign[horizontal_align],
            "line_height": line_height,
        }

    def __repr__(self):
        return f"<LayoutSettings {self.horizontal_align} {self.line_height!r}>"

    def __eq__(self, other):
        if not isinstance(other, LayoutSettings):
            return NotImplemented
        return self._kwargs == other._kwargs

    def __hash__(self):
        return hash((self.horizontal_align, self.line_height))

    def copy(self, **kwargs):
        """Make a copy of the settings, with given kwargs replaced."""
        d = self._kwargs.copy()
        for k, v in kwargs.items():
            if k not in d:
                raise TypeError(f"LayoutSettings has no setting {k!r}.")
            if v is not None:
                d[k] = v
        return self.__class__(d.pop("horizontal_align"), **d)

    @property
    def horizontal_align(self):
        """The ``HorizontalAlign``, one of 'left', 'center' or 'right'."""
        return self._kwargs["horizontal_align"]

    @property
    def line_height(self):
        """The ``LineHeight`` policy."""
        return self._kwargs["line_height"]
