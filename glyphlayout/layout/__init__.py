"""
The layout engine.

Text is laid out in two stages. During the accumulation stage, styled runs
are appended with ``Layout.append()``, and each glyph is placed relative to
its line. The finalize stage, ``Layout.glyphs()``, applies the horizontal
alignment and stacks the lines to produce block-space glyph positions.
"""

from ._settings import LineHeight, LayoutSettings  # noqa: F401
from ._layout import StyledText, GlyphPosition, Layout  # noqa: F401
from ._arrays import glyphs_to_arrays, get_bounding_box  # noqa: F401
