"""
Font metrics for the layout engine.

The layout engine asks a font-metrics provider for the metrics of each
character it places, for the line metrics of the font, and for the
kerning between consecutive characters. This namespace contains the
data types of that contract, the ``FontMetrics`` base class, a provider
backed by font files (via FreeType and Harfbuzz), and a collection to
refer to fonts by index.
"""

from ._metrics import (  # noqa: F401
    FontMetrics,
    GlyphMetrics,
    LineMetrics,
    LineMetricsError,
    OutlineBounds,
)
from ._shaper import FontFile  # noqa: F401
from ._collection import FontCollection  # noqa: F401
from ._fontfinder import find_font_files, get_system_font_directories  # noqa: F401
