"""Glyphlayout: placement of glyphs in multi-line, multi-font text."""

# ruff: noqa: F401

from ._version import __version__, version_info
from . import utils

from .layout import (
    Layout,
    LayoutSettings,
    LineHeight,
    StyledText,
    GlyphPosition,
    glyphs_to_arrays,
    get_bounding_box,
)
from .text import (
    FontMetrics,
    FontFile,
    FontCollection,
    GlyphMetrics,
    LineMetrics,
    LineMetricsError,
    OutlineBounds,
)
from .utils import enums, logger
from .utils.enums import *
