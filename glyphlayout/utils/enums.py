"""
The enums used in glyphlayout. The enums are all available from the root
``glyphlayout`` namespace.

.. currentmodule:: glyphlayout.utils.enums

.. autosummary::
    :toctree: utils/enums

    HorizontalAlign
    LineHeightMode

"""

from wgpu.utils import BaseEnum


__all__ = [
    "HorizontalAlign",
    "LineHeightMode",
]


class Enum(BaseEnum):
    """Enum base class for glyphlayout."""


class HorizontalAlign(Enum):
    """How the lines of a text block are aligned horizontally."""

    left = None  #: Each line starts at the left edge of the block.
    center = None  #: Each line is centered within the width of the widest line.
    right = None  #: Each line ends at the right edge of the block.


class LineHeightMode(Enum):
    """How the ascent, descent and gap of a line are established."""

    font_default = None  #: Use the ascent, descent and line gap reported by the font.
    ratio = None  #: Use the font's ascent and descent, and a gap that scales the line advance by a factor.
    tight_fit = None  #: Use the visual bounds of the glyphs on the line, and a gap like ``ratio``.
