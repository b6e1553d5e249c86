"""
Font metrics with FreeType and Harfbuzz.

Relevant links:
* https://freetype.org/freetype2/docs/glyphs/glyphs-3.html
* https://harfbuzz.github.io/

"""

import os
import time

import freetype
import uharfbuzz

from ..utils import logger
from ._metrics import (
    FontMetrics,
    GlyphMetrics,
    LineMetrics,
    LineMetricsError,
    OutlineBounds,
)


class TemporalCache:
    """A simple cache that drops old items based on time."""

    def __init__(self, lifetime, *, getter, minimum_items=0):
        self._ref_lifetime = lifetime
        self._minimum_items = minimum_items
        self._cache = {}
        self._lifetimes = {}
        self._getter = getter

    def __getitem__(self, key):
        """Gets the object corresponding to the given key.

        Will reset the item's lifetime.
        Getting triggers the lifetimes of all items to be checked.
        """
        try:
            res = self._cache[key]
        except KeyError:
            res = self._getter(key)
            self._cache[key] = res

        self._lifetimes[key] = time.time()
        self.check_lifetimes()
        return res

    def __contains__(self, key):
        return key in self._cache

    def __len__(self):
        return len(self._cache)

    def check_lifetimes(self):
        """Drop the oldest expired items, keeping at least minimum_items."""
        pretty_old = time.time() - self._ref_lifetime
        old_items = sorted(
            ((key, lt) for key, lt in self._lifetimes.items() if lt < pretty_old),
            key=lambda x: x[1],
        )
        max_items_to_remove = max(len(self._cache) - self._minimum_items, 0)

        for key, _ in old_items[:max_items_to_remove]:
            self._lifetimes.pop(key, None)
            self._cache.pop(key, None)


# FreeType faces can take substantial memory (a CJK font easily takes
# 1MB), and a face is needed per size because FreeType faces are
# stateful. Unused faces are dropped after 10s, but a typical
# application uses only a handful of fonts and sizes, so we keep up
# to 20 around regardless.


def get_ft_face(key):
    font_filename, font_size = key
    logger.debug(f"Loading FreeType face for {font_filename} at {font_size}px")
    face = freetype.Face(font_filename)
    # Sizes are in 26.6 fixed point, and at 72 dpi a point is a pixel
    face.set_char_size(max(1, round(font_size * 64)), 0, 72, 72)
    return face


CACHE_FT = TemporalCache(
    lifetime=10,
    getter=get_ft_face,
    minimum_items=20,
)


def get_hb_font(font_filename):
    logger.debug(f"Loading Harfbuzz font for {font_filename}")
    blob = uharfbuzz.Blob.from_file_path(font_filename)
    face = uharfbuzz.Face(blob)
    font = uharfbuzz.Font(face)
    # Work in font units, we scale per request
    font.scale = face.upem, face.upem
    return blob, face, font


CACHE_HB = TemporalCache(
    lifetime=10,
    getter=get_hb_font,
    minimum_items=20,
)


class FontFile(FontMetrics):
    """A font-metrics provider backed by a font file.

    Glyph metrics and kerning come from FreeType, the line metrics come
    from the font extents that Harfbuzz reports. The font file is opened
    lazily, and the opened faces are shared between all FontFile objects
    for the same file.

    Parameters:
        filename (str): the path to a TrueType or OpenType font file.
        family (str, optional): the family name, read from the font if not given.
        variant (str, optional): the variant name, read from the font if not given.
    """

    def __init__(self, filename, family=None, variant=None):
        if not isinstance(filename, str):
            raise TypeError("FontFile filename must be a str.")
        self._filename = filename
        self._family = family
        self._variant = variant
        self._name = None
        self._codepoints = None
        self._warned_for_codepoints = set()

    def __repr__(self):
        # Use the filename until the name is known, so repr does not open the font
        name = self._name or os.path.basename(self._filename)
        return f"<FontFile {name} at {hex(id(self))}>"

    def __hash__(self):
        return hash(self.name)

    def _get_face(self):
        # Factored out so it can be overloaded in tests
        return freetype.Face(self._filename)

    def _get_sized_face(self, font_size):
        return CACHE_FT[(self._filename, float(font_size))]

    @property
    def filename(self):
        """The path to this font file."""
        return self._filename

    @property
    def family(self):
        """The family name of this font, e.g. 'Noto Sans' or 'Arial'."""
        if not self._family:
            self._family = (self._get_face().family_name or b"").decode()
            if not self._family:
                name = os.path.basename(self._filename).split(".")[0]
                family, _, _ = name.partition("-")
                self._family = family or "Unknown"
        return self._family

    @property
    def variant(self):
        """The variant name of this font, e.g. 'Regular' or 'Bold Italic'."""
        if not self._variant:
            self._variant = (self._get_face().style_name or b"").decode()
            if not self._variant:
                name = os.path.basename(self._filename).split(".")[0]
                _, _, variant = name.partition("-")
                self._variant = variant or "Regular"
        return self._variant

    @property
    def name(self):
        """A normalized name that includes the family and variant,
        e.g. 'NotoSans-BoldItalic'.
        """
        if not self._name:
            family = "".join(x[0].upper() + x[1:] for x in self.family.split())
            style = "".join(x[0].upper() + x[1:] for x in self.variant.split())
            self._name = family + "-" + style
        return self._name

    @property
    def units_per_em(self):
        """The number of font units per EM square."""
        return self._get_face().units_per_EM

    @property
    def codepoints(self):
        """A set of Unicode code points (ints) supported by this font."""
        if self._codepoints is None:
            self._codepoints = set(i for i, _ in self._get_face().get_chars())
        return self._codepoints

    def has_codepoint(self, codepoint):
        """Check whether a codepoint is supported by this font."""
        return codepoint in self.codepoints

    def metrics(self, char, font_size):
        face = self._get_sized_face(font_size)

        if face.get_char_index(char) == 0:
            codepoint = ord(char)
            if codepoint not in self._warned_for_codepoints:
                self._warned_for_codepoints.add(codepoint)
                logger.debug(f"{self.name} has no glyph for {char!r}, using notdef.")

        face.load_char(char, freetype.FT_LOAD_DEFAULT | freetype.FT_LOAD_NO_HINTING)
        glyph = face.glyph
        glyph.render(freetype.FT_RENDER_MODE_NORMAL)
        bitmap = glyph.bitmap

        # The outline metrics are in 26.6 fixed point
        m = glyph.metrics
        bounds = OutlineBounds(
            m.horiBearingX / 64,
            (m.horiBearingY - m.height) / 64,
            m.width / 64,
            m.height / 64,
        )

        return GlyphMetrics(
            advance_width=glyph.linearHoriAdvance / 65536,  # 16.16 fixed point
            xmin=glyph.bitmap_left,
            ymin=glyph.bitmap_top - bitmap.rows,
            width=bitmap.width,
            height=bitmap.rows,
            bounds=bounds,
        )

    def line_metrics(self, font_size):
        face = self._get_sized_face(font_size)
        if not face.has_horizontal:
            raise LineMetricsError(f"{self.name} has no horizontal line metrics.")

        blob, hb_face, hb_font = CACHE_HB[self._filename]
        ext = hb_font.get_font_extents("ltr")
        scale = font_size / hb_face.upem
        return LineMetrics(
            ext.ascender * scale,
            ext.descender * scale,
            ext.line_gap * scale,
        )

    def kern(self, left, right, font_size):
        face = self._get_sized_face(font_size)
        if not face.has_kerning:
            return None
        kerning = face.get_kerning(left, right, freetype.FT_KERNING_UNSCALED)
        return kerning.x * font_size / face.units_per_EM
