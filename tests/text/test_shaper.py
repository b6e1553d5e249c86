import time

import pytest
from pytest import raises

from glyphlayout.layout import Layout, LayoutSettings, LineHeight, StyledText
from glyphlayout.text import FontFile, GlyphMetrics, LineMetricsError, find_font_files
from glyphlayout.text._shaper import TemporalCache


def test_cache():
    c = TemporalCache(0.1, getter=hash)

    # Store one value
    assert c["foo"] == hash("foo")
    assert len(c) == 1

    # An old item stays until another item is fetched
    time.sleep(0.11)
    assert "foo" in c
    assert c["foo"] == hash("foo")
    assert c["bar"] == hash("bar")
    assert "foo" in c
    assert "bar" in c

    # Fetching an item triggers removal of old items
    time.sleep(0.11)
    assert c["bar"] == hash("bar")
    assert "foo" not in c
    assert "bar" in c
    assert len(c) == 1

    # Manually trigger cleanup
    time.sleep(0.11)
    c.check_lifetimes()
    assert len(c) == 0


def test_cache_minimum_items():
    c = TemporalCache(0.1, getter=hash, minimum_items=3)

    for key in ("foo0", "foo1", "foo2"):
        assert c[key] == hash(key)

    # Old items are kept to maintain the minimum
    time.sleep(0.11)
    c.check_lifetimes()
    assert all(key in c for key in ("foo0", "foo1", "foo2"))

    # New items evict the oldest ones
    assert c["bar0"] == hash("bar0")
    assert "foo0" not in c
    assert "foo1" in c
    assert len(c) == 3


class StubFace:
    family_name = b""
    style_name = b""
    units_per_EM = 2048

    def __init__(self, has_horizontal=True, has_kerning=True):
        self.has_horizontal = has_horizontal
        self.has_kerning = has_kerning

    def get_kerning(self, left, right, mode):
        class Vector:
            x = -128 if (left, right) == ("A", "V") else 0
            y = 0

        return Vector()


def test_font_file_names():
    ff = FontFile("/some/dir/FooSans-BoldItalic.ttf")
    ff._get_face = lambda: StubFace()

    # Names are derived from the filename if the font does not have them
    assert ff.filename == "/some/dir/FooSans-BoldItalic.ttf"
    assert ff.family == "FooSans"
    assert ff.variant == "BoldItalic"
    assert ff.name == "FooSans-BoldItalic"
    assert "FooSans-BoldItalic" in repr(ff)

    ff = FontFile("x", "Foo Sans", "Bold Italic")
    assert ff.name == "FooSans-BoldItalic"
    assert hash(ff) == hash(FontFile("y", "Foo Sans", "Bold Italic"))

    with raises(TypeError):
        FontFile(3)


def test_font_file_repr_is_lazy():
    ff = FontFile("/some/dir/FooSans-Bold.ttf")

    def fail():
        raise RuntimeError("font opened")

    ff._get_face = fail
    r = repr(ff)
    assert "FooSans-Bold.ttf" in r
    assert " at 0x" in r and "0x0x" not in r


def test_font_file_without_line_metrics():
    ff = FontFile("x", "Foo Sans", "Regular")
    ff._get_sized_face = lambda size: StubFace(has_horizontal=False)
    with raises(LineMetricsError):
        ff.line_metrics(32)


def test_font_file_kerning():
    ff = FontFile("x", "Foo Sans", "Regular")
    ff._get_sized_face = lambda size: StubFace()
    assert ff.kern("A", "V", 32) == -2
    assert ff.kern("A", "B", 32) == 0

    ff._get_sized_face = lambda size: StubFace(has_kerning=False)
    assert ff.kern("A", "V", 32) is None


@pytest.fixture(scope="module")
def font_filename():
    try:
        filenames = sorted(find_font_files())
    except OSError:
        filenames = []
    for filename in filenames:
        if filename.endswith("DejaVuSans.ttf"):
            return filename
    if not filenames:
        pytest.skip("No system fonts found")
    return filenames[0]


def test_font_file_metrics(font_filename):
    ff = FontFile(font_filename)
    assert ff.family
    assert ff.units_per_em > 0
    assert ff.has_codepoint(ord("H"))

    m = ff.metrics("H", 32)
    assert isinstance(m, GlyphMetrics)
    assert m.advance_width > 0
    assert m.width > 0 and m.height > 0
    assert -1 <= m.ymin <= 0
    assert m.bounds.top == pytest.approx(m.ymin + m.height, abs=1.5)

    # Metrics scale with the size
    m2 = ff.metrics("H", 64)
    assert m2.advance_width == pytest.approx(2 * m.advance_width, rel=0.01)

    # A glyph with a descender
    assert ff.metrics("g", 32).ymin < 0

    # A space has an advance but no bitmap
    m = ff.metrics(" ", 32)
    assert m.advance_width > 0
    assert m.width == 0

    lm = ff.line_metrics(32)
    assert lm.ascent > 0
    assert lm.descent < 0
    assert lm.line_gap >= 0
    assert ff.line_metrics(64).ascent == pytest.approx(2 * lm.ascent)

    kern = ff.kern("A", "V", 32)
    assert kern is None or isinstance(kern, float)


def test_font_file_layout(font_filename):
    fonts = [FontFile(font_filename)]
    for line_height in (LineHeight.font_default(), LineHeight.tight_fit(1.2)):
        layout = Layout(LayoutSettings("center", line_height=line_height))
        layout.append(fonts, StyledText("Hello\n", 32))
        layout.append(fonts, StyledText("World!", 24))
        width, height = layout.width(), layout.height()
        assert width > 0 and height > 0

        glyphs = layout.glyphs()
        assert "".join(g.char for g in glyphs) == "HelloWorld!"
        for g in glyphs:
            assert 0 <= g.x <= width
            if line_height.mode == "font_default":
                assert g.y >= 0
