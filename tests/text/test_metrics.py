from pytest import raises

from glyphlayout.text import (
    FontMetrics,
    GlyphMetrics,
    LineMetrics,
    LineMetricsError,
    OutlineBounds,
)


def test_outline_bounds():
    bounds = OutlineBounds(1, -5, 10, 20)
    assert bounds.top == 15
    assert bounds.bottom == -5
    assert bounds == OutlineBounds(1.0, -5.0, 10.0, 20.0)
    assert bounds != OutlineBounds(1, -5, 10, 21)
    assert "OutlineBounds" in repr(bounds)


def test_glyph_metrics():
    m = GlyphMetrics(10.5, 1, -3, 8, 20)
    assert m.advance_width == 10.5
    assert (m.xmin, m.ymin, m.width, m.height) == (1, -3, 8, 20)
    assert m.bounds is None
    assert isinstance(m.xmin, int)

    # Without outline bounds, the visual bounds are the bitmap box
    bounds = m.get_visual_bounds()
    assert (bounds.top, bounds.bottom) == (17, -3)

    # With outline bounds, these are used
    m = GlyphMetrics(10.5, 1, -3, 8, 20, OutlineBounds(1.2, -2.5, 7, 18.5))
    bounds = m.get_visual_bounds()
    assert (bounds.top, bounds.bottom) == (16, -2.5)


def test_line_metrics():
    lm = LineMetrics(28, -6, 2)
    assert (lm.ascent, lm.descent, lm.line_gap) == (28, -6, 2)
    assert lm.new_line_size == 36
    assert "ascent=28" in repr(lm)


def test_font_metrics_base():
    font = FontMetrics()
    with raises(NotImplementedError):
        font.metrics("a", 12)
    with raises(NotImplementedError):
        font.line_metrics(12)
    assert font.kern("a", "b", 12) is None


def test_line_metrics_error():
    assert issubclass(LineMetricsError, RuntimeError)
