"""
Layout text
===========

Lay out a few lines of text with two sizes, using the first font found on
the system, and print the placement of each glyph.
"""

import sys

import glyphlayout as gl
from glyphlayout.text import find_font_files


filenames = sorted(find_font_files())
if not filenames:
    sys.exit("No fonts found on this system.")

fonts = gl.FontCollection([filenames[0]])
print(f"Using {fonts[0].name}")

for align in gl.HorizontalAlign:
    layout = gl.Layout(gl.LayoutSettings(align, line_height=1.2))
    layout.append(fonts, gl.StyledText("Hello\n", 32))
    layout.append(fonts, gl.StyledText("from glyphlayout!", 16))

    print(f"\n{align}: {layout.width():0.1f} x {layout.height():0.1f}")
    glyphs = layout.glyphs()
    for glyph in glyphs:
        print(f"    {glyph.char!r} at ({glyph.x:0.1f}, {glyph.y:0.1f})")
    print("    bounding box:", gl.get_bounding_box(glyphs).tolist())
