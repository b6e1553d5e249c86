import numpy as np


def glyphs_to_arrays(glyphs):
    """Pack a list of ``GlyphPosition`` objects into arrays.

    This is convenient for consumers that process the glyphs in bulk, e.g. a
    compositor. Returns a dict with:

    * positions (ndarray): Nx2 float32 array with the top-left corners.
    * sizes (ndarray): Nx2 int32 array with the bitmap width and height.
    * font_indices (ndarray): N int32 array.
    * font_sizes (ndarray): N float32 array.
    * chars (list): the N characters.

    The order matches the given list.
    """
    n = len(glyphs)
    positions = np.zeros((n, 2), np.float32)
    sizes = np.zeros((n, 2), np.int32)
    font_indices = np.zeros((n,), np.int32)
    font_sizes = np.zeros((n,), np.float32)
    for i, glyph in enumerate(glyphs):
        positions[i] = glyph.x, glyph.y
        sizes[i] = glyph.width, glyph.height
        font_indices[i] = glyph.font_index
        font_sizes[i] = glyph.font_size

    return {
        "positions": positions,
        "sizes": sizes,
        "font_indices": font_indices,
        "font_sizes": font_sizes,
        "chars": [glyph.char for glyph in glyphs],
    }


def get_bounding_box(glyphs):
    """Get the bounding box of the glyph bitmaps as a 2x2 array
    ``[[left, top], [right, bottom]]``, or None if there are no glyphs.
    """
    if not glyphs:
        return None
    arrays = glyphs_to_arrays(glyphs)
    positions = arrays["positions"]
    corners = positions + arrays["sizes"].astype(np.float32)
    return np.array(
        [positions.min(axis=0), corners.max(axis=0)],
        np.float32,
    )
