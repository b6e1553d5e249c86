from ..utils import logger
from ._metrics import FontMetrics
from ._shaper import FontFile


class FontCollection:
    """An ordered collection of font-metrics providers.

    A layout refers to fonts by their index in a collection. Fonts can be
    added but not removed, so an index stays valid for the lifetime of
    the collection. Any indexable sequence of providers (e.g. a list) can
    be used in place of a FontCollection, but a collection does not wrap
    negative indices.
    """

    def __init__(self, fonts=()):
        self._fonts = []
        for font in fonts:
            self.add(font)

    def __repr__(self):
        return f"<FontCollection with {len(self._fonts)} fonts at {hex(id(self))}>"

    def __len__(self):
        return len(self._fonts)

    def __iter__(self):
        return iter(self._fonts)

    def __getitem__(self, index):
        if not isinstance(index, int):
            raise TypeError(f"Font index must be an int, not {type(index).__name__}.")
        if not 0 <= index < len(self._fonts):
            raise IndexError(
                f"Font index {index} out of range for a collection of {len(self._fonts)} fonts."
            )
        return self._fonts[index]

    def add(self, font):
        """Add a font to the collection and return its index. The font can
        be a ``FontMetrics`` object or the filename of a font file.
        """
        if isinstance(font, str):
            font = FontFile(font)
        elif not isinstance(font, FontMetrics):
            raise TypeError("FontCollection.add() expects FontMetrics or str filename.")
        self._fonts.append(font)
        logger.debug(f"Added font {font!r} at index {len(self._fonts) - 1}")
        return len(self._fonts) - 1

    def index_of(self, font):
        """Get the index of the given font. Raises ValueError if it's not in the collection."""
        for i, f in enumerate(self._fonts):
            if f is font:
                return i
        raise ValueError(f"{font!r} is not in the collection.")
