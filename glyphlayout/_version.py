"""
The version of glyphlayout. Bumped before each release; setup.py reads it
from this file.
"""

__version__ = "0.1.0"

version_info = tuple(int(part) for part in __version__.split("."))
