"""
Find font files on the system. Like the Matplotlib font manager, but
simpler: we only look for font files in a set of well-known directories,
and do not consult the Windows registry or fontconfig for "official"
fonts.
"""

import os
import sys

from ..utils import logger


FONT_EXTENSIONS = ".ttf", ".otf"


def find_font_files(directory=None, recursive=True):
    """Get a set of paths to font files.

    Parameters:
        directory (str, optional): the directory to search. If not given,
            the system font directories are searched.
        recursive (bool): whether to search subdirectories. Default True.
    """
    if directory is None:
        directories = get_system_font_directories()
    elif os.path.isdir(directory):
        directories = {directory}
    else:
        raise OSError(f"Not a directory: {directory}")

    file_paths = set()
    for d in directories:
        file_paths.update(_find_font_files_in(d, recursive))
    logger.debug(f"Found {len(file_paths)} font files in {sorted(directories)}")
    return file_paths


def _find_font_files_in(directory, recursive):
    if not recursive:
        return {
            os.path.join(directory, fname)
            for fname in os.listdir(directory)
            if fname.lower().endswith(FONT_EXTENSIONS)
        }
    file_paths = set()
    for dirpath, _, filenames in os.walk(directory):
        for fname in filenames:
            if fname.lower().endswith(FONT_EXTENSIONS):
                file_paths.add(os.path.join(dirpath, fname))
    return file_paths


# %% OS-specific logic


def get_system_font_directories():
    """Get the set of existing system font directories for this platform."""
    if sys.platform.startswith("win"):
        dirs = list(WinFontDirs)
        dirs.append(os.path.join(os.getenv("WINDIR", ""), "Fonts"))
    elif sys.platform.startswith("darwin"):
        dirs = X11FontDirectories + OSXFontDirectories
    else:
        dirs = X11FontDirectories
    return {os.path.abspath(d) for d in dirs if os.path.isdir(d)}


try:
    HOME = os.path.expanduser("~")
except Exception:  # Exceptions thrown by home() are not specified...
    HOME = "/home"  # Just an arbitrary path

WinFontDirs = [
    os.path.join(os.getenv("LOCALAPPDATA", ""), "Microsoft/Windows/Fonts"),
    os.path.join(os.getenv("APPDATA", ""), "Microsoft/Windows/Fonts"),
]

X11FontDirectories = [
    "/usr/X11R6/lib/X11/fonts/TTF/",
    "/usr/X11/lib/X11/fonts",
    "/usr/share/fonts/",
    "/usr/local/share/fonts/",
    os.path.join(os.getenv("XDG_DATA_HOME") or os.path.join(HOME, ".local/share"), "fonts"),
    os.path.join(HOME, ".fonts"),
]

OSXFontDirectories = [
    "/Library/Fonts/",
    "/Network/Library/Fonts/",
    "/System/Library/Fonts/",
    "/opt/local/share/fonts",
    os.path.join(HOME, "Library/Fonts"),
]
