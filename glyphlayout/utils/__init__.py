"""
Utility functions for glyphlayout.

.. currentmodule:: glyphlayout.utils

.. autosummary::
    :toctree: utils/

    enums
    assert_type

"""

import os
import types
import logging
import inspect

from . import enums  # noqa: F401


logger = logging.getLogger("glyphlayout")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("GLYPHLAYOUT_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except Exception:
            logger.warning(f"Invalid glyphlayout log level: {level}")


_set_log_level()


def assert_type(name, value, *classes):
    """Raise a TypeError pointing at the calling code if value is not
    an instance of any of the given classes. If the first class is None,
    None is accepted as well.
    """
    allow_none = False
    if classes[0] is None:
        if value is None:
            return
        allow_none = True
        classes = classes[1:]

    if not isinstance(value, classes):
        # Point the traceback at the frame of the caller's caller
        f = inspect.currentframe().f_back
        if name:
            f = f.f_back
            if f.f_code.co_name == "__init__" and name in f.f_code.co_varnames:
                f = f.f_back
        tb = types.TracebackType(None, f, f.f_lasti, f.f_lineno)

        msg = "Expected"
        if name:
            msg += f" '{name}' to be"
        class_strings = [cls.__name__ for cls in classes]
        msg += f" an instance of {' | '.join(class_strings)}"
        if allow_none:
            msg += " or None"
        msg += f", but got {value.__class__.__name__} object."

        raise TypeError(msg).with_traceback(tb) from None
