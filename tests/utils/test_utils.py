import logging

from pytest import raises

from glyphlayout import utils
from glyphlayout.utils import assert_type, logger


def test_assert_type():
    assert_type("x", 3, int)
    assert_type("x", 3, str, int)
    assert_type("x", None, None, int)

    with raises(TypeError) as err:
        assert_type("x", "3", int)
    assert "'x'" in str(err.value)
    assert "int" in str(err.value)
    assert "str" in str(err.value)

    with raises(TypeError) as err:
        assert_type("x", "3", None, int, float)
    assert "int | float or None" in str(err.value)


def test_log_level(monkeypatch):
    level = logger.level
    try:
        monkeypatch.setenv("GLYPHLAYOUT_LOG_LEVEL", "debug")
        utils._set_log_level()
        assert logger.level == logging.DEBUG

        monkeypatch.setenv("GLYPHLAYOUT_LOG_LEVEL", "20")
        utils._set_log_level()
        assert logger.level == logging.INFO

        # An invalid level keeps the default
        monkeypatch.setenv("GLYPHLAYOUT_LOG_LEVEL", "notalevel")
        utils._set_log_level()
        assert logger.level == logging.WARN

        monkeypatch.delenv("GLYPHLAYOUT_LOG_LEVEL")
        utils._set_log_level()
        assert logger.level == logging.WARN
    finally:
        logger.setLevel(level)
