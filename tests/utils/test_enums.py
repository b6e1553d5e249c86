from pytest import raises

import glyphlayout
from glyphlayout.utils.enums import Enum, HorizontalAlign, LineHeightMode


def test_enums():
    class MyOption(Enum):
        auto = "auto"  # fields map to str or int
        some_attr = "some-attr"
        foo = None  # value is the same as the key

    # Use dir() to get an (alphabetic) list of keys
    assert dir(MyOption) == ["auto", "foo", "some_attr"]

    # Iterate over the object to get a list of values, in original order
    assert list(MyOption) == ["auto", "some-attr", "foo"]

    assert MyOption.some_attr == "some-attr"
    assert MyOption["some_attr"] == "some-attr"

    # Enums are 'immutable'
    with raises(RuntimeError):
        MyOption.auto = "foo"


def test_horizontal_align():
    assert list(HorizontalAlign) == ["left", "center", "right"]
    assert HorizontalAlign.center == "center"
    assert HorizontalAlign["right"] == "right"
    assert glyphlayout.HorizontalAlign is HorizontalAlign


def test_line_height_mode():
    assert list(LineHeightMode) == ["font_default", "ratio", "tight_fit"]
    assert LineHeightMode.tight_fit == "tight_fit"
    assert glyphlayout.LineHeightMode is LineHeightMode
