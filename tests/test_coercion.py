"""
Tests for value coercion.
"""

import pytest

from lintopts.config.coercion import coerce_value
from lintopts.core.errors import TypeMismatchError
from lintopts.core.options import lookup


class TestBoolean:
    """BOOLEAN options."""

    def test_absent_value_means_true(self, white):
        assert coerce_value(white, None) is True

    @pytest.mark.parametrize("raw", ["true", "TRUE", " yes ", "on", "1"])
    def test_true_words(self, white, raw):
        assert coerce_value(white, raw) is True

    @pytest.mark.parametrize("raw", ["false", "No", "off", "0"])
    def test_false_words(self, white, raw):
        assert coerce_value(white, raw) is False

    def test_native_bool(self, white):
        assert coerce_value(white, False) is False

    @pytest.mark.parametrize("raw", ["maybe", "", 2, 1.0, ["true"]])
    def test_rejects(self, white, raw):
        with pytest.raises(TypeMismatchError) as exc:
            coerce_value(white, raw)
        assert exc.value.option is white
        assert exc.value.value == raw


class TestInteger:
    """INTEGER options."""

    def test_text(self, indent):
        assert coerce_value(indent, "4") == 4

    def test_text_with_whitespace(self, indent):
        assert coerce_value(indent, " 12 ") == 12

    def test_native_int(self):
        assert coerce_value(lookup("maxerr"), 50) == 50

    def test_signed_text(self, indent):
        assert coerce_value(indent, "+3") == 3

    def test_negative_is_not_range_checked(self):
        assert coerce_value(lookup("maxlen"), "-1") == -1

    @pytest.mark.parametrize("raw", ["four", "4.5", "", "0x10", "1_0", "\u0664", "\uff14", "4 2"])
    def test_rejects_text(self, indent, raw):
        with pytest.raises(TypeMismatchError, match="not a number"):
            coerce_value(indent, raw)

    @pytest.mark.parametrize("raw", [None, True, 4.0, [4]])
    def test_rejects_other(self, indent, raw):
        with pytest.raises(TypeMismatchError):
            coerce_value(indent, raw)

    def test_message_names_option(self, indent):
        with pytest.raises(TypeMismatchError) as exc:
            coerce_value(indent, "wide")
        assert "indent" in str(exc.value)
        assert "an integer" in str(exc.value)


class TestStringList:
    """STRING_LIST options."""

    def test_comma_delimited(self, predef):
        assert coerce_value(predef, "jQuery, window,$") == ("jQuery", "window", "$")

    def test_empty_tokens_dropped(self, predef):
        assert coerce_value(predef, "a,,b,") == ("a", "b")

    def test_single_token(self, predef):
        assert coerce_value(predef, "YUI") == ("YUI",)

    def test_native_list(self, predef):
        assert coerce_value(predef, ["a", " b "]) == ("a", "b")

    def test_order_preserved(self, predef):
        assert coerce_value(predef, "z,a,m") == ("z", "a", "m")

    @pytest.mark.parametrize("raw", [None, 3, True, {"a": 1}])
    def test_rejects(self, predef, raw):
        with pytest.raises(TypeMismatchError):
            coerce_value(predef, raw)

    def test_rejects_non_string_items(self, predef):
        with pytest.raises(TypeMismatchError, match="list items must be names"):
            coerce_value(predef, ["a", 1])
