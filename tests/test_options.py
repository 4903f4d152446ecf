"""
Tests for the option catalog.
"""

import threading

import pytest

from lintopts.core import options as catalog
from lintopts.core.errors import UnknownOptionError
from lintopts.core.options import (
    OptionDescriptor,
    ValueType,
    curated_subset,
    describe,
    is_known,
    list_all,
    lookup,
    maximum_name_length,
)

GOOD_PARTS = {"WHITE", "ONEVAR", "UNDEF", "NEWCAP", "NOMEN", "REGEXP", "PLUSPLUS", "BITWISE"}


class TestListAll:
    """Enumeration of the catalog."""

    def test_declaration_order(self):
        idents = [o.identifier for o in list_all()]
        assert idents[0] == "ADSAFE"
        assert idents[-1] == "WINDOWS"
        assert idents == sorted(idents)

    def test_option_count(self):
        assert len(list_all()) == 31

    def test_identifiers_unique(self):
        idents = [o.identifier for o in list_all()]
        assert len(idents) == len(set(idents))

    def test_repeatable(self):
        assert list_all() == list_all()

    def test_table_is_immutable(self):
        assert isinstance(list_all(), tuple)
        with pytest.raises(TypeError):
            catalog.CATALOG["NEW"] = OptionDescriptor("NEW", "x")

    def test_descriptor_is_frozen(self, white):
        with pytest.raises(AttributeError):
            white.description = "changed"


class TestLookup:
    """Case-insensitive lookup by name."""

    def test_every_identifier_resolves(self):
        for option in list_all():
            assert lookup(option.identifier) is option

    def test_canonical_name_round_trip(self):
        for option in list_all():
            assert lookup(option.canonical_name) is option

    def test_case_insensitive(self):
        assert lookup("white") is lookup("WHITE") is lookup("White")

    def test_unknown_name(self):
        with pytest.raises(UnknownOptionError) as exc:
            lookup("not-a-real-option")
        assert exc.value.name == "not-a-real-option"
        assert "not-a-real-option" in str(exc.value)

    def test_empty_name(self):
        with pytest.raises(UnknownOptionError):
            lookup("")

    def test_non_ascii_never_matches(self):
        """Unicode case folding must not turn 'ı' into 'I'."""
        assert "ındent".upper() == "INDENT"
        with pytest.raises(UnknownOptionError):
            lookup("ındent")

    def test_non_string_name(self):
        with pytest.raises(UnknownOptionError):
            lookup(4)

    def test_descriptor_passes_through(self, white):
        assert lookup(white) is white

    def test_is_known(self):
        assert is_known("maxlen")
        assert not is_known("maxlength")


class TestMaximumNameLength:
    """Width used for aligned display."""

    def test_longest_identifier(self):
        assert maximum_name_length() == 8

    def test_matches_catalog(self):
        assert maximum_name_length() == max(len(o.identifier) for o in list_all())

    def test_longest_names(self):
        longest = {o.identifier for o in list_all() if len(o.identifier) == 8}
        assert longest == {"CONTINUE", "FRAGMENT", "PASSFAIL", "PLUSPLUS"}


class TestCuratedSubset:
    """The Good Parts."""

    def test_exact_members(self):
        assert {o.identifier for o in curated_subset()} == GOOD_PARTS

    def test_size(self):
        assert len(curated_subset()) == 8

    def test_strict_subset(self):
        everything = set(list_all())
        assert curated_subset() < everything

    def test_same_set_every_call(self):
        assert curated_subset() is curated_subset()
        assert isinstance(curated_subset(), frozenset)

    def test_all_boolean(self):
        assert all(o.value_type is ValueType.BOOLEAN for o in curated_subset())


class TestDescribe:
    """name[description] rendering."""

    def test_white(self, white):
        assert describe(white) == "white[If strict whitespace rules apply]"

    def test_str_matches_describe(self, white):
        assert str(white) == describe(white)

    def test_quotes_kept(self):
        assert describe(lookup("strict")) == 'strict[Require the "use strict"; pragma]'

    def test_canonical_name_lowercase(self):
        for option in list_all():
            assert option.canonical_name == option.identifier.lower()
            assert option.canonical_name.isascii()


class TestValueTypes:
    """Declared value type of each option."""

    def test_integers(self):
        for name in ("INDENT", "MAXERR", "MAXLEN"):
            assert lookup(name).value_type is ValueType.INTEGER

    def test_string_list(self, predef):
        assert predef.value_type is ValueType.STRING_LIST

    def test_everything_else_boolean(self):
        special = {"INDENT", "MAXERR", "MAXLEN", "PREDEF"}
        for option in list_all():
            if option.identifier not in special:
                assert option.value_type is ValueType.BOOLEAN, option.identifier


class TestCatalogBuild:
    """Validation performed while the catalog is built."""

    def test_duplicate_rejected(self):
        entries = [OptionDescriptor("WHITE", "a"), OptionDescriptor("WHITE", "b")]
        with pytest.raises(ValueError, match="Duplicate"):
            catalog._build_catalog(entries)

    def test_lowercase_identifier_rejected(self):
        with pytest.raises(ValueError, match="Invalid option identifier"):
            catalog._build_catalog([OptionDescriptor("white", "a")])

    def test_max_length_from_entries(self):
        _, _, max_len = catalog._build_catalog([OptionDescriptor("AB", "a"), OptionDescriptor("ABCD", "b")])
        assert max_len == 4


class TestIdempotence:
    """Queries have no hidden state."""

    def test_interleaved_calls(self):
        first = (list_all(), maximum_name_length(), curated_subset())
        curated_subset()
        maximum_name_length()
        list_all()
        assert (list_all(), maximum_name_length(), curated_subset()) == first

    def test_concurrent_lookups(self):
        results = []

        def worker():
            results.append(tuple(lookup(o.canonical_name) for o in list_all()))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(set(results)) == 1
