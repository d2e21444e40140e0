"""Unit tests for filter name normalization."""

import pytest

from liquid_core.filterbank import is_filter_name, normalize, resolve_alias


class TestNormalize:
    """Tests for normalize."""

    @pytest.mark.parametrize(
        "raw",
        ["strip_html", "Strip_HTML", "STRIPHTML", "striphtml", "_strip__html_"],
    )
    def test_spellings_share_a_key(self, raw):
        """Case and underscore placement do not change the key."""
        assert normalize(raw) == "striphtml"

    def test_empty_name(self):
        """Empty input yields an empty key."""
        assert normalize("") == ""

    def test_other_characters_are_kept(self):
        """Only underscores are separators."""
        assert normalize("strip-html") == "strip-html"
        assert normalize("a.b c") == "a.b c"


class TestResolveAlias:
    """Tests for the reserved-name rewrite."""

    def test_default_is_rewritten(self):
        """The exact name 'default' maps to '_default'."""
        assert resolve_alias("default") == "_default"

    @pytest.mark.parametrize("name", ["Default", "DEFAULT", "default_", "defaults", "upcase"])
    def test_other_names_untouched(self, name):
        """Only an exact, case-sensitive match is rewritten."""
        assert resolve_alias(name) == name


class TestIsFilterName:
    """Tests for member name visibility."""

    def test_public_names(self):
        assert is_filter_name("upcase")
        assert is_filter_name("Mixed_Case")

    def test_private_names(self):
        assert not is_filter_name("_helper")
        assert not is_filter_name("__init__")
        assert not is_filter_name("__call__")

    def test_alias_target_is_public(self):
        """_default implements the 'default' filter and must be registered."""
        assert is_filter_name("_default")
