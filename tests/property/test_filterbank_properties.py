"""Property-based tests for the filter bank.

Tests name normalization, pass-through of unknown filters, and argument order.
"""

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from liquid_core.errors import FilterRegistrationError
from liquid_core.filterbank import Filterbank, normalize

filter_names = st.from_regex(r"^[A-Za-z][A-Za-z0-9_]{0,15}$", fullmatch=True)
values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.text(max_size=20),
    st.lists(st.integers(), max_size=5),
    st.dictionaries(st.text(max_size=5), st.integers(), max_size=5),
)


def respell(name: str, data: st.DataObject) -> str:
    """Change case and underscore placement without changing the canonical key."""
    chars = []
    for char in name.replace("_", ""):
        if data.draw(st.booleans()):
            chars.append("_")
        chars.append(char.upper() if data.draw(st.booleans()) else char.lower())
    return "".join(chars)


@pytest.mark.property
class TestNormalizeProperties:
    """Property tests for normalize."""

    @given(st.text(max_size=30))
    @settings(max_examples=100)
    def test_idempotent(self, name):
        assert normalize(normalize(name)) == normalize(name)

    @given(st.text(max_size=30))
    @settings(max_examples=100)
    def test_no_separators_remain(self, name):
        assert "_" not in normalize(name)

    @given(filter_names, st.data())
    @settings(max_examples=100)
    def test_respelling_keeps_key(self, name, data):
        assert normalize(respell(name, data)) == normalize(name)


@pytest.mark.property
class TestInvokeProperties:
    """Property tests for Filterbank.invoke."""

    @given(filter_names, values)
    @settings(max_examples=100)
    def test_unknown_filter_passes_value_through(self, name, value):
        bank = Filterbank(packs=())
        assert bank.invoke(name, value, []) is value

    @given(filter_names, st.data(), values)
    @settings(max_examples=100)
    def test_any_spelling_reaches_callback(self, name, data, value):
        bank = Filterbank(packs=())
        bank.add_filter(name, lambda v: ("hit", v))
        assert bank.invoke(respell(name, data), value) == ("hit", value)

    @given(values, st.lists(values, max_size=5))
    @settings(max_examples=100)
    def test_value_precedes_args(self, value, args):
        bank = Filterbank(packs=())
        bank.add_filter("collect", lambda *received: received)
        assert bank.invoke("collect", value, args) == (value, *args)

    @given(st.one_of(st.integers(), st.floats(allow_nan=False), st.none(), st.booleans()))
    @settings(max_examples=50)
    def test_scalars_rejected_without_side_effects(self, bad):
        bank = Filterbank()
        before = bank.list_filters()
        with pytest.raises(FilterRegistrationError):
            bank.add_filter(bad)
        assert bank.list_filters() == before

    @given(filter_names, values)
    @settings(max_examples=50)
    def test_last_registration_wins(self, name, value):
        assume(normalize(name) != "")
        bank = Filterbank(packs=())
        bank.add_filter(name, lambda v: "first")
        bank.add_filter(name.upper(), lambda v: "second")
        assert bank.invoke(name, value) == "second"
