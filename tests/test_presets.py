"""Tests for the locale presets and their registry."""

import random

import pytest

from weighted_names import FullNameList, NameList
from weighted_names.presets import available_locales, format_full_name, get_locale, jp, ru, us

LOCALE_MODULES = [jp, ru, us]


class TestPresetModules:
    """Module-level factory functions."""

    @pytest.mark.parametrize("module", LOCALE_MODULES)
    def test_factories_return_twenty_names(self, module):
        given = module.given_names()
        family = module.family_names()
        assert isinstance(given, NameList)
        assert isinstance(family, NameList)
        assert len(given) == 20
        assert len(family) == 20
        assert all(w > 0 for w in given.weights + family.weights)

    @pytest.mark.parametrize("module", LOCALE_MODULES)
    def test_full_names_sample(self, module):
        full = module.full_names()
        assert isinstance(full, FullNameList)
        given, family = full.sample(random.Random(0))
        assert given in full.given_names.names
        assert family in full.family_names.names

    def test_each_call_builds_fresh_instance(self):
        first = us.given_names()
        first.insert("Zebediah", 1000.0)
        second = us.given_names()
        assert first is not second
        assert len(second) == 20
        assert "Zebediah" not in second.names

    def test_us_top_name_dominates_tail(self):
        counts = {}
        for name in us.given_names().sample_batch(random.Random(12), 20000):
            counts[name] = counts.get(name, 0) + 1
        assert counts["James"] > counts["Dorothy"] * 3


class TestRegistry:
    """Locale lookup."""

    def test_available_locales(self):
        assert available_locales() == ["jp", "ru", "us"]

    def test_get_locale_case_insensitive(self):
        preset = get_locale(" JP ")
        assert preset.code == "jp"
        assert preset.display_name == "Japan"
        assert preset.family_first is True

    def test_unknown_locale(self):
        with pytest.raises(KeyError, match="unknown locale"):
            get_locale("xx")

    def test_preset_sources_recorded(self):
        for code in available_locales():
            preset = get_locale(code)
            assert preset.given_source.startswith("https://")
            assert preset.family_source.startswith("https://")


class TestFormatting:
    def test_given_first(self):
        assert format_full_name(("John", "Smith")) == "John Smith"

    def test_family_first(self):
        assert format_full_name(("Kenji", "Sato"), family_first=True) == "Sato Kenji"

    def test_custom_separator(self):
        assert format_full_name(("Ivan", "Petrov"), separator="_") == "Ivan_Petrov"
