"""Test the option and Lua API catalogs."""

import dataclasses

import pytest

from mpvex_editor.completions.catalog import Catalog
from mpvex_editor.completions.lua_api import API_CATALOG, OBSERVABLE_PROPERTIES, build_api_catalog
from mpvex_editor.completions.models import ConfigOption
from mpvex_editor.completions.options import OPTION_CATALOG, build_option_catalog


def test_option_catalog_contents():
    """Test that the option catalog is complete and keys are unique."""
    catalog = OPTION_CATALOG.get()
    keys = [option.key for option in catalog]

    assert len(catalog) == 184
    assert all(keys)
    assert len(set(keys)) == len(keys)


def test_option_categories_in_order():
    """Test that categories keep their order and concatenate into the search space."""
    catalog = OPTION_CATALOG.get()
    assert catalog.category_names == [
        "general", "video", "audio", "subtitle", "osd", "cache",
        "hdr", "gpu-backend", "screenshot", "window", "input",
    ]

    flattened = [entry for _, entries in catalog.categories() for entry in entries]
    assert list(catalog.entries) == flattened
    assert catalog.category("video")[0].key == "vo"
    assert catalog.category("gpu-backend")[0].key == "vulkan-async-compute"
    assert catalog.category("nonexistent") is None


def test_api_catalog_contents():
    """Test that the API catalog is complete and names are unique across groups."""
    catalog = API_CATALOG.get()
    names = [api.name for api in catalog]

    assert len(catalog) == 62
    assert all(names)
    assert len(set(names)) == len(names)
    assert catalog.category_names == ["core", "log", "utility", "option", "snippet"]
    assert catalog.category("log")[0].name == "mp.msg.fatal"
    assert catalog.category("snippet")[0].name == "require 'mp'"


def test_observable_properties_unique():
    """Test that the observable property list has no duplicates."""
    assert len(OBSERVABLE_PROPERTIES) == 50
    assert len(set(OBSERVABLE_PROPERTIES)) == len(OBSERVABLE_PROPERTIES)
    assert "path" in OBSERVABLE_PROPERTIES
    assert "pause" in OBSERVABLE_PROPERTIES


def test_catalogs_are_memoized():
    """Test that every access returns the same catalog instance."""
    assert OPTION_CATALOG.get() is OPTION_CATALOG.get()
    assert API_CATALOG.get() is API_CATALOG.get()

    # Builders create fresh but equal catalogs
    assert build_option_catalog() is not OPTION_CATALOG.get()
    assert list(build_option_catalog()) == list(OPTION_CATALOG.get())
    assert list(build_api_catalog()) == list(API_CATALOG.get())


def test_catalog_entries_are_immutable():
    """Test that entries cannot be modified after construction."""
    option = OPTION_CATALOG.get().entries[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        option.key = "changed"
    assert isinstance(OPTION_CATALOG.get().entries, tuple)


def test_custom_catalog():
    """Test building a catalog from arbitrary groups."""
    catalog = Catalog([
        ("first", [ConfigOption("a", "first option")]),
        ("second", (ConfigOption("b", "second option"), ConfigOption("c", "third option"))),
    ])
    assert [option.key for option in catalog] == ["a", "b", "c"]
    assert len(catalog.category("second")) == 2
