"""Shared test fixtures for the black/white list models."""

import sys
from pathlib import Path

import pytest

# Ensure the package is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from blackwhitelist.events import ListEventBus
from blackwhitelist.presets import load_presets
from blackwhitelist.schema import PresetCategory
from blackwhitelist.store import BlacklistModel, WhitelistModel


@pytest.fixture
def catalog():
    return load_presets()


@pytest.fixture
def bus():
    return ListEventBus()


@pytest.fixture
def blacklist(catalog, bus):
    return BlacklistModel(catalog.categories, events=bus)


@pytest.fixture
def whitelist(catalog, bus):
    return WhitelistModel(catalog.whitelist_items, events=bus)


@pytest.fixture
def food_category():
    return PresetCategory(label="#food-safety", members=("ShopA", "ShopB", "ShopC"))
