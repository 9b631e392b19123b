"""
Tests for schema types and the preset catalog loader.
"""
import pytest

from blackwhitelist.errors import PresetError
from blackwhitelist.presets import load_presets, parse_presets
from blackwhitelist.schema import BlacklistEntry, WhitelistEntry, PresetCategory, normalize_tag


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Schema
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_entry_equality_ignores_id():
    """Equal name + tag means duplicate, whatever the id"""
    a = BlacklistEntry("ShopA", "#x")
    b = BlacklistEntry("ShopA", "#x")
    assert a.entry_id != b.entry_id
    assert a == b
    assert a != BlacklistEntry("ShopA", "#y")
    assert a != BlacklistEntry("ShopB", "#x")


def test_whitelist_entry_equality_by_name():
    assert WhitelistEntry("Costco") == WhitelistEntry("Costco")


def test_entry_to_dict():
    entry = BlacklistEntry("ShopA", "#x")
    assert entry.to_dict() == {"entry_id": entry.entry_id, "name": "ShopA", "tag": "#x"}


def test_normalize_tag():
    assert normalize_tag("food") == "#food"
    assert normalize_tag("#food") == "#food"


def test_category_is_immutable():
    category = PresetCategory(label="#x", members=("A",))
    with pytest.raises(AttributeError):
        category.members = ("B",)


def test_category_to_entries():
    category = PresetCategory(label="#x", members=("A", "B"))
    entries = list(category.to_entries())
    assert entries == [BlacklistEntry("A", "#x"), BlacklistEntry("B", "#x")]
    assert "A" in category
    assert "Z" not in category


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Bundled catalog
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_bundled_catalog(catalog):
    assert catalog.labels == ["#中國台灣", "#中資", "#食安", "#厭女"]
    assert catalog.categories[0].members == ("L'Oreal", "Estée Lauder", "資生堂")
    assert catalog.whitelist_items == ("全家便利商店", "家樂福", "Costco")


def test_find_category(catalog):
    assert catalog.find_category("#厭女").members == ("麥當勞", "食安店B")
    assert catalog.find_category("厭女") is catalog.find_category("#厭女")
    assert catalog.find_category("#missing") is None


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Custom catalogs
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_load_custom_catalog(tmp_path):
    path = tmp_path / "presets.yaml"
    path.write_text(
        "blacklist:\n"
        "  - category: food-safety\n"
        "    items: [ShopA, ShopB]\n"
        "whitelist: [Costco]\n",
        encoding="utf-8",
    )
    catalog = load_presets(str(path))
    assert catalog.labels == ["#food-safety"]
    assert catalog.whitelist_items == ("Costco",)


def test_load_empty_file(tmp_path):
    path = tmp_path / "presets.yaml"
    path.write_text("", encoding="utf-8")
    catalog = load_presets(str(path))
    assert catalog.categories == ()
    assert catalog.whitelist_items == ()


def test_load_missing_file(tmp_path):
    with pytest.raises(PresetError):
        load_presets(str(tmp_path / "nope.yaml"))


def test_load_invalid_yaml(tmp_path):
    path = tmp_path / "presets.yaml"
    path.write_text("blacklist: [unclosed\n", encoding="utf-8")
    with pytest.raises(PresetError):
        load_presets(str(path))


@pytest.mark.parametrize("data", [
    ["not", "a", "mapping"],
    {"blacklist": "nope"},
    {"blacklist": [{"items": ["A"]}]},
    {"blacklist": [{"category": "#", "items": []}]},
    {"blacklist": [{"category": "#x", "items": "A"}]},
    {"blacklist": [{"category": "#x", "items": [1, 2]}]},
    {"blacklist": [{"category": "x"}, {"category": "#x"}]},
    {"whitelist": "Costco"},
    {"blacklist": [{"category": "#x", "items": ["", "A"]}]},
    {"whitelist": ["Costco", ""]},
])
def test_parse_rejects_malformed(data):
    with pytest.raises(PresetError):
        parse_presets(data)
