"""
Preset catalog loader.

The catalog is a fixed table read once at startup: an ordered list of
blacklist categories (hashtag + sample stores) and a flat list of whitelist
store names. The bundled copy lives next to this module in presets.yaml.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .errors import PresetError
from .schema import PresetCategory, normalize_tag

logger = logging.getLogger(__name__)

PRESETS_PATH = Path(__file__).parent / "presets.yaml"


@dataclass(frozen=True)
class PresetCatalog:
    """Immutable preset tables for both lists."""
    categories: Tuple[PresetCategory, ...] = ()
    whitelist_items: Tuple[str, ...] = ()

    @property
    def labels(self) -> List[str]:
        return [c.label for c in self.categories]

    def find_category(self, label: str) -> Optional[PresetCategory]:
        """Look up a category by label; the '#' prefix is optional."""
        label = normalize_tag(label)
        for category in self.categories:
            if category.label == label:
                return category
        return None


def _parse_category(raw: Any, position: int) -> PresetCategory:
    if not isinstance(raw, dict):
        raise PresetError(f"Blacklist preset #{position} must be a mapping, got {type(raw).__name__}")

    label = raw.get("category")
    if not isinstance(label, str) or not label.strip("#"):
        raise PresetError(f"Blacklist preset #{position} has no category label")

    items = raw.get("items", [])
    if not isinstance(items, list) or not all(isinstance(i, str) and i for i in items):
        raise PresetError(f"Category '{label}' items must be a list of non-empty strings")

    return PresetCategory(label=normalize_tag(label), members=tuple(items))


def parse_presets(data: Dict[str, Any]) -> PresetCatalog:
    """Validate a decoded catalog mapping and build a PresetCatalog."""
    if not isinstance(data, dict):
        raise PresetError("Preset catalog must be a mapping with 'blacklist' and 'whitelist' keys")

    raw_categories = data.get("blacklist") or []
    if not isinstance(raw_categories, list):
        raise PresetError("'blacklist' must be a list of categories")

    categories = []
    seen = set()
    for position, raw in enumerate(raw_categories):
        category = _parse_category(raw, position)
        if category.label in seen:
            raise PresetError(f"Duplicate preset category: {category.label}")
        seen.add(category.label)
        categories.append(category)

    whitelist = data.get("whitelist") or []
    if not isinstance(whitelist, list) or not all(isinstance(i, str) and i for i in whitelist):
        raise PresetError("'whitelist' must be a list of non-empty store names")

    return PresetCatalog(categories=tuple(categories), whitelist_items=tuple(whitelist))


def load_presets(path: Optional[str] = None) -> PresetCatalog:
    """Load the preset catalog from YAML (the bundled file by default)."""
    preset_path = Path(path) if path else PRESETS_PATH
    try:
        with open(preset_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise PresetError(f"Cannot read preset catalog {preset_path}: {e}") from e
    except yaml.YAMLError as e:
        raise PresetError(f"Invalid YAML in preset catalog {preset_path}: {e}") from e

    catalog = parse_presets(data)
    logger.info(
        f"Loaded {len(catalog.categories)} blacklist categories and "
        f"{len(catalog.whitelist_items)} whitelist presets from {preset_path}"
    )
    return catalog
