"""
Session wiring.

One BlacklistModel and one WhitelistModel per app session, sharing an event
bus. The session is passed explicitly to whatever screen needs it.
"""
from dataclasses import dataclass
from typing import Optional

from .config import Config
from .events import ListEventBus
from .presets import PresetCatalog, load_presets
from .store import BlacklistModel, WhitelistModel


@dataclass
class ListSession:
    """The models owned by one running app."""
    blacklist: BlacklistModel
    whitelist: WhitelistModel
    catalog: PresetCatalog
    events: ListEventBus


def build_session(config: Optional[Config] = None, catalog: Optional[PresetCatalog] = None) -> ListSession:
    """Construct fresh, empty models seeded from the preset catalog."""
    if catalog is None:
        config = config or Config()
        catalog = load_presets(config.presets_path)

    events = ListEventBus()
    return ListSession(
        blacklist=BlacklistModel(catalog.categories, events=events),
        whitelist=WhitelistModel(catalog.whitelist_items, events=events),
        catalog=catalog,
        events=events,
    )
