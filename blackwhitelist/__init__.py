# Black/white list management: in-memory store names with category hashtags
#
# Components:
#   schema.py   - Data model (BlacklistEntry, WhitelistEntry, PresetCategory)
#   presets.py  - Built-in preset catalog (presets.yaml)
#   store.py    - BlacklistModel / WhitelistModel
#   events.py   - Change notifications for the presentation layer
#   session.py  - Wires one instance of each model together
#   config.py   - YAML config + logging setup
from .errors import ListError, PresetError, ConfigError
from .schema import BlacklistEntry, WhitelistEntry, PresetCategory, ListEvent, normalize_tag
from .presets import PresetCatalog, load_presets
from .events import ListEventBus
from .store import BlacklistModel, WhitelistModel
from .session import ListSession, build_session
from .config import Config, configure_logging

__all__ = [
    "ListError",
    "PresetError",
    "ConfigError",
    "BlacklistEntry",
    "WhitelistEntry",
    "PresetCategory",
    "ListEvent",
    "normalize_tag",
    "PresetCatalog",
    "load_presets",
    "ListEventBus",
    "BlacklistModel",
    "WhitelistModel",
    "ListSession",
    "build_session",
    "Config",
    "configure_logging",
]
