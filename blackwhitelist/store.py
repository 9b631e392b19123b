"""
In-memory black/white list models.

Two entry paths exist on purpose:
  direct add  - free-text input, appended without a duplicate check
  preset add  - picked from the preset catalog, skipped if already listed

Blacklist positions handed to delete_entries() refer to the tag-sorted view
shown to the user, not to insertion order. Whitelist positions are plain
insertion order.
"""
import logging
from typing import Iterable, List, Optional, Sequence

from .events import ListEventBus
from .schema import BlacklistEntry, WhitelistEntry, PresetCategory, ListEvent, normalize_tag

logger = logging.getLogger(__name__)


def _valid_positions(positions: Iterable[int], size: int) -> List[int]:
    """Drop out-of-range positions; negative ones never wrap around."""
    return sorted({p for p in positions if 0 <= p < size})


class BlacklistModel:
    """Blacklisted stores, the hashtag menu, and the preset categories."""

    def __init__(
        self,
        preset_categories: Sequence[PresetCategory] = (),
        events: Optional[ListEventBus] = None,
    ):
        self._entries: List[BlacklistEntry] = []
        self._preset_categories = tuple(preset_categories)
        self.events = events

        # Hashtag menu starts with the preset labels, in table order
        self._tag_set: List[str] = []
        for category in self._preset_categories:
            if category.label not in self._tag_set:
                self._tag_set.append(category.label)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> List[BlacklistEntry]:
        """Entries in insertion order."""
        return list(self._entries)

    @property
    def tag_set(self) -> List[str]:
        return list(self._tag_set)

    @property
    def preset_categories(self) -> List[PresetCategory]:
        return list(self._preset_categories)

    def _emit(self, event: ListEvent, **kwargs) -> None:
        if self.events is not None:
            self.events.emit(event, list_name="blacklist", **kwargs)

    def _append(self, entry: BlacklistEntry) -> None:
        self._entries.append(entry)
        logger.debug(f"Blacklisted {entry.name!r} under {entry.tag}")
        self._emit(ListEvent.ENTRY_ADDED, entry=entry)

    def add_entry(self, name: str, tag: str) -> Optional[BlacklistEntry]:
        """Direct add from free text. Duplicates are allowed; empty names are ignored."""
        if not name:
            return None
        entry = BlacklistEntry(name=name, tag=tag)
        self._append(entry)
        return entry

    def add_from_preset(self, entry: BlacklistEntry) -> bool:
        """Preset add. Returns False for an empty name or an already listed (name, tag)."""
        if not entry.name:
            return False
        if entry in self._entries:
            logger.debug(f"Skipping preset {entry.name!r} {entry.tag}: already listed")
            return False
        self._append(entry)
        return True

    def add_from_category(self, category: PresetCategory, name: str) -> bool:
        """Import a single member of a preset category."""
        return self.add_from_preset(BlacklistEntry(name=name, tag=category.label))

    def add_all_from_category(self, category: PresetCategory) -> int:
        """'Select all': preset-add every member in listed order. Returns how many were added."""
        added = 0
        for entry in category.to_entries():
            if self.add_from_preset(entry):
                added += 1
        return added

    def add_custom_tag(self, raw_label: str) -> Optional[str]:
        """
        Add a user-defined hashtag to the menu.

        Returns the normalized label (e.g. "food" -> "#food") so the caller
        can select it, or None when the label is empty or already known.
        """
        if not raw_label:
            return None
        label = normalize_tag(raw_label)
        if label in self._tag_set:
            return None
        self._tag_set.append(label)
        logger.debug(f"Added hashtag {label}")
        self._emit(ListEvent.TAG_ADDED, tag=label)
        return label

    def list_entries_sorted_by_tag(self) -> List[BlacklistEntry]:
        """Display order: ascending by tag, insertion order among equal tags."""
        return sorted(self._entries, key=lambda e: e.tag)

    def delete_entries(self, positions: Iterable[int]) -> int:
        """
        Delete entries by their position in the tag-sorted view.

        The view is recomputed here so positions map onto the current list.
        Entries are removed by identity, so deleting one of two duplicates
        leaves the other in place. Out-of-range positions are ignored.
        """
        view = self.list_entries_sorted_by_tag()
        targets = {id(view[p]) for p in _valid_positions(positions, len(view))}
        if not targets:
            return 0

        removed = [e for e in self._entries if id(e) in targets]
        self._entries = [e for e in self._entries if id(e) not in targets]
        logger.debug(f"Deleted {len(removed)} blacklist entries")
        self._emit(ListEvent.ENTRIES_DELETED, entries=removed)
        return len(removed)


class WhitelistModel:
    """Whitelisted store names and the preset names offered for import."""

    def __init__(
        self,
        preset_items: Sequence[str] = (),
        events: Optional[ListEventBus] = None,
    ):
        self._entries: List[WhitelistEntry] = []
        self._preset_items = tuple(preset_items)
        self.events = events

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> List[str]:
        """Store names in insertion order."""
        return [e.name for e in self._entries]

    @property
    def preset_items(self) -> List[str]:
        return list(self._preset_items)

    def _emit(self, event: ListEvent, **kwargs) -> None:
        if self.events is not None:
            self.events.emit(event, list_name="whitelist", **kwargs)

    def _append(self, name: str) -> WhitelistEntry:
        entry = WhitelistEntry(name=name)
        self._entries.append(entry)
        logger.debug(f"Whitelisted {name!r}")
        self._emit(ListEvent.ENTRY_ADDED, entry=entry)
        return entry

    def add_entry(self, name: str) -> Optional[WhitelistEntry]:
        """Direct add from free text. Duplicates are allowed; empty names are ignored."""
        if not name:
            return None
        return self._append(name)

    def add_from_preset(self, name: str) -> bool:
        """Preset add. Returns False for an empty or already listed name."""
        if not name:
            return False
        if name in self.entries:
            logger.debug(f"Skipping preset {name!r}: already listed")
            return False
        self._append(name)
        return True

    def delete_entries(self, positions: Iterable[int]) -> int:
        """Delete entries by insertion-order position. Out-of-range positions are ignored."""
        doomed = _valid_positions(positions, len(self._entries))
        if not doomed:
            return 0

        removed = [self._entries[p] for p in doomed]
        for p in reversed(doomed):
            del self._entries[p]
        logger.debug(f"Deleted {len(removed)} whitelist entries")
        self._emit(ListEvent.ENTRIES_DELETED, entries=removed)
        return len(removed)
