"""
Black/white list schema.

Blacklist entries carry a store name plus a hashtag; whitelist entries are
plain store names. Entry ids are opaque and never take part in equality, so
two entries with the same name and tag are duplicates.
"""
from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, Any, Iterator, Tuple
import uuid

TAG_PREFIX = "#"


def _new_id() -> str:
    return uuid.uuid4().hex


def normalize_tag(raw: str) -> str:
    """Prefix a hashtag label with '#' unless it already has one."""
    if raw.startswith(TAG_PREFIX):
        return raw
    return TAG_PREFIX + raw


class ListEvent(Enum):
    """Change notifications emitted by the list models."""
    ENTRY_ADDED = "entry_added"
    ENTRIES_DELETED = "entries_deleted"
    TAG_ADDED = "tag_added"


@dataclass(frozen=True)
class BlacklistEntry:
    """A blacklisted store and the hashtag it was filed under."""
    name: str
    tag: str
    entry_id: str = field(default_factory=_new_id, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"entry_id": self.entry_id, "name": self.name, "tag": self.tag}


@dataclass(frozen=True)
class WhitelistEntry:
    """A whitelisted store."""
    name: str
    entry_id: str = field(default_factory=_new_id, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"entry_id": self.entry_id, "name": self.name}


@dataclass(frozen=True)
class PresetCategory:
    """A built-in hashtag with the sample stores offered for import."""
    label: str
    members: Tuple[str, ...] = ()

    def to_entries(self) -> Iterator[BlacklistEntry]:
        """Yield one fresh entry per member, in listed order."""
        for member in self.members:
            yield BlacklistEntry(name=member, tag=self.label)

    def __contains__(self, name: str) -> bool:
        return name in self.members
