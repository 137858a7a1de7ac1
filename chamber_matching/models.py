# chamber_matching/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .config import (
    ALLOW_OVERLAP_DEFAULT,
    LOBBY_ROOM_ID,
    LOBBY_HOST_ID,
    TARGET_ASSIGNEES_DEFAULT,
)


class Role(str, Enum):
    HOST = "host"
    MEMBER = "member"
    GUEST = "guest"


@dataclass(frozen=True)
class Person:
    id: str
    name: str
    industry: str
    role: Role

    @property
    def industry_key(self) -> str:
        """Trimmed, lowercased industry used for all comparisons."""
        return self.industry.strip().lower()


@dataclass(frozen=True)
class CategoryEntry:
    category: str
    keywords: Tuple[str, ...]
    opportunities: Tuple[str, ...] = ()
    target_categories: Tuple[str, ...] = ()   # directional


@dataclass
class CategoryIndex:
    """
    keyword -> CategoryEntry lookup plus the entries in table order.
    A keyword belongs to the first entry that declared it.
    """
    by_keyword: Dict[str, CategoryEntry] = field(default_factory=dict)
    entries: List[CategoryEntry] = field(default_factory=list)

    def add(self, entry: CategoryEntry) -> None:
        self.entries.append(entry)
        for kw in entry.keywords:
            self.by_keyword.setdefault(kw, entry)

    def get(self, category: str) -> Optional[CategoryEntry]:
        for entry in self.entries:
            if entry.category == category:
                return entry
        return None

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class Room:
    id: str
    leader: Person
    members: List[Person] = field(default_factory=list)
    guests: List[Person] = field(default_factory=list)
    conflicts: List[str] = field(default_factory=list)   # person IDs
    synergies: List[str] = field(default_factory=list)   # person IDs

    @property
    def is_lobby(self) -> bool:
        return self.id == LOBBY_ROOM_ID

    @property
    def has_placeholder_leader(self) -> bool:
        return self.leader.id == LOBBY_HOST_ID

    def occupants(self) -> List[Person]:
        """Leader, then members, then guests."""
        return [self.leader, *self.members, *self.guests]

    def assignees(self) -> List[Person]:
        return [*self.members, *self.guests]

    @property
    def assignee_count(self) -> int:
        return len(self.members) + len(self.guests)

    def occupant_ids(self) -> List[str]:
        return [p.id for p in self.occupants()]


@dataclass
class GroupingSettings:
    allow_overlap: bool = ALLOW_OVERLAP_DEFAULT
    target_assignees: int = TARGET_ASSIGNEES_DEFAULT
    category_index: CategoryIndex = field(default_factory=CategoryIndex)

    def validate(self) -> None:
        if not isinstance(self.allow_overlap, bool):
            raise ValueError(
                f"allow_overlap must be a bool, got {self.allow_overlap!r}."
            )
        # bool is an int subclass; reject it explicitly
        if isinstance(self.target_assignees, bool) or not isinstance(self.target_assignees, int):
            raise ValueError(
                f"target_assignees must be an integer, got {self.target_assignees!r}."
            )
        if self.target_assignees < 1:
            raise ValueError(
                f"target_assignees must be a positive integer, got {self.target_assignees}."
            )
        if not isinstance(self.category_index, CategoryIndex):
            raise ValueError("category_index must be a CategoryIndex.")


@dataclass
class Statistics:
    total_people: int
    total_rooms: int
    total_guests: int
    total_members: int
    conflict_count: int
    synergy_count: int
