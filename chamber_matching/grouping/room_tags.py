# chamber_matching/grouping/room_tags.py
from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional

from ..models import CategoryEntry, CategoryIndex, Person, Room
from .categories import find_category, industry_matches, is_compatible


def _taggable(room: Room) -> List[Person]:
    """Occupants in leader/members/guests order, minus a placeholder leader."""
    people = room.occupants()
    if room.has_placeholder_leader:
        people = people[1:]
    return people


def update_room_tags(room: Room, index: CategoryIndex) -> Room:
    """
    Recompute conflict and synergy ids for every occupant of `room`.

    Conflict: another occupant has the same (trimmed, case-insensitive)
    industry. Synergy: the occupant has a category, and another occupant
    either keyword-matches it or belongs to one of its target categories.

    Returns a new Room; the input is left untouched.
    """
    people = _taggable(room)
    categories: Dict[str, Optional[CategoryEntry]] = {
        p.id: find_category(p.industry, index) for p in people
    }

    conflicts: List[str] = []
    synergies: List[str] = []

    for p1 in people:
        others = [p2 for p2 in people if p2.id != p1.id]

        key = p1.industry_key
        if key and any(p2.industry_key == key for p2 in others):
            conflicts.append(p1.id)

        entry = categories[p1.id]
        if entry is None:
            continue
        if any(is_compatible(entry, p2.industry, categories[p2.id]) for p2 in others):
            synergies.append(p1.id)

    return replace(
        room,
        members=list(room.members),
        guests=list(room.guests),
        conflicts=conflicts,
        synergies=synergies,
    )


def explain_matches(room: Room, person: Person, index: CategoryIndex) -> List[Dict[str, Any]]:
    """
    List who `person` has synergy with inside `room`, and why.

    Each item: {'partner': Person, 'reason': str, 'opportunities': tuple}.
    Same-category hits take precedence over cross-category ones.
    """
    entry = find_category(person.industry, index)
    if entry is None:
        return []

    matches: List[Dict[str, Any]] = []
    for other in _taggable(room):
        if other.id == person.id:
            continue

        if industry_matches(other.industry, entry):
            reason = f"same category: {entry.category}"
        else:
            other_entry = find_category(other.industry, index)
            if other_entry is None or other_entry.category not in entry.target_categories:
                continue
            reason = f"cross-category: {entry.category} x {other_entry.category}"

        matches.append({
            "partner": other,
            "reason": reason,
            "opportunities": entry.opportunities,
        })

    return matches
