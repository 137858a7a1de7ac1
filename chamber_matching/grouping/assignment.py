# chamber_matching/grouping/assignment.py
from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from ..config import (
    LOBBY_HOST_ID,
    LOBBY_HOST_NAME,
    LOBBY_ROOM_ID,
    ROOM_ID_PREFIX,
    SCORE_NO_CONFLICT,
    SCORE_OVERLAP_PENALTY,
    SCORE_PER_EXTRA_SEAT,
    SCORE_PER_OPEN_SEAT,
    SCORE_SYNERGY,
)
from ..models import CategoryIndex, GroupingSettings, Person, Role, Room
from .categories import find_category, industry_matches
from .room_tags import update_room_tags

logger = logging.getLogger(__name__)


def _shuffled(people: Sequence[Person], rng: random.Random) -> List[Person]:
    out = list(people)
    rng.shuffle(out)
    return out


def _has_conflict(room: Room, person: Person) -> bool:
    key = person.industry_key
    return bool(key) and any(p.industry_key == key for p in room.occupants())


def _has_placement_synergy(room: Room, person: Person, index: CategoryIndex) -> bool:
    """
    Cheap synergy estimate used while placing: some occupant matches the
    candidate's category, or the two categories target each other in either
    direction. The final room tags are recomputed separately.
    """
    entry = find_category(person.industry, index)
    if entry is None:
        return False

    for other in room.occupants():
        if industry_matches(other.industry, entry):
            return True
        other_entry = find_category(other.industry, index)
        if other_entry is None:
            continue
        if other_entry.category in entry.target_categories:
            return True
        if entry.category in other_entry.target_categories:
            return True
    return False


def score_room(room: Room, person: Person, settings: GroupingSettings) -> Optional[int]:
    """
    Placement score of `person` in `room`, or None when the room is rejected
    (same industry already present and overlap disallowed).
    """
    conflict = _has_conflict(room, person)
    if conflict and not settings.allow_overlap:
        return None

    score = 0
    if not conflict:
        score += SCORE_NO_CONFLICT
    else:
        score -= SCORE_OVERLAP_PENALTY

    if _has_placement_synergy(room, person, settings.category_index):
        score += SCORE_SYNERGY

    # Size term: reward open seats, penalise rooms at or over target
    count = room.assignee_count
    target = settings.target_assignees
    if count < target:
        score += (target - count) * SCORE_PER_OPEN_SEAT
    else:
        score -= (count - target + 1) * SCORE_PER_EXTRA_SEAT

    return score


def choose_room(rooms: List[Room], person: Person, settings: GroupingSettings) -> int:
    """
    Index of the room with the strictly highest score (first room wins ties).
    If every room is rejected, fall back to the room with the fewest
    assignees (again first wins).
    """
    best_idx = -1
    best_score = None

    for i, room in enumerate(rooms):
        score = score_room(room, person, settings)
        if score is None:
            continue
        if best_score is None or score > best_score:
            best_score = score
            best_idx = i

    if best_idx == -1:
        best_idx = min(range(len(rooms)), key=lambda i: rooms[i].assignee_count)
        logger.debug(
            "No conflict-free room for %s (%s); falling back to %s",
            person.name, person.industry, rooms[best_idx].id,
        )

    return best_idx


def _seat(room: Room, person: Person) -> None:
    if person.role == Role.GUEST:
        room.guests.append(person)
    else:
        room.members.append(person)


def make_lobby_host() -> Person:
    return Person(id=LOBBY_HOST_ID, name=LOBBY_HOST_NAME, industry="", role=Role.HOST)


def group_people(
    hosts: Sequence[Person],
    assignees: Sequence[Person],
    settings: GroupingSettings,
    rng: Optional[random.Random] = None,
) -> List[Room]:
    """
    Greedy room assignment: one room per host, guests placed before members,
    each person going to the best-scoring room at the moment it is placed.

    With no hosts at all, everyone lands in a single lobby room led by a
    placeholder host.

    `rng` drives the only randomness (the shuffle of guests and of members);
    pass a seeded random.Random for reproducible output.
    """
    settings.validate()
    rng = rng or random.Random()
    index = settings.category_index

    guests = _shuffled([p for p in assignees if p.role == Role.GUEST], rng)
    members = _shuffled([p for p in assignees if p.role != Role.GUEST], rng)

    if not hosts:
        lobby = Room(id=LOBBY_ROOM_ID, leader=make_lobby_host())
        for person in guests + members:
            _seat(lobby, person)
        logger.info("No hosts given; %d people placed in the lobby", lobby.assignee_count)
        return [update_room_tags(lobby, index)]

    rooms: List[Room] = [
        Room(id=f"{ROOM_ID_PREFIX}{i}", leader=host) for i, host in enumerate(hosts)
    ]

    for person in guests + members:
        idx = choose_room(rooms, person, settings)
        _seat(rooms[idx], person)
        logger.debug("Placed %s (%s) in %s", person.name, person.industry, rooms[idx].id)

    result = [update_room_tags(room, index) for room in rooms]
    logger.info(
        "Grouped %d assignees into %d rooms",
        sum(r.assignee_count for r in result), len(result),
    )
    return result
