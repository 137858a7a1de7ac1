# chamber_matching/grouping/reassignment.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List

from ..models import CategoryIndex, Person, Role, Room
from .room_tags import update_room_tags

logger = logging.getLogger(__name__)


def _index_rooms_by_id(rooms: List[Room]) -> Dict[str, int]:
    return {r.id: i for i, r in enumerate(rooms)}


def move_person(
    rooms: List[Room],
    person: Person,
    source_id: str,
    target_id: str,
    index: CategoryIndex,
) -> List[Room]:
    """
    Move a guest or member from one room to another (the drag-and-drop edit).

    Returns a new room list in which only the source and target rooms are
    replaced, both with freshly recomputed tags. Every other Room object is
    passed through as-is. The input list and its rooms are not mutated.

    No-op (same list contents) when source == target or the person is not
    in the source room. Raises ValueError for hosts and unknown room ids.
    """
    if person.role == Role.HOST:
        raise ValueError(f"Hosts cannot be moved: {person.name} ({person.id}).")

    positions = _index_rooms_by_id(rooms)
    for rid in (source_id, target_id):
        if rid not in positions:
            raise ValueError(f"Unknown room id: {rid!r}")

    if source_id == target_id:
        return list(rooms)

    src_pos = positions[source_id]
    tgt_pos = positions[target_id]
    source = rooms[src_pos]
    target = rooms[tgt_pos]

    attr = "guests" if person.role == Role.GUEST else "members"
    src_list = getattr(source, attr)
    if not any(p.id == person.id for p in src_list):
        logger.debug("%s not found in %s; nothing to move", person.id, source_id)
        return list(rooms)

    new_source = replace(source, **{attr: [p for p in src_list if p.id != person.id]})
    new_target = replace(target, **{attr: [*getattr(target, attr), person]})

    out = list(rooms)
    out[src_pos] = update_room_tags(new_source, index)
    out[tgt_pos] = update_room_tags(new_target, index)

    logger.debug("Moved %s from %s to %s", person.name, source_id, target_id)
    return out
