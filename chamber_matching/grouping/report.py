# chamber_matching/grouping/report.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from ..models import CategoryIndex, Person, Room
from .categories import find_category
from .room_tags import explain_matches

REPORT_COLUMNS = [
    "room", "position", "name", "industry", "role",
    "category", "conflict", "synergy", "matches", "opportunities",
]


def room_label(room: Room, idx: int) -> str:
    return "LOBBY" if room.is_lobby else f"ROOM {idx + 1}"


def _listed(room: Room) -> List[Person]:
    people = room.occupants()
    if room.has_placeholder_leader:
        people = people[1:]
    return people


def rooms_to_frame(rooms: Sequence[Room], index: CategoryIndex) -> pd.DataFrame:
    """
    One row per occupant; a placeholder lobby host is left out.
    'matches' holds "partner (reason)" items joined by "; ", and
    'opportunities' the occupant's category opportunities when it has a match.
    """
    rows = []
    for idx, room in enumerate(rooms):
        conflicts = set(room.conflicts)
        synergies = set(room.synergies)

        for pos, p in enumerate(_listed(room)):
            entry = find_category(p.industry, index)
            matches = explain_matches(room, p, index)
            rows.append({
                "room": room_label(room, idx),
                "position": pos,
                "name": p.name,
                "industry": p.industry,
                "role": p.role.value,
                "category": entry.category if entry else "",
                "conflict": p.id in conflicts,
                "synergy": p.id in synergies,
                "matches": "; ".join(f"{m['partner'].name} ({m['reason']})" for m in matches),
                "opportunities": ", ".join(entry.opportunities) if matches else "",
            })

    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def export_report(rooms: Sequence[Room], index: CategoryIndex, path: str | Path) -> Path:
    path = Path(path)
    rooms_to_frame(rooms, index).to_csv(path, index=False, encoding="utf-8-sig")
    return path


def _person_lines(label: str, p: Person, room: Room, index: Optional[CategoryIndex]) -> List[str]:
    lines = [f"  {label}: {p.name} ({p.industry})"]
    if index is None:
        return lines
    for m in explain_matches(room, p, index):
        line = f"      <-> {m['partner'].name}: {m['reason']}"
        if m["opportunities"]:
            line += " " + " ".join(f"#{op}" for op in m["opportunities"])
        lines.append(line)
    return lines


def format_rooms_text(rooms: Sequence[Room], index: Optional[CategoryIndex] = None) -> str:
    """
    Plain-text listing of the rooms, for pasting into a chat or email.
    With a category index, each person's synergy partners are listed below them.
    """
    blocks: List[str] = []
    for idx, room in enumerate(rooms):
        lines = [room_label(room, idx)]
        if not room.has_placeholder_leader:
            lines += _person_lines("Host", room.leader, room, index)
        for p in room.guests:
            lines += _person_lines("Guest", p, room, index)
        for p in room.members:
            lines += _person_lines("Member", p, room, index)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
