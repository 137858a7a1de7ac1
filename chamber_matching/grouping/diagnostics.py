# chamber_matching/grouping/diagnostics.py
from __future__ import annotations

import math
from collections import Counter
from typing import Any, Dict, List, Sequence

from ..models import GroupingSettings, Person, Room, Statistics


def validate_roster(
    hosts: Sequence[Person],
    members: Sequence[Person],
    guests: Sequence[Person],
    settings: GroupingSettings,
) -> Dict[str, Any]:
    """
    Check a roster before running the grouping engine.

    Returns a dict with:
      - 'ok': bool (False means do not run the engine)
      - 'messages': list[str] (human-readable diagnostics)
      - 'suggestion': str (summary)
      - 'num_hosts', 'num_members', 'num_guests': int
      - 'min_rooms_for_target': int  (rooms needed to stay at target size)
      - 'duplicate_industries': Dict[str, int]  (industry -> head count, >1 only)
    """
    messages: List[str] = []
    ok = True

    settings.validate()

    num_hosts = len(hosts)
    num_assignees = len(members) + len(guests)

    # ---------- 1. Need at least one host ----------
    if num_hosts == 0:
        ok = False
        messages.append("At least one host is required to run the grouping.")

    # ---------- 2. Room size vs target ----------
    min_rooms = math.ceil(num_assignees / settings.target_assignees) if num_assignees else 0
    if num_hosts and min_rooms > num_hosts:
        messages.append(
            f"{num_assignees} assignees need {min_rooms} rooms at "
            f"{settings.target_assignees} per room, but only {num_hosts} hosts "
            f"were given. Rooms will run over target."
        )

    # ---------- 3. Industry overlap pressure ----------
    counts = Counter(p.industry_key for p in [*hosts, *members, *guests] if p.industry_key)
    duplicates = {ind: c for ind, c in counts.items() if c > 1}
    if not settings.allow_overlap and num_hosts:
        for ind, c in sorted(duplicates.items()):
            if c > num_hosts:
                messages.append(
                    f"{c} people share the industry '{ind}' but there are only "
                    f"{num_hosts} rooms; some conflicts cannot be avoided."
                )

    if not ok:
        suggestion = "Add at least one host before grouping."
    elif messages:
        suggestion = "Grouping can run; consider adding hosts or allowing overlap."
    else:
        suggestion = "Roster looks fine."

    return {
        "ok": ok,
        "messages": messages,
        "suggestion": suggestion,
        "num_hosts": num_hosts,
        "num_members": len(members),
        "num_guests": len(guests),
        "min_rooms_for_target": min_rooms,
        "duplicate_industries": duplicates,
    }


def compute_statistics(rooms: Sequence[Room]) -> Statistics:
    """Totals over the final rooms; counts come from the recomputed tags."""
    total_guests = sum(len(r.guests) for r in rooms)
    total_members = sum(len(r.members) for r in rooms)
    real_hosts = sum(1 for r in rooms if not r.has_placeholder_leader)

    return Statistics(
        total_people=real_hosts + total_guests + total_members,
        total_rooms=len(rooms),
        total_guests=total_guests,
        total_members=total_members,
        conflict_count=sum(len(r.conflicts) for r in rooms),
        synergy_count=sum(len(r.synergies) for r in rooms),
    )
