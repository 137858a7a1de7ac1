# chamber_matching/intake/roster.py
from __future__ import annotations

import hashlib
import re
from typing import Iterable, List, Optional

from ..config import (
    DEFAULT_INDUSTRY,
    GUEST_KEYWORDS,
    MEMBER_KEYWORDS,
    PERSON_ID_LENGTH,
    UNNAMED_PREFIX,
)
from ..models import Person, Role

_FIELD_SPLIT = re.compile(r"[,\t]")


def make_person_id(name: str, industry: str, roster: Role, index: int) -> str:
    """
    Stable id: digest of (name, industry, source roster, line index).
    Re-parsing the same text gives the same ids; the roster and index keep
    identical lines from different rosters or positions apart.
    """
    key = "\x1f".join([name, industry, roster.value, str(index)])
    return hashlib.sha1(key.encode("utf-8")).hexdigest()[:PERSON_ID_LENGTH]


def detect_role_override(text: str) -> Optional[Role]:
    """Guest/member keyword in the third field, if any. Hosts cannot be set here."""
    t = text.strip().lower()
    if not t:
        return None
    if any(kw in t for kw in GUEST_KEYWORDS):
        return Role.GUEST
    if any(kw in t for kw in MEMBER_KEYWORDS):
        return Role.MEMBER
    return None


def parse_roster_line(line: str, index: int, default_role: Role) -> Person:
    parts = [p.strip() for p in _FIELD_SPLIT.split(line)]
    name = parts[0] if parts and parts[0] else f"{UNNAMED_PREFIX}-{index}"
    industry = parts[1] if len(parts) > 1 and parts[1] else DEFAULT_INDUSTRY

    # Overrides only move people between guests and members; hosts stay hosts
    role = default_role
    if len(parts) > 2 and default_role != Role.HOST:
        role = detect_role_override(parts[2]) or default_role

    return Person(
        id=make_person_id(name, industry, default_role, index),
        name=name,
        industry=industry,
        role=role,
    )


def parse_roster(text: str, default_role: Role) -> List[Person]:
    """
    Parse `name, industry[, role]` lines (comma or tab separated).
    Blank lines are dropped; missing fields get placeholder values.
    """
    lines = [ln.strip() for ln in text.splitlines()]
    lines = [ln for ln in lines if ln]
    return [parse_roster_line(ln, i, default_role) for i, ln in enumerate(lines)]


def format_roster(people: Iterable[Person]) -> str:
    return "\n".join(f"{p.name}, {p.industry}" for p in people)
