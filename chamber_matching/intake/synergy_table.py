# chamber_matching/intake/synergy_table.py
from __future__ import annotations

import logging
import re
from typing import List, Optional, Set

from ..config import DEFAULT_SYNERGY_TABLE
from ..models import CategoryEntry, CategoryIndex

logger = logging.getLogger(__name__)

# ASCII and full-width commas
_LIST_SPLIT = re.compile(r"[,，]")
# Legacy "category: kw1, kw2" rows (ASCII or full-width colon)
_LEGACY_SPLIT = re.compile(r"[:：]")


def _split_list(field: str) -> List[str]:
    return [v.strip() for v in _LIST_SPLIT.split(field) if v.strip()]


def _split_row(line: str) -> List[str]:
    if "|" in line:
        return [f.strip() for f in line.split("|")]
    # Legacy form carries keywords only
    return [f.strip() for f in _LEGACY_SPLIT.split(line, maxsplit=1)]


def parse_synergy_row(line: str, claimed: Optional[Set[str]] = None) -> Optional[CategoryEntry]:
    """
    Parse one row:
        category | keywords | opportunities | target categories

    Returns None for malformed rows (fewer than 2 fields, blank category, or
    no usable keywords). Keywords already in `claimed` are dropped so that
    each keyword belongs to exactly one entry; `claimed` is updated in place.
    """
    fields = _split_row(line)
    if len(fields) < 2 or not fields[0]:
        return None

    claimed = claimed if claimed is not None else set()
    keywords = []
    for kw in _split_list(fields[1]):
        kw = kw.lower()
        if kw in claimed or kw in keywords:
            continue
        keywords.append(kw)
    if not keywords:
        return None
    claimed.update(keywords)

    opportunities = _split_list(fields[2]) if len(fields) > 2 else []
    targets = _split_list(fields[3]) if len(fields) > 3 else []

    return CategoryEntry(
        category=fields[0],
        keywords=tuple(keywords),
        opportunities=tuple(opportunities),
        target_categories=tuple(targets),
    )


def parse_synergy_table(text: str) -> CategoryIndex:
    """
    Build a CategoryIndex from a free-text synergy table, one row per line.
    Malformed rows are skipped, never raised.
    """
    index = CategoryIndex()
    claimed: Set[str] = set()

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        entry = parse_synergy_row(line, claimed)
        if entry is None:
            logger.debug("Skipping malformed synergy row %d: %r", lineno, raw)
            continue
        index.add(entry)

    logger.debug("Parsed %d synergy categories", len(index))
    return index


def default_category_index() -> CategoryIndex:
    return parse_synergy_table(DEFAULT_SYNERGY_TABLE)
