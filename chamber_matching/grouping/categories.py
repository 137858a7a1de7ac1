# chamber_matching/grouping/categories.py
from __future__ import annotations

from typing import Optional

from ..models import CategoryEntry, CategoryIndex


def _normalize(industry: str) -> str:
    return industry.strip().lower()


def _keywords_match(ind: str, entry: CategoryEntry) -> bool:
    return any(kw in ind or ind in kw for kw in entry.keywords)


def industry_matches(industry: str, entry: CategoryEntry) -> bool:
    """
    Substring-symmetric keyword match: the industry contains a keyword, or a
    keyword contains the industry. Case-insensitive after trimming.

    A blank industry never matches (it would otherwise be contained in
    every keyword).
    """
    ind = _normalize(industry)
    if not ind:
        return False
    return _keywords_match(ind, entry)


def find_category(industry: str, index: CategoryIndex) -> Optional[CategoryEntry]:
    """First entry (table order) whose keywords match the industry, if any."""
    ind = _normalize(industry)
    if not ind:
        return None
    for entry in index.entries:
        if _keywords_match(ind, entry):
            return entry
    return None


def is_compatible(
    entry: CategoryEntry,
    other_industry: str,
    other_entry: Optional[CategoryEntry],
) -> bool:
    """
    True when the other person directly keyword-matches `entry`, or belongs
    to a category that `entry` lists as a target. Directional.
    """
    if industry_matches(other_industry, entry):
        return True
    return other_entry is not None and other_entry.category in entry.target_categories
