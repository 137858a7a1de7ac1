# chamber_matching/intake/batch_import.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from ..config import (
    GUEST_KEYWORDS,
    HOST_KEYWORDS,
    INDUSTRY_HEADERS,
    MEMBER_KEYWORDS,
    NAME_HEADERS,
    ROLE_HEADERS,
)
from ..models import Role


def load_roster_file(path: str | Path) -> pd.DataFrame:
    """
    Read a spreadsheet export (.csv or .xlsx) into a DataFrame of
    strings. Only the first sheet of a workbook is read.
    """
    path = Path(path)
    if path.suffix.lower() == ".csv":
        df = pd.read_csv(path, dtype=str, skip_blank_lines=True)
    elif path.suffix.lower() == ".xlsx":
        df = pd.read_excel(path, sheet_name=0, dtype=str)
    else:
        raise ValueError(f"Unsupported roster file type: {path.suffix!r}")
    return df.fillna("")


def _find_column(df: pd.DataFrame, headers) -> Optional[str]:
    for col in df.columns:
        if str(col).strip().lower() in headers:
            return col
    return None


def _role_columns(df: pd.DataFrame) -> Dict[Role, List[str]]:
    """Columns named after a role (e.g. a 'host' flag column)."""
    out: Dict[Role, List[str]] = {Role.HOST: [], Role.MEMBER: [], Role.GUEST: []}
    for col in df.columns:
        c = str(col).strip().lower()
        if c in HOST_KEYWORDS:
            out[Role.HOST].append(col)
        elif c in MEMBER_KEYWORDS:
            out[Role.MEMBER].append(col)
        elif c in GUEST_KEYWORDS:
            out[Role.GUEST].append(col)
    return out


def _classify_row(role_text: str, flags: Dict[Role, bool]) -> Role:
    t = role_text.lower()
    if flags[Role.HOST] or any(kw in t for kw in HOST_KEYWORDS):
        return Role.HOST
    if flags[Role.MEMBER] or any(kw in t for kw in MEMBER_KEYWORDS):
        return Role.MEMBER
    # Unclear roles default to guest
    return Role.GUEST


def split_roster_frame(df: pd.DataFrame) -> Dict[Role, str]:
    """
    Turn tabular rows into the line format the roster parser reads,
    one text block per role. Columns are found by header; without headers
    the first two columns are taken as name and industry. Rows missing a
    name or an industry are dropped.
    """
    lines: Dict[Role, List[str]] = {Role.HOST: [], Role.MEMBER: [], Role.GUEST: []}
    if df.empty or len(df.columns) == 0:
        return {role: "" for role in lines}

    name_col = _find_column(df, NAME_HEADERS)
    industry_col = _find_column(df, INDUSTRY_HEADERS)
    role_col = _find_column(df, ROLE_HEADERS)
    flag_cols = _role_columns(df)

    if name_col is None:
        name_col = df.columns[0]
    if industry_col is None and len(df.columns) > 1:
        industry_col = df.columns[1]

    for _, row in df.iterrows():
        name = str(row[name_col]).strip()
        industry = str(row[industry_col]).strip() if industry_col is not None else ""
        if not name or not industry:
            continue

        role_text = str(row[role_col]).strip() if role_col is not None else ""
        flags = {
            role: any(str(row[c]).strip() for c in cols)
            for role, cols in flag_cols.items()
        }
        lines[_classify_row(role_text, flags)].append(f"{name}, {industry}")

    return {role: "\n".join(ls) for role, ls in lines.items()}


def import_roster_file(path: str | Path) -> Dict[Role, str]:
    return split_roster_frame(load_roster_file(path))
