# run_grouping.py

from __future__ import annotations

import argparse
import logging
import random
import sys
from dataclasses import asdict
from pathlib import Path

import pandas as pd

from chamber_matching.config import DEFAULT_SYNERGY_TABLE, TARGET_ASSIGNEES_DEFAULT
from chamber_matching.models import GroupingSettings, Role
from chamber_matching.intake.roster import parse_roster
from chamber_matching.intake.synergy_table import parse_synergy_table
from chamber_matching.intake.batch_import import import_roster_file
from chamber_matching.grouping.assignment import group_people
from chamber_matching.grouping.diagnostics import validate_roster, compute_statistics
from chamber_matching.grouping.report import export_report, format_rooms_text, rooms_to_frame


def _read_text(path: str | None) -> str:
    if not path:
        return ""
    return Path(path).read_text(encoding="utf-8")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Assign hosts, members and guests of a networking event to rooms."
    )
    parser.add_argument("--hosts", help="Host roster (name, industry per line)")
    parser.add_argument("--members", help="Member roster")
    parser.add_argument("--guests", help="Guest roster")
    parser.add_argument("--import", dest="import_file",
                        help="Spreadsheet (.csv or .xlsx) holding all three rosters")
    parser.add_argument("--synergy", help="Synergy table (category | keywords | opportunities | targets)")
    parser.add_argument("--target", type=int, default=TARGET_ASSIGNEES_DEFAULT,
                        help="Target assignees per room, host excluded")
    parser.add_argument("--allow-overlap", action="store_true",
                        help="Tolerate duplicate industries in a room")
    parser.add_argument("--seed", type=int, default=None, help="Shuffle seed")
    parser.add_argument("--csv", help="Write the room report to this CSV file")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # 1) Rosters: batch file first, explicit text files appended after it
    texts = {Role.HOST: "", Role.MEMBER: "", Role.GUEST: ""}
    if args.import_file:
        texts.update(import_roster_file(args.import_file))
    for role, path in ((Role.HOST, args.hosts), (Role.MEMBER, args.members), (Role.GUEST, args.guests)):
        extra = _read_text(path)
        if extra:
            texts[role] = "\n".join(t for t in (texts[role], extra) if t)

    hosts = parse_roster(texts[Role.HOST], Role.HOST)
    members = parse_roster(texts[Role.MEMBER], Role.MEMBER)
    guests = parse_roster(texts[Role.GUEST], Role.GUEST)

    synergy_text = _read_text(args.synergy) or DEFAULT_SYNERGY_TABLE
    settings = GroupingSettings(
        allow_overlap=args.allow_overlap,
        target_assignees=args.target,
        category_index=parse_synergy_table(synergy_text),
    )

    # 2) Structural check BEFORE running the engine
    try:
        diags = validate_roster(hosts, members, guests, settings)
    except ValueError as exc:
        print(f"Invalid settings: {exc}")
        return 2

    print("\n========== ROSTER SUMMARY ==========")
    print(f"- Hosts   : {diags['num_hosts']}")
    print(f"- Members : {diags['num_members']}")
    print(f"- Guests  : {diags['num_guests']}")
    print(f"- Synergy categories: {len(settings.category_index)}")

    if diags["messages"]:
        print("\n=== DIAGNOSTICS ===")
        for msg in diags["messages"]:
            print("-", msg)
    print("\nSuggestion:", diags["suggestion"])

    if not diags["ok"]:
        print("\nResult: grouping not run.")
        return 1

    # 3) Group
    rng = random.Random(args.seed) if args.seed is not None else None
    rooms = group_people(hosts, [*members, *guests], settings, rng=rng)

    print("\n=== ROOMS ===")
    print(format_rooms_text(rooms, settings.category_index))

    print("\n=== ROOM TABLE ===")
    frame = rooms_to_frame(rooms, settings.category_index)
    with pd.option_context("display.max_rows", None, "display.width", 120):
        print(frame.to_string(index=False))

    stats = compute_statistics(rooms)
    print("\n=== STATISTICS ===")
    print(pd.Series(asdict(stats)).to_string())

    if args.csv:
        path = export_report(rooms, settings.category_index, args.csv)
        print(f"\nReport written to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
