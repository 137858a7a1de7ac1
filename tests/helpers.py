# tests/helpers.py
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from chamber_matching.models import Person, Role, GroupingSettings
from chamber_matching.intake.synergy_table import parse_synergy_table

# Finance targets Legal, Legal targets nothing: used for directionality checks
TEST_TABLE = """\
Finance | finance, accounting, bank | tax planning, loans | Legal
Design | interior design, graphic design, architect | renovation |
Legal | legal, lawyer | contracts
"""


def person(pid, industry, role=Role.MEMBER, name=None):
    return Person(id=pid, name=name or pid, industry=industry, role=role)


def host(pid, industry):
    return person(pid, industry, Role.HOST)


def guest(pid, industry):
    return person(pid, industry, Role.GUEST)


def build_index():
    return parse_synergy_table(TEST_TABLE)


def make_settings(allow_overlap=False, target=3, index=None):
    return GroupingSettings(
        allow_overlap=allow_overlap,
        target_assignees=target,
        category_index=index if index is not None else build_index(),
    )
