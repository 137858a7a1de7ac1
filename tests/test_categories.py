# tests/test_categories.py
import unittest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from helpers import build_index
from chamber_matching.intake.synergy_table import (
    parse_synergy_table,
    parse_synergy_row,
    default_category_index,
)
from chamber_matching.grouping.categories import find_category, industry_matches


class TestSynergyTable(unittest.TestCase):

    def test_full_row_fields(self):
        entry = parse_synergy_row("Finance | Finance, Accounting | tax planning, loans | Legal, Design")
        self.assertEqual(entry.category, "Finance")
        self.assertEqual(entry.keywords, ("finance", "accounting"))
        self.assertEqual(entry.opportunities, ("tax planning", "loans"))
        self.assertEqual(entry.target_categories, ("Legal", "Design"))

    def test_trailing_fields_optional(self):
        entry = parse_synergy_row("Legal | legal, lawyer")
        self.assertEqual(entry.keywords, ("legal", "lawyer"))
        self.assertEqual(entry.opportunities, ())
        self.assertEqual(entry.target_categories, ())

    def test_malformed_rows_skipped(self):
        index = parse_synergy_table("JustOneField\n\n | orphan keyword\nLegal | legal\n")
        self.assertEqual([e.category for e in index.entries], ["Legal"])

    def test_legacy_colon_rows(self):
        index = parse_synergy_table("金融服務:會計師,律師\nMedia：photography，pr")
        self.assertEqual(len(index), 2)
        self.assertEqual(index.entries[0].keywords, ("會計師", "律師"))
        self.assertEqual(index.entries[1].keywords, ("photography", "pr"))

    def test_keyword_belongs_to_first_entry(self):
        index = parse_synergy_table("A | shared, alpha\nB | shared, beta\n")
        self.assertIs(index.by_keyword["shared"], index.get("A"))
        self.assertEqual(index.get("B").keywords, ("beta",))

    def test_default_table_parses(self):
        index = default_category_index()
        self.assertEqual(len(index), 10)
        self.assertEqual(find_category("Accountant", index).category, "Financial Services")


class TestCategoryMatching(unittest.TestCase):

    def setUp(self):
        self.index = build_index()

    def test_industry_contains_keyword(self):
        self.assertEqual(find_category("Tax Accounting Firm", self.index).category, "Finance")

    def test_keyword_contains_industry(self):
        self.assertEqual(find_category("  Interior ", self.index).category, "Design")

    def test_case_insensitive(self):
        entry = self.index.get("Legal")
        self.assertTrue(industry_matches("LAWYER", entry))

    def test_no_match(self):
        self.assertIsNone(find_category("Plumbing", self.index))

    def test_blank_industry_never_matches(self):
        self.assertIsNone(find_category("   ", self.index))
        self.assertFalse(industry_matches("", self.index.get("Legal")))

    def test_first_entry_wins(self):
        index = parse_synergy_table("Wide | design\nNarrow | interior design\n")
        self.assertEqual(find_category("interior design", index).category, "Wide")


if __name__ == '__main__':
    unittest.main()
