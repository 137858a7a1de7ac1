# tests/test_room_tags.py
import unittest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from helpers import build_index, host, guest, person
from chamber_matching.models import Room
from chamber_matching.grouping.room_tags import update_room_tags, explain_matches
from chamber_matching.grouping.assignment import make_lobby_host


class TestConflicts(unittest.TestCase):

    def setUp(self):
        self.index = build_index()

    def test_conflict_is_symmetric(self):
        """Identical industries (after trim/case-fold) tag both people."""
        room = Room(
            id="room-0",
            leader=host("h", "Finance"),
            members=[person("m1", " finance "), person("m2", "Design")],
        )
        tagged = update_room_tags(room, self.index)
        self.assertEqual(sorted(tagged.conflicts), ["h", "m1"])

    def test_no_conflict_for_distinct_industries(self):
        room = Room(id="room-0", leader=host("h", "Finance"),
                    guests=[guest("g", "Accounting")])
        self.assertEqual(update_room_tags(room, self.index).conflicts, [])

    def test_tags_subset_of_occupants(self):
        room = Room(id="room-0", leader=host("h", "Legal"),
                    members=[person("m1", "Legal"), person("m2", "Finance")],
                    guests=[guest("g", "Accounting")])
        tagged = update_room_tags(room, self.index)
        ids = set(tagged.occupant_ids())
        self.assertTrue(set(tagged.conflicts) <= ids)
        self.assertTrue(set(tagged.synergies) <= ids)


class TestSynergies(unittest.TestCase):

    def setUp(self):
        self.index = build_index()

    def test_same_category_both_directions(self):
        room = Room(id="room-0", leader=host("h", "Finance"),
                    guests=[guest("g", "Accounting")])
        tagged = update_room_tags(room, self.index)
        self.assertEqual(tagged.synergies, ["h", "g"])

    def test_target_category_is_directional(self):
        """Finance lists Legal as a target; Legal lists nothing back."""
        room = Room(id="room-0", leader=host("fin", "Bank"),
                    members=[person("law", "Lawyer")])
        tagged = update_room_tags(room, self.index)
        self.assertIn("fin", tagged.synergies)
        self.assertNotIn("law", tagged.synergies)

    def test_reverse_direction_alone(self):
        room = Room(id="room-0", leader=host("law", "Legal"),
                    members=[person("arch", "Architect")])
        tagged = update_room_tags(room, self.index)
        self.assertEqual(tagged.synergies, [])

    def test_uncategorised_person_never_synergises(self):
        room = Room(id="room-0", leader=host("h", "Finance"),
                    members=[person("m", "Plumbing")])
        tagged = update_room_tags(room, self.index)
        self.assertNotIn("m", tagged.synergies)
        self.assertNotIn("h", tagged.synergies)


class TestRecomputation(unittest.TestCase):

    def setUp(self):
        self.index = build_index()
        self.room = Room(
            id="room-0",
            leader=host("h", "Finance"),
            members=[person("m1", "Finance"), person("m2", "Lawyer")],
            guests=[guest("g", "Interior Design")],
            conflicts=["stale"],
            synergies=["stale"],
        )

    def test_idempotent(self):
        once = update_room_tags(self.room, self.index)
        twice = update_room_tags(once, self.index)
        self.assertEqual(once.conflicts, twice.conflicts)
        self.assertEqual(once.synergies, twice.synergies)

    def test_input_not_mutated(self):
        tagged = update_room_tags(self.room, self.index)
        self.assertIsNot(tagged, self.room)
        self.assertEqual(self.room.conflicts, ["stale"])
        self.assertEqual(self.room.synergies, ["stale"])
        self.assertNotIn("stale", tagged.conflicts)

    def test_order_follows_leader_members_guests(self):
        tagged = update_room_tags(self.room, self.index)
        self.assertEqual(tagged.conflicts, ["h", "m1"])
        self.assertEqual(tagged.synergies, ["h", "m1"])

    def test_placeholder_leader_ignored(self):
        lobby = Room(id="lobby", leader=make_lobby_host(),
                     members=[person("m1", "Finance"), person("m2", "Legal")])
        tagged = update_room_tags(lobby, self.index)
        self.assertNotIn(lobby.leader.id, tagged.conflicts + tagged.synergies)
        self.assertEqual(tagged.synergies, ["m1"])


class TestExplainMatches(unittest.TestCase):

    def setUp(self):
        self.index = build_index()

    def test_reasons_and_opportunities(self):
        fin = host("fin", "Finance")
        room = Room(id="room-0", leader=fin,
                    members=[person("acc", "Accounting"), person("law", "Lawyer"),
                             person("x", "Plumbing")])
        matches = explain_matches(room, fin, self.index)
        partners = [m["partner"].id for m in matches]
        self.assertEqual(partners, ["acc", "law"])
        self.assertEqual(matches[0]["reason"], "same category: Finance")
        self.assertEqual(matches[1]["reason"], "cross-category: Finance x Legal")
        self.assertEqual(matches[0]["opportunities"], ("tax planning", "loans"))

    def test_no_category_no_matches(self):
        p = person("x", "Plumbing")
        room = Room(id="room-0", leader=host("fin", "Finance"), members=[p])
        self.assertEqual(explain_matches(room, p, self.index), [])


if __name__ == '__main__':
    unittest.main()
