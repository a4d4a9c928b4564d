"""
Unit tests for customer_identity.core.identity.similarity.
"""

import unittest

from customer_identity.core.identity.similarity import (
    levenshtein_distance,
    round_score,
    similarity,
)

SAMPLE_NAMES = [
    "",
    "a",
    "budi",
    "Budi",
    "budisantoso",
    "b***santoso",
    "sitinuraini",
    "s***nuraini",
    "friliawindy",
    "f***iaawindy",
    "kitten",
    "sitting",
]


class TestLevenshteinDistance(unittest.TestCase):
    def test_known_distances(self):
        self.assertEqual(levenshtein_distance("kitten", "sitting"), 3)
        self.assertEqual(levenshtein_distance("flaw", "lawn"), 2)
        self.assertEqual(levenshtein_distance("friliawindy", "f***iaawindy"), 4)

    def test_empty_strings(self):
        self.assertEqual(levenshtein_distance("", ""), 0)
        self.assertEqual(levenshtein_distance("", "abc"), 3)
        self.assertEqual(levenshtein_distance("abc", ""), 3)

    def test_is_case_sensitive(self):
        # Case folding is the job of similarity()
        self.assertEqual(levenshtein_distance("Budi", "budi"), 1)


class TestSimilarity(unittest.TestCase):
    def test_identical_names_score_100(self):
        for name in SAMPLE_NAMES:
            with self.subTest(name=name):
                self.assertEqual(similarity(name, name), 100.0)

    def test_ignores_case(self):
        self.assertEqual(similarity("BudiSantoso", "budisantoso"), 100.0)

    def test_uses_full_case_folding(self):
        self.assertEqual(similarity("STRASSE", "straße"), 100.0)

    def test_empty_conventions(self):
        self.assertEqual(similarity("", ""), 100.0)
        self.assertEqual(similarity("", "budi"), 0.0)
        self.assertEqual(similarity("budi", ""), 0.0)

    def test_score_formula(self):
        self.assertAlmostEqual(similarity("kitten", "sitting"), 4 / 7 * 100)
        self.assertAlmostEqual(similarity("sitinuraini", "s***nuraini"), 8 / 11 * 100)
        self.assertAlmostEqual(similarity("friliawindy", "f***iaawindy"), 8 / 12 * 100)

    def test_symmetric_and_bounded(self):
        for a in SAMPLE_NAMES:
            for b in SAMPLE_NAMES:
                with self.subTest(a=a, b=b):
                    score = similarity(a, b)
                    self.assertEqual(score, similarity(b, a))
                    self.assertGreaterEqual(score, 0.0)
                    self.assertLessEqual(score, 100.0)

    def test_100_only_for_case_insensitive_equality(self):
        for a in SAMPLE_NAMES:
            for b in SAMPLE_NAMES:
                if a.casefold() != b.casefold():
                    with self.subTest(a=a, b=b):
                        self.assertLess(similarity(a, b), 100.0)


class TestRoundScore(unittest.TestCase):
    def test_rounds_half_up(self):
        self.assertEqual(round_score(72.5), 73)
        self.assertEqual(round_score(66.4), 66)
        self.assertEqual(round_score(66.67), 67)
        self.assertEqual(round_score(0.0), 0)
        self.assertEqual(round_score(100.0), 100)


if __name__ == "__main__":
    unittest.main()
