"""
Unit tests for customer_identity.core.identity.censor.

Covers every confidence band of the redacted-name matcher.
"""

import unittest

from customer_identity.core.identity.censor import (
    is_redacted,
    match_censor,
    visible_parts,
)


class TestVisibleParts(unittest.TestCase):
    def test_splits_on_mask_runs(self):
        self.assertEqual(visible_parts("f***iawindy"), ["f", "iawindy"])
        self.assertEqual(visible_parts("a**b***c"), ["a", "b", "c"])

    def test_drops_empty_segments(self):
        self.assertEqual(visible_parts("*abc*"), ["abc"])
        self.assertEqual(visible_parts("***"), [])


class TestIsRedacted(unittest.TestCase):
    def test_detects_mask(self):
        self.assertTrue(is_redacted("a***rifai"))
        self.assertTrue(is_redacted("x*y"))

    def test_plain_and_empty(self):
        self.assertFalse(is_redacted("ahmadrifai"))
        self.assertFalse(is_redacted(""))
        self.assertFalse(is_redacted(None))


class TestMatchCensor(unittest.TestCase):
    def test_full_coverage_band(self):
        result = match_censor("sitinuraini", "s***nuraini")
        self.assertTrue(result.is_match)
        self.assertAlmostEqual(result.confidence, 8 / 11 * 100)
        self.assertEqual(result.reason, "all visible parts match, 73% character coverage")

    def test_full_coverage_band_is_capped(self):
        result = match_censor("abcdef", "abc***def")
        self.assertTrue(result.is_match)
        self.assertEqual(result.confidence, 95.0)

    def test_partial_band(self):
        result = match_censor("ahmadrifai", "a***rifai")
        self.assertTrue(result.is_match)
        self.assertAlmostEqual(result.confidence, 80.0)
        self.assertEqual(result.reason, "100% parts match with 60% character coverage")

    def test_possible_band_is_not_a_match(self):
        result = match_censor("budisantoso", "b***san***xyz")
        self.assertFalse(result.is_match)
        self.assertAlmostEqual(result.confidence, (2 / 3 + 4 / 11) * 40)
        self.assertEqual(result.reason, "possible match: 67% parts, 36% characters")

    def test_low_band(self):
        result = match_censor("friliawindy", "f***iaawindy")
        self.assertFalse(result.is_match)
        self.assertAlmostEqual(result.confidence, (0.5 + 1 / 11) * 30)
        self.assertEqual(result.reason, "low similarity: 50% parts, 9% characters")

    def test_parts_must_appear_in_order(self):
        result = match_censor("rifaiahmad", "a***rifai")
        self.assertFalse(result.is_match)
        self.assertAlmostEqual(result.confidence, (0.5 + 0.1) * 30)

    def test_ignores_case_and_whitespace(self):
        result = match_censor("  AhmadRifai ", "A***RIFAI")
        self.assertTrue(result.is_match)
        self.assertAlmostEqual(result.confidence, 80.0)

    def test_no_mask_short_circuits(self):
        for original, candidate in [
            ("johndoe123", "johndoe123"),
            ("johndoe123", "johndoe12"),
            ("budi", "santoso"),
        ]:
            with self.subTest(candidate=candidate):
                result = match_censor(original, candidate)
                self.assertFalse(result.is_match)
                self.assertEqual(result.confidence, 0.0)
                self.assertEqual(result.reason, "no censorship pattern found")

    def test_only_mask_characters(self):
        result = match_censor("budi", "****")
        self.assertFalse(result.is_match)
        self.assertEqual(result.confidence, 0.0)
        self.assertEqual(result.reason, "no visible characters")

    def test_empty_inputs(self):
        self.assertEqual(match_censor("", "a***b").reason, "empty strings")
        self.assertEqual(match_censor("   ", "a***b").confidence, 0.0)
        self.assertFalse(match_censor("budi", "").is_match)


if __name__ == "__main__":
    unittest.main()
