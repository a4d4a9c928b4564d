import os
import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from customer_identity.config import MatchingSettings, Settings, find_config


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        settings = Settings.load(None)
        self.assertEqual(settings.matching.min_confidence, 75.0)
        self.assertFalse(settings.matching.strict_mode)
        self.assertEqual(settings.matching.suggest_min_similarity, 70.0)
        self.assertEqual(settings.matching.suggest_max_results, 10)
        self.assertEqual(settings.importing.unknown_customer, "-")
        self.assertTrue(settings.importing.auto_merge)

    def test_load_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.yaml"
            path.write_text(
                "matching:\n"
                "  min_confidence: 80\n"
                "  strict_mode: true\n"
                "importing:\n"
                "  unknown_customer: Unknown Customer\n"
                f"store:\n  path: {tmpdir}/customers.sqlite3\n",
                encoding="utf-8",
            )
            settings = Settings.load(path)
        self.assertEqual(settings.matching.min_confidence, 80.0)
        self.assertTrue(settings.matching.strict_mode)
        self.assertEqual(settings.importing.unknown_customer, "Unknown Customer")
        self.assertTrue(settings.store.path.is_absolute())
        self.assertEqual(settings.store.path.name, "customers.sqlite3")

    def test_empty_yaml_uses_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.yaml"
            path.write_text("", encoding="utf-8")
            settings = Settings.load(path)
        self.assertEqual(settings.matching.min_confidence, 75.0)

    def test_rejects_out_of_range_confidence(self):
        with self.assertRaises(ValidationError):
            MatchingSettings(min_confidence=120)
        with self.assertRaises(ValidationError):
            MatchingSettings(suggest_min_similarity=-1)
        with self.assertRaises(ValidationError):
            MatchingSettings(suggest_max_results=0)


class TestFindConfig(unittest.TestCase):
    def test_explicit_path(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "custom.yaml"
            path.write_text("{}", encoding="utf-8")
            self.assertEqual(find_config(path), path)

    def test_explicit_missing_path_raises(self):
        with self.assertRaises(FileNotFoundError):
            find_config(Path("/nonexistent/config.yaml"))

    def test_discovers_config_in_cwd(self):
        cwd = os.getcwd()
        with tempfile.TemporaryDirectory() as tmpdir:
            try:
                os.chdir(tmpdir)
                self.assertIsNone(find_config(None))
                (Path(tmpdir) / "config.yml").write_text("{}", encoding="utf-8")
                found = find_config(None)
                self.assertIsNotNone(found)
                assert found is not None
                self.assertEqual(found.name, "config.yml")
            finally:
                os.chdir(cwd)


if __name__ == "__main__":
    unittest.main()
