import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from click.testing import CliRunner

from activitymix.cli_commands import cli

SAMPLE_CSV = (
    "id,activity_title\n"
    "1,Video\n"
    "2,Whiteboard\n"
    "3,Learning outcomes\n"
    "4,Campus tour\n"
)


class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.dir = Path(self.tmp.name)
        env = mock.patch.dict(os.environ, {"ACTIVITYMIX_DB_PATH": str(self.dir / "settings.db")})
        env.start()
        self.addCleanup(env.stop)
        self.csv_path = self.dir / "activities.csv"
        self.csv_path.write_text(SAMPLE_CSV, encoding="utf-8")
        self.runner = CliRunner()

    def test_analyze_table(self):
        result = self.runner.invoke(cli, ["analyze", str(self.csv_path), "--show-log"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Total number of activities: 3", result.output)
        self.assertIn("Participate (1)", result.output)
        self.assertIn('Row 4: "Learning outcomes" ignored (Learning outcomes)', result.output)

    def test_analyze_json_with_videos(self):
        result = self.runner.invoke(cli, ["analyze", str(self.csv_path), "--format", "json", "--videos", "2"])
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.output)
        self.assertEqual(payload["total_activities"], 5)
        self.assertEqual(payload["categorized_activities"]["Present"], {"Video": 3})
        self.assertNotIn("audit_log", payload)

    def test_analyze_csv_to_file(self):
        out_path = self.dir / "breakdown.csv"
        result = self.runner.invoke(cli, ["analyze", str(self.csv_path), "--format", "csv", "--output", str(out_path)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(out_path.read_text(encoding="utf-8").startswith("category,activity,count"))

    def test_invalid_video_count_is_ignored(self):
        result = self.runner.invoke(cli, ["analyze", str(self.csv_path), "--videos", "-3"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Total number of activities: 3", result.output)

    def test_missing_column_aborts(self):
        result = self.runner.invoke(cli, ["analyze", str(self.csv_path), "--column", "title"])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("title column not found", result.output)

    def test_unsupported_extension(self):
        other = self.dir / "activities.xlsx"
        other.write_text(SAMPLE_CSV, encoding="utf-8")
        result = self.runner.invoke(cli, ["analyze", str(other)])
        self.assertNotEqual(result.exit_code, 0)

    def test_saved_column_key_is_used(self):
        renamed = self.dir / "renamed.csv"
        renamed.write_text("id,Title\n1,Forum\n", encoding="utf-8")
        result = self.runner.invoke(cli, ["settings", "set-column", "title"])
        self.assertEqual(result.exit_code, 0, result.output)
        result = self.runner.invoke(cli, ["analyze", str(renamed), "--format", "json"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output)["category_counts"]["Participate"], 1)

    def test_settings_show(self):
        result = self.runner.invoke(cli, ["settings", "show"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Column key: activity_title", result.output)
        self.assertIn(str(self.dir / "settings.db"), result.output)

    def test_taxonomy_json(self):
        result = self.runner.invoke(cli, ["taxonomy", "--format", "json"])
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.output)
        self.assertEqual(list(payload["taxonomy"]), ["Present", "Practice", "Produce", "Participate"])
        self.assertEqual(payload["shared_activities"], ["Sticky note", "Whiteboard", "Image tile", "Poll"])


if __name__ == '__main__':
    unittest.main()
