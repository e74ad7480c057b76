import tempfile
import unittest
from pathlib import Path

from changelog_generator.changelog.merger import (
    DEFAULT_DESCRIPTION,
    default_document,
    has_duplicate_entry,
    insert_section,
    merge_section,
)


SECTION = "## [Unreleased] - 2024-01-15\n\n### ✨ Features\n- add login flow (abc123)\n\n"
OLDER = "## [Unreleased] - 2023-12-01\n\n### 🐛 Bug Fixes\n- **core:** fix crash (0ld0001)\n\n"


class TestInsertSection(unittest.TestCase):
    def test_inserts_after_header_paragraph(self) -> None:
        content = "# Changelog\n\n" + OLDER
        self.assertEqual(insert_section(content, SECTION), "# Changelog\n\n" + SECTION + OLDER)

    def test_header_block_is_first_paragraph_only(self) -> None:
        content = "# Changelog\nNotes on the same paragraph.\n\nA second paragraph.\n\n" + OLDER
        merged = insert_section(content, SECTION)
        self.assertEqual(
            merged,
            "# Changelog\nNotes on the same paragraph.\n\n" + SECTION + "A second paragraph.\n\n" + OLDER,
        )

    def test_prepends_without_title(self) -> None:
        content = "Some notes\n\n" + OLDER
        self.assertEqual(insert_section(content, SECTION), SECTION + content)

    def test_prepends_when_header_has_no_blank_line(self) -> None:
        content = "# Changelog\n"
        self.assertEqual(insert_section(content, SECTION), SECTION + content)

    def test_custom_title(self) -> None:
        content = "# Release Notes\n\n" + OLDER
        merged = insert_section(content, SECTION, title="# Release Notes")
        self.assertEqual(merged, "# Release Notes\n\n" + SECTION + OLDER)


class TestDuplicateDetection(unittest.TestCase):
    def test_detects_same_header_line(self) -> None:
        self.assertTrue(has_duplicate_entry("# Changelog\n\n" + SECTION, SECTION))

    def test_other_dates_are_not_duplicates(self) -> None:
        self.assertFalse(has_duplicate_entry("# Changelog\n\n" + OLDER, SECTION))


class TestMergeSection(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "CHANGELOG.md"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_creates_missing_file(self) -> None:
        result = merge_section(SECTION, self.path)
        self.assertTrue(result.created)
        self.assertFalse(result.duplicate)
        content = self.path.read_text(encoding="utf-8")
        self.assertEqual(content, "# Changelog\n\n" + SECTION + DEFAULT_DESCRIPTION + "\n\n")
        self.assertEqual(result.content, content)

    def test_blank_file_gets_default_header_but_is_not_created(self) -> None:
        self.path.write_text("\n", encoding="utf-8")
        result = merge_section(SECTION, self.path)
        self.assertFalse(result.created)
        self.assertTrue(self.path.read_text(encoding="utf-8").startswith("# Changelog\n\n" + SECTION))

    def test_existing_sections_are_left_unchanged(self) -> None:
        original = default_document() + OLDER
        self.path.write_text(original, encoding="utf-8")
        result = merge_section(SECTION, self.path)
        content = self.path.read_text(encoding="utf-8")
        self.assertFalse(result.created)
        self.assertTrue(content.startswith("# Changelog\n\n" + SECTION))
        self.assertTrue(content.endswith(OLDER))
        self.assertLess(content.index(SECTION), content.index(OLDER))

    def test_duplicate_warns_but_still_inserts(self) -> None:
        self.path.write_text("# Changelog\n\n" + SECTION, encoding="utf-8")
        with self.assertLogs("changelog_generator.changelog.merger", level="WARNING"):
            result = merge_section(SECTION, self.path)
        self.assertTrue(result.duplicate)
        self.assertEqual(self.path.read_text(encoding="utf-8"), "# Changelog\n\n" + SECTION + SECTION)

    def test_dry_run_does_not_write(self) -> None:
        result = merge_section(SECTION, self.path, write=False)
        self.assertFalse(self.path.exists())
        self.assertIn(SECTION, result.content)

    def test_custom_title_and_description(self) -> None:
        merge_section(SECTION, self.path, title="# History", description="Release history.")
        self.assertEqual(
            self.path.read_text(encoding="utf-8"),
            "# History\n\n" + SECTION + "Release history.\n\n",
        )

    def test_missing_directory_propagates(self) -> None:
        missing = Path(self._tmp.name) / "nope" / "CHANGELOG.md"
        with self.assertRaises(OSError):
            merge_section(SECTION, missing)


if __name__ == "__main__":
    unittest.main()
