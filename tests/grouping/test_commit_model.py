import unittest

from changelog_generator.grouping.commit_model import (
    CATEGORY_ORDER,
    OTHER_TYPE,
    TYPE_MAP,
    ParsedCommit,
    category_key,
)


class TestCommitModel(unittest.TestCase):
    def test_parsed_commit_dataclass(self) -> None:
        commit = ParsedCommit(type="feat", scope="auth", message="add login flow", hash="abc123")
        self.assertEqual(commit.type, "feat")
        self.assertEqual(commit.scope, "auth")
        self.assertEqual(commit.message, "add login flow")
        self.assertEqual(commit.hash, "abc123")

    def test_category_order(self) -> None:
        self.assertEqual(CATEGORY_ORDER, ("feat", "fix", "docs", "perf", "refactor", "test", "chore", "other"))

    def test_known_types(self) -> None:
        self.assertEqual(
            set(TYPE_MAP),
            {"feat", "fix", "docs", "perf", "refactor", "test", "chore", "build", "ci"},
        )
        self.assertEqual(TYPE_MAP["feat"].header, "✨ Features")
        self.assertEqual(TYPE_MAP["fix"].header, "🐛 Bug Fixes")

    def test_category_key(self) -> None:
        self.assertEqual(category_key("feat"), "feat")
        self.assertEqual(category_key("chore"), "chore")
        self.assertEqual(category_key("build"), OTHER_TYPE)
        self.assertEqual(category_key("ci"), OTHER_TYPE)
        self.assertEqual(category_key("style"), OTHER_TYPE)
        self.assertEqual(category_key(OTHER_TYPE), OTHER_TYPE)


if __name__ == "__main__":
    unittest.main()
