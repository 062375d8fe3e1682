"""CLI behavior tests.

Drives ``printdir.cli.main`` against temporary directories and checks console
output, the ``dir_tree.txt`` artifact, replay, and exit codes.
"""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from printdir import cli
from printdir.config import UserDefaults
from printdir.tree import ASCII_GLYPHS, UNICODE_GLYPHS


def make_project(root: Path) -> None:
    (root / "src").mkdir()
    (root / "src" / "a.txt").write_text("a", encoding="utf-8")
    (root / "readme.md").write_text("# proj\n", encoding="utf-8")


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch("printdir.cli.load_user_defaults", return_value=UserDefaults())
        patcher.start()
        self.addCleanup(patcher.stop)
        self.stderr = io.StringIO()
        stderr_patcher = mock.patch("sys.stderr", self.stderr)
        stderr_patcher.start()
        self.addCleanup(stderr_patcher.stop)

    def run_cli(self, root: Path, *argv: str) -> tuple[int, list[str]]:
        out = io.StringIO()
        code = cli.main(list(argv), cwd=root, stdout=out)
        return code, out.getvalue().splitlines()


class CliRenderTests(CliTestCase):
    def test_default_run_prints_tree_labeled_with_directory_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "proj"
            root.mkdir()
            make_project(root)

            code, lines = self.run_cli(root)

            self.assertEqual(code, 0)
            self.assertEqual(lines, ["proj", "├─ src", "│  └─ a.txt", "└─ readme.md"])
            self.assertFalse((root / "dir_tree.txt").exists())

    def test_name_depth_ignore_and_no_content_options(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            make_project(root)

            _, by_depth = self.run_cli(root, "-n", "proj", "-d", "1")
            _, ignored = self.run_cli(root, "--name", "proj", "--ignore", "readme.md")
            _, suppressed = self.run_cli(root, "-n", "proj", "--no-content", "src")

            self.assertEqual(by_depth, ["proj", "├─ src", "└─ readme.md"])
            self.assertEqual(ignored, ["proj", "└─ src", "   └─ a.txt"])
            self.assertEqual(suppressed, ["proj", "├─ src", "└─ readme.md"])

    def test_ignore_accepts_several_names_and_repeats(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            make_project(root)
            (root / "build").mkdir()

            _, lines = self.run_cli(root, "-n", "proj", "--ignore", "build", "src", "--ignore", "readme.md")

            self.assertEqual(lines, ["proj"])

    def test_to_file_writes_command_line_then_tree(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            make_project(root)
            (root / "dir_tree.txt").write_text("stale contents\n", encoding="utf-8")

            code, lines = self.run_cli(root, "--to-file", "-n", "proj")

            self.assertEqual(code, 0)
            self.assertEqual(lines, ["proj", "├─ src", "│  └─ a.txt", "└─ readme.md"])
            stored = (root / "dir_tree.txt").read_text(encoding="utf-8").splitlines()
            self.assertEqual(stored, ["printdir --to-file -n proj"] + lines)

    def test_to_file_with_no_ignore_lists_the_artifact_itself(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            make_project(root)

            _, lines = self.run_cli(root, "--to-file", "--no-ignore", "-n", "proj")

            self.assertIn("├─ dir_tree.txt", lines)

    def test_time_flag_reports_elapsed_time_and_entry_count(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            make_project(root)

            code, _ = self.run_cli(root, "--time", "--no-color")

            self.assertEqual(code, 0)
            self.assertRegex(self.stderr.getvalue(), r"\[INFO\] Finished in \d+\.\d\d ms \(3 entries\)")

    def test_unwritable_artifact_exits_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            make_project(root)
            (root / "dir_tree.txt").mkdir()

            code, lines = self.run_cli(root, "--to-file", "--no-color")

            self.assertEqual(code, 1)
            self.assertEqual(lines, [])
            self.assertIn("[ERROR] cannot write", self.stderr.getvalue())

    def test_follow_symlinks_flag_expands_linked_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real").mkdir()
            (root / "real" / "x.txt").write_text("x", encoding="utf-8")
            (root / "link").symlink_to(root / "real", target_is_directory=True)

            _, lines = self.run_cli(root, "-n", "proj", "--follow-symlinks")

            self.assertEqual(lines, ["proj", "├─ link", "│  └─ x.txt", "└─ real", "   └─ x.txt"])

    def test_verbose_flag_enables_debug_messages(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)

            self.run_cli(root, "--no-color")
            self.assertNotIn("[DEBUG]", self.stderr.getvalue())

            self.run_cli(root, "--verbose", "--no-color")
            self.assertIn("[DEBUG] Rendering ", self.stderr.getvalue())

    def test_unreadable_root_exits_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"

            code, lines = self.run_cli(missing, "--no-color")

            self.assertEqual(code, 1)
            self.assertEqual(lines, ["missing"])
            self.assertIn("[ERROR] cannot list", self.stderr.getvalue())


class CliReplayTests(CliTestCase):
    def test_replay_runs_stored_command(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            make_project(root)
            (root / "dir_tree.txt").write_text("printdir -d 1 -n proj\n", encoding="utf-8")

            code, lines = self.run_cli(root, "--use-prev-cmd", "--no-color")

            self.assertEqual(code, 0)
            self.assertEqual(lines, ["proj", "├─ src", "└─ readme.md"])
            self.assertIn("[INFO] Executing previous command: printdir -d 1 -n proj", self.stderr.getvalue())

    def test_replay_ignores_other_flags(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            make_project(root)
            (root / "dir_tree.txt").write_text("printdir -n proj\n", encoding="utf-8")

            _, lines = self.run_cli(root, "--use-prev-cmd", "-d", "1", "--ignore", "src")

            self.assertEqual(lines, ["proj", "├─ src", "│  └─ a.txt", "└─ readme.md"])

    def test_replay_of_to_file_command_rewrites_artifact(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            make_project(root)
            self.run_cli(root, "--to-file", "-n", "proj", "-d", "1")
            (root / "src" / "new.txt").write_text("n", encoding="utf-8")

            code, _ = self.run_cli(root, "--use-prev-cmd")

            self.assertEqual(code, 0)
            stored = (root / "dir_tree.txt").read_text(encoding="utf-8").splitlines()
            self.assertEqual(stored, ["printdir --to-file -n proj -d 1", "proj", "├─ src", "└─ readme.md"])

    def test_replay_without_stored_command_exits_one(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "dir_tree.txt").write_text("proj\n", encoding="utf-8")

            code, lines = self.run_cli(root, "--use-prev-cmd", "--no-color")

            self.assertEqual(code, 1)
            self.assertEqual(lines, [])
            self.assertIn("[ERROR] No previous command found.", self.stderr.getvalue())

    def test_replay_without_artifact_exits_one(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            code, _ = self.run_cli(Path(tmp), "--use-prev-cmd")

            self.assertEqual(code, 1)


class BuildRenderConfigTests(unittest.TestCase):
    def test_cli_flags_extend_and_override_user_defaults(self) -> None:
        defaults = UserDefaults(
            ignore=(".git",),
            no_content=("node_modules",),
            ascii=True,
            order="native",
            show_hidden=True,
            follow_symlinks=True,
        )
        args = cli.build_parser().parse_args(["--ignore", "build", "--no-hidden", "--order", "name"])

        config = cli.build_render_config(args, defaults)

        self.assertEqual(config.policy.ignore, frozenset({".git", "build"}))
        self.assertEqual(config.policy.no_content, frozenset({"node_modules"}))
        self.assertIs(config.glyphs, ASCII_GLYPHS)
        self.assertEqual(config.order, "name")
        self.assertFalse(config.show_hidden)
        self.assertTrue(config.follow_symlinks)
        self.assertEqual(config.max_depth, -1)
        self.assertTrue(config.depth_unbounded())

    def test_defaults_without_flags(self) -> None:
        args = cli.build_parser().parse_args([])

        config = cli.build_render_config(args, UserDefaults())

        self.assertIs(config.glyphs, UNICODE_GLYPHS)
        self.assertIsNone(config.display_name)
        self.assertTrue(config.show_hidden)
        self.assertFalse(config.policy.no_ignore)
        self.assertFalse(config.strict)
        self.assertFalse(config.follow_symlinks)


if __name__ == "__main__":
    unittest.main()
