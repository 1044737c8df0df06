from unittest.mock import MagicMock, patch

from diffpick.menu import build_menu_entry, build_preview_command, select_files
from diffpick.plan import DiffMode, DiffPlan

PLAN = DiffPlan(mode=DiffMode.REMOTE, base="origin/main", staged=True)


class TestBuildPreviewCommand:
    def test_includes_plan_and_placeholder(self) -> None:
        result = build_preview_command(PLAN)
        assert result == "git diff origin/main --cached --color=always -- '{}'"

    def test_placeholder_formats_entry(self) -> None:
        result = build_preview_command(PLAN).format("../readme.md")
        assert result.endswith("-- '../readme.md'")


class TestSelectFiles:
    def test_returns_none_when_no_paths(self) -> None:
        with patch("diffpick.menu.TerminalMenu") as mock_menu_class:
            assert select_files([], PLAN) is None
            mock_menu_class.assert_not_called()

    def test_returns_selected_paths(self) -> None:
        paths = ["a.py", "../b.py", "c/d.py"]
        with patch("diffpick.menu.TerminalMenu") as mock_menu_class:
            mock_menu = MagicMock()
            mock_menu.show.return_value = (0, 2)
            mock_menu_class.return_value = mock_menu
            assert select_files(paths, PLAN) == ["a.py", "c/d.py"]
            kwargs = mock_menu_class.call_args.kwargs
            assert kwargs["multi_select"] is True
            assert kwargs["preview_command"] == build_preview_command(PLAN)

    def test_returns_none_when_cancelled(self) -> None:
        with patch("diffpick.menu.TerminalMenu") as mock_menu_class:
            mock_menu = MagicMock()
            mock_menu.show.return_value = None
            mock_menu_class.return_value = mock_menu
            assert select_files(["a.py"], PLAN) is None


class TestBuildMenuEntry:
    def test_plain_path(self) -> None:
        assert build_menu_entry("src/a.py") == "src/a.py|src/a.py"

    def test_pipe_is_escaped(self) -> None:
        """
        Given: A path containing '|', which TerminalMenu treats as a separator
        When: The menu entry is built
        Then: Both display text and preview argument keep the whole path
        """
        assert build_menu_entry("docs/a|b.md") == "docs/a\\|b.md|docs/a\\|b.md"

    def test_bracket_prefix_is_not_a_shortcut(self) -> None:
        assert build_menu_entry("[x] notes.md") == "./[x] notes.md|[x] notes.md"

    def test_entries_handed_to_menu(self) -> None:
        paths = ["a.py", "docs/a|b.md"]
        with patch("diffpick.menu.TerminalMenu") as mock_menu_class:
            mock_menu = MagicMock()
            mock_menu.show.return_value = (1,)
            mock_menu_class.return_value = mock_menu
            assert select_files(paths, PLAN) == ["docs/a|b.md"]
            entries = mock_menu_class.call_args[0][0]
            assert entries == ["a.py|a.py", "docs/a\\|b.md|docs/a\\|b.md"]
