from simple_term_menu import TerminalMenu  # type: ignore[import-untyped]

from diffpick.constants import (
    MENU_CURSOR_STYLE,
    MENU_ENTRY_SEP,
    MENU_ESCAPED_SEP,
    MENU_PREVIEW_SIZE,
    MENU_SEARCH_KEY,
    MENU_SHORTCUT_PREFIX,
    PREVIEW_CMD_FMT,
    STATUS_BAR,
)
from diffpick.plan import DiffPlan


def build_preview_command(diff_plan: DiffPlan) -> str:
    """Build the preview shell command; '{}' is replaced by the entry."""
    return PREVIEW_CMD_FMT.format(command=diff_plan.command)


def build_menu_entry(path: str) -> str:
    """Build a menu entry whose display text and preview argument are path.

    TerminalMenu splits entries on unescaped '|' and reads a leading '[x]'
    as a shortcut key, so both are neutralised.
    """
    escaped = path.replace(MENU_ENTRY_SEP, MENU_ESCAPED_SEP)
    display = escaped
    if display.startswith("["):
        display = f"{MENU_SHORTCUT_PREFIX}{display}"
    return f"{display}{MENU_ENTRY_SEP}{escaped}"


def select_files(paths: list[str], diff_plan: DiffPlan) -> list[str] | None:
    """Show a multi-select menu of paths, return the chosen ones or None."""
    if not paths:
        return None

    menu = TerminalMenu(
        [build_menu_entry(p) for p in paths],
        title=f"git {diff_plan.command}\n",
        multi_select=True,
        show_multi_select_hint=True,
        preview_command=build_preview_command(diff_plan),
        preview_size=MENU_PREVIEW_SIZE,
        search_key=MENU_SEARCH_KEY,
        menu_cursor_style=MENU_CURSOR_STYLE,
        status_bar=STATUS_BAR,
    )
    selected: tuple[int, ...] | None = menu.show()
    if selected is None:
        return None
    return [paths[i] for i in selected]
