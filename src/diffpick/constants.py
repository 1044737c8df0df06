"""Constants for diffpick - no magic strings/numbers allowed elsewhere."""

# Git constants
DEFAULT_REMOTE = "origin"
GIT_UPSTREAM_REF = "@{u}"
GIT_REF_REMOTE_HEAD_FMT = "refs/remotes/{remote}/HEAD"
REMOTE_HEAD_PATTERN_FMT = r"^(?:ref: )?refs/remotes/{remote}/(.+)$"
GIT_CACHED_FLAG = "--cached"
GIT_NAME_ONLY_FLAG = "--name-only"
GIT_NUL_TERMINATED_FLAG = "-z"

# Diff commands, one base ref per mode
DIFF_CMD_FMT = "diff {base}"
REMOTE_REF_FMT = "{remote}/{ref}"
HEAD_ANCESTOR_FMT = "HEAD~{count}"

# Path handling
PATH_SEP = "/"
PARENT_DIR = "../"

# Editor
EDITOR_ENV_VAR = "EDITOR"
DEFAULT_EDITOR = "nvim"

# Environment overrides
MODE_ENV_VAR = "DIFFPICK_MODE"
REMOTE_ENV_VAR = "DIFFPICK_REMOTE"

# Menu styling
MENU_CURSOR_STYLE = ("fg_cyan", "bold")
MENU_SEARCH_KEY = "/"
MENU_PREVIEW_SIZE = 0.6
MENU_ENTRY_SEP = "|"
MENU_ESCAPED_SEP = "\\|"
MENU_SHORTCUT_PREFIX = "./"
PREVIEW_CMD_FMT = "git {command} --color=always -- '{{}}'"
STATUS_BAR = "(space/tab) Toggle  (enter) Open  (/) Search  (q) Quit"

# Error messages
ERR_NOT_A_REPO = "Current directory is not a git repository."
ERR_REMOTE_HEAD_MISSING = (
    "No default branch recorded for remote '{remote}'. "
    "Run 'git remote set-head {remote} --auto' first."
)
ERR_REMOTE_HEAD_MALFORMED = "Unexpected symbolic ref for remote '{remote}': {content!r}"
ERR_DETACHED_HEAD = "HEAD is detached; upstream mode needs a checked-out branch."
ERR_MISSING_CURRENT_BRANCH = "upstream mode requires current_branch"
ERR_MISSING_AHEAD = "revlist modes require the ahead count"
