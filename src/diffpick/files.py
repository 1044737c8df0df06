from pathlib import Path

from diffpick.constants import (
    GIT_NAME_ONLY_FLAG,
    GIT_NUL_TERMINATED_FLAG,
    PARENT_DIR,
    PATH_SEP,
)
from diffpick.git import run_git
from diffpick.plan import DiffPlan


def list_files(diff_plan: DiffPlan, cwd: Path | None = None) -> list[str]:
    """Get repo-relative paths changed by the plan, in git's order.

    Paths are read NUL-terminated so git leaves them unquoted.
    """
    result = run_git(
        *diff_plan.args,
        GIT_NAME_ONLY_FLAG,
        GIT_NUL_TERMINATED_FLAG,
        cwd=cwd,
        capture=True,
    )
    return [path for path in result.stdout.split("\0") if path]


def relativize(from_dir: str, to_path: str) -> str:
    """Rewrite a repo-relative path so it resolves from from_dir.

    from_dir is the working directory relative to the repository root, as
    printed by `git rev-parse --show-prefix`; "" means the root.

    Examples:
        relativize("", "readme.md") -> "readme.md"
        relativize("foo/bar/baz", "foo/hey") -> "../../hey"
        relativize("foo/bar", "foo/bar/qux.txt") -> "qux.txt"
    """
    if not from_dir:
        return to_path

    from_parts = [p for p in from_dir.strip(PATH_SEP).split(PATH_SEP) if p]
    *to_dirs, name = to_path.split(PATH_SEP)

    shared = 0
    for from_part, to_part in zip(from_parts, to_dirs):
        if from_part != to_part:
            break
        shared += 1

    ups = len(from_parts) - shared
    return PARENT_DIR * ups + PATH_SEP.join([*to_dirs[shared:], name])


def relativize_all(from_dir: str, paths: list[str]) -> list[str]:
    return [relativize(from_dir, path) for path in paths]
