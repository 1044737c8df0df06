import re
import subprocess
from pathlib import Path

from diffpick.constants import (
    DEFAULT_REMOTE,
    ERR_REMOTE_HEAD_MALFORMED,
    ERR_REMOTE_HEAD_MISSING,
    GIT_REF_REMOTE_HEAD_FMT,
    GIT_UPSTREAM_REF,
    PATH_SEP,
    REMOTE_HEAD_PATTERN_FMT,
)


class RemoteHeadError(RuntimeError):
    """The remote's default branch could not be determined."""


def run_git(
    *args: str, cwd: Path | None = None, capture: bool = False
) -> subprocess.CompletedProcess[str]:
    """Run a git command."""
    cmd = ["git", *args]
    if capture:
        return subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, check=True)
    return subprocess.run(cmd, cwd=cwd, text=True, check=True)


def get_repo_root(cwd: Path | None = None) -> Path:
    """Get the top-level directory of the current repository."""
    result = run_git("rev-parse", "--show-toplevel", cwd=cwd, capture=True)
    return Path(result.stdout.strip())


def get_common_dir(cwd: Path | None = None) -> Path:
    """Get the metadata directory shared by all worktrees of the repository.

    In a linked worktree `.git` is a file, so refs live under the main
    repository's git directory instead.
    """
    result = run_git("rev-parse", "--git-common-dir", cwd=cwd, capture=True)
    common_dir = Path(result.stdout.strip())
    if common_dir.is_absolute():
        return common_dir
    return (cwd or Path.cwd()) / common_dir


def get_prefix(cwd: Path | None = None) -> str:
    """Get the working directory relative to the repository root ("" at root)."""
    result = run_git("rev-parse", "--show-prefix", cwd=cwd, capture=True)
    return result.stdout.strip()


def get_current_branch(cwd: Path | None = None) -> str:
    """Get the checked-out branch name ("" when HEAD is detached)."""
    result = run_git("branch", "--show-current", cwd=cwd, capture=True)
    return result.stdout.strip()


def resolve_remote(override: str | None = None, cwd: Path | None = None) -> str:
    """Get the remote to diff against.

    An explicit override wins. Otherwise the remote of the current branch's
    upstream is used, and when no upstream is configured we fall back to
    DEFAULT_REMOTE so default-branch comparisons still work.
    """
    if override:
        return override
    try:
        result = run_git(
            "rev-parse",
            "--abbrev-ref",
            "--symbolic-full-name",
            GIT_UPSTREAM_REF,
            cwd=cwd,
            capture=True,
        )
    except subprocess.CalledProcessError:
        return DEFAULT_REMOTE
    upstream = result.stdout.strip()
    return upstream.split(PATH_SEP, 1)[0] if upstream else DEFAULT_REMOTE


def parse_remote_head(content: str, remote: str) -> str:
    """Extract the branch name from a remote's symbolic HEAD.

    Accepts both the raw ref file ("ref: refs/remotes/origin/main") and
    `git symbolic-ref` output ("refs/remotes/origin/main").
    """
    ref_line = content.strip()
    pattern = REMOTE_HEAD_PATTERN_FMT.format(remote=re.escape(remote))
    match = re.match(pattern, ref_line)
    if not match:
        raise RemoteHeadError(
            ERR_REMOTE_HEAD_MALFORMED.format(remote=remote, content=ref_line)
        )
    return match.group(1)


def read_remote_head(remote: str, repo_root: Path) -> str:
    """Read the remote's cached HEAD file from the repository metadata."""
    ref = GIT_REF_REMOTE_HEAD_FMT.format(remote=remote)
    head_file = get_common_dir(repo_root) / ref
    try:
        return head_file.read_text()
    except OSError as exc:
        raise RemoteHeadError(ERR_REMOTE_HEAD_MISSING.format(remote=remote)) from exc


def resolve_default_branch(remote: str, repo_root: Path) -> str:
    """Get the default branch (e.g. main) the remote's HEAD points at."""
    ref = GIT_REF_REMOTE_HEAD_FMT.format(remote=remote)
    try:
        result = run_git("symbolic-ref", ref, cwd=repo_root, capture=True)
    except subprocess.CalledProcessError:
        return parse_remote_head(read_remote_head(remote, repo_root), remote)
    return parse_remote_head(result.stdout, remote)


def has_staged_changes(cwd: Path | None = None) -> bool:
    """Check whether the index differs from HEAD."""
    result = run_git("diff", "--cached", "--shortstat", cwd=cwd, capture=True)
    return bool(result.stdout.strip())


def count_commits_ahead(base: str, cwd: Path | None = None) -> int:
    """Count commits reachable from HEAD but not from base."""
    result = run_git("rev-list", "--count", "HEAD", f"^{base}", cwd=cwd, capture=True)
    return int(result.stdout.strip())
