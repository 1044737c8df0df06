"""Turn a diff mode into the git diff command it stands for."""

import shlex
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from diffpick.constants import (
    DIFF_CMD_FMT,
    ERR_DETACHED_HEAD,
    ERR_MISSING_AHEAD,
    ERR_MISSING_CURRENT_BRANCH,
    GIT_CACHED_FLAG,
    HEAD_ANCESTOR_FMT,
    REMOTE_REF_FMT,
)
from diffpick.git import count_commits_ahead, get_current_branch, has_staged_changes


class DiffMode(Enum):
    """What the working tree is compared against."""

    WORKING_TREE = "working-tree"
    BRANCH = "branch"
    REMOTE = "remote"
    UPSTREAM = "upstream"
    REVLIST = "revlist"
    REVLIST_REMOTE = "revlist-remote"

    @property
    def needs_ahead_count(self) -> bool:
        return self in (DiffMode.REVLIST, DiffMode.REVLIST_REMOTE)


@dataclass(frozen=True)
class DiffPlan:
    """A resolved git diff invocation."""

    mode: DiffMode
    base: str
    staged: bool

    @property
    def command(self) -> str:
        """The diff subcommand, e.g. 'diff origin/main --cached'."""
        cmd = DIFF_CMD_FMT.format(base=self.base)
        if self.staged:
            cmd = f"{cmd} {GIT_CACHED_FLAG}"
        return cmd

    @property
    def args(self) -> list[str]:
        return shlex.split(self.command)


def plan(
    mode: DiffMode,
    remote: str,
    default_branch: str,
    staged: bool,
    current_branch: str | None = None,
    ahead: int | None = None,
) -> DiffPlan:
    """Build the diff plan for a mode from already-resolved repository facts."""
    if mode in (DiffMode.WORKING_TREE, DiffMode.BRANCH):
        base = default_branch
    elif mode == DiffMode.REMOTE:
        base = REMOTE_REF_FMT.format(remote=remote, ref=default_branch)
    elif mode == DiffMode.UPSTREAM:
        if current_branch is None:
            raise ValueError(ERR_MISSING_CURRENT_BRANCH)
        base = REMOTE_REF_FMT.format(remote=remote, ref=current_branch)
    else:
        if ahead is None:
            raise ValueError(ERR_MISSING_AHEAD)
        base = HEAD_ANCESTOR_FMT.format(count=ahead)
        if mode == DiffMode.REVLIST_REMOTE:
            base = REMOTE_REF_FMT.format(remote=remote, ref=base)

    return DiffPlan(mode=mode, base=base, staged=staged)


def build_plan(
    mode: DiffMode, remote: str, default_branch: str, cwd: Path | None = None
) -> DiffPlan:
    """Query git for what the mode needs and build its diff plan.

    Any failing git query propagates; there is no partial plan.
    """
    current_branch = None
    ahead = None
    if mode == DiffMode.UPSTREAM:
        current_branch = get_current_branch(cwd)
        if not current_branch:
            raise RuntimeError(ERR_DETACHED_HEAD)
    if mode.needs_ahead_count:
        ahead = count_commits_ahead(default_branch, cwd)

    return plan(
        mode,
        remote,
        default_branch,
        has_staged_changes(cwd),
        current_branch=current_branch,
        ahead=ahead,
    )
