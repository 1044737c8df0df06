import os

import click

from diffpick.constants import (
    DEFAULT_EDITOR,
    EDITOR_ENV_VAR,
    MODE_ENV_VAR,
    REMOTE_ENV_VAR,
)
from diffpick.plan import DiffMode


def get_editor(explicit: str | None = None) -> str:
    """Get the editor command: explicit flag, then $EDITOR, then nvim."""
    if explicit:
        return explicit
    return os.environ.get(EDITOR_ENV_VAR) or DEFAULT_EDITOR


def get_default_mode() -> DiffMode:
    """Get the diff mode used when --mode is not given.

    Reads DIFFPICK_MODE (e.g. "branch"), defaulting to revlist-remote.
    """
    value = os.environ.get(MODE_ENV_VAR)
    if not value:
        return DiffMode.REVLIST_REMOTE
    try:
        return DiffMode(value)
    except ValueError as exc:
        choices = ", ".join(m.value for m in DiffMode)
        raise click.BadParameter(
            f"{value!r} is not one of {choices}.", param_hint=MODE_ENV_VAR
        ) from exc


def get_remote_override() -> str | None:
    """Get the remote set via DIFFPICK_REMOTE, if any."""
    return os.environ.get(REMOTE_ENV_VAR) or None
