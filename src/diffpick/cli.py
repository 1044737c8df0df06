import subprocess

import click

from diffpick.config import get_default_mode, get_editor, get_remote_override
from diffpick.constants import ERR_NOT_A_REPO
from diffpick.editor import open_files
from diffpick.files import list_files, relativize_all
from diffpick.git import (
    get_prefix,
    get_repo_root,
    resolve_default_branch,
    resolve_remote,
)
from diffpick.menu import select_files
from diffpick.plan import DiffMode, DiffPlan, build_plan


def _process_error(exc: subprocess.CalledProcessError) -> click.ClickException:
    cmd = exc.cmd if isinstance(exc.cmd, str) else " ".join(exc.cmd)
    message = f"'{cmd}' failed with exit code {exc.returncode}."
    if exc.stderr and exc.stderr.strip():
        message = f"{message}\n{exc.stderr.strip()}"
    return click.ClickException(message)


def _resolve_plan(mode: DiffMode, remote: str | None) -> DiffPlan:
    try:
        repo_root = get_repo_root()
    except subprocess.CalledProcessError as exc:
        raise click.ClickException(ERR_NOT_A_REPO) from exc

    remote_name = resolve_remote(remote)
    default_branch = resolve_default_branch(remote_name, repo_root)
    return build_plan(mode, remote_name, default_branch)


@click.command()
@click.option(
    "--mode",
    "-m",
    type=click.Choice([m.value for m in DiffMode]),
    default=None,
    help="What to diff against (default: revlist-remote, or $DIFFPICK_MODE).",
)
@click.option("--editor", "-e", default=None, help="Editor command (default: $EDITOR).")
@click.option(
    "--remote",
    "-r",
    default=None,
    help="Remote name (default: upstream's remote, then origin).",
)
@click.option(
    "--list",
    "-l",
    "list_only",
    is_flag=True,
    help="Print the changed files instead of opening the picker.",
)
@click.option("--verbose", "-v", is_flag=True, help="Show the git diff being used.")
@click.version_option(package_name="diffpick")
def main(
    mode: str | None = None,
    editor: str | None = None,
    remote: str | None = None,
    list_only: bool = False,
    verbose: bool = False,
) -> None:
    """Pick changed files from a git diff and open them in an editor.

    \b
    Examples:
        diffpick                  # changes since branching off the default branch
        diffpick -m branch        # diff against the local default branch
        diffpick -m upstream      # diff against this branch's remote
        vim $(diffpick -l)        # open everything at once
    """
    diff_mode = DiffMode(mode) if mode else get_default_mode()

    try:
        diff_plan = _resolve_plan(diff_mode, remote or get_remote_override())
        if verbose:
            click.secho(f"git {diff_plan.command}", fg="blue", err=True)

        files = list_files(diff_plan)
        if not files:
            return
        paths = relativize_all(get_prefix(), files)
    except subprocess.CalledProcessError as exc:
        raise _process_error(exc) from exc
    except (RuntimeError, FileNotFoundError) as exc:
        raise click.ClickException(str(exc)) from exc

    if list_only:
        for path in paths:
            click.echo(path)
        return

    selected = select_files(paths, diff_plan)
    if not selected:
        return

    try:
        open_files(get_editor(editor), selected)
    except subprocess.CalledProcessError as exc:
        raise _process_error(exc) from exc
    except FileNotFoundError as exc:
        raise click.ClickException(f"Editor not found: {exc.filename}") from exc


if __name__ == "__main__":
    main()
