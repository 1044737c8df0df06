import shlex
import subprocess

import click


def open_files(editor: str, paths: list[str]) -> None:
    """Open each path in the editor, one after another.

    Each editor process is waited on before the next starts; a failing
    launch raises and stops the remaining files from being opened.
    """
    cmd = shlex.split(editor)
    for i, path in enumerate(paths, 1):
        if len(paths) > 1:
            click.secho(f"Opening {path} ({i}/{len(paths)})...", fg="blue", err=True)
        subprocess.run([*cmd, path], check=True)
