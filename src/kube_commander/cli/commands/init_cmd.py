"""kcom init [shell] - Print the shell function that keeps the session."""

from __future__ import annotations

import typer

from kube_commander.output.shell import SUPPORTED_SHELLS, init_snippet


def init(
    shell: str = typer.Argument("bash", help=f"Shell: {', '.join(SUPPORTED_SHELLS)}"),
) -> None:
    """Print a kcom() shell function; add 'eval "$(kcom init bash)"' to your rc file."""
    try:
        snippet = init_snippet(shell)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="SHELL")
    typer.echo(snippet, nl=False)
