"""Shared CLI options and error reporting."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.markup import escape

from typer.core import TyperCommand

from kube_commander.cli.completion import complete_contexts
from kube_commander.config.settings import settings
from kube_commander.core.errors import KcomError
from kube_commander.models import CommandResult

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml, shell")
InfoOutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
NamespaceOption = typer.Option(None, "--namespace", "-n", help="Kubernetes namespace (default: session)")
ContextOption = typer.Option(
    None, "--context", help="Kubernetes context name (default: session)",
    autocompletion=complete_contexts,
)

# kubectl's own flags pass through untouched.
FORWARDING = {"allow_extra_args": True, "ignore_unknown_options": True}


class ForwardingCommand(TyperCommand):
    """Keeps a ``--`` separator and everything after it for kubectl.

    Click drops the first ``--`` while parsing; kubectl needs it for
    ``exec POD -- COMMAND``. Options after it are never ours.
    """

    def parse_args(self, ctx, args):
        if "--" not in args:
            return super().parse_args(ctx, args)
        split = args.index("--")
        rest = super().parse_args(ctx, args[:split])
        ctx.params["args"] = [*(ctx.params.get("args") or ()), *args[split:]]
        return rest


err_console = Console(stderr=True)


@contextmanager
def reporting_errors() -> Iterator[None]:
    try:
        yield
    except KcomError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(code=e.exit_code)


def exit_like(result: CommandResult) -> None:
    """Re-emit kubectl's stderr verbatim and exit with its code on failure."""
    if result.stderr:
        typer.echo(result.stderr, err=True, nl=False)
    if not result.ok:
        raise typer.Exit(code=result.exit_code)
