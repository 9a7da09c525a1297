"""Table / JSON / YAML / shell output dispatch."""

from __future__ import annotations

import json

import typer
import yaml
from rich.console import Console

from kube_commander.models import KubeconfigInfo
from kube_commander.models.table import GetResult, ResourceTable
from kube_commander.output.shell import namespace_export, session_exports

console = Console()


def output_session(session: dict[str, str | None], fmt: str, title: str = "Session") -> None:
    if fmt == "json":
        console.print_json(json.dumps(session))
    elif fmt == "yaml":
        typer.echo(yaml.dump(session, default_flow_style=False), nl=False)
    elif fmt == "shell":
        typer.echo(session_exports(session))
    else:
        from kube_commander.output.tables import session_panel
        console.print(session_panel(session, title=title))


def output_namespace(namespace: str, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps({"namespace": namespace}))
    elif fmt == "yaml":
        typer.echo(yaml.dump({"namespace": namespace}, default_flow_style=False), nl=False)
    elif fmt == "shell":
        typer.echo(namespace_export(namespace))
    else:
        console.print(f"Namespace: [bold blue]{namespace}[/bold blue]")


def output_kubeconfig_info(info: KubeconfigInfo | None, fmt: str) -> None:
    data = info.as_dict() if info else None
    if fmt == "json":
        console.print_json(json.dumps(data))
    elif fmt == "yaml":
        typer.echo(yaml.dump(data, default_flow_style=False), nl=False)
    elif info is None:
        console.print("[dim]No current context set in kubeconfig.[/dim]")
    else:
        from kube_commander.output.tables import kubeconfig_panel
        console.print(kubeconfig_panel(info))


def output_get_result(result: GetResult) -> None:
    """Print a get result: parsed tables through Rich, everything else verbatim."""
    if result.output is None:
        return
    if isinstance(result.output, ResourceTable):
        from kube_commander.output.tables import resource_table
        console.print(resource_table(result.output))
        return
    typer.echo(result.output.text, nl=False)
