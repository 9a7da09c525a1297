"""kcom get - kubectl get with parsed tables."""

from __future__ import annotations

from typing import List, Optional

import typer

from kube_commander.cli.options import ContextOption, NamespaceOption, exit_like, reporting_errors
from kube_commander.core.kubectl import Kubectl
from kube_commander.output.formatters import output_get_result


def get(
    args: Optional[List[str]] = typer.Argument(
        None, help="Resource type, name and any other kubectl get flags", show_default=False,
    ),
    context: Optional[str] = ContextOption,
    namespace: Optional[str] = NamespaceOption,
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="kubectl output format (json, yaml, wide, name, ...)",
    ),
    watch: bool = typer.Option(False, "--watch", "-w", help="Stream changes straight from kubectl"),
    parse: Optional[bool] = typer.Option(
        None, "--parse/--no-parse", help="Force or skip table parsing (default: automatic)",
    ),
) -> None:
    """Get resources.

    Lists are shown as a parsed table with AGE read as a duration. A single
    named resource (TYPE NAME) is shown as YAML unless -o says otherwise.
    """
    kubectl = Kubectl()
    with reporting_errors():
        result = kubectl.get(
            list(args or []),
            context=context,
            namespace=namespace,
            output=output,
            watch=watch,
            parse=parse,
        )
    output_get_result(result)
    exit_like(result.command)
