"""kcom namespace <namespace> - Set the session namespace."""

from __future__ import annotations

import typer

from kube_commander.cli.options import OutputOption
from kube_commander.core.kubectl import Kubectl
from kube_commander.output.formatters import output_namespace


def namespace(
    namespace: str = typer.Argument(help="Namespace name"),
    output: str = OutputOption,
) -> None:
    """Switch the session namespace, keeping the context."""
    kubectl = Kubectl()
    output_namespace(kubectl.namespace(namespace), output)
