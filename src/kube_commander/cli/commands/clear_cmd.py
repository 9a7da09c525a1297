"""kcom clear - Forget the session context and namespace."""

from __future__ import annotations

import typer

from kube_commander.cli.options import OutputOption
from kube_commander.core.kubectl import Kubectl
from kube_commander.output.formatters import output_session


def clear(
    no_context: bool = typer.Option(False, "--no-context", help="Keep the session context"),
    no_namespace: bool = typer.Option(False, "--no-namespace", help="Keep the session namespace"),
    kubeconfig: bool = typer.Option(
        False, "--kubeconfig",
        help="Also unset kubectl's current-context and the namespace set on it",
    ),
    output: str = OutputOption,
) -> None:
    """Clear the session context and namespace."""
    kubectl = Kubectl()
    session = kubectl.clear(
        no_context=no_context, no_namespace=no_namespace, clear_kubeconfig=kubeconfig,
    )
    output_session(session, output, title="Cleared")
