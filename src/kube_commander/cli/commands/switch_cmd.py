"""kcom switch <context> [namespace] - Set the session context."""

from __future__ import annotations

from typing import Optional

import typer

from kube_commander.cli.completion import complete_contexts
from kube_commander.cli.options import OutputOption
from kube_commander.core.kubectl import Kubectl
from kube_commander.output.formatters import output_session


def switch(
    context: str = typer.Argument(help="Context name", autocompletion=complete_contexts),
    namespace: Optional[str] = typer.Argument(None, help="Namespace to switch to as well"),
    output: str = OutputOption,
) -> None:
    """Switch the session to another context (and optionally namespace)."""
    kubectl = Kubectl()
    session = kubectl.switch(context, namespace)
    output_session(session, output, title="Switched")
