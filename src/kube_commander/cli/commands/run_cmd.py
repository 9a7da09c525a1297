"""kcom run <kubectl args> - Pass-through with the session's context and namespace."""

from __future__ import annotations

from typing import List, Optional

import typer

from kube_commander.cli.options import ContextOption, NamespaceOption, reporting_errors
from kube_commander.core.kubectl import Kubectl


def run(
    args: Optional[List[str]] = typer.Argument(None, help="Arguments forwarded to kubectl", show_default=False),
    context: Optional[str] = ContextOption,
    namespace: Optional[str] = NamespaceOption,
) -> None:
    """Run any kubectl command with the session's context and namespace."""
    kubectl = Kubectl()
    with reporting_errors():
        result = kubectl.wrap(list(args or []), context=context, namespace=namespace, capture=False)
    if not result.ok:
        raise typer.Exit(code=result.exit_code)
