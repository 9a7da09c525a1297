"""kcom session - Show the session context and namespace."""

from __future__ import annotations

from kube_commander.cli.options import OutputOption
from kube_commander.models.session import Session
from kube_commander.output.formatters import output_session


def session(output: str = OutputOption) -> None:
    """Show the context and namespace carried by this shell."""
    output_session(Session.from_env().as_dict(), output)
