"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import typer

from kube_commander.cli.options import FORWARDING, ForwardingCommand
from kube_commander.config.log import configure_logging

app = typer.Typer(
    name="kcom",
    help="Kube Commander - kubectl with a per-shell context and namespace.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log kubectl invocations to stderr"),
) -> None:
    configure_logging(verbose)


def _register_commands() -> None:
    from kube_commander.cli.commands.run_cmd import run
    from kube_commander.cli.commands.get_cmd import get
    from kube_commander.cli.commands.switch_cmd import switch
    from kube_commander.cli.commands.namespace_cmd import namespace
    from kube_commander.cli.commands.clear_cmd import clear
    from kube_commander.cli.commands.kubeconfig_cmd import kubeconfig_info
    from kube_commander.cli.commands.session_cmd import session
    from kube_commander.cli.commands.init_cmd import init

    app.command(name="run", cls=ForwardingCommand, context_settings=FORWARDING, help="Run kubectl with the session context")(run)
    app.command(name="get", cls=ForwardingCommand, context_settings=FORWARDING, help="Get resources as a parsed table")(get)
    app.command(name="switch", help="Switch session context")(switch)
    app.command(name="namespace", help="Switch session namespace")(namespace)
    app.command(name="ns", hidden=True)(namespace)
    app.command(name="clear", help="Clear session context and namespace")(clear)
    app.command(name="kubeconfig-info", help="Show kubectl's persisted current context")(kubeconfig_info)
    app.command(name="session", help="Show session context and namespace")(session)
    app.command(name="init", help="Print shell integration")(init)


_register_commands()


def main() -> None:
    app()
