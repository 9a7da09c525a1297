"""Rich table builders for each command."""

from __future__ import annotations

from datetime import timedelta

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from kube_commander.models import KubeconfigInfo
from kube_commander.models.table import Cell, ResourceTable
from kube_commander.output.themes import COLUMN_STYLES, STATUS_COLUMNS, styled_status
from kube_commander.utils.duration import format_duration


def _cell_text(column: str, value: Cell) -> str:
    if isinstance(value, timedelta):
        return format_duration(value)
    if column in STATUS_COLUMNS and value:
        return styled_status(escape(value))
    return escape(value)


def resource_table(table: ResourceTable) -> Table:
    rich_table = Table(expand=False, show_lines=False, box=None, padding=(0, 2))
    for column in table.columns:
        justify = "right" if column in ("AGE", "RESTARTS") else "left"
        rich_table.add_column(
            column, style=COLUMN_STYLES.get(column), no_wrap=True, justify=justify,
        )
    for row in table.rows:
        rich_table.add_row(*(_cell_text(col, row.get(col, "")) for col in table.columns))
    return rich_table


def session_panel(session: dict[str, str | None], title: str = "Session") -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("Context", escape(session.get("context") or "-"))
    table.add_row("Namespace", escape(session.get("namespace") or "-"))
    return Panel(table, title=f"[bold]{title}[/bold]", border_style="blue", expand=False)


def kubeconfig_panel(info: KubeconfigInfo) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    table.add_row("Current Context", escape(info.context))
    table.add_row("Namespace", escape(info.namespace or "default"))
    return Panel(table, title="[bold]Kubeconfig[/bold]", border_style="green", expand=False)
