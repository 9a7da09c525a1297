"""Results of ``kcom get``: a parsed resource table or untouched text."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Union

from kube_commander.models import CommandResult

Cell = Union[str, timedelta]


@dataclass
class ResourceTable:
    columns: list[str] = field(default_factory=list)
    rows: list[dict[str, Cell]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def column(self, name: str) -> list[Cell]:
        return [row.get(name, "") for row in self.rows]


@dataclass
class RawOutput:
    """Output returned exactly as kubectl printed it."""

    text: str = ""


@dataclass
class GetResult:
    command: CommandResult
    # None when nothing was captured (watch mode)
    output: ResourceTable | RawOutput | None = None

    @property
    def is_table(self) -> bool:
        return isinstance(self.output, ResourceTable)
