"""Data models for Kube Commander."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CommandResult:
    """Outcome of one kubectl invocation.

    ``stdout``/``stderr`` are empty when the output was not captured
    (watch mode, interactive pass-through).
    """

    args: list[str] = field(default_factory=list)
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


@dataclass
class KubeconfigInfo:
    context: str = ""
    namespace: str | None = None

    def as_dict(self) -> dict[str, str | None]:
        return {"context": self.context, "namespace": self.namespace}
