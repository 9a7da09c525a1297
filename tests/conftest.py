"""
Shared pytest fixtures for Kube Commander tests.

- FakeRunner: records kubectl argument vectors and replies with canned output
- FakeKubeconfig: stands in for the persisted kubeconfig
- render_table: lays out rows the way kubectl's tabwriter does
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from kube_commander.core.kubectl import Kubectl
from kube_commander.models import CommandResult, KubeconfigInfo
from kube_commander.models.session import Session


@dataclass
class RecordedCall:
    args: list[str]
    capture: bool


class FakeRunner:
    """Replies to kubectl calls by substring match on the joined arguments."""

    def __init__(self):
        self._responses: list[tuple[str, CommandResult]] = []
        self.calls: list[RecordedCall] = []

    def register(self, pattern: str, stdout: str = "", stderr: str = "", exit_code: int = 0) -> "FakeRunner":
        self._responses.append((pattern, CommandResult(stdout=stdout, stderr=stderr, exit_code=exit_code)))
        return self

    def run(self, args: list[str], capture: bool = True) -> CommandResult:
        self.calls.append(RecordedCall(args=list(args), capture=capture))
        joined = " ".join(args)
        for pattern, canned in self._responses:
            if pattern in joined:
                return CommandResult(
                    args=list(args),
                    stdout=canned.stdout if capture else "",
                    stderr=canned.stderr if capture else "",
                    exit_code=canned.exit_code,
                )
        return CommandResult(args=list(args))

    @property
    def commands(self) -> list[list[str]]:
        return [call.args for call in self.calls]

    def count(self, args: list[str]) -> int:
        return sum(1 for call in self.calls if call.args == args)


@dataclass
class FakeKubeconfig:
    info: KubeconfigInfo | None = None
    reads: int = 0

    def current(self) -> KubeconfigInfo | None:
        self.reads += 1
        return self.info

    def current_context(self) -> str | None:
        info = self.current()
        return info.context if info else None


def _render_table(rows: list[list[str]]) -> str:
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    lines = ["   ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip() for row in rows]
    return "\n".join(lines) + "\n"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("KUBE_CONTEXT", raising=False)
    monkeypatch.delenv("KUBE_NAMESPACE", raising=False)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def kubeconfig() -> FakeKubeconfig:
    return FakeKubeconfig()


@pytest.fixture
def session() -> Session:
    return Session()


@pytest.fixture
def kubectl(session, runner, kubeconfig) -> Kubectl:
    return Kubectl(session=session, runner=runner, kubeconfig=kubeconfig)


@pytest.fixture
def render_table():
    return _render_table


@pytest.fixture
def pods_table(render_table) -> str:
    return render_table([
        ["NAME", "READY", "STATUS", "RESTARTS", "AGE"],
        ["api-7d9c5b-x2x", "1/1", "Running", "0", "2h45m"],
        ["worker-5f6d7c-abcde", "0/1", "CrashLoopBackOff", "7 (2m ago)", "3d2h"],
    ])
