"""Running the kubectl binary."""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import Protocol

from kube_commander.config.settings import settings
from kube_commander.core.errors import KubectlNotFoundError
from kube_commander.models import CommandResult

logger = logging.getLogger(__name__)

# Exit status a shell reports for a child stopped by SIGINT.
INTERRUPTED_EXIT_CODE = 130


class CommandRunner(Protocol):
    def run(self, args: list[str], capture: bool = True) -> CommandResult: ...


class SubprocessRunner:
    """Runs kubectl as a child process, blocking until it exits."""

    def __init__(self, binary: str | None = None):
        self.binary = binary or settings.kubectl_binary

    def run(self, args: list[str], capture: bool = True) -> CommandResult:
        cmd = [self.binary, *args]
        logger.debug("Running %s", shlex.join(cmd))
        try:
            proc = subprocess.run(cmd, capture_output=capture, text=True)
        except FileNotFoundError as e:
            raise KubectlNotFoundError(self.binary) from e
        except KeyboardInterrupt:
            # The child shares our process group and got the same SIGINT.
            logger.debug("Interrupted %s", shlex.join(cmd))
            return CommandResult(args=list(args), exit_code=INTERRUPTED_EXIT_CODE)
        return CommandResult(
            args=list(args),
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
            exit_code=proc.returncode,
        )
