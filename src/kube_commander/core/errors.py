"""Errors raised by Kube Commander itself (never for kubectl failures)."""

from __future__ import annotations


class KcomError(Exception):
    exit_code = 1


class KubectlNotFoundError(KcomError):
    exit_code = 127

    def __init__(self, binary: str):
        super().__init__(
            f"'{binary}' was not found. Is kubectl installed and on your PATH? "
            "Set KCOM_KUBECTL to point at another binary."
        )
        self.binary = binary


class WatchNotSupportedError(KcomError):
    def __init__(self) -> None:
        super().__init__(
            "Watch output cannot be parsed into a table; "
            "drop --parse or run 'kubectl get --watch' directly."
        )
