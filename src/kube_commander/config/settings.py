"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def split_kubeconfig_paths(value: str) -> list[Path]:
    """Split a KUBECONFIG value into unique paths, keeping their order.

    kubectl merges every file on the list, so duplicates would only be
    read twice.
    """
    paths: list[Path] = []
    for part in value.split(os.pathsep):
        part = part.strip()
        if not part:
            continue
        path = Path(part).expanduser()
        if path not in paths:
            paths.append(path)
    return paths


def _default_kubeconfig_paths() -> list[Path]:
    env = os.environ.get("KUBECONFIG", "")
    if env:
        paths = split_kubeconfig_paths(env)
        if paths:
            return paths
    return [Path.home() / ".kube" / "config"]


def _default_kubectl_binary() -> str:
    return os.environ.get("KCOM_KUBECTL", "") or "kubectl"


@dataclass
class Settings:
    kubectl_binary: str = field(default_factory=_default_kubectl_binary)
    kubeconfig_paths: list[Path] = field(default_factory=_default_kubeconfig_paths)
    context_env_var: str = "KUBE_CONTEXT"
    namespace_env_var: str = "KUBE_NAMESPACE"
    age_column: str = "AGE"
    default_output: str = "table"

    @property
    def duration_columns(self) -> tuple[str, ...]:
        return (self.age_column,)


# Global singleton
settings = Settings()
