"""Reading kubectl's persisted configuration (kubeconfig files)."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

import yaml
from kubernetes import config

from kube_commander.config.settings import settings
from kube_commander.models import KubeconfigInfo

logger = logging.getLogger(__name__)

# Prefer the C-accelerated YAML loader when available.
_YamlLoader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)


class KubeconfigReader:
    """Reads the current context from the merged kubeconfig files.

    Independent of session state: this is what a bare ``kubectl`` would use.
    """

    def __init__(self, paths: Iterable[Path] | None = None):
        self.paths = list(paths) if paths is not None else list(settings.kubeconfig_paths)

    def current(self) -> KubeconfigInfo | None:
        config_file = os.pathsep.join(str(p) for p in self.paths)
        try:
            _, active = config.list_kube_config_contexts(config_file=config_file)
        except (config.ConfigException, yaml.YAMLError, OSError):
            logger.debug("No readable current context in %s", config_file, exc_info=True)
            return None
        if not active or not active.get("name"):
            return None
        ctx = active.get("context") or {}
        return KubeconfigInfo(context=active["name"], namespace=ctx.get("namespace") or None)

    def current_context(self) -> str | None:
        info = self.current()
        return info.context if info else None


def _names_in_file(path: Path) -> list[str]:
    if not path.is_file():
        return []
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.load(f, Loader=_YamlLoader)
    except (OSError, yaml.YAMLError):
        logger.debug("Failed to read kubeconfig %s", path, exc_info=True)
        return []
    if not isinstance(data, dict):
        return []
    names: list[str] = []
    for entry in data.get("contexts") or []:
        if isinstance(entry, dict) and isinstance(entry.get("name"), str):
            names.append(entry["name"])
    return names


def context_names(paths: Iterable[Path]) -> list[str]:
    """Context names declared across *paths*, first occurrence wins.

    Missing or unparseable files contribute nothing.
    """
    seen: list[str] = []
    for path in paths:
        for name in _names_in_file(Path(path)):
            if name not in seen:
                seen.append(name)
    return seen
