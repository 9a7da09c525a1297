"""Session state: the current context and namespace of one terminal."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from kube_commander.config.settings import settings


@dataclass
class Session:
    """Two independent optional slots that default every wrapped call.

    A slot goes unset -> set through ``switch``/``set_namespace`` and
    set -> unset through ``clear``; nothing else mutates it.
    """

    context: str | None = None
    namespace: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Session:
        env = os.environ if environ is None else environ
        return cls(
            context=env.get(settings.context_env_var) or None,
            namespace=env.get(settings.namespace_env_var) or None,
        )

    def resolve(
        self, context: str | None = None, namespace: str | None = None,
    ) -> tuple[str | None, str | None]:
        """Explicit value first, then the session value, else None."""
        return (
            context if context is not None else self.context,
            namespace if namespace is not None else self.namespace,
        )

    def switch(self, context: str, namespace: str | None = None) -> dict[str, str | None]:
        self.context = context
        if namespace is not None:
            self.namespace = namespace
        return self.as_dict()

    def set_namespace(self, namespace: str) -> str:
        self.namespace = namespace
        return namespace

    def clear(self, keep_context: bool = False, keep_namespace: bool = False) -> None:
        if not keep_context:
            self.context = None
        if not keep_namespace:
            self.namespace = None

    def as_dict(self) -> dict[str, str | None]:
        return {"context": self.context, "namespace": self.namespace}
