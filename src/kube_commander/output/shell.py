"""Shell statements that carry the session across kcom invocations."""

from __future__ import annotations

import shlex

from kube_commander.config.settings import settings

SUPPORTED_SHELLS = ("bash", "zsh")

# Commands whose "-o shell" output the wrapper function evals.
_STATE_COMMANDS = "switch|namespace|ns|clear"

_INIT_SNIPPET = """\
kcom() {{
    case "$1" in
        {commands})
            local __kcom_out
            __kcom_out="$(command kcom "$@" -o shell)" || return $?
            eval "$__kcom_out"
            command kcom session
            ;;
        *)
            command kcom "$@"
            ;;
    esac
}}
"""


def _statement(name: str, value: str | None) -> str:
    if value:
        return f"export {name}={shlex.quote(value)}"
    return f"unset {name}"


def session_exports(session: dict[str, str | None]) -> str:
    return "\n".join([
        _statement(settings.context_env_var, session.get("context")),
        _statement(settings.namespace_env_var, session.get("namespace")),
    ])


def namespace_export(namespace: str) -> str:
    return _statement(settings.namespace_env_var, namespace)


def init_snippet(shell: str) -> str:
    if shell not in SUPPORTED_SHELLS:
        raise ValueError(f"Unsupported shell '{shell}'. Choose from: {', '.join(SUPPORTED_SHELLS)}")
    return _INIT_SNIPPET.format(commands=_STATE_COMMANDS)
