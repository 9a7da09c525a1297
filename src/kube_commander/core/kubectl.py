"""kubectl wrapper: session-aware forwarding and ``get`` post-processing."""

from __future__ import annotations

import logging

from kube_commander.config.settings import settings
from kube_commander.core.errors import KubectlNotFoundError, WatchNotSupportedError
from kube_commander.core.kubeconfig import KubeconfigReader
from kube_commander.core.runner import CommandRunner, SubprocessRunner
from kube_commander.models import CommandResult, KubeconfigInfo
from kube_commander.models.session import Session
from kube_commander.models.table import GetResult, RawOutput
from kube_commander.utils.table_parser import parse_table

logger = logging.getLogger(__name__)

# Output formats that still print kubectl's table layout.
TABLE_OUTPUTS: frozenset[str] = frozenset({"wide"})
SINGLE_RESOURCE_OUTPUT = "yaml"

# kubectl get flags whose value is the following token.
VALUE_FLAGS: frozenset[str] = frozenset({
    "-l", "--selector",
    "-L", "--label-columns",
    "-f", "--filename",
    "-k", "--kustomize",
    "--field-selector",
    "--sort-by",
    "--chunk-size",
    "--template",
    "--subresource",
})


def positional_args(args: list[str]) -> list[str]:
    """Resource type/name tokens: everything that is neither a flag nor a flag value."""
    positional: list[str] = []
    skip_next = False
    for arg in args:
        if skip_next:
            skip_next = False
        elif arg in VALUE_FLAGS:
            skip_next = True
        elif not arg.startswith("-"):
            positional.append(arg)
    return positional


def has_output_flag(args: list[str]) -> bool:
    """True when the forwarded args already pick an output format.

    ``-ojson``-style tokens hide the format from us, so any of them opts out
    of post-processing.
    """
    return any(a.startswith("-o") or a.startswith("--output") for a in args)


class Kubectl:
    """Forwards commands to kubectl with the session's context and namespace."""

    def __init__(
        self,
        session: Session | None = None,
        runner: CommandRunner | None = None,
        kubeconfig: KubeconfigReader | None = None,
    ):
        self.session = session if session is not None else Session.from_env()
        self.runner = runner if runner is not None else SubprocessRunner()
        self.kubeconfig = kubeconfig if kubeconfig is not None else KubeconfigReader()

    def build_args(
        self,
        args: list[str],
        context: str | None = None,
        namespace: str | None = None,
    ) -> list[str]:
        ctx, ns = self.session.resolve(context, namespace)
        return [f"--context={ctx or ''}", f"--namespace={ns or ''}", *args]

    def wrap(
        self,
        args: list[str],
        context: str | None = None,
        namespace: str | None = None,
        capture: bool = True,
    ) -> CommandResult:
        return self.runner.run(self.build_args(args, context, namespace), capture=capture)

    def get(
        self,
        args: list[str],
        context: str | None = None,
        namespace: str | None = None,
        output: str | None = None,
        watch: bool = False,
        parse: bool | None = None,
    ) -> GetResult:
        """Run ``kubectl get`` and reinterpret list output as a ResourceTable.

        ``parse`` is None for automatic behaviour; False never parses and
        True insists on parsing (an error together with ``watch``).
        """
        if watch:
            if parse:
                raise WatchNotSupportedError()
            forwarded = self._get_args(args, output) + ["--watch"]
            return GetResult(command=self.wrap(forwarded, context, namespace, capture=False))

        if parse is False or (output and output not in TABLE_OUTPUTS) or has_output_flag(args):
            result = self.wrap(self._get_args(args, output), context, namespace)
            return GetResult(command=result, output=RawOutput(result.stdout))

        if len(positional_args(args)) == 2:
            result = self.wrap(
                self._get_args(args, output or SINGLE_RESOURCE_OUTPUT), context, namespace,
            )
            return GetResult(command=result, output=RawOutput(result.stdout))

        result = self.wrap(self._get_args(args, output), context, namespace)
        if not result.ok:
            return GetResult(command=result, output=RawOutput(result.stdout))
        return GetResult(
            command=result,
            output=parse_table(result.stdout, settings.duration_columns),
        )

    @staticmethod
    def _get_args(args: list[str], output: str | None) -> list[str]:
        forwarded = ["get", *args]
        if output:
            forwarded += ["-o", output]
        return forwarded

    def switch(self, context: str, namespace: str | None = None) -> dict[str, str | None]:
        return self.session.switch(context, namespace)

    def namespace(self, namespace: str) -> str:
        return self.session.set_namespace(namespace)

    def clear(
        self,
        no_context: bool = False,
        no_namespace: bool = False,
        clear_kubeconfig: bool = False,
    ) -> dict[str, str | None]:
        session_context = self.session.context
        self.session.clear(keep_context=no_context, keep_namespace=no_namespace)
        if clear_kubeconfig:
            self._clear_kubeconfig(session_context)
        return self.session.as_dict()

    def _clear_kubeconfig(self, session_context: str | None) -> None:
        contexts: list[str] = []
        for ctx in (session_context, self.kubeconfig.current_context()):
            if ctx and ctx not in contexts:
                contexts.append(ctx)
        for ctx in contexts:
            self._best_effort(["config", "unset", f"contexts.{ctx}.namespace"])
        self._best_effort(["config", "unset", "current-context"])

    def _best_effort(self, args: list[str]) -> None:
        # Goes straight to the runner: "config" must not carry --context.
        try:
            result = self.runner.run(args)
        except KubectlNotFoundError:
            logger.debug("Ignoring missing kubectl for '%s'", " ".join(args), exc_info=True)
            return
        if not result.ok:
            logger.debug(
                "Ignoring failed 'kubectl %s' (exit %d): %s",
                " ".join(args), result.exit_code, result.stderr.strip(),
            )

    def kubeconfig_info(self) -> KubeconfigInfo | None:
        return self.kubeconfig.current()
