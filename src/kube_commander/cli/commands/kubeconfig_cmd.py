"""kcom kubeconfig-info - Show kubectl's own current context."""

from __future__ import annotations

from kube_commander.cli.options import InfoOutputOption
from kube_commander.core.kubectl import Kubectl
from kube_commander.output.formatters import output_kubeconfig_info


def kubeconfig_info(output: str = InfoOutputOption) -> None:
    """Show the context and namespace persisted in kubeconfig, ignoring the session."""
    kubectl = Kubectl()
    output_kubeconfig_info(kubectl.kubeconfig_info(), output)
