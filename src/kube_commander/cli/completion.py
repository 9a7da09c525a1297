"""Shell completion for kubeconfig context names."""

from __future__ import annotations

from kube_commander.config.settings import settings
from kube_commander.core.kubeconfig import context_names


def fuzzy_match(candidate: str, incomplete: str) -> bool:
    """Case-insensitive subsequence match ("prd" matches "prod-eu")."""
    it = iter(candidate.lower())
    return all(ch in it for ch in incomplete.lower())


def rank_candidates(names: list[str], incomplete: str) -> list[str]:
    matches = [n for n in names if fuzzy_match(n, incomplete)]
    prefix = incomplete.lower()
    return sorted(matches, key=lambda n: (not n.lower().startswith(prefix), n))


def complete_contexts(incomplete: str) -> list[tuple[str, str]]:
    names = context_names(settings.kubeconfig_paths)
    return [(name, "kubeconfig context") for name in rank_candidates(names, incomplete)]
