"""Tests for the shell statements that carry the session."""

import pytest

from kube_commander.output.shell import init_snippet, namespace_export, session_exports


class TestSessionExports:
    def test_exports_values(self):
        assert session_exports({"context": "prod", "namespace": "web"}) == (
            "export KUBE_CONTEXT=prod\nexport KUBE_NAMESPACE=web"
        )

    def test_unsets_missing_values(self):
        assert session_exports({"context": None, "namespace": None}) == (
            "unset KUBE_CONTEXT\nunset KUBE_NAMESPACE"
        )

    def test_values_are_quoted(self):
        assert session_exports({"context": "arn:aws:eks:x; rm -rf", "namespace": None}).splitlines()[0] == (
            "export KUBE_CONTEXT='arn:aws:eks:x; rm -rf'"
        )

    def test_namespace_export(self):
        assert namespace_export("web") == "export KUBE_NAMESPACE=web"


class TestInitSnippet:
    @pytest.mark.parametrize("shell", ["bash", "zsh"])
    def test_defines_wrapper_function(self, shell):
        snippet = init_snippet(shell)
        assert snippet.startswith("kcom() {")
        assert "switch|namespace|ns|clear)" in snippet
        assert 'command kcom "$@" -o shell' in snippet

    def test_unsupported_shell(self):
        with pytest.raises(ValueError):
            init_snippet("fish")
