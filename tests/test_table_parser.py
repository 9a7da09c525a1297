"""Unit tests for reinterpreting kubectl tables."""

from datetime import timedelta

import pytest

from kube_commander.models.table import RawOutput, ResourceTable
from kube_commander.utils.table_parser import parse_table


class TestParseTable:
    """Tests for parse_table on kubectl-shaped text."""

    def test_columns_and_rows(self, pods_table):
        table = parse_table(pods_table)
        assert isinstance(table, ResourceTable)
        assert table.columns == ["NAME", "READY", "STATUS", "RESTARTS", "AGE"]
        assert len(table) == 2
        assert table.rows[0]["NAME"] == "api-7d9c5b-x2x"
        assert table.rows[1]["STATUS"] == "CrashLoopBackOff"

    def test_age_column_becomes_timedelta(self, pods_table):
        table = parse_table(pods_table)
        assert table.column("AGE") == [timedelta(hours=2, minutes=45), timedelta(days=3, hours=2)]

    def test_cells_with_spaces_kept_whole(self, pods_table):
        table = parse_table(pods_table)
        assert table.rows[1]["RESTARTS"] == "7 (2m ago)"

    def test_other_columns_stay_text(self, pods_table):
        table = parse_table(pods_table)
        assert table.rows[0]["RESTARTS"] == "0"

    def test_headers_with_single_spaces(self, render_table):
        text = render_table([
            ["NAME", "READY", "AGE", "NODE", "NOMINATED NODE", "READINESS GATES"],
            ["api-1", "1/1", "5m", "node-a", "<none>", "<none>"],
        ])
        table = parse_table(text)
        assert isinstance(table, ResourceTable)
        assert table.columns[-2:] == ["NOMINATED NODE", "READINESS GATES"]
        assert table.rows[0]["NOMINATED NODE"] == "<none>"

    def test_non_duration_age_kept_as_text(self, render_table):
        text = render_table([["NAME", "AGE"], ["api-1", "<unknown>"]])
        table = parse_table(text)
        assert table.rows[0]["AGE"] == "<unknown>"

    def test_custom_duration_columns(self, render_table):
        text = render_table([["NAME", "DURATION", "AGE"], ["job-1", "45s", "2m"]])
        table = parse_table(text, duration_columns=("DURATION",))
        assert table.rows[0]["DURATION"] == timedelta(seconds=45)
        assert table.rows[0]["AGE"] == "2m"

    def test_header_only(self):
        table = parse_table("NAME   AGE\n")
        assert isinstance(table, ResourceTable)
        assert table.rows == []

    def test_short_row_fills_empty_cells(self):
        table = parse_table("NAME    LABELS\napi-1\n")
        assert table.rows[0] == {"NAME": "api-1", "LABELS": ""}


class TestRawFallback:
    """parse_table never raises; anything else comes back untouched."""

    @pytest.mark.parametrize("text", [
        "",
        "hello world\nthis is not a table\n",
        "apiVersion: v1\nkind: Pod\nmetadata:\n  name: api\n",
        '{"items": []}\n',
        "No resources found in default namespace.\n",
        "pod/api-1\npod/api-2\n",
    ])
    def test_non_tabular_text(self, text):
        result = parse_table(text)
        assert isinstance(result, RawOutput)
        assert result.text == text

    def test_row_straddling_a_column(self):
        text = "NAME   AGE\naverylongpodname 5m\n"
        assert parse_table(text) == RawOutput(text)

    def test_several_table_blocks(self, render_table):
        text = (
            render_table([["NAME", "READY", "AGE"], ["pod/api-1", "1/1", "5m"]])
            + "\n"
            + render_table([["NAME", "TYPE", "AGE"], ["service/api", "ClusterIP", "9d"]])
        )
        assert parse_table(text) == RawOutput(text)
