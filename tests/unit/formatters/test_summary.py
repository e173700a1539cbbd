"""Tests for the default summary hook."""

from __future__ import annotations

import io

import pytest

from lintprogress.formatters.summary import SummaryReporter, pluralize


class TestPluralize:
    """Tests for pluralize."""

    @pytest.mark.parametrize(
        "count, expected",
        [(0, "0 files"), (1, "1 file"), (2, "2 files")],
    )
    def test_files(self, count: int, expected: str) -> None:
        assert pluralize(count, "file") == expected

    def test_no_for_zero(self) -> None:
        assert pluralize(0, "offense", no_for_zero=True) == "no offenses"
        assert pluralize(1, "offense", no_for_zero=True) == "1 offense"


class TestSummaryReporter:
    """Tests for SummaryReporter."""

    def test_clean_run(self) -> None:
        output = io.StringIO()
        SummaryReporter().report(output, 3, 0)
        assert output.getvalue() == "\n3 files inspected, no offenses detected\n"

    def test_single_file_single_offense(self) -> None:
        output = io.StringIO()
        SummaryReporter().report(output, 1, 1)
        assert output.getvalue() == "\n1 file inspected, 1 offense detected\n"

    def test_callable(self) -> None:
        output = io.StringIO()
        SummaryReporter()(output, 2, 5)
        assert output.getvalue() == "\n2 files inspected, 5 offenses detected\n"
