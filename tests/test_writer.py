"""Tests for chunkhunter/reports: report naming, rendering and writing."""
from __future__ import annotations

import logging

from chunkhunter.models import Document, DocumentReport, DocumentStats, MatchRecord
from chunkhunter.reports import (
    ReportPaths,
    ReportWriter,
    render_csv,
    render_stats,
    report_name,
)


def _report(path="input/a.txt", annotated=" <b>hi</b>"):
    doc = Document.from_bytes(path, b"Good Morning, good morning! Hello")
    return DocumentReport(
        document=doc,
        annotated=annotated,
        records=[MatchRecord("good morning", 13, 2)],
        stats=DocumentStats(chunkwords=4, words=5, checked=3),
    )


class TestReportName:
    def test_replaces_every_dot(self):
        assert report_name("input/my.notes.txt") == "my-notes-txt"

    def test_uses_base_name_only(self):
        paths = ReportPaths.for_document("out", "input/sub/a.txt")
        assert paths.html.name == "result_a-txt.html"
        assert paths.csv.name == "stats_a-txt.csv"
        assert paths.stats.name == "stats_a-txt.txt"
        assert str(paths.html.parent) == "out"


class TestRender:
    def test_csv_header_only(self):
        assert render_csv([]) == "chunk,length,frequency\n"

    def test_csv_rows(self):
        csv_text = render_csv(
            [MatchRecord("good morning", 13, 2), MatchRecord("well, then", 11, 1)]
        )
        assert csv_text == (
            "chunk,length,frequency\n"
            "good morning,13,2\n"
            '"well, then",11,1\n'
        )

    def test_stats_format(self):
        assert render_stats(_report()) == (
            "--------------------------------------------------------\n"
            "Chunk Hunter statistics for input/a.txt\n"
            "--------------------------------------------------------\n\n"
            "Frequency: 4 chunkwords / 5 words = 80.00%\n\n"
            "Text checked against 3 registered combinations\n\n"
        )

    def test_stats_zero_words(self):
        report = _report()
        report.stats = DocumentStats(chunkwords=0, words=0, checked=0)
        assert "= 0.00%" in render_stats(report)


class TestReportWriter:
    def test_writes_three_files(self, tmp_path):
        out = tmp_path / "output" / "nested"
        assert ReportWriter(out).write(_report()) is True

        assert (out / "result_a-txt.html").read_text(encoding="utf-8") == " <b>hi</b>"
        assert (out / "stats_a-txt.csv").read_text(encoding="utf-8").startswith(
            "chunk,length,frequency\n"
        )
        assert "80.00%" in (out / "stats_a-txt.txt").read_text(encoding="utf-8")

    def test_unwritable_output_dir(self, tmp_path, caplog):
        out = tmp_path / "output"
        out.write_text("a file, not a folder", encoding="utf-8")
        with caplog.at_level(logging.ERROR):
            assert ReportWriter(out).write(_report()) is False
        assert "input/a.txt" in caplog.text

    def test_failure_skips_remaining_files(self, tmp_path, caplog):
        out = tmp_path / "output"
        (out / "stats_a-txt.csv").mkdir(parents=True)
        with caplog.at_level(logging.ERROR):
            assert ReportWriter(out).write(_report()) is False

        assert (out / "result_a-txt.html").exists()
        assert not (out / "stats_a-txt.txt").exists()
        assert "stats_a-txt.csv" in caplog.text
