"""Per-document report files."""

import csv
import io
import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, TextIO

from chunkhunter.models import DocumentReport, MatchRecord

logger = logging.getLogger(__name__)

CSV_HEADER = ["chunk", "length", "frequency"]
BANNER = "-" * 56


def report_name(document_path: str) -> str:
    """Derive the report name from a document's base name ('a.b.txt' -> 'a-b-txt')."""
    return os.path.basename(document_path).replace(".", "-")


@dataclass(frozen=True)
class ReportPaths:
    """The three output files written for one document."""

    html: Path
    csv: Path
    stats: Path

    @classmethod
    def for_document(cls, output_dir: Path | str, document_path: str) -> "ReportPaths":
        output = Path(output_dir)
        name = report_name(document_path)
        return cls(
            html=output / f"result_{name}.html",
            csv=output / f"stats_{name}.csv",
            stats=output / f"stats_{name}.txt",
        )


def render_csv(records: list[MatchRecord]) -> str:
    """Render the frequency table, header row first."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(record.as_row() for record in records)
    return buffer.getvalue()


def render_stats(report: DocumentReport) -> str:
    """Render the human-readable statistics report."""
    stats = report.stats
    return (
        f"{BANNER}\n"
        f"Chunk Hunter statistics for {report.document.path}\n"
        f"{BANNER}\n\n"
        f"Frequency: {stats.chunkwords} chunkwords / {stats.words} words"
        f" = {stats.percentage_text}%\n\n"
        f"Text checked against {stats.checked} registered combinations\n\n"
    )


class ReportWriter:
    """Writes the html, csv and statistics reports of each document."""

    def __init__(self, output_dir: Path | str):
        self.output_dir = Path(output_dir)

    @contextmanager
    def artifact(self, path: Path) -> Iterator[TextIO]:
        """Context manager for a single output file.

        Surrogate escapes from undecodable input are written back as the
        original bytes.
        """
        with path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            yield f

    def write(self, report: DocumentReport) -> bool:
        """Write all three reports for a document.

        The first failure stops the remaining writes for this document only.

        Returns:
            True if every file was written
        """
        paths = ReportPaths.for_document(self.output_dir, report.document.path)
        artifacts = [
            (paths.html, report.annotated),
            (paths.csv, render_csv(report.records)),
            (paths.stats, render_stats(report)),
        ]

        target = self.output_dir
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            for target, content in artifacts:
                with self.artifact(target) as f:
                    f.write(content)
        except OSError as e:
            logger.error(f"Unable to write {target} for {report.document.path}: {e}")
            return False

        return True
