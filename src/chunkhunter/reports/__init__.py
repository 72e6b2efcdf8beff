"""Report serialization for Chunk Hunter."""

from chunkhunter.reports.writer import (
    ReportPaths,
    ReportWriter,
    render_csv,
    render_stats,
    report_name,
)

__all__ = ["ReportPaths", "ReportWriter", "render_csv", "render_stats", "report_name"]
