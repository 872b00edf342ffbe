"""Analysis report model and plain-text rendering."""

from raindrop.report.formatter import AnalysisReport, build_report, format_report

__all__ = ["AnalysisReport", "build_report", "format_report"]
