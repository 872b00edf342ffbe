"""AnnotationSession → AnalysisReport model and plain-text summary.

Layout:
  Header → Overview (session averages) → Per-region table
Region labels are 1-based for display; ids stay 0-based in the model.
Undefined distances render as "-".
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from raindrop.engine.aggregate import aggregate_stats
from raindrop.models.annotation import GlobalStats, Region, RegionStats
from raindrop.session.state import AnnotationSession, SessionStateError

logger = logging.getLogger(__name__)

_TITLE = "=== RAINDROP ANALYSIS REPORT ==="
_NO_VALUE = "-"


class AnalysisReport(BaseModel):
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    image_width: float
    image_height: float
    regions: list[Region] = Field(default_factory=list)
    stats: list[RegionStats] = Field(default_factory=list)
    summary: GlobalStats = Field(default_factory=GlobalStats)


def build_report(
    session: AnnotationSession,
    generated_at: datetime | None = None,
) -> AnalysisReport:
    """Snapshot a session's regions and freshly computed statistics."""
    if not session.has_image:
        raise SessionStateError("Cannot build a report before an image is loaded")

    stats = session.region_stats()
    report = AnalysisReport(
        image_width=session.image_width,
        image_height=session.image_height,
        regions=list(session.regions),
        stats=stats,
        summary=aggregate_stats(stats),
    )
    if generated_at is not None:
        report = report.model_copy(update={"generated_at": generated_at})

    logger.debug(
        "Built report: %d regions, %d marks",
        len(stats),
        sum(s.count for s in stats),
    )
    return report


def _fmt_distance(value: float | None) -> str:
    if value is None:
        return _NO_VALUE
    return f"{value:.1f} px"


def _fmt_average_distance(value: float, defined: bool) -> str:
    return f"{value:.1f} px" if defined else _NO_VALUE


def format_report(report: AnalysisReport) -> str:
    summary = report.summary
    lines = [_TITLE, ""]
    lines.append(
        f"IMAGE: {report.image_width:.0f}×{report.image_height:.0f} | "
        f"REGIONS: {len(report.regions)} | "
        f"GENERATED: {report.generated_at:%Y-%m-%d %H:%M}"
    )
    lines.append("")

    lines.append("OVERVIEW:")
    lines.append(f"  Average count:        {summary.avg_count:.1f} / region")
    lines.append(f"  Average coverage:     {summary.avg_percentage:.2f}%")
    lines.append(
        "  Average min distance: "
        + _fmt_average_distance(summary.avg_min_distance, summary.has_min_distance)
    )
    lines.append(
        "  Average max distance: "
        + _fmt_average_distance(summary.avg_max_distance, summary.has_max_distance)
    )
    lines.append("")

    lines.append("REGIONS:")
    header = f"  {'Region':<8}{'Count':>7}{'Coverage':>11}{'Min dist':>12}{'Max dist':>12}"
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for s in report.stats:
        lines.append(
            f"  {'#' + str(s.region_id + 1):<8}"
            f"{s.count:>7}"
            f"{s.percentage_area:>10.2f}%"
            f"{_fmt_distance(s.min_distance):>12}"
            f"{_fmt_distance(s.max_distance):>12}"
        )

    return "\n".join(lines)
