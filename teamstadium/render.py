"""Format classified opponent responses as terminal lines."""

from __future__ import annotations

import json
from typing import List, Mapping, Optional

from .aptitude import aggregate
from .labels import LabelLookup, labels as default_labels
from .models import AggregateReport, OpponentSummary, PostSelection, PreSelection, Shape

OPPONENT_SEPARATOR = "------"
REPORT_SEPARATOR = "----"
NOT_AVAILABLE = "N/A"


def format_intensity(opponent: OpponentSummary) -> str:
    intensity = opponent.intensity
    if intensity is None:
        return NOT_AVAILABLE
    return f"{intensity:,.1f}"


def format_distribution(distribution: Mapping[str, int]) -> str:
    return json.dumps(dict(distribution), separators=(",", ":"), ensure_ascii=False)


def render_opponents(selection: PreSelection, label: LabelLookup) -> List[str]:
    lines: List[str] = []
    for opponent in selection.opponents:
        lines.append(
            f"#{opponent.rank}: {opponent.display_name} "
            f"{label('login_days')} {opponent.login_day_count} "
            f"{label('builds')} {opponent.play_count} "
            f"({format_intensity(opponent)}/{label('per_day')})"
        )
        lines.append(OPPONENT_SEPARATOR)
    lines.append("")
    return lines


def render_report(report: AggregateReport, label: LabelLookup) -> List[str]:
    return [
        f"{label('current_opponent')}: {report.opponent_name}",
        f"{label('distance_aptitude')}: {format_distribution(report.distance_distribution)}",
        f"{label('surface_aptitude')}: {format_distribution(report.surface_distribution)}",
        f"{label('style_aptitude')}: {format_distribution(report.style_distribution)}",
        REPORT_SEPARATOR,
        "",
    ]


def render(shape: Shape, labels: Optional[LabelLookup] = None) -> List[str]:
    """
    Return display lines for ``shape``.

    Inapplicable shapes render to an empty list. A post-selection shape is
    aggregated first, so grade errors propagate before any line is produced.
    """
    label = labels or default_labels()
    if isinstance(shape, PreSelection):
        return render_opponents(shape, label)
    if isinstance(shape, PostSelection):
        report = aggregate(shape.roster, shape.characters, opponent_name=shape.opponent_name)
        return render_report(report, label)
    return []


__all__ = [
    "OPPONENT_SEPARATOR",
    "REPORT_SEPARATOR",
    "NOT_AVAILABLE",
    "format_intensity",
    "format_distribution",
    "render_opponents",
    "render_report",
    "render",
]
