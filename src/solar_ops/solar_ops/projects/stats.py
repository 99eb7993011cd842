"""Project pipeline statistics (counts and share of total per status)."""
from __future__ import annotations

from collections import Counter
from typing import Iterable

from ..core.constants import ZERO_PERCENT
from ..core.enums import ProjectStatus
from .model import Project

STATS_ORDER = (
    ProjectStatus.COMPLETED,
    ProjectStatus.HOLD,
    ProjectStatus.NEW,
    ProjectStatus.REVISION,
)


def format_percentage(count: int, total: int) -> str:
    if total <= 0:
        return ZERO_PERCENT
    return f"{count / total * 100:.2f}%"


def build_project_stats(projects: Iterable[Project]) -> dict:
    counts = Counter(ProjectStatus(p.status) for p in projects)
    total = sum(counts.values())

    stats: dict = {"total": total}
    for status in STATS_ORDER:
        count = counts.get(status, 0)
        stats[status.value] = {"count": count, "percentage": format_percentage(count, total)}
    return stats
