"""Rank each category's insights and cut them to the category cap."""

from __future__ import annotations

from typing import Iterable

from strengthlens.config import settings
from strengthlens.models.insight import InsightCategory, InsightRecord

CATEGORY_CAPS: dict[InsightCategory, int] = {
    InsightCategory.ENERGISING: settings.ENERGISING_CAP,
    InsightCategory.HIDDEN: settings.HIDDEN_CAP,
    InsightCategory.OVERUSED: settings.OVERUSED_CAP,
    InsightCategory.ASPIRATIONAL: settings.ASPIRATIONAL_CAP,
    InsightCategory.MISALIGNED: settings.MISALIGNED_CAP,
}


def rank(records: Iterable[InsightRecord], cap: int) -> list[InsightRecord]:
    """Highest composite first, ties keep input order, at most ``cap`` items."""
    if cap <= 0:
        return []
    # sorted() is stable, reverse=True included
    ordered = sorted(records, key=lambda r: r.composite_score, reverse=True)
    return ordered[:cap]


def rank_category(category: InsightCategory, records: Iterable[InsightRecord]) -> list[InsightRecord]:
    return rank(records, CATEGORY_CAPS[category])
