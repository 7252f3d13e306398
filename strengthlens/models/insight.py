"""Output models: insight categories, records and the five-insights report."""

from __future__ import annotations

import statistics
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from strengthlens.config.settings import MAX_PRIORITY_ACTIONS, WELL_BALANCED_MIN_SCORE


class InsightCategory(str, Enum):
    ENERGISING = "energising_strength"
    HIDDEN = "hidden_strength"
    OVERUSED = "overused_talent"
    ASPIRATIONAL = "aspirational"
    MISALIGNED = "misaligned_energy"

    @property
    def display_name(self) -> str:
        return CATEGORY_INFO[self]["label"]

    @property
    def description(self) -> str:
        return CATEGORY_INFO[self]["description"]


CATEGORY_INFO = {
    InsightCategory.ENERGISING: {
        "label": "Energising Strength",
        "description": "High skill + high energy + recognised by others",
        "recommendation": "Leverage your top energising strengths in strategic career moves",
        "action_prefix": "Leverage",
    },
    InsightCategory.HIDDEN: {
        "label": "Hidden Strength",
        "description": "High competence but underrecognised or underutilised",
        "recommendation": "Increase visibility of your hidden strengths through targeted showcasing",
        "action_prefix": "Develop",
    },
    InsightCategory.OVERUSED: {
        "label": "Overused Talent",
        "description": "Strong skill but potentially overused, leading to fatigue",
        "recommendation": "Create balance to prevent burnout from overused talents",
        "action_prefix": "Rebalance",
    },
    InsightCategory.ASPIRATIONAL: {
        "label": "Aspirational Strength",
        "description": "Areas of high interest with development potential",
        "recommendation": "Invest in developing your most promising aspirational areas",
        "action_prefix": "Build",
    },
    InsightCategory.MISALIGNED: {
        "label": "Misaligned Energy",
        "description": "Activities that drain energy despite competence",
        "recommendation": "Address energy-draining activities through delegation or process improvement",
        "action_prefix": "Address",
    },
}

# Presentation order, also the iteration order of engine results
CATEGORY_ORDER = (
    InsightCategory.ENERGISING,
    InsightCategory.HIDDEN,
    InsightCategory.OVERUSED,
    InsightCategory.ASPIRATIONAL,
    InsightCategory.MISALIGNED,
)

# (score key, minimum, how many records) feeding priority actions per category
PRIORITY_ACTION_RULES = {
    InsightCategory.ENERGISING: ("leverageability", 4, 2),
    InsightCategory.HIDDEN: ("potential_impact", 4, 2),
    InsightCategory.OVERUSED: ("burnout_risk", 4, 1),
    InsightCategory.ASPIRATIONAL: ("development_potential", 4, 2),
    InsightCategory.MISALIGNED: ("energy_drain", 4, 1),
}


@dataclass(frozen=True)
class InsightRecord:
    id: str
    category: InsightCategory
    theme_name: str
    title: str
    description: str
    scores: Mapping[str, int]          # each 1-5
    evidence_from_self: tuple = ()      # at most EVIDENCE_LIMIT
    evidence_from_advisors: tuple = ()
    advice: str = ""
    confidence: float = 0.0             # 0.0-1.0
    composite_score: float = 0.0        # category-specific ranking metric
    flags: Mapping[str, bool] = field(default_factory=dict)
    application_areas: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))
        object.__setattr__(self, "flags", MappingProxyType(dict(self.flags)))
        object.__setattr__(self, "evidence_from_self", tuple(self.evidence_from_self))
        object.__setattr__(self, "evidence_from_advisors", tuple(self.evidence_from_advisors))
        object.__setattr__(self, "application_areas", tuple(self.application_areas))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "category": self.category.value,
            "theme_name": self.theme_name,
            "title": self.title,
            "description": self.description,
            "scores": dict(self.scores),
            "evidence_from_self": list(self.evidence_from_self),
            "evidence_from_advisors": list(self.evidence_from_advisors),
            "advice": self.advice,
            "confidence": self.confidence,
            "composite_score": self.composite_score,
            "flags": dict(self.flags),
            "application_areas": list(self.application_areas),
        }


def calculate_balance_score(counts: list[int]) -> float:
    """1 - (stddev / mean) of category counts, clamped to [0, 1].

    No insights at all counts as perfectly balanced.
    """
    if not counts:
        return 0.0
    total = sum(counts)
    if total == 0:
        return 1.0
    mean = total / len(counts)
    stddev = statistics.pstdev(counts)
    return max(0.0, min(1.0, 1.0 - stddev / mean))


@dataclass(frozen=True)
class InsightReport:
    """The five ranked category lists plus summary analytics."""

    insights: Mapping[InsightCategory, tuple]
    generated_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def __post_init__(self) -> None:
        ordered = {c: tuple(self.insights.get(c, ())) for c in CATEGORY_ORDER}
        object.__setattr__(self, "insights", MappingProxyType(ordered))

    @property
    def total_insights(self) -> int:
        return sum(len(v) for v in self.insights.values())

    def category_counts(self) -> dict[InsightCategory, int]:
        return {c: len(self.insights[c]) for c in CATEGORY_ORDER}

    @property
    def dominant_category(self) -> Optional[InsightCategory]:
        """Most populated category; first in presentation order on ties."""
        if self.total_insights == 0:
            return None
        counts = self.category_counts()
        return max(CATEGORY_ORDER, key=lambda c: counts[c])

    @property
    def balance_score(self) -> float:
        return calculate_balance_score(list(self.category_counts().values()))

    @property
    def is_well_balanced(self) -> bool:
        counts = list(self.category_counts().values())
        return (max(counts) - min(counts)) <= 2 and self.balance_score >= WELL_BALANCED_MIN_SCORE

    def key_recommendations(self) -> list[str]:
        return [
            CATEGORY_INFO[c]["recommendation"]
            for c in CATEGORY_ORDER
            if self.insights[c]
        ]

    def priority_actions(self) -> list[str]:
        actions: list[str] = []
        for category in CATEGORY_ORDER:
            score_key, minimum, take = PRIORITY_ACTION_RULES[category]
            prefix = CATEGORY_INFO[category]["action_prefix"]
            eligible = [
                r for r in self.insights[category]
                if r.scores.get(score_key, 0) >= minimum and r.advice
            ]
            actions.extend(f"{prefix}: {r.advice}" for r in eligible[:take])
        return actions[:MAX_PRIORITY_ACTIONS]

    def render_summary(self) -> str:
        """Plain-text digest of the report."""
        lines = [
            "Five Insights Career Profile",
            "============================",
            "",
            f"Generated: {self.generated_at.split('T')[0]}",
            f"Total Insights: {self.total_insights}",
            f"Balance Score: {round(self.balance_score * 100)}%",
            f"Is Well Balanced: {'Yes' if self.is_well_balanced else 'No'}",
        ]
        dominant = self.dominant_category
        lines.append(f"Dominant Category: {dominant.display_name if dominant else 'None'}")
        lines.append("")
        lines.append("Category Breakdown:")
        for category, count in self.category_counts().items():
            lines.append(f"- {category.display_name}: {count} insights")

        for category in CATEGORY_ORDER:
            records = self.insights[category]
            if not records:
                continue
            lines.append("")
            lines.append(f"{category.display_name}:")
            for record in records[:3]:
                lines.append(f"- {record.title} (confidence {record.confidence:.0%})")

        actions = self.priority_actions()
        if actions:
            lines.append("")
            lines.append("Priority Actions:")
            lines.extend(f"- {a}" for a in actions[:5])

        recommendations = self.key_recommendations()
        if recommendations:
            lines.append("")
            lines.append("Strategic Recommendations:")
            lines.extend(f"- {r}" for r in recommendations)
        return "\n".join(lines)

    def to_dict(self) -> dict:
        dominant = self.dominant_category
        return {
            "generated_at": self.generated_at,
            "insights": {
                c.value: [r.to_dict() for r in self.insights[c]]
                for c in CATEGORY_ORDER
            },
            "analysis": {
                "total_insights": self.total_insights,
                "category_counts": {c.value: n for c, n in self.category_counts().items()},
                "dominant_category": dominant.value if dominant else None,
                "balance_score": round(self.balance_score, 4),
                "is_well_balanced": self.is_well_balanced,
                "key_recommendations": self.key_recommendations(),
                "priority_actions": self.priority_actions(),
            },
        }
