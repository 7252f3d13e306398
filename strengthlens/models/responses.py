"""Input models: self-reflections and advisor observations.

Both are immutable once created. The collection layer produces them; the
insight engine only reads them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, Optional


class CareerDomain(str, Enum):
    TECHNICAL = "technical"
    LEADERSHIP = "leadership"
    CREATIVE = "creative"
    ANALYTICAL = "analytical"
    SOCIAL = "social"
    ENTREPRENEURIAL = "entrepreneurial"
    TRADITIONAL = "traditional"
    INVESTIGATIVE = "investigative"


class ObservationPeriod(str, Enum):
    LESS_THAN_MONTH = "<1mo"
    ONE_TO_SIX_MONTHS = "1-6mo"
    SIX_MONTHS_TO_YEAR = "6mo-1yr"
    ONE_TO_THREE_YEARS = "1-3yr"
    MORE_THAN_THREE_YEARS = ">3yr"


class ConfidenceContext(str, Enum):
    UNCERTAIN = "uncertain"
    SOMEWHAT = "somewhat"
    CONFIDENT = "confident"
    VERY_CONFIDENT = "very_confident"


OBSERVATION_DESCRIPTIONS = {
    ObservationPeriod.LESS_THAN_MONTH: "Less than a month",
    ObservationPeriod.ONE_TO_SIX_MONTHS: "1-6 months",
    ObservationPeriod.SIX_MONTHS_TO_YEAR: "6 months to 1 year",
    ObservationPeriod.ONE_TO_THREE_YEARS: "1-3 years",
    ObservationPeriod.MORE_THAN_THREE_YEARS: "More than 3 years",
}

# Credibility contributions used by the collection layer
OBSERVATION_WEIGHTS = {
    ObservationPeriod.LESS_THAN_MONTH: 0.1,
    ObservationPeriod.ONE_TO_SIX_MONTHS: 0.2,
    ObservationPeriod.SIX_MONTHS_TO_YEAR: 0.3,
    ObservationPeriod.ONE_TO_THREE_YEARS: 0.4,
    ObservationPeriod.MORE_THAN_THREE_YEARS: 0.5,
}
CONFIDENCE_CONTEXT_WEIGHTS = {
    ConfidenceContext.UNCERTAIN: 0.0,
    ConfidenceContext.SOMEWHAT: 0.1,
    ConfidenceContext.CONFIDENT: 0.15,
    ConfidenceContext.VERY_CONFIDENT: 0.2,
}


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def estimate_credibility_weight(
    observation_period: ObservationPeriod,
    confidence_context: ConfidenceContext,
    confidence_level: Optional[int] = None,
    example_count: int = 0,
    substantive: bool = False,
) -> float:
    """Trust multiplier for an advisor response, clamped to [0, 1].

    Longer observation, a stated 1-5 confidence level, concrete examples and
    a substantive answer all raise the weight above the 0.5 base.
    """
    weight = 0.5
    weight += OBSERVATION_WEIGHTS.get(observation_period, 0.0)
    if confidence_level is not None:
        weight += (confidence_level / 5.0) * 0.3
    weight += CONFIDENCE_CONTEXT_WEIGHTS.get(confidence_context, 0.0)
    if example_count > 0:
        weight += 0.1
        if example_count > 2:
            weight += 0.1
    if substantive:
        weight += 0.1
    return max(0.0, min(1.0, weight))


def _frozen_tags(tags: Iterable[str] | None) -> frozenset:
    if tags is None:
        return frozenset()
    if isinstance(tags, str):
        return frozenset([tags])
    return frozenset(tags)


@dataclass(frozen=True)
class SelfResponse:
    text: str
    domain: CareerDomain = CareerDomain.TECHNICAL
    theme_tags: frozenset = field(default_factory=frozenset)
    timestamp: str = field(default_factory=_now_iso)  # ISO 8601

    def __post_init__(self) -> None:
        object.__setattr__(self, "theme_tags", _frozen_tags(self.theme_tags))
        object.__setattr__(self, "domain", CareerDomain(self.domain))
        object.__setattr__(self, "text", self.text or "")

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "domain": self.domain.value,
            "theme_tags": sorted(self.theme_tags),
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SelfResponse:
        data = dict(data)
        data.setdefault("theme_tags", [])
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


@dataclass(frozen=True)
class AdvisorResponse:
    text: str
    theme_tags: frozenset = field(default_factory=frozenset)
    credibility_weight: float = 0.5  # 0.0-1.0, pre-computed upstream
    observation_period: ObservationPeriod = ObservationPeriod.ONE_TO_SIX_MONTHS
    confidence_context: ConfidenceContext = ConfidenceContext.SOMEWHAT

    def __post_init__(self) -> None:
        object.__setattr__(self, "theme_tags", _frozen_tags(self.theme_tags))
        object.__setattr__(self, "observation_period", ObservationPeriod(self.observation_period))
        object.__setattr__(self, "confidence_context", ConfidenceContext(self.confidence_context))
        object.__setattr__(self, "credibility_weight", float(self.credibility_weight))
        object.__setattr__(self, "text", self.text or "")

    @property
    def observation_description(self) -> str:
        return OBSERVATION_DESCRIPTIONS[self.observation_period]

    def to_dict(self) -> dict:
        d = asdict(self)
        d["theme_tags"] = sorted(self.theme_tags)
        d["observation_period"] = self.observation_period.value
        d["confidence_context"] = self.confidence_context.value
        return d

    @classmethod
    def from_dict(cls, data: dict) -> AdvisorResponse:
        data = dict(data)
        data.setdefault("theme_tags", [])
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
