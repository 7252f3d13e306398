"""Per-theme aggregation of self and advisor signals.

Every theme is aggregated independently from the immutable response lists,
so the result is a pure function of the input and does not depend on the
order in which themes are processed.
"""

from __future__ import annotations

import logging
import statistics
from dataclasses import dataclass
from typing import Optional, Sequence

from strengthlens.engine.lexicon import (
    COMPETENCE,
    COMPETENCE_DESPITE_DRAIN,
    CONFIDENCE,
    CURRENT_LEVEL,
    DEFAULT_LEXICON,
    DRAIN,
    ENERGY,
    FREQUENCY,
    INTEREST,
    POTENTIAL,
    RECOGNITION,
    SKILL,
    Lexicon,
)
from strengthlens.engine.signal_extractor import extract_signals, normalize_theme
from strengthlens.models.responses import AdvisorResponse, SelfResponse

logger = logging.getLogger(__name__)

SELF_DIMENSIONS = (
    ENERGY,
    SKILL,
    CONFIDENCE,
    DRAIN,
    FREQUENCY,
    INTEREST,
    CURRENT_LEVEL,
    POTENTIAL,
    COMPETENCE_DESPITE_DRAIN,
)

# Advisor burnout concern reads the drain lexicon, development potential the
# potential lexicon, both applied to the advisor's own words.
ADVISOR_DIMENSIONS = (RECOGNITION, COMPETENCE, DRAIN, POTENTIAL)


@dataclass(frozen=True)
class SelfSignalProfile:
    avg_energy: float
    avg_skill: float
    avg_confidence: float
    drain_level: float
    usage_frequency: float
    interest_level: float
    current_level: float
    potential_belief: float
    competence_despite_drain: float
    frequency: int          # number of responses carrying the theme
    evidence: tuple         # full texts, order of appearance
    domains: tuple


@dataclass(frozen=True)
class AdvisorSignalProfile:
    weighted_recognition: float
    weighted_competence: float
    weighted_burnout_concern: float
    weighted_development_potential: float
    frequency: int
    total_credibility: float
    evidence: tuple
    observation_contexts: tuple


@dataclass(frozen=True)
class ThemeSignalProfile:
    theme: str
    self_profile: Optional[SelfSignalProfile] = None
    advisor_profile: Optional[AdvisorSignalProfile] = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def weighted_mean(values: Sequence[float], weights: Sequence[float]) -> float:
    """Σ(v·w) / Σw, or 0.0 ("no signal") when the weights sum to zero."""
    if not values or len(values) != len(weights):
        return 0.0
    total_weight = sum(weights)
    if total_weight <= 0:
        return 0.0
    return sum(v * w for v, w in zip(values, weights)) / total_weight


def response_themes(tags) -> list[str]:
    """Normalised, de-duplicated, sorted theme names for one response."""
    themes = {normalize_theme(t) for t in tags}
    themes.discard("")
    return sorted(themes)


def _self_profile(
    responses: list[SelfResponse],
    signals: list[dict[str, float]],
) -> SelfSignalProfile:
    def avg(dimension: str) -> float:
        return statistics.fmean(s[dimension] for s in signals)

    return SelfSignalProfile(
        avg_energy=avg(ENERGY),
        avg_skill=avg(SKILL),
        avg_confidence=avg(CONFIDENCE),
        drain_level=avg(DRAIN),
        usage_frequency=avg(FREQUENCY),
        interest_level=avg(INTEREST),
        current_level=avg(CURRENT_LEVEL),
        potential_belief=avg(POTENTIAL),
        competence_despite_drain=avg(COMPETENCE_DESPITE_DRAIN),
        frequency=len(responses),
        evidence=tuple(r.text for r in responses),
        domains=tuple(r.domain.value for r in responses),
    )


def _advisor_profile(
    responses: list[AdvisorResponse],
    signals: list[dict[str, float]],
) -> AdvisorSignalProfile:
    weights = [r.credibility_weight for r in responses]

    def wavg(dimension: str) -> float:
        return weighted_mean([s[dimension] for s in signals], weights)

    return AdvisorSignalProfile(
        weighted_recognition=wavg(RECOGNITION),
        weighted_competence=wavg(COMPETENCE),
        weighted_burnout_concern=wavg(DRAIN),
        weighted_development_potential=wavg(POTENTIAL),
        frequency=len(responses),
        total_credibility=sum(weights),
        evidence=tuple(r.text for r in responses),
        observation_contexts=tuple(r.observation_description for r in responses),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_profiles(
    self_responses: Sequence[SelfResponse],
    advisor_responses: Sequence[AdvisorResponse],
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> dict[str, ThemeSignalProfile]:
    """Group responses by theme and aggregate each side's signals.

    Themes are keyed in order of first appearance: self responses first, then
    advisor responses. A side with no responses for a theme is ``None``.
    """
    self_by_theme: dict[str, list[int]] = {}
    advisor_by_theme: dict[str, list[int]] = {}
    order: dict[str, None] = {}

    self_signals: list[dict[str, float]] = []
    for idx, response in enumerate(self_responses):
        themes = response_themes(response.theme_tags)
        self_signals.append(
            extract_signals(response.text, SELF_DIMENSIONS, lexicon, theme_count=len(themes))
        )
        for theme in themes:
            self_by_theme.setdefault(theme, []).append(idx)
            order.setdefault(theme, None)

    advisor_signals: list[dict[str, float]] = []
    for idx, response in enumerate(advisor_responses):
        themes = response_themes(response.theme_tags)
        advisor_signals.append(extract_signals(response.text, ADVISOR_DIMENSIONS, lexicon))
        for theme in themes:
            advisor_by_theme.setdefault(theme, []).append(idx)
            order.setdefault(theme, None)

    profiles: dict[str, ThemeSignalProfile] = {}
    for theme in order:
        self_idx = self_by_theme.get(theme, [])
        advisor_idx = advisor_by_theme.get(theme, [])
        profiles[theme] = ThemeSignalProfile(
            theme=theme,
            self_profile=_self_profile(
                [self_responses[i] for i in self_idx],
                [self_signals[i] for i in self_idx],
            ) if self_idx else None,
            advisor_profile=_advisor_profile(
                [advisor_responses[i] for i in advisor_idx],
                [advisor_signals[i] for i in advisor_idx],
            ) if advisor_idx else None,
        )

    logger.debug(
        f"Built {len(profiles)} theme profiles from {len(self_responses)} self "
        f"and {len(advisor_responses)} advisor responses"
    )
    return profiles
