"""Category membership rules: pure predicates over one theme's profiles.

Detectors run independently, so a theme may qualify for several categories.
A missing profile that a rule requires makes the theme a non-member; a
missing optional advisor profile skips the advisor condition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping

from strengthlens.config import settings
from strengthlens.engine.theme_aggregator import ThemeSignalProfile
from strengthlens.models.insight import InsightCategory


@dataclass(frozen=True)
class DetectorThresholds:
    energising_min_self_energy: float = settings.ENERGISING_MIN_SELF_ENERGY
    energising_min_self_skill: float = settings.ENERGISING_MIN_SELF_SKILL
    energising_min_advisor_recognition: float = settings.ENERGISING_MIN_ADVISOR_RECOGNITION
    energising_min_advisor_competence: float = settings.ENERGISING_MIN_ADVISOR_COMPETENCE

    hidden_min_advisor_recognition: float = settings.HIDDEN_MIN_ADVISOR_RECOGNITION
    hidden_min_advisor_competence: float = settings.HIDDEN_MIN_ADVISOR_COMPETENCE
    hidden_self_skill_ceiling: float = settings.HIDDEN_SELF_SKILL_CEILING            # exclusive
    hidden_self_confidence_ceiling: float = settings.HIDDEN_SELF_CONFIDENCE_CEILING  # exclusive

    overused_min_self_skill: float = settings.OVERUSED_MIN_SELF_SKILL
    overused_min_drain: float = settings.OVERUSED_MIN_DRAIN
    overused_min_usage_frequency: float = settings.OVERUSED_MIN_USAGE_FREQUENCY
    overused_min_advisor_burnout: float = settings.OVERUSED_MIN_ADVISOR_BURNOUT

    aspirational_min_interest: float = settings.ASPIRATIONAL_MIN_INTEREST
    aspirational_max_current_level: float = settings.ASPIRATIONAL_MAX_CURRENT_LEVEL  # inclusive
    aspirational_min_potential: float = settings.ASPIRATIONAL_MIN_POTENTIAL
    aspirational_min_advisor_potential: float = settings.ASPIRATIONAL_MIN_ADVISOR_POTENTIAL

    misaligned_min_drain: float = settings.MISALIGNED_MIN_DRAIN
    misaligned_min_frequency: float = settings.MISALIGNED_MIN_FREQUENCY
    misaligned_min_competence: float = settings.MISALIGNED_MIN_COMPETENCE
    misaligned_min_advisor_competence: float = settings.MISALIGNED_MIN_ADVISOR_COMPETENCE


DEFAULT_THRESHOLDS = DetectorThresholds()


@dataclass(frozen=True)
class DetectorResult:
    is_member: bool
    scores: Mapping[str, float] = field(default_factory=dict)


NOT_MEMBER = DetectorResult(is_member=False)


def detect_energising_strength(
    profile: ThemeSignalProfile,
    thresholds: DetectorThresholds = DEFAULT_THRESHOLDS,
) -> DetectorResult:
    """High energy + solid skill, recognised by advisors. Needs both sides."""
    own, adv = profile.self_profile, profile.advisor_profile
    if own is None or adv is None:
        return NOT_MEMBER

    is_member = (
        own.avg_energy >= thresholds.energising_min_self_energy
        and own.avg_skill >= thresholds.energising_min_self_skill
        and adv.weighted_recognition >= thresholds.energising_min_advisor_recognition
        and adv.weighted_competence >= thresholds.energising_min_advisor_competence
    )
    return DetectorResult(is_member, {
        "energy": own.avg_energy,
        "skill": own.avg_skill,
        "recognition": adv.weighted_recognition,
        "competence": adv.weighted_competence,
    })


def detect_hidden_strength(
    profile: ThemeSignalProfile,
    thresholds: DetectorThresholds = DEFAULT_THRESHOLDS,
) -> DetectorResult:
    """Advisors see a strength the subject doesn't mention or undervalues."""
    own, adv = profile.self_profile, profile.advisor_profile
    if adv is None:
        return NOT_MEMBER

    scores = {
        "recognition": adv.weighted_recognition,
        "competence": adv.weighted_competence,
    }
    advisor_sees_it = (
        adv.weighted_recognition >= thresholds.hidden_min_advisor_recognition
        and adv.weighted_competence >= thresholds.hidden_min_advisor_competence
    )
    if own is None:
        return DetectorResult(advisor_sees_it, scores)

    scores["self_skill"] = own.avg_skill
    scores["self_confidence"] = own.avg_confidence
    undervalued = (
        own.avg_skill < thresholds.hidden_self_skill_ceiling
        or own.avg_confidence < thresholds.hidden_self_confidence_ceiling
    )
    return DetectorResult(advisor_sees_it and undervalued, scores)


def detect_overused_talent(
    profile: ThemeSignalProfile,
    thresholds: DetectorThresholds = DEFAULT_THRESHOLDS,
) -> DetectorResult:
    """Strong, heavily used skill that is starting to drain."""
    own, adv = profile.self_profile, profile.advisor_profile
    if own is None:
        return NOT_MEMBER

    scores = {
        "skill": own.avg_skill,
        "drain": own.drain_level,
        "usage_frequency": own.usage_frequency,
    }
    is_member = (
        own.avg_skill >= thresholds.overused_min_self_skill
        and own.drain_level >= thresholds.overused_min_drain
        and own.usage_frequency >= thresholds.overused_min_usage_frequency
    )
    if adv is not None:
        scores["advisor_burnout_concern"] = adv.weighted_burnout_concern
        is_member = is_member and adv.weighted_burnout_concern >= thresholds.overused_min_advisor_burnout
    return DetectorResult(is_member, scores)


def detect_aspirational(
    profile: ThemeSignalProfile,
    thresholds: DetectorThresholds = DEFAULT_THRESHOLDS,
) -> DetectorResult:
    """High interest and self-belief, current level still modest."""
    own, adv = profile.self_profile, profile.advisor_profile
    if own is None:
        return NOT_MEMBER

    scores = {
        "interest": own.interest_level,
        "current_level": own.current_level,
        "potential": own.potential_belief,
    }
    is_member = (
        own.interest_level >= thresholds.aspirational_min_interest
        and own.current_level <= thresholds.aspirational_max_current_level
        and own.potential_belief >= thresholds.aspirational_min_potential
    )
    if adv is not None:
        scores["advisor_development_potential"] = adv.weighted_development_potential
        is_member = is_member and (
            adv.weighted_development_potential >= thresholds.aspirational_min_advisor_potential
        )
    return DetectorResult(is_member, scores)


def detect_misaligned_energy(
    profile: ThemeSignalProfile,
    thresholds: DetectorThresholds = DEFAULT_THRESHOLDS,
) -> DetectorResult:
    """Frequent activity the subject is good at but finds draining."""
    own, adv = profile.self_profile, profile.advisor_profile
    if own is None:
        return NOT_MEMBER

    scores = {
        "drain": own.drain_level,
        "frequency": own.usage_frequency,
        "competence": own.competence_despite_drain,
    }
    is_member = (
        own.drain_level >= thresholds.misaligned_min_drain
        and own.usage_frequency >= thresholds.misaligned_min_frequency
        and own.competence_despite_drain >= thresholds.misaligned_min_competence
    )
    if adv is not None:
        scores["advisor_competence"] = adv.weighted_competence
        is_member = is_member and adv.weighted_competence >= thresholds.misaligned_min_advisor_competence
    return DetectorResult(is_member, scores)


DETECTORS: dict[InsightCategory, Callable[..., DetectorResult]] = {
    InsightCategory.ENERGISING: detect_energising_strength,
    InsightCategory.HIDDEN: detect_hidden_strength,
    InsightCategory.OVERUSED: detect_overused_talent,
    InsightCategory.ASPIRATIONAL: detect_aspirational,
    InsightCategory.MISALIGNED: detect_misaligned_energy,
}


def detect(
    category: InsightCategory,
    profile: ThemeSignalProfile,
    thresholds: DetectorThresholds = DEFAULT_THRESHOLDS,
) -> DetectorResult:
    return DETECTORS[category](profile, thresholds)
