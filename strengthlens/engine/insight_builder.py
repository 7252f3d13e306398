"""Assemble structured insight records for qualifying theme/category pairs.

Each category has its own builder that rounds the relevant signals to 1-5
scores, computes the category's composite ranking metric and picks an advice
template by threshold. Builders return ``None`` when a profile they need is
absent; callers treat that as a skip.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from strengthlens.config.settings import (
    CONFIDENCE_ADVISOR_WEIGHT,
    CONFIDENCE_CREDIBILITY_SATURATION,
    CONFIDENCE_EVIDENCE_SATURATION,
    CONFIDENCE_SELF_WEIGHT,
    EVIDENCE_LIMIT,
)
from strengthlens.engine.lexicon import DEFAULT_LEXICON, NEUTRAL_BASELINE, Lexicon
from strengthlens.engine.signal_extractor import detect_application_contexts
from strengthlens.engine.theme_aggregator import ThemeSignalProfile
from strengthlens.models.insight import InsightCategory, InsightRecord

logger = logging.getLogger(__name__)


def round_score(value: float) -> int:
    """Nearest integer (halves round up), clamped to [1, 5]."""
    return max(1, min(5, math.floor(value + 0.5)))


def theme_label(theme: str) -> str:
    return theme.replace("_", " ").strip().title()


def first_evidence(evidence) -> tuple:
    return tuple(evidence[:EVIDENCE_LIMIT])


def calculate_confidence(profile: ThemeSignalProfile) -> float:
    """Blend of self-certainty and advisor corroboration, in [0, 1]."""
    own, adv = profile.self_profile, profile.advisor_profile
    self_component = 0.0
    if own is not None:
        certainty = (own.avg_confidence - 1.0) / 4.0
        volume = min(own.frequency / CONFIDENCE_EVIDENCE_SATURATION, 1.0)
        self_component = 0.6 * certainty + 0.4 * volume
    advisor_component = 0.0
    if adv is not None:
        advisor_component = min(adv.total_credibility / CONFIDENCE_CREDIBILITY_SATURATION, 1.0)
    blended = CONFIDENCE_SELF_WEIGHT * self_component + CONFIDENCE_ADVISOR_WEIGHT * advisor_component
    return round(max(0.0, min(1.0, blended)), 4)


def _record(
    profile: ThemeSignalProfile,
    category: InsightCategory,
    description: str,
    scores: dict[str, int],
    composite: float,
    advice: str,
    flags: dict[str, bool],
    application_areas: tuple = (),
) -> InsightRecord:
    own, adv = profile.self_profile, profile.advisor_profile
    return InsightRecord(
        id=f"{category.value}:{profile.theme}",
        category=category,
        theme_name=profile.theme,
        title=theme_label(profile.theme),
        description=description,
        scores=scores,
        evidence_from_self=first_evidence(own.evidence) if own else (),
        evidence_from_advisors=first_evidence(adv.evidence) if adv else (),
        advice=advice,
        confidence=calculate_confidence(profile),
        composite_score=float(composite),
        flags=flags,
        application_areas=application_areas,
    )


# ---------------------------------------------------------------------------
# Energising Strength
# ---------------------------------------------------------------------------

def _build_energising(profile: ThemeSignalProfile, lexicon: Lexicon) -> Optional[InsightRecord]:
    own, adv = profile.self_profile, profile.advisor_profile
    if own is None or adv is None:
        return None

    label = theme_label(profile.theme)
    skill = round_score(own.avg_skill)
    energy = round_score(own.avg_energy)
    recognition = round_score(adv.weighted_recognition)
    areas = tuple(detect_application_contexts(own.evidence + adv.evidence, lexicon))
    leverageability = max(1, min(5, 1 + len(areas)))
    signature = skill >= 4 and energy >= 4 and recognition >= 4

    if signature:
        advice = f"Shape your role around {label}: it energises you and others already rely on it."
    elif leverageability >= 4:
        advice = f"Put {label} to work across {', '.join(areas)} settings; it already travels well."
    else:
        advice = f"Find one new context for {label}, such as a stretch project outside your usual work."

    return _record(
        profile,
        InsightCategory.ENERGISING,
        description=(
            f"{label} gives you energy ({energy}/5), you rate your skill at {skill}/5 "
            f"and your advisors recognise it ({recognition}/5)."
        ),
        scores={
            "skill": skill,
            "energy": energy,
            "recognition": recognition,
            "leverageability": leverageability,
        },
        composite=skill + energy + recognition + leverageability,
        advice=advice,
        flags={"is_signature_strength": signature},
        application_areas=areas,
    )


# ---------------------------------------------------------------------------
# Hidden Strength
# ---------------------------------------------------------------------------

def _build_hidden(profile: ThemeSignalProfile, lexicon: Lexicon) -> Optional[InsightRecord]:
    own, adv = profile.self_profile, profile.advisor_profile
    if adv is None:
        return None

    label = theme_label(profile.theme)
    competence = round_score(adv.weighted_competence)
    advisor_recognition = round_score(adv.weighted_recognition)
    # Not mentioned by self at all counts as the lowest self-recognition
    self_recognition = round_score(min(own.avg_skill, own.avg_confidence)) if own else 1
    recognition_gap = competence - self_recognition
    potential_impact = round_score((adv.weighted_competence + adv.weighted_recognition) / 2.0)

    if own is None:
        advice = (
            f"Advisors point to {label} but it never came up in your own reflections. "
            f"Ask them for concrete examples and add it to how you describe yourself."
        )
    elif recognition_gap >= 2:
        advice = f"Claim {label} openly: name it in your profile and volunteer for work that shows it."
    else:
        advice = f"Use {label} somewhere visible and ask for feedback to calibrate your own view."

    return _record(
        profile,
        InsightCategory.HIDDEN,
        description=(
            f"Advisors rate your {label} at {competence}/5 while your own view sits at "
            f"{self_recognition}/5, a gap of {recognition_gap}."
        ),
        scores={
            "competence": competence,
            "advisor_recognition": advisor_recognition,
            "self_recognition": self_recognition,
            "potential_impact": potential_impact,
        },
        composite=potential_impact + recognition_gap,
        advice=advice,
        flags={
            "is_high_priority": competence >= 4 and recognition_gap >= 2 and potential_impact >= 4,
            "unmentioned_by_self": own is None,
        },
    )


# ---------------------------------------------------------------------------
# Overused Talent
# ---------------------------------------------------------------------------

def _build_overused(profile: ThemeSignalProfile, lexicon: Lexicon) -> Optional[InsightRecord]:
    own, adv = profile.self_profile, profile.advisor_profile
    if own is None:
        return None

    label = theme_label(profile.theme)
    talent = round_score(own.avg_skill)
    usage = round_score(own.usage_frequency)
    raw_risk = own.drain_level
    corroborated = adv is not None and adv.weighted_burnout_concern > NEUTRAL_BASELINE
    if corroborated:
        raw_risk += (adv.weighted_burnout_concern - NEUTRAL_BASELINE) * 0.5
    burnout_risk = round_score(raw_risk)
    immediate = burnout_risk >= 4 and usage >= 4

    if immediate:
        advice = f"Cut back on {label} now: hand part of it to someone you can coach and protect recovery time."
    elif burnout_risk >= 3:
        advice = f"Set a limit on how often you take on {label} and rotate it with work that restores you."
    else:
        advice = f"Keep an eye on how much of your week goes to {label}."

    return _record(
        profile,
        InsightCategory.OVERUSED,
        description=(
            f"You are strong at {label} ({talent}/5) and use it a lot ({usage}/5), "
            f"but it carries a burnout risk of {burnout_risk}/5."
        ),
        scores={
            "talent": talent,
            "usage_frequency": usage,
            "burnout_risk": burnout_risk,
        },
        composite=burnout_risk + usage,
        advice=advice,
        flags={
            "requires_immediate_attention": immediate,
            "advisor_corroborated": corroborated,
        },
    )


# ---------------------------------------------------------------------------
# Aspirational
# ---------------------------------------------------------------------------

def _build_aspirational(profile: ThemeSignalProfile, lexicon: Lexicon) -> Optional[InsightRecord]:
    own, adv = profile.self_profile, profile.advisor_profile
    if own is None:
        return None

    label = theme_label(profile.theme)
    current = round_score(own.current_level)
    interest = round_score(own.interest_level)
    raw_potential = own.potential_belief
    if adv is not None:
        raw_potential = (own.potential_belief + adv.weighted_development_potential) / 2.0
    development_potential = round_score(raw_potential)
    development_priority = (interest + development_potential) / 2.0

    if development_potential >= 4:
        advice = (
            f"Commit to a development plan for {label}: a mentor or course plus one "
            f"real project in the next three months."
        )
    elif interest >= 4:
        advice = f"Run a small experiment in {label} to test the interest before investing heavily."
    else:
        advice = f"Keep exploring {label} through reading and conversations with people who do it."

    return _record(
        profile,
        InsightCategory.ASPIRATIONAL,
        description=(
            f"You are drawn to {label} ({interest}/5 interest) and see room to grow "
            f"from your current {current}/5."
        ),
        scores={
            "current_level": current,
            "interest": interest,
            "development_potential": development_potential,
        },
        composite=development_priority,
        advice=advice,
        flags={"is_worth_investing": interest >= 4 and development_potential >= 3},
    )


# ---------------------------------------------------------------------------
# Misaligned Energy
# ---------------------------------------------------------------------------

def _build_misaligned(profile: ThemeSignalProfile, lexicon: Lexicon) -> Optional[InsightRecord]:
    own, adv = profile.self_profile, profile.advisor_profile
    if own is None:
        return None

    label = theme_label(profile.theme)
    competence = round_score(own.competence_despite_drain)
    drain = round_score(own.drain_level)
    frequency = round_score(own.usage_frequency)
    impact_priority = (drain + frequency) / 2.0
    urgent = drain >= 4 and frequency >= 4

    scores = {
        "competence": competence,
        "energy_drain": drain,
        "frequency": frequency,
    }
    if adv is not None:
        scores["advisor_competence"] = round_score(adv.weighted_competence)

    if urgent:
        advice = f"Delegate or automate the parts of {label} that drain you most; you know it well enough to hand it over."
    elif drain >= 4:
        advice = f"Batch {label} into fixed blocks and pair each block with work that energises you."
    else:
        advice = f"Try a different way of doing {label} and notice which part costs the most energy."

    return _record(
        profile,
        InsightCategory.MISALIGNED,
        description=(
            f"You handle {label} competently ({competence}/5) but it drains you "
            f"({drain}/5) and comes up often ({frequency}/5)."
        ),
        scores=scores,
        composite=impact_priority,
        advice=advice,
        flags={"requires_urgent_attention": urgent},
    )


BUILDERS: dict[InsightCategory, Callable[[ThemeSignalProfile, Lexicon], Optional[InsightRecord]]] = {
    InsightCategory.ENERGISING: _build_energising,
    InsightCategory.HIDDEN: _build_hidden,
    InsightCategory.OVERUSED: _build_overused,
    InsightCategory.ASPIRATIONAL: _build_aspirational,
    InsightCategory.MISALIGNED: _build_misaligned,
}


def build_insight(
    profile: ThemeSignalProfile,
    category: InsightCategory,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> Optional[InsightRecord]:
    """Build the record for a theme that already passed the category's detector."""
    record = BUILDERS[category](profile, lexicon)
    if record is None:
        logger.debug(f"Skipped {category.value} for '{profile.theme}': required profile absent")
    return record
