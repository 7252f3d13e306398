"""Weighted keyword tables for every signal dimension.

A ``Lexicon`` is built once at import time and shared by reference; nothing
mutates it afterwards. Phrases are stored lower-cased.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


ENERGY = "energy"
SKILL = "skill"
CONFIDENCE = "confidence"
RECOGNITION = "recognition"
COMPETENCE = "competence"
DRAIN = "drain"
FREQUENCY = "frequency"
INTEREST = "interest"
CURRENT_LEVEL = "current_level"
POTENTIAL = "potential"
COMPETENCE_DESPITE_DRAIN = "competence_despite_drain"

NEUTRAL_BASELINE = 2.5
# Advisor-facing and self-belief dimensions skew positive
FAVORABLE_BASELINE = 3.0


@dataclass(frozen=True)
class KeywordBucket:
    name: str
    phrases: tuple
    weight: float  # added once per occurrence, may be negative

    def __post_init__(self) -> None:
        object.__setattr__(self, "phrases", tuple(p.lower() for p in self.phrases))


@dataclass(frozen=True)
class DimensionSpec:
    """One dimension's baseline plus its keyword buckets.

    ``co_occurrence`` names buckets that must all match at least once for
    ``co_occurrence_bonus`` to apply. ``breadth_bonus`` applies when the
    response carries many theme tags.
    """

    name: str
    baseline: float
    buckets: tuple
    co_occurrence: tuple = ()
    co_occurrence_bonus: float = 0.0
    breadth_bonus: float = 0.0

    def bucket(self, name: str) -> KeywordBucket:
        for b in self.buckets:
            if b.name == name:
                return b
        raise KeyError(name)


@dataclass(frozen=True)
class Lexicon:
    dimensions: Mapping[str, DimensionSpec]
    application_contexts: Mapping[str, tuple]

    def __post_init__(self) -> None:
        object.__setattr__(self, "dimensions", MappingProxyType(dict(self.dimensions)))
        object.__setattr__(
            self,
            "application_contexts",
            MappingProxyType({k: tuple(p.lower() for p in v) for k, v in self.application_contexts.items()}),
        )

    def dimension(self, name: str) -> DimensionSpec:
        return self.dimensions[name]


# ═══════════════════════════════════════════════════════════════════════════
# Default tables
# ═══════════════════════════════════════════════════════════════════════════

_ENERGY = DimensionSpec(
    name=ENERGY,
    baseline=NEUTRAL_BASELINE,
    buckets=(
        KeywordBucket("high", ("energise", "energize", "love", "passionate", "excited", "thrive", "flow", "effortless"), 0.8),
        KeywordBucket("medium", ("enjoy", "like", "interested", "engaged", "motivated"), 0.4),
        KeywordBucket("low", ("drain", "exhaust", "difficult", "struggle", "tedious", "bore"), -0.6),
    ),
)

_SKILL = DimensionSpec(
    name=SKILL,
    baseline=NEUTRAL_BASELINE,
    buckets=(
        KeywordBucket("high", ("expert", "excellent", "outstanding", "exceptional", "mastery", "excel"), 0.9),
        KeywordBucket("medium", ("good", "capable", "competent", "skilled", "proficient"), 0.6),
        KeywordBucket("developing", ("learning", "developing", "improving", "growing", "building"), 0.2),
    ),
    breadth_bonus=0.3,
)

_CONFIDENCE = DimensionSpec(
    name=CONFIDENCE,
    baseline=FAVORABLE_BASELINE,
    buckets=(
        KeywordBucket("high", ("confident", "certain", "sure", "definite", "strong"), 0.6),
        KeywordBucket("medium", ("think", "believe", "feel", "seem"), 0.2),
        KeywordBucket("low", ("maybe", "perhaps", "uncertain", "not sure", "doubt"), -0.8),
    ),
)

_RECOGNITION = DimensionSpec(
    name=RECOGNITION,
    baseline=FAVORABLE_BASELINE,
    buckets=(
        KeywordBucket("strong", ("always", "consistently", "repeatedly", "known for", "famous for", "goes to"), 1.0),
        KeywordBucket("medium", ("often", "usually", "frequently", "regularly", "good at"), 0.6),
        KeywordBucket("limited", ("sometimes", "occasionally", "can be", "might be"), 0.2),
    ),
)

_COMPETENCE = DimensionSpec(
    name=COMPETENCE,
    baseline=FAVORABLE_BASELINE,
    buckets=(
        KeywordBucket("high", ("expert", "exceptional", "outstanding", "brilliant", "masterful"), 0.8),
        KeywordBucket("good", ("skilled", "competent", "capable", "proficient", "strong"), 0.5),
        KeywordBucket("developing", ("learning", "improving", "developing", "growing"), 0.2),
        KeywordBucket("concerns", ("struggle", "difficulty", "challenge", "weak", "needs work"), -0.7),
    ),
)

_DRAIN = DimensionSpec(
    name=DRAIN,
    baseline=NEUTRAL_BASELINE,
    buckets=(
        KeywordBucket("drain", ("exhaust", "drain", "tire", "burn out", "overwhelming", "stressful", "difficult"), 0.8),
        KeywordBucket("energy", ("energise", "energize", "love", "enjoy", "thrive"), -0.6),
    ),
)

_FREQUENCY = DimensionSpec(
    name=FREQUENCY,
    baseline=NEUTRAL_BASELINE,
    buckets=(
        KeywordBucket("high", ("always", "constantly", "continuously", "all the time", "daily"), 0.8),
        KeywordBucket("medium", ("often", "regularly", "frequently", "usually"), 0.5),
        KeywordBucket("low", ("sometimes", "occasionally", "rarely", "seldom"), -0.3),
    ),
)

_INTEREST = DimensionSpec(
    name=INTEREST,
    baseline=NEUTRAL_BASELINE,
    buckets=(
        KeywordBucket("high", ("love", "passionate", "fascinated", "excited", "dream", "aspire"), 1.0),
        KeywordBucket("medium", ("interested", "like", "enjoy", "attracted", "curious"), 0.6),
        KeywordBucket("low", ("not interested", "boring", "uninteresting"), -0.8),
    ),
)

_CURRENT_LEVEL = DimensionSpec(
    name=CURRENT_LEVEL,
    baseline=NEUTRAL_BASELINE,
    buckets=(
        KeywordBucket("high", ("expert", "advanced", "proficient", "skilled"), 0.8),
        KeywordBucket("medium", ("intermediate", "developing", "learning", "improving"), 0.4),
        KeywordBucket("low", ("beginner", "inexperienced", "just starting", "new to"), -0.4),
    ),
)

_POTENTIAL = DimensionSpec(
    name=POTENTIAL,
    baseline=FAVORABLE_BASELINE,
    buckets=(
        KeywordBucket("high", ("potential", "could", "able to", "capable of", "believe i can"), 0.6),
        KeywordBucket("medium", ("might", "maybe", "possibly", "think i could"), 0.3),
        KeywordBucket("low", ("doubt", "unlikely", "probably not", "don't think"), -0.8),
    ),
)

# "I'm good at X but it drains me"
_COMPETENCE_DESPITE_DRAIN = DimensionSpec(
    name=COMPETENCE_DESPITE_DRAIN,
    baseline=NEUTRAL_BASELINE,
    buckets=(
        KeywordBucket("competence", ("good at", "skilled", "capable", "competent", "successful"), 0.4),
        KeywordBucket("contrast", ("but", "however", "although", "even though", "despite"), 0.0),
    ),
    co_occurrence=("competence", "contrast"),
    co_occurrence_bonus=1.0,
)

APPLICATION_CONTEXTS = {
    "leadership": ("lead", "manag", "mentor", "guide", "direct"),
    "technical": ("technical", "engineer", "code", "system", "tool"),
    "strategic": ("strateg", "vision", "roadmap", "long-term", "planning"),
    "creative": ("creative", "design", "innovat", "idea", "imagin"),
    "analytical": ("analy", "data", "research", "problem", "evaluat"),
    "interpersonal": ("team", "people", "relationship", "communicat", "collaborat", "facilitat"),
}


def build_default_lexicon() -> Lexicon:
    specs = (
        _ENERGY,
        _SKILL,
        _CONFIDENCE,
        _RECOGNITION,
        _COMPETENCE,
        _DRAIN,
        _FREQUENCY,
        _INTEREST,
        _CURRENT_LEVEL,
        _POTENTIAL,
        _COMPETENCE_DESPITE_DRAIN,
    )
    return Lexicon(
        dimensions={s.name: s for s in specs},
        application_contexts=APPLICATION_CONTEXTS,
    )


DEFAULT_LEXICON = build_default_lexicon()
