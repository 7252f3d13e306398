"""Signal extraction: pure functions, no I/O.

Turns one response's text into a bounded 1-5 score per dimension by counting
weighted keyword occurrences against the dimension's neutral baseline.
"""

from __future__ import annotations

import re
from typing import Iterable

from strengthlens.config.settings import SCORE_MAX, SCORE_MIN, SKILL_BREADTH_MIN_THEMES
from strengthlens.engine.lexicon import DEFAULT_LEXICON, DimensionSpec, Lexicon

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def clamp_score(value: float) -> float:
    return max(SCORE_MIN, min(SCORE_MAX, value))


def count_occurrences(text: str, phrases: Iterable[str]) -> int:
    """Total substring hits across all phrases.

    Not word-boundary safe: "excellent" also counts as "excel".
    """
    if not text:
        return 0
    return sum(text.count(p) for p in phrases if p)


def extract_dimension(text: str, dimension: DimensionSpec, theme_count: int = 0) -> float:
    """Score ``text`` on one dimension, clamped to [1.0, 5.0].

    Empty text returns the baseline unchanged.
    """
    if not text:
        return dimension.baseline

    content = text.lower()
    score = dimension.baseline
    hits: dict[str, int] = {}
    for bucket in dimension.buckets:
        count = count_occurrences(content, bucket.phrases)
        hits[bucket.name] = count
        score += count * bucket.weight

    if dimension.co_occurrence and all(hits.get(name, 0) > 0 for name in dimension.co_occurrence):
        score += dimension.co_occurrence_bonus

    if dimension.breadth_bonus and theme_count >= SKILL_BREADTH_MIN_THEMES:
        score += dimension.breadth_bonus

    return clamp_score(score)


def extract_signals(
    text: str,
    dimensions: Iterable[str],
    lexicon: Lexicon = DEFAULT_LEXICON,
    theme_count: int = 0,
) -> dict[str, float]:
    """Score ``text`` on several dimensions at once."""
    return {
        name: extract_dimension(text, lexicon.dimension(name), theme_count=theme_count)
        for name in dimensions
    }


def detect_application_contexts(texts: Iterable[str], lexicon: Lexicon = DEFAULT_LEXICON) -> list[str]:
    """Application contexts mentioned anywhere in ``texts``, in lexicon order."""
    content = " ".join(t.lower() for t in texts if t)
    if not content:
        return []
    return [
        context
        for context, keywords in lexicon.application_contexts.items()
        if any(k in content for k in keywords)
    ]


def normalize_theme(theme: str) -> str:
    """Lower-case, strip punctuation, whitespace to underscores.

    Idempotent: already-normalised tags come back unchanged.
    """
    if not theme:
        return ""
    cleaned = _NON_ALNUM.sub("", theme.lower().replace("_", " ")).strip()
    return _WHITESPACE.sub("_", cleaned).strip("_")
