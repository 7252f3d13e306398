"""Shared test fixtures for the StrengthLens test suite."""

import pytest

from strengthlens.engine.theme_aggregator import (
    AdvisorSignalProfile,
    SelfSignalProfile,
    ThemeSignalProfile,
)
from strengthlens.models.insight import InsightCategory, InsightRecord
from strengthlens.models.responses import (
    AdvisorResponse,
    CareerDomain,
    ConfidenceContext,
    ObservationPeriod,
    SelfResponse,
)


# ── Canonical Texts ─────────────────────────────────────────────────────

# "love", "excellent", "confident" three times each
ENERGISING_SELF_TEXT = (
    "I love running workshops and I love it when a room opens up. I love it. "
    "I am excellent at it, excellent with groups and excellent on the day. "
    "Confident, confident, confident."
)
ENERGISING_ADVISOR_TEXT = "They always run excellent workshops for the team."

HIDDEN_ADVISOR_TEXT = "They are an expert facilitator and are always asked to run the retro."

# Skilled and used daily, but draining
DRAINING_SELF_TEXT = (
    "I'm an expert at reporting and do it daily, always, but it is exhausting "
    "and stressful. I'm skilled at it."
)

ASPIRATION_SELF_TEXT = (
    "I'm a beginner in data science but I love it and I am fascinated by it. "
    "I could get there."
)


# ── Response Factories ──────────────────────────────────────────────────

@pytest.fixture
def make_self_response():
    """Factory fixture that creates SelfResponse instances with sensible defaults.

    Usage:
        response = make_self_response(text="I love design", theme_tags=["design"])
    """
    _counter = 0

    def _factory(**overrides):
        nonlocal _counter
        _counter += 1
        defaults = {
            "text": f"Self reflection {_counter}",
            "domain": CareerDomain.TECHNICAL,
            "theme_tags": ["general"],
            "timestamp": f"2026-02-15T12:00:{_counter % 60:02d}+00:00",
        }
        defaults.update(overrides)
        return SelfResponse(**defaults)

    return _factory


@pytest.fixture
def make_advisor_response():
    """Factory fixture that creates AdvisorResponse instances with sensible defaults."""
    def _factory(**overrides):
        defaults = {
            "text": "",
            "theme_tags": ["general"],
            "credibility_weight": 1.0,
            "observation_period": ObservationPeriod.ONE_TO_THREE_YEARS,
            "confidence_context": ConfidenceContext.CONFIDENT,
        }
        defaults.update(overrides)
        return AdvisorResponse(**defaults)

    return _factory


# ── Profile Factories ───────────────────────────────────────────────────

@pytest.fixture
def make_self_profile():
    """Neutral self profile; override individual averages per test."""
    def _factory(**overrides):
        defaults = {
            "avg_energy": 2.5,
            "avg_skill": 2.5,
            "avg_confidence": 3.0,
            "drain_level": 2.5,
            "usage_frequency": 2.5,
            "interest_level": 2.5,
            "current_level": 2.5,
            "potential_belief": 3.0,
            "competence_despite_drain": 2.5,
            "frequency": 1,
            "evidence": ("some self text",),
            "domains": ("technical",),
        }
        defaults.update(overrides)
        return SelfSignalProfile(**defaults)

    return _factory


@pytest.fixture
def make_advisor_profile():
    """Neutral advisor profile; override individual weighted values per test."""
    def _factory(**overrides):
        defaults = {
            "weighted_recognition": 3.0,
            "weighted_competence": 3.0,
            "weighted_burnout_concern": 2.5,
            "weighted_development_potential": 3.0,
            "frequency": 1,
            "total_credibility": 1.0,
            "evidence": ("some advisor text",),
            "observation_contexts": ("1-3 years",),
        }
        defaults.update(overrides)
        return AdvisorSignalProfile(**defaults)

    return _factory


@pytest.fixture
def make_theme_profile():
    def _factory(theme="facilitation", self_profile=None, advisor_profile=None):
        return ThemeSignalProfile(theme=theme, self_profile=self_profile, advisor_profile=advisor_profile)

    return _factory


@pytest.fixture
def make_record():
    """Factory fixture for InsightRecord with a given composite score."""
    _counter = 0

    def _factory(**overrides):
        nonlocal _counter
        _counter += 1
        category = overrides.get("category", InsightCategory.ENERGISING)
        theme = overrides.get("theme_name", f"theme_{_counter}")
        defaults = {
            "id": f"{category.value}:{theme}",
            "category": category,
            "theme_name": theme,
            "title": theme.replace("_", " ").title(),
            "description": "test insight",
            "scores": {},
            "advice": f"Advice for {theme}",
            "confidence": 0.5,
            "composite_score": 1.0,
        }
        defaults.update(overrides)
        return InsightRecord(**defaults)

    return _factory
