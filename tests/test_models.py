"""Tests for response and insight data models."""

import dataclasses

import pytest

from strengthlens.models.insight import CATEGORY_INFO, InsightCategory
from strengthlens.models.responses import (
    AdvisorResponse,
    CareerDomain,
    ConfidenceContext,
    ObservationPeriod,
    SelfResponse,
    estimate_credibility_weight,
)


# ═══════════════════════════════════════════════════════════════════════════
# Self Responses
# ═══════════════════════════════════════════════════════════════════════════


class TestSelfResponse:
    def test_defaults(self):
        response = SelfResponse(text="I love design")
        assert response.domain is CareerDomain.TECHNICAL
        assert response.theme_tags == frozenset()
        assert response.timestamp

    def test_tags_become_frozenset(self):
        response = SelfResponse(text="x", theme_tags=["design", "design", "writing"])
        assert response.theme_tags == frozenset({"design", "writing"})

    def test_single_string_tag(self):
        assert SelfResponse(text="x", theme_tags="design").theme_tags == frozenset({"design"})

    def test_domain_from_string(self):
        assert SelfResponse(text="x", domain="creative").domain is CareerDomain.CREATIVE

    def test_invalid_domain(self):
        with pytest.raises(ValueError):
            SelfResponse(text="x", domain="astrology")

    def test_frozen(self):
        response = SelfResponse(text="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            response.text = "y"

    def test_dict_round_trip(self, make_self_response):
        original = make_self_response(text="I love design", theme_tags=["writing", "design"])
        data = original.to_dict()
        assert data["theme_tags"] == ["design", "writing"]
        assert data["domain"] == "technical"
        assert SelfResponse.from_dict(data) == original

    def test_from_dict_ignores_unknown_keys(self):
        response = SelfResponse.from_dict({"text": "hi", "extra": 1})
        assert response.text == "hi"
        assert response.theme_tags == frozenset()


# ═══════════════════════════════════════════════════════════════════════════
# Advisor Responses
# ═══════════════════════════════════════════════════════════════════════════


class TestAdvisorResponse:
    def test_defaults(self):
        response = AdvisorResponse(text="always reliable")
        assert response.credibility_weight == 0.5
        assert response.observation_period is ObservationPeriod.ONE_TO_SIX_MONTHS
        assert response.confidence_context is ConfidenceContext.SOMEWHAT

    def test_enums_from_strings(self):
        response = AdvisorResponse(text="x", observation_period=">3yr", confidence_context="very_confident")
        assert response.observation_period is ObservationPeriod.MORE_THAN_THREE_YEARS
        assert response.confidence_context is ConfidenceContext.VERY_CONFIDENT
        assert response.observation_description == "More than 3 years"

    def test_dict_round_trip(self, make_advisor_response):
        original = make_advisor_response(text="expert", theme_tags=["b", "a"], credibility_weight=0.7)
        data = original.to_dict()
        assert data["theme_tags"] == ["a", "b"]
        assert data["observation_period"] == "1-3yr"
        assert AdvisorResponse.from_dict(data) == original


# ═══════════════════════════════════════════════════════════════════════════
# Credibility Estimation
# ═══════════════════════════════════════════════════════════════════════════


class TestCredibilityWeight:
    def test_short_uncertain_observation(self):
        weight = estimate_credibility_weight(ObservationPeriod.LESS_THAN_MONTH, ConfidenceContext.UNCERTAIN)
        assert weight == pytest.approx(0.6)

    def test_default_context(self):
        weight = estimate_credibility_weight(ObservationPeriod.ONE_TO_SIX_MONTHS, ConfidenceContext.SOMEWHAT)
        assert weight == pytest.approx(0.8)

    def test_clamped_to_one(self):
        weight = estimate_credibility_weight(
            ObservationPeriod.MORE_THAN_THREE_YEARS,
            ConfidenceContext.VERY_CONFIDENT,
            confidence_level=5,
            example_count=3,
            substantive=True,
        )
        assert weight == 1.0

    def test_examples_raise_weight(self):
        base = estimate_credibility_weight(ObservationPeriod.LESS_THAN_MONTH, ConfidenceContext.UNCERTAIN)
        one = estimate_credibility_weight(
            ObservationPeriod.LESS_THAN_MONTH, ConfidenceContext.UNCERTAIN, example_count=1,
        )
        three = estimate_credibility_weight(
            ObservationPeriod.LESS_THAN_MONTH, ConfidenceContext.UNCERTAIN, example_count=3,
        )
        assert base < one < three


# ═══════════════════════════════════════════════════════════════════════════
# Insight Categories
# ═══════════════════════════════════════════════════════════════════════════


class TestInsightCategory:
    def test_values(self):
        assert [c.value for c in InsightCategory] == [
            "energising_strength",
            "hidden_strength",
            "overused_talent",
            "aspirational",
            "misaligned_energy",
        ]

    def test_display_name(self):
        assert InsightCategory.HIDDEN.display_name == "Hidden Strength"

    def test_every_category_described(self):
        for category in InsightCategory:
            info = CATEGORY_INFO[category]
            assert info["label"] and info["description"] and info["recommendation"]
