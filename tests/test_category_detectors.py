"""Tests for the five category membership rules (pure predicates)."""

from strengthlens.engine.category_detectors import (
    DetectorThresholds,
    detect,
    detect_aspirational,
    detect_energising_strength,
    detect_hidden_strength,
    detect_misaligned_energy,
    detect_overused_talent,
)
from strengthlens.models.insight import InsightCategory


# ═══════════════════════════════════════════════════════════════════════════
# Energising Strength
# ═══════════════════════════════════════════════════════════════════════════


class TestEnergising:
    def test_member(self, make_theme_profile, make_self_profile, make_advisor_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(avg_energy=4.0, avg_skill=3.5),
            advisor_profile=make_advisor_profile(weighted_recognition=3.5, weighted_competence=3.0),
        )
        result = detect_energising_strength(profile)
        assert result.is_member
        assert result.scores["energy"] == 4.0

    def test_thresholds_are_inclusive(self, make_theme_profile, make_self_profile, make_advisor_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(avg_energy=3.5, avg_skill=3.0),
            advisor_profile=make_advisor_profile(weighted_recognition=3.0, weighted_competence=3.0),
        )
        assert detect_energising_strength(profile).is_member

    def test_low_energy_not_member(self, make_theme_profile, make_self_profile, make_advisor_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(avg_energy=3.4, avg_skill=4.0),
            advisor_profile=make_advisor_profile(weighted_recognition=4.0, weighted_competence=4.0),
        )
        assert not detect_energising_strength(profile).is_member

    def test_requires_advisor_profile(self, make_theme_profile, make_self_profile):
        profile = make_theme_profile(self_profile=make_self_profile(avg_energy=5.0, avg_skill=5.0))
        assert not detect_energising_strength(profile).is_member

    def test_requires_self_profile(self, make_theme_profile, make_advisor_profile):
        profile = make_theme_profile(advisor_profile=make_advisor_profile(weighted_recognition=5.0))
        assert not detect_energising_strength(profile).is_member


# ═══════════════════════════════════════════════════════════════════════════
# Hidden Strength
# ═══════════════════════════════════════════════════════════════════════════


class TestHidden:
    def test_advisor_only_member(self, make_theme_profile, make_advisor_profile):
        profile = make_theme_profile(
            advisor_profile=make_advisor_profile(weighted_recognition=4.0, weighted_competence=3.8),
        )
        assert detect_hidden_strength(profile).is_member

    def test_undervalued_by_self(self, make_theme_profile, make_self_profile, make_advisor_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(avg_skill=3.5, avg_confidence=2.0),
            advisor_profile=make_advisor_profile(weighted_recognition=4.0, weighted_competence=4.0),
        )
        result = detect_hidden_strength(profile)
        assert result.is_member
        assert result.scores["self_confidence"] == 2.0

    def test_self_already_claims_it(self, make_theme_profile, make_self_profile, make_advisor_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(avg_skill=3.0, avg_confidence=3.0),
            advisor_profile=make_advisor_profile(weighted_recognition=4.0, weighted_competence=4.0),
        )
        assert not detect_hidden_strength(profile).is_member

    def test_advisor_competence_too_low(self, make_theme_profile, make_advisor_profile):
        profile = make_theme_profile(
            advisor_profile=make_advisor_profile(weighted_recognition=4.0, weighted_competence=3.0),
        )
        assert not detect_hidden_strength(profile).is_member

    def test_requires_advisor_profile(self, make_theme_profile, make_self_profile):
        profile = make_theme_profile(self_profile=make_self_profile(avg_skill=1.0))
        assert not detect_hidden_strength(profile).is_member


# ═══════════════════════════════════════════════════════════════════════════
# Overused Talent
# ═══════════════════════════════════════════════════════════════════════════


class TestOverused:
    def test_self_only_member(self, make_theme_profile, make_self_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(avg_skill=4.0, drain_level=4.1, usage_frequency=4.1),
        )
        assert detect_overused_talent(profile).is_member

    def test_advisor_without_burnout_concern(self, make_theme_profile, make_self_profile, make_advisor_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(avg_skill=4.0, drain_level=4.1, usage_frequency=4.1),
            advisor_profile=make_advisor_profile(weighted_burnout_concern=1.5),
        )
        result = detect_overused_talent(profile)
        assert not result.is_member
        assert result.scores["advisor_burnout_concern"] == 1.5

    def test_advisor_with_burnout_concern(self, make_theme_profile, make_self_profile, make_advisor_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(avg_skill=4.0, drain_level=4.1, usage_frequency=4.1),
            advisor_profile=make_advisor_profile(weighted_burnout_concern=2.0),
        )
        assert detect_overused_talent(profile).is_member

    def test_low_usage_not_member(self, make_theme_profile, make_self_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(avg_skill=4.0, drain_level=4.1, usage_frequency=3.0),
        )
        assert not detect_overused_talent(profile).is_member

    def test_requires_self_profile(self, make_theme_profile, make_advisor_profile):
        profile = make_theme_profile(advisor_profile=make_advisor_profile(weighted_burnout_concern=5.0))
        assert not detect_overused_talent(profile).is_member


# ═══════════════════════════════════════════════════════════════════════════
# Aspirational
# ═══════════════════════════════════════════════════════════════════════════


class TestAspirational:
    def test_member(self, make_theme_profile, make_self_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(interest_level=4.5, current_level=2.1, potential_belief=3.6),
        )
        assert detect_aspirational(profile).is_member

    def test_current_level_ceiling_inclusive(self, make_theme_profile, make_self_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(interest_level=4.0, current_level=3.0, potential_belief=3.0),
        )
        assert detect_aspirational(profile).is_member

    def test_already_advanced(self, make_theme_profile, make_self_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(interest_level=5.0, current_level=3.3, potential_belief=4.0),
        )
        assert not detect_aspirational(profile).is_member

    def test_advisor_doubts_potential(self, make_theme_profile, make_self_profile, make_advisor_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(interest_level=4.5, current_level=2.0, potential_belief=3.6),
            advisor_profile=make_advisor_profile(weighted_development_potential=2.2),
        )
        assert not detect_aspirational(profile).is_member


# ═══════════════════════════════════════════════════════════════════════════
# Misaligned Energy
# ═══════════════════════════════════════════════════════════════════════════


class TestMisaligned:
    def test_member(self, make_theme_profile, make_self_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(drain_level=4.1, usage_frequency=4.1, competence_despite_drain=3.9),
        )
        result = detect_misaligned_energy(profile)
        assert result.is_member
        assert result.scores["competence"] == 3.9

    def test_not_competent(self, make_theme_profile, make_self_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(drain_level=4.1, usage_frequency=4.1, competence_despite_drain=2.5),
        )
        assert not detect_misaligned_energy(profile).is_member

    def test_advisor_sees_low_competence(self, make_theme_profile, make_self_profile, make_advisor_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(drain_level=4.1, usage_frequency=4.1, competence_despite_drain=3.9),
            advisor_profile=make_advisor_profile(weighted_competence=2.3),
        )
        assert not detect_misaligned_energy(profile).is_member


# ═══════════════════════════════════════════════════════════════════════════
# Dispatch and Thresholds
# ═══════════════════════════════════════════════════════════════════════════


class TestDispatch:
    def test_theme_can_match_several_categories(self, make_theme_profile, make_self_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(
                avg_skill=4.0, drain_level=4.1, usage_frequency=4.1, competence_despite_drain=3.9,
            ),
        )
        matched = [c for c in InsightCategory if detect(c, profile).is_member]
        assert matched == [InsightCategory.OVERUSED, InsightCategory.MISALIGNED]

    def test_custom_thresholds(self, make_theme_profile, make_self_profile, make_advisor_profile):
        profile = make_theme_profile(
            self_profile=make_self_profile(avg_energy=3.0, avg_skill=3.0),
            advisor_profile=make_advisor_profile(),
        )
        assert not detect(InsightCategory.ENERGISING, profile).is_member
        relaxed = DetectorThresholds(energising_min_self_energy=3.0)
        assert detect(InsightCategory.ENERGISING, profile, relaxed).is_member
