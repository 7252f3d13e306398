"""Insight Engine: responses in, five ranked insight categories out.

Pipeline per analysis:
  1. Aggregate     group responses by theme, average each side's signals
  2. Detect        run every category rule over every theme profile
  3. Build         turn each (theme, category) match into an InsightRecord
  4. Rank          sort each category by its composite metric, apply the cap

The engine holds configuration only. Every call is a pure function of its
input, so concurrent callers can share one instance.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from strengthlens.engine.category_detectors import DEFAULT_THRESHOLDS, DetectorThresholds, detect
from strengthlens.engine.category_ranker import CATEGORY_CAPS, rank
from strengthlens.engine.insight_builder import build_insight
from strengthlens.engine.lexicon import DEFAULT_LEXICON, Lexicon
from strengthlens.engine.theme_aggregator import ThemeSignalProfile, build_profiles
from strengthlens.models.insight import CATEGORY_ORDER, InsightCategory, InsightRecord, InsightReport
from strengthlens.models.responses import AdvisorResponse, SelfResponse

logger = logging.getLogger(__name__)


class InsightEngine:
    """Classifies career-strength themes into the five insight categories."""

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        thresholds: DetectorThresholds = DEFAULT_THRESHOLDS,
        caps: Optional[Mapping[InsightCategory, int]] = None,
    ):
        self.lexicon = lexicon
        self.thresholds = thresholds
        self.caps = dict(CATEGORY_CAPS)
        if caps:
            self.caps.update(caps)

    def profile(
        self,
        self_responses: Sequence[SelfResponse],
        advisor_responses: Sequence[AdvisorResponse],
    ) -> dict[str, ThemeSignalProfile]:
        return build_profiles(self_responses, advisor_responses, self.lexicon)

    def analyze(
        self,
        self_responses: Sequence[SelfResponse],
        advisor_responses: Sequence[AdvisorResponse],
    ) -> dict[InsightCategory, list[InsightRecord]]:
        """Run the full pipeline. Every category key is present, possibly empty."""
        profiles = self.profile(self_responses, advisor_responses)

        candidates: dict[InsightCategory, list[InsightRecord]] = {c: [] for c in CATEGORY_ORDER}
        for profile in profiles.values():
            for category in CATEGORY_ORDER:
                if not detect(category, profile, self.thresholds).is_member:
                    continue
                record = build_insight(profile, category, self.lexicon)
                if record is not None:
                    candidates[category].append(record)

        results = {c: rank(candidates[c], self.caps[c]) for c in CATEGORY_ORDER}

        summary = ", ".join(
            f"{c.value}={len(results[c])}/{len(candidates[c])}" for c in CATEGORY_ORDER
        )
        logger.info(f"Analyzed {len(profiles)} themes: {summary}")
        return results

    def generate_report(
        self,
        self_responses: Sequence[SelfResponse],
        advisor_responses: Sequence[AdvisorResponse],
    ) -> InsightReport:
        return InsightReport(insights=self.analyze(self_responses, advisor_responses))


def analyze_responses(
    self_responses: Sequence[SelfResponse],
    advisor_responses: Sequence[AdvisorResponse],
) -> dict[InsightCategory, list[InsightRecord]]:
    """Analyze with default lexicon, thresholds and caps."""
    return InsightEngine().analyze(self_responses, advisor_responses)
