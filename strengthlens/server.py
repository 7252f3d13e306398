"""FastAPI server exposing the insight engine.

REST endpoints:
- GET  /api/health               liveness
- GET  /api/insights/categories  the five categories and their descriptions
- POST /api/insights/analyze     self + advisor responses in, report out
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from strengthlens.config.settings import LOG_LEVEL, SERVER_HOST, SERVER_PORT
from strengthlens.engine.insight_engine import InsightEngine
from strengthlens.models.insight import CATEGORY_INFO, CATEGORY_ORDER
from strengthlens.models.responses import (
    AdvisorResponse,
    CareerDomain,
    ConfidenceContext,
    ObservationPeriod,
    SelfResponse,
    estimate_credibility_weight,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="StrengthLens", description="Five-insights career strength analysis")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_engine = InsightEngine()


# ── Request Models ───────────────────────────────────────────────────────

class SelfResponseIn(BaseModel):
    text: str = ""
    domain: CareerDomain = CareerDomain.TECHNICAL
    theme_tags: list[str] = []
    timestamp: Optional[str] = None


class AdvisorResponseIn(BaseModel):
    text: str = ""
    theme_tags: list[str] = []
    observation_period: ObservationPeriod = ObservationPeriod.ONE_TO_SIX_MONTHS
    confidence_context: ConfidenceContext = ConfidenceContext.SOMEWHAT
    # Omitted weight is estimated from the fields below
    credibility_weight: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    confidence_level: Optional[int] = Field(default=None, ge=1, le=5)
    example_count: int = Field(default=0, ge=0)


class AnalyzeRequest(BaseModel):
    self_responses: list[SelfResponseIn] = []
    advisor_responses: list[AdvisorResponseIn] = []


def _to_self_response(item: SelfResponseIn) -> SelfResponse:
    kwargs = {"text": item.text, "domain": item.domain, "theme_tags": item.theme_tags}
    if item.timestamp:
        kwargs["timestamp"] = item.timestamp
    return SelfResponse(**kwargs)


def _to_advisor_response(item: AdvisorResponseIn) -> AdvisorResponse:
    weight = item.credibility_weight
    if weight is None:
        weight = estimate_credibility_weight(
            item.observation_period,
            item.confidence_context,
            confidence_level=item.confidence_level,
            example_count=item.example_count,
            substantive=len(item.text.split()) >= 20,
        )
    return AdvisorResponse(
        text=item.text,
        theme_tags=item.theme_tags,
        credibility_weight=weight,
        observation_period=item.observation_period,
        confidence_context=item.confidence_context,
    )


# ── Endpoints ────────────────────────────────────────────────────────────

@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.get("/api/insights/categories")
async def list_categories():
    return {
        "categories": [
            {
                "id": category.value,
                "label": CATEGORY_INFO[category]["label"],
                "description": CATEGORY_INFO[category]["description"],
                "recommendation": CATEGORY_INFO[category]["recommendation"],
            }
            for category in CATEGORY_ORDER
        ]
    }


@app.post("/api/insights/analyze")
async def analyze(req: AnalyzeRequest):
    self_responses = [_to_self_response(r) for r in req.self_responses]
    advisor_responses = [_to_advisor_response(r) for r in req.advisor_responses]
    logger.info(
        f"Analyze request: {len(self_responses)} self, {len(advisor_responses)} advisor responses"
    )
    report = _engine.generate_report(self_responses, advisor_responses)
    return report.to_dict()


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=LOG_LEVEL)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
