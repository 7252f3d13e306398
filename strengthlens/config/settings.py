"""Application-wide configuration loaded from environment variables.

Values are read once at import time. The engine treats them as constants for
the lifetime of the process.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# ── Signal Extraction ────────────────────────────────────────────────────

SCORE_MIN: float = 1.0
SCORE_MAX: float = 5.0

# Responses tagged with at least this many themes get the skill breadth bonus
SKILL_BREADTH_MIN_THEMES: int = int(os.getenv("SKILL_BREADTH_MIN_THEMES", "3"))

# ── Category Thresholds ──────────────────────────────────────────────────
# Empirical tuning, not a validated model. Override per deployment.

ENERGISING_MIN_SELF_ENERGY: float = float(os.getenv("ENERGISING_MIN_SELF_ENERGY", "3.5"))
ENERGISING_MIN_SELF_SKILL: float = float(os.getenv("ENERGISING_MIN_SELF_SKILL", "3.0"))
ENERGISING_MIN_ADVISOR_RECOGNITION: float = float(os.getenv("ENERGISING_MIN_ADVISOR_RECOGNITION", "3.0"))
ENERGISING_MIN_ADVISOR_COMPETENCE: float = float(os.getenv("ENERGISING_MIN_ADVISOR_COMPETENCE", "3.0"))

HIDDEN_MIN_ADVISOR_RECOGNITION: float = float(os.getenv("HIDDEN_MIN_ADVISOR_RECOGNITION", "3.5"))
HIDDEN_MIN_ADVISOR_COMPETENCE: float = float(os.getenv("HIDDEN_MIN_ADVISOR_COMPETENCE", "3.5"))
HIDDEN_SELF_SKILL_CEILING: float = float(os.getenv("HIDDEN_SELF_SKILL_CEILING", "3.0"))
HIDDEN_SELF_CONFIDENCE_CEILING: float = float(os.getenv("HIDDEN_SELF_CONFIDENCE_CEILING", "3.0"))

OVERUSED_MIN_SELF_SKILL: float = float(os.getenv("OVERUSED_MIN_SELF_SKILL", "3.5"))
OVERUSED_MIN_DRAIN: float = float(os.getenv("OVERUSED_MIN_DRAIN", "3.0"))
OVERUSED_MIN_USAGE_FREQUENCY: float = float(os.getenv("OVERUSED_MIN_USAGE_FREQUENCY", "3.5"))
OVERUSED_MIN_ADVISOR_BURNOUT: float = float(os.getenv("OVERUSED_MIN_ADVISOR_BURNOUT", "2.0"))

ASPIRATIONAL_MIN_INTEREST: float = float(os.getenv("ASPIRATIONAL_MIN_INTEREST", "4.0"))
ASPIRATIONAL_MAX_CURRENT_LEVEL: float = float(os.getenv("ASPIRATIONAL_MAX_CURRENT_LEVEL", "3.0"))
ASPIRATIONAL_MIN_POTENTIAL: float = float(os.getenv("ASPIRATIONAL_MIN_POTENTIAL", "3.0"))
ASPIRATIONAL_MIN_ADVISOR_POTENTIAL: float = float(os.getenv("ASPIRATIONAL_MIN_ADVISOR_POTENTIAL", "2.5"))

MISALIGNED_MIN_DRAIN: float = float(os.getenv("MISALIGNED_MIN_DRAIN", "3.5"))
MISALIGNED_MIN_FREQUENCY: float = float(os.getenv("MISALIGNED_MIN_FREQUENCY", "3.0"))
MISALIGNED_MIN_COMPETENCE: float = float(os.getenv("MISALIGNED_MIN_COMPETENCE", "3.0"))
MISALIGNED_MIN_ADVISOR_COMPETENCE: float = float(os.getenv("MISALIGNED_MIN_ADVISOR_COMPETENCE", "3.0"))

# ── Ranking ──────────────────────────────────────────────────────────────

ENERGISING_CAP: int = int(os.getenv("ENERGISING_CAP", "5"))
HIDDEN_CAP: int = int(os.getenv("HIDDEN_CAP", "4"))
OVERUSED_CAP: int = int(os.getenv("OVERUSED_CAP", "3"))
ASPIRATIONAL_CAP: int = int(os.getenv("ASPIRATIONAL_CAP", "4"))
MISALIGNED_CAP: int = int(os.getenv("MISALIGNED_CAP", "3"))

# ── Insight Records ──────────────────────────────────────────────────────

EVIDENCE_LIMIT: int = int(os.getenv("EVIDENCE_LIMIT", "3"))

# Confidence blend: self-report vs advisor corroboration
CONFIDENCE_SELF_WEIGHT: float = float(os.getenv("CONFIDENCE_SELF_WEIGHT", "0.4"))
CONFIDENCE_ADVISOR_WEIGHT: float = float(os.getenv("CONFIDENCE_ADVISOR_WEIGHT", "0.6"))
# Evidence count / total credibility at which each side saturates
CONFIDENCE_EVIDENCE_SATURATION: int = int(os.getenv("CONFIDENCE_EVIDENCE_SATURATION", "3"))
CONFIDENCE_CREDIBILITY_SATURATION: float = float(os.getenv("CONFIDENCE_CREDIBILITY_SATURATION", "2.0"))

# ── Report ───────────────────────────────────────────────────────────────

MAX_PRIORITY_ACTIONS: int = int(os.getenv("MAX_PRIORITY_ACTIONS", "8"))
WELL_BALANCED_MIN_SCORE: float = float(os.getenv("WELL_BALANCED_MIN_SCORE", "0.6"))

# ── Server Configuration ─────────────────────────────────────────────────

SERVER_HOST: str = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT: int = int(os.getenv("SERVER_PORT", "8000"))
