"""
Configuration settings for the Lead Scoring Engine
"""

from pathlib import Path
import os

# =============================================================================
# SCORING CONFIGURATION DOCUMENT
# =============================================================================

DEFAULT_SCORING_CONFIG_PATH = str(Path(__file__).parent / "scoring.yaml")

SCORING_CONFIG_PATH = os.getenv("LEAD_SCORING_CONFIG", DEFAULT_SCORING_CONFIG_PATH)

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.getenv("LEAD_ENGINE_LOG_LEVEL", "INFO")

# =============================================================================
# ORCHESTRATION
# =============================================================================

MAX_CONCURRENT_LEADS = int(os.getenv("LEAD_ENGINE_MAX_CONCURRENT", "3"))

# Approximate spend per Hunter.io lookup that returned data (USD)
HUNTER_LOOKUP_COST_USD = float(os.getenv("LEAD_ENGINE_HUNTER_COST_USD", "0.01"))

# =============================================================================
# TIERS
# =============================================================================

# Highest first; a score below every cutoff falls into "weak"
TIER_ORDER = ["exceptional", "strong", "good", "average"]

SCORE_CATEGORIES = ["ambition", "intelligence", "kindness", "trackRecord"]
