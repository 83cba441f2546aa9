"""
Lead Scoring Engine
===================
Maps a ProfileBundle onto a 0-100 score:
  Pass 1: Developer Signals -> Pass 2: Founder Signals (if present) ->
  Tier Classification -> Reasoning

`score()` is pure: same bundle and config, same result. `LeadScorer` holds
the active configuration and reads it once per call, so a concurrent
reload is seen either entirely or not at all.
"""

from typing import Optional

from .config.loader import ConfigStore
from .config.settings import TIER_ORDER
from .models.schemas import ProfileBundle, ScoreBreakdown, ScoreResult, Tier
from .models.scoring_config import ScoringConfig
from .observability.logging import get_logger
from .stages.developer_signals import DeveloperSignalStage
from .stages.founder_signals import FounderSignalStage
from .stages.normalization import SignalSheet
from .stages.reasoning import generate_reasoning

logger = get_logger(__name__)

DEFAULT_TIER_CUTOFFS = {
    "exceptional": 70,
    "strong": 50,
    "good": 30,
    "average": 15,
}


def classify_tier(total: float, config: ScoringConfig) -> Tier:
    """First cutoff (highest first) the total meets or exceeds; else weak"""
    for name in TIER_ORDER:
        if total >= config.tier_cutoff(name, DEFAULT_TIER_CUTOFFS[name]):
            return Tier(name)
    return Tier.WEAK


def score(bundle: ProfileBundle, config: ScoringConfig) -> ScoreResult:
    """
    Score one lead.

    Args:
        bundle: Enrichment data; any sub-profile may be missing
        config: Scoring configuration snapshot

    Returns:
        ScoreResult with total, breakdown, fired signals, tier and reasoning
    """
    sheet = SignalSheet()

    DeveloperSignalStage(config).process(bundle, sheet)
    if bundle.founder is not None:
        FounderSignalStage(config).process(bundle.founder, sheet)

    breakdown = ScoreBreakdown(**sheet.categories)
    total = round(breakdown.total(), 1)
    tier = classify_tier(total, config)
    reasoning = generate_reasoning(bundle, sheet.signals, tier, config)

    return ScoreResult(
        total=total,
        breakdown=breakdown,
        signals=dict(sheet.signals),
        tier=tier,
        reasoning=reasoning,
    )


class LeadScorer:
    """
    Scoring engine bound to a configuration document.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Load the scoring configuration.

        Args:
            config_path: YAML document (defaults to LEAD_SCORING_CONFIG / packaged file)

        Raises:
            ConfigLoadError: Document missing or unparsable
        """
        self._store = ConfigStore(config_path)

    def score(self, bundle: ProfileBundle) -> ScoreResult:
        """Score a bundle against the currently active configuration"""
        result = score(bundle, self._store.current)
        logger.debug("Scored %.1f (%s): %s", result.total, result.tier.value, result.reasoning)
        return result

    def reload_config(self, config_path: Optional[str] = None) -> ScoringConfig:
        """
        Re-read the configuration (useful while tuning weights).

        Raises:
            ConfigLoadError: The previous configuration stays active
        """
        return self._store.reload(config_path)

    def get_config(self) -> ScoringConfig:
        """Snapshot of the active configuration"""
        return self._store.get()

    @property
    def config_path(self) -> str:
        return self._store.path
