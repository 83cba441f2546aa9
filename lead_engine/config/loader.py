"""
Scoring Configuration Loader
============================
Reads the YAML scoring document into a frozen ScoringConfig and holds the
active snapshot for an engine instance.

Only an unreadable or unparsable document is an error. Missing keys are
left for the engine's per-lookup defaults.
"""

import threading
from typing import Optional

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigLoadError
from ..models.scoring_config import ScoringConfig
from ..observability.logging import get_logger
from .settings import SCORING_CONFIG_PATH, SCORE_CATEGORIES

logger = get_logger(__name__)


def load_scoring_config(path: Optional[str] = None) -> ScoringConfig:
    """
    Parse a scoring configuration document.

    Args:
        path: YAML file to read (defaults to LEAD_SCORING_CONFIG / packaged file)

    Returns:
        Parsed ScoringConfig

    Raises:
        ConfigLoadError: File unreadable, invalid YAML, or top level not a mapping
    """
    path = path or SCORING_CONFIG_PATH

    try:
        with open(path, "r", encoding="utf-8") as handle:
            document = yaml.safe_load(handle)
    except OSError as exc:
        raise ConfigLoadError(path, str(exc)) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path, f"invalid YAML: {exc}") from exc

    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ConfigLoadError(
            path, f"expected a mapping at top level, got {type(document).__name__}"
        )

    try:
        config = ScoringConfig.model_validate(document)
    except ValidationError as exc:
        raise ConfigLoadError(path, str(exc)) from exc

    _warn_on_weights(config, path)
    return config


def _warn_on_weights(config: ScoringConfig, path: str) -> None:
    """Weights are meant to sum to 100; flag drift without enforcing it"""
    if not config.weights:
        return
    total = sum(config.weight(category) for category in SCORE_CATEGORIES)
    if abs(total - 100) > 0.01:
        logger.warning("Category weights in %s sum to %s, expected 100", path, total)


class ConfigStore:
    """
    Single cell holding the active configuration snapshot.

    Readers take `current` once per operation. Reload parses the new
    document completely before swapping the reference, so a reader sees
    either the old snapshot or the new one.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or SCORING_CONFIG_PATH
        self._lock = threading.Lock()
        self._config = load_scoring_config(self.path)
        logger.info(
            "Loaded scoring config %s (version %s)", self.path, self._config.version
        )

    @property
    def current(self) -> ScoringConfig:
        return self._config

    def get(self) -> ScoringConfig:
        """Copy of the active configuration, safe for callers to inspect"""
        return self._config.model_copy(deep=True)

    def reload(self, path: Optional[str] = None) -> ScoringConfig:
        """
        Re-read the document and replace the active snapshot.

        Args:
            path: New document path (keeps the current one if omitted)

        Returns:
            The newly active configuration

        Raises:
            ConfigLoadError: The previous snapshot stays active
        """
        with self._lock:
            target = path or self.path
            config = load_scoring_config(target)
            self.path = target
            self._config = config
        logger.info("Reloaded scoring config %s (version %s)", target, config.version)
        return config
