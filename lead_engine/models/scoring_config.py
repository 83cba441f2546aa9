"""
Scoring Configuration Model
===========================
Typed view over the hand-edited scoring document. The document is
free-form below the top level, so every read goes through a resolver that
takes an explicit default: a partial or missing section never errors.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..observability.logging import get_logger

logger = get_logger(__name__)

_MISSING = object()

_CATEGORY_FIELDS = {
    "ambition": "ambition",
    "intelligence": "intelligence",
    "kindness": "kindness",
    "trackRecord": "track_record",
    "track_record": "track_record",
}


def _coerce(value: Any, default: Any) -> Any:
    """Return value if it fits the default's type, otherwise the default"""
    if value is None:
        return default
    if isinstance(default, bool):
        return value if isinstance(value, bool) else default
    if isinstance(default, (int, float)):
        if isinstance(value, bool):
            return default
        if isinstance(value, (int, float)):
            return value
        try:
            return float(value)
        except (TypeError, ValueError):
            return default
    if isinstance(default, (list, tuple)):
        if isinstance(value, (list, tuple)):
            return [item for item in value if isinstance(item, str)]
        return default
    if isinstance(default, str):
        return value if isinstance(value, str) else default
    return value


class ScoringConfig(BaseModel):
    """Complete scoring configuration (immutable snapshot)"""
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    version: Optional[str] = None
    weights: Dict[str, Any] = Field(default_factory=dict)

    # Maximum points per signal, by category
    ambition: Dict[str, Any] = Field(default_factory=dict)
    intelligence: Dict[str, Any] = Field(default_factory=dict)
    kindness: Dict[str, Any] = Field(default_factory=dict)
    track_record: Dict[str, Any] = Field(default_factory=dict, alias="trackRecord")

    scoring_rules: Dict[str, Any] = Field(default_factory=dict)
    tiers: Dict[str, Any] = Field(default_factory=dict)

    @field_validator(
        "weights",
        "ambition",
        "intelligence",
        "kindness",
        "track_record",
        "scoring_rules",
        "tiers",
        mode="before",
    )
    @classmethod
    def _mapping_or_empty(cls, value: Any, info) -> Dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, dict):
            logger.warning(
                "Ignoring malformed '%s' section (expected a mapping, got %s)",
                info.field_name,
                type(value).__name__,
            )
            return {}
        return {str(key): item for key, item in value.items()}

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_text(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    # =========================================================================
    # Resolvers
    # =========================================================================

    def rule_value(self, path: str, default: Any) -> Any:
        """
        Look up a tunable in scoring_rules by dotted path.

        Args:
            path: e.g. "github_projects.min_repos"
            default: Returned when the path is missing, null or mistyped

        Returns:
            The configured value, or the default
        """
        node: Any = self.scoring_rules
        for part in path.split("."):
            if not isinstance(node, dict):
                return default
            node = node.get(part, _MISSING)
            if node is _MISSING:
                return default
        return _coerce(node, default)

    def points(self, category: str, signal: str, default: float) -> float:
        """Maximum points for a signal within a category"""
        section = self._category(category)
        return _coerce(section.get(signal), default)

    def tier_cutoff(self, tier: str, default: float) -> float:
        return _coerce(self.tiers.get(tier), default)

    def weight(self, category: str, default: float = 0) -> float:
        return _coerce(self.weights.get(category), default)

    def _category(self, category: str) -> Dict[str, Any]:
        field_name = _CATEGORY_FIELDS.get(category)
        if field_name is None:
            return {}
        return getattr(self, field_name)
