"""
Exceptions raised by the Lead Scoring Engine.
"""


class LeadEngineError(Exception):
    """Base exception for all lead engine errors."""

    pass


class ConfigLoadError(LeadEngineError):
    """Raised when a scoring configuration document cannot be read or parsed.

    Fatal to engine construction and to reload; the previously active
    configuration (if any) stays in place.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load scoring config from {path}: {reason}")
