"""
Lead Scoring Engine
===================
Enriches an email-address lead with public profile data and scores it:
  Pass 1: Developer & network signals (GitHub, LinkedIn)
  Pass 2: Founder signals (AI-extracted summary)
  Tiering: Configured cutoffs -> exceptional / strong / good / average / weak
  Reasoning: Human-readable highlights of the signals that fired
"""

__version__ = "1.0.0"
__author__ = "Lead Scoring Team"

from .engine import LeadScorer, score
from .exceptions import ConfigLoadError, LeadEngineError

__all__ = ["LeadScorer", "score", "ConfigLoadError", "LeadEngineError"]
