"""
Data-source adapter interfaces.

The orchestrator only depends on these shapes; HTTP clients, crawlers and
the AI extraction call live outside this package. Each adapter returns
None when it finds nothing and may raise on failure.
"""

from typing import Optional, Protocol

from .models.schemas import FounderSignals, GitHubProfile, HunterProfile, LinkedInProfile


class GitHubSource(Protocol):
    def enrich_by_email(self, email: str) -> Optional[GitHubProfile]:
        ...


class HunterSource(Protocol):
    def verify_email(self, email: str) -> Optional[HunterProfile]:
        ...


class LinkedInSource(Protocol):
    def crawl_profile(self, profile_url: str) -> Optional[LinkedInProfile]:
        ...


class FounderSource(Protocol):
    def extract_founder_signals(
        self, linkedin: Optional[LinkedInProfile], person_name: str
    ) -> Optional[FounderSignals]:
        ...
