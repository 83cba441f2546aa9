"""
Pytest configuration and shared fixtures.
"""

import logging

import pytest
import yaml

from lead_engine.config.loader import load_scoring_config
from lead_engine.models.schemas import (
    FounderSignals,
    GitHubProfile,
    HunterProfile,
    LinkedInProfile,
    ProfileBundle,
)
from lead_engine.models.scoring_config import ScoringConfig


@pytest.fixture
def default_config() -> ScoringConfig:
    """The packaged scoring.yaml."""
    return load_scoring_config()


@pytest.fixture
def bare_config() -> ScoringConfig:
    """A config with nothing in it: every lookup hits its built-in default."""
    return ScoringConfig()


@pytest.fixture
def write_config(tmp_path):
    """Write a scoring document to a temp file and return its path."""

    def _write(document, name="scoring.yaml") -> str:
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(document), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def capture_logs(caplog):
    """Attach caplog to named lead_engine loggers, which do not propagate to root."""
    attached = []

    def _attach(name):
        logger = logging.getLogger(name)
        logger.addHandler(caplog.handler)
        attached.append(logger)
        return caplog

    yield _attach
    for logger in attached:
        logger.removeHandler(caplog.handler)


@pytest.fixture
def saturated_github() -> GitHubProfile:
    """GitHub profile from the adapter, camelCase keys as produced upstream."""
    return GitHubProfile.model_validate({
        "username": "octo",
        "publicRepos": 12,
        "totalStars": 600,
        "topLanguages": ["TS", "Go", "Rust"],
        "contributions": {"total": 3000, "lastYear": 1200},
        "openSourceContributions": 150,
    })


@pytest.fixture
def founder_profile() -> FounderSignals:
    return FounderSignals.model_validate({
        "companiesFounded": [
            {"name": "Acme", "role": "CEO", "yearFounded": 2015},
            {"name": "Beta Labs", "role": "Co-founder", "yearFounded": 2019},
        ],
        "exits": [{"company": "Acme", "type": "acquisition", "year": 2018}],
    })


@pytest.fixture
def linkedin_profile() -> LinkedInProfile:
    return LinkedInProfile.model_validate({
        "fullName": "Ada Example",
        "experiences": [
            {"title": "Co-Founder & CTO", "company": "Beta Labs", "startDate": "2019-03"},
            {"title": "Senior Engineer", "company": "Acme", "startDate": "2017-01"},
            {"title": "Engineer", "company": "Acme", "startDate": "2015-06"},
        ],
        "education": [
            {"school": "Stanford University", "degree": "Master of Science", "field": "CS"},
        ],
        "volunteering": [{"organization": "Code Club", "role": "Mentor"}],
        "certifications": [{"name": "AWS Solutions Architect", "authority": "AWS"}],
    })


@pytest.fixture
def hunter_profile() -> HunterProfile:
    return HunterProfile(
        email="ada@example.com",
        first_name="Ada",
        last_name="Example",
        company="Beta Labs",
        position="CTO",
        linkedin_url="https://linkedin.com/in/ada-example",
        verified=True,
        confidence=92,
    )


@pytest.fixture
def empty_bundle() -> ProfileBundle:
    return ProfileBundle()
