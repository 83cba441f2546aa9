"""
Pydantic schemas for the Lead Scoring Engine
"""

from enum import Enum
from types import MappingProxyType
from typing import List, Dict, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime


class ProfileModel(BaseModel):
    """Base for adapter-produced data: accepts snake_case or camelCase keys"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# =============================================================================
# ENUMS
# =============================================================================

class Tier(str, Enum):
    """Discrete score tier"""
    EXCEPTIONAL = "exceptional"
    STRONG = "strong"
    GOOD = "good"
    AVERAGE = "average"
    WEAK = "weak"


# =============================================================================
# LEAD
# =============================================================================

class Lead(ProfileModel):
    """A prospect to enrich, identified by email"""
    email: str
    name: Optional[str] = None
    source: Optional[str] = None  # Where they signed up from
    signup_date: Optional[datetime] = None


# =============================================================================
# GITHUB
# =============================================================================

class GitHubProject(ProfileModel):
    name: str
    description: Optional[str] = None
    stars: int = 0
    forks: int = 0
    language: Optional[str] = None
    topics: List[str] = Field(default_factory=list)


class Contributions(ProfileModel):
    total: int = 0
    last_year: int = 0


class GitHubProfile(ProfileModel):
    """GitHub account plus aggregates computed by the GitHub adapter"""
    username: str
    name: Optional[str] = None
    bio: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    followers: int = 0
    following: int = 0
    public_repos: int = 0
    public_gists: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    top_languages: List[str] = Field(default_factory=list)
    total_stars: int = 0
    total_forks: int = 0
    contributions: Contributions = Field(default_factory=Contributions)
    projects: List[GitHubProject] = Field(default_factory=list)
    open_source_contributions: int = 0  # Contributions to repos the user doesn't own


# =============================================================================
# LINKEDIN
# =============================================================================

class LinkedInExperience(ProfileModel):
    title: str
    company: str
    start_date: str = ""
    end_date: Optional[str] = None
    description: Optional[str] = None
    is_founder: Optional[bool] = None
    is_leadership: Optional[bool] = None


class LinkedInEducation(ProfileModel):
    school: str
    degree: Optional[str] = None
    field: Optional[str] = None
    start_year: Optional[int] = None
    end_year: Optional[int] = None


class LinkedInVolunteering(ProfileModel):
    organization: str
    role: Optional[str] = None
    description: Optional[str] = None


class LinkedInCertification(ProfileModel):
    name: str
    authority: Optional[str] = None
    date: Optional[str] = None


class LinkedInProfile(ProfileModel):
    """Profile as returned by the LinkedIn crawler"""
    full_name: Optional[str] = None
    headline: Optional[str] = None
    summary: Optional[str] = None
    location: Optional[str] = None
    profile_url: Optional[str] = None
    experiences: List[LinkedInExperience] = Field(default_factory=list)
    education: List[LinkedInEducation] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    volunteering: List[LinkedInVolunteering] = Field(default_factory=list)
    certifications: List[LinkedInCertification] = Field(default_factory=list)


# =============================================================================
# HUNTER.IO
# =============================================================================

class HunterProfile(ProfileModel):
    """Verified contact metadata; gates founder enrichment, not scored"""
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position: Optional[str] = None
    company: Optional[str] = None
    linkedin_url: Optional[str] = None
    twitter_url: Optional[str] = None
    verified: bool = False
    confidence: int = 0  # 0-100

    @property
    def full_name(self) -> Optional[str]:
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return None


# =============================================================================
# FOUNDER SIGNALS (AI-extracted)
# =============================================================================

class FoundedCompany(ProfileModel):
    name: str
    role: Optional[str] = None
    year_founded: Optional[int] = None
    description: Optional[str] = None


class LeadershipRole(ProfileModel):
    title: str
    company: Optional[str] = None
    years_in_role: Optional[float] = None


class ThoughtLeadership(ProfileModel):
    speaking: bool = False
    writing: bool = False
    podcasting: bool = False
    examples: List[str] = Field(default_factory=list)


class TopEducation(ProfileModel):
    school: str
    degree: Optional[str] = None
    field: Optional[str] = None
    is_top_tier: bool = False


class VolunteerWork(ProfileModel):
    organization: str
    role: Optional[str] = None
    description: Optional[str] = None


class Mentorship(ProfileModel):
    is_mentor: bool = False
    examples: List[str] = Field(default_factory=list)


class FundingRound(ProfileModel):
    company: Optional[str] = None
    amount: Optional[str] = None
    round: Optional[str] = None  # e.g. "Seed", "Series A"
    year: Optional[int] = None


class Exit(ProfileModel):
    company: str
    type: Optional[str] = None  # acquisition, IPO, ...
    year: Optional[int] = None


class PressMention(ProfileModel):
    title: str
    source: Optional[str] = None
    snippet: Optional[str] = None


class FounderSignals(ProfileModel):
    """Structured founder summary extracted from LinkedIn + web search"""
    # Ambition
    companies_founded: List[FoundedCompany] = Field(default_factory=list)
    leadership_roles: List[LeadershipRole] = Field(default_factory=list)
    thought_leadership: ThoughtLeadership = Field(default_factory=ThoughtLeadership)

    # Intelligence
    top_education: List[TopEducation] = Field(default_factory=list)
    strategic_accomplishments: List[str] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)

    # Kindness
    volunteer_work: List[VolunteerWork] = Field(default_factory=list)
    mentorship: Mentorship = Field(default_factory=Mentorship)
    community_building: List[str] = Field(default_factory=list)

    # Track Record
    funding_raised: List[FundingRound] = Field(default_factory=list)
    exits: List[Exit] = Field(default_factory=list)
    press_mentions: List[PressMention] = Field(default_factory=list)
    awards: List[str] = Field(default_factory=list)

    # Extraction quality
    confidence: int = 0  # 0-100
    data_sources: List[str] = Field(default_factory=list)


# =============================================================================
# SCORING INPUT / OUTPUT
# =============================================================================

class ProfileBundle(ProfileModel):
    """Everything the adapters found for one lead; any part may be missing"""
    github: Optional[GitHubProfile] = None
    linkedin: Optional[LinkedInProfile] = None
    hunter: Optional[HunterProfile] = None
    founder: Optional[FounderSignals] = None

    def has_data(self) -> bool:
        return any(
            part is not None
            for part in (self.github, self.linkedin, self.hunter, self.founder)
        )


class ScoreBreakdown(ProfileModel):
    """Points per category"""
    model_config = ConfigDict(frozen=True)

    ambition: float = 0
    intelligence: float = 0
    kindness: float = 0
    track_record: float = 0

    def total(self) -> float:
        return self.ambition + self.intelligence + self.kindness + self.track_record


class ScoreResult(ProfileModel):
    """Output of the scoring engine"""
    model_config = ConfigDict(frozen=True)

    total: float
    breakdown: ScoreBreakdown
    signals: Mapping[str, float] = Field(default_factory=dict, validate_default=True)
    tier: Tier
    reasoning: str

    @field_validator("signals")
    @classmethod
    def _read_only_signals(cls, value: Mapping[str, float]) -> Mapping[str, float]:
        return MappingProxyType(dict(value))

    @field_serializer("signals")
    def _signals_as_dict(self, signals: Mapping[str, float]) -> Dict[str, float]:
        return dict(signals)


def empty_score() -> ScoreResult:
    """Placeholder score for a lead that hasn't been scored"""
    return ScoreResult(
        total=0,
        breakdown=ScoreBreakdown(),
        signals={},
        tier=Tier.WEAK,
        reasoning="No data available for scoring",
    )


# =============================================================================
# ENRICHMENT RESULTS
# =============================================================================

class EnrichedLead(Lead):
    """Lead plus everything attached to it during enrichment"""
    enrichment: ProfileBundle = Field(default_factory=ProfileBundle)
    score: ScoreResult = Field(default_factory=empty_score)
    enriched_at: datetime = Field(default_factory=datetime.utcnow)
    cost_usd: float = 0


class EnrichmentResult(ProfileModel):
    """Result of enriching a single lead"""
    success: bool
    lead: Optional[EnrichedLead] = None
    error: Optional[str] = None
    cost_usd: float = 0


class BatchEnrichmentResult(ProfileModel):
    """Result of enriching multiple leads"""
    processed: int
    successful: int
    failed: int
    total_cost_usd: float
    avg_cost_usd: float
    processing_time_ms: float
    results: List[EnrichmentResult]
