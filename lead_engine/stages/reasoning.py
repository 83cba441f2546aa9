"""
Reasoning Generator
===================
Turns the fired signals into one human-readable sentence.

Two orderings, chosen by whether a founder profile exists:
- founder_highlights: AI-summary flow (companies, roles, education, funding, ...)
- profile_highlights: raw-profile flow (GitHub and LinkedIn only)
"""

from typing import Dict, List

from ..models.schemas import ProfileBundle, Tier
from ..models.scoring_config import ScoringConfig
from .developer_signals import TOP_SCHOOLS, first_top_school


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count > 1 else ''}"


def _github_highlights(bundle: ProfileBundle, signals: Dict[str, float]) -> List[str]:
    github = bundle.github
    if github is None:
        return []
    reasons = []
    if signals.get("github_projects"):
        reasons.append(f"{github.public_repos} GitHub projects")
    if signals.get("github_stars"):
        reasons.append(f"{github.total_stars} GitHub stars")
    if signals.get("github_open_source"):
        reasons.append(f"{github.open_source_contributions} open source contributions")
    return reasons


def founder_highlights(
    bundle: ProfileBundle, signals: Dict[str, float], config: ScoringConfig
) -> List[str]:
    """Highlights when an AI-extracted founder profile is available"""
    founder = bundle.founder
    reasons = []

    # Ambition
    if signals.get("companies_founded") and founder.companies_founded:
        reasons.append("Founded: " + ", ".join(c.name for c in founder.companies_founded))
    if signals.get("leadership_roles") and founder.leadership_roles:
        reasons.append(
            ", ".join(
                f"{r.title} at {r.company}" if r.company else r.title
                for r in founder.leadership_roles[:2]
            )
        )
    if signals.get("thought_leadership"):
        reasons.append("Thought leader (speaking/writing)")

    # Intelligence
    if signals.get("top_education") and founder.top_education:
        edu = founder.top_education[0]
        reasons.append(f"{edu.school} - {edu.degree}" if edu.degree else edu.school)

    # Track Record
    if signals.get("funding_raised") and founder.funding_raised:
        rounds = ", ".join(f.round or "funding" for f in founder.funding_raised)
        reasons.append(f"Raised: {rounds}")
    if signals.get("exits") and founder.exits:
        reasons.append(_plural(len(founder.exits), "exit"))
    if signals.get("press_mentions") and founder.press_mentions:
        reasons.append(_plural(len(founder.press_mentions), "press mention"))

    # Kindness
    if signals.get("volunteer_work") and founder.volunteer_work:
        reasons.append(f"Volunteer: {founder.volunteer_work[0].organization}")
    if signals.get("mentorship"):
        reasons.append("Active mentor")

    reasons.extend(_github_highlights(bundle, signals))
    return reasons


def profile_highlights(
    bundle: ProfileBundle, signals: Dict[str, float], config: ScoringConfig
) -> List[str]:
    """Highlights from raw GitHub/LinkedIn data when no founder profile exists"""
    github = bundle.github
    linkedin = bundle.linkedin
    reasons = []

    if signals.get("github_projects") and github:
        reasons.append(f"{github.public_repos} GitHub projects")
    if signals.get("linkedin_startups"):
        reasons.append("Startup founder experience")
    if signals.get("linkedin_leadership"):
        reasons.append("Leadership experience")
    if signals.get("github_languages") and github:
        reasons.append(f"{len(github.top_languages)} programming languages")
    if signals.get("github_contributions") and github:
        reasons.append(f"{github.contributions.last_year} contributions last year")
    if signals.get("linkedin_education") and linkedin:
        top_schools = config.rule_value("linkedin_education.top_schools", TOP_SCHOOLS)
        entry = first_top_school(linkedin.education, top_schools)
        if entry is not None:
            reasons.append(entry.school)
    if signals.get("github_open_source") and github:
        reasons.append(f"{github.open_source_contributions} open source contributions")
    if signals.get("linkedin_volunteering"):
        reasons.append("Volunteer experience")
    if signals.get("github_stars") and github:
        reasons.append(f"{github.total_stars} GitHub stars")
    return reasons


def generate_reasoning(
    bundle: ProfileBundle,
    signals: Dict[str, float],
    tier: Tier,
    config: ScoringConfig,
) -> str:
    """
    Build the explanation for a score.

    Args:
        bundle: Profile data that was scored
        signals: Fired signals from the engine
        tier: Resolved tier
        config: Configuration the score was computed with

    Returns:
        "<Tier> candidate: ..." or the no-data sentence
    """
    strategy = founder_highlights if bundle.founder is not None else profile_highlights
    reasons = strategy(bundle, signals, config)

    label = tier.value
    if not reasons:
        return f"Scored as {label} based on available data"
    return f"{label.capitalize()} candidate: {', '.join(reasons)}"
