"""
Pass 1: Developer & Network Signals
===================================
GitHub activity and LinkedIn history, scored into the four categories.

Signals:
- Ambition: GitHub projects, startup (founder) experience, leadership titles
- Intelligence: Languages, yearly contributions, top-school education, certifications
- Kindness: Open source contributions, volunteering
- Track Record: Stars, inferred promotions
"""

from typing import List, Optional, Sequence

from ..models.schemas import (
    GitHubProfile,
    LinkedInEducation,
    LinkedInProfile,
    ProfileBundle,
)
from ..models.scoring_config import ScoringConfig
from .normalization import (
    SignalSheet,
    contains_any,
    is_advanced_degree,
    parse_start_date,
    threshold_ramp,
)

# Threshold-ramp bounds: (min, saturation)
GITHUB_PROJECTS_RANGE = (3, 10)
GITHUB_LANGUAGES_RANGE = (2, 5)
GITHUB_CONTRIBUTIONS_RANGE = (100, 1000)
GITHUB_OPEN_SOURCE_RANGE = (10, 100)
GITHUB_STARS_RANGE = (50, 500)
MAX_SCORE_PROMOTIONS = 3

FOUNDER_TITLE_MARKERS = ("founder", "co-founder")
FOUNDER_MULTIPLIER = 1.0
LEADERSHIP_TITLES: List[str] = []
TOP_SCHOOLS: List[str] = []
ADVANCED_DEGREE_BONUS = 0.3
POINTS_PER_CERTIFICATION = 2

# Category caps used when the document omits them
DEFAULT_POINTS = {
    "github_projects": 10,
    "linkedin_startups": 10,
    "linkedin_leadership": 5,
    "github_languages": 8,
    "github_contributions": 10,
    "linkedin_education": 10,
    "linkedin_certifications": 6,
    "github_open_source": 10,
    "linkedin_volunteering": 5,
    "github_stars": 10,
    "linkedin_promotions": 8,
}


def first_top_school(
    education: Sequence[LinkedInEducation], top_schools: Sequence[str]
) -> Optional[LinkedInEducation]:
    """First entry, in list order, whose school matches a top-school substring"""
    for entry in education:
        if contains_any(entry.school, top_schools):
            return entry
    return None


def count_promotions(profile: LinkedInProfile) -> int:
    """
    Adjacent same-company roles after sorting by start date, newest first.

    Titles are not compared: any two consecutive roles at one company count.
    """
    experiences = sorted(
        profile.experiences,
        key=lambda exp: parse_start_date(exp.start_date),
        reverse=True,
    )
    return sum(
        1
        for current, following in zip(experiences, experiences[1:])
        if current.company == following.company
    )


class DeveloperSignalStage:
    """
    Pass 1: score GitHub and LinkedIn data.
    """

    def __init__(self, config: ScoringConfig):
        self.config = config

    def process(self, bundle: ProfileBundle, sheet: SignalSheet) -> SignalSheet:
        """
        Record every developer/network signal that fires.

        Args:
            bundle: Profile data for one lead
            sheet: Running totals to add to

        Returns:
            The same sheet
        """
        if bundle.github:
            self._score_github(bundle.github, sheet)
        if bundle.linkedin:
            self._score_linkedin(bundle.linkedin, sheet)
        return sheet

    # =========================================================================
    # GitHub
    # =========================================================================

    def _score_github(self, github: GitHubProfile, sheet: SignalSheet) -> None:
        sheet.record(
            "ambition",
            "github_projects",
            self._ramp(
                github.public_repos,
                "github_projects",
                ("min_repos", "max_score_repos"),
                GITHUB_PROJECTS_RANGE,
                "ambition",
            ),
        )
        sheet.record(
            "intelligence",
            "github_languages",
            self._ramp(
                len(github.top_languages),
                "github_languages",
                ("min_languages", "max_score_languages"),
                GITHUB_LANGUAGES_RANGE,
                "intelligence",
            ),
        )
        sheet.record(
            "intelligence",
            "github_contributions",
            self._ramp(
                github.contributions.last_year,
                "github_contributions",
                ("min_contributions", "max_score_contributions"),
                GITHUB_CONTRIBUTIONS_RANGE,
                "intelligence",
            ),
        )
        sheet.record(
            "kindness",
            "github_open_source",
            self._ramp(
                github.open_source_contributions,
                "github_open_source",
                ("min_contributions", "max_score_contributions"),
                GITHUB_OPEN_SOURCE_RANGE,
                "kindness",
            ),
        )
        sheet.record(
            "track_record",
            "github_stars",
            self._ramp(
                github.total_stars,
                "github_stars",
                ("min_stars", "max_score_stars"),
                GITHUB_STARS_RANGE,
                "trackRecord",
            ),
        )

    def _ramp(self, value, signal, rule_keys, defaults, category) -> float:
        min_key, max_key = rule_keys
        minimum = self.config.rule_value(f"{signal}.{min_key}", defaults[0])
        saturation = self.config.rule_value(f"{signal}.{max_key}", defaults[1])
        cap = self.config.points(category, signal, DEFAULT_POINTS[signal])
        return threshold_ramp(value, minimum, saturation, cap)

    # =========================================================================
    # LinkedIn
    # =========================================================================

    def _score_linkedin(self, linkedin: LinkedInProfile, sheet: SignalSheet) -> None:
        config = self.config
        titles = [exp.title for exp in linkedin.experiences]

        # Startup experience: binary, any founder title
        if any(contains_any(title, FOUNDER_TITLE_MARKERS) for title in titles):
            base = config.points("ambition", "linkedin_startups", DEFAULT_POINTS["linkedin_startups"])
            multiplier = config.rule_value("linkedin_startups.founder_multiplier", FOUNDER_MULTIPLIER)
            sheet.record("ambition", "linkedin_startups", base * multiplier)

        # Leadership: binary, any configured title substring
        leadership_titles = config.rule_value("linkedin_leadership.leadership_titles", LEADERSHIP_TITLES)
        if any(contains_any(title, leadership_titles) for title in titles):
            sheet.record(
                "ambition",
                "linkedin_leadership",
                config.points("ambition", "linkedin_leadership", DEFAULT_POINTS["linkedin_leadership"]),
            )

        sheet.record("intelligence", "linkedin_education", self._score_education(linkedin))

        if linkedin.certifications:
            cap = config.points(
                "intelligence", "linkedin_certifications", DEFAULT_POINTS["linkedin_certifications"]
            )
            sheet.record(
                "intelligence",
                "linkedin_certifications",
                min(len(linkedin.certifications) * POINTS_PER_CERTIFICATION, cap),
            )

        if linkedin.volunteering:
            sheet.record(
                "kindness",
                "linkedin_volunteering",
                config.points("kindness", "linkedin_volunteering", DEFAULT_POINTS["linkedin_volunteering"]),
            )

        promotions = count_promotions(linkedin)
        if promotions > 0:
            max_promotions = config.rule_value(
                "linkedin_promotions.max_score_promotions", MAX_SCORE_PROMOTIONS
            )
            cap = config.points("trackRecord", "linkedin_promotions", DEFAULT_POINTS["linkedin_promotions"])
            sheet.record(
                "track_record",
                "linkedin_promotions",
                threshold_ramp(promotions, 0, max_promotions, cap),
            )

    def _score_education(self, linkedin: LinkedInProfile) -> float:
        """Only the first top-school entry counts; later matches are ignored"""
        top_schools = self.config.rule_value("linkedin_education.top_schools", TOP_SCHOOLS)
        entry = first_top_school(linkedin.education, top_schools)
        if entry is None:
            return 0.0

        score = self.config.points(
            "intelligence", "linkedin_education", DEFAULT_POINTS["linkedin_education"]
        )
        if is_advanced_degree(entry.degree):
            bonus = self.config.rule_value(
                "linkedin_education.advanced_degree_bonus", ADVANCED_DEGREE_BONUS
            )
            score *= 1 + bonus
        return score
