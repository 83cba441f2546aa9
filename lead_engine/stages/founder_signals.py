"""
Pass 2: Founder Signals
=======================
Scores the AI-extracted founder summary. Runs only when founder data is
present and adds on top of the pass 1 category totals.
"""

from ..models.schemas import FounderSignals
from ..models.scoring_config import ScoringConfig
from .normalization import SignalSheet, contains_any, is_advanced_degree

# Companies founded
POINTS_PER_COMPANY = 7.5
MAX_COMPANIES = 2

# Leadership roles
C_LEVEL_MARKERS = ("ceo", "cto", "chief")
VP_MARKERS = ("vp", "director")
C_LEVEL_BASE_POINTS = 5
VP_BASE_POINTS = 3
CEO_CTO_MULTIPLIER = 2.0
VP_DIRECTOR_MULTIPLIER = 1.5

# Thought leadership
SPEAKING_POINTS = 2
WRITING_POINTS = 2
PODCASTING_POINTS = 1

# Education
TOP_TIER_POINTS = 15
TOP_50_POINTS = 10
EDUCATION_DEGREE_BONUS = 3

POINTS_PER_ACCOMPLISHMENT = 3

# Funding, checked in this order
SERIES_B_PLUS_POINTS = 10
SERIES_A_POINTS = 5
SEED_POINTS = 2

POINTS_PER_EXIT = 5
POINTS_PER_MENTION = 1
MAX_MENTION_POINTS = 3

DEFAULT_POINTS = {
    "leadership_roles": 10,
    "thought_leadership": 5,
    "top_education": 15,
    "strategic_accomplishments": 10,
    "volunteer_work": 10,
    "mentorship": 5,
    "community_building": 5,
    "funding_raised": 10,
    "exits": 5,
}


class FounderSignalStage:
    """
    Pass 2: score companies, leadership, education, funding and reputation.
    """

    def __init__(self, config: ScoringConfig):
        self.config = config

    def process(self, founder: FounderSignals, sheet: SignalSheet) -> SignalSheet:
        # Ambition
        sheet.record("ambition", "companies_founded", self._score_companies(founder))
        sheet.record("ambition", "leadership_roles", self._score_leadership_roles(founder))
        sheet.record("ambition", "thought_leadership", self._score_thought_leadership(founder))

        # Intelligence
        sheet.record("intelligence", "top_education", self._score_top_education(founder))
        if founder.strategic_accomplishments:
            per_item = self.config.rule_value(
                "strategic_accomplishments.points_per_accomplishment", POINTS_PER_ACCOMPLISHMENT
            )
            sheet.record(
                "intelligence",
                "strategic_accomplishments",
                min(
                    len(founder.strategic_accomplishments) * per_item,
                    self._cap("intelligence", "strategic_accomplishments"),
                ),
            )

        # Kindness
        if founder.volunteer_work:
            sheet.record("kindness", "volunteer_work", self._cap("kindness", "volunteer_work"))
        if founder.mentorship.is_mentor:
            sheet.record("kindness", "mentorship", self._cap("kindness", "mentorship"))
        if founder.community_building:
            sheet.record("kindness", "community_building", self._cap("kindness", "community_building"))

        # Track Record
        sheet.record("track_record", "funding_raised", self._score_funding(founder))
        if founder.exits:
            per_exit = self.config.rule_value("exits.acquisition_points", POINTS_PER_EXIT)
            sheet.record(
                "track_record",
                "exits",
                min(len(founder.exits) * per_exit, self._cap("trackRecord", "exits")),
            )
        if founder.press_mentions:
            per_mention = self.config.rule_value("press_mentions.points_per_mention", POINTS_PER_MENTION)
            max_points = self.config.rule_value("press_mentions.max_mentions", MAX_MENTION_POINTS)
            sheet.record(
                "track_record",
                "press_mentions",
                min(len(founder.press_mentions) * per_mention, max_points),
            )

        return sheet

    def _cap(self, category: str, signal: str) -> float:
        return self.config.points(category, signal, DEFAULT_POINTS[signal])

    def _score_companies(self, founder: FounderSignals) -> float:
        if not founder.companies_founded:
            return 0.0
        per_company = self.config.rule_value("companies_founded.points_per_company", POINTS_PER_COMPANY)
        max_companies = self.config.rule_value("companies_founded.max_companies", MAX_COMPANIES)
        return min(len(founder.companies_founded), max_companies) * per_company

    def _score_leadership_roles(self, founder: FounderSignals) -> float:
        """C-level first, otherwise VP/director; other titles add nothing"""
        if not founder.leadership_roles:
            return 0.0
        ceo_multiplier = self.config.rule_value("leadership_roles.ceo_cto_multiplier", CEO_CTO_MULTIPLIER)
        vp_multiplier = self.config.rule_value("leadership_roles.vp_director_multiplier", VP_DIRECTOR_MULTIPLIER)

        score = 0.0
        for role in founder.leadership_roles:
            if contains_any(role.title, C_LEVEL_MARKERS):
                score += C_LEVEL_BASE_POINTS * ceo_multiplier
            elif contains_any(role.title, VP_MARKERS):
                score += VP_BASE_POINTS * vp_multiplier
        return min(score, self._cap("ambition", "leadership_roles"))

    def _score_thought_leadership(self, founder: FounderSignals) -> float:
        flags = founder.thought_leadership
        score = 0.0
        if flags.speaking:
            score += self.config.rule_value("thought_leadership.speaking_points", SPEAKING_POINTS)
        if flags.writing:
            score += self.config.rule_value("thought_leadership.writing_points", WRITING_POINTS)
        if flags.podcasting:
            score += self.config.rule_value("thought_leadership.podcasting_points", PODCASTING_POINTS)
        return min(score, self._cap("ambition", "thought_leadership"))

    def _score_top_education(self, founder: FounderSignals) -> float:
        if not founder.top_education:
            return 0.0
        top = founder.top_education[0]
        if top.is_top_tier:
            score = self.config.rule_value("top_education.top_tier_points", TOP_TIER_POINTS)
        else:
            score = self.config.rule_value("top_education.top_50_points", TOP_50_POINTS)
        if is_advanced_degree(top.degree):
            score += self.config.rule_value("top_education.advanced_degree_bonus", EDUCATION_DEGREE_BONUS)
        return min(score, self._cap("intelligence", "top_education"))

    def _score_funding(self, founder: FounderSignals) -> float:
        if not founder.funding_raised:
            return 0.0
        score = 0.0
        for funding in founder.funding_raised:
            label = funding.round or ""
            if contains_any(label, ("series b", "series c")):
                score += self.config.rule_value("funding_raised.series_b_plus_points", SERIES_B_PLUS_POINTS)
            elif contains_any(label, ("series a",)):
                score += self.config.rule_value("funding_raised.series_a_points", SERIES_A_POINTS)
            elif contains_any(label, ("seed",)):
                score += self.config.rule_value("funding_raised.seed_points", SEED_POINTS)
        return min(score, self._cap("trackRecord", "funding_raised"))
