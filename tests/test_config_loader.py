"""
Tests for loading, resolving and reloading the scoring configuration.
"""

import logging

import pytest

from lead_engine.config.loader import ConfigStore, load_scoring_config
from lead_engine.exceptions import ConfigLoadError
from lead_engine.models.scoring_config import ScoringConfig


class TestLoadScoringConfig:
    """Parsing the YAML document."""

    def test_packaged_config_loads(self, default_config):
        assert default_config.version == "1.0"
        assert default_config.points("ambition", "github_projects", 0) == 10
        assert default_config.tier_cutoff("strong", 0) == 50
        assert "stanford" in default_config.rule_value("linkedin_education.top_schools", [])

    def test_track_record_accepts_camel_case_key(self, write_config):
        path = write_config({"trackRecord": {"github_stars": 12}})
        config = load_scoring_config(path)
        assert config.points("trackRecord", "github_stars", 0) == 12

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigLoadError) as exc_info:
            load_scoring_config(str(tmp_path / "nope.yaml"))
        assert "nope.yaml" in str(exc_info.value)

    def test_invalid_yaml_raises(self, write_config):
        path = write_config("tiers: [exceptional: 80\n  strong")
        with pytest.raises(ConfigLoadError):
            load_scoring_config(path)

    def test_non_mapping_document_raises(self, write_config):
        path = write_config("- just\n- a list\n")
        with pytest.raises(ConfigLoadError) as exc_info:
            load_scoring_config(path)
        assert "mapping" in str(exc_info.value)

    def test_empty_document_is_all_defaults(self, write_config):
        config = load_scoring_config(write_config(""))
        assert config.scoring_rules == {}
        assert config.tiers == {}

    def test_malformed_section_is_dropped_not_fatal(self, write_config):
        path = write_config({"tiers": "very high", "ambition": {"github_projects": 20}})
        config = load_scoring_config(path)
        assert config.tiers == {}
        assert config.points("ambition", "github_projects", 0) == 20

    def test_unknown_keys_are_ignored(self, write_config):
        config = load_scoring_config(write_config({"notes": "tuning run 3", "tiers": {"good": 25}}))
        assert config.tier_cutoff("good", 0) == 25

    def test_weights_not_summing_to_100_only_warn(self, write_config, capture_logs):
        logs = capture_logs("lead_engine.config.loader")
        path = write_config({"weights": {"ambition": 50, "intelligence": 20, "kindness": 10, "trackRecord": 10}})
        config = load_scoring_config(path)
        assert config.weight("ambition") == 50
        assert any(
            record.levelno == logging.WARNING and "sum to" in record.message
            for record in logs.records
        )


class TestResolvers:
    """Per-lookup defaults."""

    def test_rule_value_missing_path_uses_default(self, bare_config):
        assert bare_config.rule_value("github_projects.min_repos", 3) == 3

    def test_rule_value_null_uses_default(self):
        config = ScoringConfig(scoring_rules={"github_stars": {"min_stars": None}})
        assert config.rule_value("github_stars.min_stars", 50) == 50

    def test_rule_value_explicit_zero_is_kept(self):
        config = ScoringConfig(scoring_rules={"linkedin_education": {"advanced_degree_bonus": 0}})
        assert config.rule_value("linkedin_education.advanced_degree_bonus", 0.3) == 0

    def test_rule_value_numeric_string_is_coerced(self):
        config = ScoringConfig(scoring_rules={"exits": {"acquisition_points": "4"}})
        assert config.rule_value("exits.acquisition_points", 5) == 4.0

    def test_rule_value_wrong_type_uses_default(self):
        config = ScoringConfig(scoring_rules={"exits": {"acquisition_points": "lots"}})
        assert config.rule_value("exits.acquisition_points", 5) == 5

    def test_rule_value_walks_through_non_mapping(self):
        config = ScoringConfig(scoring_rules={"github_projects": 7})
        assert config.rule_value("github_projects.min_repos", 3) == 3

    def test_rule_value_list_drops_non_strings(self):
        config = ScoringConfig(scoring_rules={"linkedin_leadership": {"leadership_titles": ["ceo", 4, "vp"]}})
        assert config.rule_value("linkedin_leadership.leadership_titles", []) == ["ceo", "vp"]

    def test_rule_value_list_default_when_scalar(self):
        config = ScoringConfig(scoring_rules={"linkedin_education": {"top_schools": "stanford"}})
        assert config.rule_value("linkedin_education.top_schools", []) == []

    def test_points_unknown_category_uses_default(self, default_config):
        assert default_config.points("charisma", "github_projects", 4) == 4

    def test_tier_cutoff_default(self, bare_config):
        assert bare_config.tier_cutoff("exceptional", 70) == 70


class TestConfigStore:
    """The single cell holding the active snapshot."""

    def test_reload_swaps_snapshot(self, write_config):
        path = write_config({"tiers": {"exceptional": 80}})
        store = ConfigStore(path)
        before = store.current

        write_config({"tiers": {"exceptional": 60}})
        after = store.reload()

        assert store.current is after
        assert after.tier_cutoff("exceptional", 0) == 60
        assert before.tier_cutoff("exceptional", 0) == 80

    def test_reload_with_new_path(self, write_config):
        store = ConfigStore(write_config({"tiers": {"good": 30}}, name="a.yaml"))
        other = write_config({"tiers": {"good": 35}}, name="b.yaml")
        store.reload(other)
        assert store.path == other
        assert store.current.tier_cutoff("good", 0) == 35

    def test_failed_reload_keeps_previous_snapshot(self, write_config):
        path = write_config({"tiers": {"strong": 55}})
        store = ConfigStore(path)
        active = store.current

        write_config("tiers: [broken")
        with pytest.raises(ConfigLoadError):
            store.reload()

        assert store.current is active
        assert store.current.tier_cutoff("strong", 0) == 55

    def test_get_returns_independent_copy(self, write_config):
        store = ConfigStore(write_config({"scoring_rules": {"exits": {"acquisition_points": 5}}}))
        snapshot = store.get()
        snapshot.scoring_rules["exits"]["acquisition_points"] = 99
        assert store.current.rule_value("exits.acquisition_points", 0) == 5

    def test_construction_fails_loudly(self, tmp_path):
        with pytest.raises(ConfigLoadError):
            ConfigStore(str(tmp_path / "missing.yaml"))
