"""Tests for PlannerConfig loading and validation."""

import json

import pytest
from pydantic import ValidationError

from maze_levels.layout.config import PlannerConfig, load_config, save_config


class TestPlannerConfig:
    def test_defaults(self):
        config = PlannerConfig()
        assert config.min_division_size == 5
        assert config.division_stop_chance == 0.25
        assert config.strict_connectivity is False
        assert config.quadrant_start is True

    def test_stop_chance_bounds(self):
        with pytest.raises(ValidationError):
            PlannerConfig(division_stop_chance=1.5)
        with pytest.raises(ValidationError):
            PlannerConfig(division_stop_chance=-0.1)

    def test_step_factor_positive(self):
        with pytest.raises(ValidationError):
            PlannerConfig(aldous_broder_step_factor=0)

    def test_load_partial_file(self, tmp_path):
        path = tmp_path / "planner.json"
        path.write_text(json.dumps({"strict_connectivity": True}))
        config = load_config(path)
        assert config.strict_connectivity is True
        assert config.min_division_size == 5

    def test_load_empty_document(self, tmp_path):
        path = tmp_path / "planner.json"
        path.write_text("{}")
        assert load_config(path) == PlannerConfig()

    def test_save_and_load(self, tmp_path):
        config = PlannerConfig(min_division_size=3, division_stop_chance=0.0)
        path = tmp_path / "nested" / "planner.json"
        save_config(config, path)
        assert load_config(path) == config
