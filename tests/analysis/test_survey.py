"""Integration tests for algorithm surveys, save/load and the text report."""

from __future__ import annotations

from pathlib import Path

import pytest

from maze_levels.algorithms import AVAILABLE, Algorithm
from maze_levels.analysis.models import AlgorithmStats, SurveyReport
from maze_levels.analysis.report import generate_text_report
from maze_levels.analysis.survey import load_survey, run_survey, save_survey


@pytest.fixture(scope="module")
def report() -> SurveyReport:
    return run_survey(rows=6, columns=6, samples=8, base_seed=100)


class TestRunSurvey:
    def test_covers_every_algorithm(self, report: SurveyReport) -> None:
        assert [s.algorithm for s in report.algorithms] == list(AVAILABLE)
        assert all(s.samples == 8 for s in report.algorithms)
        assert report.rows == 6
        assert report.base_seed == 100

    def test_perfect_mazes_never_degrade(self, report: SurveyReport) -> None:
        for stats in report.algorithms:
            assert stats.fallback_rate == 0.0
            assert stats.repair_rate == 0.0
            assert stats.avg_goal_distance > 0

    def test_binary_tree_mixes_directions(self, report: SurveyReport) -> None:
        """Binary tree carves both north and east links."""
        stats = next(s for s in report.algorithms if s.algorithm is Algorithm.BINARY_TREE)
        assert 0.0 < stats.avg_horizontal_link_ratio < 1.0

    def test_subset_of_algorithms(self) -> None:
        report = run_survey(rows=4, columns=4, samples=3, algorithms=["BINARY_TREE"])
        assert [s.algorithm for s in report.algorithms] == [Algorithm.BINARY_TREE]

    def test_deterministic(self) -> None:
        a = run_survey(rows=5, columns=5, samples=4, base_seed=7)
        b = run_survey(rows=5, columns=5, samples=4, base_seed=7)
        assert a.algorithms == b.algorithms

    def test_parallel_matches_serial(self) -> None:
        serial = run_survey(rows=5, columns=5, samples=4, base_seed=7,
                            algorithms=[Algorithm.RECURSIVE_BACKTRACKER])
        parallel = run_survey(rows=5, columns=5, samples=4, base_seed=7,
                              algorithms=[Algorithm.RECURSIVE_BACKTRACKER], parallel=True)
        assert serial.algorithms == parallel.algorithms


class TestSaveLoad:
    def test_roundtrip(self, report: SurveyReport, tmp_path: Path) -> None:
        path = tmp_path / "surveys" / "survey.json"
        save_survey(report, path)
        assert path.exists()
        loaded = load_survey(path)
        assert loaded == report


class TestTextReport:
    def test_sections(self, report: SurveyReport) -> None:
        text = generate_text_report(report)
        assert "Maze Survey Report" in text
        assert "## Per-Algorithm Stats" in text
        assert "## Goal Distance (longest first)" in text
        assert "## Degraded Builds" in text
        for algorithm in AVAILABLE:
            assert algorithm.value in text

    def test_no_degraded_builds(self, report: SurveyReport) -> None:
        text = generate_text_report(report)
        degraded = text.split("## Degraded Builds", 1)[1]
        assert "none" in degraded

    def test_degraded_builds_listed(self, report: SurveyReport) -> None:
        bad = AlgorithmStats(
            **{**report.algorithms[0].model_dump(), "fallback_rate": 0.25}
        )
        text = generate_text_report(report.model_copy(update={"algorithms": [bad]}))
        assert "fallback=25.0%" in text
