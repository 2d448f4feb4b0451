"""Unit tests for the pronunciation score to grade mapping."""

import pytest

from shabelingo.srs.errors import InvalidArgumentError
from shabelingo.srs.grading import score_to_grade


class TestScoreToGrade:
    """Tests for score_to_grade function."""

    def test_top_bucket(self):
        """Scores of 90 and above are a perfect recall."""
        assert score_to_grade(90) == 5
        assert score_to_grade(97.5) == 5
        assert score_to_grade(100) == 5

    def test_middle_buckets(self):
        assert score_to_grade(85) == 4
        assert score_to_grade(75) == 3
        assert score_to_grade(65) == 2

    def test_low_scores_return_floor_grade(self):
        """Anything under 60 maps to 1, never 0."""
        assert score_to_grade(59) == 1
        assert score_to_grade(12) == 1
        assert score_to_grade(0) == 1

    def test_boundary_conditions(self):
        """Each bucket starts exactly at its threshold."""
        assert score_to_grade(89) == 4
        assert score_to_grade(90) == 5
        assert score_to_grade(79.9) == 3
        assert score_to_grade(80) == 4
        assert score_to_grade(69) == 2
        assert score_to_grade(70) == 3
        assert score_to_grade(59) == 1
        assert score_to_grade(60) == 2

    def test_passing_threshold_matches_grade_three(self):
        """70 is the lowest score that counts as a successful review."""
        assert score_to_grade(69.99) < 3
        assert score_to_grade(70) >= 3

    @pytest.mark.parametrize("score", [-1, 100.5, float("nan"), None, True])
    def test_invalid_score_raises_error(self, score):
        with pytest.raises(InvalidArgumentError, match="score must be between 0 and 100"):
            score_to_grade(score)
