"""Unit tests for GAD-7 definition and scoring."""

import pytest

from mindscore.scoring import calculate_score
from mindscore.scoring.gad7 import GAD7
from mindscore.scoring.phq9 import PHQ9


def _answers_summing_to(total: int, count: int = 7, max_value: int = 3) -> list[dict[str, int]]:
    answers = []
    remaining = total
    for question_id in range(1, count + 1):
        value = min(max_value, remaining)
        answers.append({"questionId": question_id, "answer": value})
        remaining -= value
    assert remaining == 0
    return answers


class TestGAD7Definition:
    """Tests for the GAD-7 instrument definition."""

    def test_identity(self) -> None:
        assert GAD7.id == "anxiety"
        assert GAD7.name == "GAD-7"
        assert GAD7.full_name == "Generalized Anxiety Disorder-7"

    def test_seven_questions(self) -> None:
        assert GAD7.question_count == 7
        assert GAD7.questions[0].text == "Feeling nervous, anxious, or on edge"
        assert GAD7.questions[6].text == "Feeling afraid, as if something awful might happen"

    def test_shares_phq9_scale(self) -> None:
        assert GAD7.answer_options == PHQ9.answer_options

    def test_no_moderately_severe_band(self) -> None:
        assert not GAD7.has_band("moderately-severe")
        assert GAD7.severity_names == ("minimal", "mild", "moderate", "severe")
        assert GAD7.max_score == 21


class TestGAD7Scoring:
    """Tests for GAD-7 score calculation."""

    def test_all_threes(self) -> None:
        result = calculate_score("anxiety", _answers_summing_to(21))

        assert result.total == 21
        assert result.severity == "severe"
        assert result.percentage == 100

    def test_all_zeros(self) -> None:
        result = calculate_score("anxiety", _answers_summing_to(0))

        assert result.severity == "minimal"
        assert result.percentage == 0

    @pytest.mark.parametrize(
        "total,expected",
        [
            (4, "minimal"),
            (5, "mild"),
            (9, "mild"),
            (10, "moderate"),
            (14, "moderate"),
            (15, "severe"),
        ],
    )
    def test_band_boundaries(self, total: int, expected: str) -> None:
        assert calculate_score("anxiety", _answers_summing_to(total)).severity == expected

    def test_moderate_jumps_straight_to_severe(self) -> None:
        """Without a moderately-severe band, 15 is severe."""
        assert calculate_score("anxiety", _answers_summing_to(14)).severity == "moderate"
        assert calculate_score("anxiety", _answers_summing_to(15)).severity == "severe"

    def test_percentage_rounding(self) -> None:
        # 10 / 21 = 47.62%
        result = calculate_score("anxiety", _answers_summing_to(10))

        assert result.total == 10
        assert result.percentage == 48
