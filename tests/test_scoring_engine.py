"""Unit tests for the scoring engine's shared behaviour."""

import pytest

from mindscore.scoring import (
    AnswerOption,
    Instrument,
    InstrumentCatalog,
    InvalidInstrumentError,
    MalformedResponseError,
    Question,
    Response,
    ScoreResult,
    SeverityBand,
    calculate_score,
    severity_for,
    validate_responses,
)
from mindscore.scoring.asrs import ASRS
from mindscore.scoring.engine import percentage_of_max, to_response
from mindscore.scoring.gad7 import GAD7
from mindscore.scoring.phq9 import PHQ9


def _tiny_instrument(bands: tuple[SeverityBand, ...]) -> Instrument:
    return Instrument(
        id="tiny",
        name="T-2",
        full_name="Tiny Two",
        description="Two yes/no questions",
        estimated_time="1 minute",
        questions=(Question(1, "First"), Question(2, "Second")),
        answer_options=(AnswerOption("No", 0), AnswerOption("Yes", 1)),
        max_score=2,
        severity_bands=bands,
    )


class TestUnknownInstrument:

    def test_raises_invalid_instrument(self) -> None:
        with pytest.raises(InvalidInstrumentError) as exc_info:
            calculate_score("not-a-real-test", [{"questionId": 1, "answer": 1}])

        assert exc_info.value.instrument_id == "not-a-real-test"
        assert "depression" in exc_info.value.available

    def test_checked_before_responses_are_read(self) -> None:
        """Malformed responses never get a look when the id is unknown."""
        with pytest.raises(InvalidInstrumentError):
            calculate_score("nope", [{"bogus": True}])

    def test_is_a_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            calculate_score("nope", [])


class TestLenientScoring:
    """Malformed input is summed as given rather than rejected."""

    def test_empty_responses(self) -> None:
        result = calculate_score("depression", [])
        assert result == ScoreResult(total=0, severity="minimal", percentage=0)

    def test_partial_responses(self) -> None:
        result = calculate_score("depression", [{"questionId": 1, "answer": 3}, {"questionId": 2, "answer": 3}])
        assert result.total == 6
        assert result.severity == "mild"

    def test_duplicate_question_ids_are_both_summed(self) -> None:
        responses = [{"questionId": 1, "answer": 3}] * 4
        assert calculate_score("anxiety", responses).total == 12

    def test_unknown_question_ids_are_summed(self) -> None:
        assert calculate_score("anxiety", [{"questionId": 99, "answer": 2}]).total == 2

    def test_total_above_max_is_not_clamped(self) -> None:
        responses = [{"questionId": i, "answer": 4} for i in range(1, 10)]
        result = calculate_score("depression", responses)

        assert result.total == 36
        assert result.severity == "severe"
        assert result.percentage == 133

    def test_negative_total_is_minimal(self) -> None:
        result = calculate_score("depression", [{"questionId": 1, "answer": -1}])

        assert result.total == -1
        assert result.severity == "minimal"
        assert result.percentage == -4

    def test_huge_answer_is_scored(self) -> None:
        result = calculate_score("depression", [{"questionId": 1, "answer": 10**400}])

        assert result.total == 10**400
        assert result.severity == "severe"
        assert result.percentage == (10**402 + 13) // 27

    def test_order_independent(self) -> None:
        responses = [{"questionId": i, "answer": i % 4} for i in range(1, 10)]
        assert calculate_score("depression", responses) == calculate_score(
            "depression", list(reversed(responses))
        )


class TestIdempotence:

    def test_same_input_same_result(self) -> None:
        responses = [Response(question_id=i, answer=2) for i in range(1, 8)]

        first = calculate_score("anxiety", responses)
        second = calculate_score("anxiety", responses)

        assert first == second
        assert first.as_dict() == {"total": 14, "severity": "moderate", "percentage": 67}


class TestResponseParsing:

    def test_accepts_camel_and_snake_keys(self) -> None:
        assert to_response({"questionId": 3, "answer": 1}) == Response(3, 1)
        assert to_response({"question_id": 3, "answer": 1}) == Response(3, 1)

    def test_passes_response_through(self) -> None:
        response = Response(1, 2)
        assert to_response(response) is response

    def test_accepts_generators(self) -> None:
        result = calculate_score("anxiety", (Response(i, 1) for i in range(1, 8)))
        assert result.total == 7


class TestRounding:

    @pytest.mark.parametrize(
        "instrument,total,expected",
        [
            (ASRS, 9, 13),
            (GAD7, 10, 48),
            (PHQ9, 14, 52),
            (PHQ9, 0, 0),
            (PHQ9, -1, -4),
            (ASRS, -9, -12),
        ],
    )
    def test_rounds_halves_up(self, instrument: Instrument, total: int, expected: int) -> None:
        assert percentage_of_max(instrument, total) == expected


class TestSeverityFor:

    def test_walks_bands_from_most_severe(self) -> None:
        assert severity_for(PHQ9, 100) == "severe"
        assert severity_for(PHQ9, 17) == "moderately-severe"
        assert severity_for(PHQ9, -50) == "minimal"

    def test_custom_band_layout(self) -> None:
        instrument = _tiny_instrument(
            (SeverityBand("none", max=0), SeverityBand("present", min=1))
        )
        assert severity_for(instrument, 0) == "none"
        assert severity_for(instrument, 1) == "present"
        assert severity_for(instrument, 2) == "present"


class TestCustomCatalog:

    def test_scores_against_injected_catalog(self) -> None:
        catalog = InstrumentCatalog(
            [_tiny_instrument((SeverityBand("none", max=0), SeverityBand("present", min=1)))]
        )
        result = calculate_score(
            "tiny",
            [{"questionId": 1, "answer": 1}, {"questionId": 2, "answer": 0}],
            catalog=catalog,
        )

        assert result == ScoreResult(total=1, severity="present", percentage=50)

    def test_default_instruments_absent_from_custom_catalog(self) -> None:
        catalog = InstrumentCatalog(
            [_tiny_instrument((SeverityBand("none", max=0), SeverityBand("present", min=1)))]
        )
        with pytest.raises(InvalidInstrumentError):
            calculate_score("depression", [], catalog=catalog)


class TestStrictValidation:

    def test_valid_responses_pass(self) -> None:
        responses = [{"questionId": i, "answer": 1} for i in range(1, 10)]
        result = calculate_score("depression", responses, strict=True)
        assert result.total == 9

    def test_rejects_off_scale_answer(self) -> None:
        with pytest.raises(MalformedResponseError) as exc_info:
            calculate_score("depression", [{"questionId": 1, "answer": 4}], strict=True)

        assert exc_info.value.instrument_id == "depression"
        assert "answer 4" in exc_info.value.problems[0]

    def test_rejects_unknown_question(self) -> None:
        with pytest.raises(MalformedResponseError) as exc_info:
            calculate_score("anxiety", [{"questionId": 8, "answer": 0}], strict=True)

        assert exc_info.value.problems == ["unknown question id 8"]

    def test_collects_every_problem(self) -> None:
        with pytest.raises(MalformedResponseError) as exc_info:
            validate_responses(
                PHQ9,
                [{"questionId": 0, "answer": 1}, {"questionId": 2, "answer": -1}],
            )

        assert len(exc_info.value.problems) == 2

    def test_partial_submission_is_still_accepted(self) -> None:
        """Strict mode checks values, not coverage."""
        result = calculate_score("anxiety", [{"questionId": 1, "answer": 3}], strict=True)
        assert result.total == 3
