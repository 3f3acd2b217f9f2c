"""Score a completed questionnaire against its instrument.

Scoring is lenient: answers are summed as given, without checking that
every question was answered, that question ids belong to the instrument,
or that answers sit on the instrument's scale. Duplicate question ids are
summed twice. ``strict=True`` opts into ``validate_responses`` first.

Severity is assigned by walking the bands from most to least severe and
taking the first whose lower bound the total reaches. The least severe
band has no lower-bound check; every total that no other band claims,
negative totals included, falls into it.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from mindscore.scoring.catalog import InstrumentCatalog, default_catalog
from mindscore.scoring.errors import MalformedResponseError
from mindscore.scoring.instruments import Instrument


@dataclass(frozen=True)
class Response:
    """One answer to one question."""
    question_id: int
    answer: int


@dataclass(frozen=True)
class ScoreResult:
    """Result of scoring one submission."""
    total: int
    severity: str
    percentage: int

    def as_dict(self) -> dict[str, Any]:
        return {"total": self.total, "severity": self.severity, "percentage": self.percentage}


ResponseLike = Union[Response, Mapping[str, Any]]


def to_response(item: ResponseLike) -> Response:
    """Coerce a response mapping into a ``Response``.

    Accepts ``questionId`` (client payloads) or ``question_id`` keys.
    """
    if isinstance(item, Response):
        return item
    if "questionId" in item:
        question_id = item["questionId"]
    else:
        question_id = item["question_id"]
    return Response(question_id=question_id, answer=item["answer"])


def severity_for(instrument: Instrument, total: int) -> str:
    """Return the severity name for ``total`` on ``instrument``."""
    fallback, *graded = instrument.severity_bands
    for band in reversed(graded):
        if total >= band.min:
            return band.name
    return fallback.name


def percentage_of_max(instrument: Instrument, total: int) -> int:
    """Total as a rounded percentage of the maximum score, not clamped.

    Halves round towards positive infinity. Integer arithmetic keeps
    arbitrarily large totals exact.
    """
    max_score = instrument.max_score
    return (200 * total + max_score) // (2 * max_score)


def validate_responses(instrument: Instrument, responses: Iterable[ResponseLike]) -> list[Response]:
    """Reject responses the instrument does not define.

    Raises:
        MalformedResponseError: If any response names an unknown question or
            carries an answer value that is not on the instrument's scale.
    """
    parsed = [to_response(r) for r in responses]
    question_ids = instrument.question_ids
    answer_values = instrument.answer_values
    problems = []

    for response in parsed:
        if response.question_id not in question_ids:
            problems.append(f"unknown question id {response.question_id}")
        if response.answer not in answer_values:
            problems.append(
                f"question {response.question_id}: answer {response.answer} "
                f"not in {sorted(answer_values)}"
            )

    if problems:
        raise MalformedResponseError(instrument.id, problems)
    return parsed


def calculate_score(
    instrument_id: str,
    responses: Iterable[ResponseLike],
    catalog: InstrumentCatalog | None = None,
    strict: bool = False,
) -> ScoreResult:
    """Score responses for the instrument with id ``instrument_id``.

    Args:
        instrument_id: Catalog id, e.g. "depression"
        responses: Answers as ``Response`` objects or mappings
        catalog: Catalog to resolve against (defaults to the bundled one)
        strict: Validate question ids and answer values before scoring

    Returns:
        ScoreResult with total, severity and percentage

    Raises:
        InvalidInstrumentError: If the id is not in the catalog
        MalformedResponseError: In strict mode, on undefined questions or answers
    """
    catalog = catalog if catalog is not None else default_catalog()
    instrument = catalog.get_instrument(instrument_id)

    if strict:
        parsed = validate_responses(instrument, responses)
    else:
        parsed = [to_response(r) for r in responses]

    total = sum(r.answer for r in parsed)

    return ScoreResult(
        total=total,
        severity=severity_for(instrument, total),
        percentage=percentage_of_max(instrument, total),
    )
