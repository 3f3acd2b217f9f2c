"""Data types describing a screening instrument.

An instrument is a fixed questionnaire: ordered questions, an ordered
answer scale from least to most severe, a maximum score and a table of
severity bands. All of these are standardized clinical contracts, so the
types are frozen and carry only read-only helpers.
"""

from dataclasses import dataclass
from typing import Optional

from mindscore.scoring.errors import InstrumentDefinitionError

# Severity names used by the bundled instruments
MINIMAL = "minimal"
MILD = "mild"
MODERATE = "moderate"
MODERATELY_SEVERE = "moderately-severe"
SEVERE = "severe"


@dataclass(frozen=True)
class Question:
    """A single questionnaire item."""
    id: int
    text: str


@dataclass(frozen=True)
class AnswerOption:
    """One point on an instrument's answer scale."""
    label: str
    value: int


@dataclass(frozen=True)
class SeverityBand:
    """Named score range with inclusive bounds.

    The lowest band has no ``min`` and the highest has no ``max``.
    """
    name: str
    min: Optional[int] = None
    max: Optional[int] = None

    def contains(self, total: int) -> bool:
        if self.min is not None and total < self.min:
            return False
        if self.max is not None and total > self.max:
            return False
        return True


@dataclass(frozen=True)
class Instrument:
    """A standardized self-report screening questionnaire."""
    id: str
    name: str
    full_name: str
    description: str
    estimated_time: str
    questions: tuple[Question, ...]
    answer_options: tuple[AnswerOption, ...]
    max_score: int
    # Ordered least to most severe
    severity_bands: tuple[SeverityBand, ...]

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def question_ids(self) -> frozenset[int]:
        return frozenset(q.id for q in self.questions)

    @property
    def answer_values(self) -> frozenset[int]:
        return frozenset(o.value for o in self.answer_options)

    @property
    def max_answer_value(self) -> int:
        return max(o.value for o in self.answer_options)

    @property
    def severity_names(self) -> tuple[str, ...]:
        return tuple(band.name for band in self.severity_bands)

    def has_band(self, name: str) -> bool:
        return name in self.severity_names

    def band(self, name: str) -> SeverityBand:
        """Return the band called ``name``.

        Raises:
            KeyError: If the instrument has no such band.
        """
        for band in self.severity_bands:
            if band.name == name:
                return band
        raise KeyError(name)

    def validate(self) -> None:
        """Check the definition is internally consistent.

        Raises:
            InstrumentDefinitionError: On duplicate question ids, an empty
                scale, a max score that does not match the scale, or severity
                bands that leave gaps or overlap over [0, max_score].
        """
        if not self.questions:
            raise InstrumentDefinitionError(f"{self.id}: no questions")
        if len(self.question_ids) != len(self.questions):
            raise InstrumentDefinitionError(f"{self.id}: duplicate question ids")
        if not self.answer_options:
            raise InstrumentDefinitionError(f"{self.id}: no answer options")
        if len(self.answer_values) != len(self.answer_options):
            raise InstrumentDefinitionError(f"{self.id}: duplicate answer values")
        if self.max_answer_value <= 0:
            raise InstrumentDefinitionError(f"{self.id}: answer scale has no positive value")

        expected_max = self.question_count * self.max_answer_value
        if self.max_score != expected_max:
            raise InstrumentDefinitionError(
                f"{self.id}: max_score {self.max_score} != "
                f"{self.question_count} questions x {self.max_answer_value}"
            )

        self._validate_bands()

    def _validate_bands(self) -> None:
        bands = self.severity_bands
        if len(bands) < 2:
            raise InstrumentDefinitionError(f"{self.id}: need at least two severity bands")
        if len(set(self.severity_names)) != len(bands):
            raise InstrumentDefinitionError(f"{self.id}: duplicate severity band names")

        lowest, highest = bands[0], bands[-1]
        if lowest.min not in (None, 0):
            raise InstrumentDefinitionError(f"{self.id}: lowest band must start at 0")
        if highest.max not in (None, self.max_score):
            raise InstrumentDefinitionError(
                f"{self.id}: highest band must extend to {self.max_score}"
            )

        for lower, upper in zip(bands, bands[1:]):
            if lower.max is None or upper.min is None:
                raise InstrumentDefinitionError(
                    f"{self.id}: only the outermost bands may be open-ended"
                )
            if upper.min != lower.max + 1:
                raise InstrumentDefinitionError(
                    f"{self.id}: bands {lower.name!r} and {upper.name!r} "
                    "must be contiguous and non-overlapping"
                )

        for band in bands:
            if band.min is not None and band.max is not None and band.min > band.max:
                raise InstrumentDefinitionError(f"{self.id}: band {band.name!r} is empty")


def likert_scale(*labels: str) -> tuple[AnswerOption, ...]:
    """Build an answer scale valued 0..n-1 in label order."""
    return tuple(AnswerOption(label=label, value=i) for i, label in enumerate(labels))


def numbered_questions(*texts: str) -> tuple[Question, ...]:
    """Build questions numbered from 1 in presentation order."""
    return tuple(Question(id=i, text=text) for i, text in enumerate(texts, start=1))
