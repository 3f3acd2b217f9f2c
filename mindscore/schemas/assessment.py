"""Pydantic schemas for instruments, scoring and stored assessments.

Field names on the wire follow the patient client's camelCase contract
(``questionId``, ``testType``, ``completedAt``); snake_case is accepted
on input as well.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --- Instruments ---


class QuestionRead(CamelModel):
    id: int
    text: str


class AnswerOptionRead(CamelModel):
    label: str
    value: int


class SeverityBandRead(CamelModel):
    name: str
    min: int | None = None
    max: int | None = None


class InstrumentSummary(CamelModel):
    """Schema for listing instruments."""

    id: str
    name: str
    full_name: str
    description: str
    question_count: int
    estimated_time: str


class InstrumentRead(InstrumentSummary):
    """Schema for a full instrument definition."""

    questions: list[QuestionRead]
    answer_options: list[AnswerOptionRead]
    max_score: int
    severity_bands: list[SeverityBandRead]


# --- Scoring ---


class ResponseItem(CamelModel):
    """One answer to one question."""

    question_id: int
    answer: int


class ScoreRequest(CamelModel):
    """Schema for stateless scoring of a submission."""

    responses: list[ResponseItem]
    strict: bool | None = Field(
        default=None,
        description="Reject unknown question ids and off-scale answers; "
        "defaults to the server setting",
    )


class ScoresRead(CamelModel):
    total: int
    severity: str
    percentage: int


class InterpretationRead(CamelModel):
    label: str
    description: str
    color: str


class ScoreResponse(ScoresRead):
    """Schema for a scoring result with its interpretation."""

    instrument_id: str
    max_score: int
    interpretation: InterpretationRead


# --- Assessments ---


# Stored totals and percentages live in 32-bit integer columns. These bounds
# keep every accepted submission inside them.
MAX_STORED_ANSWER = 1000
MAX_STORED_RESPONSES = 200


class SubmittedResponseItem(ResponseItem):
    """One answer of a submission that will be stored."""

    answer: int = Field(..., ge=-MAX_STORED_ANSWER, le=MAX_STORED_ANSWER)


class AssessmentCreate(CamelModel):
    """Schema for submitting a completed assessment."""

    test_type: str = Field(..., min_length=1)
    responses: list[SubmittedResponseItem] = Field(..., max_length=MAX_STORED_RESPONSES)


class AssessmentSummaryRead(CamelModel):
    """Schema for an assessment in history listings (no responses)."""

    id: str
    test_type: str
    scores: ScoresRead
    completed_at: datetime
    test_version: str
    created_at: datetime


class AssessmentRead(AssessmentSummaryRead):
    """Schema for a single assessment with responses."""

    responses: list[ResponseItem]
    interpretation: InterpretationRead | None = None


class AssessmentCreated(CamelModel):
    id: str
    test_type: str
    scores: ScoresRead
    completed_at: datetime


class AssessmentCreateResponse(CamelModel):
    message: str
    assessment: AssessmentCreated


class AssessmentList(CamelModel):
    count: int
    assessments: list[AssessmentSummaryRead]


class AssessmentStats(CamelModel):
    """Per-instrument summary of a user's assessments."""

    test_type: str
    count: int
    latest_score: int
    latest_severity: str
    latest_date: datetime


class MessageResponse(CamelModel):
    message: str
