"""Patient self-assessment endpoints."""

from fastapi import APIRouter, HTTPException, Query, status

from mindscore.api.deps import Assessments, CurrentUserId
from mindscore.models.assessment import Assessment
from mindscore.schemas.assessment import (
    AssessmentCreate,
    AssessmentCreated,
    AssessmentCreateResponse,
    AssessmentList,
    AssessmentRead,
    AssessmentStats,
    AssessmentSummaryRead,
    InterpretationRead,
    MessageResponse,
    ResponseItem,
    ScoresRead,
)
from mindscore.scoring import InvalidInstrumentError, MalformedResponseError, Response, interpret

router = APIRouter(prefix="/assessments", tags=["assessments"])


def _scores(assessment: Assessment) -> ScoresRead:
    return ScoresRead(**assessment.scores)


def _summary(assessment: Assessment) -> AssessmentSummaryRead:
    return AssessmentSummaryRead(
        id=assessment.id,
        test_type=assessment.instrument_id,
        scores=_scores(assessment),
        completed_at=assessment.completed_at,
        test_version=assessment.instrument_version,
        created_at=assessment.created_at,
    )


def _detail(assessment: Assessment, with_interpretation: bool = False) -> AssessmentRead:
    interpretation = None
    if with_interpretation:
        found = interpret(assessment.severity)
        interpretation = InterpretationRead(
            label=found.label,
            description=found.description,
            color=found.color,
        )

    return AssessmentRead(
        **_summary(assessment).model_dump(),
        responses=[ResponseItem.model_validate(r) for r in assessment.responses],
        interpretation=interpretation,
    )


def _invalid_test_type(exc: InvalidInstrumentError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(exc),
    )


@router.post(
    "",
    response_model=AssessmentCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_assessment(
    body: AssessmentCreate,
    user_id: CurrentUserId,
    service: Assessments,
) -> AssessmentCreateResponse:
    """Score and save a completed assessment.

    Scores are always computed server-side from the submitted responses.
    """
    try:
        assessment = await service.record(
            user_id=user_id,
            instrument_id=body.test_type,
            responses=[Response(question_id=r.question_id, answer=r.answer) for r in body.responses],
        )
    except InvalidInstrumentError as exc:
        raise _invalid_test_type(exc) from exc
    except MalformedResponseError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=exc.problems,
        ) from exc

    return AssessmentCreateResponse(
        message="Assessment saved successfully",
        assessment=AssessmentCreated(
            id=assessment.id,
            test_type=assessment.instrument_id,
            scores=_scores(assessment),
            completed_at=assessment.completed_at,
        ),
    )


@router.get("", response_model=AssessmentList)
async def list_assessments(
    user_id: CurrentUserId,
    service: Assessments,
    test_type: str | None = Query(default=None, alias="testType"),
) -> AssessmentList:
    """Get the user's assessment history, newest first."""
    assessments = await service.history(user_id, test_type)
    return AssessmentList(
        count=len(assessments),
        assessments=[_summary(a) for a in assessments],
    )


@router.get("/latest/{test_type}", response_model=AssessmentRead)
async def get_latest_assessment(
    test_type: str,
    user_id: CurrentUserId,
    service: Assessments,
) -> AssessmentRead:
    """Get the user's latest result for one instrument."""
    try:
        assessment = await service.latest(user_id, test_type)
    except InvalidInstrumentError as exc:
        raise _invalid_test_type(exc) from exc

    if assessment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No assessment found for this test type",
        )

    return _detail(assessment)


@router.get("/stats/summary", response_model=list[AssessmentStats])
async def get_assessment_stats(
    user_id: CurrentUserId,
    service: Assessments,
) -> list[AssessmentStats]:
    """Get per-instrument counts and latest results for the user."""
    return [
        AssessmentStats(
            test_type=s.instrument_id,
            count=s.count,
            latest_score=s.latest_score,
            latest_severity=s.latest_severity,
            latest_date=s.latest_date,
        )
        for s in await service.summary(user_id)
    ]


@router.get("/{assessment_id}", response_model=AssessmentRead)
async def get_assessment(
    assessment_id: str,
    user_id: CurrentUserId,
    service: Assessments,
) -> AssessmentRead:
    """Get one of the user's assessments with its interpretation."""
    assessment = await service.get(user_id, assessment_id)
    if assessment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assessment not found",
        )

    return _detail(assessment, with_interpretation=True)


@router.delete("/{assessment_id}", response_model=MessageResponse)
async def delete_assessment(
    assessment_id: str,
    user_id: CurrentUserId,
    service: Assessments,
) -> MessageResponse:
    """Delete one of the user's assessments."""
    if not await service.delete(user_id, assessment_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assessment not found",
        )

    return MessageResponse(message="Assessment deleted successfully")
