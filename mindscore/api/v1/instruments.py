"""Instrument catalog and stateless scoring endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Request, status

from mindscore.api.deps import Catalog, get_request_id
from mindscore.core.config import settings
from mindscore.schemas.assessment import (
    AnswerOptionRead,
    InstrumentRead,
    InstrumentSummary,
    InterpretationRead,
    QuestionRead,
    ScoreRequest,
    ScoreResponse,
    SeverityBandRead,
)
from mindscore.scoring import (
    Instrument,
    InvalidInstrumentError,
    MalformedResponseError,
    Response,
    calculate_score,
    interpret,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/instruments", tags=["instruments"])


def _summary(instrument: Instrument) -> InstrumentSummary:
    return InstrumentSummary(
        id=instrument.id,
        name=instrument.name,
        full_name=instrument.full_name,
        description=instrument.description,
        question_count=instrument.question_count,
        estimated_time=instrument.estimated_time,
    )


def _resolve(catalog: Catalog, instrument_id: str) -> Instrument:
    try:
        return catalog.get_instrument(instrument_id)
    except InvalidInstrumentError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


@router.get("", response_model=list[InstrumentSummary])
async def list_instruments(catalog: Catalog) -> list[InstrumentSummary]:
    """List the available screening instruments."""
    return [_summary(instrument) for instrument in catalog.values()]


@router.get("/{instrument_id}", response_model=InstrumentRead)
async def get_instrument(instrument_id: str, catalog: Catalog) -> InstrumentRead:
    """Get an instrument's questions, answer scale and severity bands."""
    instrument = _resolve(catalog, instrument_id)

    return InstrumentRead(
        **_summary(instrument).model_dump(),
        questions=[QuestionRead(id=q.id, text=q.text) for q in instrument.questions],
        answer_options=[
            AnswerOptionRead(label=o.label, value=o.value)
            for o in instrument.answer_options
        ],
        max_score=instrument.max_score,
        severity_bands=[
            SeverityBandRead(name=b.name, min=b.min, max=b.max)
            for b in instrument.severity_bands
        ],
    )


@router.post("/{instrument_id}/score", response_model=ScoreResponse)
async def score_instrument(
    instrument_id: str,
    body: ScoreRequest,
    catalog: Catalog,
    request: Request,
) -> ScoreResponse:
    """Score a submission without storing it."""
    instrument = _resolve(catalog, instrument_id)
    strict = settings.strict_scoring if body.strict is None else body.strict

    try:
        result = calculate_score(
            instrument.id,
            [Response(question_id=r.question_id, answer=r.answer) for r in body.responses],
            catalog=catalog,
            strict=strict,
        )
    except MalformedResponseError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=exc.problems,
        ) from exc

    logger.info(
        f"Scored {instrument.id}: total={result.total} severity={result.severity}",
        extra={"instrument_id": instrument.id, "request_id": get_request_id(request)},
    )

    interpretation = interpret(result.severity)
    return ScoreResponse(
        instrument_id=instrument.id,
        max_score=instrument.max_score,
        total=result.total,
        severity=result.severity,
        percentage=result.percentage,
        interpretation=InterpretationRead(
            label=interpretation.label,
            description=interpretation.description,
            color=interpretation.color,
        ),
    )
