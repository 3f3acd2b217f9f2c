"""Assessment service: score, store and query patient self-assessments."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mindscore.core.config import settings
from mindscore.core.logging import audit_logger
from mindscore.models.assessment import Assessment
from mindscore.scoring import InstrumentCatalog, Response, calculate_score, default_catalog
from mindscore.scoring.engine import ResponseLike, to_response

logger = logging.getLogger(__name__)


@dataclass
class InstrumentStats:
    """Summary of a user's assessments for one instrument."""
    instrument_id: str
    count: int
    latest_score: int
    latest_severity: str
    latest_date: datetime


class AssessmentService:
    """Service for recording and retrieving scored assessments."""

    def __init__(
        self,
        session: AsyncSession,
        catalog: InstrumentCatalog | None = None,
    ) -> None:
        self.session = session
        self.catalog = catalog if catalog is not None else default_catalog()

    async def record(
        self,
        user_id: str,
        instrument_id: str,
        responses: Iterable[ResponseLike],
        strict: bool | None = None,
        completed_at: datetime | None = None,
    ) -> Assessment:
        """Score a submission and store it for the user.

        Args:
            user_id: Owner of the assessment
            instrument_id: Catalog id of the instrument taken
            responses: Submitted answers
            strict: Validate answers before scoring (defaults to settings)
            completed_at: Completion time (defaults to now)

        Returns:
            The persisted Assessment

        Raises:
            InvalidInstrumentError: If the instrument id is unknown
            MalformedResponseError: In strict mode, on undefined answers
        """
        if strict is None:
            strict = settings.strict_scoring

        parsed: list[Response] = [to_response(r) for r in responses]
        result = calculate_score(instrument_id, parsed, catalog=self.catalog, strict=strict)

        assessment = Assessment(
            user_id=user_id,
            instrument_id=instrument_id,
            responses=[{"questionId": r.question_id, "answer": r.answer} for r in parsed],
            total_score=result.total,
            severity=result.severity,
            percentage=result.percentage,
            instrument_version=settings.instrument_version,
        )
        if completed_at is not None:
            assessment.completed_at = completed_at

        self.session.add(assessment)
        await self.session.commit()
        await self.session.refresh(assessment)

        logger.info(
            f"Recorded {instrument_id} assessment {assessment.id}: "
            f"total={result.total} severity={result.severity}",
            extra={"instrument_id": instrument_id, "user_id": user_id},
        )

        audit_logger.log(
            action="assessment.create",
            user_id=user_id,
            entity_type="assessment",
            entity_id=assessment.id,
            metadata={"instrument_id": instrument_id, "severity": result.severity},
        )
        return assessment

    async def history(
        self,
        user_id: str,
        instrument_id: str | None = None,
    ) -> list[Assessment]:
        """List the user's assessments, newest first."""
        query = select(Assessment).where(Assessment.user_id == user_id)
        if instrument_id:
            query = query.where(Assessment.instrument_id == instrument_id)
        query = query.order_by(Assessment.completed_at.desc(), Assessment.created_at.desc())

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def latest(self, user_id: str, instrument_id: str) -> Assessment | None:
        """Get the user's most recent assessment for an instrument.

        Raises:
            InvalidInstrumentError: If the instrument id is unknown
        """
        self.catalog.get_instrument(instrument_id)

        result = await self.session.execute(
            select(Assessment)
            .where(Assessment.user_id == user_id)
            .where(Assessment.instrument_id == instrument_id)
            .order_by(Assessment.completed_at.desc(), Assessment.created_at.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get(self, user_id: str, assessment_id: str) -> Assessment | None:
        """Get an assessment by id, only if it belongs to the user."""
        try:
            UUID(assessment_id)
        except ValueError:
            return None

        result = await self.session.execute(
            select(Assessment)
            .where(Assessment.id == assessment_id)
            .where(Assessment.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def delete(self, user_id: str, assessment_id: str) -> bool:
        """Delete the user's assessment.

        Returns:
            True if deleted, False if not found or not owned by the user
        """
        assessment = await self.get(user_id, assessment_id)
        if assessment is None:
            return False

        await self.session.delete(assessment)
        await self.session.commit()

        audit_logger.log(
            action="assessment.delete",
            user_id=user_id,
            entity_type="assessment",
            entity_id=assessment_id,
            metadata={"instrument_id": assessment.instrument_id},
        )
        return True

    async def summary(self, user_id: str) -> list[InstrumentStats]:
        """Summarize the user's assessments per instrument.

        Returns:
            One entry per instrument taken, in catalog order
        """
        stats: dict[str, InstrumentStats] = {}
        for assessment in await self.history(user_id):
            entry = stats.get(assessment.instrument_id)
            if entry is None:
                # History is newest first, so the first row seen is the latest
                stats[assessment.instrument_id] = InstrumentStats(
                    instrument_id=assessment.instrument_id,
                    count=1,
                    latest_score=assessment.total_score,
                    latest_severity=assessment.severity,
                    latest_date=assessment.completed_at,
                )
            else:
                entry.count += 1

        order = {instrument_id: i for i, instrument_id in enumerate(self.catalog.ids())}
        return sorted(stats.values(), key=lambda s: order.get(s.instrument_id, len(order)))
