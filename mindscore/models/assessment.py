"""Stored results of completed self-assessments."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from mindscore.db.base import Base, TimestampMixin, utc_now


class Assessment(Base, TimestampMixin):
    """A patient's scored submission of one screening instrument.

    Scores are computed by the scoring engine at submission time and
    stored alongside the raw responses so results remain reproducible.
    """

    __tablename__ = "assessments"
    __table_args__ = (
        Index(
            "ix_assessments_user_instrument_completed",
            "user_id",
            "instrument_id",
            "completed_at",
        ),
    )

    # Subject of the bearer token that submitted the assessment
    user_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
    )
    instrument_id: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
    )
    # List of {"questionId": int, "answer": int}
    responses: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )
    total_score: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )
    severity: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )
    percentage: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )
    completed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
        index=True,
    )
    instrument_version: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="1.0",
    )

    @property
    def scores(self) -> dict:
        return {
            "total": self.total_score,
            "severity": self.severity,
            "percentage": self.percentage,
        }

    def __repr__(self) -> str:
        return f"<Assessment {self.instrument_id}={self.total_score} ({self.severity})>"
