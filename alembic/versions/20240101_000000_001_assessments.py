"""Assessments table.

Revision ID: 001
Revises:
Create Date: 2024-01-01 00:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the assessments table."""
    op.create_table(
        "assessments",
        sa.Column("id", sa.Uuid(as_uuid=False), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("instrument_id", sa.String(50), nullable=False),
        sa.Column("responses", sa.JSON(), nullable=False),
        sa.Column("total_score", sa.Integer(), nullable=False),
        sa.Column("severity", sa.String(50), nullable=False),
        sa.Column("percentage", sa.Integer(), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("instrument_version", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_assessments"),
    )
    op.create_index("ix_assessments_user_id", "assessments", ["user_id"])
    op.create_index("ix_assessments_instrument_id", "assessments", ["instrument_id"])
    op.create_index("ix_assessments_completed_at", "assessments", ["completed_at"])
    op.create_index(
        "ix_assessments_user_instrument_completed",
        "assessments",
        ["user_id", "instrument_id", "completed_at"],
    )


def downgrade() -> None:
    """Drop the assessments table."""
    op.drop_index("ix_assessments_user_instrument_completed", table_name="assessments")
    op.drop_index("ix_assessments_completed_at", table_name="assessments")
    op.drop_index("ix_assessments_instrument_id", table_name="assessments")
    op.drop_index("ix_assessments_user_id", table_name="assessments")
    op.drop_table("assessments")
