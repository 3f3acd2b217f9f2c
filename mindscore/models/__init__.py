"""Database models for MindScore."""

from mindscore.models.assessment import Assessment

__all__ = ["Assessment"]
