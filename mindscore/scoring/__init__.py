"""Scoring engine for mental-health screening instruments."""

from mindscore.scoring.catalog import BUILTIN_INSTRUMENTS, InstrumentCatalog, default_catalog
from mindscore.scoring.engine import (
    Response,
    ScoreResult,
    calculate_score,
    severity_for,
    validate_responses,
)
from mindscore.scoring.errors import (
    InstrumentDefinitionError,
    InvalidInstrumentError,
    MalformedResponseError,
    ScoringError,
)
from mindscore.scoring.instruments import AnswerOption, Instrument, Question, SeverityBand
from mindscore.scoring.interpretation import Interpretation, interpret

__all__ = [
    "AnswerOption",
    "BUILTIN_INSTRUMENTS",
    "Instrument",
    "InstrumentCatalog",
    "InstrumentDefinitionError",
    "Interpretation",
    "InvalidInstrumentError",
    "MalformedResponseError",
    "Question",
    "Response",
    "ScoreResult",
    "ScoringError",
    "SeverityBand",
    "calculate_score",
    "default_catalog",
    "interpret",
    "severity_for",
    "validate_responses",
]
