"""Exceptions raised by the scoring engine."""


class ScoringError(Exception):
    """Base class for scoring errors."""


class InvalidInstrumentError(ScoringError, LookupError):
    """The requested instrument id has no catalog entry."""

    def __init__(self, instrument_id: str, available: tuple[str, ...] = ()) -> None:
        self.instrument_id = instrument_id
        self.available = available
        message = f"Invalid test type: {instrument_id!r}"
        if available:
            message += f". Must be one of: {', '.join(available)}"
        super().__init__(message)


class MalformedResponseError(ScoringError, ValueError):
    """Responses reference unknown questions or use off-scale answers.

    Only raised when strict validation is requested.
    """

    def __init__(self, instrument_id: str, problems: list[str]) -> None:
        self.instrument_id = instrument_id
        self.problems = problems
        super().__init__(
            f"Malformed responses for {instrument_id}: {'; '.join(problems)}"
        )


class InstrumentDefinitionError(ScoringError):
    """An instrument definition breaks a catalog invariant."""
