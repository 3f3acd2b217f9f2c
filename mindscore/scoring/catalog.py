"""Instrument catalog.

The catalog is an explicit immutable mapping from instrument id to
definition. Application code uses ``default_catalog()``; tests and callers
with custom instruments can build their own ``InstrumentCatalog`` and pass
it to the scorer.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType

from mindscore.scoring.asrs import ASRS
from mindscore.scoring.dla20 import DLA20
from mindscore.scoring.errors import InstrumentDefinitionError, InvalidInstrumentError
from mindscore.scoring.gad7 import GAD7
from mindscore.scoring.instruments import Instrument
from mindscore.scoring.phq9 import PHQ9

logger = logging.getLogger(__name__)

BUILTIN_INSTRUMENTS: tuple[Instrument, ...] = (PHQ9, GAD7, ASRS, DLA20)


class InstrumentCatalog(Mapping[str, Instrument]):
    """Read-only lookup of instruments by id."""

    def __init__(self, instruments: Iterable[Instrument]) -> None:
        by_id: dict[str, Instrument] = {}
        for instrument in instruments:
            if instrument.id in by_id:
                raise InstrumentDefinitionError(
                    f"Duplicate instrument id: {instrument.id!r}"
                )
            instrument.validate()
            by_id[instrument.id] = instrument
        self._instruments = MappingProxyType(by_id)

    def __getitem__(self, instrument_id: str) -> Instrument:
        return self._instruments[instrument_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._instruments)

    def __len__(self) -> int:
        return len(self._instruments)

    def __repr__(self) -> str:
        return f"<InstrumentCatalog {list(self._instruments)}>"

    def ids(self) -> tuple[str, ...]:
        return tuple(self._instruments)

    def get_instrument(self, instrument_id: str) -> Instrument:
        """Resolve an instrument id.

        Raises:
            InvalidInstrumentError: If the id is not in the catalog.
        """
        try:
            return self._instruments[instrument_id]
        except KeyError:
            raise InvalidInstrumentError(instrument_id, self.ids()) from None


@lru_cache(maxsize=1)
def default_catalog() -> InstrumentCatalog:
    """Return the process-wide catalog of bundled instruments.

    Built on first use; ``lru_cache`` makes construction happen once.
    """
    catalog = InstrumentCatalog(BUILTIN_INSTRUMENTS)
    logger.debug(f"Loaded instrument catalog: {', '.join(catalog.ids())}")
    return catalog
