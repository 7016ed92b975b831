"""
Path Engine — pipeline completa per una singola richiesta.

  Step 1: validate() → SegmentSet (o SegmentValidationError)
  Step 2: resolve()  → Itinerary  (o PathResolutionError)

Tutto in memoria, nessuno stato condiviso tra richieste.
"""
import logging
from collections.abc import Sequence

from app.services.flight_path.base import Itinerary
from app.services.flight_path.resolver import resolve
from app.services.flight_path.validator import validate

logger = logging.getLogger(__name__)


def find_flight_path(raw_pairs: Sequence[Sequence[str]]) -> Itinerary:
    """Valida le coppie grezze e restituisce origine e destinazione del viaggio."""
    segments = validate(raw_pairs)
    itinerary = resolve(segments)
    logger.info(
        "Itinerario %s → %s risolto da %d tratte",
        itinerary.source, itinerary.destination, len(segments),
    )
    return itinerary
