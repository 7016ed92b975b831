"""
Flight Path Layer — tipi di dominio ed errori condivisi.

Il validator e il resolver usano solo queste classi: nessun dizionario grezzo
attraversa il confine tra i due componenti.
"""
import re
from dataclasses import dataclass
from enum import Enum

# An IATA airport code is a three-character alphanumeric geocode
AIRPORT_CODE_RE = re.compile(r"^[A-Z0-9]{3}$")


def segment_id(source: str, destination: str) -> str:
    """Chiave di unicità di una tratta (order-sensitive: SFOATL != ATLSFO)."""
    return f"{source}{destination}"


@dataclass(frozen=True)
class Segment:
    """Una singola tratta diretta Source → Destination."""
    source: str       # codice IATA (es. "SFO")
    destination: str  # codice IATA (es. "ATL")

    @property
    def id(self) -> str:
        return segment_id(self.source, self.destination)


# Tuple immutabile, ordine dell'input preservato
SegmentSet = tuple[Segment, ...]


@dataclass(frozen=True)
class Itinerary:
    """Origine e destinazione complessive implicate dalla catena di tratte."""
    source: str
    destination: str

    @property
    def path(self) -> list[str]:
        return [self.source, self.destination]


# ---------------------------------------------------------------------------
# Errori
# ---------------------------------------------------------------------------

class ErrorKind(str, Enum):
    # structural / input
    NO_SEGMENTS_PROVIDED = "no_segments_provided"
    MALFORMED_SEGMENT = "malformed_segment"
    INVALID_AIRPORT_CODE = "invalid_airport_code"
    SAME_SOURCE_AND_DESTINATION = "same_source_and_destination"
    DUPLICATE_SEGMENT = "duplicate_segment"
    # resolution
    NO_FLIGHT_PATH = "no_flight_path"
    DISCONNECTED_PATH = "disconnected_path"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.NO_SEGMENTS_PROVIDED: "at least one flight segment is required",
    ErrorKind.MALFORMED_SEGMENT: "flight should have source and destination",
    ErrorKind.INVALID_AIRPORT_CODE: "invalid airport code",
    ErrorKind.SAME_SOURCE_AND_DESTINATION: "source and destination airports must be different",
    ErrorKind.DUPLICATE_SEGMENT: "duplicate flight segment",
    ErrorKind.NO_FLIGHT_PATH: "failed to find flight path",
    ErrorKind.DISCONNECTED_PATH: "disconnected flights",
}


class ItineraryError(ValueError):
    """Errore terminale del calcolo: nessun retry, nessun risultato parziale."""

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        super().__init__(message or kind.message)


class SegmentValidationError(ItineraryError):
    """Input non valido (bad request)."""


class PathResolutionError(ItineraryError):
    """Tratte valide ma nessun itinerario unico (unresolvable)."""
