"""
Segment Validator — normalizza le coppie grezze in Segment tipizzati.

Controlli per tratta, in ordine (il primo che fallisce interrompe tutto):
  1. coppia con esattamente due stringhe non vuote  → MALFORMED_SEGMENT
  2. entrambi i codici nel formato IATA [A-Z0-9]{3}  → INVALID_AIRPORT_CODE
  3. source != destination                          → SAME_SOURCE_AND_DESTINATION
Poi il controllo cross-segment sui duplicati         → DUPLICATE_SEGMENT
"""
from collections.abc import Iterable, Sequence

from app.services.flight_path.base import (
    AIRPORT_CODE_RE,
    ErrorKind,
    Segment,
    SegmentSet,
    SegmentValidationError,
)


def _check_segment(raw: Sequence[str]) -> Segment:
    if len(raw) != 2 or not raw[0] or not raw[1]:
        raise SegmentValidationError(ErrorKind.MALFORMED_SEGMENT)

    source, destination = raw
    if not AIRPORT_CODE_RE.match(source) or not AIRPORT_CODE_RE.match(destination):
        raise SegmentValidationError(ErrorKind.INVALID_AIRPORT_CODE)

    if source == destination:
        raise SegmentValidationError(ErrorKind.SAME_SOURCE_AND_DESTINATION)

    return Segment(source=source, destination=destination)


def validate(raw_pairs: Iterable[Sequence[str]]) -> SegmentSet:
    """
    Converte le coppie [source, destination] in un SegmentSet.

    Returns:
        tuple di Segment nello stesso ordine dell'input.

    Raises:
        SegmentValidationError: alla prima coppia non valida o duplicata.
    """
    raw_pairs = list(raw_pairs)
    if not raw_pairs:
        raise SegmentValidationError(ErrorKind.NO_SEGMENTS_PROVIDED)

    seen: set[str] = set()
    segments: list[Segment] = []
    for raw in raw_pairs:
        segment = _check_segment(raw)
        if segment.id in seen:
            raise SegmentValidationError(ErrorKind.DUPLICATE_SEGMENT)
        seen.add(segment.id)
        segments.append(segment)

    return tuple(segments)
