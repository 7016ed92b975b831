"""
Path Resolver — ricostruisce origine e destinazione complessive.

Due fasi separate, testabili singolarmente:
  Fase 1: find_candidate()            → endpoint candidati dal bilancio dei gradi (O(n))
  Fase 2: has_disconnected_segments() → BFS dal candidato source, verifica che
                                        tutte le tratte formino una sola catena

Il bilancio da solo non distingue "una catena con più scali" da "più catene
disgiunte che si compensano": la BFS è il controllo di correttezza.
"""
import logging
from collections import deque
from collections.abc import Sequence

from app.services.flight_path.base import (
    ErrorKind,
    Itinerary,
    PathResolutionError,
    Segment,
    segment_id,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Fase 1 — bilancio dei gradi
# ---------------------------------------------------------------------------

def degree_balance(segments: Sequence[Segment]) -> dict[str, int]:
    """Partenze meno arrivi per ogni aeroporto."""
    balance: dict[str, int] = {}
    for segment in segments:
        balance[segment.source] = balance.get(segment.source, 0) + 1
        balance[segment.destination] = balance.get(segment.destination, 0) - 1
    return balance


def find_candidate(segments: Sequence[Segment]) -> Itinerary | None:
    """
    Una catena valida parte dall'unico aeroporto con più partenze che arrivi
    e finisce nell'unico con più arrivi che partenze; gli scali intermedi
    hanno bilancio zero.

    A parità di ruolo vince il codice lessicograficamente più piccolo, così
    il risultato non dipende dall'ordine dell'input.

    Returns:
        Itinerary candidato (da verificare con has_disconnected_segments)
        oppure None se manca un aeroporto con bilancio positivo o negativo
        (es. tratte che formano solo anelli chiusi) o se un aeroporto ha
        bilancio oltre ±1 (la catena si dirama).
    """
    balance = degree_balance(segments)
    if any(abs(count) > 1 for count in balance.values()):
        return None

    source = min((code for code, count in balance.items() if count > 0), default=None)
    destination = min((code for code, count in balance.items() if count < 0), default=None)

    if source is None or destination is None:
        return None
    return Itinerary(source=source, destination=destination)


# ---------------------------------------------------------------------------
# Fase 2 — verifica di connettività
# ---------------------------------------------------------------------------

def _is_single_direct_segment(candidate: Itinerary, segment_ids: set[str], total: int) -> bool:
    # Il candidato coincide con una tratta diretta ma ci sono altre tratte.
    # Rifiuta anche percorsi reali che ripassano dal source
    # (AAA→CCC→AAA→BBB): comportamento mantenuto così com'è.
    return total > 1 and segment_id(candidate.source, candidate.destination) in segment_ids


def _has_several_chains(segments: Sequence[Segment]) -> bool:
    # Più di un inizio e una fine: servono più catene per coprire le tratte
    unbalanced = [code for code, count in degree_balance(segments).items() if count != 0]
    return len(unbalanced) > 2


def has_disconnected_segments(candidate: Itinerary, segments: Sequence[Segment]) -> bool:
    """
    True se le tratte non formano un unico percorso continuo da
    candidate.source a candidate.destination.

    BFS dal source lungo le tratte dirette. La lista completa viene scandita
    una volta per ogni aeroporto estratto dalla coda: O(V·E), sufficiente
    per decine di tratte.
    """
    src, dst = candidate.source, candidate.destination

    if len(segments) == 1:
        only = segments[0]
        return not (
            (only.source == src and only.destination == dst)
            or (only.source == dst and only.destination == src)
        )

    segment_ids = {s.id for s in segments}
    visited: set[str] = set()
    traversed = 0
    queue = deque([src])

    while queue:
        current = queue.popleft()
        if current in visited:
            continue

        for segment in segments:
            if segment.source != current:
                continue
            traversed += 1
            if segment.destination not in visited:
                queue.append(segment.destination)

        visited.add(current)

    if dst not in visited:
        return True
    if _is_single_direct_segment(candidate, segment_ids, len(segments)):
        return True
    if _has_several_chains(segments):
        return True
    # Ogni tratta deve partire da un aeroporto raggiunto: un anello
    # bilanciato e disgiunto non verrebbe mai attraversato.
    return traversed != len(segments)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def resolve(segments: Sequence[Segment]) -> Itinerary:
    """
    Risolve l'itinerario implicato da un SegmentSet validato.

    Raises:
        PathResolutionError: NO_FLIGHT_PATH se il bilancio non produce
            endpoint, DISCONNECTED_PATH se le tratte non formano una sola catena.
    """
    candidate = find_candidate(segments)
    if candidate is None:
        logger.debug("Nessun candidato dal bilancio dei gradi (%d tratte)", len(segments))
        raise PathResolutionError(ErrorKind.NO_FLIGHT_PATH)

    logger.debug("Candidato %s → %s", candidate.source, candidate.destination)

    if has_disconnected_segments(candidate, segments):
        raise PathResolutionError(ErrorKind.DISCONNECTED_PATH)

    return candidate
