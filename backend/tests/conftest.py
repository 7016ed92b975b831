"""
Fixture condivise per la test suite FlightPath.

Il core è puro (nessun I/O): solo l'API usa un client httpx sopra
ASGITransport, senza server reale.
"""
import httpx
import pytest

from app.main import app
from app.services.flight_path.base import Segment


def make_segments(*pairs: tuple[str, str]) -> tuple[Segment, ...]:
    """Costruisce un SegmentSet da coppie (source, destination)."""
    return tuple(Segment(source=src, destination=dst) for src, dst in pairs)


# ---------------------------------------------------------------------------
# Insiemi di tratte di riferimento
# ---------------------------------------------------------------------------

@pytest.fixture
def multi_hop_segments():
    """SFO → ATL → GSO → IND → EWR, in ordine sparso."""
    return make_segments(("IND", "EWR"), ("SFO", "ATL"), ("GSO", "IND"), ("ATL", "GSO"))


@pytest.fixture
def cycle_segments():
    """Anello chiuso SFO → ATL → EWR → SFO."""
    return make_segments(("SFO", "ATL"), ("ATL", "EWR"), ("EWR", "SFO"))


@pytest.fixture
def disconnected_segments():
    return make_segments(("SFO", "ATL"), ("EWR", "JFK"))


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------

@pytest.fixture
async def client():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
