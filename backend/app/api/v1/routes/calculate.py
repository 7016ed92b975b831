"""
Endpoint Calculate.

POST /api/v1/calculate
    body: [["SFO", "ATL"], ["ATL", "EWR"]]
    → {"status": "success", "path": ["SFO", "EWR"]}

Ogni errore restituisce 400 con status "error", un messaggio generico per
categoria e l'ErrorKind preciso nel campo "error".
"""
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import TypeAdapter, ValidationError

from app.models.schemas import CalculateOut
from app.services.flight_path.base import (
    ErrorKind,
    PathResolutionError,
    SegmentValidationError,
)
from app.services.path_engine import find_flight_path

logger = logging.getLogger(__name__)

router = APIRouter()

# Lista di coppie [source, destination]; la forma delle coppie la verifica il validator
_RAW_PAIRS = TypeAdapter(list[list[str]])


def _error_response(message: str, kind: ErrorKind | None = None) -> JSONResponse:
    body = CalculateOut(status="error", message=message, error=kind)
    return JSONResponse(status_code=400, content=body.model_dump(mode="json", exclude_none=True))


@router.post("", response_model=CalculateOut, response_model_exclude_none=True)
async def calculate(request: Request):
    """To get the overall source and destination implied by unordered flight segments"""
    try:
        raw_pairs = _RAW_PAIRS.validate_json(await request.body())
    except ValidationError as exc:
        logger.warning("Error decoding request body: %s", exc.errors()[0]["msg"])
        return _error_response("Invalid JSON")

    try:
        itinerary = find_flight_path(raw_pairs)
    except SegmentValidationError as exc:
        logger.warning("Invalid flight segments: %s (%s)", exc, exc.kind.value)
        return _error_response("Invalid request format", exc.kind)
    except PathResolutionError as exc:
        logger.warning("Error finding flight path: %s (%s)", exc, exc.kind.value)
        return _error_response("Failed to find flight path", exc.kind)

    return CalculateOut(status="success", path=itinerary.path)
