from pydantic import BaseModel

from app.services.flight_path.base import ErrorKind


# ---------------------------------------------------------------------------
# calculate answer (stessa forma per successo ed errore)
# ---------------------------------------------------------------------------

class CalculateOut(BaseModel):
    status: str                      # "success" | "error"
    path: list[str] | None = None    # [source, destination]
    message: str | None = None       # messaggio human-readable
    error: ErrorKind | None = None   # identità stabile dell'errore


class HealthOut(BaseModel):
    status: str
    env: str
