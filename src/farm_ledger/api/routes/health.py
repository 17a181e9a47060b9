"""
Health check endpoints.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response, status

from farm_ledger import __version__
from farm_ledger.api.deps import get_ledger
from farm_ledger.api.schemas.responses import HealthResponse
from farm_ledger.registry.ledger import FarmLedger

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(response: Response, ledger: FarmLedger = Depends(get_ledger)) -> HealthResponse:
    """
    Report whether the ledger store answers reads.

    Returns 503 with status "unhealthy" when the store does not respond.
    """
    healthy = ledger.store.ping()
    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(
        status="healthy" if healthy else "unhealthy",
        version=__version__,
        store_backend=ledger.store.backend_name,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
