"""
Entity endpoints.

One router per entity kind, all built from the same register/get/list
handlers:

    POST /            register a record (201)
    GET  /            list every record of the kind
    GET  /{entity_id} get one record (the identifier may contain "/")
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status

from farm_ledger.api.deps import get_ledger
from farm_ledger.api.schemas.requests import RegisterRequest
from farm_ledger.api.schemas.responses import ErrorResponse, RecordListResponse
from farm_ledger.core.models import ENTITY_SCHEMAS, EntityKind
from farm_ledger.registry.ledger import FarmLedger

logger = logging.getLogger(__name__)

_ERROR_DESCRIPTIONS = {
    400: "Invalid identifier",
    404: "Record not found",
    500: "Stored record could not be decoded",
    503: "Ledger store unavailable",
}


def error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """OpenAPI error documentation for the given status codes."""
    return {
        code: {"model": ErrorResponse, "description": _ERROR_DESCRIPTIONS[code]}
        for code in status_codes
    }


def build_entity_router(kind: EntityKind, request_model: type[RegisterRequest]) -> APIRouter:
    """
    Build the router serving one entity kind.

    Args:
        kind: Entity kind served by the router
        request_model: Body schema for registration

    Returns:
        APIRouter with register, list and get endpoints
    """
    router = APIRouter()
    record_model = ENTITY_SCHEMAS[kind].model

    @router.post(
        "",
        response_model=record_model,
        response_model_exclude_none=True,
        status_code=status.HTTP_201_CREATED,
        responses=error_responses(400, 500, 503),
        summary=f"Register a {kind.value}",
    )
    def register(
        body: request_model,  # type: ignore[valid-type]
        ledger: FarmLedger = Depends(get_ledger),
    ) -> Any:
        attributes = body.model_dump(exclude={"id"}, exclude_none=True)
        record = ledger.registry_for(kind).register(body.id, **attributes)
        logger.info(f"Registered {kind.value} {record.id}")
        return record

    @router.get(
        "",
        response_model=RecordListResponse,
        responses=error_responses(500, 503),
        summary=f"List all {kind.value} records",
    )
    def list_all(ledger: FarmLedger = Depends(get_ledger)) -> RecordListResponse:
        records = ledger.registry_for(kind).list_all()
        return RecordListResponse(
            entity_type=kind.value,
            total=len(records),
            items=[record.model_dump(exclude_none=True) for record in records],
        )

    @router.get(
        "/{entity_id:path}",
        response_model=record_model,
        response_model_exclude_none=True,
        responses=error_responses(400, 404, 500, 503),
        summary=f"Get one {kind.value}",
    )
    def get_one(entity_id: str, ledger: FarmLedger = Depends(get_ledger)) -> Any:
        return ledger.registry_for(kind).get(entity_id)

    return router
