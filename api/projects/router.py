"""
Project cost API endpoints.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Query, Response, status

from core.schemas import wire_response

from . import schemas, service

router = APIRouter()

logger = logging.getLogger(__name__)

DATE_ORDER_ERROR = "La fecha inicial no puede ser mayor que la final."
PROJECT_ID_ERROR = "El ID de proyecto debe ser mayor que cero."


def _naive_utc(value: datetime) -> datetime:
    # Offset-aware bounds are shifted to UTC so mixed inputs stay comparable.
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


@router.get(
    "/api/v1/projects/{project_id}/costs",
    response_model=schemas.ProjectCostsDto,
)
async def get_project_costs(
    project_id: int,
    date_from: datetime = Query(..., alias="from"),
    date_to: datetime = Query(..., alias="to"),
) -> Response | schemas.ProjectCostsDto:
    """
    Total cost, top materials and monthly breakdown of a project in [from, to].
    """
    date_from = _naive_utc(date_from)
    date_to = _naive_utc(date_to)

    # Date order is checked first: a request breaking both rules reports the dates.
    if date_from > date_to:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DATE_ORDER_ERROR)
    if project_id <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=PROJECT_ID_ERROR)

    try:
        query = service.ProjectCostsQuery(project_id=project_id, date_from=date_from, date_to=date_to)
        result = await service.get_project_costs(query)
        if result is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return wire_response(schemas.ProjectCostsDto.from_result(result))
    except Exception as exc:
        logger.exception(
            "project_costs_failed project_id=%s from=%s to=%s", project_id, date_from, date_to
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error interno: {exc}",
        ) from exc
