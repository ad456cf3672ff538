"""
Region API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response, status

from core.schemas import wire_response

from . import schemas, service

router = APIRouter()

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

REGION_ID_ERROR = "El ID de región debe ser mayor que cero."
LIMIT_ERROR = "El límite debe ser mayor que cero."


@router.get(
    "/api/v1/regions/{region_id}/top-overruns",
    response_model=list[schemas.RegionOverrunDto],
)
async def get_top_overruns(
    region_id: int,
    limit: int = DEFAULT_LIMIT,
) -> Response | list[schemas.RegionOverrunDto]:
    """
    Projects of a region with the largest budget overrun, NULL overruns last.
    """
    if region_id <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=REGION_ID_ERROR)
    if limit <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=LIMIT_ERROR)

    try:
        query = service.RegionOverrunsQuery(region_id=region_id, limit=limit)
        results = await service.get_top_overruns(query)
        # Unlike project costs, an empty ranking is reported as not found.
        if not results:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return wire_response([schemas.RegionOverrunDto.from_result(r) for r in results])
    except Exception as exc:
        logger.exception("top_overruns_failed region_id=%s limit=%s", region_id, limit)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error interno: {exc}",
        ) from exc
