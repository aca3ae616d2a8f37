"""
Health endpoint for API v1.

Reports whether the SQLite database can be reached.  Intended for
container readiness probes.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from catalog_api.app.core.db import ping
from catalog_api.app.schemas.common import MessageResponse

router = APIRouter()


@router.get(
    "",
    response_model=MessageResponse,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": MessageResponse}},
)
async def health():
    if not ping():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"message": "database unavailable"},
        )
    return MessageResponse(message="ok")
