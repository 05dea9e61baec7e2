"""
Request log endpoint.

Lists every request the service has completed since start‑up, in the
order it completed them.
"""

from typing import List

from fastapi import APIRouter, Depends

from ..deps import get_request_log_service
from ...schemas.request_log import RequestLogRead
from ...services.request_log_service import RequestLogService

router = APIRouter()


@router.get("/request", response_model=List[RequestLogRead])
async def list_requests(
    service: RequestLogService = Depends(get_request_log_service),
) -> List[RequestLogRead]:
    """Obtiene todas las solicitudes recibidas, de la más antigua a la más reciente."""
    return await service.list_logs()
