"""
Read access to the request log.

Entries are written by ``core.middleware.RequestLoggerMiddleware``;
this service only lists them, oldest first.
"""

from typing import List

from ..core.store import RequestLogStore
from ..schemas.request_log import RequestLogRead


class RequestLogService:
    """Service class for retrieving request logs."""

    def __init__(self, store: RequestLogStore) -> None:
        self.store = store

    async def list_logs(self) -> List[RequestLogRead]:
        return [RequestLogRead.model_validate(log) for log in self.store]
