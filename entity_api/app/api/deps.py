"""FastAPI dependencies that build services bound to the app's store."""

from fastapi import Depends

from ..core.store import AppStore, get_store
from ..services.entity_service import EntityService
from ..services.request_log_service import RequestLogService


def get_entity_service(store: AppStore = Depends(get_store)) -> EntityService:
    return EntityService(store.entities)


def get_request_log_service(store: AppStore = Depends(get_store)) -> RequestLogService:
    return RequestLogService(store.requests)
