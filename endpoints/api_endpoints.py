from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from endpoints.models import DeleteResponse, ErrorResponse
from persistence.repositories import AsyncResourceRepository
from persistence.schema import Record

router = APIRouter(prefix="/api", tags=["api"], responses={404: {"model": ErrorResponse}})
logger = logging.getLogger(__name__)


def get_repo(request: Request) -> AsyncResourceRepository:
    return request.app.state.repo


def _log_request(request: Request, **fields: Any) -> None:
    if request.app.state.settings.debug_log_requests:
        logger.info("API %s %s %s", request.method, request.url.path, fields or "")


@router.get("/{resource}")
async def list_resource(
    resource: str,
    request: Request,
    repo: AsyncResourceRepository = Depends(get_repo),
) -> Any:
    _log_request(request)
    return await repo.list_items(resource)


@router.get("/{resource}/{item_id}")
async def get_item(
    resource: str,
    item_id: str,
    request: Request,
    repo: AsyncResourceRepository = Depends(get_repo),
) -> Any:
    _log_request(request)
    return await repo.get_item(resource, item_id)


@router.post("/{resource}")
async def create_item(
    resource: str,
    request: Request,
    payload: dict[str, Any] = Body(...),
    repo: AsyncResourceRepository = Depends(get_repo),
) -> Record:
    _log_request(request, keys=sorted(payload))
    return await repo.create_item(resource, payload)


# Registered before the generic PUT so the whole-singleton replace is explicit.
@router.put("/activeOrders")
async def replace_active_orders(
    request: Request,
    payload: dict[str, Any] = Body(...),
    repo: AsyncResourceRepository = Depends(get_repo),
) -> Record:
    _log_request(request, keys=sorted(payload))
    return await repo.replace_active_orders(payload)


@router.put("/{resource}/{item_id}")
async def update_item(
    resource: str,
    item_id: str,
    request: Request,
    payload: dict[str, Any] = Body(...),
    repo: AsyncResourceRepository = Depends(get_repo),
) -> Record:
    _log_request(request, keys=sorted(payload))
    return await repo.update_item(resource, item_id, payload)


@router.delete("/{resource}/{item_id}", response_model=DeleteResponse)
async def delete_item(
    resource: str,
    item_id: str,
    request: Request,
    repo: AsyncResourceRepository = Depends(get_repo),
) -> dict[str, Any]:
    _log_request(request)
    return await repo.delete_item(resource, item_id)
