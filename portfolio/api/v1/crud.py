# portfolio/api/v1/crud.py
"""
Router factory for the content entities.

Every entity exposes the same five endpoints; reads are public and writes
require a session cookie.
"""

from typing import Callable, Type

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from portfolio.api.response import success_response
from portfolio.middleware.auth import get_current_user
from portfolio.services.entity_service import EntityService


def build_crud_router(
    singular: str,
    plural: str,
    request_model: Type[BaseModel],
    get_service: Callable[..., EntityService],
) -> APIRouter:
    router = APIRouter()
    label = singular.capitalize()

    @router.get("", summary=f"List {plural}")
    async def list_entities(service: EntityService = Depends(get_service)):
        items = await service.get_all()
        return success_response(f"{plural.capitalize()} retrieved successfully", items)

    @router.get("/{entity_id}", summary=f"Get {singular}")
    async def get_entity(entity_id: int, service: EntityService = Depends(get_service)):
        item = await service.get_by_id(entity_id)
        return success_response(f"{label} retrieved successfully", item)

    @router.post(
        "",
        status_code=status.HTTP_201_CREATED,
        dependencies=[Depends(get_current_user)],
        summary=f"Create {singular}",
    )
    async def create_entity(payload: request_model, service: EntityService = Depends(get_service)):
        item = await service.create(payload)
        return success_response(f"{label} created successfully", item, status.HTTP_201_CREATED)

    @router.put("/{entity_id}", dependencies=[Depends(get_current_user)], summary=f"Update {singular}")
    async def update_entity(
        entity_id: int,
        payload: request_model,
        service: EntityService = Depends(get_service),
    ):
        item = await service.update(entity_id, payload)
        return success_response(f"{label} updated successfully", item)

    @router.delete("/{entity_id}", dependencies=[Depends(get_current_user)], summary=f"Delete {singular}")
    async def delete_entity(entity_id: int, service: EntityService = Depends(get_service)):
        await service.delete(entity_id)
        return success_response(f"{label} deleted successfully")

    return router
