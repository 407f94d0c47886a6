"""
Generic CRUD routes shared by every MediaLibs resource.

`build_resource_router` wires one repository to the five collection/item
endpoints. Not-found and empty results answer 204 with no body.
"""
import logging
from typing import Any, List, Type

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from db import get_session
from repositories import DuplicateEntityError, ResourceRepository

logger = logging.getLogger(__name__)

SERVICES_PREFIX = "/api/v1/services"


class CamelModel(BaseModel):
    """Schema base: camelCase on the wire, snake_case accepted too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def item_location(base_path: str, entity_id: Any) -> str:
    return f"{base_path}/{entity_id}"


def no_content() -> Response:
    return Response(status_code=204)


def build_resource_router(
    base_path: str,
    repo: ResourceRepository,
    entity_class: Type[Any],
    payload_model: Type[BaseModel],
    response_model: Type[BaseModel],
) -> APIRouter:
    """
    Build the list/get/create/update/delete routes for one resource.

    Args:
        base_path: Mount path of the resource, used for Location headers
        repo: Store the handlers read from and write to
        entity_class: Domain dataclass built from a validated payload
        payload_model: Request body schema for create and update
        response_model: Response body schema

    Returns:
        Router to include under `base_path`
    """
    router = APIRouter()
    label = base_path.rsplit("/", 1)[-1]

    def to_response(entity: Any) -> BaseModel:
        return response_model.model_validate(entity)

    @router.get("/", response_model=List[response_model])
    async def list_resources(session: Session = Depends(get_session)):
        logger.info("Get all %s on persistent system", label)
        entities = repo.list(session)
        if not entities:
            logger.info("List of %s is empty", label)
            return no_content()
        return [to_response(e) for e in entities]

    @router.get("/{entity_id}", response_model=response_model)
    async def get_resource(entity_id: int, session: Session = Depends(get_session)):
        entity = repo.get(session, entity_id)
        if entity is None:
            logger.info("%s %s not found", label, entity_id)
            return no_content()
        return to_response(entity)

    @router.post("/", response_model=response_model, status_code=201)
    async def create_resource(
        payload: payload_model,
        response: Response,
        session: Session = Depends(get_session),
    ):
        entity = entity_class(**payload.model_dump())
        logger.info("Insert %s %s", label, entity)
        if repo.get_by_natural_key(session, entity) is not None:
            logger.info("%s already found on system", label)
            raise HTTPException(status_code=409, detail=f"{label} already exists")
        try:
            created = repo.create(session, entity)
        except DuplicateEntityError as e:
            raise HTTPException(status_code=409, detail=f"{label} already exists") from e
        response.headers["Location"] = item_location(base_path, created.id)
        return to_response(created)

    @router.put("/{entity_id}", response_model=response_model)
    async def update_resource(
        entity_id: int,
        payload: payload_model,
        response: Response,
        session: Session = Depends(get_session),
    ):
        logger.info("Update %s %s", label, entity_id)
        entity = entity_class(**payload.model_dump())
        try:
            updated = repo.save(session, entity_id, entity)
        except DuplicateEntityError as e:
            raise HTTPException(status_code=409, detail=f"{label} already exists") from e
        if updated is None:
            logger.info("%s %s not found on system", label, entity_id)
            return no_content()
        logger.info("%s %s updated on system", label, updated)
        response.headers["Location"] = item_location(base_path, entity_id)
        return to_response(updated)

    @router.delete("/{entity_id}")
    async def delete_resource(entity_id: int, session: Session = Depends(get_session)):
        logger.info("Delete %s with id %s", label, entity_id)
        if not repo.delete(session, entity_id):
            logger.info("%s %s not found", label, entity_id)
            return no_content()
        logger.info("%s %s is now deleted", label, entity_id)
        return Response(status_code=200, headers={"Location": f"{base_path}/"})

    return router
