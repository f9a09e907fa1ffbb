"""
Router factory for descriptor-driven entities.

Every entity gets the same six endpoints under /api/{EntityName}:

    GET    /api/{E}                   list active rows
    GET    /api/{E}/{id}              one row, active or not
    POST   /api/{E}                   create (201, body = created row)
    PUT    /api/{E}/{id}              full-record replace
    DELETE /api/{E}/{id}              logical delete
    DELETE /api/{E}/persistent/{id}   physical delete

A business call that changes no row is answered with 404.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shared.infrastructure.db import get_db
from shared.utils.admin_schemas import MessageOutput
from shared.utils.exceptions import IdMismatchError, NotFoundError
from rest_api.services.base_service import EntityService
from rest_api.services.crud.descriptor import EntityDescriptor


def build_entity_router(descriptor: EntityDescriptor) -> APIRouter:
    """Build the CRUD router of one entity."""
    name = descriptor.entity_name
    dto = descriptor.dto

    router = APIRouter(prefix=f"/api/{name}", tags=[name])

    def get_service(db: Session = Depends(get_db)) -> EntityService:
        return EntityService(descriptor, db)

    @router.get("", response_model=list[dto])
    def list_entities(service: EntityService = Depends(get_service)):
        """List active rows."""
        return service.get_all()

    @router.get("/{entity_id}", response_model=dto)
    def get_entity(entity_id: int, service: EntityService = Depends(get_service)):
        """Get a row by id, including logically deleted ones."""
        return service.get_by_id(entity_id)

    @router.post("", response_model=dto, status_code=status.HTTP_201_CREATED)
    def create_entity(body: dto, service: EntityService = Depends(get_service)):
        """Create a row. The id in the body is ignored."""
        return service.create(body)

    @router.put("/{entity_id}", response_model=MessageOutput)
    def update_entity(
        entity_id: int,
        body: dto,
        service: EntityService = Depends(get_service),
    ) -> MessageOutput:
        """Replace every field of the row. Route and body ids must match."""
        if body.id != entity_id:
            raise IdMismatchError(entity_id, body.id, entity=name)

        if not service.update(body):
            raise NotFoundError(name, entity_id)
        return MessageOutput(message=f"{name} actualizado correctamente.")

    @router.delete("/{entity_id}", response_model=MessageOutput)
    def delete_entity(
        entity_id: int,
        service: EntityService = Depends(get_service),
    ) -> MessageOutput:
        """Logical delete: the row stays, marked inactive."""
        if not service.delete_logical(entity_id):
            raise NotFoundError(name, entity_id)
        return MessageOutput(message=f"{name} eliminado lógicamente.")

    @router.delete("/persistent/{entity_id}", response_model=MessageOutput)
    def delete_entity_persistent(
        entity_id: int,
        service: EntityService = Depends(get_service),
    ) -> MessageOutput:
        """Physical delete. Irreversible."""
        if not service.delete_persistent(entity_id):
            raise NotFoundError(name, entity_id)
        return MessageOutput(message=f"{name} eliminado permanentemente.")

    return router
