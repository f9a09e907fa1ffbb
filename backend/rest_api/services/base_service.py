"""
Generic entity service for Clean Architecture.

One EntityService, parametrized by an EntityDescriptor, gives every entity
the same business contract:
- Validation before any store access
- DTO <-> entity mapping through the descriptor
- Logging of each step
- Translation of store faults into ExternalServiceError

Architecture:
    Router (thin) → EntityService (business rules) → EntityRepository (SQL) → table

Usage:
    from rest_api.services.base_service import EntityService
    from rest_api.services.domain import BRANCH

    service = EntityService(BRANCH, db)
    branch = service.create(BranchDTO(name="HQ", company_id=1))
    service.delete_logical(branch.id)
"""

from datetime import datetime, timezone
from typing import Any, Generic

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rest_api.models import Base
from rest_api.repositories import EntityRepository
from rest_api.services.crud.descriptor import DTOT, EntityDescriptor
from rest_api.services.crud.validation import require_positive_id, validate
from shared.config.logging import get_logger
from shared.utils.exceptions import ExternalServiceError, NotFoundError

logger = get_logger(__name__)

STORE_RESOURCE = "Base de datos"


def utc_now() -> datetime:
    """Current UTC time as a naive datetime (the columns are timezone-less)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class EntityService(Generic[DTOT]):
    """
    Business operations for one entity.

    get_by_id and the mutations load rows by id regardless of their active
    flag; only get_all filters on active.
    """

    def __init__(self, descriptor: EntityDescriptor[DTOT], db: Session):
        self._descriptor = descriptor
        self._db = db
        self._repo = EntityRepository(descriptor.model, db, joins=descriptor.display_joins)

    @property
    def entity_name(self) -> str:
        """Entity name used in messages and routes."""
        return self._descriptor.entity_name

    @property
    def repo(self) -> EntityRepository:
        """Repository for data access."""
        return self._repo

    # =========================================================================
    # Read Operations
    # =========================================================================

    def get_all(self) -> list[DTOT]:
        """All active rows as DTOs."""
        logger.info("Listing active entities", entity=self.entity_name)
        try:
            rows = self._repo.find_all_active()
        except SQLAlchemyError as e:
            raise self._store_fault(f"Error al obtener los registros de {self.entity_name}", e)

        logger.info("Active entities listed", entity=self.entity_name, count=len(rows))
        return [self.map_to_dto(row) for row in rows]

    def get_by_id(self, entity_id: int) -> DTOT:
        """
        Row by id as a DTO.

        Raises:
            ValidationError: id is not positive.
            NotFoundError: no row with that id.
            ExternalServiceError: the store failed.
        """
        require_positive_id(self.entity_name, entity_id)

        row = self._load(entity_id)
        self._log_labels(row)
        return self.map_to_dto(row)

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, dto: DTOT) -> DTOT:
        """
        Insert a new row and return it as stored, with its assigned id.

        The caller's id is ignored, active is forced to True and empty
        creation stamps are filled with the current time.
        """
        validate(self._descriptor, dto)

        entity = self.map_to_entity(dto)
        entity.active = True
        now = utc_now()
        for field in self._descriptor.stamp_on_create:
            if getattr(entity, field) is None:
                setattr(entity, field, now)

        values = self._descriptor.to_values(entity)
        try:
            new_id = self._repo.insert(values)
        except SQLAlchemyError as e:
            raise self._store_fault(f"Error al crear el {self.entity_name}", e)

        logger.info("Entity created", entity=self.entity_name, entity_id=new_id)
        return self.map_to_dto(self._load(new_id))

    def update(self, dto: DTOT) -> bool:
        """
        Full-record replace of the row identified by dto.id.

        Every visible field is overwritten, active included.
        Returns whether a row was changed.
        """
        validate(self._descriptor, dto)
        require_positive_id(self.entity_name, dto.id)

        self._load(dto.id)

        try:
            updated = self._repo.update(dto.id, self._descriptor.to_values(dto))
        except SQLAlchemyError as e:
            raise self._store_fault(f"Error al actualizar el {self.entity_name}", e)

        logger.info("Entity updated", entity=self.entity_name, entity_id=dto.id, updated=updated)
        return updated

    def delete_logical(self, entity_id: int) -> bool:
        """
        Mark the row inactive.

        Returns False when the row was already inactive.
        """
        require_positive_id(self.entity_name, entity_id)

        self._load(entity_id)

        try:
            deactivated = self._repo.deactivate(entity_id)
        except SQLAlchemyError as e:
            raise self._store_fault(f"Error al eliminar lógicamente el {self.entity_name}", e)

        if deactivated:
            logger.info("Entity deactivated", entity=self.entity_name, entity_id=entity_id)
        else:
            logger.warning("Entity already inactive", entity=self.entity_name, entity_id=entity_id)
        return deactivated

    def delete_persistent(self, entity_id: int) -> bool:
        """Physically delete the row. Irreversible."""
        require_positive_id(self.entity_name, entity_id)

        self._load(entity_id)

        try:
            deleted = self._repo.delete(entity_id)
        except SQLAlchemyError as e:
            raise self._store_fault(f"Error al eliminar el {self.entity_name}", e)

        logger.info("Entity deleted", entity=self.entity_name, entity_id=entity_id, deleted=deleted)
        return deleted

    # =========================================================================
    # Mapping
    # =========================================================================

    def map_to_entity(self, dto: DTOT) -> Base:
        return self._descriptor.map_to_entity(dto)

    def map_to_dto(self, source: Any) -> DTOT:
        return self._descriptor.map_to_dto(source)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _load(self, entity_id: int) -> Any:
        """Fetch the row or raise NotFoundError."""
        try:
            row = self._repo.find_by_id(entity_id)
        except SQLAlchemyError as e:
            raise self._store_fault(f"Error al obtener el {self.entity_name}", e)

        if row is None:
            raise NotFoundError(self.entity_name, entity_id)
        return row

    def _log_labels(self, row: Any) -> None:
        if self._descriptor.display_joins:
            logger.debug(
                "Entity loaded",
                entity=self.entity_name,
                entity_id=row["id"],
                **{join.label: row[join.label] for join in self._descriptor.display_joins},
            )

    def _store_fault(self, detail: str, error: SQLAlchemyError) -> ExternalServiceError:
        return ExternalServiceError(
            STORE_RESOURCE,
            detail,
            cause=error,
            entity=self.entity_name,
        )
