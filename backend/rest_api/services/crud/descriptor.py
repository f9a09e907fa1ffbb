"""
Per-entity declaration consumed by the generic CRUD layer.

One EntityDescriptor replaces a hand-written repository/service/controller
triad: it names the ORM model, the DTO schema, the visible fields, the
validation rules, the display joins and the creation stamps of an entity.

Usage:
    BRANCH = EntityDescriptor(
        entity_name="Branch",
        model=Branch,
        dto=BranchDTO,
        fields=("company_id", "name", "address", ...),
        required_text=("name",),
        display_joins=(DisplayJoin(Company, "company_id", "company_name"),),
    )
"""

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

from pydantic import BaseModel

from rest_api.models.base import Base


DTOT = TypeVar("DTOT", bound=BaseModel)

# Columns every entity carries besides its own fields
COMMON_FIELDS = ("id", "active")


@dataclass(frozen=True)
class DisplayJoin:
    """
    Read-only label pulled from a referenced table.

    The label rides along in query results for logging and reporting;
    it is never copied into the DTO.
    """

    target: type[Base]
    foreign_key: str  # Column on the entity table
    label: str  # Result key, e.g. "company_name"
    column: str = "name"  # Column on the target table


@dataclass(frozen=True)
class EntityDescriptor(Generic[DTOT]):
    """Declarative description of one CRUD entity."""

    entity_name: str
    model: type[Base]
    dto: type[DTOT]
    fields: tuple[str, ...]

    # Validation: text that must be non-blank, ids that must be > 0
    required_text: tuple[str, ...] = ()
    positive_ids: tuple[str, ...] = ()

    display_joins: tuple[DisplayJoin, ...] = ()

    # Timestamps filled with the current time on create when left empty
    stamp_on_create: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        columns = set(self.model.__table__.columns.keys())
        dto_fields = set(self.dto.model_fields)

        for name in COMMON_FIELDS + self.fields:
            if name not in columns:
                raise ValueError(f"{self.entity_name}: column '{name}' not in {self.model.__tablename__}")
            if name not in dto_fields:
                raise ValueError(f"{self.entity_name}: field '{name}' not in {self.dto.__name__}")

        for name in self.required_text + self.positive_ids + self.stamp_on_create:
            if name not in self.fields:
                raise ValueError(f"{self.entity_name}: rule on undeclared field '{name}'")

        for join in self.display_joins:
            if join.foreign_key not in columns:
                raise ValueError(f"{self.entity_name}: join key '{join.foreign_key}' not a column")

    @property
    def visible_fields(self) -> tuple[str, ...]:
        """id, active and the entity fields, in declaration order."""
        return COMMON_FIELDS + self.fields

    # =========================================================================
    # Mapping
    # =========================================================================

    def map_to_entity(self, dto: DTOT) -> Base:
        """Build an ORM instance carrying every visible field of the DTO."""
        return self.model(**{name: getattr(dto, name) for name in self.visible_fields})

    def map_to_dto(self, source: Mapping[str, Any] | Base) -> DTOT:
        """
        Build a DTO from a result row mapping or an ORM instance.

        Only visible fields are read, so joined labels never leak into the DTO.
        """
        if isinstance(source, Mapping):
            values = {name: source[name] for name in self.visible_fields}
        else:
            values = {name: getattr(source, name) for name in self.visible_fields}
        return self.dto.model_validate(values)

    def to_values(self, dto: DTOT) -> dict[str, Any]:
        """Column values for an INSERT/UPDATE statement (id excluded)."""
        return {name: getattr(dto, name) for name in self.visible_fields if name != "id"}
