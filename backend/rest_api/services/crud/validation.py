"""
Validation rules applied before any store access.

Every rule raises ValidationError naming the offending field by its wire
name (camelCase), so a 400 body points at the JSON key the caller sent.
"""

from typing import Any

from pydantic.alias_generators import to_camel

from shared.utils.admin_schemas import INT_MAX
from shared.utils.exceptions import ValidationError

from .descriptor import EntityDescriptor


def require_dto(entity_name: str, dto: Any) -> None:
    if dto is None:
        raise ValidationError(entity_name, f"El {entity_name} no puede ser nulo")


def require_positive_id(entity_name: str, entity_id: int) -> None:
    if entity_id is None or entity_id <= 0:
        raise ValidationError(
            "id",
            f"El ID del {entity_name} debe ser mayor que cero",
            value=entity_id,
        )
    if entity_id > INT_MAX:
        raise ValidationError(
            "id",
            f"El ID del {entity_name} no puede superar {INT_MAX}",
            value=entity_id,
        )


def require_text(entity_name: str, field: str, value: str | None) -> None:
    wire_name = to_camel(field)
    if value is None or not value.strip():
        raise ValidationError(
            wire_name,
            f"El campo {wire_name} del {entity_name} es obligatorio",
        )


def require_positive_fk(field: str, value: int | None) -> None:
    wire_name = to_camel(field)
    if value is None or value <= 0:
        raise ValidationError(
            wire_name,
            f"El {wire_name} debe ser mayor a cero",
            value=value,
        )
    if value > INT_MAX:
        raise ValidationError(
            wire_name,
            f"El {wire_name} no puede superar {INT_MAX}",
            value=value,
        )


def validate(descriptor: EntityDescriptor, dto: Any) -> None:
    """Run every rule declared for the entity against the DTO."""
    require_dto(descriptor.entity_name, dto)

    for field in descriptor.positive_ids:
        require_positive_fk(field, getattr(dto, field))

    for field in descriptor.required_text:
        require_text(descriptor.entity_name, field, getattr(dto, field))
