"""
Transfer objects (DTOs) exchanged at the API boundary.

Each DTO mirrors the visible columns of its entity exactly: no computed
fields, no nested objects. JSON uses camelCase names (``companyId``);
snake_case is accepted on input too.

Required fields default to empty values instead of being mandatory so a
missing name or foreign key is rejected by the entity validation rules
(400 with the offending field) rather than by schema parsing.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


# Range of the INTEGER columns (ids, foreign keys, codes)
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class EntityDTO(BaseModel):
    """Fields shared by every transfer object."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: int = 0
    active: bool = True

    @field_validator("*", mode="after")
    @classmethod
    def fit_store_columns(cls, value: Any) -> Any:
        """
        Keep values representable by the store.

        Integer columns are 32-bit signed. DateTime columns are timezone-less
        and hold UTC, so aware datetimes are converted to naive UTC.
        """
        if isinstance(value, datetime) and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        if isinstance(value, int) and not isinstance(value, bool):
            if not INT_MIN <= value <= INT_MAX:
                raise ValueError(f"must be between {INT_MIN} and {INT_MAX}")
        return value


# =============================================================================
# Organization
# =============================================================================


class CompanyDTO(EntityDTO):
    name: str = ""
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    logo: Optional[str] = None
    data_registry: Optional[datetime] = None


class BranchDTO(EntityDTO):
    company_id: int = 0
    name: str = ""
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    incharge: Optional[int] = None
    location_furrow: Optional[str] = None


class ZoneDTO(EntityDTO):
    branch_id: int = 0


# =============================================================================
# Inventory
# =============================================================================


class CategoryDTO(EntityDTO):
    name: str = ""
    description: Optional[str] = None


class ItemDTO(EntityDTO):
    code: Optional[str] = None
    code_qr: Optional[str] = None
    name: str = ""
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    category_id: Optional[int] = None
    zone_id: Optional[int] = None


class ImagenItemDTO(EntityDTO):
    item_id: int = 0
    url_image: str = ""
    date_registry: Optional[datetime] = None


class InventaryDetailsDTO(EntityDTO):
    status_previous: Optional[str] = None
    status_new: Optional[str] = None
    observations: Optional[str] = None
    date: Optional[datetime] = None
    description: Optional[str] = None
    zone_id: int = 0


# =============================================================================
# Access control
# =============================================================================


class PersonDTO(EntityDTO):
    name: str = ""
    last_name: Optional[str] = None
    number_identification: Optional[int] = None
    phone: Optional[str] = None


class UserDTO(EntityDTO):
    username: str = ""
    password: Optional[str] = None
    creation_date: Optional[datetime] = None
    person_id: Optional[int] = None


class RolDTO(EntityDTO):
    name: str = ""
    code: Optional[int] = None
    description: Optional[str] = None


class PermissionDTO(EntityDTO):
    name: str = ""
    code: Optional[int] = None
    description: Optional[str] = None


class FormDTO(EntityDTO):
    name: str = ""
    description: Optional[str] = None


class ModuleDTO(EntityDTO):
    name: str = ""
    description: Optional[str] = None
    creation_date: Optional[datetime] = None


class RolUserDTO(EntityDTO):
    rol_id: int = 0
    user_id: int = 0


class RolFormPermissionDTO(EntityDTO):
    rol_id: int = 0
    form_id: int = 0
    permission_id: int = 0


class FormModuleDTO(EntityDTO):
    form_id: int = 0
    module_id: int = 0


# =============================================================================
# Activity log
# =============================================================================


class LogActivityDTO(EntityDTO):
    action: str = ""
    data_previous: Optional[str] = None
    data_new: Optional[str] = None
    data: Optional[datetime] = None


class MessageOutput(BaseModel):
    """Acknowledgement body for update and delete endpoints."""

    message: str
