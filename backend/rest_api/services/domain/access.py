"""
Access-control entities: people, users, roles, permissions, forms, modules
and the link tables that relate them.

The tables only record the assignments; no endpoint checks them.
"""

from rest_api.models import (
    Form,
    FormModule,
    Module,
    Permission,
    Person,
    Rol,
    RolFormPermission,
    RolUser,
    User,
)
from rest_api.services.crud import DisplayJoin, EntityDescriptor
from shared.utils.admin_schemas import (
    FormDTO,
    FormModuleDTO,
    ModuleDTO,
    PermissionDTO,
    PersonDTO,
    RolDTO,
    RolFormPermissionDTO,
    RolUserDTO,
    UserDTO,
)


PERSON = EntityDescriptor(
    entity_name="Person",
    model=Person,
    dto=PersonDTO,
    fields=("name", "last_name", "number_identification", "phone"),
    required_text=("name",),
)

# Password is stored as received; there is no login flow to verify it against
USER = EntityDescriptor(
    entity_name="User",
    model=User,
    dto=UserDTO,
    fields=("username", "password", "creation_date", "person_id"),
    required_text=("username",),
    display_joins=(DisplayJoin(Person, "person_id", "person_name"),),
    stamp_on_create=("creation_date",),
)

ROL = EntityDescriptor(
    entity_name="Rol",
    model=Rol,
    dto=RolDTO,
    fields=("name", "code", "description"),
    required_text=("name",),
)

PERMISSION = EntityDescriptor(
    entity_name="Permission",
    model=Permission,
    dto=PermissionDTO,
    fields=("name", "code", "description"),
    required_text=("name",),
)

FORM = EntityDescriptor(
    entity_name="Form",
    model=Form,
    dto=FormDTO,
    fields=("name", "description"),
    required_text=("name",),
)

MODULE = EntityDescriptor(
    entity_name="Module",
    model=Module,
    dto=ModuleDTO,
    fields=("name", "description", "creation_date"),
    required_text=("name",),
    stamp_on_create=("creation_date",),
)

# =============================================================================
# Link tables
# =============================================================================

ROL_USER = EntityDescriptor(
    entity_name="RolUser",
    model=RolUser,
    dto=RolUserDTO,
    fields=("rol_id", "user_id"),
    positive_ids=("rol_id", "user_id"),
    display_joins=(
        DisplayJoin(Rol, "rol_id", "rol_name"),
        DisplayJoin(User, "user_id", "user_username", column="username"),
    ),
)

ROL_FORM_PERMISSION = EntityDescriptor(
    entity_name="RolFormPermission",
    model=RolFormPermission,
    dto=RolFormPermissionDTO,
    fields=("rol_id", "form_id", "permission_id"),
    positive_ids=("rol_id", "form_id", "permission_id"),
    display_joins=(
        DisplayJoin(Rol, "rol_id", "rol_name"),
        DisplayJoin(Form, "form_id", "form_name"),
        DisplayJoin(Permission, "permission_id", "permission_name"),
    ),
)

FORM_MODULE = EntityDescriptor(
    entity_name="FormModule",
    model=FormModule,
    dto=FormModuleDTO,
    fields=("form_id", "module_id"),
    positive_ids=("form_id", "module_id"),
    display_joins=(
        DisplayJoin(Form, "form_id", "form_name"),
        DisplayJoin(Module, "module_id", "module_name"),
    ),
)
