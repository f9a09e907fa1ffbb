"""
Organization entities: companies, their branches and the zones inside a branch.
"""

from rest_api.models import Branch, Company, Zone
from rest_api.services.crud import DisplayJoin, EntityDescriptor
from shared.utils.admin_schemas import BranchDTO, CompanyDTO, ZoneDTO


COMPANY = EntityDescriptor(
    entity_name="Company",
    model=Company,
    dto=CompanyDTO,
    fields=("name", "address", "phone", "email", "logo", "data_registry"),
    required_text=("name",),
    stamp_on_create=("data_registry",),
)

BRANCH = EntityDescriptor(
    entity_name="Branch",
    model=Branch,
    dto=BranchDTO,
    fields=(
        "company_id",
        "name",
        "address",
        "phone",
        "email",
        "incharge",
        "location_furrow",
    ),
    required_text=("name",),
    display_joins=(DisplayJoin(Company, "company_id", "company_name"),),
)

ZONE = EntityDescriptor(
    entity_name="Zone",
    model=Zone,
    dto=ZoneDTO,
    fields=("branch_id",),
    positive_ids=("branch_id",),
    display_joins=(DisplayJoin(Branch, "branch_id", "branch_name"),),
)
