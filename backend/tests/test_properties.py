"""
Property-based Testing with Hypothesis.

Mapping and validation properties that must hold for any input.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest
from hypothesis import given, settings, strategies as st

from rest_api.services import EntityService
from rest_api.services.domain import BRANCH, FORM_MODULE, ITEM, REGISTRY, ROL_FORM_PERMISSION
from shared.utils.admin_schemas import (
    INT_MAX,
    INT_MIN,
    BranchDTO,
    FormModuleDTO,
    ItemDTO,
    RolFormPermissionDTO,
)
from shared.utils.exceptions import ValidationError


texts = st.text(max_size=40)
optional_texts = st.none() | texts
store_ints = st.integers(min_value=INT_MIN, max_value=INT_MAX)
optional_ints = st.none() | store_ints
positive_ids = st.integers(min_value=1, max_value=INT_MAX)
non_positive_ids = st.integers(min_value=INT_MIN, max_value=0)
datetimes = st.none() | st.datetimes(min_value=datetime(1900, 1, 1), max_value=datetime(2100, 1, 1))


branch_dtos = st.builds(
    BranchDTO,
    id=positive_ids,
    active=st.booleans(),
    company_id=positive_ids,
    name=texts,
    address=optional_texts,
    phone=optional_texts,
    email=optional_texts,
    incharge=optional_ints,
    location_furrow=optional_texts,
)

item_dtos = st.builds(
    ItemDTO,
    id=positive_ids,
    active=st.booleans(),
    code=optional_texts,
    code_qr=optional_texts,
    name=texts,
    description=optional_texts,
    created_at=datetimes,
    category_id=st.none() | positive_ids,
    zone_id=st.none() | positive_ids,
)


class TestMappingProperties:
    """map_to_entity and map_to_dto are inverses on visible fields."""

    @given(dto=branch_dtos)
    @settings(max_examples=50)
    def test_branch_round_trip(self, dto):
        entity = BRANCH.map_to_entity(dto)

        assert BRANCH.map_to_dto(entity).model_dump() == dto.model_dump()

    @given(dto=item_dtos)
    @settings(max_examples=50)
    def test_item_round_trip(self, dto):
        entity = ITEM.map_to_entity(dto)
        again = ITEM.map_to_entity(ITEM.map_to_dto(entity))

        for field in ITEM.visible_fields:
            assert getattr(again, field) == getattr(entity, field)

    @given(dto=branch_dtos, label=texts)
    @settings(max_examples=30)
    def test_row_mapping_ignores_joined_labels(self, dto, label):
        row = {**dto.model_dump(), "company_name": label}

        assert BRANCH.map_to_dto(row).model_dump() == dto.model_dump()

    @pytest.mark.parametrize("descriptor", REGISTRY, ids=lambda d: d.entity_name)
    def test_default_dto_round_trip(self, descriptor):
        dto = descriptor.dto()

        assert descriptor.map_to_dto(descriptor.map_to_entity(dto)).model_dump() == dto.model_dump()


class TestValidationProperties:
    """Invalid DTOs are rejected before the store is touched."""

    @staticmethod
    def untouched_session() -> MagicMock:
        return MagicMock()

    @given(
        name=st.text(alphabet=" \t\n\r", max_size=10),
        company_id=store_ints,
    )
    @settings(max_examples=50)
    def test_blank_names_never_reach_store(self, name, company_id):
        db = self.untouched_session()

        with pytest.raises(ValidationError) as exc_info:
            EntityService(BRANCH, db).create(BranchDTO(name=name, company_id=company_id))

        assert exc_info.value.field == "name"
        db.execute.assert_not_called()

    @given(form_id=non_positive_ids, module_id=store_ints)
    @settings(max_examples=50)
    def test_non_positive_link_keys_rejected(self, form_id, module_id):
        db = self.untouched_session()

        with pytest.raises(ValidationError) as exc_info:
            EntityService(FORM_MODULE, db).create(FormModuleDTO(form_id=form_id, module_id=module_id))

        assert exc_info.value.field == "formId"
        db.execute.assert_not_called()

    @given(
        rol_id=positive_ids,
        form_id=positive_ids,
        permission_id=non_positive_ids,
    )
    @settings(max_examples=30)
    def test_error_names_first_invalid_key(self, rol_id, form_id, permission_id):
        db = self.untouched_session()
        dto = RolFormPermissionDTO(rol_id=rol_id, form_id=form_id, permission_id=permission_id)

        with pytest.raises(ValidationError) as exc_info:
            EntityService(ROL_FORM_PERMISSION, db).update(dto)

        assert exc_info.value.field == "permissionId"
        db.execute.assert_not_called()
