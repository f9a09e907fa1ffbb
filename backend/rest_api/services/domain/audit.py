"""Activity log entries, written through their own endpoints like any entity."""

from rest_api.models import LogActivity
from rest_api.services.crud import EntityDescriptor
from shared.utils.admin_schemas import LogActivityDTO


LOG_ACTIVITY = EntityDescriptor(
    entity_name="LogActivity",
    model=LogActivity,
    dto=LogActivityDTO,
    fields=("action", "data_previous", "data_new", "data"),
    required_text=("action",),
    stamp_on_create=("data",),
)
