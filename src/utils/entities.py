"""Entity type registry.

Every entity type shares the same storage mechanics, so each one is described
by data only: its storage name, the name of its id index, the default state a
record starts from, and the records seeded into an empty index.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from utils import seed_data


@dataclass(frozen=True)
class EntityType:
    """Descriptor for one kind of stored entity."""

    name: str
    index_name: str
    initial_state: Dict[str, Any] = field(default_factory=dict)
    seed_data: Tuple[Dict[str, Any], ...] = ()

    def with_defaults(self, state: Dict[str, Any]) -> Dict[str, Any]:
        """Return state laid over a fresh copy of the initial state."""
        return {**self.initial_state, **state}


USER = EntityType(
    name="user",
    index_name="users",
    initial_state={"id": "", "username": "", "role": "Level 1", "createdAt": ""},
    seed_data=tuple(seed_data.SEED_USERS),
)

SPONSOR = EntityType(
    name="sponsor",
    index_name="sponsors",
    initial_state={"id": "", "name": "", "contactPerson": "", "email": "", "status": "Inactive"},
    seed_data=tuple(seed_data.SEED_SPONSORS),
)

CENTER = EntityType(
    name="center",
    index_name="centers",
    initial_state={"id": "", "name": "", "location": "", "primaryContact": "", "status": "Inactive"},
    seed_data=tuple(seed_data.SEED_CENTERS),
)

RESEARCHER = EntityType(
    name="researcher",
    index_name="researchers",
    initial_state={"id": "", "name": "", "specialty": "", "centerId": "", "email": ""},
    seed_data=tuple(seed_data.SEED_RESEARCHERS),
)

PROJECT_CODE = EntityType(
    name="projectCode",
    index_name="projectCodes",
    initial_state={"id": "", "code": "", "description": "", "sponsorId": "", "status": "On Hold"},
    seed_data=tuple(seed_data.SEED_PROJECT_CODES),
)

WORK_PERFORMED = EntityType(
    name="workPerformed",
    index_name="workPerformed",
    initial_state={"id": "", "name": "", "description": "", "status": "Pending"},
    seed_data=tuple(seed_data.SEED_WORK_PERFORMED),
)

SDC_TRACKING_ENTRY = EntityType(
    name="sdcTrackingEntry",
    index_name="sdcTrackingEntries",
    initial_state={
        "id": "",
        "sdcPersonnelFirstName": "",
        "sdcPersonnelLastName": "",
        "patientCode": "",
        "date": "",
        "sponsorId": "",
        "centerId": "",
        "researcherId": "",
        "projectCodeId": "",
        "startTime": "",
        "endTime": "",
        "createdBy": "",
    },
    seed_data=tuple(seed_data.SEED_SDC_TRACKING_ENTRIES),
)

SDC_WORK_PERFORMED_ITEM = EntityType(
    name="sdcWorkPerformedItem",
    index_name="sdcWorkPerformedItems",
    initial_state={"id": "", "sdcTrackingEntryId": "", "name": "", "startTime": "", "endTime": "", "notes": ""},
    seed_data=tuple(seed_data.SEED_SDC_WORK_PERFORMED_ITEMS),
)

ENTITY_TYPES: Dict[str, EntityType] = {
    entity_type.name: entity_type
    for entity_type in (
        USER,
        SPONSOR,
        CENTER,
        RESEARCHER,
        PROJECT_CODE,
        WORK_PERFORMED,
        SDC_TRACKING_ENTRY,
        SDC_WORK_PERFORMED_ITEM,
    )
}
