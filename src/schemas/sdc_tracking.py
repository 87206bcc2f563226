"""SDC (Source Document Collection) tracking schema definitions.

A tracking entry records one SDC session for a patient; its work items break
that session down into timed tasks. Times are 24-hour ``HH:MM`` strings and a
start time must come before its end time.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

TIME_PATTERN = r"^([01]\d|2[0-3]):([0-5]\d)$"
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def parse_time(value: str) -> datetime:
    """Parse an ``HH:MM`` string."""
    return datetime.strptime(value, "%H:%M")


def check_date(value: Optional[str]) -> Optional[str]:
    """Raise ValueError unless the value is a real calendar date."""
    if value is not None:
        try:
            datetime.strptime(value, "%Y-%m-%d")
        except ValueError:
            raise ValueError("Date must be a valid YYYY-MM-DD date.")
    return value


def check_time_range(start_time: str, end_time: str) -> None:
    """Raise ValueError unless start_time is strictly before end_time."""
    if parse_time(end_time) <= parse_time(start_time):
        raise ValueError("End time must be after start time.")


class SdcTrackingEntryCreate(BaseModel):
    sdcPersonnelFirstName: str = Field(min_length=1)
    sdcPersonnelLastName: str = Field(min_length=1)
    patientCode: str = Field(min_length=1)
    date: str = Field(pattern=DATE_PATTERN, description="YYYY-MM-DD")
    sponsorId: str = Field(min_length=1)
    centerId: str = Field(min_length=1)
    researcherId: str = Field(min_length=1)
    projectCodeId: str = Field(min_length=1)
    startTime: str = Field(pattern=TIME_PATTERN)
    endTime: str = Field(pattern=TIME_PATTERN)

    @model_validator(mode="after")
    def check_times(self):
        check_time_range(self.startTime, self.endTime)
        return self

    @field_validator("date")
    @classmethod
    def validate_date(cls, value):
        return check_date(value)


class SdcTrackingEntry(BaseModel):
    id: str
    sdcPersonnelFirstName: str
    sdcPersonnelLastName: str
    patientCode: str
    date: str
    sponsorId: str
    centerId: str
    researcherId: str
    projectCodeId: str
    startTime: str
    endTime: str
    createdBy: str = Field(description="ID of the user who created the entry.")


class SdcTrackingEntryUpdate(BaseModel):
    """Partial update. The time range is checked against the merged record."""

    sdcPersonnelFirstName: Optional[str] = Field(default=None, min_length=1)
    sdcPersonnelLastName: Optional[str] = Field(default=None, min_length=1)
    patientCode: Optional[str] = Field(default=None, min_length=1)
    date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    sponsorId: Optional[str] = Field(default=None, min_length=1)
    centerId: Optional[str] = Field(default=None, min_length=1)
    researcherId: Optional[str] = Field(default=None, min_length=1)
    projectCodeId: Optional[str] = Field(default=None, min_length=1)
    startTime: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    endTime: Optional[str] = Field(default=None, pattern=TIME_PATTERN)

    @field_validator("date")
    @classmethod
    def validate_date(cls, value):
        return check_date(value)


class SdcWorkItemCreate(BaseModel):
    name: str = Field(default="Unnamed Task", min_length=1)
    startTime: str = Field(pattern=TIME_PATTERN)
    endTime: str = Field(pattern=TIME_PATTERN)
    notes: str = ""

    @model_validator(mode="after")
    def check_times(self):
        check_time_range(self.startTime, self.endTime)
        return self


class SdcWorkItem(BaseModel):
    id: str
    sdcTrackingEntryId: str
    name: str
    startTime: str
    endTime: str
    notes: str = ""
