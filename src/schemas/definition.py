"""Reference data schema definitions.

Sponsors, centers, researchers, project codes and the work-performed catalog.
Each type has a record model (what the API returns), a create model (required
fields plus defaults) and an update model (every field optional).
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

ActiveStatus = Literal["Active", "Inactive"]
ProjectStatus = Literal["Ongoing", "Completed", "On Hold"]
WorkStatus = Literal["Pending", "In Progress", "Completed"]


# --- Sponsor ---

class SponsorCreate(BaseModel):
    name: str = Field(min_length=1)
    contactPerson: str = ""
    email: str = ""
    status: ActiveStatus = "Inactive"


class Sponsor(SponsorCreate):
    id: str


class SponsorUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    contactPerson: Optional[str] = None
    email: Optional[str] = None
    status: Optional[ActiveStatus] = None


# --- Center ---

class CenterCreate(BaseModel):
    name: str = Field(min_length=1)
    location: str = ""
    primaryContact: str = ""
    status: ActiveStatus = "Inactive"


class Center(CenterCreate):
    id: str


class CenterUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = None
    primaryContact: Optional[str] = None
    status: Optional[ActiveStatus] = None


# --- Researcher ---

class ResearcherCreate(BaseModel):
    name: str = Field(min_length=1)
    specialty: str = ""
    centerId: str = Field(default="", description="ID of the researcher's center.")
    email: str = ""


class Researcher(ResearcherCreate):
    id: str


class ResearcherUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    specialty: Optional[str] = None
    centerId: Optional[str] = None
    email: Optional[str] = None


# --- Project code ---

class ProjectCodeCreate(BaseModel):
    code: str = Field(min_length=1, description="Short project code, e.g. 'ONC-2024-01'.")
    description: str = ""
    sponsorId: str = ""
    status: ProjectStatus = "On Hold"


class ProjectCode(ProjectCodeCreate):
    id: str


class ProjectCodeUpdate(BaseModel):
    code: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    sponsorId: Optional[str] = None
    status: Optional[ProjectStatus] = None


# --- Work performed ---

class WorkPerformedCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    status: WorkStatus = "Pending"


class WorkPerformed(WorkPerformedCreate):
    id: str


class WorkPerformedUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    status: Optional[WorkStatus] = None
