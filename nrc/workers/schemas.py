"""
Worker Schemas - Pydantic models for worker registration, updates and responses.
"""
from typing import Optional, List, Dict, Any
from pydantic import Field, field_validator
from datetime import datetime
from ..core.schemas import CamelModel
from .models import Worker, WorkerRole

WORKING_HOURS_COLUMNS = {"start": "working_hours_start", "end": "working_hours_end"}
EMERGENCY_CONTACT_COLUMNS = {
    "name": "emergency_contact_name",
    "relation": "emergency_contact_relation",
    "contact_number": "emergency_contact_number",
}
PLAIN_FIELDS = (
    "employee_id", "name", "role", "anganwadi_id", "contact_number",
    "address", "assigned_areas", "qualifications", "join_date",
)

class WorkingHours(CamelModel):
    """
    Shift of a worker

    Fields:
    - start: Start time in 24-hour format (HH:MM)
    - end: End time in 24-hour format (HH:MM)
    """
    start: Optional[str] = Field(None, description="Start time in 24-hour format (HH:MM)")
    end: Optional[str] = Field(None, description="End time in 24-hour format (HH:MM)")

    @field_validator("start", "end")
    @classmethod
    def validate_time_format(cls, v):
        """Validate time format is HH:MM"""
        if v is None:
            return v
        try:
            hour, minute = map(int, v.split(":"))
            if not (0 <= hour <= 23 and 0 <= minute <= 59):
                raise ValueError
        except ValueError:
            raise ValueError("Time must be in HH:MM format")
        return v

class EmergencyContact(CamelModel):
    name: Optional[str] = None
    relation: Optional[str] = None
    contact_number: Optional[str] = None

class WorkerBase(CamelModel):
    def to_model_fields(self) -> Dict[str, Any]:
        """Flatten the supplied fields into Worker columns"""
        data = self.model_dump(exclude_unset=True)
        fields = {key: data[key] for key in PLAIN_FIELDS if key in data}
        for group, columns in (("working_hours", WORKING_HOURS_COLUMNS), ("emergency_contact", EMERGENCY_CONTACT_COLUMNS)):
            values = data.get(group) or {}
            fields.update({columns[key]: value for key, value in values.items() if key in columns})
        return fields

class WorkerCreate(WorkerBase):
    """Worker Registration Schema"""
    employee_id: str = Field(..., min_length=1, description="Unique employee number")
    name: str = Field(..., min_length=1)
    role: WorkerRole
    anganwadi_id: Optional[int] = None
    contact_number: str = Field(..., min_length=1)
    address: Optional[str] = None
    assigned_areas: List[str] = Field(default_factory=list)
    qualifications: List[str] = Field(default_factory=list)
    working_hours: Optional[WorkingHours] = None
    emergency_contact: Optional[EmergencyContact] = None
    join_date: Optional[datetime] = None

    def to_model_fields(self) -> Dict[str, Any]:
        fields = super().to_model_fields()
        fields.setdefault("assigned_areas", list(self.assigned_areas))
        fields.setdefault("qualifications", list(self.qualifications))
        if fields.get("join_date") is None:
            fields.pop("join_date", None)
        return fields

class WorkerUpdate(WorkerBase):
    """Worker Update Schema - Partial update"""
    employee_id: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = Field(None, min_length=1)
    role: Optional[WorkerRole] = None
    anganwadi_id: Optional[int] = None
    contact_number: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = None
    assigned_areas: Optional[List[str]] = None
    qualifications: Optional[List[str]] = None
    working_hours: Optional[WorkingHours] = None
    emergency_contact: Optional[EmergencyContact] = None
    join_date: Optional[datetime] = None

class WorkerResponse(CamelModel):
    """Worker Response Schema"""
    id: int
    employee_id: str
    name: str
    role: WorkerRole
    anganwadi_id: Optional[int] = None
    anganwadi_name: Optional[str] = None
    anganwadi_area: Optional[str] = None
    contact_number: str
    address: Optional[str] = None
    assigned_areas: List[str] = Field(default_factory=list)
    qualifications: List[str] = Field(default_factory=list)
    working_hours: WorkingHours
    emergency_contact: EmergencyContact
    join_date: Optional[datetime] = None
    is_active: bool

    @classmethod
    def from_model(cls, worker: Worker) -> "WorkerResponse":
        """Group the flat shift and emergency contact columns"""
        return cls(
            id=worker.id,
            employee_id=worker.employee_id,
            name=worker.name,
            role=worker.role,
            anganwadi_id=worker.anganwadi_id,
            anganwadi_name=worker.anganwadi_name,
            anganwadi_area=worker.anganwadi_area,
            contact_number=worker.contact_number,
            address=worker.address,
            assigned_areas=worker.assigned_areas or [],
            qualifications=worker.qualifications or [],
            working_hours=WorkingHours(start=worker.working_hours_start, end=worker.working_hours_end),
            emergency_contact=EmergencyContact(
                name=worker.emergency_contact_name,
                relation=worker.emergency_contact_relation,
                contact_number=worker.emergency_contact_number
            ),
            join_date=worker.join_date,
            is_active=worker.is_active
        )
