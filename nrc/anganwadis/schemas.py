"""
Anganwadi Schemas - Pydantic models for anganwadi centers.

Location, supervisor and capacity travel as nested objects and are stored as
prefixed columns; the *_COLUMNS maps below are the single place where the two
shapes are tied together.
"""
from typing import Optional, List, Dict, Any
from pydantic import Field
from datetime import datetime
from ..core.schemas import CamelModel
from .models import AnganwadiCenter

LOCATION_COLUMNS = {
    "area": "location_area",
    "district": "location_district",
    "state": "location_state",
    "pincode": "location_pincode",
}
COORDINATE_COLUMNS = {"latitude": "latitude", "longitude": "longitude"}
SUPERVISOR_COLUMNS = {
    "name": "supervisor_name",
    "contact_number": "supervisor_contact",
    "employee_id": "supervisor_employee_id",
}
CAPACITY_COLUMNS = {
    "pregnant_women": "capacity_pregnant_women",
    "children": "capacity_children",
}
PLAIN_FIELDS = ("name", "code", "facilities", "coverage_areas", "established_date")


def _flatten(group: Optional[Dict[str, Any]], columns: Dict[str, str]) -> Dict[str, Any]:
    if not group:
        return {}
    return {columns[key]: value for key, value in group.items() if key in columns}


class Coordinates(CamelModel):
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)

class Location(CamelModel):
    """Where the center is"""
    area: str = Field(..., min_length=1)
    district: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    pincode: Optional[str] = None
    coordinates: Optional[Coordinates] = None

class Supervisor(CamelModel):
    """Supervising officer"""
    name: Optional[str] = None
    contact_number: Optional[str] = None
    employee_id: Optional[str] = None

class Capacity(CamelModel):
    """Enrolment capacity"""
    pregnant_women: int = Field(0, ge=0)
    children: int = Field(0, ge=0)

class AnganwadiBase(CamelModel):
    def to_model_fields(self) -> Dict[str, Any]:
        """Flatten the fields that were supplied into AnganwadiCenter columns"""
        data = self.model_dump(exclude_unset=True)
        fields = {key: data[key] for key in PLAIN_FIELDS if key in data}
        location = data.get("location")
        if location:
            fields.update(_flatten(location, LOCATION_COLUMNS))
            fields.update(_flatten(location.get("coordinates"), COORDINATE_COLUMNS))
        fields.update(_flatten(data.get("supervisor"), SUPERVISOR_COLUMNS))
        fields.update(_flatten(data.get("capacity"), CAPACITY_COLUMNS))
        return fields

class AnganwadiCreate(AnganwadiBase):
    """Anganwadi Center Creation Schema"""
    name: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1, description="Unique center code")
    location: Location
    supervisor: Optional[Supervisor] = None
    capacity: Capacity = Field(default_factory=Capacity)
    facilities: List[str] = Field(default_factory=list)
    coverage_areas: List[str] = Field(default_factory=list)
    established_date: Optional[datetime] = None

    def to_model_fields(self) -> Dict[str, Any]:
        fields = super().to_model_fields()
        # Defaults are not "set", so include them explicitly on creation
        fields.setdefault("facilities", list(self.facilities))
        fields.setdefault("coverage_areas", list(self.coverage_areas))
        fields.update(_flatten(self.capacity.model_dump(), CAPACITY_COLUMNS))
        return fields

class AnganwadiUpdate(AnganwadiBase):
    """Anganwadi Center Update Schema - Partial update; nested groups replace the supplied keys"""
    name: Optional[str] = Field(None, min_length=1)
    code: Optional[str] = Field(None, min_length=1)
    location: Optional[Location] = None
    supervisor: Optional[Supervisor] = None
    capacity: Optional[Capacity] = None
    facilities: Optional[List[str]] = None
    coverage_areas: Optional[List[str]] = None
    established_date: Optional[datetime] = None

class AnganwadiResponse(CamelModel):
    """Anganwadi Center Response Schema"""
    id: int
    name: str
    code: str
    location: Location
    supervisor: Supervisor
    capacity: Capacity
    facilities: List[str] = Field(default_factory=list)
    coverage_areas: List[str] = Field(default_factory=list)
    established_date: Optional[datetime] = None
    is_active: bool

    @classmethod
    def from_model(cls, center: AnganwadiCenter) -> "AnganwadiResponse":
        """Group the prefixed columns back into nested objects"""
        coordinates = None
        if center.latitude is not None or center.longitude is not None:
            coordinates = Coordinates(latitude=center.latitude, longitude=center.longitude)
        return cls(
            id=center.id,
            name=center.name,
            code=center.code,
            location=Location(
                area=center.location_area,
                district=center.location_district,
                state=center.location_state,
                pincode=center.location_pincode,
                coordinates=coordinates
            ),
            supervisor=Supervisor(
                name=center.supervisor_name,
                contact_number=center.supervisor_contact,
                employee_id=center.supervisor_employee_id
            ),
            capacity=Capacity(
                pregnant_women=center.capacity_pregnant_women or 0,
                children=center.capacity_children or 0
            ),
            facilities=center.facilities or [],
            coverage_areas=center.coverage_areas or [],
            established_date=center.established_date,
            is_active=center.is_active
        )
