"""
Worker Model - Stores anganwadi staff and ASHA workers.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, JSON, Text, Enum, func
from sqlalchemy.orm import relationship
import enum
from ..database import Base, enum_values

class WorkerRole(str, enum.Enum):
    """Enum for worker role"""
    HEAD = "head"
    SUPERVISOR = "supervisor"
    HELPER = "helper"
    ASHA = "asha"

class Worker(Base):
    """
    Worker Model
    
    Fields:
    - id: Primary key
    - employee_id: Unique employee number
    - name, role, contact_number, address: Identity
    - anganwadi_id: Optional foreign key to AnganwadiCenter
    - assigned_areas, qualifications: JSON lists
    - working_hours_start / working_hours_end: Shift, HH:MM
    - emergency_contact_*: Emergency contact person
    - join_date: Joining date
    - is_active: False once the worker is soft-deleted
    """
    __tablename__ = "workers"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    role = Column(Enum(WorkerRole, name="worker_role", values_callable=enum_values), nullable=False, index=True)
    anganwadi_id = Column(Integer, ForeignKey("anganwadi_centers.id"), nullable=True, index=True)
    contact_number = Column(String, nullable=False)
    address = Column(Text, nullable=True)
    assigned_areas = Column(JSON, nullable=False, default=list)
    qualifications = Column(JSON, nullable=False, default=list)
    working_hours_start = Column(String, nullable=True)
    working_hours_end = Column(String, nullable=True)
    emergency_contact_name = Column(String, nullable=True)
    emergency_contact_relation = Column(String, nullable=True)
    emergency_contact_number = Column(String, nullable=True)
    join_date = Column(DateTime(timezone=True), server_default=func.now())
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    anganwadi = relationship("AnganwadiCenter", back_populates="workers")

    def __repr__(self):
        """String representation of the Worker model"""
        return f"<Worker(id={self.id}, employee_id='{self.employee_id}', role='{self.role}')>"

    @property
    def anganwadi_name(self) -> str:
        return self.anganwadi.name if self.anganwadi else None

    @property
    def anganwadi_area(self) -> str:
        return self.anganwadi.location_area if self.anganwadi else None
