"""
Anganwadi Center Model - Stores community childcare and nutrition centers.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Float, JSON, func
from sqlalchemy.orm import relationship
from ..database import Base

class AnganwadiCenter(Base):
    """
    Anganwadi Center Model
    
    Fields:
    - id: Primary key
    - name: Center name
    - code: Unique center code
    - location_*: Area, district, state, pincode and coordinates
    - supervisor_*: Supervising officer's contact details
    - capacity_pregnant_women / capacity_children: Enrolment capacity
    - facilities, coverage_areas: JSON lists
    - established_date: Opening date
    - is_active: False once the center is soft-deleted
    """
    __tablename__ = "anganwadi_centers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    code = Column(String, unique=True, nullable=False, index=True)
    location_area = Column(String, nullable=False)
    location_district = Column(String, nullable=False)
    location_state = Column(String, nullable=False)
    location_pincode = Column(String, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    supervisor_name = Column(String, nullable=True)
    supervisor_contact = Column(String, nullable=True)
    supervisor_employee_id = Column(String, nullable=True)
    capacity_pregnant_women = Column(Integer, nullable=False, default=0)
    capacity_children = Column(Integer, nullable=False, default=0)
    facilities = Column(JSON, nullable=False, default=list)
    coverage_areas = Column(JSON, nullable=False, default=list)
    established_date = Column(DateTime(timezone=True), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    workers = relationship("Worker", back_populates="anganwadi")

    def __repr__(self):
        """String representation of the AnganwadiCenter model"""
        return f"<AnganwadiCenter(id={self.id}, code='{self.code}')>"
