"""
Bootstrap utilities for first deployment.
Seeds the sample hospital, its beds and a sample anganwadi center when the
database is empty.
"""
import logging
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ..anganwadis.models import AnganwadiCenter
from ..beds.models import Bed, BedStatus, Hospital

logger = logging.getLogger(__name__)

SAMPLE_HOSPITAL = {
    "name": "District Hospital NRC",
    "code": "HOSP001",
    "address": "Civil Lines, District Headquarters",
    "contact_number": "+91 9876543213",
    "total_beds": 4,
    "nrc_equipped": True,
}

SAMPLE_BEDS = [
    {"number": "B001", "ward": "Pediatric"},
    {"number": "B002", "ward": "Pediatric"},
    {"number": "M001", "ward": "Maternity"},
    {"number": "M002", "ward": "Maternity"},
]

SAMPLE_ANGANWADI = {
    "name": "Anganwadi Center Sadar Bazaar",
    "code": "AWC001",
    "location_area": "Sadar Bazaar",
    "location_district": "Central District",
    "location_state": "Madhya Pradesh",
    "location_pincode": "462001",
    "supervisor_name": "Dr. Sunita Devi",
    "supervisor_contact": "+91 9876543212",
    "capacity_pregnant_women": 25,
    "capacity_children": 50,
    "facilities": ["Kitchen", "Playground", "Medical Room", "Toilet"],
    "coverage_areas": ["Sadar Bazaar", "Civil Lines", "Shastri Nagar"],
}

def hospital_exists(db: Session) -> bool:
    """
    Check if any hospital exists in the database.
    
    Args:
        db: Database session
        
    Returns:
        bool: True if at least one hospital exists
    """
    return db.execute(select(Hospital.id).limit(1)).first() is not None

def seed_sample_data(db: Session) -> bool:
    """
    Insert the sample hospital, beds and anganwadi center.

    Every seeded bed starts available with no occupant.
    
    Args:
        db: Database session
        
    Returns:
        bool: True if data was inserted, False if skipped or failed
    """
    if hospital_exists(db):
        logger.info("Hospitals already present, skipping sample data")
        return False

    try:
        hospital = Hospital(**SAMPLE_HOSPITAL)
        db.add(hospital)
        db.flush()
        for bed in SAMPLE_BEDS:
            db.add(Bed(hospital_id=hospital.id, status=BedStatus.AVAILABLE, **bed))

        code_taken = db.execute(
            select(AnganwadiCenter.id).where(AnganwadiCenter.code == SAMPLE_ANGANWADI["code"])
        ).first()
        if not code_taken:
            db.add(AnganwadiCenter(**SAMPLE_ANGANWADI, is_active=True))

        db.commit()
        logger.info(f"✅ Sample data inserted: hospital {hospital.code} with {len(SAMPLE_BEDS)} beds")
        return True
    except SQLAlchemyError as e:
        logger.error(f"❌ Failed to insert sample data: {str(e)}")
        db.rollback()
        return False
