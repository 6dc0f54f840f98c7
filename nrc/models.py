"""
Import every model so Base.metadata knows all tables before create_all
and Alembic autogenerate run.
"""
from .patients.models import Patient, PatientType, NutritionStatus
from .beds.models import Hospital, Bed, BedStatus
from .bed_requests.models import BedRequest, BedRequestStatus, UrgencyLevel
from .visits.models import Visit, VisitStatus
from .medical_records.models import MedicalRecord, VisitType
from .workers.models import Worker, WorkerRole
from .anganwadis.models import AnganwadiCenter
from .notifications.models import Notification, NotificationPriority

__all__ = [
    "Patient", "PatientType", "NutritionStatus",
    "Hospital", "Bed", "BedStatus",
    "BedRequest", "BedRequestStatus", "UrgencyLevel",
    "Visit", "VisitStatus",
    "MedicalRecord", "VisitType",
    "Worker", "WorkerRole",
    "AnganwadiCenter",
    "Notification", "NotificationPriority",
]
