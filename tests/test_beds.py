"""
Tests for hospitals, bed listing and the bed-assignment coordinator.
"""
import threading

import pytest
from sqlalchemy.exc import OperationalError

from nrc.beds import service as bed_service
from nrc.beds.models import Bed, BedStatus
from nrc.core.bootstrap import seed_sample_data
from nrc.database import Database
from nrc.exceptions import ConflictException, InternalServerException, ResourceNotFoundException
from nrc.patients.models import Patient
from nrc.patients.schemas import PatientCreate
from nrc.patients.service import create_patient as register_patient


def occupy(client, bed_id, patient_id, **extra):
    return client.put(f"/api/beds/{bed_id}", json={"status": "occupied", "patientId": patient_id, **extra})


def set_status(client, bed_id, status):
    return client.put(f"/api/beds/{bed_id}", json={"status": status})


def test_list_hospitals(client, beds):
    response = client.get("/api/hospitals/")
    assert response.status_code == 200
    hospitals = response.json()
    assert len(hospitals) == 1
    assert hospitals[0]["code"] == "HOSP001"
    assert hospitals[0]["nrcEquipped"] is True

    response = client.get(f"/api/hospitals/{hospitals[0]['id']}")
    assert response.status_code == 200
    assert client.get("/api/hospitals/999").status_code == 404


def test_list_beds_with_filters(client, beds):
    all_beds = client.get("/api/beds/").json()
    assert len(all_beds) == 4
    assert all(bed["hospitalName"] == "District Hospital NRC" for bed in all_beds)

    maternity = client.get("/api/beds/", params={"ward": "Maternity"}).json()
    assert sorted(bed["number"] for bed in maternity) == ["M001", "M002"]

    assert client.get("/api/beds/", params={"status": "occupied"}).json() == []


def test_get_missing_bed_is_404(client, beds):
    assert client.get("/api/beds/999").status_code == 404


def test_assign_and_release_bed(client, beds, create_patient):
    patient = create_patient(registrationNumber="P100")
    bed_id = beds["B001"]

    response = occupy(client, bed_id, patient["id"], admissionDate="2024-06-01T09:30:00Z")
    assert response.status_code == 200
    bed = response.json()
    assert bed["status"] == "occupied"
    assert bed["patientId"] == patient["id"]
    assert bed["patientName"] == patient["name"]
    assert bed["patientType"] == "child"
    assert bed["admissionDate"].startswith("2024-06-01T09:30:00")
    assert client.get(f"/api/patients/{patient['id']}").json()["bedId"] == bed_id

    response = set_status(client, bed_id, "available")
    assert response.status_code == 200
    bed = response.json()
    assert bed["status"] == "available"
    assert bed["patientId"] is None
    assert bed["admissionDate"] is None
    assert client.get(f"/api/patients/{patient['id']}").json()["bedId"] is None


def test_occupied_bed_rejects_another_patient(client, beds, create_patient):
    first = create_patient(name="First")
    second = create_patient(name="Second")
    bed_id = beds["B001"]
    assert occupy(client, bed_id, first["id"]).status_code == 200

    response = occupy(client, bed_id, second["id"])
    assert response.status_code == 409

    bed = client.get(f"/api/beds/{bed_id}").json()
    assert bed["patientId"] == first["id"]
    assert client.get(f"/api/patients/{second['id']}").json()["bedId"] is None


def test_reassigning_current_occupant_refreshes_admission_date(client, beds, create_patient):
    patient = create_patient()
    bed_id = beds["B002"]
    occupy(client, bed_id, patient["id"], admissionDate="2024-06-01T09:30:00Z")

    response = occupy(client, bed_id, patient["id"], admissionDate="2024-06-03T08:00:00Z")
    assert response.status_code == 200
    assert response.json()["admissionDate"].startswith("2024-06-03T08:00:00")


def test_patient_cannot_hold_two_beds(client, beds, create_patient):
    patient = create_patient()
    assert occupy(client, beds["B001"], patient["id"]).status_code == 200

    response = occupy(client, beds["B002"], patient["id"])
    assert response.status_code == 409
    assert client.get(f"/api/beds/{beds['B002']}").json()["status"] == "available"
    assert client.get(f"/api/patients/{patient['id']}").json()["bedId"] == beds["B001"]


def test_assign_requires_known_active_patient(client, beds, create_patient):
    assert occupy(client, beds["B001"], 999).status_code == 404

    patient = create_patient()
    client.delete(f"/api/patients/{patient['id']}")
    assert occupy(client, beds["B001"], patient["id"]).status_code == 404
    assert client.get(f"/api/beds/{beds['B001']}").json()["status"] == "available"


def test_assign_missing_bed_is_404(client, beds, create_patient):
    patient = create_patient()
    assert occupy(client, 999, patient["id"]).status_code == 404


def test_status_update_validation(client, beds):
    response = client.put(f"/api/beds/{beds['B001']}", json={"status": "occupied"})
    assert response.status_code == 422

    response = client.put(f"/api/beds/{beds['B001']}", json={"status": "available", "patientId": 1})
    assert response.status_code == 422

    response = client.put(f"/api/beds/{beds['B001']}", json={"status": "broken"})
    assert response.status_code == 422


def test_release_available_bed_is_noop(client, beds):
    response = set_status(client, beds["M001"], "available")
    assert response.status_code == 200
    assert response.json()["status"] == "available"


def test_maintenance_rules(client, beds, create_patient):
    patient = create_patient()
    bed_id = beds["M002"]

    response = set_status(client, bed_id, "maintenance")
    assert response.status_code == 200
    assert response.json()["status"] == "maintenance"

    # Idempotent
    assert set_status(client, bed_id, "maintenance").status_code == 200

    # A bed under maintenance cannot be occupied
    assert occupy(client, bed_id, patient["id"]).status_code == 409
    assert client.get(f"/api/patients/{patient['id']}").json()["bedId"] is None

    # Releasing returns it to service
    assert set_status(client, bed_id, "available").json()["status"] == "available"

    # An occupied bed cannot go to maintenance
    assert occupy(client, bed_id, patient["id"]).status_code == 200
    assert set_status(client, bed_id, "maintenance").status_code == 409
    assert client.get(f"/api/beds/{bed_id}").json()["status"] == "occupied"


def test_assign_bed_rolls_back_when_patient_write_fails(db, beds, monkeypatch):
    patient = register_patient(db, PatientCreate(
        name="Rollback", age=2, type="child", contact_number="1", address="x",
        weight=9, height=80, nutrition_status="normal"
    ))

    def failing_link(*args, **kwargs):
        raise OperationalError("UPDATE patients SET bed_id=?", {}, Exception("disk I/O error"))

    monkeypatch.setattr(bed_service, "_link_patient", failing_link)

    with pytest.raises(InternalServerException):
        bed_service.assign_bed(db, beds["B001"], patient.id)

    db.expire_all()
    bed = db.get(Bed, beds["B001"])
    assert bed.status == BedStatus.AVAILABLE
    assert bed.patient_id is None
    assert db.get(Patient, patient.id).bed_id is None


def test_release_bed_rolls_back_when_patient_write_fails(db, beds, monkeypatch):
    patient = register_patient(db, PatientCreate(
        name="Rollback", age=2, type="child", contact_number="1", address="x",
        weight=9, height=80, nutrition_status="normal"
    ))
    bed_id = beds["B001"]
    bed_service.assign_bed(db, bed_id, patient.id)

    def failing_unlink(*args, **kwargs):
        raise OperationalError("UPDATE patients SET bed_id=?", {}, Exception("disk I/O error"))

    monkeypatch.setattr(bed_service, "_unlink_patient", failing_unlink)

    with pytest.raises(InternalServerException):
        bed_service.release_bed(db, bed_id)

    db.expire_all()
    bed = db.get(Bed, bed_id)
    assert bed.status == BedStatus.OCCUPIED
    assert bed.patient_id == patient.id
    assert db.get(Patient, patient.id).bed_id == bed_id


def test_release_from_stale_read_keeps_newer_admission(database, db, beds, monkeypatch):
    """
    A release that read the bed before another session released it and
    admitted someone else must not free the bed under the new occupant.
    """
    first, second = [
        register_patient(db, PatientCreate(
            name=name, age=3, type="child", contact_number="1", address="x",
            weight=10, height=85, nutrition_status="normal"
        ))
        for name in ("First", "Second")
    ]
    first_id, second_id = first.id, second.id
    bed_id = beds["B001"]
    bed_service.assign_bed(db, bed_id, first_id)

    lock_bed = bed_service._lock_bed
    interleaved = []

    def lock_then_readmit(session, locked_bed_id):
        bed = lock_bed(session, locked_bed_id)
        if not interleaved:
            interleaved.append(locked_bed_id)
            other = database.session()
            try:
                bed_service.release_bed(other, bed_id)
                bed_service.assign_bed(other, bed_id, second_id)
            finally:
                other.close()
        return bed

    monkeypatch.setattr(bed_service, "_lock_bed", lock_then_readmit)

    with pytest.raises(ConflictException):
        bed_service.release_bed(db, bed_id)

    db.expire_all()
    bed = db.get(Bed, bed_id)
    assert bed.status == BedStatus.OCCUPIED
    assert bed.patient_id == second_id
    assert db.get(Patient, second_id).bed_id == bed_id
    assert db.get(Patient, first_id).bed_id is None


def test_release_missing_bed_is_not_found(db, beds):
    with pytest.raises(ResourceNotFoundException):
        bed_service.release_bed(db, 999)


def test_concurrent_assignment_has_single_winner(tmp_path):
    """
    Several sessions race for the same bed; exactly one admission wins and
    the losers leave no trace.
    """
    database = Database(f"sqlite:///{tmp_path / 'beds.db'}")
    database.create_tables()
    setup = database.session()
    try:
        seed_sample_data(setup)
        bed_id = setup.query(Bed).filter(Bed.number == "B001").one().id
        patient_ids = [
            register_patient(setup, PatientCreate(
                name=f"Racer {n}", age=4, type="child", contact_number=str(n), address="x",
                weight=12, height=90, nutrition_status="normal"
            )).id
            for n in range(5)
        ]
    finally:
        setup.close()

    barrier = threading.Barrier(len(patient_ids))
    winners = []
    errors = []

    def admit(patient_id):
        session = database.session()
        try:
            barrier.wait()
            bed_service.assign_bed(session, bed_id, patient_id)
            winners.append(patient_id)
        except ConflictException:
            pass
        except Exception as e:
            errors.append(e)
        finally:
            session.close()

    threads = [threading.Thread(target=admit, args=(pid,)) for pid in patient_ids]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    try:
        assert errors == []
        assert len(winners) == 1

        check = database.session()
        bed = check.get(Bed, bed_id)
        assert bed.status == BedStatus.OCCUPIED
        assert bed.patient_id == winners[0]
        holders = [p.id for p in check.query(Patient).filter(Patient.bed_id.isnot(None))]
        assert holders == winners
        check.close()
    finally:
        database.dispose()
