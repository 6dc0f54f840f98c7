"""
Tests for patient registration, listing, updates and soft deletion.
"""
import re


def test_register_patient(client, patient_payload):
    response = client.post("/api/patients/", json=patient_payload(aadhaarNumber="1234-5678-9012"))
    assert response.status_code == 201
    data = response.json()
    assert data["id"] > 0
    assert data["name"] == "Aarav Kumar"
    assert data["type"] == "child"
    assert data["nutritionStatus"] == "normal"
    assert data["isActive"] is True
    assert data["bedId"] is None
    assert data["medicalHistory"] == []
    # Emergency contact falls back to the primary contact
    assert data["emergencyContact"] == "+91 9876500001"
    assert re.fullmatch(r"NRC\d{8}[0-9A-F]{6}", data["registrationNumber"])


def test_register_patient_keeps_supplied_registration_number(client, patient_payload):
    response = client.post("/api/patients/", json=patient_payload(registrationNumber="NRC-P100"))
    assert response.status_code == 201
    assert response.json()["registrationNumber"] == "NRC-P100"


def test_duplicate_registration_number_is_conflict(client, patient_payload):
    assert client.post("/api/patients/", json=patient_payload(registrationNumber="NRC-P100")).status_code == 201

    response = client.post("/api/patients/", json=patient_payload(registrationNumber="NRC-P100", name="Other"))
    assert response.status_code == 409
    assert len(client.get("/api/patients/").json()) == 1


def test_duplicate_aadhaar_is_conflict(client, patient_payload):
    assert client.post("/api/patients/", json=patient_payload(aadhaarNumber="1111")).status_code == 201
    response = client.post("/api/patients/", json=patient_payload(aadhaarNumber="1111"))
    assert response.status_code == 409


def test_invalid_enum_is_rejected(client, patient_payload):
    response = client.post("/api/patients/", json=patient_payload(type="adult"))
    assert response.status_code == 422
    data = response.json()
    assert data["detail"] == "Validation error"
    assert data["errors"]


def test_missing_required_field_is_rejected(client, patient_payload):
    payload = patient_payload()
    del payload["name"]
    response = client.post("/api/patients/", json=payload)
    assert response.status_code == 422


def test_pregnancy_week_only_for_pregnant_patients(client, patient_payload):
    response = client.post("/api/patients/", json=patient_payload(pregnancyWeek=20))
    assert response.status_code == 422

    response = client.post(
        "/api/patients/",
        json=patient_payload(type="pregnant", age=24, pregnancyWeek=20, name="Meera Devi")
    )
    assert response.status_code == 201
    assert response.json()["pregnancyWeek"] == 20


def test_changing_type_from_pregnant_clears_pregnancy_week(create_patient, client):
    patient = create_patient(type="pregnant", age=24, pregnancyWeek=20, name="Meera Devi")

    response = client.put(f"/api/patients/{patient['id']}", json={"type": "child", "age": 4})
    assert response.status_code == 200
    assert response.json()["type"] == "child"
    assert response.json()["pregnancyWeek"] is None


def test_update_rejects_pregnancy_week_for_child(create_patient, client):
    patient = create_patient()
    response = client.put(f"/api/patients/{patient['id']}", json={"pregnancyWeek": 12})
    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "pregnancyWeek"
    assert client.get(f"/api/patients/{patient['id']}").json()["pregnancyWeek"] is None


def test_list_patients_with_filters(create_patient, client):
    create_patient(name="Child One")
    create_patient(name="Mother One", type="pregnant", age=25, nutritionStatus="malnourished")

    assert len(client.get("/api/patients/").json()) == 2

    children = client.get("/api/patients/", params={"type": "child"}).json()
    assert [p["name"] for p in children] == ["Child One"]

    malnourished = client.get("/api/patients/", params={"nutritionStatus": "malnourished"}).json()
    assert [p["name"] for p in malnourished] == ["Mother One"]


def test_update_patient_merges_fields(create_patient, client):
    patient = create_patient()
    response = client.put(
        f"/api/patients/{patient['id']}",
        json={"weight": 12.5, "symptoms": ["fatigue"], "nutritionStatus": "malnourished"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["weight"] == 12.5
    assert data["symptoms"] == ["fatigue"]
    assert data["nutritionStatus"] == "malnourished"
    assert data["name"] == patient["name"]
    assert data["registrationNumber"] == patient["registrationNumber"]


def test_update_patient_rejects_null_for_required_field(create_patient, client):
    patient = create_patient()
    response = client.put(f"/api/patients/{patient['id']}", json={"name": None})
    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "name"


def test_update_patient_cannot_set_bed(create_patient, client):
    patient = create_patient()
    response = client.put(f"/api/patients/{patient['id']}", json={"bedId": 1})
    assert response.status_code == 200
    assert response.json()["bedId"] is None


def test_update_missing_patient_is_404(client):
    response = client.put("/api/patients/404", json={"weight": 10})
    assert response.status_code == 404


def test_soft_delete_patient(create_patient, client):
    patient = create_patient()

    response = client.delete(f"/api/patients/{patient['id']}")
    assert response.status_code == 200
    assert response.json()["message"] == "Patient deleted successfully"

    assert client.get("/api/patients/").json() == []

    # Still reachable by id and in the full listing
    response = client.get(f"/api/patients/{patient['id']}")
    assert response.status_code == 200
    assert response.json()["isActive"] is False
    everyone = client.get("/api/patients/", params={"includeInactive": True}).json()
    assert [p["id"] for p in everyone] == [patient["id"]]
