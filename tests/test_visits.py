"""
Tests for visit scheduling and outcomes.
"""


def schedule(client, patient_id, **overrides):
    payload = {
        "patientId": patient_id,
        "healthWorkerId": "AWW-07",
        "scheduledDate": "2024-06-10T09:00:00Z",
    }
    payload.update(overrides)
    return client.post("/api/visits/", json=payload)


def test_schedule_visit(client, create_patient):
    patient = create_patient()
    response = schedule(client, patient["id"], notes="Weigh and check MUAC")
    assert response.status_code == 201
    visit = response.json()
    assert visit["status"] == "scheduled"
    assert visit["actualDate"] is None
    assert visit["patientName"] == patient["name"]


def test_schedule_rejects_actual_date_for_open_visit(client, create_patient):
    patient = create_patient()
    response = schedule(client, patient["id"], actualDate="2024-06-10T09:30:00Z")
    assert response.status_code == 422


def test_schedule_completed_visit_keeps_actual_date(client, create_patient):
    patient = create_patient()
    response = schedule(client, patient["id"], status="completed", actualDate="2024-06-10T09:30:00Z")
    assert response.status_code == 201
    assert response.json()["actualDate"].startswith("2024-06-10T09:30:00")


def test_completing_visit_stamps_actual_date(client, create_patient):
    patient = create_patient()
    visit = schedule(client, patient["id"]).json()

    response = client.put(f"/api/visits/{visit['id']}", json={"status": "completed"})
    assert response.status_code == 200
    assert response.json()["status"] == "completed"
    assert response.json()["actualDate"] is not None

    response = client.put(f"/api/visits/{visit['id']}", json={"status": "rescheduled", "scheduledDate": "2024-06-12T09:00:00Z"})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "rescheduled"
    assert data["actualDate"] is None
    assert data["scheduledDate"].startswith("2024-06-12")


def test_update_rejects_actual_date_for_open_visit(client, create_patient):
    patient = create_patient()
    visit = schedule(client, patient["id"]).json()
    response = client.put(f"/api/visits/{visit['id']}", json={"actualDate": "2024-06-10T09:30:00Z"})
    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "actualDate"


def test_missed_visit_uses_supplied_date(client, create_patient):
    patient = create_patient()
    visit = schedule(client, patient["id"]).json()
    response = client.put(
        f"/api/visits/{visit['id']}",
        json={"status": "missed", "actualDate": "2024-06-10T18:00:00Z"}
    )
    assert response.status_code == 200
    assert response.json()["actualDate"].startswith("2024-06-10T18:00:00")


def test_list_visits_with_filters(client, create_patient):
    first = create_patient(name="First")
    second = create_patient(name="Second")
    schedule(client, first["id"], scheduledDate="2024-06-01T09:00:00Z")
    schedule(client, first["id"], scheduledDate="2024-06-08T09:00:00Z", status="missed")
    schedule(client, second["id"])

    mine = client.get("/api/visits/", params={"patientId": first["id"]}).json()
    assert [v["scheduledDate"][:10] for v in mine] == ["2024-06-08", "2024-06-01"]

    missed = client.get("/api/visits/", params={"status": "missed"}).json()
    assert len(missed) == 1
    assert missed[0]["actualDate"] is not None


def test_visit_for_missing_patient_is_404(client):
    assert schedule(client, 999).status_code == 404
    assert client.get("/api/visits/999").status_code == 404
