"""
Tests for anganwadi centers and their workers.
"""
import pytest


def center_payload(**overrides):
    payload = {
        "name": "Anganwadi Center Shastri Nagar",
        "code": "AWC002",
        "location": {
            "area": "Shastri Nagar",
            "district": "Central District",
            "state": "Madhya Pradesh",
            "pincode": "462003",
            "coordinates": {"latitude": 23.25, "longitude": 77.41}
        },
        "supervisor": {"name": "Dr. Sunita Devi", "contactNumber": "+91 9876543212"},
        "capacity": {"pregnantWomen": 20, "children": 40},
        "facilities": ["Kitchen"],
        "coverageAreas": ["Shastri Nagar"],
    }
    payload.update(overrides)
    return payload


def worker_payload(anganwadi_id=None, **overrides):
    payload = {
        "employeeId": "EMP-001",
        "name": "Kavita Sharma",
        "role": "head",
        "anganwadiId": anganwadi_id,
        "contactNumber": "+91 9876500010",
        "qualifications": ["12th pass"],
        "workingHours": {"start": "09:00", "end": "15:00"},
        "emergencyContact": {"name": "Raj Sharma", "relation": "Husband", "contactNumber": "+91 9876500011"},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def center(client):
    response = client.post("/api/anganwadis/", json=center_payload())
    assert response.status_code == 201
    return response.json()


def test_create_anganwadi(center):
    assert center["code"] == "AWC002"
    assert center["location"]["area"] == "Shastri Nagar"
    assert center["location"]["coordinates"] == {"latitude": 23.25, "longitude": 77.41}
    assert center["supervisor"]["contactNumber"] == "+91 9876543212"
    assert center["capacity"] == {"pregnantWomen": 20, "children": 40}
    assert center["isActive"] is True


def test_duplicate_anganwadi_code_is_conflict(client, center):
    response = client.post("/api/anganwadis/", json=center_payload(name="Copy"))
    assert response.status_code == 409


def test_anganwadi_requires_location(client):
    payload = center_payload()
    del payload["location"]
    assert client.post("/api/anganwadis/", json=payload).status_code == 422


def test_update_anganwadi(client, center):
    response = client.put(f"/api/anganwadis/{center['id']}", json={
        "capacity": {"pregnantWomen": 30, "children": 60},
        "facilities": ["Kitchen", "Toilet"]
    })
    assert response.status_code == 200
    data = response.json()
    assert data["capacity"] == {"pregnantWomen": 30, "children": 60}
    assert data["facilities"] == ["Kitchen", "Toilet"]
    assert data["location"]["area"] == "Shastri Nagar"


def test_deactivate_anganwadi(client, center):
    assert client.delete(f"/api/anganwadis/{center['id']}").status_code == 200
    assert client.get("/api/anganwadis/").json() == []
    assert client.get(f"/api/anganwadis/{center['id']}").json()["isActive"] is False
    assert len(client.get("/api/anganwadis/", params={"includeInactive": True}).json()) == 1


def test_create_worker(client, center):
    response = client.post("/api/workers/", json=worker_payload(center["id"]))
    assert response.status_code == 201
    worker = response.json()
    assert worker["role"] == "head"
    assert worker["anganwadiName"] == center["name"]
    assert worker["anganwadiArea"] == "Shastri Nagar"
    assert worker["workingHours"] == {"start": "09:00", "end": "15:00"}
    assert worker["emergencyContact"]["relation"] == "Husband"
    assert worker["isActive"] is True


def test_worker_for_missing_center_is_404(client):
    assert client.post("/api/workers/", json=worker_payload(999)).status_code == 404


def test_duplicate_employee_id_is_conflict(client, center):
    client.post("/api/workers/", json=worker_payload(center["id"]))
    response = client.post("/api/workers/", json=worker_payload(center["id"], name="Someone Else"))
    assert response.status_code == 409


def test_worker_rejects_bad_working_hours(client, center):
    payload = worker_payload(center["id"], workingHours={"start": "9am", "end": "15:00"})
    assert client.post("/api/workers/", json=payload).status_code == 422


def test_worker_rejects_unknown_role(client, center):
    assert client.post("/api/workers/", json=worker_payload(center["id"], role="doctor")).status_code == 422


def test_list_and_filter_workers(client, center):
    client.post("/api/workers/", json=worker_payload(center["id"]))
    client.post("/api/workers/", json=worker_payload(None, employeeId="ASHA-01", name="Asha Verma", role="asha"))

    names = [w["name"] for w in client.get("/api/workers/").json()]
    assert names == ["Asha Verma", "Kavita Sharma"]

    ashas = client.get("/api/workers/", params={"role": "asha"}).json()
    assert [w["employeeId"] for w in ashas] == ["ASHA-01"]

    at_center = client.get("/api/workers/", params={"anganwadiId": center["id"]}).json()
    assert [w["employeeId"] for w in at_center] == ["EMP-001"]


def test_update_and_deactivate_worker(client, center):
    worker = client.post("/api/workers/", json=worker_payload(center["id"])).json()

    response = client.put(f"/api/workers/{worker['id']}", json={
        "role": "supervisor",
        "workingHours": {"start": "10:00", "end": "16:00"}
    })
    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "supervisor"
    assert data["workingHours"] == {"start": "10:00", "end": "16:00"}
    assert data["emergencyContact"]["name"] == "Raj Sharma"

    assert client.delete(f"/api/workers/{worker['id']}").status_code == 200
    assert client.get("/api/workers/").json() == []
    assert client.get(f"/api/workers/{worker['id']}").json()["isActive"] is False
