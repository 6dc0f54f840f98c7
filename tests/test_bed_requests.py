"""
Tests for raising and reviewing bed requests.
"""
import pytest

from nrc.bed_requests import service as request_service
from nrc.exceptions import ConflictException


def request_payload(patient_id, **overrides):
    payload = {
        "patientId": patient_id,
        "requestedBy": "AWW-07",
        "urgencyLevel": "high",
        "medicalJustification": "MUAC below 11.5 cm with bilateral oedema",
        "currentCondition": "Lethargic, poor appetite",
        "estimatedStayDuration": 14,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def pending_request(client, create_patient):
    patient = create_patient(nutritionStatus="severely_malnourished")
    response = client.post("/api/bed-requests/", json=request_payload(patient["id"]))
    assert response.status_code == 201
    return response.json()


def test_create_bed_request_is_pending(pending_request):
    assert pending_request["status"] == "pending"
    assert pending_request["reviewedBy"] is None
    assert pending_request["patientName"] == "Aarav Kumar"
    assert pending_request["nutritionStatus"] == "severely_malnourished"


def test_client_status_is_ignored_on_create(client, create_patient):
    patient = create_patient()
    response = client.post("/api/bed-requests/", json=request_payload(patient["id"], status="approved"))
    assert response.status_code == 201
    assert response.json()["status"] == "pending"


def test_create_for_missing_patient_is_404(client):
    assert client.post("/api/bed-requests/", json=request_payload(999)).status_code == 404


def test_create_with_invalid_urgency_is_422(client, create_patient):
    patient = create_patient()
    response = client.post("/api/bed-requests/", json=request_payload(patient["id"], urgencyLevel="extreme"))
    assert response.status_code == 422


def test_approve_request(client, pending_request):
    response = client.put(f"/api/bed-requests/{pending_request['id']}", json={
        "status": "approved",
        "reviewedBy": "Dr. Sharma",
        "reviewComments": "Admit to pediatric ward"
    })
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "approved"
    assert data["reviewedBy"] == "Dr. Sharma"
    assert data["reviewComments"] == "Admit to pediatric ward"
    assert data["reviewDate"] is not None


def test_decline_with_hospital_referral(client, pending_request):
    response = client.put(f"/api/bed-requests/{pending_request['id']}", json={
        "status": "declined",
        "reviewedBy": "Dr. Sharma",
        "reviewComments": "No NRC bed available",
        "hospitalReferral": {
            "hospitalName": "Regional Medical College",
            "contactNumber": "+91 9876500099",
            "referralReason": "Full capacity",
            "urgencyLevel": "urgent"
        }
    })
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "declined"
    assert data["hospitalReferral"]["hospitalName"] == "Regional Medical College"
    assert data["hospitalReferral"]["urgencyLevel"] == "urgent"


def test_second_review_is_conflict(client, pending_request):
    url = f"/api/bed-requests/{pending_request['id']}"
    first = client.put(url, json={"status": "approved", "reviewedBy": "Dr. Sharma", "reviewComments": "ok"})
    assert first.status_code == 200

    second = client.put(url, json={"status": "declined", "reviewedBy": "Dr. Rao", "reviewComments": "no"})
    assert second.status_code == 409

    data = client.get(url).json()
    assert data["status"] == "approved"
    assert data["reviewedBy"] == "Dr. Sharma"
    assert data["reviewComments"] == "ok"


def test_cancel_does_not_need_reviewer(client, pending_request):
    response = client.put(f"/api/bed-requests/{pending_request['id']}", json={"status": "cancelled"})
    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"


def test_review_validation(client, pending_request):
    url = f"/api/bed-requests/{pending_request['id']}"
    assert client.put(url, json={"status": "approved"}).status_code == 422
    assert client.put(url, json={"status": "pending", "reviewedBy": "Dr. Sharma"}).status_code == 422
    assert client.get(url).json()["status"] == "pending"


def test_review_missing_request_is_404(client):
    response = client.put("/api/bed-requests/999", json={"status": "approved", "reviewedBy": "Dr. Sharma"})
    assert response.status_code == 404


def test_approval_does_not_occupy_a_bed(client, beds, pending_request):
    client.put(f"/api/bed-requests/{pending_request['id']}", json={"status": "approved", "reviewedBy": "Dr. Sharma"})
    assert client.get("/api/beds/", params={"status": "occupied"}).json() == []
    assert client.get(f"/api/patients/{pending_request['patientId']}").json()["bedId"] is None


def test_list_bed_requests_with_filters(client, create_patient, pending_request):
    other = create_patient(name="Other")
    client.post("/api/bed-requests/", json=request_payload(other["id"], urgencyLevel="low"))
    client.put(f"/api/bed-requests/{pending_request['id']}", json={"status": "cancelled"})

    assert len(client.get("/api/bed-requests/").json()) == 2
    pending = client.get("/api/bed-requests/", params={"status": "pending"}).json()
    assert [r["patientId"] for r in pending] == [other["id"]]
    mine = client.get("/api/bed-requests/", params={"patientId": pending_request["patientId"]}).json()
    assert [r["status"] for r in mine] == ["cancelled"]


def test_service_rejects_review_of_reviewed_request(db, client, pending_request):
    request_service.decline_request(db, pending_request["id"], "Dr. Rao")
    with pytest.raises(ConflictException):
        request_service.approve_request(db, pending_request["id"], "Dr. Sharma")
