"""
Tests for role notifications and the high-risk registration alert.
"""
from nrc.exceptions import InternalServerException
from nrc.notifications import service as notification_service


def supervisor_alerts(client):
    return client.get("/api/notifications/role/supervisor").json()


def test_high_risk_score_raises_one_alert(client, create_patient):
    patient = create_patient(name="Ravi", riskScore=85)

    alerts = supervisor_alerts(client)
    assert len(alerts) == 1
    alert = alerts[0]
    assert alert["type"] == "high_risk_alert"
    assert alert["priority"] == "high"
    assert alert["actionRequired"] is True
    assert alert["read"] is False
    assert alert["relatedEntityType"] == "patient"
    assert alert["relatedEntityId"] == patient["id"]
    assert "Ravi" in alert["message"]


def test_normal_registration_raises_no_alert(client, create_patient):
    create_patient(riskScore=50, nutritionStatus="normal")
    assert supervisor_alerts(client) == []


def test_threshold_score_itself_is_not_high_risk(client, create_patient):
    create_patient(riskScore=80)
    assert supervisor_alerts(client) == []


def test_severe_malnutrition_raises_alert(client, create_patient):
    create_patient(riskScore=10, nutritionStatus="severely_malnourished")
    alerts = supervisor_alerts(client)
    assert len(alerts) == 1
    assert "severely_malnourished" in alerts[0]["message"]


def test_alert_failure_keeps_registration(client, create_patient, monkeypatch):
    def failing_create(db, notification_data):
        raise InternalServerException("notification store unavailable")

    monkeypatch.setattr(notification_service, "create_notification", failing_create)

    patient = create_patient(riskScore=95)
    assert client.get(f"/api/patients/{patient['id']}").status_code == 200

    monkeypatch.undo()
    assert supervisor_alerts(client) == []


def test_is_high_risk():
    assert notification_service.is_high_risk(81, False, 80)
    assert not notification_service.is_high_risk(80, False, 80)
    assert notification_service.is_high_risk(0, True, 80)
    assert not notification_service.is_high_risk(None, False, 80)


def test_create_and_read_notification(client):
    response = client.post("/api/notifications/", json={
        "userRole": "anganwadi_worker",
        "type": "visit_reminder",
        "title": "Visit due",
        "message": "Home visit due tomorrow"
    })
    assert response.status_code == 201
    notification = response.json()
    assert notification["priority"] == "medium"
    assert notification["read"] is False

    unread = client.get("/api/notifications/role/anganwadi_worker", params={"unreadOnly": True}).json()
    assert [n["id"] for n in unread] == [notification["id"]]

    response = client.put(f"/api/notifications/{notification['id']}/read")
    assert response.status_code == 200
    assert response.json()["read"] is True

    # Marking again is harmless
    assert client.put(f"/api/notifications/{notification['id']}/read").status_code == 200

    assert client.get("/api/notifications/role/anganwadi_worker", params={"unreadOnly": True}).json() == []
    assert len(client.get("/api/notifications/role/anganwadi_worker").json()) == 1
    assert client.get("/api/notifications/role/supervisor").json() == []


def test_read_missing_notification_is_404(client):
    assert client.put("/api/notifications/999/read").status_code == 404
