"""
API tests for health, metrics and the error envelope.
"""

from unittest.mock import patch

from fieldops.infrastructure.monitoring import metrics


def test_health(client):
    response = client.get("/api/health/")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["services"]["database"]["status"] == "healthy"


def test_liveness_and_readiness(client):
    assert client.get("/api/health/live").json()["status"] == "alive"
    assert client.get("/api/health/ready").json()["status"] == "ready"


def test_request_id_is_echoed(client):
    response = client.get("/api/health/live", headers={"X-Request-ID": "req-42"})

    assert response.headers["X-Request-ID"] == "req-42"
    assert "X-Process-Time" in response.headers


def test_metrics_exposition(client):
    client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "x"})

    response = client.get("/api/health/metrics")

    assert response.status_code == 200
    assert "account_logins_total" in response.text
    assert "system_up_time_seconds" in response.text


def test_metrics_can_be_disabled(client):
    with patch("fieldops.api.routes.health.settings.ENABLE_METRICS", False):
        response = client.get("/api/health/metrics")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_unknown_route_uses_envelope(client):
    response = client.get("/api/no-such-thing")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_metric_helpers_accept_labels():
    metrics.record_task_transition("assigned", "in-progress")
    metrics.record_rating(5)

    assert b"task_transitions_total" in metrics.get_metrics()
