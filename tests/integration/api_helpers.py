"""
Shared HTTP helpers for API integration tests.
"""

from typing import Dict, Tuple

from fastapi.testclient import TestClient

PASSWORD = "secret123"


def register(client: TestClient, name: str, email: str, role: str = "customer", **extra) -> Dict:
    response = client.post(
        "/api/users/register",
        json={"name": name, "email": email, "password": PASSWORD, "role": role, **extra},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["user"]


def login(client: TestClient, email: str) -> str:
    response = client.post("/api/auth/login", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200, response.text
    return response.json()["data"]["token"]


def auth(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def register_and_login(client: TestClient, name: str, email: str, role: str = "customer") -> Tuple[Dict, Dict]:
    user = register(client, name, email, role)
    return user, auth(login(client, email))


def approved_worker(client: TestClient, admin_headers: Dict, email: str = "walt@example.com") -> Tuple[Dict, Dict]:
    worker = register(client, "Walt Worker", email, "field_worker", skills=["plumbing"])
    response = client.put(f"/api/field-workers/{worker['id']}/approve", headers=admin_headers)
    assert response.status_code == 200, response.text
    return worker, auth(login(client, email))


def create_request(client: TestClient, customer_headers: Dict, title: str = "Leaking tap") -> Dict:
    response = client.post(
        "/api/service-requests",
        json={
            "title": title,
            "description": "Kitchen tap drips all night",
            "location": "12 High Street",
            "category": "plumbing",
            "urgency": "high",
            "budget": 80,
        },
        headers=customer_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["service_request"]


def assign(client: TestClient, admin_headers: Dict, request_id: str, worker_id: str):
    return client.post(
        "/api/tasks/assign",
        json={"service_request_id": request_id, "field_worker_id": worker_id},
        headers=admin_headers,
    )


def set_status(client: TestClient, headers: Dict, task_id: str, status: str, **extra):
    return client.put(
        f"/api/tasks/{task_id}/status", json={"status": status, **extra}, headers=headers
    )
