from __future__ import annotations

from flask.testing import FlaskClient

from employee_api.infrastructure.repositories.employees import InMemoryEmployeeRepository


def test_list_employees(client: FlaskClient) -> None:
    response = client.get("/employees")

    assert response.status_code == 200
    assert response.get_json() == [
        {"id": 1, "name": "Alice Smith", "position": "Developer"},
        {"id": 2, "name": "Bob Johnson", "position": "Manager"},
    ]


def test_get_employee(client: FlaskClient) -> None:
    response = client.get("/employees/2")

    assert response.status_code == 200
    assert response.get_json() == {"id": 2, "name": "Bob Johnson", "position": "Manager"}


def test_get_unknown_employee_returns_404(client: FlaskClient) -> None:
    response = client.get("/employees/99")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Employee with ID 99 not found."}


def test_non_integer_id_returns_json_404(client: FlaskClient) -> None:
    response = client.get("/employees/abc")

    assert response.status_code == 404
    assert "error" in response.get_json()


def test_create_employee(client: FlaskClient) -> None:
    response = client.post("/employees", json={"name": "Carl", "position": "QA"})

    assert response.status_code == 201
    assert response.get_json() == {"id": 3, "name": "Carl", "position": "QA"}
    assert response.headers["Location"] == "/employees/3"
    assert client.get("/employees/3").get_json()["name"] == "Carl"


def test_create_ignores_client_supplied_id(client: FlaskClient) -> None:
    response = client.post("/employees", json={"id": 1, "name": "Carl", "position": "QA"})

    assert response.status_code == 201
    assert response.get_json()["id"] == 3
    assert client.get("/employees/1").get_json()["name"] == "Alice Smith"


def test_create_does_not_require_auth(client: FlaskClient) -> None:
    response = client.post("/employees", json={"name": "Eve", "position": "Ops"})

    assert response.status_code == 201


def test_create_with_blank_field_returns_400(client: FlaskClient) -> None:
    response = client.post("/employees", json={"name": "  ", "position": "QA"})

    assert response.status_code == 400
    assert response.get_json() == {"error": "Name and Position are required."}
    assert len(client.get("/employees").get_json()) == 2


def test_create_without_body_returns_400(client: FlaskClient) -> None:
    response = client.post("/employees", data="not json", content_type="text/plain")

    assert response.status_code == 400
    assert "error" in response.get_json()


def test_create_with_wrong_types_returns_400(client: FlaskClient) -> None:
    response = client.post("/employees", json={"name": 12, "position": ["QA"]})

    assert response.status_code == 400
    assert response.get_json() == {"error": "Request payload is invalid."}


def test_update_requires_auth(client: FlaskClient, store: InMemoryEmployeeRepository) -> None:
    response = client.put("/employees/1", json={"name": "X", "position": "Y"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "Authentication required."}
    assert store.get(1).name == "Alice Smith"


def test_update_employee(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    response = client.put(
        "/employees/1",
        json={"id": 77, "name": "Alice Smith", "position": "Architect"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.get_json() == {"id": 1, "name": "Alice Smith", "position": "Architect"}
    assert client.get("/employees/1").get_json()["position"] == "Architect"
    assert client.get("/employees/77").status_code == 404


def test_update_with_blank_field_keeps_prior_value(
    client: FlaskClient, auth_headers: dict[str, str]
) -> None:
    response = client.put(
        "/employees/1", json={"name": "", "position": "Architect"}, headers=auth_headers
    )

    assert response.status_code == 400
    assert client.get("/employees/1").get_json()["position"] == "Developer"


def test_update_unknown_employee_returns_404(
    client: FlaskClient, auth_headers: dict[str, str]
) -> None:
    response = client.put(
        "/employees/99", json={"name": "X", "position": "Y"}, headers=auth_headers
    )

    assert response.status_code == 404


def test_update_checks_auth_before_payload(client: FlaskClient) -> None:
    response = client.put("/employees/99", json={"name": ""})

    assert response.status_code == 401


def test_delete_requires_auth(client: FlaskClient) -> None:
    response = client.delete("/employees/1", headers={"Authorization": "Bearer nope"})

    assert response.status_code == 401
    assert client.get("/employees/1").status_code == 200


def test_delete_employee(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    response = client.delete("/employees/2", headers=auth_headers)

    assert response.status_code == 204
    assert response.get_data() == b""
    assert client.get("/employees/2").status_code == 404


def test_delete_unknown_employee_returns_404(
    client: FlaskClient, auth_headers: dict[str, str]
) -> None:
    response = client.delete("/employees/99", headers=auth_headers)

    assert response.status_code == 404
    assert response.get_json() == {"error": "Employee with ID 99 not found."}


def test_health_reports_record_count(client: FlaskClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "employees": 2}
