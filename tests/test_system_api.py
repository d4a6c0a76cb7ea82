from vehicle_registry.db import session


def test_health_reports_disconnected_store_without_pool(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["database"] == "Disconnected"
    assert body["environment"] == "development"
    assert body["version"] == "1.0.0"
    assert body["timestamp"]


def test_health_reports_connected_store(client, monkeypatch):
    async def connected():
        return True

    monkeypatch.setattr(session, "is_connected", connected)

    assert client.get("/api/health").json()["database"] == "Connected"


def test_info_lists_routes(client):
    body = client.get("/api").json()

    assert body["version"] == "1.0.0"
    assert "POST /api/records" in body["endpoints"]["records"]
    assert "DELETE /api/records/:id" in body["endpoints"]["records"]
    assert "GET /api/health" in body["endpoints"]["system"]
    assert not any("analytics" in route for group in body["endpoints"].values() for route in group)


def test_rules_endpoint(client):
    response = client.get("/api/rules")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert set(body["data"]["fields"]) == {
        "username", "phoneNumber", "birthDate", "gender", "carNumber", "carType",
    }


def test_unknown_api_path_is_structured_not_found(client):
    for method in ("get", "post", "delete"):
        response = getattr(client, method)("/api/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "API endpoint not found"}


def test_root_serves_client_shell(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert 'id="recordForm"' in response.text


def test_unknown_page_falls_back_to_client_shell(client):
    response = client.get("/records/some/deep/link")

    assert response.status_code == 200
    assert 'id="recordForm"' in response.text


def test_static_assets_are_served(client):
    response = client.get("/static/js/app.js")

    assert response.status_code == 200
    assert "createState" in response.text


def test_store_unavailable_is_server_failure(monkeypatch):
    from fastapi.testclient import TestClient
    from vehicle_registry.main import app

    async def unreachable():
        raise OSError("connection refused")

    monkeypatch.setattr(session, "db_pool", None)
    monkeypatch.setattr(session, "connect_db_pool", unreachable)

    response = TestClient(app).get("/api/records")

    assert response.status_code == 500
    assert response.json()["message"] == "Database is not available"


def test_non_get_on_api_root_is_structured_not_found(client):
    response = client.post("/api")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "API endpoint not found"}


def test_non_get_page_request_falls_back_to_client_shell(client):
    response = client.post("/some/page")

    assert response.status_code == 200
    assert 'id="recordForm"' in response.text
