import httpx
from fastapi.testclient import TestClient

from church_portal_api.app.main import create_app


def test_health_reports_database(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["db_connected"] is True


def test_frontend_shell_served_for_client_routes(settings, database, tmp_path):
    dist = tmp_path / "dist"
    dist.mkdir()
    (dist / "index.html").write_text("<html>shell</html>")
    settings.frontend_dist = str(dist)

    with TestClient(create_app(settings, database=database)) as client:
        page = client.get("/blog/123")
        assert page.status_code == 200
        assert page.text == "<html>shell</html>"

        root = client.get("/")
        assert root.text == "<html>shell</html>"

        api = client.get("/api/blogs")
        assert api.status_code == 200
        assert api.json() == []


def test_shutdown_closes_http_client(settings, database):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    with TestClient(create_app(settings, database=database, http_client=http_client)):
        assert not http_client.is_closed
    assert http_client.is_closed
