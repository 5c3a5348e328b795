from pymongo.errors import ServerSelectionTimeoutError


PAYLOAD = {
    "name": "Grace Mensah",
    "email": "grace@example.com",
    "location": "Accra",
    "church": "Calvary Chapel",
    "phone": "+233 20 000 0000",
}


def test_register_then_list_returns_unchecked_record(client):
    response = client.post("/api/register", json=PAYLOAD)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User registered successfully"
    assert body["user"]["check"] is False

    listed = client.get("/api/register")
    assert listed.status_code == 200
    records = listed.json()
    assert len(records) == 1
    record = records[0]
    assert {key: record[key] for key in PAYLOAD} == PAYLOAD
    assert record["check"] is False
    assert record["id"] == body["user"]["id"]


def test_register_ignores_client_supplied_check_flag(client):
    response = client.post("/api/register", json={**PAYLOAD, "check": True})
    assert response.status_code == 201
    assert response.json()["user"]["check"] is False


def test_register_missing_required_field_is_400(client):
    response = client.post("/api/register", json={"name": "No Email"})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"
    assert client.get("/api/register").json() == []


def test_check_in_is_idempotent(client):
    user_id = client.post("/api/register", json=PAYLOAD).json()["user"]["id"]

    first = client.patch(f"/api/register/{user_id}")
    assert first.status_code == 200
    assert first.json()["message"] == "User checked in successfully"
    assert first.json()["user"]["check"] is True

    second = client.patch(f"/api/register/{user_id}")
    assert second.status_code == 200
    assert second.json()["user"]["check"] is True

    records = client.get("/api/register").json()
    assert [r["check"] for r in records] == [True]


def test_check_in_unknown_id_is_404_and_creates_nothing(client):
    response = client.patch("/api/register/0123456789abcdef01234567")
    assert response.status_code == 404
    assert response.json()["message"] == "User not found"
    assert client.get("/api/register").json() == []


def test_check_in_malformed_id_is_400(client):
    response = client.patch("/api/register/not-an-id")
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid registration id"
    assert client.get("/api/register").json() == []


def _database_down(*args, **kwargs):
    raise ServerSelectionTimeoutError("db down")


def test_register_when_database_fails_is_500(client, monkeypatch):
    repository = client.app.state.registration_service.repository
    monkeypatch.setattr(repository.collection, "insert_one", _database_down)

    response = client.post("/api/register", json=PAYLOAD)
    assert response.status_code == 500
    assert response.json() == {"message": "Error saving registrations", "error": "db down"}


def test_list_when_database_fails_is_500(client, monkeypatch):
    repository = client.app.state.registration_service.repository
    monkeypatch.setattr(repository.collection, "find", _database_down)

    response = client.get("/api/register")
    assert response.status_code == 500
    assert response.json() == {"message": "Error fetching registrations", "error": "db down"}
