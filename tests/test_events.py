from datetime import datetime, timedelta, timezone


def create_event(client, title, date, time="10:00 AM", files=None):
    response = client.post("/api/events", data={"title": title, "date": date, "time": time}, files=files)
    assert response.status_code == 201, response.text
    return response.json()


def iso(delta):
    return (datetime.now(timezone.utc) + delta).strftime("%Y-%m-%dT%H:%M:%SZ")


def test_list_returns_only_upcoming_events_in_date_order(client):
    create_event(client, "Last year's retreat", iso(timedelta(days=-365)))
    create_event(client, "Christmas concert", iso(timedelta(days=60)))
    create_event(client, "Yesterday's picnic", iso(timedelta(days=-1)))
    create_event(client, "Youth camp", iso(timedelta(days=7)))
    create_event(client, "Easter service", iso(timedelta(days=200)))

    response = client.get("/api/events")
    assert response.status_code == 200
    assert [e["title"] for e in response.json()] == ["Youth camp", "Christmas concert", "Easter service"]


def test_offset_dates_are_stored_as_utc(client):
    event = create_event(client, "Vigil", "2999-06-01T20:00:00+02:00")
    assert event["date"].startswith("2999-06-01T18:00:00")


def test_create_event_with_image_and_delete(client, upload_dir):
    event = create_event(
        client,
        "Baptism",
        iso(timedelta(days=3)),
        files={"image": ("poster.webp", b"webp", "image/webp")},
    )
    path = upload_dir / event["image"]
    assert path.read_bytes() == b"webp"
    assert event["image_url"].endswith(event["image"])

    assert client.delete(f"/api/events/{event['id']}").status_code == 204
    assert not path.exists()
    assert client.get("/api/events").json() == []


def test_create_event_missing_date_is_400(client):
    response = client.post("/api/events", data={"title": "No date", "time": "noon"})
    assert response.status_code == 400


def test_delete_unknown_event_is_404(client):
    response = client.delete("/api/events/0123456789abcdef01234567")
    assert response.status_code == 404
    assert response.json()["message"] == "Event not found"
