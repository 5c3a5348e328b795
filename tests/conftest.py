"""Shared fixtures: an app wired to in‑memory MongoDB and a fake Mailchimp."""

from typing import List

import httpx
import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from church_portal_api.app.core.config import Settings
from church_portal_api.app.main import create_app


class FakeMailchimp:
    """Records requests and answers with a configurable status."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body = {"new_members": [], "updated_members": [], "errors": [], "error_count": 0}
        self.fail_with = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with(f"cannot reach {request.url.host}", request=request)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir):
    return Settings(
        upload_dir=str(upload_dir),
        database_name="church_portal_test",
        mailchimp_api_key="0123456789abcdef-us14",
        mailchimp_audience_id="audience42",
        mailchimp_server_prefix="",
        cors_origins="*",
        frontend_dist="",
        log_file="",
    )


@pytest.fixture
def database():
    return AsyncMongoMockClient()["church_portal_test"]


@pytest.fixture
def mailchimp():
    return FakeMailchimp()


@pytest.fixture
def client(settings, database, mailchimp):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(mailchimp.handler))
    app = create_app(settings, database=database, http_client=http_client)
    with TestClient(app) as test_client:
        yield test_client
