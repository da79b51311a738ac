"""Pytest configuration and shared fixtures.

The app reads its settings at import time, so the environment is prepared
before anything from ``ecell`` is imported. Tests run against a throwaway
SQLite file through aiosqlite, and the object storage is an in-memory fake.
"""

import asyncio
import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="ecell-tests-")

os.environ.update(
    {
        "ENVIRONMENT": "dev",
        "DATABASE_URL": f"sqlite+aiosqlite:///{_DB_DIR}/test.db",
        "SUPABASE_PROJECT_URL": "https://project.supabase.test",
        "SUPABASE_SERVICE_ROLE_KEY": "service-key",
        "ADMIN_PASSWORD": "test-admin-secret",
        "EVENT_STATUS_POLICY": "lenient",
    }
)
for _key in ("SENDGRID_API_KEY", "SENDGRID_FROM_EMAIL"):
    os.environ.pop(_key, None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from ecell.core.dependencies import get_storage  # noqa: E402
from ecell.core.errors import StorageError  # noqa: E402
from ecell.db.base import Base  # noqa: E402
from ecell.db.session import engine  # noqa: E402
from ecell.main import app  # noqa: E402

ADMIN_PASSWORD = "test-admin-secret"
PUBLIC_PREFIX = "https://project.supabase.test/storage/v1/object/public/team-photos/"


class FakeStorage:
    """Stands in for the Supabase bucket; records uploads and removals."""

    def __init__(self):
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.removed: list[str] = []
        self.fail_upload = False
        self.fail_remove = False

    def public_url(self, path: str) -> str:
        return PUBLIC_PREFIX + path

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        if self.fail_upload:
            raise StorageError("simulated upload failure")
        self.objects[path] = (data, content_type)
        return self.public_url(path)

    async def remove(self, path: str) -> None:
        if self.fail_remove:
            raise StorageError("simulated removal failure")
        self.removed.append(path)
        self.objects.pop(path, None)


async def _reset_database() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def client(storage):
    app.dependency_overrides[get_storage] = lambda: storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    asyncio.run(_reset_database())


@pytest.fixture
def admin_password() -> str:
    return ADMIN_PASSWORD


@pytest.fixture
def admin_token(client, admin_password) -> str:
    res = client.post("/api/admin/login", json={"password": admin_password})
    assert res.status_code == 200
    return res.json()["token"]


@pytest.fixture
def admin_headers(admin_token) -> dict[str, str]:
    return {"Authorization": f"Bearer {admin_token}"}
