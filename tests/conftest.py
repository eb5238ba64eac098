"""Shared fixtures: in-memory SQLite database and an in-memory object store."""

import pytest
from fastapi.testclient import TestClient

from services.product_service.main import create_app
from shared.config.settings import Settings
from shared.storage import S3ObjectStore

TEST_BUCKET = "test-bucket"
TEST_REGION = "eu-west-1"


class InMemoryObjectStore(S3ObjectStore):
    """S3ObjectStore that keeps objects in a dict instead of calling AWS."""

    def __init__(self, bucket_name: str = TEST_BUCKET, region: str = TEST_REGION):
        super().__init__(bucket_name, region, s3_client=object())
        self.objects: dict[str, dict] = {}
        self.deleted: list[str] = []
        self.fail_on_put = False
        self.closed = False

    async def put_object(self, key, body, content_type="application/json"):
        if self.fail_on_put:
            raise RuntimeError("object storage unavailable")
        self.objects[key] = {"body": body, "content_type": content_type}

    async def delete_object(self, key):
        self.deleted.append(key)
        self.objects.pop(key, None)

    def close(self):
        self.closed = True


def _settings(**overrides) -> Settings:
    values = {
        "s3_bucket_name": TEST_BUCKET,
        "aws_region": TEST_REGION,
        "database_url": "sqlite+aiosqlite://",
        "metrics_enabled": False,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings() -> Settings:
    return _settings()


@pytest.fixture
def object_store() -> InMemoryObjectStore:
    return InMemoryObjectStore()


@pytest.fixture
def app(settings, object_store):
    return create_app(settings, object_store=object_store)


@pytest.fixture(name="client")
def client_fixture(app):
    """Test client with the lifespan (engine, tables, store) running."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def lenient_client(app):
    """Client that returns 500 responses instead of re-raising server errors."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def rollback_client(object_store):
    app = create_app(_settings(mirror_failure_policy="rollback"), object_store=object_store)
    with TestClient(app) as client:
        yield client
