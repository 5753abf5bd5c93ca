import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.repositories.job_repository import get_job_repository
from app.schemas.job import JobSchema, ShopOverrideSchema


class FakeJobRepository:
    """In-memory stand-in for JobRepository"""

    def __init__(self, jobs=None, overrides=None, fail_on=None):
        self.jobs = jobs or []
        self.overrides = overrides or []
        self.fail_on = fail_on
        self.override_calls = []

    async def list_active_jobs(self):
        if self.fail_on == "jobs":
            raise RuntimeError("connection refused")
        active = [job for job in self.jobs if job.is_active]
        return sorted(active, key=lambda job: job.category)

    async def list_overrides(self, shop_id):
        self.override_calls.append(shop_id)
        if self.fail_on == "overrides":
            raise RuntimeError("connection refused")
        return [o for o in self.overrides if o.shop_id == shop_id]


@pytest.fixture
def catalog_jobs():
    return [
        JobSchema(id="j1", category="Brakes", name="Front Brake Pads", base_hours=1.5, rate_type="standard"),
        JobSchema(id="j2", category="Brakes", name="Rear Brake Pads", base_hours=1.3, rate_type="standard"),
        JobSchema(id="j3", category="Engine", name="Timing Belt", base_hours=4.5, rate_type="premium"),
        JobSchema(id="j4", category="Maintenance", name="Oil Change", base_hours=0.5, rate_type="flat"),
    ]


@pytest.fixture
def shop_overrides():
    return [
        ShopOverrideSchema(shop_id="shop-1", job_id="j2", is_hidden=True),
        ShopOverrideSchema(shop_id="shop-1", job_id="j3", base_hours_override=5.0),
        ShopOverrideSchema(shop_id="shop-1", job_id="j4", rate_type_override="standard"),
        ShopOverrideSchema(shop_id="shop-2", job_id="j1", is_hidden=True),
    ]


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_repository():
    def _use(repository):
        app.dependency_overrides[get_job_repository] = lambda: repository
        return repository
    return _use
