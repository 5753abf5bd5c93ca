import asyncio

from beanie import init_beanie
from mongomock_motor import AsyncMongoMockClient

from app.models.job import Job, ShopOverride
from app.repositories.job_repository import JobRepository


async def seed_catalog():
    client = AsyncMongoMockClient()
    await init_beanie(
        database=client["connect_specs_test"],
        document_models=[Job, ShopOverride]
    )

    # Inserted out of category order, with one inactive job
    for category, name, is_active in [
        ("Suspension", "Strut Replacement", True),
        ("Brakes", "Front Brake Pads", True),
        ("Maintenance", "Oil Change", True),
        ("Cooling System", "Coolant Flush", False),
        ("Electrical", "Battery Replacement", True),
    ]:
        await Job(category=category, name=name, is_active=is_active, base_hours=1.0).insert()

    await ShopOverride(shop_id="shop-1", job_id="a", is_hidden=True).insert()
    await ShopOverride(shop_id="shop-1", job_id="b", base_hours_override=2.5).insert()
    await ShopOverride(shop_id="shop-2", job_id="a", rate_type_override="premium").insert()


def test_list_active_jobs_sorted_by_category():
    async def run():
        await seed_catalog()
        return await JobRepository().list_active_jobs()

    jobs = asyncio.run(run())

    assert [job.category for job in jobs] == ["Brakes", "Electrical", "Maintenance", "Suspension"]
    assert all(job.is_active for job in jobs)
    assert "Coolant Flush" not in [job.name for job in jobs]
    assert all(job.id for job in jobs)


def test_list_overrides_only_for_requested_shop():
    async def run():
        await seed_catalog()
        return await JobRepository().list_overrides("shop-1")

    overrides = asyncio.run(run())

    assert {o.shop_id for o in overrides} == {"shop-1"}
    assert sorted(o.job_id for o in overrides) == ["a", "b"]
    hidden = {o.job_id: o.is_hidden for o in overrides}
    assert hidden == {"a": True, "b": False}


def test_list_overrides_unknown_shop_is_empty():
    async def run():
        await seed_catalog()
        return await JobRepository().list_overrides("shop-404")

    assert asyncio.run(run()) == []
