import asyncio
from decimal import Decimal

import httpx
import pytest

from app.adapters.vehicle_databases_adapter import (
    DATA_SOURCE_FALLBACK,
    DATA_SOURCE_LIVE,
    VehicleDatabasesAdapter,
    build_fallback_estimate,
    build_live_estimate,
    find_matching_repair,
)
from app.core.exceptions import ConfigurationError, VehicleDatabasesError
from app.schemas.labor_estimate import EstimateRequest
from app.utils.vehicle_databases_client import VehicleDatabasesClient


def make_request(**overrides):
    fields = {
        "year": 2018,
        "make": "Honda",
        "model": "Civic",
        "job_code": "brake-pad-replace",
        "shop_rate": 120,
    }
    fields.update(overrides)
    return EstimateRequest(**fields)


def repairs(*entries):
    return {"status": "success", "data": {"repairs": list(entries)}}


# ---------------------------------------------------------------------------
# Repair matching
# ---------------------------------------------------------------------------

def test_match_by_exact_value():
    entries = [{"value": "a", "title": "Alpha"}, {"value": "brake-pad-replace", "title": "Pads"}]

    assert find_matching_repair(entries, "brake-pad-replace")["title"] == "Pads"


def test_match_by_title_substring_ignores_case():
    entries = [{"value": "x1", "title": "Front BRAKE PAD Replacement"}]

    assert find_matching_repair(entries, "brake pad")["value"] == "x1"


def test_match_takes_first_in_list():
    entries = [
        {"value": "x1", "title": "Brake Pad Front"},
        {"value": "brake pad", "title": "Exact value match later"},
    ]

    assert find_matching_repair(entries, "brake pad")["value"] == "x1"


def test_no_match_returns_none():
    assert find_matching_repair([{"value": "a", "title": "Alpha"}], "zeta") is None


# ---------------------------------------------------------------------------
# Estimate building
# ---------------------------------------------------------------------------

def test_live_estimate_without_parts_cost():
    data = repairs({
        "value": "brake-pad-replace",
        "title": "Brake Pads",
        "costs": [{"name": "Labor", "low": 120, "high": 180}],
    })

    result = build_live_estimate(data, make_request(shop_rate=100))

    assert result.labor_hours_recommended == "1.50"
    assert result.parts_cost_estimate == "0.00"
    assert result.total_estimate == "150.00"
    assert result.data_source == DATA_SOURCE_LIVE


def test_live_estimate_null_labor_bounds_count_as_zero():
    data = repairs({
        "value": "brake-pad-replace",
        "title": "Brake Pads",
        "costs": [{"name": "Labor", "low": None, "high": 200}],
    })

    result = build_live_estimate(data, make_request())

    assert result.labor_hours_min == "0.00"
    assert result.labor_hours_max == "2.00"
    assert result.labor_hours_recommended == "1.00"


@pytest.mark.parametrize("data", [
    {"status": "error", "data": None},
    repairs(),
    repairs({"value": "brake-pad-replace", "title": "Brake Pads"}),
    repairs({"value": "brake-pad-replace", "title": "Brake Pads", "costs": [{"name": "Parts", "low": 1, "high": 2}]}),
])
def test_live_estimate_not_available(data):
    assert build_live_estimate(data, make_request()) is None


def test_live_estimate_totals_add_up():
    data = repairs({
        "value": "brake-pad-replace",
        "title": "Brake Pads",
        "costs": [
            {"name": "Parts", "low": 89.99, "high": 140.5},
            {"name": "Labor", "low": 133, "high": 197},
        ],
    })

    result = build_live_estimate(data, make_request(shop_rate=137.5))

    labor = Decimal(result.suggested_labor_price)
    parts = Decimal(result.parts_cost_estimate)
    assert abs(Decimal(result.total_estimate) - (labor + parts)) <= Decimal("0.01")
    assert abs(labor - Decimal(result.labor_hours_recommended) * Decimal("137.5")) <= Decimal("0.01")


def test_fallback_estimate():
    result = build_fallback_estimate(make_request(job_name="Front Pads"))

    assert result.job_name == "Front Pads"
    assert result.labor_hours_recommended == "1.50"
    assert result.suggested_labor_price == "180.00"
    assert result.total_estimate == "360.00"
    assert result.data_source == DATA_SOURCE_FALLBACK
    assert result.note


# ---------------------------------------------------------------------------
# Adapter + client
# ---------------------------------------------------------------------------

def test_adapter_requires_api_key():
    adapter = VehicleDatabasesAdapter(client=VehicleDatabasesClient(api_key=""))

    with pytest.raises(ConfigurationError):
        asyncio.run(adapter.estimate(make_request()))


def test_adapter_malformed_repairs_falls_back():
    client = VehicleDatabasesClient(
        api_key="k",
        transport=httpx.MockTransport(
            lambda request: httpx.Response(200, json={"status": "success", "data": {"repairs": "nope"}})
        )
    )

    result = asyncio.run(VehicleDatabasesAdapter(client=client).estimate(make_request()))

    assert result.data_source == DATA_SOURCE_FALLBACK


def test_client_encodes_make_and_model():
    client = VehicleDatabasesClient(api_key="k", base_url="https://vdb.test/v1/")

    url = client.repairs_url(2020, "Mercedes-Benz", "C 300/4MATIC")

    assert url == "https://vdb.test/v1/repairs-ymm/2020/Mercedes-Benz/C%20300%2F4MATIC"


def test_client_timeout_raises_upstream_error():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    client = VehicleDatabasesClient(api_key="k", transport=httpx.MockTransport(handler))

    with pytest.raises(VehicleDatabasesError) as exc_info:
        asyncio.run(client.get_repairs(2018, "Honda", "Civic"))

    assert exc_info.value.error == "timeout"


def test_client_error_status_raises_upstream_error():
    client = VehicleDatabasesClient(
        api_key="k",
        transport=httpx.MockTransport(lambda request: httpx.Response(429))
    )

    with pytest.raises(VehicleDatabasesError) as exc_info:
        asyncio.run(client.get_repairs(2018, "Honda", "Civic"))

    assert exc_info.value.status_code == 429
