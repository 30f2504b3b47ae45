import csv
import io
import sys
from datetime import date, timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from stitchstyle.application import get_catalog_service, get_order_service, reset_application_state
from stitchstyle.core.seed import load_catalog_seed
from stitchstyle.core.tracking import build_timeline
from stitchstyle.domain import Address, Order
from stitchstyle.infrastructure import InMemoryCatalogRepository


@pytest.fixture(autouse=True)
def reset_state():
    reset_application_state()
    yield
    reset_application_state()


@pytest.fixture()
def client():
    from stitchstyle.app import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


def _place_order(client: TestClient, customer_id: str = "cust-001", style_id: str = "style-blouse") -> dict:
    session_id = client.post("/api/workflow/sessions").json()["session_id"]
    client.put(f"/api/workflow/sessions/{session_id}/customer", json={"customer_id": customer_id})
    client.put(
        f"/api/workflow/sessions/{session_id}/active-design",
        json={"design": {"style_id": style_id, "measurements": {"waist": 30}}},
    )
    client.post(f"/api/workflow/sessions/{session_id}/active-design/commit")
    response = client.post(f"/api/workflow/sessions/{session_id}/submit")
    assert response.status_code == 200, response.text
    return response.json()["order"]


def test_assign_tailor_marks_order_and_items(client):
    order = _place_order(client)
    due = (date.today() + timedelta(days=10)).isoformat()

    response = client.post(
        f"/api/orders/{order['id']}/assignment",
        json={"tailor_id": "tailor-001", "due_date": due, "instructions": "Rush"},
    )

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["status"] == "Assigned"
    assert data["assigned_tailor_name"] == "Ravi Kumar"
    assert data["due_date"] == due
    assert data["assignment_instructions"] == "Rush"
    item = data["detailed_items"][0]
    assert item["assigned_tailor_id"] == "tailor-001"
    assert item["status"] == "Assigned"
    assert get_catalog_service().get_tailor("tailor-001").availability == "Busy"


def test_assign_unknown_tailor_is_404(client):
    order = _place_order(client)
    response = client.post(
        f"/api/orders/{order['id']}/assignment",
        json={"tailor_id": "tailor-999", "due_date": date.today().isoformat()},
    )
    assert response.status_code == 404


def test_assign_single_item_out_of_range(client):
    order = _place_order(client)
    response = client.post(
        f"/api/orders/{order['id']}/assignment",
        json={"tailor_id": "tailor-001", "due_date": date.today().isoformat(), "item_index": 4},
    )
    assert response.status_code == 400


def test_status_filters(client):
    first = _place_order(client)
    second = _place_order(client, customer_id="cust-002")
    client.put(f"/api/orders/{second['id']}/status", json={"status": "Delivered"})

    active = client.get("/api/orders").json()["items"]
    assert [item["id"] for item in active] == [first["id"]]

    delivered = client.get("/api/orders", params={"status": "Delivered"}).json()["items"]
    assert [item["id"] for item in delivered] == [second["id"]]

    everything = client.get("/api/orders", params={"status": "all"}).json()["items"]
    assert {item["id"] for item in everything} == {first["id"], second["id"]}


def test_invalid_status_is_rejected(client):
    order = _place_order(client)
    response = client.put(f"/api/orders/{order['id']}/status", json={"status": "Lost"})
    assert response.status_code == 422


def test_customer_past_orders(client):
    _place_order(client)
    _place_order(client, customer_id="cust-002")

    response = client.get("/api/customers/cust-001/orders")
    assert response.status_code == 200
    items = response.json()["items"]
    assert len(items) == 1
    assert items[0]["customer_id"] == "cust-001"
    assert client.get("/api/customers/cust-404/orders").status_code == 404


def test_export_orders_csv(client):
    order = _place_order(client)

    response = client.get("/api/orders/export")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    rows = list(csv.DictReader(io.StringIO(response.text)))
    assert rows[0]["order_id"] == order["id"]
    assert rows[0]["items"] == "Blouse"
    assert rows[0]["courier"] == "no"


def test_tracking_endpoint(client):
    order = _place_order(client)
    response = client.get(f"/api/orders/{order['id']}/tracking")
    steps = [step["status"] for step in response.json()["steps"]]
    assert steps == ["Order Placed", "Processing", "Estimated Delivery"]


def test_tracking_timeline_for_delivered_order():
    order = Order(
        id="ORD-1",
        order_date=date(2025, 3, 1),
        customer_id="C1",
        status="Delivered",
        due_date=date(2025, 3, 8),
        shipping_address=Address(street="12 MG Road", city="Pune"),
    )

    steps = build_timeline(order)

    assert [step.status for step in steps] == [
        "Order Placed",
        "Processing",
        "Shipped from Warehouse",
        "Out for Delivery",
        "Delivered",
    ]
    assert steps[1].when == date(2025, 3, 3)
    assert steps[3].location == "Local delivery partner, Pune"
    assert all(step.is_completed for step in steps)


def test_tracking_timeline_for_cancelled_order():
    order = Order(id="ORD-2", order_date=date(2025, 3, 1), customer_id="C1", status="Cancelled", due_date=date(2025, 3, 8))
    assert [step.status for step in build_timeline(order)] == ["Order Placed", "Order Cancelled"]


def test_customer_crud(client):
    response = client.post(
        "/api/customers",
        json={"name": "Kavya Menon", "email": "kavya@example.com", "phone": "555", "address": {"city": "Kochi"}},
    )
    assert response.status_code == 200
    customer = response.json()
    assert customer["id"] == "customer-001"
    assert customer["address"]["city"] == "Kochi"

    updated = client.put(f"/api/customers/{customer['id']}", json={"name": "Kavya M."}).json()
    assert updated["name"] == "Kavya M."
    assert updated["address"] is None

    assert client.delete(f"/api/customers/{customer['id']}").status_code == 200
    assert client.get(f"/api/customers/{customer['id']}").status_code == 404
    assert client.put("/api/customers/customer-404", json={"name": "Nobody"}).status_code == 404


def test_style_crud_validates_measurements(client):
    fields = client.get("/api/styles/measurements").json()["items"]
    assert {"id": "waist", "label": "Waist"} in fields

    response = client.post("/api/styles", json={"name": "Salwar", "required_measurements": ["waist", "waist", "length"]})
    assert response.status_code == 200
    style = response.json()
    assert style["required_measurements"] == ["waist", "length"]

    response = client.post("/api/styles", json={"name": "Cape", "required_measurements": ["wingspan"]})
    assert response.status_code == 400

    assert client.delete(f"/api/styles/{style['id']}").status_code == 200
    assert client.delete(f"/api/styles/{style['id']}").status_code == 404


def test_tailor_expertise_parsed_from_comma_list(client):
    response = client.post("/api/tailors", json={"name": "Sita", "mobile": "555", "expertise": "Blouse, , Saree "})
    tailor = response.json()
    assert tailor["expertise"] == ["Blouse", "Saree"]
    assert tailor["availability"] == "Available"
    assert tailor["avatar"].endswith("text=SI")

    updated = client.put(f"/api/tailors/{tailor['id']}", json={"name": "Sita Devi", "expertise": "Lehenga"}).json()
    assert updated["expertise"] == ["Lehenga"]
    assert updated["avatar"] == tailor["avatar"]


def test_missing_catalog_file_yields_empty_catalog(tmp_path):
    seed = load_catalog_seed(tmp_path / "absent.yaml")
    repository = InMemoryCatalogRepository(seed)
    assert repository.list_styles() == []
    assert repository.list_measurement_fields() == []


def test_catalog_path_from_environment(tmp_path, monkeypatch):
    catalog = tmp_path / "catalog.yaml"
    catalog.write_text(
        "measurements:\n  - {id: hem, label: Hem}\nstyles:\n  - {id: s1, name: Skirt, required_measurements: [hem]}\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("STITCHSTYLE_CATALOG", str(catalog))

    repository = InMemoryCatalogRepository()

    assert [style.name for style in repository.list_styles()] == ["Skirt"]
    assert repository.list_customers() == []


def test_order_service_rejects_unknown_filter():
    with pytest.raises(ValueError):
        get_order_service().list_orders("Lost")
