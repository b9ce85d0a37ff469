"""HTTP tests through the FastAPI test client."""

from salon.db.seed import seed_all


def create_cut(client):
    response = client.post(
        "/services", json={"name": "カット", "duration": 40, "price": 4500, "category": "カット"}
    )
    assert response.status_code == 201
    return response.json()


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_service_crud(client):
    cut = create_cut(client)

    assert client.get(f"/services/{cut['id']}").json()["duration"] == 40

    updated = client.put(f"/services/{cut['id']}", json={"price": 4800})
    assert updated.json()["price"] == 4800

    deleted = client.delete(f"/services/{cut['id']}")
    assert deleted.json()["isActive"] is False
    assert client.get("/services").json() == []
    assert len(client.get("/services", params={"isActive": "all"}).json()) == 1


def test_validation_errors_are_400(client):
    create_cut(client)

    duplicate = client.post(
        "/services", json={"name": "カット", "duration": 30, "price": 3000, "category": "カット"}
    )
    assert duplicate.status_code == 400
    assert "error" in duplicate.json()

    malformed = client.post("/services", json={"name": "カラー", "duration": "long"})
    assert malformed.status_code == 400
    assert "error" in malformed.json()


def test_not_found_is_404(client):
    response = client.get("/appointments/missing")

    assert response.status_code == 404
    assert response.json() == {"error": "Appointment not found: missing"}


def test_booking_flow(client):
    cut = create_cut(client)
    customer = client.post("/customers", json={"name": "山田 花子", "phone": "090-1234-5678"}).json()

    created = client.post(
        "/appointments",
        json={
            "clientId": customer["id"],
            "start": "2024-03-01T10:00:00",
            "services": [{"id": cut["id"], "price": 4000}],
            "totalPrice": 1,
        },
    )
    assert created.status_code == 201
    appointment = created.json()
    assert appointment["clientName"] == "山田 花子"
    assert appointment["totalPrice"] == 4000
    assert appointment["end"] == "2024-03-01T10:40:00"

    moved = client.post(f"/appointments/{appointment['id']}/reschedule", json={"start": "2024-03-01T11:00:00"})
    assert moved.json()["end"] == "2024-03-01T11:40:00"

    assert client.post(f"/appointments/{appointment['id']}/complete").json()["status"] == "completed"

    refused = client.post(f"/appointments/{appointment['id']}/cancel")
    assert refused.status_code == 409

    detail = client.get(f"/customers/{customer['id']}").json()
    assert detail["totalVisits"] == 1
    assert detail["totalSpent"] == 4000

    analysis = client.post(
        f"/customers/{customer['id']}/history/analysis", json={"serviceIds": [cut["id"]]}
    ).json()
    assert analysis[0]["latestPrice"] == 4000
    assert analysis[0]["basePrice"] == 4500

    suggestions = client.post(
        f"/customers/{customer['id']}/history/suggestions",
        json={"services": [{"id": cut["id"], "name": "カット", "baseDuration": 40, "basePrice": 4500}]},
    ).json()
    assert suggestions[0]["adjustedPrice"] == 4000
    assert suggestions[0]["isAdjusted"] is True
    assert suggestions[0]["adjustmentReason"] == "前回と同じ設定"


def test_adjustment_endpoints(client):
    services = [
        {"id": "1", "name": "カット", "baseDuration": 40, "basePrice": 4500},
        {"id": "2", "name": "カラー", "baseDuration": 90, "basePrice": 8000},
    ]

    presets = client.get("/adjustments/presets").json()
    assert len(presets["bulk"]) == 5

    preview = client.post(
        "/adjustments/preview",
        json={"services": services, "directive": {"mode": "percentage", "priceAdjustment": -20}},
    ).json()
    assert preview["total"]["newPrice"] == 10000

    bulk = client.post(
        "/adjustments/bulk",
        json={"services": services, "directive": {"preset": "初回サービス (+10分)"}},
    ).json()
    assert [s["adjustedDuration"] for s in bulk] == [50, 100]

    overridden = client.post(
        "/adjustments/override",
        json={"service": services[0], "duration": -10, "price": 3000},
    ).json()
    assert overridden["adjustedDuration"] == 5

    reset = client.post("/adjustments/reset", json={"services": bulk}).json()
    assert all(not s["isAdjusted"] for s in reset)


def test_calendar_settings_endpoints(client):
    assert client.get("/settings/calendar").json()["timeSlotInterval"] == 30

    updated = client.put("/settings/calendar", json={"timeRange": {"startHour": 9, "endHour": 11}})
    assert updated.json()["timeRange"] == {"startHour": 9, "endHour": 11}
    assert client.get("/settings/calendar/slots").json()["slots"] == ["09:00", "09:30", "10:00", "10:30"]

    invalid = client.put("/settings/calendar", json={"timeSlotInterval": 45})
    assert invalid.status_code == 400

    assert client.post("/settings/calendar/preset/weekend").json()["timeSlotInterval"] == 60
    assert client.post("/settings/calendar/reset").json()["timeSlotInterval"] == 30


def test_seed_is_idempotent(container, client):
    first = seed_all(container)
    second = seed_all(container)

    assert first == {"services": 6, "customers": 3, "appointments": 6}
    assert second == {"services": 0, "customers": 0, "appointments": 0}

    customers = client.get("/customers", params={"sortBy": "totalSpent", "sortOrder": "desc"}).json()
    assert customers[0]["name"] == "山田 花子"
    assert customers[0]["totalVisits"] == 3
