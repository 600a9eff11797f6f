from app.models.food_order import FoodOrder

STORE = "GMMC1001"


def _create(client, number, **overrides):
    payload = {
        "order_number": number,
        "restaurant_id": STORE,
        "restaurant_name": "Spice Route",
        "user_name": "Kiran Rao",
        "user_phone": "9988776655",
        "delivery_address": "4th Cross, HAL 2nd Stage",
        "items": [{"name": "Paneer Tikka", "qty": 1, "price": 240}],
        "total_amount": 240,
        "payment_method": "UPI",
    }
    payload.update(overrides)
    r = client.post("/api/orders", json=payload)
    assert r.status_code == 200, r.text
    return r.json()


def test_create_and_get_order(client):
    order = _create(client, "ORD-1001")
    assert order["status"] == "pending"
    assert order["total_amount"] == 240.0
    assert order["items"][0]["name"] == "Paneer Tikka"

    r = client.get(f"/api/orders/{order['id']}")
    assert r.status_code == 200
    assert r.json()["order_number"] == "ORD-1001"
    assert client.get("/api/orders/missing").status_code == 404


def test_duplicate_order_number(client):
    _create(client, "ORD-1001")
    r = client.post("/api/orders", json={"order_number": "ORD-1001", "restaurant_id": STORE})
    assert r.status_code == 409


def test_status_update_stamps_timestamps(client):
    order = _create(client, "ORD-1001")

    r = client.patch(f"/api/orders/{order['id']}/status", json={"status": "confirmed"})
    assert r.status_code == 200
    assert r.json() == {"success": True}
    confirmed = client.get(f"/api/orders/{order['id']}").json()
    assert confirmed["status"] == "confirmed"
    assert confirmed["confirmed_at"] is not None
    assert confirmed["delivered_at"] is None

    client.patch(f"/api/orders/{order['id']}/status", json={"status": "delivered"})
    delivered = client.get(f"/api/orders/{order['id']}").json()
    assert delivered["delivered_at"] is not None

    assert client.patch(f"/api/orders/{order['id']}/status", json={"status": "teleported"}).status_code == 400


def test_cancel_order(client):
    order = _create(client, "ORD-1001")
    assert client.post(f"/api/orders/{order['id']}/cancel").json() == {"success": True}
    assert client.get(f"/api/orders/{order['id']}").json()["status"] == "cancelled"
    assert client.post("/api/orders/missing/cancel").status_code == 404


def test_list_filters_and_limit(client):
    first = _create(client, "ORD-1")
    _create(client, "ORD-2")
    _create(client, "ORD-3")
    _create(client, "ORD-OTHER", restaurant_id="GMMC2002")
    client.patch(f"/api/orders/{first['id']}/status", json={"status": "delivered"})

    orders = client.get(f"/api/stores/{STORE}/orders").json()
    assert [o["order_number"] for o in orders] == ["ORD-3", "ORD-2", "ORD-1"]

    limited = client.get(f"/api/stores/{STORE}/orders", params={"limit": 2}).json()
    assert len(limited) == 2

    delivered = client.get(f"/api/stores/{STORE}/orders", params={"status": "delivered"}).json()
    assert [o["order_number"] for o in delivered] == ["ORD-1"]


def test_pending_orders_oldest_first(client):
    a = _create(client, "ORD-A")
    b = _create(client, "ORD-B")
    c = _create(client, "ORD-C")
    client.patch(f"/api/orders/{b['id']}/status", json={"status": "preparing"})
    client.patch(f"/api/orders/{c['id']}/status", json={"status": "ready"})

    pending = client.get(f"/api/stores/{STORE}/orders/pending").json()
    assert [o["order_number"] for o in pending] == [a["order_number"], b["order_number"]]


def test_search_orders(client):
    _create(client, "ORD-777", user_name="Meera Iyer", user_phone="9000012345")
    _create(client, "ORD-888", user_name="Kabir Khan", user_phone="9111122222")

    def numbers(q):
        r = client.get(f"/api/stores/{STORE}/orders/search", params={"q": q})
        return sorted(o["order_number"] for o in r.json())

    assert numbers("ord-77") == ["ORD-777"]
    assert numbers("meera") == ["ORD-777"]
    assert numbers("91111") == ["ORD-888"]
    assert numbers("ORD") == ["ORD-777", "ORD-888"]


def test_order_stats(client, db_session):
    delivered = _create(client, "ORD-1", total_amount=300)
    _create(client, "ORD-2", total_amount=100)
    cancelled = _create(client, "ORD-3", total_amount=200)
    client.patch(f"/api/orders/{delivered['id']}/status", json={"status": "delivered"})
    client.post(f"/api/orders/{cancelled['id']}/cancel")

    row = db_session.query(FoodOrder).filter(FoodOrder.id == delivered["id"]).one()
    row.rating = 4.0
    db_session.commit()

    stats = client.get(f"/api/stores/{STORE}/orders/stats").json()
    assert stats["total_orders"] == 3
    assert stats["pending_orders"] == 1
    assert stats["delivered_orders"] == 1
    assert stats["cancelled_orders"] == 1
    assert stats["total_revenue"] == 300.0
    assert stats["average_order_value"] == 200.0
    assert stats["average_rating"] == 4.0


def test_stats_for_store_without_orders(client):
    stats = client.get("/api/stores/GMMC0000/orders/stats").json()
    assert stats["total_orders"] == 0
    assert stats["average_order_value"] == 0
    assert stats["average_rating"] == 0
