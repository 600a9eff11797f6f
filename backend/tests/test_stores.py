from datetime import datetime, timedelta, timezone

from conftest import register_store_payload

from app.models.merchant_store import MerchantStore


def _set_approval(db_session, store_id, status, reason=None):
    store = db_session.query(MerchantStore).filter(MerchantStore.store_id == store_id).one()
    store.approval_status = status
    store.approval_reason = reason
    db_session.commit()


def test_store_status(client, store_id):
    r = client.get("/api/store-status", params={"store_id": store_id})
    assert r.status_code == 200
    assert r.json() == {
        "approval_status": "SUBMITTED",
        "approval_reason": None,
        "is_active": True,
        "store_name": "Spice Route Indiranagar",
    }


def test_store_status_reflects_rejection(client, db_session, store_id):
    _set_approval(db_session, store_id, "REJECTED", "FSSAI licence expired")
    body = client.get("/api/store-status", params={"store_id": store_id}).json()
    assert body["approval_status"] == "REJECTED"
    assert body["approval_reason"] == "FSSAI licence expired"


def test_store_status_errors(client):
    r = client.get("/api/store-status")
    assert r.status_code == 400
    assert r.json() == {"error": "Missing store_id"}

    r = client.get("/api/store-status", params={"store_id": "GMMC0000"})
    assert r.status_code == 404
    assert r.json() == {"error": "Store not found"}


def test_list_stores_and_filter_by_parent(client, parent, store_id):
    other = client.post(
        "/api/parent-merchant",
        json={"parent_store_name": "Other Brand", "registered_phone": "9811122233", "merchant_type": "BRAND"},
    ).json()
    client.post("/api/register-store", json=register_store_payload(other, store_name="Other Store"))

    all_stores = client.get("/api/stores").json()
    assert len(all_stores) == 2

    mine = client.get("/api/stores", params={"parent_id": parent["id"]}).json()
    assert [s["store_id"] for s in mine] == [store_id]


def test_get_store(client, store_id):
    r = client.get(f"/api/stores/{store_id}")
    assert r.status_code == 200
    body = r.json()
    assert body["store_id"] == store_id
    assert body["min_order_amount"] == 150.0
    assert body["is_pure_veg"] is True

    assert client.get("/api/stores/GMMC9999").status_code == 404


def test_search_by_mx_id_is_case_insensitive(client, store_id):
    r = client.get("/api/stores/search", params={"q": "gmmc10", "type": "mx_id"})
    assert r.status_code == 200
    assert [s["store_id"] for s in r.json()] == [store_id]


def test_search_by_mobile_is_exact(client, store_id):
    hits = client.get("/api/stores/search", params={"q": "9123456780", "type": "mobile"}).json()
    assert [s["store_id"] for s in hits] == [store_id]

    partial = client.get("/api/stores/search", params={"q": "91234", "type": "mobile"}).json()
    assert partial == []


def test_search_rejects_unknown_type(client, store_id):
    r = client.get("/api/stores/search", params={"q": "x", "type": "email"})
    assert r.status_code == 400


def test_counts_and_managed(client, db_session, parent, store_id):
    second = client.post("/api/register-store", json=register_store_payload(parent, store_name="Two")).json()["storeId"]
    third = client.post("/api/register-store", json=register_store_payload(parent, store_name="Three")).json()["storeId"]
    _set_approval(db_session, second, "APPROVED")
    _set_approval(db_session, third, "REJECTED", "Blurry PAN")

    counts = client.get("/api/stores/counts").json()
    assert counts == {"total": 3, "pending": 1, "verified": 1, "rejected": 1}

    managed = client.get("/api/stores/managed").json()
    assert sorted(s["store_id"] for s in managed) == sorted([second, third])


def test_counts_date_window(client, store_id):
    today = datetime.now(timezone.utc).date()
    tomorrow = today + timedelta(days=1)

    assert client.get("/api/stores/counts", params={"from_date": today.isoformat()}).json()["total"] == 1
    assert client.get("/api/stores/counts", params={"from_date": tomorrow.isoformat()}).json()["total"] == 0
    assert client.get("/api/stores/managed", params={"to_date": today.isoformat()}).json() == []


def test_stores_by_manager(client, store_id):
    client.patch(f"/api/stores/{store_id}", json={"am_name": "Ravi", "am_mobile": "9000000001"})
    r = client.get("/api/stores/by-manager", params={"am_mobile": "9000000001"})
    assert [s["store_id"] for s in r.json()] == [store_id]
    assert client.get("/api/stores/by-manager", params={"am_mobile": "9000000002"}).json() == []


def test_patch_store_updates_only_sent_fields(client, store_id):
    r = client.patch(
        f"/api/stores/{store_id}",
        json={"store_description": "Home style thalis", "accepts_cash": True, "delivery_radius_km": 7.5},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["store_description"] == "Home style thalis"
    assert body["accepts_cash"] is True
    assert body["delivery_radius_km"] == 7.5
    assert body["store_name"] == "Spice Route Indiranagar"

    assert client.patch("/api/stores/GMMC9999", json={"accepts_cash": True}).status_code == 404


def test_store_documents_and_hours(client, store_id):
    docs = client.get(f"/api/stores/{store_id}/documents").json()
    assert len(docs) == 3
    assert {d["document_type"] for d in docs} == {"PAN", "AADHAAR", "MENU_CARD"}

    hours = client.get(f"/api/stores/{store_id}/operating-hours").json()
    assert [h["day_of_week"] for h in hours] == [
        "MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY",
    ]


def test_next_restaurant_id(client, parent):
    assert client.get("/api/next-restaurant-id").json() == {"maxId": 0}
    client.post("/api/register-store", json=register_store_payload(parent))
    client.post("/api/register-store", json=register_store_payload(parent))
    assert client.get("/api/next-restaurant-id").json() == {"maxId": 1002}


def test_patch_store_rejects_null_for_required_columns(client, store_id):
    for field in ("is_active", "store_name", "accepts_cash"):
        r = client.patch(f"/api/stores/{store_id}", json={field: None})
        assert r.status_code == 400
        assert r.json() == {"error": f"{field} cannot be null"}

    body = client.get(f"/api/stores/{store_id}").json()
    assert body["is_active"] is True
    assert body["store_name"] == "Spice Route Indiranagar"

    r = client.patch(f"/api/stores/{store_id}", json={"store_description": None})
    assert r.status_code == 200
    assert r.json()["store_description"] is None


def test_patch_store_legal_and_bank_details(client, store_id):
    r = client.patch(
        f"/api/stores/{store_id}",
        json={"gst_number": "29ABCDE1234F1Z5", "bank_ifsc": "HDFC0001234", "bank_name": "HDFC Bank"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["gst_number"] == "29ABCDE1234F1Z5"
    assert body["bank_ifsc"] == "HDFC0001234"
    assert body["bank_name"] == "HDFC Bank"
    assert body["pan_number"] is None
