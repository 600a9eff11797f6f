from conftest import register_store_payload

from app.models.audit_log import AuditLog
from app.models.merchant_store import MerchantStore
from app.models.store_document import StoreDocument
from app.models.store_operating_hours import StoreOperatingHours
from app.models.store_registration_progress import StoreRegistrationProgress


def test_register_store_creates_store_hours_and_documents(client, db_session, parent):
    r = client.post("/api/register-store", json=register_store_payload(parent))
    assert r.status_code == 200
    body = r.json()
    assert body == {"success": True, "storeId": "GMMC1001"}

    store = db_session.query(MerchantStore).filter(MerchantStore.store_id == "GMMC1001").one()
    assert store.parent_id == parent["id"]
    assert store.approval_status == "SUBMITTED"
    assert store.status == "PENDING"
    assert store.is_active is True
    assert store.current_step == 5
    assert store.store_phones == ["9123456780"]
    assert store.cuisine_types == ["North Indian"]

    hours = db_session.query(StoreOperatingHours).filter(StoreOperatingHours.store_id == store.id).all()
    assert len(hours) == 7
    by_day = {h.day_of_week: h for h in hours}
    assert by_day["MONDAY"].is_open is True
    assert by_day["MONDAY"].slot1_start == "09:00"
    assert by_day["MONDAY"].slot1_end == "22:00"
    assert by_day["MONDAY"].slot2_start is None
    assert by_day["SUNDAY"].is_open is False
    assert by_day["WEDNESDAY"].is_open is False

    docs = db_session.query(StoreDocument).filter(StoreDocument.store_id == store.id).all()
    assert sorted(d.document_type for d in docs) == ["AADHAAR", "MENU_CARD", "PAN"]
    assert all(d.is_verified is False for d in docs)

    audit = db_session.query(AuditLog).filter(AuditLog.entity_type == "merchant_store").one()
    assert audit.entity_id == "GMMC1001"


def test_register_store_clears_saved_progress(client, db_session, parent):
    client.post(
        "/api/store/progress",
        json={"parent_id": parent["id"], "step": 3, "completed_steps": 2, "form_data": {"store_name": "x"}},
    )
    assert db_session.query(StoreRegistrationProgress).count() == 1

    r = client.post("/api/register-store", json=register_store_payload(parent))
    assert r.status_code == 200
    assert db_session.query(StoreRegistrationProgress).count() == 0


def test_each_submission_inserts_a_new_store(client, db_session, parent):
    first = client.post("/api/register-store", json=register_store_payload(parent)).json()
    second = client.post("/api/register-store", json=register_store_payload(parent, store_name="Second")).json()
    assert first["storeId"] == "GMMC1001"
    assert second["storeId"] == "GMMC1002"
    assert db_session.query(MerchantStore).count() == 2


def test_parent_merchant_id_may_come_from_step1(client, parent):
    payload = register_store_payload(parent, parent_merchant_id=parent["parent_merchant_id"])
    payload["parentInfo"] = {"id": parent["id"]}
    assert client.post("/api/register-store", json=payload).status_code == 200


def test_missing_parent_info(client, parent):
    payload = register_store_payload(parent)
    payload.pop("parentInfo")
    r = client.post("/api/register-store", json=payload)
    assert r.status_code == 400
    assert r.json() == {"error": "Parent info missing"}


def test_unknown_parent(client, parent):
    payload = register_store_payload(parent)
    payload["parentInfo"]["id"] = "00000000-0000-0000-0000-000000000000"
    r = client.post("/api/register-store", json=payload)
    assert r.status_code == 404


def test_register_store_saves_legal_and_bank_details(client, db_session, parent):
    payload = register_store_payload(parent)
    payload["legal"] = {"pan_number": "ABCDE1234F", "fssai_number": "11223344556677"}
    payload["bank"] = {
        "bank_account_holder": "Spice Route Foods",
        "bank_account_number": "50100012345678",
        "bank_ifsc": "HDFC0001234",
        "bank_name": "HDFC Bank",
    }
    store_id = client.post("/api/register-store", json=payload).json()["storeId"]

    store = db_session.query(MerchantStore).filter(MerchantStore.store_id == store_id).one()
    assert store.pan_number == "ABCDE1234F"
    assert store.fssai_number == "11223344556677"
    assert store.gst_number is None
    assert store.bank_account_number == "50100012345678"
    assert store.bank_ifsc == "HDFC0001234"
