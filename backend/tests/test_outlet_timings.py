def test_save_and_fetch_outlet_timings(client):
    payload = {"store_id": "GMMC1001", "monday_open": "09:00", "monday_close": "21:00", "same_for_all": True}
    r = client.post("/api/outlet-timings", json=payload)
    assert r.status_code == 200
    assert r.json() == {"success": True}

    body = client.get("/api/outlet-timings", params={"store_id": "GMMC1001"}).json()
    assert body["monday_open"] == "09:00"
    assert body["monday_close"] == "21:00"
    assert body["same_for_all"] is True
    assert body["force_24_hours"] is False
    assert body["closed_day"] is None


def test_second_save_updates_the_same_row(client, db_session):
    from app.models.outlet_timings import OutletTimings

    client.post("/api/outlet-timings", json={"store_id": "GMMC1001", "sunday_open": "10:00", "closed_day": "tuesday"})
    client.post("/api/outlet-timings", json={"store_id": "GMMC1001", "force_24_hours": True})

    assert db_session.query(OutletTimings).count() == 1
    body = client.get("/api/outlet-timings", params={"store_id": "GMMC1001"}).json()
    assert body["force_24_hours"] is True
    assert body["closed_day"] is None
    assert body["sunday_open"] is None


def test_outlet_timings_require_store_id(client):
    r = client.post("/api/outlet-timings", json={"monday_open": "09:00"})
    assert r.status_code == 400
    assert r.json() == {"error": "store_id is required"}

    assert client.get("/api/outlet-timings").status_code == 400
    assert client.get("/api/outlet-timings", params={"store_id": "GMMC4040"}).status_code == 404
