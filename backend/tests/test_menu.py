from app.models.menu_item import ItemAddon, ItemCustomization, MenuItem


def _item_payload(**overrides):
    payload = {
        "item_name": "Paneer Tikka",
        "description": "Char-grilled cottage cheese",
        "category_type": "Starters",
        "food_category_item": "Veg",
        "actual_price": 240,
        "offer_price": 199,
        "offer_percent": 17,
        "in_stock": True,
        "customizations": [
            {
                "title": "Portion",
                "required": True,
                "max_selection": 1,
                "addons": [
                    {"addon_name": "Half", "addon_price": 0},
                    {"addon_name": "Full", "addon_price": 120},
                ],
            },
            {"title": "Spice level", "addons": []},
        ],
    }
    payload.update(overrides)
    return payload


def test_create_menu_item_with_customizations(client, store_id):
    r = client.post(f"/api/stores/{store_id}/menu-items", json=_item_payload())
    assert r.status_code == 200
    item = r.json()
    assert item["item_id"] == "ITEM1001"
    assert item["actual_price"] == 240.0
    assert item["has_customization"] is True
    assert item["has_addons"] is True
    assert [c["title"] for c in item["customizations"]] == ["Portion", "Spice level"]
    assert [a["addon_name"] for a in item["customizations"][0]["addons"]] == ["Half", "Full"]
    assert item["customizations"][0]["addons"][1]["addon_price"] == 120.0


def test_flags_without_addons(client, store_id):
    item = client.post(
        f"/api/stores/{store_id}/menu-items",
        json=_item_payload(customizations=[{"title": "Notes", "addons": []}]),
    ).json()
    assert item["has_customization"] is True
    assert item["has_addons"] is False

    plain = client.post(f"/api/stores/{store_id}/menu-items", json=_item_payload(customizations=[])).json()
    assert plain["has_customization"] is False
    assert plain["has_addons"] is False


def test_create_for_unknown_store(client):
    r = client.post("/api/stores/GMMC9999/menu-items", json=_item_payload())
    assert r.status_code == 404
    assert r.json() == {"error": "Store not found"}


def test_list_menu_items(client, store_id):
    client.post(f"/api/stores/{store_id}/menu-items", json=_item_payload(item_name="First"))
    client.post(f"/api/stores/{store_id}/menu-items", json=_item_payload(item_name="Second"))

    items = client.get(f"/api/stores/{store_id}/menu-items").json()
    assert [i["item_name"] for i in items] == ["Second", "First"]
    assert client.get("/api/stores/GMMC9999/menu-items").json() == []


def test_put_replaces_fields_and_tree(client, db_session, store_id):
    item_id = client.post(f"/api/stores/{store_id}/menu-items", json=_item_payload()).json()["item_id"]

    r = client.put(
        f"/api/menu-items/{item_id}",
        json=_item_payload(
            item_name="Paneer Tikka Platter",
            actual_price=320,
            customizations=[{"title": "Dip", "addons": [{"addon_name": "Mint chutney", "addon_price": 15}]}],
        ),
    )
    assert r.status_code == 200
    body = r.json()
    assert body["item_id"] == item_id
    assert body["item_name"] == "Paneer Tikka Platter"
    assert body["actual_price"] == 320.0
    assert [c["title"] for c in body["customizations"]] == ["Dip"]

    assert db_session.query(ItemCustomization).count() == 1
    assert db_session.query(ItemAddon).count() == 1


def test_stock_toggle_trims_item_id(client, store_id):
    item_id = client.post(f"/api/stores/{store_id}/menu-items", json=_item_payload()).json()["item_id"]

    r = client.patch(f"/api/menu-items/%20{item_id}%20/stock", json={"in_stock": False})
    assert r.status_code == 200
    assert r.json()["in_stock"] is False

    r = client.patch("/api/menu-items/ITEM9999/stock", json={"in_stock": True})
    assert r.status_code == 404
    assert r.json() == {"error": "Item not found"}


def test_delete_cascades(client, db_session, store_id):
    item_id = client.post(f"/api/stores/{store_id}/menu-items", json=_item_payload()).json()["item_id"]

    r = client.delete(f"/api/menu-items/{item_id}")
    assert r.status_code == 200
    assert db_session.query(MenuItem).count() == 0
    assert db_session.query(ItemCustomization).count() == 0
    assert db_session.query(ItemAddon).count() == 0
    assert client.delete(f"/api/menu-items/{item_id}").status_code == 404


def test_image_upload_status(client, store_id):
    for n in range(12):
        client.post(
            f"/api/stores/{store_id}/menu-items",
            json=_item_payload(item_name=f"Dish {n}", image_url=f"http://testserver/uploads/{n}.jpg", customizations=[]),
        )
    client.post(f"/api/stores/{store_id}/menu-items", json=_item_payload(item_name="No photo", customizations=[]))

    status = client.get(f"/api/stores/{store_id}/image-upload-status").json()
    assert status["totalUsed"] == 12
    assert status["tier1Used"] == 10
    assert status["tier1Remaining"] == 0
    assert status["tier2Used"] == 2
    assert status["tier2Remaining"] == 5
    assert status["canAccessTier2"] is True
    assert status["isPaid"] is False
    assert status["pricePerImage"] == 2.5
