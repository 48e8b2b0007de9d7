from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi.testclient import TestClient

import main


@pytest.fixture
def api(monkeypatch, fake_db):
    monkeypatch.setattr(main, "db", fake_db)
    fake_db["users"].insert_one({"_id": "admin1", "full_name": "Admin", "role": "ADMIN"})
    fake_db["users"].insert_one({"_id": "u1", "full_name": "Test Customer", "role": "CONSUMER"})
    return TestClient(main.app)


def auth(uid):
    exp = datetime.now(timezone.utc) + timedelta(days=7)
    token = jwt.encode({"uid": uid, "exp": exp}, main.JWT_SECRET, algorithm=main.JWT_ALGO)
    return {"Authorization": f"Bearer {token}"}


def test_root(api):
    assert api.get("/").json() == {"message": "Storefront admin API running"}


def test_database_status_connected(api, fake_db):
    fake_db["products"].insert_one({"_id": "p1", "name": "Teak Side Table"})
    body = api.get("/test").json()
    assert body["backend"] == "✅ Running"
    assert body["connection_status"] == "Connected"
    assert "products" in body["collections"]


def test_database_status_without_database(monkeypatch):
    monkeypatch.setattr(main, "db", None)
    body = TestClient(main.app).get("/test").json()
    assert body["connection_status"] == "Not Connected"
    assert body["collections"] == []


def test_expired_token_is_rejected(api):
    exp = datetime.now(timezone.utc) - timedelta(minutes=1)
    token = jwt.encode({"uid": "u1", "exp": exp}, main.JWT_SECRET, algorithm=main.JWT_ALGO)
    res = api.get("/api/user/u1/reviewable-orders", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
    assert res.json()["detail"] == "Token expired"


def test_reviewable_orders_for_own_user(api, fake_db):
    fake_db["orders"].insert_one({"order_id": "A", "user_id": "u1", "status": "Delivered", "items": [{"product_id": "p1"}, {"product_id": "p2"}]})
    fake_db["orders"].insert_one({"order_id": "B", "user_id": "u1", "status": "Delivered", "items": [{"product_id": "p1"}]})
    fake_db["reviews"].insert_one({"user_id": "u1", "product_id": "p1"})

    res = api.get("/api/user/u1/reviewable-orders", headers=auth("u1"))
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert [o["product_id"] for o in body["orders"]] == ["p2"]


def test_reviewable_orders_for_other_user_is_forbidden(api):
    res = api.get("/api/user/admin1/reviewable-orders", headers=auth("u1"))
    assert res.status_code == 403


def test_bad_token_is_rejected(api):
    res = api.get("/api/user/u1/reviewable-orders", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401


def test_unknown_user_is_rejected(api):
    res = api.get("/api/user/ghost/reviewable-orders", headers=auth("ghost"))
    assert res.status_code == 401


def test_admin_routes_require_admin(api):
    assert api.post("/admin/products/normalize", headers=auth("u1")).status_code == 403


def test_normalize_and_refine(api, fake_db):
    fake_db["products"].insert_one({"_id": "p1", "name": "Teak Side Table", "category": "Woodcraft"})
    fake_db["products"].insert_one({"_id": "p2", "name": "Pure Silk Saree", "category": "Women's Fashion", "sub_category": "General"})

    res = api.post("/admin/products/normalize", headers=auth("admin1"))
    assert res.status_code == 200
    assert res.json()["updated"] == 1
    assert fake_db["products"].find_one({"_id": "p1"})["category"] == "Home & Living"

    res = api.post("/admin/products/refine", params={"dry_run": "true"}, headers=auth("admin1"))
    assert res.json()["changes"] == [{"id": "p2", "name": "Pure Silk Saree", "update": {"sub_category": "Ethnic Wear"}}]
    assert fake_db["products"].find_one({"_id": "p2"})["sub_category"] == "General"


def test_fill_specs_and_audit(api, fake_db):
    fake_db["products"].insert_one({"_id": "p1", "name": "Rose Face Oil", "category": "Beauty", "sub_category": "Skincare"})
    res = api.post("/admin/products/fill-specs", headers=auth("admin1"))
    assert res.json()["updated"] == 1
    assert fake_db["products"].find_one({"_id": "p1"})["sizes"] == ["50ml", "100ml", "200ml"]

    audit = api.get("/admin/products/audit", headers=auth("admin1")).json()
    assert audit == {"categories": ["Beauty"], "sub_categories": ["Skincare"]}


def test_misplaced_electronics(api, fake_db):
    fake_db["products"].insert_one({"_id": "p1", "name": "Laptop Protective Sleeve", "category": "Accessories"})
    fake_db["products"].insert_one({"_id": "p2", "name": "MacBook Pro M3", "category": "Electronics"})
    res = api.get("/admin/products/misplaced-electronics", headers=auth("admin1"))
    assert [p["id"] for p in res.json()] == ["p1"]


def test_deliver_order(api, fake_db):
    fake_db["orders"].insert_one({"_id": "d1", "order_id": "OD1", "user_id": "u1", "status": "Placed", "items": []})
    res = api.post("/admin/orders/OD1/deliver", headers=auth("admin1"))
    assert res.status_code == 200
    assert res.json()["status"] == "Delivered"
    assert "updated_at" in res.json()

    assert api.post("/admin/orders/missing/deliver", headers=auth("admin1")).status_code == 404


def test_seed_only_once(api, fake_db):
    first = api.post("/seed", headers=auth("admin1")).json()
    assert first["seeded"] is True
    assert first["products"] > 0
    second = api.post("/seed", headers=auth("admin1")).json()
    assert second["seeded"] is False


def test_audit_with_mixed_category_types(api, fake_db):
    fake_db["products"].insert_one({"_id": "p1", "name": "Rose Face Oil", "category": "Beauty", "sub_category": "Skincare"})
    fake_db["products"].insert_one({"_id": "p2", "name": "Broken Import", "category": ["Fashion"], "sub_category": 7})
    fake_db["products"].insert_one({"_id": "p3", "name": "No Category"})

    res = api.get("/admin/products/audit", headers=auth("admin1"))
    assert res.status_code == 200
    body = res.json()
    assert body["categories"] == ["Beauty", ["Fashion"]]
    assert body["sub_categories"] == [7, "Skincare"]
