import json

import pytest

from scripts import (
    audit_products,
    deliver_order,
    fix_all_products,
    normalize_products,
    reviewable_products,
    seed_products,
    setup_review_eligibility,
    shiprocket_cancel_orders,
    shiprocket_orders,
    update_colors,
)
from scripts._runner import guarded
from shiprocket import ShiprocketClient, ShiprocketError


def test_guarded_turns_errors_into_exit_code(capsys):
    def failing(argv):
        raise ShiprocketError("Order creation failed", status=422, body={"message": "bad pincode"})

    assert guarded(failing) == 1
    err = capsys.readouterr().err
    assert "Order creation failed" in err
    assert "bad pincode" in err


def test_scripts_fail_cleanly_without_database(monkeypatch, capsys):
    import database

    monkeypatch.setattr(database, "db", None)
    assert guarded(audit_products.main, []) == 1
    assert "Database not available" in capsys.readouterr().err


def test_audit_reports_distinct_categories(patched_db, capsys):
    patched_db["products"].insert_one({"_id": "p1", "name": "Lamp", "category": "Home & Living", "sub_category": "Decor"})
    patched_db["products"].insert_one({"_id": "p2", "name": "Rug", "category": "Home & Living", "sub_category": "Furnishings"})
    assert audit_products.main([]) == 0
    out = capsys.readouterr().out
    assert "['Home & Living']" in out
    assert "Furnishings" in out


def test_normalize_script(patched_db, capsys):
    patched_db["products"].insert_one({"_id": "p1", "name": "Cotton Kurti", "category": "Men's Fashion", "sub_category": "Ethnic Wear"})
    assert normalize_products.main([]) == 0
    assert patched_db["products"].find_one({"_id": "p1"})["category"] == "Women's Fashion"
    assert "Updated 1 products" in capsys.readouterr().out


def test_fix_all_products_dry_run(patched_db):
    patched_db["products"].insert_one({"_id": "p1", "name": "Lamp", "category": "Home & Living"})
    assert fix_all_products.main(["--dry-run"]) == 0
    assert "specifications" not in patched_db["products"].find_one({"_id": "p1"})


def test_update_colors_script(patched_db):
    patched_db["products"].insert_one({"_id": "p1", "name": "Lamp", "materials": ["Clay"], "types": ["Desk"]})
    assert update_colors.main(["--seed", "1"]) == 0
    doc = patched_db["products"].find_one({"_id": "p1"})
    assert "materials" not in doc and "types" not in doc
    assert len(doc["colors"]) >= 5


def test_deliver_order_script(patched_db, capsys):
    patched_db["orders"].insert_one({"_id": "d1", "order_id": "OD1", "user_id": "u1", "status": "Placed", "items": [{"name": "Shirt"}]})
    assert deliver_order.main(["OD1", "OD404"]) == 0
    out = capsys.readouterr().out
    assert "Order OD1 marked as Delivered" in out
    assert "Could not find order OD404" in out
    assert patched_db["orders"].find_one({"_id": "d1"})["status"] == "Delivered"

    assert deliver_order.main(["OD404"]) == 1


def test_review_eligibility_then_reviewable(patched_db, capsys):
    assert seed_products.main([]) == 0
    assert setup_review_eligibility.main(["u1", "fashion-11"]) == 0
    capsys.readouterr()

    assert reviewable_products.main(["u1", "--expect", "fashion-11"]) == 0
    out = capsys.readouterr().out
    assert "MATCH FOUND for fashion-11" in out
    payload = json.loads(out.split("Reviewable Orders Result:\n", 1)[1].rsplit("\n✅", 1)[0])
    assert payload[0]["product_name"] == "Slim Fit Casual Shirt"

    patched_db["reviews"].insert_one({"user_id": "u1", "product_id": "fashion-11"})
    assert reviewable_products.main(["u1", "--expect", "fashion-11"]) == 1


class FakeShiprocket:
    def __init__(self, orders, failing=()):
        self.orders = orders
        self.failing = set(failing)
        self.cancelled = []

    def login(self):
        return "t"

    def list_orders(self, per_page=50):
        return self.orders

    def cancel_orders(self, ids):
        if ids[0] in self.failing:
            raise ShiprocketError("cancel failed", status=500)
        self.cancelled.extend(ids)
        return {}


@pytest.fixture
def fake_shiprocket(monkeypatch):
    def install(orders, failing=()):
        fake = FakeShiprocket(orders, failing)
        monkeypatch.setattr(ShiprocketClient, "from_env", classmethod(lambda cls: fake))
        return fake
    return install


def test_shiprocket_orders_report(fake_shiprocket, capsys):
    fake_shiprocket([
        {"id": 1, "status": "NEW", "channel_order_id": "TEST_ORDER_1", "shipments": [{"awb_code": "AWB1", "courier_name": "Delhivery"}]},
        {"id": 2, "status": "CANCELED"},
    ])
    assert shiprocket_orders.main([]) == 0
    out = capsys.readouterr().out
    assert "✅ AWB: AWB1" in out
    assert "Canceled Orders (hidden): 1" in out
    assert "Test Orders: 1" in out


def test_cancel_orders_counts_failures(fake_shiprocket, capsys):
    fake = fake_shiprocket([
        {"id": 1, "status": "NEW", "channel_order_id": "TEST_ORDER_1"},
        {"id": 2, "status": "NEW", "channel_order_id": "OD2"},
        {"id": 3, "status": "CANCELED", "channel_order_id": "TEST_ORDER_3"},
    ], failing={2})
    result = shiprocket_cancel_orders.cancel_all(fake, [{"id": 1}, {"id": 2}], pause=0)
    assert result == {"cancelled": 1, "failed": 1}
    assert fake.cancelled == [1]


def test_cancel_orders_test_only(fake_shiprocket, monkeypatch):
    fake = fake_shiprocket([
        {"id": 1, "status": "NEW", "channel_order_id": "TEST_ORDER_1"},
        {"id": 2, "status": "NEW", "channel_order_id": "OD2"},
    ])
    monkeypatch.setattr(shiprocket_cancel_orders.time, "sleep", lambda s: None)
    assert shiprocket_cancel_orders.main(["--test-only", "--yes"]) == 0
    assert fake.cancelled == [1]


def test_read_only_reports(patched_db, capsys):
    from scripts import check_order_items, dump_products, find_electronics, list_users, seller_products, show_reviews

    patched_db["products"].insert_one({"_id": "p1", "name": "Sony Headphones", "category": "Accessories", "seller_id": "s1", "colors": [{"name": "Black", "code": "#000"}]})
    patched_db["sellers"].insert_one({"_id": "s1"})
    patched_db["users"].insert_one({"_id": "u1", "name": "Asha"})
    patched_db["orders"].insert_one({"order_id": "OD1", "user_id": "u1", "status": "Placed", "items": [{"name": "Sony Headphones", "product_id": "p1"}]})
    patched_db["reviews"].insert_one({"user_id": "u1", "product_id": "p1", "rating": 5})

    assert dump_products.main([]) == 0
    assert json.loads(capsys.readouterr().out)[0]["colors"] == ["Black"]

    assert find_electronics.main([]) == 0
    assert "Found 1 misplaced electronics" in capsys.readouterr().out

    assert list_users.main([]) == 0
    assert "- u1 (name: Asha)" in capsys.readouterr().out

    assert check_order_items.main(["u1"]) == 0
    assert "ProductID: p1" in capsys.readouterr().out

    assert show_reviews.main(["--product", "p1"]) == 0
    assert "Found 1 reviews for product p1" in capsys.readouterr().out

    assert seller_products.main([]) == 0
    assert "Seller s1: 1 products" in capsys.readouterr().out


def test_user_and_wishlist_fixes(patched_db, capsys):
    from scripts import fix_user_names, inspect_wishlist, seed_wishlist

    assert fix_user_names.main(["u1", "--name", "Test Customer"]) == 0
    assert patched_db["users"].find_one({"_id": "u1"})["full_name"] == "Test Customer"

    assert seed_wishlist.main(["u1", "fashion-11"]) == 0
    assert seed_wishlist.main(["u1", "unknown"]) == 1
    capsys.readouterr()
    assert inspect_wishlist.main(["u1"]) == 0
    assert "Wishlist size: 1" in capsys.readouterr().out


def test_create_order_payload():
    from scripts import shiprocket_create_order

    payload = shiprocket_create_order.sample_payload("Primary", "TEST_ORDER_42")
    assert payload["order_id"] == "TEST_ORDER_42"
    assert payload["pickup_location"] == "Primary"
    assert payload["sub_total"] == 499
    assert (payload["length"], payload["breadth"], payload["height"], payload["weight"]) == (25, 20, 5, 0.3)
