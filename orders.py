"""Direct status fixes on order documents."""
import random
import string
from typing import List, Optional, Tuple

from database import create_document, utcnow
from reviews import DELIVERED, item_product_id
from schemas import Order, OrderItem

TEST_ORDER_PREFIX = "ORD_TEST_"


def find_order(db, order_id: str) -> Optional[dict]:
    return db["orders"].find_one({"order_id": order_id})


def mark_delivered(db, order_id: str) -> Optional[dict]:
    """Force an order to Delivered. Returns the updated document, or None if it does not exist."""
    order = find_order(db, order_id)
    if not order:
        return None
    update = {"status": DELIVERED, "updated_at": utcnow()}
    db["orders"].update_one({"_id": order["_id"]}, {"$set": update})
    return {**order, **update}


def orders_for_user(db, user_id: str) -> List[dict]:
    return list(db["orders"].find({"user_id": user_id}))


def new_test_order_id(rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    suffix = "".join(rng.choice(string.ascii_uppercase + string.digits) for _ in range(7))
    return TEST_ORDER_PREFIX + suffix


def ensure_delivered_order(db, user_id: str, product: dict, rng: Optional[random.Random] = None) -> Tuple[str, bool]:
    """
    Make sure `user_id` has a Delivered order containing `product`.

    An existing order that contains the product is switched to Delivered;
    otherwise a single-item Delivered order is created. Returns
    (order_id, created).
    """
    product_id = product["id"]
    for order in orders_for_user(db, user_id):
        if any(item_product_id(item) == product_id for item in order.get("items") or []):
            db["orders"].update_one(
                {"_id": order["_id"]},
                {"$set": {"status": DELIVERED, "updated_at": utcnow()}},
            )
            return order.get("order_id") or str(order["_id"]), False

    order = Order(
        order_id=new_test_order_id(rng),
        user_id=user_id,
        status=DELIVERED,
        items=[OrderItem(
            product_id=product_id,
            name=product["name"],
            price=product.get("price", 0),
            quantity=1,
            image=product.get("image"),
        )],
    )
    create_document("orders", order, database=db)
    return order.order_id, True
