"""Which delivered products a user can still review."""
from typing import Iterable, List

DELIVERED = "Delivered"


def item_product_id(item: dict):
    # older orders stored the product reference as `id`
    return item.get("product_id") or item.get("id")


def reviewable_items(orders: Iterable[dict], reviews: Iterable[dict]) -> List[dict]:
    """
    Items of `orders` whose product the user has not reviewed yet.

    Items are returned in order of first encounter. The same product bought in
    two orders shows up twice.
    """
    reviewed = {r.get("product_id") for r in reviews if r.get("product_id")}

    out: List[dict] = []
    for order in orders:
        items = order.get("items")
        if not isinstance(items, list):
            continue
        for item in items:
            pid = item_product_id(item)
            if pid in reviewed:
                continue
            out.append({
                "order_id": order.get("order_id") or str(order.get("_id")),
                "product_id": pid,
                "product_name": item.get("name") or item.get("title"),
                "product_image": item.get("image_url") or item.get("image"),
            })
    return out


def find_reviewable(db, user_id: str) -> List[dict]:
    orders = db["orders"].find({"user_id": user_id, "status": DELIVERED})
    reviews = db["reviews"].find({"user_id": user_id})
    return reviewable_items(orders, list(reviews))
