"""User and wishlist documents."""
import time
from typing import List, Optional

from database import create_document, get_documents
from schemas import User, WishlistItem


def display_name(user: dict) -> Optional[str]:
    return user.get("full_name") or user.get("name")


def list_users(db) -> List[dict]:
    return get_documents("users", database=db)


def ensure_user(db, user_id: str, full_name: str, phone_number: str = "") -> str:
    """
    Create the user if missing, or give it a name if it has none.
    Returns "created", "renamed" or "ok".
    """
    existing = db["users"].find_one({"_id": user_id})
    if existing is None:
        create_document("users", User(full_name=full_name, phone_number=phone_number), database=db, doc_id=user_id)
        return "created"
    if not display_name(existing):
        db["users"].update_one({"_id": user_id}, {"$set": {"full_name": full_name}})
        return "renamed"
    return "ok"


def wishlist_key(user_id: str, product_id: str) -> str:
    return f"{user_id}:{product_id}"


def wishlist_items(db, user_id: str) -> List[dict]:
    return list(db["wishlist"].find({"user_id": user_id}))


def add_to_wishlist(db, user_id: str, product: dict) -> str:
    """Store a product snapshot in the user's wishlist, replacing any previous entry."""
    item = WishlistItem(
        user_id=user_id,
        product_id=product["id"],
        name=product["name"],
        price=product["price"],
        image=product.get("image"),
        category=product.get("category"),
        rating=product.get("rating"),
        reviews=product.get("reviews", 0),
        added_at=int(time.time() * 1000),
    )
    key = wishlist_key(user_id, product["id"])
    db["wishlist"].replace_one({"_id": key}, {"_id": key, **item.model_dump()}, upsert=True)
    return key
