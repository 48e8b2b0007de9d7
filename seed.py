"""Demo catalog used to populate an empty store."""
import random
from typing import Optional

from database import create_document
from schemas import Product

DEMO_PRODUCTS = [
    # Electronics
    {"id": "electronics-1", "name": "MacBook Pro M3", "price": 159999, "category": "Electronics", "sub_category": "Laptops", "image": "https://images.unsplash.com/photo-1517336714731-489689fd1ca8?w=800", "rating": 4.8, "reviews": 156},
    {"id": "electronics-2", "name": "iPhone 15 Pro Max", "price": 145000, "category": "Electronics", "sub_category": "Mobiles", "image": "https://images.unsplash.com/photo-1696446701796-da61225697cc?w=800", "rating": 4.9, "reviews": 432},
    {"id": "electronics-3", "name": "Sony WH-1000XM5", "price": 29999, "category": "Electronics", "sub_category": "Audio", "image": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=800", "rating": 4.9, "reviews": 1240},
    {"id": "electronics-4", "name": "Apple Watch Ultra 2", "price": 89900, "category": "Electronics", "sub_category": "Wearables", "image": "https://images.unsplash.com/photo-1434494878577-86c23bddad0f?w=800", "rating": 4.9, "reviews": 156},
    # Men's Fashion
    {"id": "fashion-1", "name": "Oxford Button-Down Shirt", "price": 2499, "category": "Men's Fashion", "sub_category": "Apparel", "image": "https://images.unsplash.com/photo-1596755094514-f87e34085b2c?w=800", "rating": 4.5, "reviews": 124},
    {"id": "fashion-2", "name": "Classic White Sneakers", "price": 3200, "category": "Men's Fashion", "sub_category": "Footwear", "image": "https://images.unsplash.com/photo-1549298916-b41d501d3772?w=800", "rating": 4.7, "reviews": 231},
    {"id": "fashion-11", "name": "Slim Fit Casual Shirt", "price": 1899, "category": "Men's Fashion", "sub_category": "Apparel", "image": "https://images.unsplash.com/photo-1596755094514-f87e34085b2c?w=800", "rating": 4.4, "reviews": 128},
    # Women's Fashion
    {"id": "fashion-3", "name": "Silk Embroidered Anarkali", "price": 7500, "category": "Women's Fashion", "sub_category": "Ethnic Wear", "image": "https://images.unsplash.com/photo-1610030469668-93510cb6f43e?w=800", "rating": 4.8, "reviews": 92},
    {"id": "fashion-4", "name": "Designer Floral Midi Dress", "price": 4200, "category": "Women's Fashion", "sub_category": "Western Wear", "image": "https://images.unsplash.com/photo-1496747611176-843222e1e57c?w=800", "rating": 4.7, "reviews": 112},
    {"id": "fashion-5", "name": "Wool Blend Oversized Scarf", "price": 1500, "category": "Women's Fashion", "sub_category": "Apparel", "image": "https://images.unsplash.com/photo-1520903920243-00d872a2d1c9?w=800", "rating": 4.6, "reviews": 78},
    # Home & Living
    {"id": "home-1", "name": "Ceramic Minimalist Table Lamp", "price": 3500, "category": "Home & Living", "sub_category": "Decor", "image": "https://images.unsplash.com/photo-1507473885765-e6ed057f782c?w=800", "rating": 4.7, "reviews": 43},
    {"id": "home-2", "name": "Cast Iron Dutch Oven", "price": 6500, "category": "Home & Living", "sub_category": "Kitchen", "image": "https://images.unsplash.com/photo-1590794056226-79ef3a8147e1?w=800", "rating": 4.9, "reviews": 112},
    # Beauty
    {"id": "beauty-1", "name": "Luxe Rose Face Oil", "price": 2100, "category": "Beauty", "sub_category": "Skincare", "image": "https://images.unsplash.com/photo-1620916566398-39f1143ab7be?w=800", "rating": 4.7, "reviews": 345},
    {"id": "beauty-2", "name": "Matte Velvet Lipstick Set", "price": 1800, "category": "Beauty", "sub_category": "Makeup", "image": "https://images.unsplash.com/photo-1586776977607-310e9c725c37?w=800", "rating": 4.6, "reviews": 567},
    # Accessories
    {"id": "accessories-1", "name": "Laptop Protective Sleeve", "price": 1200, "category": "Accessories", "sub_category": "Bags", "image": "https://images.unsplash.com/photo-1553062407-98eebce4c6a7?w=800", "rating": 4.6, "reviews": 82},
    {"id": "accessories-2", "name": "Canvas Tote Bag - Eco Friendly", "price": 450, "category": "Accessories", "sub_category": "Bags", "image": "https://images.unsplash.com/photo-1544816155-12df9643f363?w=800", "rating": 4.7, "reviews": 345},
]


def demo_product(product_id: str) -> Optional[dict]:
    for p in DEMO_PRODUCTS:
        if p["id"] == product_id:
            return p
    return None


def seed_products(db, force: bool = False, rng: Optional[random.Random] = None) -> int:
    """Insert the demo catalog. Does nothing when products already exist unless `force` is set."""
    if not force and db["products"].count_documents({}) > 0:
        return 0
    rng = rng or random.Random()
    inserted = 0
    for p in DEMO_PRODUCTS:
        fields = {k: v for k, v in p.items() if k != "id"}
        prod = Product(
            **fields,
            description=f"High-quality {p['name']} with premium features and excellent durability. Perfect for your daily needs.",
        )
        doc = prod.model_dump()
        doc["featured"] = rng.random() > 0.8
        if db["products"].find_one({"_id": p["id"]}):
            continue
        create_document("products", doc, database=db, doc_id=p["id"])
        inserted += 1
    return inserted
