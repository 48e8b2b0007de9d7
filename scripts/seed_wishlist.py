"""Put a product into a user's wishlist."""
import argparse
from typing import Optional, Sequence

from database import require_db
from scripts._runner import guarded
from seed import demo_product
from users import add_to_wishlist


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("user_id")
    p.add_argument("product_id")
    args = p.parse_args(argv)

    db = require_db()
    product = db["products"].find_one({"_id": args.product_id})
    product = {**product, "id": product["_id"]} if product else demo_product(args.product_id)
    if product is None:
        print(f"❌ Unknown product {args.product_id}")
        return 1

    add_to_wishlist(db, args.user_id, product)
    print(f"✅ Seeded wishlist item {args.product_id} for {args.user_id}")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
