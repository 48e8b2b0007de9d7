"""Make sure a user has a Delivered order for a product, creating one if needed."""
import argparse
from typing import Optional, Sequence

from database import require_db
from orders import ensure_delivered_order
from scripts._runner import guarded
from seed import demo_product


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("user_id")
    p.add_argument("product_id")
    args = p.parse_args(argv)

    db = require_db()
    product = db["products"].find_one({"_id": args.product_id})
    if product is not None:
        product = {**product, "id": product["_id"]}
    else:
        product = demo_product(args.product_id)
    if product is None:
        print(f"❌ Unknown product {args.product_id}")
        return 1

    print(f"Ensuring delivered order for {args.user_id} and {args.product_id}")
    order_id, created = ensure_delivered_order(db, args.user_id, product)
    if created:
        print(f"✅ SUCCESS: Created new delivered order {order_id} for {product['name']}")
    else:
        print(f"✅ SUCCESS: Marked existing order {order_id} as Delivered.")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
