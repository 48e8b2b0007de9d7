"""Force one or more orders to Delivered so their products become reviewable."""
import argparse
from typing import Optional, Sequence

from database import require_db
from orders import mark_delivered
from scripts._runner import guarded


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("order_ids", nargs="+", help="order_id values, e.g. OD1772192641134")
    args = p.parse_args(argv)

    db = require_db()
    delivered = 0
    for order_id in args.order_ids:
        order = mark_delivered(db, order_id)
        if order is None:
            print(f"❌ Could not find order {order_id}")
            continue
        delivered += 1
        items = order.get("items") or []
        print(f"✅ SUCCESS: Order {order_id} marked as Delivered.")
        print(f"   User ID: {order.get('user_id')}")
        print(f"You can now review: {items[0].get('name') if items else 'Product'}")
    return 0 if delivered else 1


if __name__ == "__main__":
    raise SystemExit(guarded(main))
