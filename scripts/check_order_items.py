"""List a user's orders with each item's product references."""
import argparse
from typing import Optional, Sequence

from database import require_db
from orders import orders_for_user
from scripts._runner import guarded


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("user_id")
    args = p.parse_args(argv)

    orders = orders_for_user(require_db(), args.user_id)
    print(f"User has {len(orders)} orders.")
    for order in orders:
        print(f"Order: {order.get('order_id') or order['_id']}, Status: {order.get('status')}")
        for item in order.get("items") or []:
            print(f"  - Item: {item.get('name')}, ID: {item.get('id')}, ProductID: {item.get('product_id')}")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
