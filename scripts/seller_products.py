"""List sellers and the products each of them owns."""
import argparse
from typing import Optional, Sequence

from database import require_db
from scripts._runner import guarded


def products_by_seller(db, seller_id: Optional[str] = None) -> dict:
    filt = {"_id": seller_id} if seller_id else {}
    out = {}
    for seller in db["sellers"].find(filt):
        out[seller["_id"]] = list(db["products"].find({"seller_id": seller["_id"]}))
    return out


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--seller", dest="seller_id")
    args = p.parse_args(argv)

    grouped = products_by_seller(require_db(), args.seller_id)
    print(f"Sellers: {len(grouped)}")
    for seller_id, products in grouped.items():
        print(f"\nSeller {seller_id}: {len(products)} products")
        for product in products:
            approved = "approved" if product.get("is_approved") else "pending"
            print(f"  - {product['_id']}: {product.get('name')} [{product.get('status')}, {approved}]")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
