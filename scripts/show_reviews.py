"""Print reviews written by a user and/or left on a product."""
import argparse
from typing import Optional, Sequence

from database import require_db
from scripts._runner import guarded


def find_reviews(db, user_id: Optional[str] = None, product_id: Optional[str] = None) -> list:
    filt = {}
    if user_id:
        filt["user_id"] = user_id
    if product_id:
        filt["product_id"] = product_id
    return list(db["reviews"].find(filt))


def print_review(review: dict) -> None:
    print(f"Review ID: {review['_id']}")
    print(f"User: {review.get('user_id')}")
    print(f"Customer: {review.get('customer_name')}")
    print(f"Product: {review.get('product_name')} ({review.get('product_id')})")
    print(f"Status: {review.get('status')}")
    print(f"Verified: {review.get('verified')}")
    print(f"Rating: {review.get('rating')}")
    print(f"CreatedAt: {review.get('created_at')}")
    print("---")


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--user", dest="user_id")
    p.add_argument("--product", dest="product_id")
    args = p.parse_args(argv)
    if not args.user_id and not args.product_id:
        p.error("pass --user and/or --product")

    found = find_reviews(require_db(), args.user_id, args.product_id)
    scope = " and ".join(s for s in (
        f"user {args.user_id}" if args.user_id else "",
        f"product {args.product_id}" if args.product_id else "",
    ) if s)
    print(f"Found {len(found)} reviews for {scope}")
    for review in found:
        print_review(review)
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
