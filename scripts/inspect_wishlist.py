"""Print the wishlist documents of a user."""
import argparse
from typing import Optional, Sequence

from database import require_db
from scripts._runner import dump_json, guarded
from users import wishlist_items


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("user_id")
    args = p.parse_args(argv)

    items = wishlist_items(require_db(), args.user_id)
    print(f"User: {args.user_id}, Wishlist size: {len(items)}")
    for item in items:
        print(f"Document ID: {item['_id']}")
        dump_json({k: v for k, v in item.items() if k != "_id"})
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
