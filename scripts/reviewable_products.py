"""Show which delivered products a user can still review."""
import argparse
from typing import Optional, Sequence

from database import require_db
from reviews import find_reviewable
from scripts._runner import dump_json, guarded


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("user_id")
    p.add_argument("--expect", metavar="PRODUCT_ID", help="exit 1 unless this product is reviewable")
    args = p.parse_args(argv)

    reviewable = find_reviewable(require_db(), args.user_id)
    print("Reviewable Orders Result:")
    dump_json(reviewable)

    if args.expect:
        if any(r["product_id"] == args.expect for r in reviewable):
            print(f"✅ MATCH FOUND for {args.expect}")
        else:
            print(f"❌ NO MATCH FOUND for {args.expect}")
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
