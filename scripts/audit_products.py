"""Print the distinct categories / sub-categories in the catalog and a sample of products."""
import argparse
from typing import Optional, Sequence

from database import require_db
from scripts._runner import guarded, print_table


def audit(db) -> dict:
    categories, sub_categories, items = [], [], []
    for doc in db["products"].find({}):
        if doc.get("category") not in categories:
            categories.append(doc.get("category"))
        if doc.get("sub_category") not in sub_categories:
            sub_categories.append(doc.get("sub_category"))
        items.append({"id": doc["_id"], "name": doc.get("name"), "cat": doc.get("category"), "sub": doc.get("sub_category")})
    return {"categories": categories, "sub_categories": sub_categories, "items": items}


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--sample", type=int, default=10)
    args = p.parse_args(argv)

    print("🔍 Auditing product categories...")
    report = audit(require_db())
    print("\nUnique Categories in DB:", report["categories"])
    print("Unique SubCategories in DB:", report["sub_categories"])
    print(f"\nFirst {args.sample} products:")
    print_table(report["items"][: args.sample], ["id", "name", "cat", "sub"])
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
