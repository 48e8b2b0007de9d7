"""Rewrite legacy product categories to their canonical (category, sub-category) pair."""
import argparse
from typing import Optional, Sequence

from catalog import apply_rule, category_update
from database import require_db
from scripts._runner import guarded


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--dry-run", action="store_true")
    args = p.parse_args(argv)

    print("🛠️ Normalizing product categories...")
    changed = apply_rule(require_db(), category_update, dry_run=args.dry_run)
    for product, update in changed:
        print(f"Updating {product.get('name')}: {product.get('category')} -> {update['category']}")
    print(f"\n✅ Normalization complete! Updated {len(changed)} products.")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
