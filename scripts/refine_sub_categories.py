"""Fix sub-categories that the product name makes obvious (sarees, scarves)."""
import argparse
from typing import Optional, Sequence

from catalog import apply_rule, sub_category_update
from database import require_db
from scripts._runner import guarded


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--dry-run", action="store_true")
    args = p.parse_args(argv)

    print("🛠️ Refining product sub-categories...")
    changed = apply_rule(require_db(), sub_category_update, dry_run=args.dry_run)
    for product, update in changed:
        print(f"Updating {product.get('name')}: {product.get('sub_category')} -> {update['sub_category']}")
    print(f"\n✅ Refinement complete! Updated {len(changed)} products.")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
