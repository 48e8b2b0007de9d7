"""Backfill thin specifications and missing size lists from the per-category templates."""
import argparse
from typing import Optional, Sequence

from catalog import apply_rule, specification_update
from database import require_db
from scripts._runner import guarded


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--dry-run", action="store_true")
    args = p.parse_args(argv)

    print("🚀 Harmonizing all products with specs and sizes...")
    changed = apply_rule(require_db(), specification_update, dry_run=args.dry_run)
    for product, update in changed:
        print(f"✅ Fixed: {product.get('name')} ({', '.join(sorted(update))})")
    print(f"\n🎉 Task complete! Updated {len(changed)} products.")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
