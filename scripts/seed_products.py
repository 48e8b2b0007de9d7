"""Populate the products collection with the demo catalog."""
import argparse
from typing import Optional, Sequence

from database import require_db
from scripts._runner import guarded
from seed import seed_products


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--force", action="store_true", help="seed even if products already exist")
    args = p.parse_args(argv)

    print("🚀 Starting database seeding...")
    inserted = seed_products(require_db(), force=args.force)
    if inserted == 0:
        print("Products already exist, nothing seeded.")
    else:
        print(f"\n🎉 Seeding complete! Added {inserted} products.")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
