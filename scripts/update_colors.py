"""Give every product a palette of 5-9 colors and drop the legacy materials/types fields."""
import argparse
import random
from typing import Optional, Sequence

from catalog import color_refresh_update
from database import require_db
from scripts._runner import guarded


def refresh_colors(db, rng: random.Random) -> int:
    count = 0
    for doc in db["products"].find({}):
        to_set, to_unset = color_refresh_update(rng)
        db["products"].update_one({"_id": doc["_id"]}, {"$set": to_set, "$unset": to_unset})
        count += 1
        print(f"✅ Updated: {doc.get('name')}")
    return count


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--seed", type=int, default=None, help="seed for the color count")
    args = p.parse_args(argv)

    print("🚀 Updating all products: expanding colors and removing old variants...")
    count = refresh_colors(require_db(), random.Random(args.seed))
    print(f"\n🎉 Successfully updated {count} products.")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
