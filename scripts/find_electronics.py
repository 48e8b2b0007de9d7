"""Report products whose name looks like electronics but that sit in another category."""
import argparse
from typing import Optional, Sequence

from catalog import is_misplaced_electronics
from database import require_db
from scripts._runner import guarded, print_table


def find_misplaced(db) -> list:
    return [
        {"id": doc["_id"], "name": doc.get("name"), "category": doc.get("category"), "sub_category": doc.get("sub_category")}
        for doc in db["products"].find({})
        if is_misplaced_electronics(doc)
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    print("🔍 Searching for misplaced electronics...")
    misplaced = find_misplaced(require_db())
    if misplaced:
        print(f"Found {len(misplaced)} misplaced electronics products:")
        print_table(misplaced, ["id", "name", "category", "sub_category"])
    else:
        print("No misplaced electronics found with the current keywords.")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
