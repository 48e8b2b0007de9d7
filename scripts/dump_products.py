"""Dump id / name / category / sub-category / colors of every product as JSON."""
import argparse
from typing import Optional, Sequence

from catalog import color_names
from database import require_db
from scripts._runner import dump_json, guarded


def dump(db) -> list:
    return [
        {
            "id": doc["_id"],
            "name": doc.get("name"),
            "category": doc.get("category"),
            "sub": doc.get("sub_category"),
            "colors": color_names(doc.get("colors")),
        }
        for doc in db["products"].find({})
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    dump_json(dump(require_db()))
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
