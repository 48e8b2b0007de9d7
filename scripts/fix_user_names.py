"""Create missing user documents and fill in blank display names."""
import argparse
from typing import Optional, Sequence

from database import require_db
from scripts._runner import guarded
from users import ensure_user


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("user_ids", nargs="+")
    p.add_argument("--name", default="Premium Customer")
    p.add_argument("--phone", default="")
    args = p.parse_args(argv)

    db = require_db()
    for uid in args.user_ids:
        result = ensure_user(db, uid, args.name, args.phone)
        print(f"- {uid}: {result}")
    print("✅ Users data verified.")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
