"""List every user id with its display name."""
import argparse
from typing import Optional, Sequence

from database import require_db
from scripts._runner import guarded
from users import display_name, list_users


def main(argv: Optional[Sequence[str]] = None) -> int:
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    users = list_users(require_db())
    print(f"Total users: {len(users)}")
    for user in users:
        print(f"- {user['_id']} (name: {display_name(user)})")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
