"""Shared entrypoint plumbing for the task scripts."""
import json
import sys
from typing import Callable, List, Optional, Sequence

from shiprocket import ShiprocketError


def guarded(main: Callable[[Optional[Sequence[str]]], int], argv: Optional[Sequence[str]] = None) -> int:
    """Run a task's main(), turning any failure into a printed error and exit code 1."""
    try:
        return main(argv)
    except ShiprocketError as e:
        print(f"❌ {e}", file=sys.stderr)
        if e.status is not None:
            print(f"Status: {e.status}", file=sys.stderr)
        if e.body is not None:
            print("Response:", json.dumps(e.body, indent=2, default=str), file=sys.stderr)
        return 1
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1


def print_table(rows: List[dict], columns: Sequence[str]) -> None:
    if not rows:
        print("(no rows)")
        return
    widths = {c: max(len(c), *(len(str(r.get(c, ""))) for r in rows)) for c in columns}
    print("  ".join(c.ljust(widths[c]) for c in columns))
    print("  ".join("-" * widths[c] for c in columns))
    for r in rows:
        print("  ".join(str(r.get(c, "")).ljust(widths[c]) for c in columns))


def dump_json(data) -> None:
    print(json.dumps(data, indent=2, default=str))
