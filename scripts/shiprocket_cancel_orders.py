"""Cancel every order on the Shiprocket account, or only the test orders."""
import argparse
import time
from typing import Callable, Optional, Sequence

from scripts._runner import guarded
from shiprocket import CANCELED, ShiprocketClient, ShiprocketError, is_test_order

CONFIRMATION = "DELETE ALL"


def cancel_all(client: ShiprocketClient, orders: list, pause: float = 0.5, sleep: Optional[Callable[[float], None]] = None) -> dict:
    """Cancel orders one by one. A failed cancellation is counted, not raised."""
    cancelled, failed = 0, 0
    for i, order in enumerate(orders, start=1):
        print(f"\n[{i}/{len(orders)}] Cancelling Order ID: {order['id']} ({order.get('channel_order_id') or 'N/A'})...")
        try:
            client.cancel_orders([order["id"]])
        except ShiprocketError as e:
            print(f"❌ Failed: {e}")
            failed += 1
        else:
            print("✅ Cancelled successfully")
            cancelled += 1
        if pause:
            (sleep or time.sleep)(pause)
    return {"cancelled": cancelled, "failed": failed}


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--test-only", action="store_true", help="only cancel TEST_ORDER_ orders")
    p.add_argument("--yes", action="store_true", help="skip the confirmation prompt")
    args = p.parse_args(argv)

    client = ShiprocketClient.from_env()
    client.login()
    orders = [o for o in client.list_orders() if o.get("status") != CANCELED]
    if args.test_only:
        orders = [o for o in orders if is_test_order(o)]
    print(f"Found {len(orders)} orders to cancel")
    if not orders:
        return 0

    if not args.yes:
        answer = input(f'\n⚠️  WARNING: this cancels {len(orders)} orders on Shiprocket!\nType "{CONFIRMATION}" to confirm: ')
        if answer.strip() != CONFIRMATION:
            print("Cancelled by user, no orders were touched.")
            return 0

    result = cancel_all(client, orders)
    print(f"\nTotal Orders: {len(orders)}")
    print(f"✅ Successfully Cancelled: {result['cancelled']}")
    print(f"❌ Failed to Cancel: {result['failed']}")
    return 0 if result["failed"] == 0 else 1


if __name__ == "__main__":
    raise SystemExit(guarded(main))
