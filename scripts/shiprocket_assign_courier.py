"""
Assign couriers to active Shiprocket orders that have no AWB code yet.

Without --assign the task only shows the courier options and the one it
would pick. With --assign it requests the AWB and then polls tracking until
the code shows up.
"""
import argparse
import time
from typing import Callable, List, Optional, Sequence

from scripts._runner import guarded
from shiprocket import ShiprocketClient, ShiprocketError, orders_awaiting_awb, select_courier

RULE = "═" * 80
THIN_RULE = "─" * 80


def print_couriers(couriers: List[dict]) -> None:
    print("\n" + RULE)
    print("📦 AVAILABLE COURIER OPTIONS")
    print(RULE)
    for index, courier in enumerate(couriers, start=1):
        print(f"\n{index}. {courier.get('courier_name')}")
        print(f"   Courier ID: {courier.get('courier_company_id')}")
        print(f"   Rate: ₹{courier.get('rate')}")
        print(f"   Estimated Delivery: {courier.get('etd')} days")
        print(f"   COD Available: {'Yes' if courier.get('cod') == 1 else 'No'}")
        print(f"   Rating: {courier.get('rating') or 'N/A'}")
        print(f"   Recommended: {'⭐ YES' if courier.get('is_recommended') == 1 else 'No'}")


def verify_awb(
    client: ShiprocketClient,
    shipment_id,
    attempts: int = 5,
    pause: float = 3,
    sleep: Optional[Callable[[float], None]] = None,
) -> Optional[str]:
    """Poll tracking until an AWB code appears; None if it never does."""
    print(f"\n🔄 Verifying AWB generation (max {attempts} attempts)...")
    for attempt in range(1, attempts + 1):
        print(f"   Attempt {attempt}/{attempts}...")
        try:
            tracking = client.track_shipment(shipment_id)
        except ShiprocketError as e:
            print(f"   Error: {e}")
            tracking = {}
        if tracking.get("awb_code"):
            print(f"✅ AWB verified: {tracking['awb_code']}")
            return tracking["awb_code"]
        if attempt < attempts and pause:
            (sleep or time.sleep)(pause)
    print("⚠️  AWB verification timed out, check the dashboard")
    return None


def process_order(
    client: ShiprocketClient,
    order: dict,
    assign: bool = False,
    pause: float = 3,
    sleep: Optional[Callable[[float], None]] = None,
) -> Optional[str]:
    """Pick a courier for one order and, when asked, assign it. Returns the AWB code if one was assigned."""
    shipment_id = order["shipments"][0]["id"]
    print("\n" + RULE)
    print(f"📦 PROCESSING ORDER: {order['id']}")
    print(RULE)
    print(f"Shipment ID: {shipment_id}")
    print(f"Customer: {order.get('customer_name')}")
    print(f"Destination: {order.get('customer_city')}, {order.get('customer_state')}")

    couriers = client.check_serviceability(order["id"])
    print_couriers(couriers)
    courier = select_courier(couriers)
    print("\n" + THIN_RULE)
    print(f"Selected: {courier.get('courier_name')} (ID {courier.get('courier_company_id')}, ₹{courier.get('rate')})")
    print(THIN_RULE)
    if not assign:
        print("ℹ️  Preview only, run with --assign to request the AWB")
        return None

    assigned = client.assign_awb(shipment_id, courier["courier_company_id"])
    print(f"✅ Courier assigned: {assigned.get('courier_name') or courier.get('courier_name')}")
    return verify_awb(client, shipment_id, pause=pause, sleep=sleep) or assigned.get("awb_code")


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument("--assign", action="store_true", help="request the AWB instead of only showing options")
    p.add_argument("--order-id", type=int, help="only handle this Shiprocket order id")
    p.add_argument("--pause", type=float, default=3, help="seconds between tracking checks")
    args = p.parse_args(argv)

    client = ShiprocketClient.from_env()
    client.login()
    print("✅ Authentication successful")

    orders = orders_awaiting_awb(client.list_orders())
    if args.order_id is not None:
        orders = [o for o in orders if o.get("id") == args.order_id]
    print(f"Found {len(orders)} active orders without AWB")
    if not orders:
        return 0

    assigned, failed = 0, 0
    for order in orders:
        try:
            code = process_order(client, order, assign=args.assign, pause=args.pause)
        except ShiprocketError as e:
            print(f"❌ Failed: {e}")
            failed += 1
            continue
        if code:
            print(f"AWB Code: {code}")
            assigned += 1

    print("\n" + RULE)
    print("📊 SUMMARY")
    print(RULE)
    print(f"Total Orders Processed: {len(orders)}")
    print(f"✅ Successfully Assigned: {assigned}")
    print(f"❌ Failed: {failed}")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    raise SystemExit(guarded(main))
