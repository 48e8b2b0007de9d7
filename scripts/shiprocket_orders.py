"""List active Shiprocket orders and whether each has an AWB code assigned."""
import argparse
from typing import Optional, Sequence

from scripts._runner import guarded
from shiprocket import ShiprocketClient, awb_code, is_test_order, summarize_orders

RULE = "═" * 80


def print_order(index: int, order: dict) -> None:
    print(f"\n{index}. Order ID: {order.get('id')}")
    print(f"   Channel Order ID: {order.get('channel_order_id') or 'N/A'}")
    print(f"   Customer: {order.get('customer_name')}")
    print(f"   Status: {order.get('status')}")
    print(f"   Payment: {order.get('payment_method')}")
    print(f"   Total: ₹{order.get('total')}")
    print(f"   Created: {order.get('created_at')}")
    if is_test_order(order):
        print("   🧪 TEST ORDER")
    code = awb_code(order)
    if code:
        shipment = order["shipments"][0]
        print(f"   ✅ AWB: {code}")
        print(f"   📦 Courier: {shipment.get('courier_name') or 'N/A'}")
        print(f"   📍 Shipment Status: {shipment.get('status') or 'N/A'}")
    elif order.get("shipments"):
        print("   ❌ AWB: Not Generated")
        print("   ⏳ Courier: Not Assigned")
    else:
        print("   ❌ AWB: Not Generated (No shipments)")


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--per-page", type=int, default=50)
    args = p.parse_args(argv)

    client = ShiprocketClient.from_env()
    client.login()
    print("✅ Authentication successful")

    summary = summarize_orders(client.list_orders(per_page=args.per_page))
    print(f"\n📦 Total Orders Found: {summary['total']}")
    print(f"✅ Active Orders: {len(summary['active'])}")
    print(f"❌ Canceled Orders (hidden): {summary['canceled']}")
    print(RULE)
    for index, order in enumerate(summary["active"], start=1):
        print_order(index, order)

    print("\n" + RULE)
    print("📊 SUMMARY (Active Orders Only)")
    print(RULE)
    print(f"Active Orders: {len(summary['active'])}")
    print(f"✅ Orders with AWB: {summary['with_awb']}")
    print(f"❌ Orders without AWB: {summary['without_awb']}")
    print(f"🧪 Test Orders: {summary['test_orders']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
