"""Create one realistic test order on Shiprocket and report the assigned ids."""
import argparse
import time
from typing import Optional, Sequence

from scripts._runner import dump_json, guarded
from shiprocket import TEST_ORDER_PREFIX, ShiprocketClient, build_adhoc_payload

SAMPLE_ADDRESS = {
    "address_line": "123 MG Road",
    "address_line_2": "Near Trinity Metro Station",
    "city": "Bangalore",
    "pincode": "560001",
    "state": "Karnataka",
    "country": "India",
}

SAMPLE_ITEMS = [
    {"name": "Cotton T-Shirt", "sku": "TSHIRT-BLK-M", "quantity": 1, "price": 499, "hsn": "6109"},
]


def sample_payload(pickup_location: str, order_id: Optional[str] = None) -> dict:
    return build_adhoc_payload(
        order_id=order_id or f"{TEST_ORDER_PREFIX}{int(time.time() * 1000)}",
        customer_name="Rajesh Kumar",
        email="rajesh.kumar@example.com",
        phone="9876543210",
        address=SAMPLE_ADDRESS,
        items=SAMPLE_ITEMS,
        pickup_location=pickup_location,
        dimensions={"length": 25, "breadth": 20, "height": 5, "weight": 0.3},
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--pickup-location", default="Primary", help="pickup location registered on Shiprocket")
    p.add_argument("--order-id")
    args = p.parse_args(argv)

    client = ShiprocketClient.from_env()
    client.login()
    print("✅ Authentication successful")

    payload = sample_payload(args.pickup_location, args.order_id)
    print("\n📊 Order Details:")
    dump_json({
        "order_id": payload["order_id"],
        "customer": f"{payload['billing_customer_name']} {payload['billing_last_name']}",
        "address": f"{payload['billing_address']}, {payload['billing_city']}, {payload['billing_state']} - {payload['billing_pincode']}",
        "amount": f"₹{payload['sub_total']}",
        "payment": payload["payment_method"],
        "weight": f"{payload['weight']} kg",
        "dimensions": f"{payload['length']}x{payload['breadth']}x{payload['height']} cm",
    })

    created = client.create_adhoc_order(payload)
    print("\n📦 ORDER CREATED SUCCESSFULLY")
    print(f"Order ID: {created['order_id']}")
    print(f"Shipment ID: {created.get('shipment_id') or 'N/A'}")
    print(f"Channel Order ID: {payload['order_id']}")
    print(f"Status: {created.get('status') or 'NEW'}")
    print(f"AWB Code: {created.get('awb_code') or 'Not yet assigned'}")
    print(f"Courier: {created.get('courier_name') or 'Not yet assigned'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(guarded(main))
