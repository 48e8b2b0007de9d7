"""
Shiprocket API client

Thin wrapper over the provider's external REST API: email/password login for
a bearer token, then order listing, ad-hoc order creation, cancellation and
courier (AWB) assignment.
A 401 triggers one re-login and replay; nothing else is retried.
"""
import json
import os
import socket
import urllib.error
import urllib.parse
import urllib.request
from datetime import datetime
from typing import Any, Dict, List, Optional

DEFAULT_API_URL = "https://apiv2.shiprocket.in/v1/external"
DEFAULT_TIMEOUT = 10
TEST_ORDER_PREFIX = "TEST_ORDER_"
CANCELED = "CANCELED"


class ShiprocketError(Exception):
    def __init__(self, message: str, status: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.status = status
        self.body = body


class ShiprocketClient:
    def __init__(self, email: str, password: str, api_url: str = DEFAULT_API_URL, timeout: int = DEFAULT_TIMEOUT):
        self.email = email
        self.password = password
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.token: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ShiprocketClient":
        email = os.getenv("SHIPROCKET_EMAIL")
        password = os.getenv("SHIPROCKET_PASSWORD")
        if not email or not password:
            raise ShiprocketError("Missing Shiprocket credentials. Required: SHIPROCKET_EMAIL, SHIPROCKET_PASSWORD")
        return cls(email, password, os.getenv("SHIPROCKET_API_URL", DEFAULT_API_URL))

    # ----------------------- Transport -----------------------
    def _send(self, method: str, path: str, payload: Optional[dict] = None, params: Optional[dict] = None, auth: bool = True):
        url = f"{self.api_url}{path}"
        if params:
            url = f"{url}?{urllib.parse.urlencode(params)}"
        headers = {"Content-Type": "application/json"}
        if auth:
            headers["Authorization"] = f"Bearer {self.token}"
        data = json.dumps(payload).encode("utf-8") if payload is not None else None

        req = urllib.request.Request(url, data=data, headers=headers, method=method)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                raw = resp.read().decode("utf-8", errors="replace")
        except urllib.error.HTTPError as e:
            raise ShiprocketError(f"{method} {path} failed with HTTP {e.code}", status=e.code, body=_decode(e.read())) from e
        except urllib.error.URLError as e:
            raise ShiprocketError(f"{method} {path} failed: {e.reason}") from e
        except (socket.timeout, OSError) as e:
            raise ShiprocketError(f"{method} {path} failed: {e}") from e
        return _decode(raw) if raw else {}

    def request(self, method: str, path: str, payload: Optional[dict] = None, params: Optional[dict] = None):
        if self.token is None:
            self.login()
        try:
            return self._send(method, path, payload, params)
        except ShiprocketError as e:
            if e.status != 401:
                raise
        self.token = None
        self.login()
        return self._send(method, path, payload, params)

    # ----------------------- Endpoints -----------------------
    def login(self) -> str:
        data = self._send("POST", "/auth/login", {"email": self.email, "password": self.password}, auth=False)
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise ShiprocketError("Authentication failed - no token received", body=data)
        self.token = token
        return token

    def list_orders(self, per_page: int = 50) -> List[dict]:
        data = self.request("GET", "/orders", params={"per_page": per_page})
        if not isinstance(data, dict) or "data" not in data:
            raise ShiprocketError("Failed to fetch orders", body=data)
        return data["data"]

    def create_adhoc_order(self, payload: dict) -> dict:
        data = self.request("POST", "/orders/create/adhoc", payload)
        if not isinstance(data, dict) or not data.get("order_id"):
            raise ShiprocketError("Order creation failed", body=data)
        return data

    def cancel_orders(self, ids: List[int]) -> dict:
        return self.request("POST", "/orders/cancel", {"ids": list(ids)})

    def check_serviceability(self, order_id) -> List[dict]:
        """Courier companies able to ship this order."""
        data = self.request("GET", "/courier/serviceability", params={"order_id": order_id})
        couriers = (data.get("data") or {}).get("available_courier_companies") if isinstance(data, dict) else None
        if not couriers:
            raise ShiprocketError(f"No couriers available for order {order_id}", body=data)
        return couriers

    def assign_awb(self, shipment_id, courier_id) -> dict:
        data = self.request("POST", "/courier/assign/awb", {"shipment_id": shipment_id, "courier_id": courier_id})
        assigned = ((data.get("response") or {}).get("data") or {}) if isinstance(data, dict) else {}
        # the status flag shows up at the top level or inside response.data
        if not isinstance(data, dict) or 1 not in (data.get("awb_assign_status"), assigned.get("awb_assign_status")):
            raise ShiprocketError(f"AWB assignment failed for shipment {shipment_id}", body=data)
        return assigned

    def track_shipment(self, shipment_id) -> dict:
        data = self.request("GET", f"/courier/track/shipment/{shipment_id}")
        if not isinstance(data, dict):
            return {}
        return data.get("tracking_data") or {}


def _decode(raw):
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return raw


# ----------------------- Payloads & reports -----------------------
def build_adhoc_payload(
    order_id: str,
    customer_name: str,
    email: str,
    phone: str,
    address: Dict[str, str],
    items: List[dict],
    pickup_location: str,
    payment_method: str = "Prepaid",
    dimensions: Optional[Dict[str, float]] = None,
    order_date: Optional[datetime] = None,
) -> dict:
    """Map a storefront order to the provider's ad-hoc order format. Shipping address equals billing."""
    parts = customer_name.strip().split(" ")
    first_name = parts[0] if parts else ""
    last_name = " ".join(parts[1:])
    dims = {"length": 10, "breadth": 10, "height": 10, "weight": 0.5}
    dims.update(dimensions or {})
    order_date = order_date or datetime.now()

    order_items = [
        {
            "name": item["name"],
            "sku": item.get("sku") or item.get("product_id") or item.get("id"),
            "units": item.get("quantity", 1),
            "selling_price": str(item["price"]),
            "discount": "",
            "tax": "",
            "hsn": item.get("hsn", ""),
        }
        for item in items
    ]
    sub_total = sum(float(item["price"]) * int(item.get("quantity", 1)) for item in items)

    return {
        "order_id": order_id,
        "order_date": order_date.strftime("%Y-%m-%d %H:%M:%S"),
        "pickup_location": pickup_location,
        "billing_customer_name": first_name,
        "billing_last_name": last_name,
        "billing_address": address["address_line"],
        "billing_address_2": address.get("address_line_2", ""),
        "billing_city": address["city"],
        "billing_pincode": address["pincode"],
        "billing_state": address.get("state") or "Karnataka",
        "billing_country": address.get("country") or "India",
        "billing_email": email,
        "billing_phone": phone,
        "shipping_is_billing": True,
        "order_items": order_items,
        "payment_method": "COD" if payment_method == "COD" else "Prepaid",
        "sub_total": sub_total,
        **dims,
    }


def awb_code(order: dict) -> Optional[str]:
    shipments = order.get("shipments") or []
    if shipments:
        return shipments[0].get("awb_code") or None
    return None


def is_test_order(order: dict) -> bool:
    return str(order.get("channel_order_id") or "").startswith(TEST_ORDER_PREFIX)


def summarize_orders(orders: List[dict]) -> Dict[str, Any]:
    active = [o for o in orders if o.get("status") != CANCELED]
    with_awb = sum(1 for o in active if awb_code(o))
    return {
        "total": len(orders),
        "active": active,
        "canceled": len(orders) - len(active),
        "with_awb": with_awb,
        "without_awb": len(active) - with_awb,
        "test_orders": sum(1 for o in active if is_test_order(o)),
    }


def orders_awaiting_awb(orders: List[dict]) -> List[dict]:
    """Active orders that have a shipment but no AWB code yet."""
    return [o for o in orders if o.get("status") != CANCELED and o.get("shipments") and not awb_code(o)]


def select_courier(couriers: List[dict]) -> Optional[dict]:
    """Recommended courier first, then the best rated, then the cheapest."""
    if not couriers:
        return None
    for courier in couriers:
        if courier.get("is_recommended") == 1:
            return courier
    best_rated = max(couriers, key=lambda c: float(c.get("rating") or 0))
    if best_rated.get("rating"):
        return best_rated
    return min(couriers, key=lambda c: float(c.get("rate") or 0))
