# pos_backend/orders/views.py
from datetime import datetime, timezone
from pos_backend.init_db import db
from pos_backend.orders.models import CashierOrder, Order
from pos_backend.logging_config import setup_logging

logger = setup_logging()


def to_number(value):
    """Coerce JSON numbers and numeric strings; ints stay ints."""
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Cast to Number failed for value {value!r}")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return float(text)
    raise ValueError(f"Cast to Number failed for value {value!r}")


def to_int(value):
    number = to_number(value)
    if isinstance(number, float):
        if not number.is_integer():
            raise ValueError(f"Expected an integer, got {value!r}")
        number = int(number)
    return number


def to_text(value):
    if value is None or isinstance(value, (dict, list)):
        raise ValueError(f"Cast to String failed for value {value!r}")
    text = str(value)
    if not text:
        raise ValueError("Required string is empty")
    return text


def to_datetime(value):
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # Epoch milliseconds, as sent by JavaScript clients
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).replace(tzinfo=None)
        except (OverflowError, OSError) as e:
            raise ValueError(f"Cast to Date failed for value {value!r}") from e
    if isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
        if parsed.tzinfo is not None:
            try:
                parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
            except OverflowError as e:
                raise ValueError(f"Cast to Date failed for value {value!r}") from e
        return parsed
    raise ValueError(f"Cast to Date failed for value {value!r}")


# wire name -> (model attribute, coercion)
CASHIER_ORDER_FIELDS = {
    'orderNo': ('order_no', to_int),
    'customerPhNo': ('customer_ph_no', to_int),
    'productId': ('product_id', to_int),
    'productName': ('product_name', to_text),
    'foodamount': ('food_amount', to_number),
    'productCategory': ('product_category', to_text),
    'date': ('date', to_datetime),
    'paymentby': ('payment_by', to_int),
    'paymentfor': ('payment_for', to_int),
}

ITEM_FIELDS = {
    'id': to_text,
    'name': to_text,
    'price': to_number,
    'quantity': to_number,
}


def build_cashier_order(data):
    """Map a flat payment record onto a ``CashierOrder``.

    Every field is required. Raises ``KeyError`` for a missing field and
    ``ValueError`` when a value cannot be coerced to its column type.
    """
    values = {}
    for wire_name, (attribute, coerce) in CASHIER_ORDER_FIELDS.items():
        if data.get(wire_name) is None:
            raise KeyError(wire_name)
        values[attribute] = coerce(data[wire_name])
    return CashierOrder(**values)


def add_cashier_order(data):
    order = build_cashier_order(data)
    db.session.add(order)
    db.session.commit()
    return order


def list_cashier_orders(phone_number=None):
    query = CashierOrder.query
    if phone_number is not None:
        query = query.filter_by(customer_ph_no=phone_number)
    return query.order_by(CashierOrder.id).all()


def normalize_items(items):
    if items is None:
        return []
    if not isinstance(items, list):
        raise ValueError("items must be an array")

    normalized = []
    for item in items:
        if not isinstance(item, dict):
            raise ValueError(f"Invalid order item {item!r}")
        # Unknown keys are dropped; absent keys stay absent
        normalized.append({
            key: coerce(item[key]) for key, coerce in ITEM_FIELDS.items() if item.get(key) is not None
        })
    return normalized


def place_order(items, total):
    order = Order(
        items=normalize_items(items),
        total=to_number(total) if total is not None else None,
    )
    db.session.add(order)
    db.session.commit()
    return order


def get_order(order_id):
    return db.session.get(Order, order_id)
