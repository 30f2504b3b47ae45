from __future__ import annotations

import io
from typing import Iterable

import pandas as pd

from stitchstyle.domain import Order

COLUMNS = [
    "order_id",
    "order_date",
    "customer",
    "status",
    "items",
    "courier",
    "tailor",
    "due_date",
]


def _orders_frame(orders: Iterable[Order]) -> pd.DataFrame:
    records = []
    for order in orders:
        records.append({
            "order_id": order.id,
            "order_date": order.order_date.isoformat(),
            "customer": order.customer_name,
            "status": order.status,
            "items": "; ".join(order.items),
            "courier": "yes" if order.courier_requested else "no",
            "tailor": order.assigned_tailor_name or "",
            "due_date": order.due_date.isoformat() if order.due_date else "",
        })
    return pd.DataFrame(records, columns=COLUMNS)


def render_orders_csv(orders: Iterable[Order]) -> str:
    buffer = io.StringIO()
    _orders_frame(orders).to_csv(buffer, index=False)
    return buffer.getvalue()
