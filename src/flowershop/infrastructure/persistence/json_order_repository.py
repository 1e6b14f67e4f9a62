"""JSON-document-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import date, datetime

from flowershop.domain.model.order import Order, OrderLineItem
from flowershop.domain.model.value_objects import Quantity
from flowershop.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._records:
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def get_by_line_item_id(self, item_id: str) -> Order | None:
        for raw in self._records:
            if any(i["id"] == item_id for i in raw["items"]):
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._records]
        return sorted(orders, key=lambda o: (o.order_date, o.created_at))

    def save(self, order: Order) -> None:
        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(self._records):
            if raw["id"] == order.id:
                self._records[i] = self._to_raw(order)
                return
        self._records.append(self._to_raw(order))

    def delete(self, order_id: str) -> bool:
        for i, raw in enumerate(self._records):
            if raw["id"] == order_id:
                del self._records[i]
                return True
        return False

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_name": order.customer_name,
            "order_date": order.order_date.isoformat(),
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "id": item.id,
                    "stock_item_id": item.stock_item_id,
                    "quantity": item.quantity.value,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                id=i["id"],
                order_id=raw["id"],
                stock_item_id=str(i["stock_item_id"]),
                quantity=Quantity(i["quantity"]),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            customer_name=raw["customer_name"],
            order_date=date.fromisoformat(raw["order_date"]),
            items=items,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
