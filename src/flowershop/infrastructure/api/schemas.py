"""Pydantic schemas for the HTTP API.

Wire format uses camelCase keys; dates are ``YYYY-MM-DD`` strings.
Request fields are optional at the schema level so that missing values
reach the application layer and are reported as ordinary validation
errors.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Requests ---


class OrderRequest(CamelModel):
    customer_name: Optional[str] = None
    order_date: Optional[str] = None


class LineItemRequest(CamelModel):
    stock_item_id: Optional[Union[str, int]] = None
    quantity: Optional[int] = None


# --- Responses ---


class StockItemSchema(CamelModel):
    id: str
    name: str
    quantity: int


class AvailabilitySchema(CamelModel):
    id: str
    name: str
    on_hand: int
    available: int
    reserved: int


class LineItemSchema(CamelModel):
    id: str
    order_id: str
    stock_item_id: str
    stock_item_name: str
    quantity: int


class OrderSchema(CamelModel):
    id: str
    customer_name: str
    order_date: str
    created_at: str
    items: list[LineItemSchema] = []


class ClockSchema(CamelModel):
    current_date: str


class DayAdvanceSchema(CamelModel):
    previous_date: str
    current_date: str
    message: str
    shipped: dict[str, int] = {}
    replenished: dict[str, int] = {}
    purged_orders: int = 0


class MessageSchema(CamelModel):
    message: str
