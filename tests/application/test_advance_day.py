"""Integration tests for the day-advance and clock use cases."""

from datetime import date

import pytest

from flowershop.application.advance_day import AdvanceDayHandler
from flowershop.application.initialize_clock import InitializeClockHandler
from flowershop.application.show_clock import ShowClockHandler
from flowershop.domain.exceptions import StoreError
from flowershop.domain.model.order import Order
from flowershop.domain.model.stock_item import StockItem
from flowershop.domain.model.value_objects import Quantity
from flowershop.domain.service.replenishment import (
    MAX_DELIVERY,
    MIN_DELIVERY,
    ReplenishmentPolicy,
)
from tests.fakes import FakeUnitOfWork, FixedReplenishment

D = date(2024, 5, 1)


def _order(customer: str, order_date: date, items: dict[str, int]) -> Order:
    order = Order.create(customer, order_date, order_date)
    for stock_item_id, qty in items.items():
        order.add_item(stock_item_id, Quantity(qty))
    return order


def _setup(orders: list[Order], roses: int = 10, tulips: int = 20) -> FakeUnitOfWork:
    return FakeUnitOfWork(
        stock_items=[
            StockItem(id="1", name="Roses", on_hand_quantity=roses),
            StockItem(id="2", name="Tulips", on_hand_quantity=tulips),
        ],
        orders=orders,
        current_date=D,
    )


class TestAdvanceDay:

    def test_roses_scenario_without_deliveries(self):
        order_a = _order("A", D, {"1": 6})
        uow = _setup([order_a])

        result = AdvanceDayHandler(uow.factory(), FixedReplenishment(0)).handle()

        assert result.previous_date == "2024-05-01"
        assert result.current_date == "2024-05-02"
        assert result.shipped == {"1": 6}
        assert result.purged_orders == 1
        assert uow.stock_items.get_by_id("1").on_hand_quantity == 4
        assert uow.orders.get_by_id(order_a.id) is None
        assert uow.clock.get().current_date == date(2024, 5, 2)

    def test_shipment_sums_all_orders_on_date(self):
        uow = _setup([_order("A", D, {"1": 6, "2": 5}), _order("B", D, {"1": 3})])

        result = AdvanceDayHandler(uow.factory(), FixedReplenishment(0)).handle()

        assert result.shipped == {"1": 9, "2": 5}
        assert uow.stock_items.get_by_id("1").on_hand_quantity == 1
        assert uow.stock_items.get_by_id("2").on_hand_quantity == 15

    def test_stock_never_negative(self):
        uow = _setup([_order("A", D, {"1": 8})], roses=5)

        result = AdvanceDayHandler(uow.factory(), FixedReplenishment(0)).handle()

        assert result.shipped == {"1": 5}
        assert uow.stock_items.get_by_id("1").on_hand_quantity == 0

    def test_future_orders_untouched(self):
        later = _order("L", date(2024, 5, 2), {"1": 4})
        uow = _setup([_order("A", D, {"1": 2}), later])

        AdvanceDayHandler(uow.factory(), FixedReplenishment(0)).handle()

        kept = uow.orders.get_by_id(later.id)
        assert kept is not None
        assert kept.quantity_of("1") == 4

    def test_deliveries_added_after_shipment(self):
        uow = _setup([_order("A", D, {"1": 6})])

        result = AdvanceDayHandler(uow.factory(), FixedReplenishment(7)).handle()

        assert result.replenished == {"1": 7, "2": 7}
        assert uow.stock_items.get_by_id("1").on_hand_quantity == 4 + 7
        assert uow.stock_items.get_by_id("2").on_hand_quantity == 20 + 7

    def test_random_deliveries_within_bounds(self):
        uow = _setup([_order("A", D, {"1": 6})])

        AdvanceDayHandler(uow.factory(), ReplenishmentPolicy.seeded(42)).handle()

        roses = uow.stock_items.get_by_id("1").on_hand_quantity
        tulips = uow.stock_items.get_by_id("2").on_hand_quantity
        assert roses == 4 or 4 + MIN_DELIVERY <= roses <= 4 + MAX_DELIVERY
        assert tulips == 20 or 20 + MIN_DELIVERY <= tulips <= 20 + MAX_DELIVERY

    def test_empty_day_only_advances(self):
        uow = _setup([])

        result = AdvanceDayHandler(uow.factory(), FixedReplenishment(0)).handle()

        assert result.shipped == {}
        assert result.purged_orders == 0
        assert result.current_date == "2024-05-02"
        assert "2024-05-01" in result.message

    def test_consecutive_advances(self):
        uow = _setup([_order("B", date(2024, 5, 2), {"2": 5})])
        handler = AdvanceDayHandler(uow.factory(), FixedReplenishment(0))

        handler.handle()
        second = handler.handle()

        assert second.previous_date == "2024-05-02"
        assert second.current_date == "2024-05-03"
        assert second.shipped == {"2": 5}

    def test_failure_rolls_everything_back(self, monkeypatch):
        order_a = _order("A", D, {"1": 6})
        uow = _setup([order_a])

        def broken_save(clock):
            raise StoreError("disk full")

        monkeypatch.setattr(uow.clock, "save", broken_save)

        with pytest.raises(StoreError):
            AdvanceDayHandler(uow.factory(), FixedReplenishment(3)).handle()

        assert uow.commits == 0
        assert uow.stock_items.get_by_id("1").on_hand_quantity == 10
        assert uow.orders.get_by_id(order_a.id) is not None
        assert uow.clock.get().current_date == D


class TestClock:

    def test_show_clock(self):
        uow = _setup([])
        assert ShowClockHandler(uow.factory()).handle().current_date == "2024-05-01"

    def test_show_clock_defaults_to_today(self):
        uow = FakeUnitOfWork()
        assert ShowClockHandler(uow.factory()).handle().current_date == date.today().isoformat()

    def test_initialize_resets_date_and_purges_expired(self):
        expired = _order("old", date(2024, 5, 1), {"1": 1})
        current = _order("now", date(2024, 5, 10), {"1": 1})
        uow = _setup([expired, current])
        uow.clock.get().current_date = date(2024, 5, 20)

        dto = InitializeClockHandler(uow.factory(), today=lambda: date(2024, 5, 10)).handle()

        assert dto.current_date == "2024-05-10"
        assert uow.clock.get().current_date == date(2024, 5, 10)
        assert uow.orders.get_by_id(expired.id) is None
        assert uow.orders.get_by_id(current.id) is not None

    def test_initialize_creates_clock(self):
        uow = FakeUnitOfWork()
        InitializeClockHandler(uow.factory(), today=lambda: D).handle()
        assert uow.clock.get().current_date == D
