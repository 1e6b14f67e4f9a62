"""Integration tests for the line-item use cases (add, update, remove, move)."""

from datetime import date

import pytest

from flowershop.application.add_line_item import AddLineItemHandler
from flowershop.application.create_order import CreateOrderHandler
from flowershop.application.move_line_item import MoveLineItemHandler
from flowershop.application.remove_line_item import RemoveLineItemHandler
from flowershop.application.show_stock import ShowAvailabilityHandler
from flowershop.application.update_line_item import UpdateLineItemHandler
from flowershop.domain.exceptions import (
    DuplicateItemError,
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from flowershop.domain.model.stock_item import StockItem
from tests.fakes import FakeUnitOfWork

D = "2024-05-01"


def _setup(roses: int = 10, tulips: int = 20):
    uow = FakeUnitOfWork(
        stock_items=[
            StockItem(id="1", name="Roses", on_hand_quantity=roses),
            StockItem(id="2", name="Tulips", on_hand_quantity=tulips),
        ],
        current_date=date(2024, 5, 1),
    )
    return uow, uow.factory()


def _create_order(factory, customer: str = "Alice", order_date: str = D) -> str:
    return CreateOrderHandler(factory).handle(customer, order_date).id


def _available(factory, stock_item_id: str = "1", on_date: str = D) -> int:
    lines = ShowAvailabilityHandler(factory).handle(on_date)
    return next(line.available for line in lines if line.id == stock_item_id)


class TestAddLineItem:

    def test_roses_scenario(self):
        _, factory = _setup()
        add = AddLineItemHandler(factory)
        order_a = _create_order(factory, "A")
        order_b = _create_order(factory, "B")

        add.handle(order_a, "1", 6)
        assert _available(factory) == 4

        with pytest.raises(InsufficientStockError) as exc_info:
            add.handle(order_b, "1", 5)
        err = exc_info.value
        assert (err.on_hand, err.reserved, err.available, err.requested) == (10, 6, 4, 5)

        add.handle(order_b, "1", 4)
        assert _available(factory) == 0

    def test_returns_dto_with_name(self):
        _, factory = _setup()
        order_id = _create_order(factory)

        dto = AddLineItemHandler(factory).handle(order_id, "1", 3)

        assert dto.order_id == order_id
        assert dto.stock_item_name == "Roses"
        assert dto.quantity == 3

    def test_duplicate_rejected_regardless_of_quantity(self):
        uow, factory = _setup()
        add = AddLineItemHandler(factory)
        order_id = _create_order(factory)
        add.handle(order_id, "1", 1)

        with pytest.raises(DuplicateItemError, match="already in order"):
            add.handle(order_id, "1", 1)
        assert len(uow.orders.get_by_id(order_id).items) == 1

    def test_duplicate_checked_before_stock(self):
        _, factory = _setup()
        add = AddLineItemHandler(factory)
        order_id = _create_order(factory)
        add.handle(order_id, "1", 10)

        with pytest.raises(DuplicateItemError):
            add.handle(order_id, "1", 50)

    def test_integer_stock_item_id_accepted(self):
        _, factory = _setup()
        order_id = _create_order(factory)
        assert AddLineItemHandler(factory).handle(order_id, 2, 3).stock_item_id == "2"

    @pytest.mark.parametrize("stock_item_id, quantity", [(None, 3), ("", 3), ("1", None), ("1", 0), ("1", -2)])
    def test_invalid_input_rejected(self, stock_item_id, quantity):
        _, factory = _setup()
        order_id = _create_order(factory)
        with pytest.raises(ValidationError):
            AddLineItemHandler(factory).handle(order_id, stock_item_id, quantity)

    def test_unknown_order(self):
        _, factory = _setup()
        with pytest.raises(EntityNotFoundError, match="Order"):
            AddLineItemHandler(factory).handle("missing", "1", 1)

    def test_unknown_stock_item(self):
        _, factory = _setup()
        order_id = _create_order(factory)
        with pytest.raises(EntityNotFoundError, match="Stock item"):
            AddLineItemHandler(factory).handle(order_id, "99", 1)

    def test_rejected_item_is_not_persisted(self):
        uow, factory = _setup(roses=2)
        order_id = _create_order(factory)

        with pytest.raises(InsufficientStockError):
            AddLineItemHandler(factory).handle(order_id, "1", 3)
        assert uow.orders.get_by_id(order_id).items == []

    def test_other_dates_do_not_compete(self):
        _, factory = _setup()
        add = AddLineItemHandler(factory)
        add.handle(_create_order(factory, "A", "2024-05-02"), "1", 10)
        add.handle(_create_order(factory, "B", D), "1", 10)


class TestUpdateLineItem:

    def _with_item(self, qty: int = 6):
        uow, factory = _setup()
        order_id = _create_order(factory, "A")
        item = AddLineItemHandler(factory).handle(order_id, "1", qty)
        return uow, factory, order_id, item.id

    def test_roses_scenario(self):
        uow, factory, order_id, item_id = self._with_item()
        update = UpdateLineItemHandler(factory)

        update.handle(order_id, item_id, "1", 9)
        assert uow.orders.get_by_id(order_id).quantity_of("1") == 9

        with pytest.raises(InsufficientStockError):
            update.handle(order_id, item_id, "1", 11)
        assert uow.orders.get_by_id(order_id).quantity_of("1") == 9

    def test_other_orders_on_date_compete(self):
        _, factory, order_id, item_id = self._with_item()
        AddLineItemHandler(factory).handle(_create_order(factory, "B"), "1", 3)

        with pytest.raises(InsufficientStockError) as exc_info:
            UpdateLineItemHandler(factory).handle(order_id, item_id, "1", 8)
        assert exc_info.value.available == 7

    def test_switch_stock_item_keeps_identity(self):
        uow, factory, order_id, item_id = self._with_item()

        dto = UpdateLineItemHandler(factory).handle(order_id, item_id, "2", 15)

        assert dto.id == item_id
        assert dto.order_id == order_id
        assert dto.stock_item_name == "Tulips"
        order = uow.orders.get_by_id(order_id)
        assert order.quantity_of("1") == 0
        assert order.quantity_of("2") == 15

    def test_switch_onto_sibling_stock_item_rejected(self):
        _, factory, order_id, item_id = self._with_item()
        AddLineItemHandler(factory).handle(order_id, "2", 1)

        with pytest.raises(DuplicateItemError):
            UpdateLineItemHandler(factory).handle(order_id, item_id, "2", 1)

    def test_duplicate_checked_before_stock(self):
        _, factory = _setup(roses=10, tulips=2)
        order_id = _create_order(factory, "A")
        add = AddLineItemHandler(factory)
        roses = add.handle(order_id, "1", 3)
        add.handle(order_id, "2", 1)

        with pytest.raises(DuplicateItemError):
            UpdateLineItemHandler(factory).handle(order_id, roses.id, "2", 5)

    def test_item_must_belong_to_order(self):
        _, factory, _, item_id = self._with_item()
        other = _create_order(factory, "B")
        with pytest.raises(EntityNotFoundError):
            UpdateLineItemHandler(factory).handle(other, item_id, "1", 1)

    def test_invalid_quantity(self):
        _, factory, order_id, item_id = self._with_item()
        with pytest.raises(ValidationError):
            UpdateLineItemHandler(factory).handle(order_id, item_id, "1", 0)


class TestRemoveLineItem:

    def test_removes(self):
        uow, factory = _setup()
        order_id = _create_order(factory)
        item = AddLineItemHandler(factory).handle(order_id, "1", 6)

        RemoveLineItemHandler(factory).handle(order_id, item.id)

        assert uow.orders.get_by_id(order_id).items == []
        assert _available(factory) == 10

    def test_wrong_order_not_found(self):
        _, factory = _setup()
        order_id = _create_order(factory)
        item = AddLineItemHandler(factory).handle(order_id, "1", 6)

        with pytest.raises(EntityNotFoundError):
            RemoveLineItemHandler(factory).handle(_create_order(factory, "B"), item.id)


class TestMoveLineItem:

    def test_preserves_item_and_changes_owner(self):
        uow, factory = _setup()
        order_a = _create_order(factory, "A")
        order_b = _create_order(factory, "B")
        item = AddLineItemHandler(factory).handle(order_a, "1", 6)

        moved = MoveLineItemHandler(factory).handle(order_b, item.id)

        assert moved.id == item.id
        assert moved.order_id == order_b
        assert moved.stock_item_id == "1"
        assert moved.quantity == 6
        assert uow.orders.get_by_id(order_a).items == []
        assert uow.orders.get_by_id(order_b).quantity_of("1") == 6

    def test_back_and_forth_restores_state(self):
        uow, factory = _setup()
        order_a = _create_order(factory, "A")
        order_b = _create_order(factory, "B")
        item = AddLineItemHandler(factory).handle(order_a, "1", 6)
        move = MoveLineItemHandler(factory)

        move.handle(order_b, item.id)
        back = move.handle(order_a, item.id)

        assert back == item
        assert uow.orders.get_by_id(order_b).items == []

    def test_move_to_owner_is_noop(self):
        uow, factory = _setup()
        order_a = _create_order(factory, "A")
        item = AddLineItemHandler(factory).handle(order_a, "1", 6)

        assert MoveLineItemHandler(factory).handle(order_a, item.id) == item
        assert uow.commits == 2  # create + add only

    def test_only_on_hand_is_checked(self):
        # Date-wide commitment is already 10/10 but the move still fits
        # because the target holds no roses.
        _, factory = _setup()
        order_a = _create_order(factory, "A")
        order_b = _create_order(factory, "B")
        add = AddLineItemHandler(factory)
        item = add.handle(order_a, "1", 6)
        add.handle(_create_order(factory, "C"), "1", 4)

        assert MoveLineItemHandler(factory).handle(order_b, item.id).order_id == order_b

    def test_exceeding_on_hand_rejected(self):
        uow, factory = _setup(roses=6)
        order_a = _create_order(factory, "A")
        order_b = _create_order(factory, "B")
        item = AddLineItemHandler(factory).handle(order_a, "1", 6)
        # Stock shrank after booking (e.g. a shipment on another day).
        uow.stock_items.get_by_id("1").on_hand_quantity = 5

        with pytest.raises(InsufficientStockError):
            MoveLineItemHandler(factory).handle(order_b, item.id)
        assert uow.orders.get_by_id(order_a).quantity_of("1") == 6

    def test_target_with_same_stock_item_rejected(self):
        _, factory = _setup()
        order_a = _create_order(factory, "A")
        order_b = _create_order(factory, "B")
        add = AddLineItemHandler(factory)
        item = add.handle(order_a, "1", 2)
        add.handle(order_b, "1", 2)

        with pytest.raises(DuplicateItemError):
            MoveLineItemHandler(factory).handle(order_b, item.id)

    def test_unknown_item(self):
        _, factory = _setup()
        with pytest.raises(EntityNotFoundError, match="Line item"):
            MoveLineItemHandler(factory).handle(_create_order(factory), "missing")

    def test_unknown_target(self):
        _, factory = _setup()
        item = AddLineItemHandler(factory).handle(_create_order(factory), "1", 1)
        with pytest.raises(EntityNotFoundError, match="Order"):
            MoveLineItemHandler(factory).handle("missing", item.id)
