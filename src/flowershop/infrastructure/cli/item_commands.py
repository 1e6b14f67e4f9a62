"""CLI commands for order line items."""

from __future__ import annotations

import click

from flowershop.application.add_line_item import AddLineItemHandler
from flowershop.application.move_line_item import MoveLineItemHandler
from flowershop.application.remove_line_item import RemoveLineItemHandler
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.application.update_line_item import UpdateLineItemHandler
from flowershop.domain.exceptions import DomainException


@click.command("add")
@click.option("--order", "order_id", required=True, help="Order ID.")
@click.option("--stock-item", "stock_item_id", required=True, help="Stock item ID.")
@click.option("--quantity", required=True, type=int, help="Units to book.")
@click.pass_obj
def item_add(
    uow_factory: UnitOfWorkFactory, order_id: str, stock_item_id: str, quantity: int
) -> None:
    """Book flowers on an order."""
    try:
        dto = AddLineItemHandler(uow_factory).handle(order_id, stock_item_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Line item {dto.id} added: {dto.quantity} x {dto.stock_item_name}")


@click.command("update")
@click.option("--order", "order_id", required=True, help="Order ID.")
@click.option("--id", "item_id", required=True, help="Line item ID.")
@click.option("--stock-item", "stock_item_id", required=True, help="Stock item ID.")
@click.option("--quantity", required=True, type=int, help="Units to book.")
@click.pass_obj
def item_update(
    uow_factory: UnitOfWorkFactory,
    order_id: str,
    item_id: str,
    stock_item_id: str,
    quantity: int,
) -> None:
    """Change flower or quantity of a line item."""
    try:
        dto = UpdateLineItemHandler(uow_factory).handle(order_id, item_id, stock_item_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Line item {dto.id} updated: {dto.quantity} x {dto.stock_item_name}")


@click.command("remove")
@click.option("--order", "order_id", required=True, help="Order ID.")
@click.option("--id", "item_id", required=True, help="Line item ID.")
@click.pass_obj
def item_remove(uow_factory: UnitOfWorkFactory, order_id: str, item_id: str) -> None:
    """Remove a line item from an order."""
    try:
        RemoveLineItemHandler(uow_factory).handle(order_id, item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Line item {item_id} removed.")


@click.command("move")
@click.option("--id", "item_id", required=True, help="Line item ID.")
@click.option("--to", "target_order_id", required=True, help="Target order ID.")
@click.pass_obj
def item_move(uow_factory: UnitOfWorkFactory, item_id: str, target_order_id: str) -> None:
    """Move a line item to another order."""
    try:
        dto = MoveLineItemHandler(uow_factory).handle(target_order_id, item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Line item {dto.id} moved to order {dto.order_id}")
