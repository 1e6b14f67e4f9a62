"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from flowershop.application.create_order import CreateOrderHandler
from flowershop.application.delete_order import DeleteOrderHandler
from flowershop.application.dto import OrderDTO
from flowershop.application.show_order import ListOrdersHandler, ShowOrderHandler
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.application.update_order import UpdateOrderHandler
from flowershop.domain.exceptions import DomainException


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Date:     {dto.order_date}")
    click.echo()

    if not dto.items:
        click.echo("  (no items)")
        return

    click.echo(f"  {'Item ID':<36} {'Flower':<20} {'Qty':>5}")
    click.echo(f"  {'-'*63}")
    for item in dto.items:
        click.echo(f"  {item.id:<36} {item.stock_item_name:<20} {item.quantity:>5}")


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--date", "order_date", required=True, help="Ship date (YYYY-MM-DD).")
@click.pass_obj
def order_create(uow_factory: UnitOfWorkFactory, customer: str, order_date: str) -> None:
    """Create a new, empty order."""
    try:
        dto = CreateOrderHandler(uow_factory).handle(customer_name=customer, order_date=order_date)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} created for {dto.customer_name} on {dto.order_date}")


@click.command("update")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--date", "order_date", required=True, help="Ship date (YYYY-MM-DD).")
@click.pass_obj
def order_update(
    uow_factory: UnitOfWorkFactory, order_id: str, customer: str, order_date: str
) -> None:
    """Change customer name and ship date of an order."""
    try:
        dto = UpdateOrderHandler(uow_factory).handle(order_id, customer, order_date)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} updated: {dto.customer_name} on {dto.order_date}")


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.pass_obj
def order_delete(uow_factory: UnitOfWorkFactory, order_id: str) -> None:
    """Delete an order and all of its items."""
    try:
        DeleteOrderHandler(uow_factory).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} deleted.")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(uow_factory: UnitOfWorkFactory, order_id: str) -> None:
    """Show details of an existing order."""
    try:
        dto = ShowOrderHandler(uow_factory).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.pass_obj
def order_list(uow_factory: UnitOfWorkFactory) -> None:
    """List orders still to ship, earliest first."""
    try:
        orders = ListOrdersHandler(uow_factory).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<36} {'Date':<10} {'Customer':<20} {'Items':>5}")
    click.echo("-" * 74)
    for o in orders:
        click.echo(f"{o.id:<36} {o.order_date:<10} {o.customer_name:<20} {len(o.items):>5}")
