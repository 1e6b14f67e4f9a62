"""CLI commands for the stock ledger."""

from __future__ import annotations

import click

from flowershop.application.add_stock_item import AddStockItemHandler
from flowershop.application.show_stock import ListStockItemsHandler, ShowAvailabilityHandler
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.domain.exceptions import DomainException


@click.command("add")
@click.option("--name", required=True, help="Flower name.")
@click.option("--quantity", required=True, type=int, help="Initial quantity on hand.")
@click.pass_obj
def stock_add(uow_factory: UnitOfWorkFactory, name: str, quantity: int) -> None:
    """Register a new kind of flower."""
    try:
        dto = AddStockItemHandler(uow_factory).handle(name=name, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock item #{dto.id} '{dto.name}' added with {dto.quantity} on hand")


@click.command("list")
@click.pass_obj
def stock_list(uow_factory: UnitOfWorkFactory) -> None:
    """List every stock item."""
    try:
        items = ListStockItemsHandler(uow_factory).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo("No stock items found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'On hand':>8}")
    click.echo("-" * 36)
    for i in items:
        click.echo(f"{i.id:<6} {i.name:<20} {i.quantity:>8}")


@click.command("availability")
@click.option("--date", "on_date", default=None, help="Ship date (YYYY-MM-DD).")
@click.option("--exclude-order", default=None, help="Order ID to leave out of reservations.")
@click.pass_obj
def stock_availability(
    uow_factory: UnitOfWorkFactory, on_date: str | None, exclude_order: str | None
) -> None:
    """Show on-hand, reserved and available quantities for a date."""
    try:
        lines = ShowAvailabilityHandler(uow_factory).handle(on_date, exclude_order)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No stock items found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'On hand':>8} {'Reserved':>10} {'Available':>10}")
    click.echo("-" * 58)
    for line in lines:
        click.echo(
            f"{line.id:<6} {line.name:<20} {line.on_hand:>8} {line.reserved:>10} {line.available:>10}"
        )
