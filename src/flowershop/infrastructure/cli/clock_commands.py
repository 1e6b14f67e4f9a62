"""CLI commands for the business clock."""

from __future__ import annotations

import click

from flowershop.application.advance_day import AdvanceDayHandler
from flowershop.application.initialize_clock import InitializeClockHandler
from flowershop.application.show_clock import ShowClockHandler
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.domain.exceptions import DomainException
from flowershop.domain.service.replenishment import ReplenishmentPolicy
from flowershop.infrastructure import bootstrap


@click.command("show")
@click.pass_obj
def clock_show(uow_factory: UnitOfWorkFactory) -> None:
    """Print the current business date."""
    try:
        dto = ShowClockHandler(uow_factory).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.current_date)


@click.command("init")
@click.pass_obj
def clock_init(uow_factory: UnitOfWorkFactory) -> None:
    """Reset the date to today and drop expired orders."""
    try:
        dto = InitializeClockHandler(uow_factory).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Business date set to {dto.current_date}")


@click.command("advance")
@click.option("--seed", type=int, default=None, help="Seed for the delivery dice.")
@click.pass_obj
def clock_advance(uow_factory: UnitOfWorkFactory, seed: int | None) -> None:
    """Ship today's orders, take deliveries and move to the next day."""
    if seed is not None:
        policy = ReplenishmentPolicy.seeded(seed)
    else:
        policy = bootstrap.replenishment_policy()

    try:
        dto = AdvanceDayHandler(uow_factory, policy).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.message)
    for stock_item_id, units in sorted(dto.shipped.items()):
        click.echo(f"  shipped   #{stock_item_id:<5} {units:>5}")
    for stock_item_id, units in sorted(dto.replenished.items()):
        click.echo(f"  delivered #{stock_item_id:<5} {units:>5}")
