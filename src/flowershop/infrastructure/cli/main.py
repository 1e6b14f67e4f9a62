from __future__ import annotations

from pathlib import Path

import click

from flowershop.infrastructure import bootstrap
from flowershop.infrastructure.cli.clock_commands import clock_advance, clock_init, clock_show
from flowershop.infrastructure.cli.item_commands import item_add, item_move, item_remove, item_update
from flowershop.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_update,
)
from flowershop.infrastructure.cli.stock_commands import stock_add, stock_availability, stock_list
from flowershop.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding shop.json (overrides FLOWERSHOP_DATA_DIR).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None) -> None:
    """Flower shop order desk"""
    settings = bootstrap.settings()
    configure_logging(settings.log_level)
    store_path = data_dir / "shop.json" if data_dir else settings.store_path
    ctx.obj = bootstrap.unit_of_work_factory(store_path)


@cli.group()
def stock() -> None:
    """Manage the stock ledger."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def item() -> None:
    """Manage order line items."""


@cli.group()
def clock() -> None:
    """Read and advance the business date."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address.")
@click.option("--port", default=None, type=int, help="Bind port.")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    import uvicorn

    settings = bootstrap.settings()
    uvicorn.run(
        "flowershop.infrastructure.api.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
    )


# Register subcommands
stock.add_command(stock_add)
stock.add_command(stock_availability)
stock.add_command(stock_list)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_update)
item.add_command(item_add)
item.add_command(item_move)
item.add_command(item_remove)
item.add_command(item_update)
clock.add_command(clock_advance)
clock.add_command(clock_init)
clock.add_command(clock_show)
