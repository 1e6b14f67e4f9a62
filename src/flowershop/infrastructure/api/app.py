"""FastAPI REST API for the flower shop order desk.

Thin adapter: every route delegates to one application handler and maps
its DTO onto a response schema.  Domain errors are translated to JSON
``{"error": ...}`` bodies by a single exception handler.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import date
from typing import Callable, Optional

import structlog
from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from flowershop.application.add_line_item import AddLineItemHandler
from flowershop.application.advance_day import AdvanceDayHandler
from flowershop.application.create_order import CreateOrderHandler
from flowershop.application.delete_order import DeleteOrderHandler
from flowershop.application.initialize_clock import InitializeClockHandler
from flowershop.application.move_line_item import MoveLineItemHandler
from flowershop.application.remove_line_item import RemoveLineItemHandler
from flowershop.application.show_clock import ShowClockHandler
from flowershop.application.show_order import ListOrdersHandler, ShowOrderHandler
from flowershop.application.show_stock import (
    ListStockItemsHandler,
    ShowAvailabilityHandler,
)
from flowershop.application.unit_of_work import UnitOfWorkFactory
from flowershop.application.update_line_item import UpdateLineItemHandler
from flowershop.application.update_order import UpdateOrderHandler
from flowershop.domain.exceptions import (
    DomainException,
    DuplicateItemError,
    EntityNotFoundError,
    InsufficientStockError,
    StoreError,
    ValidationError,
)
from flowershop.domain.service.replenishment import ReplenishmentPolicy
from flowershop.infrastructure.api.schemas import (
    AvailabilitySchema,
    ClockSchema,
    DayAdvanceSchema,
    LineItemRequest,
    LineItemSchema,
    MessageSchema,
    OrderRequest,
    OrderSchema,
    StockItemSchema,
)

logger = structlog.get_logger(__name__)

ERROR_STATUS_CODES: dict[type[DomainException], int] = {
    ValidationError: 400,
    DuplicateItemError: 400,
    InsufficientStockError: 400,
    EntityNotFoundError: 404,
    StoreError: 500,
}


def _status_for(exc: DomainException) -> int:
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return 500


def create_app(
    uow_factory: UnitOfWorkFactory | None = None,
    replenishment: ReplenishmentPolicy | None = None,
    today: Callable[[], date] = date.today,
    initialize_clock: bool = True,
) -> FastAPI:
    """Build the application.

    Without arguments the store and settings come from the bootstrap
    module; tests pass their own unit-of-work factory.
    """
    if uow_factory is None or replenishment is None:
        from flowershop.infrastructure import bootstrap

        uow_factory = uow_factory or bootstrap.unit_of_work_factory()
        replenishment = replenishment or bootstrap.replenishment_policy()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if initialize_clock:
            await run_in_threadpool(InitializeClockHandler(uow_factory, today=today).handle)
        yield

    app = FastAPI(
        title="Flower Shop Order Desk",
        description="Stock, orders and the business clock of a flower shop",
        lifespan=lifespan,
    )

    # --- Error handling ---

    @app.exception_handler(DomainException)
    async def domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code >= 500:
            logger.error(
                "request.failed",
                method=request.method,
                path=request.url.path,
                error=str(exc),
            )
        body: dict = {"error": str(exc)}
        if isinstance(exc, InsufficientStockError):
            body.update(
                onHand=exc.on_hand,
                reserved=exc.reserved,
                available=exc.available,
                requested=exc.requested,
            )
        return JSONResponse(status_code=status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'][1:]) or 'body'}: {err['msg']}"
            for err in exc.errors()
        )
        return JSONResponse(status_code=400, content={"error": f"Invalid request: {details}"})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "request.failed",
            method=request.method,
            path=request.url.path,
            error=str(exc),
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    # --- Stock ---

    @app.get("/items", response_model=list[StockItemSchema])
    def list_items():
        return [
            StockItemSchema(**asdict(dto))
            for dto in ListStockItemsHandler(uow_factory).handle()
        ]

    @app.get("/items/availability", response_model=list[AvailabilitySchema])
    def items_availability(
        on_date: Optional[str] = Query(default=None, alias="date"),
        exclude_order_id: Optional[str] = Query(default=None, alias="excludeOrderId"),
    ):
        lines = ShowAvailabilityHandler(uow_factory).handle(on_date, exclude_order_id)
        return [AvailabilitySchema(**asdict(line)) for line in lines]

    # --- Orders ---

    @app.get("/orders", response_model=list[OrderSchema])
    def list_orders():
        return [OrderSchema(**asdict(dto)) for dto in ListOrdersHandler(uow_factory).handle()]

    @app.get("/orders/{order_id}", response_model=OrderSchema)
    def get_order(order_id: str):
        return OrderSchema(**asdict(ShowOrderHandler(uow_factory).handle(order_id)))

    @app.post("/orders", response_model=OrderSchema, status_code=201)
    def create_order(request: OrderRequest):
        dto = CreateOrderHandler(uow_factory).handle(request.customer_name, request.order_date)
        return OrderSchema(**asdict(dto))

    @app.put("/orders/{order_id}", response_model=OrderSchema)
    def update_order(order_id: str, request: OrderRequest):
        dto = UpdateOrderHandler(uow_factory).handle(
            order_id, request.customer_name, request.order_date
        )
        return OrderSchema(**asdict(dto))

    @app.delete("/orders/{order_id}", response_model=MessageSchema)
    def delete_order(order_id: str):
        DeleteOrderHandler(uow_factory).handle(order_id)
        return MessageSchema(message="Order deleted")

    # --- Line items ---

    @app.post("/orders/{order_id}/items", response_model=LineItemSchema, status_code=201)
    def add_line_item(order_id: str, request: LineItemRequest):
        dto = AddLineItemHandler(uow_factory).handle(
            order_id, request.stock_item_id, request.quantity
        )
        return LineItemSchema(**asdict(dto))

    @app.put("/orders/{order_id}/items/{item_id}", response_model=LineItemSchema)
    def update_line_item(order_id: str, item_id: str, request: LineItemRequest):
        dto = UpdateLineItemHandler(uow_factory).handle(
            order_id, item_id, request.stock_item_id, request.quantity
        )
        return LineItemSchema(**asdict(dto))

    @app.delete("/orders/{order_id}/items/{item_id}", response_model=MessageSchema)
    def remove_line_item(order_id: str, item_id: str):
        RemoveLineItemHandler(uow_factory).handle(order_id, item_id)
        return MessageSchema(message="Line item removed")

    @app.post("/orders/{target_order_id}/items/{item_id}/move", response_model=LineItemSchema)
    def move_line_item(target_order_id: str, item_id: str):
        dto = MoveLineItemHandler(uow_factory).handle(target_order_id, item_id)
        return LineItemSchema(**asdict(dto))

    # --- Clock ---

    @app.get("/clock", response_model=ClockSchema)
    def get_clock():
        return ClockSchema(**asdict(ShowClockHandler(uow_factory).handle()))

    @app.post("/clock/advance", response_model=DayAdvanceSchema)
    def advance_clock():
        dto = AdvanceDayHandler(uow_factory, replenishment).handle()
        return DayAdvanceSchema(**asdict(dto))

    return app
