"""FastAPI routes for the Orders domain.

Translates HTTP requests into OrderService calls and maps orchestration
errors onto status codes: InvalidArgument → 400, InvalidOperation → 409,
unknown order → 404.
"""

import os

from fastapi import APIRouter, HTTPException

from orders.api.schemas import (
    ConfigurePaymentRequest,
    CreateOrderRequest,
    OrderListResponse,
    OrderResponse,
    PaymentConfigResponse,
    SeedStockRequest,
    StatusResponse,
    StockResponse,
    UpdateOrderRequest,
)
from orders.exceptions import InvalidArgument, InvalidOperation
from orders.inventory.memory_adapter import InMemoryInventory
from orders.order.service import get_order_service
from orders.payment.fake_adapter import FakePaymentGateway

order_router = APIRouter(prefix="/orders", tags=["orders"])


def _to_response(order) -> OrderResponse:
    return OrderResponse(
        id=order.id,
        product=order.product,
        quantity=order.quantity,
        is_paid=order.is_paid,
    )


def _not_found(order_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Order {order_id} not found")


def _ensure_not_production(what: str) -> None:
    if os.environ.get("PROTEAN_ENV") == "production":
        raise HTTPException(status_code=403, detail=f"{what} not available in production")


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: CreateOrderRequest) -> OrderResponse:
    service = get_order_service()
    try:
        order = service.create_order(body.product, body.quantity)
    except InvalidArgument as exc:
        raise HTTPException(status_code=400, detail=exc.messages) from exc
    except InvalidOperation as exc:
        raise HTTPException(status_code=409, detail=exc.reason) from exc
    return _to_response(order)


@order_router.get("", response_model=OrderListResponse)
async def list_orders() -> OrderListResponse:
    orders = get_order_service().get_orders()
    return OrderListResponse(orders=[_to_response(order) for order in orders])


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int) -> OrderResponse:
    order = get_order_service().get_order(order_id)
    if order is None:
        raise _not_found(order_id)
    return _to_response(order)


@order_router.put("/{order_id}", response_model=OrderResponse)
async def update_order(order_id: int, body: UpdateOrderRequest) -> OrderResponse:
    service = get_order_service()
    try:
        updated = service.update_order(order_id, body.quantity)
    except InvalidArgument as exc:
        raise HTTPException(status_code=400, detail=exc.messages) from exc
    if not updated:
        raise _not_found(order_id)
    return _to_response(service.get_order(order_id))


@order_router.delete("/{order_id}", response_model=StatusResponse)
async def remove_order(order_id: int) -> StatusResponse:
    if not get_order_service().remove_order(order_id):
        raise _not_found(order_id)
    return StatusResponse(status="removed")


# ---------------------------------------------------------------------------
# Adapter configuration (non-production only)
# ---------------------------------------------------------------------------
@order_router.post("/payment/configure", response_model=PaymentConfigResponse)
async def configure_payment(body: ConfigurePaymentRequest) -> PaymentConfigResponse:
    """Configure the FakePaymentGateway behavior for manual API testing."""
    _ensure_not_production("Payment configuration")

    gateway = get_order_service().payment
    if not isinstance(gateway, FakePaymentGateway):
        raise HTTPException(status_code=400, detail="Payment configuration only available for FakePaymentGateway")

    gateway.configure(
        should_succeed=body.should_succeed,
        failure_reason=body.failure_reason,
    )
    return PaymentConfigResponse(
        gateway=type(gateway).__name__,
        should_succeed=gateway.should_succeed,
        failure_reason=gateway.failure_reason,
    )


@order_router.post("/inventory/stock", response_model=StockResponse)
async def seed_stock(body: SeedStockRequest) -> StockResponse:
    """Set available units in the in-memory inventory."""
    _ensure_not_production("Stock seeding")

    inventory = get_order_service().inventory
    if not isinstance(inventory, InMemoryInventory):
        raise HTTPException(status_code=400, detail="Stock seeding only available for InMemoryInventory")

    inventory.seed(body.product, body.units)
    return StockResponse(product=body.product, units=inventory.available(body.product))
