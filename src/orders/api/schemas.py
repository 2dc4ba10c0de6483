"""Pydantic request/response schemas for the Orders API.

These are external contracts — separate from the Order aggregate. Quantity
bounds are deliberately left to the service so that its errors reach the
caller unchanged.
"""

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    product: str
    quantity: int

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product": "Book",
                    "quantity": 2,
                }
            ]
        }
    }


class UpdateOrderRequest(BaseModel):
    quantity: int


# ---------------------------------------------------------------------------
# Adapter Configuration Schemas (non-production only)
# ---------------------------------------------------------------------------
class ConfigurePaymentRequest(BaseModel):
    should_succeed: bool
    failure_reason: str = "Card declined"


class SeedStockRequest(BaseModel):
    product: str
    units: int


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderResponse(BaseModel):
    id: int
    product: str
    quantity: int
    is_paid: bool


class OrderListResponse(BaseModel):
    orders: list[OrderResponse]


class PaymentConfigResponse(BaseModel):
    gateway: str
    should_succeed: bool
    failure_reason: str


class StockResponse(BaseModel):
    product: str
    units: int


class StatusResponse(BaseModel):
    status: str = "ok"
