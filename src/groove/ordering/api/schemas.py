"""Pydantic request/response schemas for the Ordering API."""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    item_type: str
    item_id: str
    quantity: int = Field(ge=1, default=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "item_type": "Track",
                    "item_id": "track-001",
                    "quantity": 1,
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class CartIdResponse(BaseModel):
    cart_id: str


class CartItemResponse(BaseModel):
    item_type: str
    item_id: str
    title: str | None = None
    unit_price: float
    quantity: int
    line_total: float


class CartResponse(BaseModel):
    cart_id: str
    account_id: str
    items: list[CartItemResponse]
    total: float


class CartTotalResponse(BaseModel):
    account_id: str
    total: float
    currency: str


class CheckoutReceiptResponse(BaseModel):
    order_id: str
    order_number: str
    total: float
    remaining_balance: float


class OrderLineResponse(BaseModel):
    item_type: str
    item_id: str
    title: str | None = None
    unit_price: float
    quantity: int


class OrderResponse(BaseModel):
    order_id: str
    order_number: str
    status: str
    payment_method: str
    total: float
    currency: str
    placed_at: datetime | None = None
    paid_at: datetime | None = None
    lines: list[OrderLineResponse]


class ReleaseSummary(BaseModel):
    id: str
    title: str
    image_url: str | None = None


class DownloadResponse(BaseModel):
    name: str
    blob_url: str
