"""
Pydantic schemas for request binding and response rendering.

Request schemas declare field constraints; failures are collected by
pydantic and rendered by the centralized validation error handler.
Money fields are bound from text through the MoneyTextCodec passed in
the validation context under ``"codec"``.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainValidator,
    ValidationInfo,
    WithJsonSchema,
)
from pydantic_core import PydanticCustomError

from waiter.application.validation_errors import TYPE_MISMATCH
from waiter.domain.exceptions import MalformedAmount
from waiter.domain.model.order import OrderState
from waiter.domain.model.value_objects import Money
from waiter.domain.service.money_text_codec import MoneyTextCodec

MONEY_EXAMPLES = ["TWD 125.00", "125.00"]


def _money_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError(
            TYPE_MISMATCH,
            "Failed to convert '{value}' to {target_type}",
            {"value": value, "target_type": "Money"},
        )
    # JSON numbers are written out in plain notation so 1e21 stays parseable.
    return format(Decimal(str(value)), "f")


def _bind_money(value: Any, info: ValidationInfo) -> Money:
    if isinstance(value, Money):
        return value
    if value is None:
        raise PydanticCustomError("NotNull", "must not be null")
    codec: MoneyTextCodec = info.context["codec"]
    try:
        return codec.parse(_money_text(value))
    except MalformedAmount as exc:
        raise PydanticCustomError(
            TYPE_MISMATCH,
            "Failed to convert '{value}' to {target_type}",
            {"value": exc.text, "target_type": "Money"},
        ) from exc


MoneyField = Annotated[
    Money,
    PlainValidator(_bind_money),
    WithJsonSchema({"type": "string", "examples": MONEY_EXAMPLES}),
]


# --- Requests -----------------------------------------------------------------


class NewCoffeeRequest(BaseModel):
    """Request body for adding a coffee (JSON, form or multipart fields).

    Attributes:
        name: Coffee name, must not be empty.
        price: "125.00" (default currency) or "TWD 125.00".
    """

    name: str = Field(..., min_length=1)
    price: MoneyField


class NewOrderRequest(BaseModel):
    """Request body for placing an order.

    Attributes:
        customer: Customer name, must not be empty.
        items: Coffee names; repeat a name to order it more than once.
    """

    customer: str = Field(..., min_length=1)
    items: list[str] = Field(..., min_length=1)


class OrderStateRequest(BaseModel):
    """Request body for moving an order to a new state."""

    state: OrderState


# --- Responses ----------------------------------------------------------------


class CoffeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: str
    created_at: datetime
    updated_at: datetime


class OrderLineItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    coffee_name: str
    quantity: int
    unit_price: str
    line_total: str


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    customer: str
    state: str
    items: list[OrderLineItemResponse]
    total: str
    created_at: datetime
    updated_at: datetime


# --- Errors (documentation only; handlers build the bodies) -------------------


class FieldErrorSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    object_name: str = Field(alias="objectName")
    field: str
    rejected_value: Any = Field(default=None, alias="rejectedValue")
    codes: list[str]
    default_message: str = Field(alias="defaultMessage")
    binding_failure: bool = Field(alias="bindingFailure")
    code: str


class ValidationErrorResponse(BaseModel):
    """Body returned with 400 when request binding fails."""

    timestamp: datetime
    status: int
    error: str
    message: str
    errors: list[FieldErrorSchema]
    path: str


class ErrorResponse(BaseModel):
    """Body returned for domain errors (404, rule violations)."""

    error: str
    detail: str | None = None
