"""
FastAPI router for customer orders.

All routes delegate to use-case handlers. Request bodies are validated
by pydantic schemas; errors are mapped by the centralized handlers.
"""

from fastapi import APIRouter, Depends

from waiter.application.create_order import CreateOrderHandler
from waiter.application.show_order import ShowOrderHandler
from waiter.application.update_order_state import UpdateOrderStateHandler
from waiter.infrastructure.web.dependencies import (
    get_create_order_handler,
    get_show_order_handler,
    get_update_order_state_handler,
)
from waiter.infrastructure.web.error_handlers import OBJECT_NAME_KEY
from waiter.infrastructure.web.schemas import (
    ErrorResponse,
    NewOrderRequest,
    OrderResponse,
    OrderStateRequest,
    ValidationErrorResponse,
)

router = APIRouter(prefix="/order", tags=["order"])


@router.post(
    "/",
    status_code=201,
    response_model=OrderResponse,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Place an order",
    openapi_extra={OBJECT_NAME_KEY: "newOrderRequest"},
)
def create_order(
    new_order: NewOrderRequest,
    handler: CreateOrderHandler = Depends(get_create_order_handler),
) -> OrderResponse:
    """Create an order for the named coffees at their current prices."""
    dto = handler.handle(customer=new_order.customer, coffee_names=new_order.items)
    return OrderResponse.model_validate(dto)


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    responses={400: {"model": ValidationErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get an order by ID",
)
def get_order(
    order_id: int,
    handler: ShowOrderHandler = Depends(get_show_order_handler),
) -> OrderResponse:
    return OrderResponse.model_validate(handler.handle(order_id))


@router.put(
    "/{order_id}",
    response_model=OrderResponse,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Move an order to a new state",
    openapi_extra={OBJECT_NAME_KEY: "orderStateRequest"},
)
def update_order_state(
    order_id: int,
    state_request: OrderStateRequest,
    handler: UpdateOrderStateHandler = Depends(get_update_order_state_handler),
) -> OrderResponse:
    """Advance the order; moving backwards or out of a final state is rejected."""
    dto = handler.handle(order_id=order_id, new_state=state_request.state)
    return OrderResponse.model_validate(dto)
