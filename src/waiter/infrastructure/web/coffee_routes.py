"""
FastAPI router for the coffee menu.

POST /coffee/ binds by Content-Type: a JSON body, url-encoded or
multipart form fields, or a multipart ``file`` part holding one
``name,price`` CSV row per coffee. Binding failures are raised as
RequestValidationError and rendered by the centralized handler.
"""

import csv
import logging
from typing import Any, Union

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from starlette.datastructures import UploadFile

from waiter.application.add_coffee import AddCoffeeHandler
from waiter.application.show_coffee import ShowCoffeeHandler
from waiter.application.validation_errors import TYPE_MISMATCH
from waiter.domain.exceptions import MalformedAmount
from waiter.domain.model.value_objects import Money
from waiter.domain.service.money_text_codec import MoneyTextCodec
from waiter.infrastructure.web.dependencies import (
    get_add_coffee_handler,
    get_money_codec,
    get_show_coffee_handler,
)
from waiter.infrastructure.web.error_handlers import OBJECT_NAME_KEY
from waiter.infrastructure.web.schemas import (
    CoffeeResponse,
    ErrorResponse,
    NewCoffeeRequest,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/coffee", tags=["coffee"])

_FORM_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def bind_request(model: type[BaseModel], payload: Any, codec: MoneyTextCodec) -> Any:
    """Validate *payload* against *model*, reporting errors under ``body``."""
    try:
        return model.model_validate(payload, context={"codec": codec})
    except PydanticValidationError as exc:
        errors = [{**err, "loc": ("body", *err["loc"])} for err in exc.errors()]
        raise RequestValidationError(errors) from exc


def _line_mismatch(index: int, line: str, target_type: str) -> dict[str, Any]:
    return {
        "type": TYPE_MISMATCH,
        "loc": ("body", "file", index),
        "msg": f"Failed to convert {line!r} to {target_type}",
        "input": line,
        "ctx": {"target_type": target_type},
    }


def read_batch(text: str, codec: MoneyTextCodec) -> list[tuple[str, Money]]:
    """Parse one ``name,price`` CSV row per line; every bad line is reported.

    Blank lines are skipped. A name holding a comma must be quoted.
    """
    entries: list[tuple[str, Money]] = []
    errors: list[dict[str, Any]] = []

    for index, line in enumerate(text.splitlines()):
        if not line.strip():
            continue
        try:
            row = [field.strip() for field in next(csv.reader([line]))]
        except csv.Error:
            row = []
        if len(row) != 2 or not row[0]:
            errors.append(_line_mismatch(index, line, "Coffee"))
            continue
        name, price_text = row
        try:
            entries.append((name, codec.parse(price_text)))
        except MalformedAmount:
            errors.append(_line_mismatch(index, line, "Money"))

    if not entries and not errors:
        errors.append({
            "type": "too_short",
            "loc": ("body", "file"),
            "msg": "File contains no coffees",
            "input": text,
        })
    if errors:
        raise RequestValidationError(errors)
    return entries


async def read_upload(upload: UploadFile) -> str:
    """Decode an uploaded menu file as UTF-8."""
    try:
        return (await upload.read()).decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("Batch upload %r is not valid UTF-8", upload.filename)
        raise RequestValidationError([{
            "type": TYPE_MISMATCH,
            "loc": ("body", "file"),
            "msg": "Uploaded file is not valid UTF-8 text",
            "input": upload.filename,
            "ctx": {"target_type": "String"},
        }]) from None


@router.get(
    "/",
    response_model=Union[CoffeeResponse, list[CoffeeResponse]],
    responses={404: {"model": ErrorResponse}},
    summary="List coffees or look one up by name",
)
def list_coffees(
    name: str | None = None,
    handler: ShowCoffeeHandler = Depends(get_show_coffee_handler),
) -> Union[CoffeeResponse, list[CoffeeResponse]]:
    """Return the whole menu, or the single coffee called *name*."""
    if name is not None:
        return CoffeeResponse.model_validate(handler.by_name(name))
    return [CoffeeResponse.model_validate(dto) for dto in handler.list_all()]


@router.get(
    "/{coffee_id}",
    response_model=CoffeeResponse,
    responses={400: {"model": ValidationErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get a coffee by ID",
)
def get_by_id(
    coffee_id: int,
    handler: ShowCoffeeHandler = Depends(get_show_coffee_handler),
) -> CoffeeResponse:
    return CoffeeResponse.model_validate(handler.by_id(coffee_id))


@router.post(
    "/",
    status_code=201,
    response_model=Union[CoffeeResponse, list[CoffeeResponse]],
    responses={400: {"model": ValidationErrorResponse}},
    summary="Add a coffee, or a batch of coffees from an uploaded file",
    openapi_extra={OBJECT_NAME_KEY: "newCoffeeRequest"},
)
async def add_coffee(
    request: Request,
    handler: AddCoffeeHandler = Depends(get_add_coffee_handler),
    codec: MoneyTextCodec = Depends(get_money_codec),
) -> Union[CoffeeResponse, list[CoffeeResponse]]:
    """Add coffees from JSON, form fields or a multipart ``file`` upload."""
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        upload = form.get("file")
        if isinstance(upload, UploadFile):
            text = await read_upload(upload)
            logger.info("Batch upload %r received", upload.filename)
            dtos = handler.handle_batch(read_batch(text, codec))
            return [CoffeeResponse.model_validate(dto) for dto in dtos]
        payload: Any = dict(form.items())
    else:
        try:
            payload = await request.json()
        except ValueError:
            raise RequestValidationError([{
                "type": "json_invalid",
                "loc": ("body",),
                "msg": "JSON decode error",
                "input": None,
            }]) from None

    new_coffee = bind_request(NewCoffeeRequest, payload, codec)
    dto = handler.handle(name=new_coffee.name, price=new_coffee.price)
    return CoffeeResponse.model_validate(dto)
