"""
rent_car.api.routers.orders

Order endpoints.

Responsibilities:
- Decode bodies/paths/queries into order request types.
- Delegate to `OrderService` and answer with the uniform envelope.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from starlette.status import HTTP_200_OK

from rent_car.api.deps import order_id_path, order_service_dep, pagination_dep
from rent_car.api.envelope import respond
from rent_car.domain.orders import CreateOrder, GetAllOrdersRequest, UpdateOrder
from rent_car.errors import ServiceError
from rent_car.pagination import Page
from rent_car.services.order_service import OrderService

router = APIRouter(tags=["order"])


@router.post("/order")
async def create_order(
    body: CreateOrder,
    service: OrderService = Depends(order_service_dep),
) -> JSONResponse:
    try:
        order_id = await service.create(body)
    except ServiceError as e:
        return respond("error while creating order", e.status_code, str(e))
    return respond("ok", HTTP_200_OK, order_id)


@router.put("/order/{id}")
async def update_order(
    body: CreateOrder,
    order_id: uuid.UUID = Depends(order_id_path),
    service: OrderService = Depends(order_service_dep),
) -> JSONResponse:
    # Any `id` in the body is ignored; the path is authoritative.
    order = UpdateOrder(id=order_id, **body.model_dump())
    try:
        updated_id = await service.update(order)
    except ServiceError as e:
        return respond("error while updating order", e.status_code, str(e))
    return respond("ok", HTTP_200_OK, updated_id)


@router.get("/orders")
async def list_orders(
    search: str = Query(default=""),
    page: Page = Depends(pagination_dep),
    service: OrderService = Depends(order_service_dep),
) -> JSONResponse:
    request = GetAllOrdersRequest(search=search, page=page.page, limit=page.limit)
    try:
        orders = await service.get_all(request)
    except ServiceError as e:
        return respond("error while getting orders", e.status_code, str(e))
    return respond("ok", HTTP_200_OK, orders)


@router.get("/order/{id}")
async def get_order(
    order_id: uuid.UUID = Depends(order_id_path),
    service: OrderService = Depends(order_service_dep),
) -> JSONResponse:
    try:
        order = await service.get_by_id(order_id)
    except ServiceError as e:
        return respond("error while getting order by id", e.status_code, str(e))
    return respond("ok", HTTP_200_OK, order)


@router.delete("/order/{id}")
async def delete_order(
    order_id: uuid.UUID = Depends(order_id_path),
    service: OrderService = Depends(order_service_dep),
) -> JSONResponse:
    try:
        await service.delete(order_id)
    except ServiceError as e:
        return respond("error while deleting order", e.status_code, str(e))
    return respond("ok", HTTP_200_OK, order_id)


# --- Module Notes -----------------------------------------------------------
# Malformed bodies, ids and pagination never reach these function bodies; they are
# turned into 400 envelopes by the exception handlers registered in `api.app`.
