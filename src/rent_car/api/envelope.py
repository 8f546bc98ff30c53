"""
rent_car.api.envelope

Uniform response envelope.

Responsibilities:
- Wrap every boundary result as `{"description", "statusCode", "data"}`.
- Log the same triplet that is sent, at a level matching the status class.
"""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from rent_car.observability.logging import get_logger

log = get_logger(__name__)


class ResponseEnvelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    description: str
    status_code: int = Field(alias="statusCode")
    data: Any = None


def respond(description: str, status_code: int, data: Any = None) -> JSONResponse:
    envelope = ResponseEnvelope(
        description=description,
        status_code=status_code,
        data=jsonable_encoder(data),
    )
    content = envelope.model_dump(by_alias=True)

    if status_code >= 500:
        emit = log.error
    elif status_code >= 400:
        emit = log.warning
    else:
        emit = log.info
    emit("response", description=description, status_code=status_code, data=content["data"])

    # The envelope's statusCode and the HTTP status are always the same value.
    return JSONResponse(status_code=status_code, content=content)


# --- Module Notes -----------------------------------------------------------
# Handlers call `respond` exactly once per request, on either the success or the error path.
