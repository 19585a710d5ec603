"""Type aliases and the transportable error payload.

``ErrorPayload`` is the boundary form of a ``ResultError``: a frozen pydantic
model carrying ``{name, code, status, message, cause}`` with the cause already
flattened to its inspected string, so it always serializes.
"""

from __future__ import annotations

from typing import Annotated, Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

JsonDict: TypeAlias = dict[str, Any]


class ErrorPayload(BaseModel):
    """Serializable snapshot of a structured error."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "title": "Error Payload",
            "description": "Structured error as it travels to a boundary",
            "examples": [{
                "name": "NotFoundError",
                "code": "NOT_FOUND",
                "status": 404,
                "message": "user 42 does not exist",
            }],
        },
    )

    name: Annotated[str, Field(min_length=1, description="Error class name")] = "ResultError"
    code: Annotated[str, Field(min_length=1, description="Stable machine-readable code")]
    status: int = Field(description="HTTP-style status code")
    message: Annotated[str, Field(min_length=1, description="Human-readable message")]
    cause: str | None = Field(default=None, description="Inspected representation of the cause")
