from uuid import UUID

from pydantic import BaseModel, ConfigDict


class DefaultRequest(BaseModel):
    """Schema for the example request payload. Any JSON object is accepted."""

    model_config = ConfigDict(extra="allow")


class DefaultResponse(BaseModel):
    """Schema for the example response payload."""

    model_config = ConfigDict(frozen=True)

    status: str
    uuid: UUID
