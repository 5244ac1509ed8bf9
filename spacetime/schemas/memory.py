from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Any
from datetime import datetime
from uuid import UUID

FALSY_STRINGS = {"", "false", "0"}


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MemoryBody(CamelModel):
    """Payload accepted by create and update. Ownership fields are never read from it."""

    content: str
    cover_url: str
    is_public: bool = False

    @field_validator("is_public", mode="before")
    @classmethod
    def coerce_is_public(cls, value: Any) -> bool:
        """Any truthy value marks the memory public; null, 0, "", "false" and "0" do not."""
        if isinstance(value, str):
            return value.strip().lower() not in FALSY_STRINGS
        return bool(value)


class MemoryOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: UUID
    content: str
    cover_url: str
    is_public: bool
    user_id: str
    created_at: datetime


class MemorySummary(CamelModel):
    id: UUID
    cover_url: str
    content: str


class MessageOut(BaseModel):
    message: str
