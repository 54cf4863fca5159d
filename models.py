"""Pydantic models for queue API request and response."""

from typing import Any, List, Literal

from pydantic import BaseModel, Field, StrictInt

from pqueue import Item

OrderName = Literal["asc", "desc"]


class InsertRequest(BaseModel):
    """Incoming payload for POST /queue/items."""

    data: Any = Field(description="Opaque payload, stored and returned as-is")
    priority: StrictInt


class DataResponse(BaseModel):
    """Payload of the front item (POST /queue/pop, GET /queue/peek)."""

    data: Any


class ItemResponse(BaseModel):
    """A queued item with its priority."""

    data: Any
    priority: int

    @classmethod
    def from_item(cls, item: Item) -> "ItemResponse":
        return cls(data=item.data, priority=item.priority)


class QueueLengthResponse(BaseModel):
    length: int


class QueueResponse(BaseModel):
    """Full queue listing, front to back."""

    order: OrderName
    length: int
    items: List[ItemResponse]
    text: str  # same rendering as PQueue.format()
