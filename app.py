"""PQueue REST API: insert, pop and peek on a single in-memory priority queue."""

import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException

from config import get_default_order
from models import (
    DataResponse,
    InsertRequest,
    ItemResponse,
    QueueLengthResponse,
    QueueResponse,
)
from pqueue import EmptyQueueError, PQueue

logger = logging.getLogger(__name__)

app = FastAPI(title="PQueue", version="1.0.0")

# Endpoints and get_queue are async so queue operations run on the event loop thread only.
_queue: Optional[PQueue] = None


async def get_queue() -> PQueue:
    """Return the served queue, building it with PQUEUE_ORDER on first use."""
    global _queue
    if _queue is None:
        _queue = PQueue(get_default_order())
        logger.info("Created queue with order=%s", _queue.order.value)
    return _queue


@app.post("/queue/items", response_model=QueueLengthResponse, status_code=201)
async def insert_item(payload: InsertRequest, queue: PQueue = Depends(get_queue)) -> QueueLengthResponse:
    """Insert data at the position its priority dictates."""
    queue.insert(payload.data, payload.priority)
    logger.info("Inserted item with priority %d, queue length %d", payload.priority, queue.length())
    return QueueLengthResponse(length=queue.length())


@app.post("/queue/pop", response_model=DataResponse)
async def pop(queue: PQueue = Depends(get_queue)) -> DataResponse:
    """Remove the front item and return its data. 404 if the queue is empty."""
    try:
        data = queue.pop()
    except EmptyQueueError:
        logger.info("Pop on empty queue")
        raise HTTPException(status_code=404, detail="Queue is empty")
    return DataResponse(data=data)


@app.get("/queue/peek", response_model=DataResponse)
async def peek(queue: PQueue = Depends(get_queue)) -> DataResponse:
    """Return the front item's data without removing it. 404 if the queue is empty."""
    try:
        data = queue.peek()
    except EmptyQueueError:
        logger.info("Peek on empty queue")
        raise HTTPException(status_code=404, detail="Queue is empty")
    return DataResponse(data=data)


@app.post("/queue/pop-item", response_model=Optional[ItemResponse])
async def pop_item(queue: PQueue = Depends(get_queue)) -> Optional[ItemResponse]:
    """Remove and return the front item with its priority; null if the queue is empty."""
    item = queue.pop_item()
    if item is None:
        return None
    return ItemResponse.from_item(item)


@app.get("/queue/head", response_model=Optional[ItemResponse])
async def head(queue: PQueue = Depends(get_queue)) -> Optional[ItemResponse]:
    """Return the front item with its priority; null if the queue is empty."""
    item = queue.peek_item()
    if item is None:
        return None
    return ItemResponse.from_item(item)


@app.get("/queue/length", response_model=QueueLengthResponse)
async def length(queue: PQueue = Depends(get_queue)) -> QueueLengthResponse:
    return QueueLengthResponse(length=queue.length())


@app.get("/queue", response_model=QueueResponse)
async def list_queue(queue: PQueue = Depends(get_queue)) -> QueueResponse:
    """Return all queued items front to back, without removing any."""
    return QueueResponse(
        order=queue.order.value,
        length=queue.length(),
        items=[ItemResponse.from_item(item) for item in queue.items()],
        text=queue.format(),
    )


@app.get("/health")
def health() -> dict:
    """Health check."""
    return {"status": "ok"}
