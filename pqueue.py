"""Priority queue on a singly linked list, kept sorted by insertion."""

import logging
import operator
from enum import Enum
from typing import Generic, Iterator, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")

FORMAT_DELIMITER = ": "


class Order(str, Enum):
    """Which end of the priority range sits at the front of the queue."""

    ASC = "asc"
    DESC = "desc"


class EmptyQueueError(IndexError):
    """Raised when pop() or peek() is called on an empty queue."""


class Item(Generic[T]):
    """A queued value, its priority and the link to the item behind it."""

    __slots__ = ("_data", "_priority", "next")

    def __init__(self, data: T, priority: int) -> None:
        self._data = data
        self._priority = priority
        self.next: Optional["Item[T]"] = None

    @property
    def data(self) -> T:
        return self._data

    @property
    def priority(self) -> int:
        return self._priority

    def __str__(self) -> str:
        return f"{self._data} ({self._priority})"

    def __repr__(self) -> str:
        return f"Item(data={self._data!r}, priority={self._priority!r})"


class PQueue(Generic[T]):
    """
    Priority queue ordered by integer priority.

    Every insert walks the chain from the head and splices the new item in
    front of the first item it displaces, so the chain is always sorted and
    pop/peek only touch the head. Items with equal priority leave in the order
    they were inserted. Worst-case insert is O(n); the queue is meant for
    small collections.

    Not thread-safe: confine an instance to one thread or guard it with a lock.
    """

    DEFAULT_ORDER = Order.DESC

    def __init__(self, order: Union[Order, str, None] = None) -> None:
        self._order = Order(order) if order is not None else Order(self.DEFAULT_ORDER)
        self._head: Optional[Item[T]] = None
        self._count = 0

    @property
    def order(self) -> Order:
        return self._order

    def _displaces(self, new: Item[T], existing: Item[T]) -> bool:
        # Strict comparison: equal priorities never displace, which keeps ties FIFO.
        if self._order is Order.DESC:
            return new.priority > existing.priority
        return new.priority < existing.priority

    def insert(self, data: T, priority: int) -> None:
        """Add data at the position its priority dictates."""
        priority = operator.index(priority)
        new_item: Item[T] = Item(data, priority)

        if self._head is None:
            self._head = new_item
        elif self._displaces(new_item, self._head):
            new_item.next = self._head
            self._head = new_item
        else:
            cursor = self._head
            while cursor.next is not None and not self._displaces(new_item, cursor.next):
                cursor = cursor.next
            new_item.next = cursor.next
            cursor.next = new_item

        self._count += 1
        logger.debug("Inserted %r, queue length %d", new_item, self._count)

    def pop(self) -> T:
        """Remove the front item and return its data."""
        if self._head is None:
            raise EmptyQueueError("pop from an empty priority queue")
        return self._unlink_head().data

    def peek(self) -> T:
        """Return the front item's data without removing it."""
        if self._head is None:
            raise EmptyQueueError("peek from an empty priority queue")
        return self._head.data

    def pop_item(self) -> Optional[Item[T]]:
        """Remove and return the front item, or None if the queue is empty."""
        if self._head is None:
            return None
        return self._unlink_head()

    def peek_item(self) -> Optional[Item[T]]:
        """Return the front item without removing it, or None if the queue is empty."""
        return self._head

    def _unlink_head(self) -> Item[T]:
        item = self._head
        self._head = item.next
        item.next = None
        self._count -= 1
        logger.debug("Popped %r, queue length %d", item, self._count)
        return item

    def length(self) -> int:
        return self._count

    def items(self) -> Iterator[Item[T]]:
        """Yield the queued items front to back."""
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def format(self) -> str:
        """Render every item front to back, e.g. ``b (5): c (3): a (1)``."""
        return FORMAT_DELIMITER.join(str(item) for item in self.items())

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"PQueue(order={self._order.value!r}, length={self._count})"
