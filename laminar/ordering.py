"""Arranging items in order on multiple streams.

Every item is delivered, in index order. Items that arrive ahead of the
expected index are held until the gap before them is filled.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional, TypeVar

from .arranging import Arranging, ArrangingSystem, is_within_half_window

T = TypeVar("T")

_U16_MASK = 0xFFFF


class OrderingStream(Arranging[T]):
    """A stream on which items are delivered in order.

    An item whose index equals the expected index is returned at once.
    An item ahead of it (within half the 16-bit window) is stored. Any
    other item is treated as a duplicate and dropped.
    """

    def __init__(self, stream_id: int) -> None:
        self._stream_id = stream_id
        self._storage: dict[int, T] = {}
        self._expected_index = 0
        self._unique_item_identifier = 0

    def stream_id(self) -> int:
        """Return the identifier of this stream."""
        return self._stream_id

    def expected_index(self) -> int:
        """Return the index of the next item to be delivered."""
        return self._expected_index

    def new_item_identifier(self) -> int:
        """Return a fresh identifier for an outgoing item on this stream."""
        identifier = self._unique_item_identifier
        self._unique_item_identifier = (identifier + 1) & _U16_MASK
        return identifier

    def arrange(self, incoming_index: int, item: T) -> Optional[T]:
        """Return ``item`` if it is the expected one; otherwise store or drop it."""
        if incoming_index == self._expected_index:
            self._expected_index = (self._expected_index + 1) & _U16_MASK
            return item
        if is_within_half_window(self._expected_index, incoming_index):
            self._storage[incoming_index] = item
        return None

    def drain(self) -> Iterator[T]:
        """Yield stored items for as long as the expected index is present.

        Each yielded item advances the expected index.
        """
        while self._expected_index in self._storage:
            item = self._storage.pop(self._expected_index)
            self._expected_index = (self._expected_index + 1) & _U16_MASK
            yield item


class OrderingSystem(ArrangingSystem[OrderingStream[T]]):
    """Ordering streams keyed by stream id."""

    def __init__(self) -> None:
        self._streams: dict[int, OrderingStream[T]] = {}

    def stream_count(self) -> int:
        """Return the number of ordering streams created so far."""
        return len(self._streams)

    def get_or_create_stream(self, stream_id: int) -> OrderingStream[T]:
        """Return the ordering stream with ``stream_id``, creating it when missing."""
        stream = self._streams.get(stream_id)
        if stream is None:
            stream = self._streams[stream_id] = OrderingStream(stream_id)
        return stream