"""Arranging items in sequence on multiple streams.

Only the newest items are delivered: an item older than the newest one
seen so far is dropped. For example ``1, 3, 2, 5, 4`` yields ``1, 3, 5``.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from .arranging import Arranging, ArrangingSystem, is_within_half_window

T = TypeVar("T")

_U16_MASK = 0xFFFF


class SequencingStream(Arranging[T]):
    """A stream on which only items newer than the newest seen are delivered."""

    def __init__(self, stream_id: int) -> None:
        self._stream_id = stream_id
        self._top_index = 0
        self._unique_item_identifier = 0

    def stream_id(self) -> int:
        """Return the identifier of this stream."""
        return self._stream_id

    def new_item_identifier(self) -> int:
        """Return a fresh identifier for an outgoing item on this stream."""
        identifier = self._unique_item_identifier
        self._unique_item_identifier = (identifier + 1) & _U16_MASK
        return identifier

    def arrange(self, incoming_index: int, item: T) -> Optional[T]:
        """Return ``item`` if it is at least as new as the newest seen, else ``None``."""
        if is_within_half_window(self._top_index, incoming_index):
            self._top_index = incoming_index
            return item
        return None


class SequencingSystem(ArrangingSystem[SequencingStream[T]]):
    """Sequencing streams keyed by stream id."""

    def __init__(self) -> None:
        self._streams: dict[int, SequencingStream[T]] = {}

    def stream_count(self) -> int:
        """Return the number of sequencing streams created so far."""
        return len(self._streams)

    def get_or_create_stream(self, stream_id: int) -> SequencingStream[T]:
        """Return the sequencing stream with ``stream_id``, creating it when missing."""
        stream = self._streams.get(stream_id)
        if stream is None:
            stream = self._streams[stream_id] = SequencingStream(stream_id)
        return stream