"""Arranging items over independent streams.

Items can be arranged by ordering (every item is delivered, in index
order) or by sequencing (only items newer than the newest one seen are
delivered). Each stream is arranged on its own, so a gap on one stream
never holds back items on another.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
S = TypeVar("S")

_U16_MASK = 0xFFFF
_HALF_WINDOW = _U16_MASK // 2 + 1


def is_within_half_window(start: int, incoming: int) -> bool:
    """Return whether ``incoming`` lies within half the 16-bit range after ``start``.

    The distance is measured with wrap-around, so ``0`` follows ``65535``.
    """
    return ((incoming - start) & _U16_MASK) <= _HALF_WINDOW


class Arranging(ABC, Generic[T]):
    """Something that arranges items by a 16-bit index."""

    @abstractmethod
    def arrange(self, incoming_index: int, item: T) -> Optional[T]:
        """Arrange ``item`` at ``incoming_index``.

        Return the item when it can be delivered right away, otherwise ``None``.
        """


class ArrangingSystem(ABC, Generic[S]):
    """A collection of arranging streams keyed by stream id."""

    @abstractmethod
    def stream_count(self) -> int:
        """Return the number of streams created so far."""

    @abstractmethod
    def get_or_create_stream(self, stream_id: int) -> S:
        """Return the stream with ``stream_id``, creating it when missing."""