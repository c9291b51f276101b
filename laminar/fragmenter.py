"""Splitting payloads into fragments and reassembling them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .config import Config
from .errors import FragmentError, FragmentErrorKind


def fragments_needed(payload_length: int, fragment_size: int) -> int:
    """Return how many fragments of ``fragment_size`` hold ``payload_length`` bytes."""
    return -(-payload_length // fragment_size)


def split_into_fragments(payload: bytes, config: Config) -> list[bytes]:
    """Split ``payload`` into consecutive chunks of at most ``config.fragment_size``.

    Raises FragmentError when more than ``config.max_fragments`` are needed.
    """
    size = config.fragment_size
    count = fragments_needed(len(payload), size)
    if count > config.max_fragments:
        raise FragmentError(FragmentErrorKind.EXCEEDED_MAX_FRAGMENTS)
    return [bytes(payload[start:start + size]) for start in range(0, count * size, size)]


@dataclass
class _ReassemblyData:
    sequence: int
    num_fragments_total: int
    num_fragments_received: int = 0
    fragments_received: list[bool] = field(default_factory=list)
    buffer: bytearray = field(default_factory=bytearray)
    acked_header: Any = None

    def __post_init__(self) -> None:
        if not self.fragments_received:
            self.fragments_received = [False] * self.num_fragments_total


class Fragmentation:
    """Collects fragments until a packet is complete."""

    def __init__(self, config: Config) -> None:
        self._config = config
        self._capacity = config.fragment_reassembly_buffer_size
        self._slots: dict[int, _ReassemblyData] = {}

    def _get(self, sequence: int) -> _ReassemblyData | None:
        entry = self._slots.get(sequence % self._capacity)
        if entry is not None and entry.sequence == sequence:
            return entry
        return None

    def _remove(self, sequence: int) -> _ReassemblyData | None:
        entry = self._get(sequence)
        if entry is not None:
            del self._slots[sequence % self._capacity]
        return entry

    def handle_fragment(
        self,
        sequence: int,
        fragment_id: int,
        fragment_count: int,
        payload: bytes,
        acked_header: Any = None,
    ) -> tuple[bytes, Any] | None:
        """Add one fragment; return ``(payload, acked_header)`` once all have arrived.

        Fragment payloads are joined in the order they are handed in.
        Exactly one fragment of a packet must carry the acked header.
        """
        if self._get(sequence) is None:
            self._slots[sequence % self._capacity] = _ReassemblyData(
                sequence, fragment_count
            )

        data = self._get(sequence)
        if data is None:
            raise FragmentError(FragmentErrorKind.COULD_NOT_FIND_FRAGMENT_BY_ID)
        if data.num_fragments_total != fragment_count:
            raise FragmentError(FragmentErrorKind.FRAGMENT_WITH_UNEVEN_NUMBER_OF_FRAGMENTS)
        if not 0 <= fragment_id < len(data.fragments_received):
            raise FragmentError(FragmentErrorKind.EXCEEDED_MAX_FRAGMENTS)
        if data.fragments_received[fragment_id]:
            raise FragmentError(FragmentErrorKind.ALREADY_PROCESSED_FRAGMENT)

        data.num_fragments_received += 1
        data.fragments_received[fragment_id] = True
        data.buffer.extend(payload)

        if acked_header is not None:
            if data.acked_header is not None:
                raise FragmentError(FragmentErrorKind.MULTIPLE_ACK_HEADERS)
            data.acked_header = acked_header

        if data.num_fragments_received != data.num_fragments_total:
            return None

        finished = self._remove(data.sequence)
        if finished is None:
            raise FragmentError(FragmentErrorKind.COULD_NOT_FIND_FRAGMENT_BY_ID)
        if finished.acked_header is None:
            raise FragmentError(FragmentErrorKind.MISSING_ACK_HEADER)
        return bytes(finished.buffer), finished.acked_header