"""Acknowledgment of packets sent and received."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

_U16_MASK = 0xFFFF
_HALF_RANGE = 32768

REDUNDANT_PACKET_ACKS_SIZE = 32


def _sequence_greater_than(s1: int, s2: int) -> bool:
    return (s1 > s2 and s1 - s2 <= _HALF_RANGE) or (s1 < s2 and s2 - s1 > _HALF_RANGE)


def _sequence_less_than(s1: int, s2: int) -> bool:
    return _sequence_greater_than(s2, s1)


class _ReceivedWindow:
    """Remembers which of the most recent sequence numbers were received."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._next = 0
        self._slots: dict[int, int] = {}

    def sequence_num(self) -> int:
        return self._next

    def exists(self, sequence: int) -> bool:
        return self._slots.get(sequence % self._capacity) == sequence

    def insert(self, sequence: int) -> None:
        oldest = (self._next - self._capacity) & _U16_MASK
        if _sequence_less_than(sequence, oldest):
            return
        following = (sequence + 1) & _U16_MASK
        if _sequence_greater_than(following, self._next):
            distance = (following - self._next) & _U16_MASK
            for offset in range(min(distance, self._capacity)):
                self._slots.pop(((self._next + offset) & _U16_MASK) % self._capacity, None)
            self._next = following
        self._slots[sequence % self._capacity] = sequence


@dataclass
class SentPacket:
    """A packet kept until the remote host acknowledges it."""

    packet_type: Any
    payload: bytes
    ordering_guarantee: Any
    item_identifier: Optional[int] = None


class AcknowledgmentHandler:
    """Tracks sent and received sequence numbers and detects dropped packets."""

    def __init__(self) -> None:
        self._sequence_number = 0
        self._remote_ack_sequence_num = _U16_MASK
        self._sent_packets: dict[int, SentPacket] = {}
        self._received_packets = _ReceivedWindow(REDUNDANT_PACKET_ACKS_SIZE + 1)

    def packets_in_flight(self) -> int:
        """Return the number of packets not yet acknowledged."""
        return len(self._sent_packets) & _U16_MASK

    def local_sequence_num(self) -> int:
        """Return the sequence number of the next packet to send."""
        return self._sequence_number

    def remote_sequence_num(self) -> int:
        """Return the most recent sequence number received from the remote host."""
        return (self._received_packets.sequence_num() - 1) & _U16_MASK

    def ack_bitfield(self) -> int:
        """Return a bitfield of which of the 32 packets before the latest were received."""
        latest = self.remote_sequence_num()
        bitfield = 0
        for bit in range(REDUNDANT_PACKET_ACKS_SIZE):
            if self._received_packets.exists((latest - bit - 1) & _U16_MASK):
                bitfield |= 1 << bit
        return bitfield

    def process_incoming(
        self, remote_seq_num: int, remote_ack_seq: int, remote_ack_field: int
    ) -> None:
        """Record a received packet and drop the sent packets it acknowledges."""
        if _sequence_greater_than(remote_ack_seq, self._remote_ack_sequence_num):
            self._remote_ack_sequence_num = remote_ack_seq

        self._received_packets.insert(remote_seq_num)
        self._sent_packets.pop(remote_ack_seq, None)

        for bit in range(REDUNDANT_PACKET_ACKS_SIZE):
            if remote_ack_field >> bit & 1:
                self._sent_packets.pop((remote_ack_seq - bit - 1) & _U16_MASK, None)

    def process_outgoing(
        self,
        packet_type: Any,
        payload: bytes,
        ordering_guarantee: Any,
        item_identifier: Optional[int],
    ) -> None:
        """Keep an outgoing packet until it is acknowledged."""
        self._sent_packets[self._sequence_number] = SentPacket(
            packet_type, bytes(payload), ordering_guarantee, item_identifier
        )
        self._sequence_number = (self._sequence_number + 1) & _U16_MASK

    def dropped_packets(self) -> list[SentPacket]:
        """Remove and return packets that are too old to still be acknowledged."""
        remote_ack = self._remote_ack_sequence_num
        dropped_sequences = [
            sequence
            for sequence in sorted(self._sent_packets)
            if _sequence_less_than(sequence, remote_ack)
            and ((remote_ack - sequence) & _U16_MASK) > REDUNDANT_PACKET_ACKS_SIZE
        ]
        return [self._sent_packets.pop(sequence) for sequence in dropped_sequences]