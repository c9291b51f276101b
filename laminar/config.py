"""Configuration options for the protocol."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MTU = 1450
FRAGMENT_SIZE_DEFAULT = 1450
MAX_FRAGMENTS_DEFAULT = 16


@dataclass
class Config:
    """Options that tune the transport for particular use cases.

    Durations are given in seconds.
    """

    blocking_mode: bool = False
    """Make the underlying UDP socket block when true."""

    idle_connection_timeout: float = 5.0
    """Time without hearing from a peer before it is considered disconnected."""

    heartbeat_interval: float | None = None
    """Interval at which heartbeats are sent when idle; ``None`` disables them."""

    max_packet_size: int = MAX_FRAGMENTS_DEFAULT * FRAGMENT_SIZE_DEFAULT
    """Largest packet in bytes, all fragments included."""

    max_fragments: int = MAX_FRAGMENTS_DEFAULT
    """Largest number of fragments a packet may be split into (at most 255)."""

    fragment_size: int = FRAGMENT_SIZE_DEFAULT
    """Largest size of a single fragment in bytes."""

    fragment_reassembly_buffer_size: int = 64
    """Number of packets whose fragments can be reassembled at once."""

    receive_buffer_max_size: int = DEFAULT_MTU
    """Size of the buffer UDP data is read into."""

    rtt_smoothing_factor: float = 0.10
    """Ratio used to smooth out network jitter, from 0 to 1."""

    rtt_max_value: int = 250
    """Largest acceptable round-trip time in milliseconds."""

    socket_event_buffer_size: int = 1024
    """Size of the buffer socket events are received into."""

    socket_polling_timeout: float | None = 0.001
    """How long to block when polling for socket events."""

    max_packets_in_flight: int = 512
    """Unacknowledged reliable packets allowed before the connection is dropped."""