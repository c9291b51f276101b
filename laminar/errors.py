"""Errors raised while processing packets."""

from __future__ import annotations

from enum import Enum
from typing import Any


class _DescribedKind(Enum):
    """Enum whose members carry a human readable description."""

    def __str__(self) -> str:
        return self.value


class DecodingErrorKind(_DescribedKind):
    """Reasons a packet header could not be decoded."""

    PACKET_TYPE = "The packet type could not be read."
    ORDERING_GUARANTEE = "The ordering guarantee could not be read."
    DELIVERY_GUARANTEE = "The delivery guarantee could not be read."


class PacketErrorKind(_DescribedKind):
    """Reasons a packet was rejected."""

    EXCEEDED_MAX_PACKET_SIZE = "The packet size was bigger than the max allowed size."
    PACKET_CANNOT_BE_FRAGMENTED = "The packet type cannot be fragmented."


class FragmentErrorKind(_DescribedKind):
    """Reasons a fragment could not be built or reassembled."""

    PACKET_HEADER_NOT_FOUND = "Packet header was attached to fragment."
    EXCEEDED_MAX_FRAGMENTS = (
        "The total numbers of fragments are bigger than the allowed fragments."
    )
    ALREADY_PROCESSED_FRAGMENT = "The fragment received was already processed."
    FRAGMENT_WITH_UNEVEN_NUMBER_OF_FRAGMENTS = (
        "The fragment header does not contain the right fragment count."
    )
    COULD_NOT_FIND_FRAGMENT_BY_ID = (
        "The fragment supposed to be in a the cache but it was not found."
    )
    MULTIPLE_ACK_HEADERS = (
        "The fragment contains an ack header but a previous ack header "
        "has already been registered."
    )
    MISSING_ACK_HEADER = "No ack headers were registered with any of the fragments."


class LaminarError(Exception):
    """Base class of every error the package raises."""


class DecodingError(LaminarError):
    """A packet header could not be parsed."""

    def __init__(self, kind: DecodingErrorKind) -> None:
        self.kind = kind
        super().__init__(
            f"Something went wrong with parsing the header. Reason: {kind.name}."
        )


class FragmentError(LaminarError):
    """A fragment could not be received or parsed."""

    def __init__(self, kind: FragmentErrorKind) -> None:
        self.kind = kind
        super().__init__(
            "Something went wrong with receiving/parsing fragments. "
            f"Reason: {kind.name}."
        )


class PacketError(LaminarError):
    """A packet could not be received or parsed."""

    def __init__(self, kind: PacketErrorKind) -> None:
        self.kind = kind
        super().__init__(
            "Something went wrong with receiving/parsing packets. "
            f"Reason: {kind.name}."
        )


class ReceivedDataTooShortError(LaminarError):
    """Received data had no length."""

    def __init__(self) -> None:
        super().__init__("The received data did not have any length.")


class ProtocolVersionMismatchError(LaminarError):
    """The peer speaks a different protocol version."""

    def __init__(self) -> None:
        super().__init__("The protocol versions do not match.")


class SendError(LaminarError):
    """An event could not be delivered because the channel was closed."""

    def __init__(self, event: Any) -> None:
        self.event = event
        super().__init__(
            "Could not sent on channel because it was closed. "
            f"Reason: {event!r}"
        )


class CouldNotReadHeaderError(LaminarError):
    """An expected header could not be read from the buffer."""

    def __init__(self, header: str) -> None:
        self.header = header
        super().__init__(
            f"Expected {header} header but could not be read from buffer."
        )