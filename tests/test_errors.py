from laminar.errors import (
    CouldNotReadHeaderError,
    DecodingError,
    DecodingErrorKind,
    FragmentError,
    FragmentErrorKind,
    LaminarError,
    PacketError,
    PacketErrorKind,
    ProtocolVersionMismatchError,
    ReceivedDataTooShortError,
    SendError,
)


def test_header_error_is_a_laminar_error():
    error = CouldNotReadHeaderError("")
    assert error.header == ""
    assert str(error) == "Expected  header but could not be read from buffer."
    assert isinstance(error, LaminarError)


def test_header_name_in_message():
    error = CouldNotReadHeaderError("acked")
    assert str(error) == "Expected acked header but could not be read from buffer."


def test_fragment_error_carries_kind():
    error = FragmentError(FragmentErrorKind.EXCEEDED_MAX_FRAGMENTS)
    assert error.kind is FragmentErrorKind.EXCEEDED_MAX_FRAGMENTS
    assert "EXCEEDED_MAX_FRAGMENTS" in str(error)
    assert str(error).startswith("Something went wrong with receiving/parsing fragments.")


def test_packet_error_carries_kind():
    error = PacketError(PacketErrorKind.EXCEEDED_MAX_PACKET_SIZE)
    assert error.kind is PacketErrorKind.EXCEEDED_MAX_PACKET_SIZE
    assert str(error).startswith("Something went wrong with receiving/parsing packets.")


def test_decoding_error_carries_kind():
    error = DecodingError(DecodingErrorKind.PACKET_TYPE)
    assert error.kind is DecodingErrorKind.PACKET_TYPE
    assert str(error).startswith("Something went wrong with parsing the header.")


def test_kind_descriptions():
    decoding = DecodingError(DecodingErrorKind.PACKET_TYPE)
    packet = PacketError(PacketErrorKind.PACKET_CANNOT_BE_FRAGMENTED)
    fragment = FragmentError(FragmentErrorKind.ALREADY_PROCESSED_FRAGMENT)
    assert str(decoding.kind) == "The packet type could not be read."
    assert str(packet.kind) == "The packet type cannot be fragmented."
    assert str(fragment.kind) == "The fragment received was already processed."


def test_simple_errors_messages():
    assert str(ReceivedDataTooShortError()) == "The received data did not have any length."
    assert str(ProtocolVersionMismatchError()) == "The protocol versions do not match."


def test_send_error_keeps_event():
    error = SendError("event")
    assert error.event == "event"
    assert isinstance(error, LaminarError)