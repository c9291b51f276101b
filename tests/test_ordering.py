from dataclasses import dataclass

import pytest

from laminar.ordering import OrderingStream, OrderingSystem


@dataclass(frozen=True)
class Packet:
    sequence: int
    ordering_stream: int


def test_create_stream():
    system = OrderingSystem()
    stream = system.get_or_create_stream(1)
    assert stream.expected_index() == 0
    assert stream.stream_id() == 1
    assert system.stream_count() == 1


def test_create_existing_stream():
    system = OrderingSystem()
    first = system.get_or_create_stream(1)
    stream = system.get_or_create_stream(1)
    assert stream.stream_id() == 1
    assert stream is first
    assert system.stream_count() == 1


def test_stream_count_grows_with_new_streams():
    system = OrderingSystem()
    for stream_id in (1, 2, 3, 2):
        system.get_or_create_stream(stream_id)
    assert system.stream_count() == 3


def test_packet_wraps_around_offset():
    system = OrderingSystem()
    stream = system.get_or_create_stream(1)
    for idx in range(0, 65501):
        assert stream.arrange(idx, idx) == idx
    assert stream.arrange(123, 123) is None
    for idx in range(65501, 65536):
        assert stream.arrange(idx, idx) == idx
    assert stream.arrange(0, 0) == 0
    for idx in range(1, 123):
        assert stream.arrange(idx, idx) == idx
    assert next(stream.drain(), None) == 123


def test_exactly_half_u16_packet_is_stored():
    system = OrderingSystem()
    stream = system.get_or_create_stream(1)
    for idx in range(0, 32767):
        assert stream.arrange(idx, idx) == idx
    assert stream.arrange(32768, 32768) is None
    assert stream.arrange(32767, 32767) == 32767
    assert next(stream.drain(), None) == 32768
    assert next(stream.drain(), None) is None


def test_can_iterate():
    system = OrderingSystem()
    system.get_or_create_stream(1)
    stream = system.get_or_create_stream(1)

    packets = [Packet(i, 1) for i in range(5)]

    assert stream.arrange(0, packets[0]) == packets[0]
    assert stream.arrange(3, packets[3]) is None
    assert stream.arrange(4, packets[4]) is None
    assert stream.arrange(2, packets[2]) is None

    assert next(stream.drain(), None) is None

    assert stream.arrange(1, packets[1]) == packets[1]

    assert list(stream.drain()) == [packets[2], packets[3], packets[4]]
    assert stream.expected_index() == 5


def test_duplicate_is_dropped():
    stream = OrderingStream(1)
    assert stream.arrange(0, "a") == "a"
    assert stream.arrange(0, "a") is None
    assert list(stream.drain()) == []
    assert stream.expected_index() == 1


def test_new_item_identifier_increments_and_wraps():
    stream = OrderingStream(4)
    assert [stream.new_item_identifier() for _ in range(3)] == [0, 1, 2]
    for _ in range(65533):
        stream.new_item_identifier()
    assert stream.new_item_identifier() == 0


def _order(before, stream_id):
    system = OrderingSystem()
    stream = system.get_or_create_stream(1)
    ordered = []
    for seq in before:
        packet = stream.arrange(seq, Packet(seq, stream_id))
        if packet is not None:
            ordered.append(packet.sequence)
            ordered.extend(p.sequence for p in stream.drain())
    return ordered


@pytest.mark.parametrize(
    "before",
    [
        [0, 2, 4, 3, 1],
        [0, 4, 3, 2, 1],
        [4, 2, 3, 1, 0],
        [3, 2, 1, 0, 4],
        [1, 0, 3, 2, 4],
        [4, 1, 0, 3, 2],
        [2, 1, 3, 0, 4],
        [1, 0, 3, 2, 4],
    ],
)
def test_expect_right_order(before):
    assert _order(before, 1) == [0, 1, 2, 3, 4]


@pytest.mark.parametrize(
    ("before", "stream_id"),
    [
        ([0, 2, 4, 3, 1], 1),
        ([0, 4, 3, 2, 1], 2),
        ([4, 2, 3, 1, 0], 3),
        ([3, 2, 1, 0, 4], 4),
        ([1, 0, 3, 2, 4], 5),
        ([4, 1, 0, 3, 2], 6),
        ([2, 1, 3, 0, 4], 7),
        ([1, 0, 3, 2, 4], 8),
    ],
)
def test_order_on_multiple_streams(before, stream_id):
    assert _order(before, stream_id) == [0, 1, 2, 3, 4]