# laminar

Protocol logic for an application-level transport over UDP with
configurable reliability and ordering guarantees. The package holds the
pieces that sit between a socket and the application; all sequence numbers
are 16-bit and wrap around.

## Modules

- `laminar.config` – `Config`, a dataclass of tunable options such as
  `fragment_size` (default 1450), `max_fragments` (default 16),
  `fragment_reassembly_buffer_size` (default 64), `rtt_max_value` and
  `max_packets_in_flight`. Durations are in seconds.
- `laminar.errors` – `LaminarError` and its subclasses `DecodingError`,
  `FragmentError`, `PacketError`, `ReceivedDataTooShortError`,
  `ProtocolVersionMismatchError`, `SendError` and `CouldNotReadHeaderError`.
  `DecodingError`, `FragmentError` and `PacketError` carry a `kind` from
  `DecodingErrorKind`, `FragmentErrorKind` or `PacketErrorKind`; `str()` of a
  kind gives its description.
- `laminar.fragmenter` – `fragments_needed`, `split_into_fragments` and the
  `Fragmentation` reassembler.
- `laminar.arranging` – the abstract `Arranging` and `ArrangingSystem` bases
  and `is_within_half_window`, the wrap-around window check both arrangers use.
- `laminar.ordering` – `OrderingSystem` and `OrderingStream`: deliver every
  item in index order, holding back those that arrive early.
- `laminar.sequencing` – `SequencingSystem` and `SequencingStream`: deliver
  only items at least as new as the newest seen, dropping stale ones.
- `laminar.acknowledgment` – `AcknowledgmentHandler` and `SentPacket`: track
  local and remote sequence numbers, build the 32-bit ack bitfield and report
  packets believed to be dropped.

The package has no dependencies beyond the standard library.

## Ordering items

```python
from laminar.ordering import OrderingSystem

stream = OrderingSystem().get_or_create_stream(1)

delivered = []
for index in [0, 2, 4, 3, 1]:
    item = stream.arrange(index, f"packet {index}")
    if item is not None:
        delivered.append(item)
        delivered.extend(stream.drain())

# delivered == ["packet 0", "packet 1", "packet 2", "packet 3", "packet 4"]
```

`arrange` returns the item only when it is the expected one; items ahead of
it (within half the 16-bit range) are stored, anything else is dropped as a
duplicate. `drain()` yields stored items while the next expected index is
present.

## Sequencing items

```python
from laminar.sequencing import SequencingSystem

stream = SequencingSystem().get_or_create_stream(1)
newest = [i for i in [1, 3, 5, 4, 2] if stream.arrange(i, i) is not None]
# newest == [1, 3, 5]
```

## Fragmenting and reassembling payloads

```python
from laminar.config import Config
from laminar.fragmenter import Fragmentation, fragments_needed, split_into_fragments

config = Config()
fragments_needed(4000, 1024)                        # 4
parts = split_into_fragments(bytes(4000), config)   # 3 parts of at most 1450 bytes

reassembler = Fragmentation(config)
reassembler.handle_fragment(7, 0, 2, b"ab", None)     # None: still waiting
reassembler.handle_fragment(7, 1, 2, b"cd", "header") # (b"abcd", "header")
```

Splitting a payload that needs more than `config.max_fragments` fragments
raises `FragmentError`. `handle_fragment` joins fragment payloads in the
order they are handed in, and raises `FragmentError` for a mismatched
fragment count, an out-of-range or repeated fragment id, more than one acked
header, or a completed packet with no acked header.

## Acknowledging packets

```python
from laminar.acknowledgment import AcknowledgmentHandler

handler = AcknowledgmentHandler()
handler.process_outgoing("packet", b"\x01\x02\x03", None, None)
handler.local_sequence_num()    # 1
handler.packets_in_flight()     # 1

handler.process_incoming(0, 0, 0)   # remote seq 0 acknowledges our packet 0
handler.packets_in_flight()     # 0
handler.remote_sequence_num()   # 0
```

`dropped_packets()` removes and returns sent packets that are more than 32
sequence numbers behind the latest acknowledgment and so can no longer be
acknowledged.

## What this package does not do

It opens no sockets and sends nothing over the network. It has no packet
type, no header encoding or decoding, no connection management, round-trip
measurement or congestion control, and no command-line tool. The packet type,
ordering guarantee and acked header passed to `AcknowledgmentHandler` and
`Fragmentation` are stored and returned as given.