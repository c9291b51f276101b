"""Configuration, errors, fragmentation, ordering, sequencing and acknowledgment for a UDP-based protocol."""

__version__ = "0.1.0"

__all__ = [
    "acknowledgment",
    "arranging",
    "config",
    "errors",
    "fragmenter",
    "ordering",
    "sequencing",
]