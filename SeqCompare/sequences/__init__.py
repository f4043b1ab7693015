"""
Sequence Records Module
Named sequences, their ordered collection, and the file reader
"""

from .records import (
    HEADER_PREFIX,
    Sequence,
    SequenceCollection
)
from .reader import (
    parse_sequences,
    read_sequences
)

__all__ = [
    "HEADER_PREFIX",
    "Sequence",
    "SequenceCollection",
    "parse_sequences",
    "read_sequences"
]
