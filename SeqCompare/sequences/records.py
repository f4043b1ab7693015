"""
Named sequence records and the ordered collection they are compared from
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


HEADER_PREFIX = ">"


@dataclass(frozen=True)
class Sequence:
    """A named run of single-character symbols"""
    name: str
    symbols: str

    def __post_init__(self):
        if HEADER_PREFIX in self.name:
            raise ValueError(f"Sequence name may not contain {HEADER_PREFIX!r}: {self.name!r}")

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return f"<{self.name},{self.symbols}>"


@dataclass
class SequenceCollection:
    """
    Sequences in the order they were read.

    The order is the pairing order used by the pairwise driver; nothing is
    sorted or deduplicated.
    """
    sequences: List[Sequence] = field(default_factory=list)

    def append(self, sequence: Sequence) -> None:
        self.sequences.append(sequence)

    def names(self) -> List[str]:
        return [s.name for s in self.sequences]

    def pairs(self) -> Iterator[Tuple[int, int]]:
        """Index pairs (i, j) with i < j, outer loop over i"""
        n = len(self.sequences)
        for i in range(n):
            for j in range(i + 1, n):
                yield i, j

    def n_pairs(self) -> int:
        n = len(self.sequences)
        return n * (n - 1) // 2

    def __len__(self) -> int:
        return len(self.sequences)

    def __iter__(self) -> Iterator[Sequence]:
        return iter(self.sequences)

    def __getitem__(self, idx: int) -> Sequence:
        return self.sequences[idx]

    def __str__(self) -> str:
        return " ".join(str(s) for s in self.sequences)

    @classmethod
    def from_pairs(cls, records) -> "SequenceCollection":
        """Build from (name, symbols) pairs or a {name: symbols} dict"""
        if isinstance(records, dict):
            records = records.items()
        return cls([Sequence(name, symbols) for name, symbols in records])
