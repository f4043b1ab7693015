"""Pytest configuration and shared fixtures for SeqCompare tests."""

import pytest

from SeqCompare.seq_alignment import GAP_CHAR, ScoringScheme
from SeqCompare.sequences import SequenceCollection


SAMPLE_RECORDS = """\
>s1
AA
>s2
A

>s3
A
A
"""


def column_score(aligned1: str, aligned2: str, scheme: ScoringScheme) -> int:
    """Score of an alignment recomputed column by column."""
    total = 0
    for a, b in zip(aligned1, aligned2):
        if a == GAP_CHAR or b == GAP_CHAR:
            total += scheme.gap
        else:
            total += scheme.substitution(a, b)
    return total


@pytest.fixture
def unit_scheme():
    """match=1, mismatch=-1, gap=-1"""
    return ScoringScheme(1, -1, -1)


@pytest.fixture
def dna_collection():
    return SequenceCollection.from_pairs([
        ("alpha", "GCATGCU"),
        ("beta", "GATTACA"),
        ("gamma", "GCATGCA"),
        ("delta", "TTAC"),
    ])


@pytest.fixture
def sample_file(tmp_path):
    """Three-record file; s3 spans two lines and a blank line separates s2."""
    path = tmp_path / "sequences.txt"
    path.write_text(SAMPLE_RECORDS)
    return path
