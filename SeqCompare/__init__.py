"""
SeqCompare: global pairwise comparison of named sequences
"""

__version__ = "1.0.0"

from .errors import (
    PairAlignmentError,
    ScoreOverflowError,
    SeqCompareError,
    SequenceFormatError,
    TooFewSequencesError
)
from .sequences import Sequence, SequenceCollection, parse_sequences, read_sequences
from .seq_alignment import (
    AlignmentResult,
    PairResult,
    PairwiseAligner,
    ScoreMatrix,
    ScoringScheme,
    align_all_pairs,
    compare_sequences,
    pairwise
)

__all__ = [
    "__version__",
    "PairAlignmentError",
    "ScoreOverflowError",
    "SeqCompareError",
    "SequenceFormatError",
    "TooFewSequencesError",
    "Sequence",
    "SequenceCollection",
    "parse_sequences",
    "read_sequences",
    "AlignmentResult",
    "PairResult",
    "PairwiseAligner",
    "ScoreMatrix",
    "ScoringScheme",
    "align_all_pairs",
    "compare_sequences",
    "pairwise"
]
