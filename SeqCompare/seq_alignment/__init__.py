"""
Sequence Alignment Module
Provides global pairwise alignment and the all-pairs driver
"""

from .pairwise import (
    GAP_CHAR,
    AlignmentResult,
    Cell,
    Origin,
    PairwiseAligner,
    ScoreMatrix,
    ScoringScheme,
    pairwise
)
from .driver import (
    PairResult,
    align_all_pairs,
    align_all_pairs_async,
    compare_sequences
)

__all__ = [
    "GAP_CHAR",
    "AlignmentResult",
    "Cell",
    "Origin",
    "PairwiseAligner",
    "ScoreMatrix",
    "ScoringScheme",
    "pairwise",
    "PairResult",
    "align_all_pairs",
    "align_all_pairs_async",
    "compare_sequences"
]
