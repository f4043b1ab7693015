"""
Pairwise Global Sequence Alignment Module
Linear gap scoring with integer match / mismatch / gap parameters
"""

import logging
import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import List, NamedTuple, Optional, Tuple, Union

import numpy as np

from ..errors import ScoreOverflowError


logger = logging.getLogger(__name__)

GAP_CHAR = "-"

# Scores are kept in int64; anything that may exceed this is refused up front
SCORE_LIMIT = int(np.iinfo(np.int64).max)


class Origin(IntEnum):
    """Direction of the neighbour a cell's score was taken from"""
    NONE = 0
    DIAGONAL = 1
    FROM_LEFT = 2
    FROM_ABOVE = 3


_TAGS = {
    Origin.NONE: "-",
    Origin.DIAGONAL: "D",
    Origin.FROM_LEFT: "L",
    Origin.FROM_ABOVE: "A",
}


class Cell(NamedTuple):
    """One table entry; source is the (row, col) it came from, None at the origin"""
    score: int
    origin: Origin
    source: Optional[Tuple[int, int]]


def _source_of(i: int, j: int, origin: Origin) -> Optional[Tuple[int, int]]:
    if origin == Origin.DIAGONAL:
        return i - 1, j - 1
    if origin == Origin.FROM_LEFT:
        return i, j - 1
    if origin == Origin.FROM_ABOVE:
        return i - 1, j
    return None


@dataclass(frozen=True)
class ScoringScheme:
    """Match, mismatch and per-symbol gap scores (any sign)"""
    match: int = 1
    mismatch: int = -1
    gap: int = -1

    def __post_init__(self):
        for name in ("match", "mismatch", "gap"):
            try:
                value = operator.index(getattr(self, name))
            except TypeError:
                raise TypeError(
                    f"{name} must be an integer, got {type(getattr(self, name)).__name__}"
                ) from None
            object.__setattr__(self, name, int(value))

    def substitution(self, a: str, b: str) -> int:
        """Score for aligning symbol a against symbol b"""
        return self.match if a == b else self.mismatch

    def largest_step(self) -> int:
        return max(abs(self.match), abs(self.mismatch), abs(self.gap))


@dataclass(frozen=True)
class AlignmentResult:
    """Store alignment results and metadata"""
    seq1_aligned: str
    seq2_aligned: str
    score: int
    seq1_original: str
    seq2_original: str

    def __str__(self) -> str:
        """The two aligned rows, one per line"""
        return f"{self.seq1_aligned}\n{self.seq2_aligned}"

    def __len__(self) -> int:
        return len(self.seq1_aligned)

    @property
    def match_string(self) -> str:
        """'|' for identical columns, '.' for substitutions, ' ' for gaps"""
        match_str = []
        for a, b in zip(self.seq1_aligned, self.seq2_aligned):
            if a == GAP_CHAR or b == GAP_CHAR:
                match_str.append(" ")
            elif a == b:
                match_str.append("|")
            else:
                match_str.append(".")
        return "".join(match_str)

    @property
    def gaps(self) -> int:
        return self.seq1_aligned.count(GAP_CHAR) + self.seq2_aligned.count(GAP_CHAR)

    @property
    def identity(self) -> float:
        if not self.seq1_aligned:
            return 0.0
        return self.nmatch() / len(self.seq1_aligned)

    def nmatch(self) -> int:
        """Number of matching positions"""
        return sum(1 for a, b in zip(self.seq1_aligned, self.seq2_aligned)
                   if a == b and a != GAP_CHAR)

    def blocks(self, width: int = 80) -> List[str]:
        """Alignment wrapped into blocks of `width` columns with match indicators"""
        if width < 1:
            raise ValueError("width must be positive")
        lines = []
        match_string = self.match_string
        for start in range(0, len(self.seq1_aligned), width):
            end = start + width
            lines.append(f"pattern: {self.seq1_aligned[start:end]}")
            lines.append(f"         {match_string[start:end]}")
            lines.append(f"subject: {self.seq2_aligned[start:end]}")
            lines.append("")
        return lines

    def view(self, width: int = 80) -> None:
        """Display alignment with match indicators"""
        lines = [
            "",
            f"Score: {self.score}",
            f"Identity: {self.identity:.2%}",
            f"Gaps: {self.gaps}",
            "",
        ]
        lines.extend(self.blocks(width))
        for line in lines:
            print(line)


class ScoreMatrix:
    """
    Dense (len(seq1)+1) x (len(seq2)+1) global alignment table.

    Each cell holds a score and the direction it was reached from. When
    several moves reach the maximum, DIAGONAL wins over FROM_LEFT, which
    wins over FROM_ABOVE.

    Parameters:
    -----------
    seq1 : str
        First sequence, indexes the rows
    seq2 : str
        Second sequence, indexes the columns
    scheme : ScoringScheme
        Match / mismatch / gap scores

    Raises:
    -------
    ScoreOverflowError
        If scores could grow past the int64 table limit
    """

    def __init__(self, seq1: str, seq2: str, scheme: ScoringScheme):
        self.seq1 = seq1
        self.seq2 = seq2
        self.scheme = scheme

        self._check_bounds()
        self.scores, self.origins = self._initialize_matrix(len(seq1), len(seq2))
        self._fill_matrix()

    @property
    def shape(self) -> Tuple[int, int]:
        return self.scores.shape

    @property
    def score(self) -> int:
        """Optimal global alignment score, the bottom-right cell"""
        return int(self.scores[len(self.seq1), len(self.seq2)])

    def cell(self, i: int, j: int) -> Cell:
        origin = Origin(int(self.origins[i, j]))
        return Cell(int(self.scores[i, j]), origin, _source_of(i, j, origin))

    def _check_bounds(self) -> None:
        bound = (len(self.seq1) + len(self.seq2)) * self.scheme.largest_step()
        if bound > SCORE_LIMIT:
            raise ScoreOverflowError(bound, SCORE_LIMIT)

    def _initialize_matrix(self, len1: int, len2: int) -> Tuple[np.ndarray, np.ndarray]:
        """First column is reached from above, first row from the left"""
        gap = self.scheme.gap
        scores = np.zeros((len1 + 1, len2 + 1), dtype=np.int64)
        origins = np.zeros((len1 + 1, len2 + 1), dtype=np.uint8)

        for i in range(1, len1 + 1):
            scores[i, 0] = i * gap
            origins[i, 0] = Origin.FROM_ABOVE
        for j in range(1, len2 + 1):
            scores[0, j] = j * gap
            origins[0, j] = Origin.FROM_LEFT

        return scores, origins

    def _fill_matrix(self) -> None:
        seq1, seq2 = self.seq1, self.seq2
        scores, origins = self.scores, self.origins
        match, mismatch, gap = self.scheme.match, self.scheme.mismatch, self.scheme.gap

        for i in range(1, len(seq1) + 1):
            a = seq1[i - 1]
            for j in range(1, len(seq2) + 1):
                diagonal = int(scores[i - 1, j - 1]) + (match if a == seq2[j - 1] else mismatch)
                from_above = int(scores[i - 1, j]) + gap
                from_left = int(scores[i, j - 1]) + gap
                best = max(diagonal, from_above, from_left)

                if best == diagonal:
                    origins[i, j] = Origin.DIAGONAL
                elif best == from_left:
                    origins[i, j] = Origin.FROM_LEFT
                else:
                    origins[i, j] = Origin.FROM_ABOVE
                scores[i, j] = best

    def traceback(self) -> Tuple[str, str]:
        """Follow origins from the bottom-right cell back to (0, 0)"""
        seq1, seq2 = self.seq1, self.seq2
        aligned1: List[str] = []
        aligned2: List[str] = []
        i, j = len(seq1), len(seq2)

        while True:
            origin = self.origins[i, j]
            if origin == Origin.NONE:
                break
            if origin == Origin.DIAGONAL:
                aligned1.append(seq1[i - 1])
                aligned2.append(seq2[j - 1])
                i -= 1
                j -= 1
            elif origin == Origin.FROM_LEFT:
                aligned1.append(GAP_CHAR)
                aligned2.append(seq2[j - 1])
                j -= 1
            else:
                aligned1.append(seq1[i - 1])
                aligned2.append(GAP_CHAR)
                i -= 1

        return "".join(reversed(aligned1)), "".join(reversed(aligned2))

    def render(self) -> str:
        """Table as rows of 'score(tag)' entries; tags D, L, A and '-' at the origin"""
        rows = []
        for i in range(self.scores.shape[0]):
            rows.append(" ".join(
                f"{int(self.scores[i, j])}({_TAGS[Origin(int(self.origins[i, j]))]})"
                for j in range(self.scores.shape[1])
            ))
        return "\n".join(rows)


class PairwiseAligner:
    """Global pairwise aligner with linear gap scores"""

    def __init__(
        self,
        match: int = 1,
        mismatch: int = -1,
        gap: int = -1,
        scheme: Optional[ScoringScheme] = None
    ):
        """
        Initialize aligner

        Parameters:
        -----------
        match : int
            Score for identical symbols (default 1)
        mismatch : int
            Score for differing symbols (default -1)
        gap : int
            Score for every gap symbol inserted (default -1)
        scheme : ScoringScheme, optional
            Use this scheme instead of match / mismatch / gap
        """
        self.scheme = scheme if scheme is not None else ScoringScheme(match, mismatch, gap)

    def build_matrix(self, seq1: str, seq2: str) -> ScoreMatrix:
        return ScoreMatrix(seq1, seq2, self.scheme)

    def align(
        self,
        seq1: str,
        seq2: str,
        score_only: bool = False,
        log: Optional[logging.Logger] = None
    ) -> Union[AlignmentResult, int]:
        """
        Perform global pairwise sequence alignment

        Parameters:
        -----------
        seq1 : str
            First sequence (rows of the table)
        seq2 : str
            Second sequence (columns of the table)
        score_only : bool
            If True, return only the alignment score
        log : logging.Logger, optional
            Where to trace the computation (module logger by default)

        Returns:
        --------
        AlignmentResult or int
            Alignment result object or score if score_only=True
        """
        log = log or logger
        matrix = self.build_matrix(seq1, seq2)
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Score table %d x %d:\n%s", matrix.shape[0], matrix.shape[1], matrix.render())

        if score_only:
            return matrix.score

        aligned1, aligned2 = matrix.traceback()
        return AlignmentResult(
            seq1_aligned=aligned1,
            seq2_aligned=aligned2,
            score=matrix.score,
            seq1_original=seq1,
            seq2_original=seq2
        )


def pairwise(
    seq1: str,
    seq2: str,
    match: int = 1,
    mismatch: int = -1,
    gap: int = -1,
    score_only: bool = False
) -> Union[AlignmentResult, int]:
    """
    Global alignment of two sequences

    Examples:
    ---------
    >>> result = pairwise("GCATGCU", "GATTACA")
    >>> result.score
    0
    >>> print(pairwise("AA", "A", match=2, mismatch=-1, gap=-2))
    AA
    -A
    """
    aligner = PairwiseAligner(match=match, mismatch=mismatch, gap=gap)
    return aligner.align(seq1, seq2, score_only=score_only)
