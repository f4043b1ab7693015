"""Custom exceptions for the SeqCompare API.

Every error carries a message plus an optional suggestion and context so
the command line can print something helpful without a traceback.
"""

from __future__ import annotations
from typing import Optional


def _restore_error(cls, state):
    # Rebuild without calling __init__, whose signature differs per subclass.
    err = cls.__new__(cls)
    err.__dict__.update(state)
    Exception.__init__(err, err.formatted())
    return err


class SeqCompareError(Exception):
    """Root of every error raised while reading or comparing sequences.

    `message` says what went wrong with the file or pair, `context` points at
    where (a line number, a pair of names) and `suggestion` at a remedy;
    either may be left out. The CLI prints `formatted()` and exits 1.

    Examples:
        >>> err = SeqCompareError("Alignment of s1 to s2 failed", context="Pair 1 of 3")
        >>> print(err)
        [ERROR] Alignment of s1 to s2 failed
          Context: Pair 1 of 3
    """

    def __init__(self, message: str, suggestion: Optional[str] = None,
                 context: Optional[str] = None):
        self.message = message
        self.context = context
        self.suggestion = suggestion
        super().__init__(self.formatted())

    def formatted(self) -> str:
        """The message followed by indented context and suggestion lines."""
        extra = [
            f"  {label}: {text}"
            for label, text in (("Context", self.context), ("Suggestion", self.suggestion))
            if text
        ]
        return "\n".join([f"[ERROR] {self.message}"] + extra)

    __str__ = formatted

    def __reduce__(self):
        # Errors travel back from worker processes inside PairResult.
        return (_restore_error, (type(self), self.__dict__.copy()))


class SequenceFormatError(SeqCompareError, ValueError):
    """Malformed sequence file.

    Raised by the record reader for data before the first header, a header
    without a name, or a record that has no symbols.

    Args:
        source: File name (or other label) of the input
        line_no: 1-based line number where the problem was detected
        reason: What is wrong with the input
    """

    def __init__(self, source: str, line_no: int, reason: str):
        super().__init__(
            f"Format error in {source}: {reason}",
            suggestion="Each record is a '>name' header followed by one or more lines of symbols",
            context=f"Line {line_no}",
        )
        self.source = source
        self.line_no = line_no
        self.reason = reason


class TooFewSequencesError(SeqCompareError, ValueError):
    """Fewer than two sequences were read, so there is nothing to compare."""

    def __init__(self, source: str, count: int):
        super().__init__(
            f"Number of Sequences in {source} < 2.",
            context=f"Found {count}",
        )
        self.source = source
        self.count = count


class ScoreOverflowError(SeqCompareError, OverflowError):
    """Alignment scores cannot be represented in the score table.

    Args:
        bound: Largest score magnitude the table could reach
        limit: Largest magnitude the table can store
    """

    def __init__(self, bound: int, limit: int):
        super().__init__(
            f"Alignment scores may reach {bound}, beyond the table limit {limit}",
            suggestion="Use smaller match, mismatch and gap values or shorter sequences",
        )
        self.bound = bound
        self.limit = limit


class PairAlignmentError(SeqCompareError):
    """A single pair could not be aligned.

    The pairwise driver stores this in the pair's result instead of raising,
    so the remaining pairs still run.

    Args:
        name_a: Name of the first sequence
        name_b: Name of the second sequence
        cause: Description of the underlying failure
    """

    def __init__(self, name_a: str, name_b: str, cause: str):
        super().__init__(
            f"Alignment of {name_a} to {name_b} failed: {cause}",
        )
        self.name_a = name_a
        self.name_b = name_b
        self.cause = cause


__all__ = [
    "SeqCompareError",
    "SequenceFormatError",
    "TooFewSequencesError",
    "ScoreOverflowError",
    "PairAlignmentError",
]
