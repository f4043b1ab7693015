"""
All-pairs global alignment over a sequence collection.

Pairs are visited as combinations in collection order: (0,1), (0,2), ...,
(1,2), ... and results always come back in that order, whether they were
computed serially or in a process pool.

Backends:
    - serial   : n_jobs None or 1, one pair at a time (default)
    - parallel : n_jobs > 1, or 0 for every CPU; pairs are independent so
                 each worker builds and drops its own score table
"""
from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ..errors import PairAlignmentError, SeqCompareError
from ..sequences.records import Sequence, SequenceCollection
from .pairwise import AlignmentResult, PairwiseAligner, ScoringScheme


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairResult:
    """Outcome for one (earlier, later) pair of the collection"""
    index_a: int
    index_b: int
    name_a: str
    name_b: str
    alignment: Optional[AlignmentResult] = None
    error: Optional[PairAlignmentError] = None

    @property
    def ok(self) -> bool:
        return self.alignment is not None

    @property
    def score(self) -> Optional[int]:
        return self.alignment.score if self.alignment is not None else None


def _as_collection(sequences) -> SequenceCollection:
    if isinstance(sequences, SequenceCollection):
        return sequences
    if isinstance(sequences, dict):
        return SequenceCollection.from_pairs(sequences)
    items = list(sequences)
    if all(isinstance(s, Sequence) for s in items):
        return SequenceCollection(items)
    return SequenceCollection.from_pairs(items)


def _describe(exc: BaseException) -> str:
    if isinstance(exc, SeqCompareError):
        return exc.message
    return str(exc) or type(exc).__name__


def _align_pair(i: int, j: int, seq_a: Sequence, seq_b: Sequence,
                scheme: ScoringScheme, log: logging.Logger) -> PairResult:
    log.debug("Aligning %s (%d) to %s (%d), lengths %d x %d",
              seq_a.name, i, seq_b.name, j, len(seq_a), len(seq_b))
    try:
        alignment = PairwiseAligner(scheme=scheme).align(seq_a.symbols, seq_b.symbols, log=log)
    except (MemoryError, OverflowError) as exc:
        error = PairAlignmentError(seq_a.name, seq_b.name, _describe(exc))
        return PairResult(i, j, seq_a.name, seq_b.name, error=error)

    log.debug("Score for %s / %s: %d", seq_a.name, seq_b.name, alignment.score)
    return PairResult(i, j, seq_a.name, seq_b.name, alignment=alignment)


def _pair_worker(args: Tuple[int, int, Sequence, Sequence, ScoringScheme]) -> PairResult:
    i, j, seq_a, seq_b, scheme = args
    return _align_pair(i, j, seq_a, seq_b, scheme, logger)


def align_all_pairs(
    sequences: Union[SequenceCollection, Iterable],
    scheme: Optional[ScoringScheme] = None,
    n_jobs: Optional[int] = None,
    log: Optional[logging.Logger] = None
) -> Iterator[PairResult]:
    """
    Globally align every unordered pair of sequences.

    Parameters
    ----------
    sequences : SequenceCollection, dict or iterable
        The sequences in pairing order. Plain (name, symbols) pairs and
        {name: symbols} dicts are accepted too.
    scheme : ScoringScheme
        Match / mismatch / gap scores (default 1 / -1 / -1).
    n_jobs : int or None
        None/1 = serial. >1 = that many worker processes. 0 = all CPUs.
    log : logging.Logger
        Receives per-pair tracing (DEBUG) and failures (ERROR). Defaults to
        this module's logger. Worker processes trace through the module
        logger; failures are always logged here, once, through `log`.

    Yields
    ------
    PairResult
        One per pair, in collection order. A pair whose table could not be
        built carries a PairAlignmentError instead of an alignment.
    """
    collection = _as_collection(sequences)
    scheme = scheme or ScoringScheme()
    log = log or logger

    log.info("Aligning %d pairs from %d sequences (match=%d, mismatch=%d, gap=%d)",
             collection.n_pairs(), len(collection), scheme.match, scheme.mismatch, scheme.gap)

    if n_jobs is None or n_jobs == 1:
        for i, j in collection.pairs():
            result = _align_pair(i, j, collection[i], collection[j], scheme, log)
            if not result.ok:
                log.error("%s", result.error.message)
            yield result
        return

    if n_jobs < 0:
        raise ValueError("n_jobs must be None or >= 0")
    if n_jobs == 0:
        n_jobs = os.cpu_count() or 1

    jobs = [(i, j, collection[i], collection[j], scheme) for i, j in collection.pairs()]
    if not jobs:
        return
    with ProcessPoolExecutor(max_workers=n_jobs) as ex:
        # map keeps submission order, so output order matches the serial run
        results = ex.map(
            _pair_worker,
            jobs,
            chunksize=max(1, len(jobs) // (n_jobs * 4))
        )
        for result in results:
            if not result.ok:
                log.error("%s", result.error.message)
            yield result


def compare_sequences(
    sequences: Union[SequenceCollection, Iterable],
    match: int = 1,
    mismatch: int = -1,
    gap: int = -1,
    n_jobs: Optional[int] = None,
    log: Optional[logging.Logger] = None
) -> List[PairResult]:
    """Convenience wrapper returning every pair result as a list"""
    scheme = ScoringScheme(match, mismatch, gap)
    return list(align_all_pairs(sequences, scheme=scheme, n_jobs=n_jobs, log=log))


async def align_all_pairs_async(
    sequences: Union[SequenceCollection, Iterable],
    scheme: Optional[ScoringScheme] = None,
    n_jobs: Optional[int] = None,
    log: Optional[logging.Logger] = None
) -> List[PairResult]:
    """
    Async version: runs align_all_pairs in the default thread pool.
    (Does not speed up the computation itself; only keeps the event loop free.)
    """
    import asyncio
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None,
        lambda: list(align_all_pairs(sequences, scheme=scheme, n_jobs=n_jobs, log=log))
    )
