"""
Text output for pairwise comparison results

For every pair the report has a score line

    Score for alignment of <nameA> to <nameB> is <score>

and the two aligned rows. By default all score lines come first and the
alignments follow in the same pair order; interleave=True puts each
alignment right under its score line.
"""
from typing import Iterable, List

from .seq_alignment.driver import PairResult
from .seq_alignment.pairwise import AlignmentResult


def format_score_line(result: PairResult) -> str:
    return f"Score for alignment of {result.name_a} to {result.name_b} is {result.score}"


def format_alignment(alignment: AlignmentResult) -> str:
    return str(alignment)


def format_report(results: Iterable[PairResult], interleave: bool = False) -> str:
    """
    Render successful pair results as report text (newline terminated).

    Failed pairs are skipped; the driver logs them.
    """
    scores: List[str] = []
    alignments: List[str] = []
    for result in results:
        if not result.ok:
            continue
        if interleave:
            scores.append(format_score_line(result))
            scores.append(format_alignment(result.alignment))
        else:
            scores.append(format_score_line(result))
            alignments.append(format_alignment(result.alignment))

    lines = scores + alignments
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
