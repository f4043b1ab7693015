import numpy as np
import pytest

from SeqCompare.errors import ScoreOverflowError
from SeqCompare.seq_alignment import (
    GAP_CHAR,
    AlignmentResult,
    Cell,
    Origin,
    PairwiseAligner,
    ScoreMatrix,
    ScoringScheme,
    pairwise,
)

from conftest import column_score


PAIRS = [
    ("GCATGCU", "GATTACA"),
    ("AGAGAGAGAG", "AGCAGCAGCA"),
    ("GAATTCAGTTA", "GGATCGA"),
    ("A", "TTTTA"),
    ("ACGT", "TGCA"),
]


def test_textbook_example_scores_zero():
    result = pairwise("GCATGCU", "GATTACA", match=1, mismatch=-1, gap=-1)

    assert isinstance(result, AlignmentResult)
    assert result.score == 0
    assert len(result.seq1_aligned) == len(result.seq2_aligned)


def test_single_gap_prefers_diagonal_then_above():
    result = pairwise("AA", "A", match=2, mismatch=-1, gap=-2)

    assert result.score == 0
    assert result.seq1_aligned == "AA"
    assert result.seq2_aligned == "-A"
    assert str(result) == "AA\n-A"


def test_single_symbols_match():
    result = pairwise("X", "X", match=1, mismatch=-1, gap=-1)

    assert result.score == 1
    assert (result.seq1_aligned, result.seq2_aligned) == ("X", "X")


def test_three_way_tie_takes_diagonal():
    # diagonal, left and above all reach -2
    result = pairwise("A", "C", match=1, mismatch=-2, gap=-1)

    assert result.score == -2
    assert (result.seq1_aligned, result.seq2_aligned) == ("A", "C")


def test_left_beats_above_when_diagonal_loses():
    result = pairwise("A", "C", match=1, mismatch=-3, gap=-1)

    assert result.score == -2
    assert result.seq1_aligned == "A-"
    assert result.seq2_aligned == "-C"


def test_self_alignment_has_no_gaps():
    seq = "ACGTTGCAAC"
    result = pairwise(seq, seq, match=2, mismatch=-1, gap=-2)

    assert result.score == len(seq) * 2
    assert result.seq1_aligned == seq
    assert result.seq2_aligned == seq
    assert result.gaps == 0
    assert result.identity == 1.0


@pytest.mark.parametrize("seq1,seq2", PAIRS)
@pytest.mark.parametrize("scheme", [
    ScoringScheme(1, -1, -1),
    ScoringScheme(2, -1, -2),
    ScoringScheme(5, -3, -4),
    ScoringScheme(0, 1, 2),
])
def test_alignment_is_consistent_with_score(seq1, seq2, scheme):
    result = PairwiseAligner(scheme=scheme).align(seq1, seq2)

    assert len(result.seq1_aligned) == len(result.seq2_aligned)
    assert result.seq1_aligned.replace(GAP_CHAR, "") == seq1
    assert result.seq2_aligned.replace(GAP_CHAR, "") == seq2
    assert column_score(result.seq1_aligned, result.seq2_aligned, scheme) == result.score
    # no column is a gap on both sides
    assert all(a != GAP_CHAR or b != GAP_CHAR
               for a, b in zip(result.seq1_aligned, result.seq2_aligned))


@pytest.mark.parametrize("seq1,seq2", PAIRS)
def test_score_is_symmetric(seq1, seq2):
    aligner = PairwiseAligner(match=3, mismatch=-2, gap=-2)

    assert aligner.align(seq1, seq2, score_only=True) == aligner.align(seq2, seq1, score_only=True)


def test_repeated_alignment_is_identical():
    aligner = PairwiseAligner(match=1, mismatch=-1, gap=-1)
    first = aligner.align("GAATTCAGTTA", "GGATCGA")
    second = aligner.align("GAATTCAGTTA", "GGATCGA")

    assert first == second


def test_score_only_returns_int():
    score = pairwise("GCATGCU", "GATTACA", score_only=True)

    assert score == 0
    assert isinstance(score, int)


def test_empty_sequences():
    result = pairwise("", "ABC", match=1, mismatch=-1, gap=-2)
    assert result.score == -6
    assert (result.seq1_aligned, result.seq2_aligned) == ("---", "ABC")

    result = pairwise("", "", match=1, mismatch=-1, gap=-2)
    assert result.score == 0
    assert (result.seq1_aligned, result.seq2_aligned) == ("", "")


def test_positive_gap_score_is_allowed():
    # every gap earns a point, so aligning nothing is best
    result = pairwise("AB", "AB", match=1, mismatch=-1, gap=1)

    assert result.score == 4
    assert result.gaps == 4


def test_matrix_initialization_and_cells():
    matrix = ScoreMatrix("AA", "A", ScoringScheme(2, -1, -2))

    assert matrix.shape == (3, 2)
    assert matrix.cell(0, 0) == Cell(0, Origin.NONE, None)
    assert matrix.cell(2, 0) == Cell(-4, Origin.FROM_ABOVE, (1, 0))
    assert matrix.cell(0, 1) == Cell(-2, Origin.FROM_LEFT, (0, 0))
    assert matrix.cell(1, 1) == Cell(2, Origin.DIAGONAL, (0, 0))
    assert matrix.cell(2, 1) == Cell(0, Origin.DIAGONAL, (1, 0))
    assert matrix.score == 0
    assert matrix.scores.dtype == np.int64


def test_matrix_render():
    matrix = ScoreMatrix("A", "A", ScoringScheme(1, -1, -1))

    assert matrix.render() == "0(-) -1(L)\n-1(A) 1(D)"


def test_overflow_is_reported():
    scheme = ScoringScheme(2 ** 62, -1, -1)

    with pytest.raises(ScoreOverflowError) as excinfo:
        ScoreMatrix("AC", "AC", scheme)
    assert isinstance(excinfo.value, OverflowError)
    assert excinfo.value.bound == 2 ** 64


def test_large_scores_below_limit():
    scheme = ScoringScheme(2 ** 40, -(2 ** 40), -(2 ** 40))
    result = PairwiseAligner(scheme=scheme).align("ACGT", "ACGA")

    assert result.score == 2 * 2 ** 40


def test_scoring_scheme_requires_integers():
    with pytest.raises(TypeError):
        ScoringScheme(1.5, -1, -1)

    scheme = ScoringScheme(np.int64(3), -1, -2)
    assert scheme.match == 3
    assert type(scheme.match) is int


def test_match_string_and_counts():
    result = AlignmentResult("AC-T", "AGGT", 0, "ACT", "AGGT")

    assert result.match_string == "|. |"
    assert result.nmatch() == 2
    assert result.gaps == 1
    assert result.identity == 0.5
    assert len(result) == 4


def test_blocks_wrap_columns():
    result = AlignmentResult("ACGTAC", "ACG-AC", 3, "ACGTAC", "ACGAC")

    lines = result.blocks(width=4)

    assert lines[0] == "pattern: ACGT"
    assert lines[1] == "         ||| "
    assert lines[2] == "subject: ACG-"
    assert lines[4] == "pattern: AC"
    with pytest.raises(ValueError):
        result.blocks(width=0)


def test_view_prints_summary_and_blocks(capsys):
    result = pairwise("AA", "A", match=2, mismatch=-1, gap=-2)

    result.view(width=80)

    out = capsys.readouterr().out.splitlines()
    assert out[1] == "Score: 0"
    assert out[2] == "Identity: 50.00%"
    assert out[3] == "Gaps: 1"
    assert out[5:8] == ["pattern: AA", "          |", "subject: -A"]
