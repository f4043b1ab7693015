"""Command-line interface for SeqCompare.

Usage: compare-sequences <sequence file> <match> <mismatch> <gap>

Prints the global alignment score of every pair of sequences in the file,
followed by the alignments.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .errors import SequenceFormatError, TooFewSequencesError
from .report import format_report
from .seq_alignment import ScoringScheme, align_all_pairs
from .sequences import read_sequences


logger = logging.getLogger(__name__)


def non_negative_int_type(value: str) -> int:
    """Validate non-negative integer for argparse."""
    try:
        ivalue = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer value: {value}")
    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"Must be non-negative, got {ivalue}")
    return ivalue


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compare-sequences",
        description="Global alignment score and alignment for every pair of sequences in a file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Sequence file format:\n"
            "  >name\n"
            "  SYMBOLS (one or more lines)\n"
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"compare-sequences {__version__}",
    )
    parser.add_argument("sequence_file", help="Header-delimited sequence file")
    parser.add_argument("match", type=int, help="Score for identical symbols")
    parser.add_argument("mismatch", type=int, help="Score for differing symbols")
    parser.add_argument("gap", type=int, help="Score for each gap symbol")
    parser.add_argument(
        "--interleave",
        action="store_true",
        help="Print each alignment right after its score line",
    )
    parser.add_argument(
        "-j", "--jobs",
        type=non_negative_int_type,
        default=None,
        help="Worker processes for pair alignment (0 = all CPUs, default: serial)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Trace every pair and dump score tables to stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        collection = read_sequences(args.sequence_file)
    except OSError as exc:
        print(f"[ERROR] Cannot read {args.sequence_file}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except SequenceFormatError as exc:
        print(exc.formatted(), file=sys.stderr)
        return 1

    if len(collection) < 2:
        print(TooFewSequencesError(args.sequence_file, len(collection)).formatted(), file=sys.stderr)
        return 1
    logger.debug("Read %d sequences: %s", len(collection), collection)

    scheme = ScoringScheme(args.match, args.mismatch, args.gap)
    results = list(align_all_pairs(collection, scheme=scheme, n_jobs=args.jobs))

    sys.stdout.write(format_report(results, interleave=args.interleave))
    sys.stdout.flush()

    failed = sum(1 for r in results if not r.ok)
    if failed:
        logger.error("%d of %d pairs could not be aligned", failed, len(results))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
