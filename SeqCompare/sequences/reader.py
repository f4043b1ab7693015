"""
Reading header-delimited sequence files

    >name of first sequence
    ACGTACGT
    ACG
    >second
    GGTAC

A header line starts with '>' and names the record; every following
non-blank line is appended to that record's symbols.
"""
from typing import Iterable, Iterator, Optional

from ..errors import SequenceFormatError
from .records import HEADER_PREFIX, Sequence, SequenceCollection


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def parse_sequences(lines: Iterable[str], source: str = "<input>") -> SequenceCollection:
    """
    Parse header-delimited records into a SequenceCollection.

    Args:
        lines: Lines of text, with or without line terminators ('\\n' or '\\r\\n')
        source: Label used in error messages (usually the file name)

    Returns:
        SequenceCollection in file order

    Raises:
        SequenceFormatError: symbols before the first header, an empty name,
            or a record without symbols
    """
    collection = SequenceCollection()
    name: Optional[str] = None
    chunks = []
    header_line = 0

    def finish(line_no: int) -> None:
        if not chunks:
            raise SequenceFormatError(
                source, line_no, f"sequence {name!r} (header on line {header_line}) has no symbols"
            )
        collection.append(Sequence(name, "".join(chunks)))

    line_no = 0
    for line_no, raw in enumerate(lines, start=1):
        line = _strip_eol(raw)
        if not line:
            continue

        if line.startswith(HEADER_PREFIX):
            if name is not None:
                finish(line_no)
            name = line[len(HEADER_PREFIX):]
            if not name:
                raise SequenceFormatError(source, line_no, "header has an empty name")
            if HEADER_PREFIX in name:
                raise SequenceFormatError(source, line_no, f"name may not contain {HEADER_PREFIX!r}")
            chunks = []
            header_line = line_no
            continue

        if name is None:
            raise SequenceFormatError(source, line_no, "sequence data before the first header")
        chunks.append(line)

    if name is not None:
        finish(line_no + 1)

    return collection


def read_sequences(path: str) -> SequenceCollection:
    """
    Read a sequence file from disk.

    The file must be UTF-8 text; undecodable bytes raise SequenceFormatError.
    OSError from opening or reading the file is left to the caller.
    """
    source = str(path)
    with open(path, "rb") as handle:
        return parse_sequences(_decode_lines(handle, source), source=source)


def _decode_lines(handle, source: str) -> Iterator[str]:
    for line_no, raw in enumerate(handle, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            raise SequenceFormatError(source, line_no, "not valid UTF-8 text") from None
