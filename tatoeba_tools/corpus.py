"""
Read Tatoeba-style sentence and link exports.

Sentence files hold one record per line: ``id<TAB>language<TAB>text``.
Link files hold one directed alignment per line: ``id1<TAB>id2``.
Columns beyond the required ones are ignored.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, TypeVar

T = TypeVar("T")


# =============================================================================
# Records
# =============================================================================


@dataclass(frozen=True)
class SentenceRecord:
    """One sentence from the corpus.

    :param id: Sentence ID, unique within the corpus file.
    :param language: Language code (e.g. "eng", "cmn").
    :param text: Sentence text.
    """

    id: int
    language: str
    text: str


@dataclass(frozen=True)
class LinkRecord:
    """A directed alignment from one sentence to its translation."""

    source_id: int
    target_id: int


class CorpusFormatError(ValueError):
    """A line in a corpus or link file could not be parsed."""

    def __init__(self, path: str | Path, line_number: int, reason: str):
        self.path = str(path)
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{self.path}:{line_number}: {reason}")


# =============================================================================
# Line parsing
# =============================================================================


def _parse_id(text: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"could not parse id {text!r}")
    return int(text)


def parse_sentence(line: str) -> SentenceRecord:
    """Parse a corpus line into a :class:`SentenceRecord`.

    :param line: Line without its terminator.
    :returns: The parsed record.
    :raises ValueError: If a column is missing or the id is not an integer.
    """
    cells = line.split("\t")
    if len(cells) < 3:
        raise ValueError(f"expected 3 tab-separated columns, found {len(cells)}")
    return SentenceRecord(id=_parse_id(cells[0]), language=cells[1], text=cells[2])


def parse_link(line: str) -> LinkRecord:
    """Parse a link line into a :class:`LinkRecord`.

    :param line: Line without its terminator.
    :returns: The parsed record.
    :raises ValueError: If a column is missing or an id is not an integer.
    """
    cells = line.split("\t")
    if len(cells) < 2:
        raise ValueError(f"expected 2 tab-separated columns, found {len(cells)}")
    return LinkRecord(source_id=_parse_id(cells[0]), target_id=_parse_id(cells[1]))


# =============================================================================
# Streaming readers
# =============================================================================


def read_lines(path: str | Path) -> Iterator[str]:
    """Lazily yield the lines of a UTF-8 text file without terminators.

    :param path: File path.
    :raises CorpusFormatError: If a line is not valid UTF-8, whatever the strictness.
    """
    with open(path, "rb") as f:
        for line_number, raw in enumerate(f, 1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise CorpusFormatError(path, line_number, f"invalid UTF-8: {e}") from e
            yield line.rstrip("\n").removesuffix("\r")


def _iter_records(
    path: str | Path, parse: Callable[[str], T], strict: bool
) -> Iterator[T]:
    for line_number, line in enumerate(read_lines(path), 1):
        if not line:
            continue
        try:
            record = parse(line)
        except ValueError as e:
            error = CorpusFormatError(path, line_number, str(e))
            if strict:
                raise error from e
            print(f"Warning: skipping {error}", file=sys.stderr)
            continue
        yield record


def iter_sentences(path: str | Path, *, strict: bool = True) -> Iterator[SentenceRecord]:
    """Stream sentence records from a corpus file.

    :param path: Corpus file path.
    :param strict: If True, abort on the first malformed line; otherwise warn and skip it.
    :raises CorpusFormatError: On a malformed line when strict.
    """
    return _iter_records(path, parse_sentence, strict)


def iter_links(path: str | Path, *, strict: bool = True) -> Iterator[LinkRecord]:
    """Stream link records from a link file.

    :param path: Link file path.
    :param strict: If True, abort on the first malformed line; otherwise warn and skip it.
    :raises CorpusFormatError: On a malformed line when strict.
    """
    return _iter_records(path, parse_link, strict)


def list_languages(
    path: str | Path,
    *,
    strict: bool = True,
    on_language: Callable[[str], None] | None = None,
) -> tuple[list[str], int]:
    """List the distinct languages of a corpus.

    :param path: Corpus file path.
    :param strict: Abort on malformed lines if True.
    :param on_language: Called with each language code as soon as it is first seen,
        so callers can report it before a later line aborts the run.
    :returns: Tuple of (language codes in order of first appearance, sentence count).
    """
    seen = set()
    languages = []
    count = 0
    for record in iter_sentences(path, strict=strict):
        count += 1
        if record.language not in seen:
            seen.add(record.language)
            languages.append(record.language)
            if on_language is not None:
                on_language(record.language)
    return languages, count
