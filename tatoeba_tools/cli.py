"""
CLI tools for Tatoeba-style sentence corpora.

Commands:
    langs - List the languages present in a corpus
    freq - Print word frequencies for one language
    ease - Print sentences in order of ease with their first translation

Results go to stdout; progress and summaries go to stderr.
"""

import sys
from pathlib import Path

import cyclopts

from tatoeba_tools.corpus import CorpusFormatError, list_languages
from tatoeba_tools.ease import format_pair, make_translations, write_translations_tsv
from tatoeba_tools.rank import frequency_listing, word_frequency
from tatoeba_tools.tokens import Tokenizer

USAGE = """\
Usage:
    tatoeba-tools langs <sentences path>
    tatoeba-tools freq <language> <sentences path>
    tatoeba-tools ease <source language> <target language> <sentences path> <links path>

Run "tatoeba-tools --help" for options."""

app = cyclopts.App(help="CLI tools for Tatoeba-style sentence corpora")


@app.default
def usage():
    """Print usage to stderr and exit with status 1."""
    print(USAGE, file=sys.stderr)
    sys.exit(1)


@app.command
def langs(corpus: Path, *, lenient: bool = False):
    """Print each language in the corpus once, in order of first appearance.

    :param corpus: Sentence file (id, language, text; tab-separated).
    :param lenient: If True, skip malformed lines with a warning instead of aborting.
    """
    languages, count = list_languages(corpus, strict=not lenient, on_language=print)
    print(f"Found {len(languages)} languages in {count} sentences", file=sys.stderr)


@app.command
def freq(language: str, corpus: Path, *, lenient: bool = False):
    """Print `count` and `word`, tab-separated, for every word of a language.

    The most frequent words come first; words with the same count are
    listed alphabetically.

    :param language: Language code (e.g. eng).
    :param corpus: Sentence file (id, language, text; tab-separated).
    :param lenient: If True, skip malformed lines with a warning instead of aborting.
    """
    tokenizer = Tokenizer.for_language(language)
    word_count = word_frequency(corpus, language, tokenizer, strict=not lenient)
    for word, count in frequency_listing(word_count):
        print(f"{count}\t{word}")
    print(f"Found {len(word_count)} distinct words", file=sys.stderr)


@app.command
def ease(
    source: str,
    target: str,
    corpus: Path,
    links: Path,
    *,
    output: Path | None = None,
    lenient: bool = False,
):
    """Print source sentences from easiest to hardest with one translation each.

    Output columns: source id, translation id, source text, translation text.
    A sentence is as hard as its least frequent word.

    :param source: Language to rank (e.g. eng).
    :param target: Language of the translations (e.g. fra).
    :param corpus: Sentence file (id, language, text; tab-separated).
    :param links: Link file (source id, translation id; tab-separated).
    :param output: Write the pairs to this file instead of stdout.
    :param lenient: If True, skip malformed lines with a warning instead of aborting.
    """
    pairs, skipped = make_translations(
        corpus, links, source, target, strict=not lenient
    )

    print("Outputting file...", file=sys.stderr)
    if output is not None:
        write_translations_tsv(pairs, output)
    else:
        for pair in pairs:
            print(format_pair(pair))

    print(f"Could not find translations for {skipped} sentences", file=sys.stderr)


def main(tokens: list[str] | None = None) -> None:
    """Main entry point. Invokes the cyclopts app.

    Malformed invocations, unreadable files and malformed lines abort with
    exit status 1.
    """
    try:
        app(tokens, exit_on_error=False)
    except cyclopts.CycloptsError:
        print(USAGE, file=sys.stderr)
        sys.exit(1)
    except (OSError, CorpusFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
