"""
Pair the easiest source-language sentences with a translation.

Pipeline: count words, rank them, score sentences, resolve links, fetch
translations, then join everything in order of ease.
"""

import sys
from dataclasses import dataclass
from pathlib import Path

from tatoeba_tools.links import fetch_translations, parse_links
from tatoeba_tools.rank import ScoredSentence, rank_words, score_sentences, word_frequency
from tatoeba_tools.tokens import Tokenizer


@dataclass
class TranslationPair:
    """A source sentence with its first linked translation."""

    source_id: int
    target_id: int
    source_text: str
    target_text: str


def compose_translations(
    scored: list[ScoredSentence],
    links: dict[int, list[int]],
    translations: dict[int, str],
) -> tuple[list[TranslationPair], int]:
    """Join scored sentences with their first translation.

    Only the first linked ID of each sentence is used. Sentences without a
    link, or whose linked text was not found, are counted as skipped.

    :param scored: Sentences in order of ease.
    :param links: Source ID to target IDs.
    :param translations: Target ID to text.
    :returns: Tuple of (pairs in order of ease, number of skipped sentences).
    """
    pairs = []
    skipped = 0
    for sentence in scored:
        target_ids = links.get(sentence.id)
        if target_ids and target_ids[0] in translations:
            target_id = target_ids[0]
            pairs.append(
                TranslationPair(
                    source_id=sentence.id,
                    target_id=target_id,
                    source_text=sentence.text,
                    target_text=translations[target_id],
                )
            )
        else:
            skipped += 1
    return pairs, skipped


def make_translations(
    corpus_path: str | Path,
    link_path: str | Path,
    source: str,
    target: str,
    *,
    strict: bool = True,
) -> tuple[list[TranslationPair], int]:
    """Run the full pipeline for one language pair.

    Progress is reported on stderr.

    :param corpus_path: Corpus file path.
    :param link_path: Link file path.
    :param source: Language to rank (e.g. "eng").
    :param target: Language of the translations (e.g. "fra").
    :param strict: Abort on malformed lines if True.
    :returns: Tuple of (pairs in order of ease, number of skipped sentences).
    """
    tokenizer = Tokenizer.for_language(source)

    print(f"Finding word frequencies for '{source}'...", file=sys.stderr)
    word_count = word_frequency(corpus_path, source, tokenizer, strict=strict)

    print("Sorting and indexing words...", file=sys.stderr)
    word_rank = rank_words(word_count)

    print("Ordering sentences by ease...", file=sys.stderr)
    scored = score_sentences(corpus_path, source, word_rank, tokenizer, strict=strict)

    print("Reading sentence links...", file=sys.stderr)
    links = parse_links(corpus_path, link_path, source, target, strict=strict)

    print("Fetching required translations...", file=sys.stderr)
    translations = fetch_translations(corpus_path, links, strict=strict)

    return compose_translations(scored, links, translations)


def format_pair(pair: TranslationPair) -> str:
    """Format a pair as one tab-separated output line."""
    return f"{pair.source_id}\t{pair.target_id}\t{pair.source_text}\t{pair.target_text}"


def write_translations_tsv(pairs: list[TranslationPair], output_path: str | Path) -> None:
    """Write pairs to a tab-separated file, one pair per row.

    Rows match the lines printed by the ``ease`` command (no header).
    """
    with open(output_path, "w", encoding="utf-8") as f:
        for pair in pairs:
            f.write(format_pair(pair) + "\n")
    print(f"Wrote {len(pairs)} sentence pairs to {output_path}", file=sys.stderr)
