"""
Rank words by corpus frequency and sentences by their hardest word.

A word's rank is the index of its count among all distinct counts, most
frequent first, so words with equal counts share a rank. A sentence is as
hard as its rarest word.
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from tatoeba_tools.corpus import iter_sentences
from tatoeba_tools.tokens import Tokenizer, sentence_words

# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class FrequencyData:
    """Word frequency and rank tables for one language.

    :param language: Language code the tables were built from.
    :param word_count: Word key to number of occurrences.
    :param word_rank: Word key to dense frequency rank (0 = most frequent).
    """

    language: str
    word_count: dict[str, int] = field(default_factory=dict)
    word_rank: dict[str, int] = field(default_factory=dict)


@dataclass
class ScoredSentence:
    """A source sentence with its difficulty score.

    :param id: Sentence ID in the corpus.
    :param text: Sentence text as it appears in the corpus.
    :param score: Highest word rank in the sentence.
    """

    id: int
    text: str
    score: int


# =============================================================================
# Word frequencies
# =============================================================================


def word_frequency(
    corpus_path: str | Path,
    language: str,
    tokenizer: Tokenizer,
    *,
    strict: bool = True,
) -> dict[str, int]:
    """Count word keys across all sentences of one language.

    :param corpus_path: Corpus file path.
    :param language: Language code; must equal the corpus column exactly.
    :param tokenizer: Tokenizer for the language.
    :param strict: Abort on malformed lines if True.
    :returns: Word key to occurrence count.
    """
    counts = Counter()
    for record in iter_sentences(corpus_path, strict=strict):
        if record.language == language:
            counts.update(sentence_words(record.text, tokenizer))
    return dict(counts)


def rank_words(frequencies: dict[str, int]) -> dict[str, int]:
    """Convert counts to dense ranks.

    >>> rank_words({"THE": 2, "CAT": 1, "SAT": 1})
    {'THE': 0, 'CAT': 1, 'SAT': 1}

    :param frequencies: Word key to count.
    :returns: Word key to rank, 0 for the most frequent count.
    """
    counts = sorted(set(frequencies.values()), reverse=True)
    rank_of_count = {count: rank for rank, count in enumerate(counts)}
    return {word: rank_of_count[count] for word, count in frequencies.items()}


def frequency_listing(frequencies: dict[str, int]) -> list[tuple[str, int]]:
    """List words in rank order, ties broken by word key."""
    return sorted(frequencies.items(), key=lambda item: (-item[1], item[0]))


def build_frequency_data(
    corpus_path: str | Path,
    language: str,
    tokenizer: Tokenizer | None = None,
    *,
    strict: bool = True,
) -> FrequencyData:
    """Count and rank the words of one language.

    :param corpus_path: Corpus file path.
    :param language: Language code.
    :param tokenizer: Tokenizer to use (chosen from the language if None).
    :param strict: Abort on malformed lines if True.
    :returns: :class:`FrequencyData` with counts and ranks.
    """
    if tokenizer is None:
        tokenizer = Tokenizer.for_language(language)
    word_count = word_frequency(corpus_path, language, tokenizer, strict=strict)
    return FrequencyData(
        language=language,
        word_count=word_count,
        word_rank=rank_words(word_count),
    )


# =============================================================================
# Sentence scoring
# =============================================================================


def score_sentence(words: list[str], word_rank: dict[str, int]) -> int | None:
    """Score a sentence by its highest-ranked word.

    :param words: Filtered word keys of the sentence.
    :param word_rank: Word key to rank.
    :returns: Maximum rank, or None if there are no words or a word is unranked.
    """
    if not words:
        return None
    ranks = []
    for word in words:
        if word not in word_rank:
            return None
        ranks.append(word_rank[word])
    return max(ranks)


def score_sentences(
    corpus_path: str | Path,
    language: str,
    word_rank: dict[str, int],
    tokenizer: Tokenizer,
    *,
    strict: bool = True,
) -> list[ScoredSentence]:
    """Score every sentence of a language and order them easiest first.

    Sorting is stable, so sentences with equal scores keep corpus order.

    :param corpus_path: Corpus file path.
    :param language: Language code of the sentences to score.
    :param word_rank: Rank table built from the same corpus and tokenizer.
    :param tokenizer: Tokenizer for the language.
    :param strict: Abort on malformed lines if True.
    :returns: Scored sentences sorted by ascending score.
    """
    sentences = []
    for record in iter_sentences(corpus_path, strict=strict):
        if record.language != language:
            continue
        score = score_sentence(sentence_words(record.text, tokenizer), word_rank)
        if score is not None:
            sentences.append(ScoredSentence(id=record.id, text=record.text, score=score))

    sentences.sort(key=lambda s: s.score)
    return sentences
