"""
Split sentences into words and canonicalize them into comparable word keys.

The same filter is used by the frequency pass and the scoring pass, so a word
counted in one is always looked up under the same key in the other.
"""

import re
import string
import unicodedata
from enum import Enum
from typing import Iterable

import jieba

# Chinese varieties written without spaces between words
SEGMENTED_LANGUAGES = frozenset({"cmn", "yue", "wuu", "lzh"})

# Straight and typographic apostrophes never split, so "don't" stays whole
NON_DELIMITERS = frozenset("'’")

EXTRA_DELIMITERS = frozenset(
    "。，、！？：；．"
    "「」『』（）《》〈〉【】〔〕［］｛｝"
    "…‥・·～〜－—–"
    "“”‘«»‹›¿¡"
)

_DELIMITERS = (frozenset(string.punctuation) | EXTRA_DELIMITERS) - NON_DELIMITERS
_SPLIT_RE = re.compile(
    "[\\s" + "".join(re.escape(c) for c in sorted(_DELIMITERS)) + "]"
)

_NUMERIC_CATEGORIES = frozenset({"Nd", "Nl", "No"})


def is_delimiter(char: str) -> bool:
    """Check if a character separates words.

    :param char: Single character.
    :returns: True for whitespace, ASCII punctuation and extra delimiters, except the apostrophe.
    """
    if char in NON_DELIMITERS:
        return False
    return char.isspace() or char in _DELIMITERS


def is_numeric(char: str) -> bool:
    """Check if a character is a digit, letter-like numeral or other number."""
    return unicodedata.category(char) in _NUMERIC_CATEGORIES


# =============================================================================
# Tokenizers
# =============================================================================


def split_delimited(text: str) -> list[str]:
    """Split text on every delimiter character.

    Adjacent delimiters produce empty tokens; :func:`filter_words` drops them.

    :param text: Sentence text.
    :returns: Tokens in order.
    """
    return _SPLIT_RE.split(text)


def split_segmented(text: str) -> list[str]:
    """Segment text without word spacing into words with jieba.

    :param text: Sentence text (e.g. Mandarin).
    :returns: Tokens in order, punctuation and spaces included.
    """
    return list(jieba.cut(text))


class Tokenizer(Enum):
    """Word splitting strategy, chosen once per run from the language code."""

    DELIMITED = "delimited"
    SEGMENTED = "segmented"

    @classmethod
    def for_language(cls, language: str) -> "Tokenizer":
        if language in SEGMENTED_LANGUAGES:
            return cls.SEGMENTED
        return cls.DELIMITED

    def split(self, text: str) -> list[str]:
        if self is Tokenizer.SEGMENTED:
            return split_segmented(text)
        return split_delimited(text)


# =============================================================================
# Normalization
# =============================================================================


def normalize_token(token: str) -> str | None:
    """Canonicalize a token into a word key, or reject it.

    Tokens containing a number, a leftover delimiter, or nothing at all are
    rejected. Others are NFC-composed and uppercased.

    :param token: Raw token from a tokenizer.
    :returns: Word key, or None if the token is not a word.
    """
    if not token:
        return None
    if any(is_numeric(c) for c in token):
        return None
    if any(is_delimiter(c) for c in token):
        return None
    return unicodedata.normalize("NFC", token).upper()


def filter_words(tokens: Iterable[str]) -> list[str]:
    """Normalize tokens and drop the rejected ones.

    :param tokens: Raw tokens in sentence order.
    :returns: Word keys in sentence order.
    """
    words = []
    for token in tokens:
        word = normalize_token(token)
        if word is not None:
            words.append(word)
    return words


def sentence_words(text: str, tokenizer: Tokenizer) -> list[str]:
    """Tokenize and filter a sentence into word keys."""
    return filter_words(tokenizer.split(text))
