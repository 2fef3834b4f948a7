"""
Tatoeba Tools - rank corpus sentences by ease and pair them with translations.

Core functions:
    make_translations - Full pipeline: easiest sentences with a translation each

Modules:
    corpus  - Sentence and link file readers
    tokens  - Tokenizers and word normalization
    rank    - Word frequency ranks and sentence scores
    links   - Link resolution and translation lookup
    ease    - Joining ranked sentences with translations
    cli     - Command-line interface
"""

from tatoeba_tools.corpus import (
    CorpusFormatError,
    LinkRecord,
    SentenceRecord,
    iter_links,
    iter_sentences,
    list_languages,
)
from tatoeba_tools.ease import (
    TranslationPair,
    compose_translations,
    make_translations,
    write_translations_tsv,
)
from tatoeba_tools.links import fetch_translations, parse_links
from tatoeba_tools.rank import (
    FrequencyData,
    ScoredSentence,
    build_frequency_data,
    frequency_listing,
    rank_words,
    score_sentences,
    word_frequency,
)
from tatoeba_tools.tokens import Tokenizer, filter_words, normalize_token

__all__ = [
    "SentenceRecord",
    "LinkRecord",
    "CorpusFormatError",
    "iter_sentences",
    "iter_links",
    "list_languages",
    "Tokenizer",
    "normalize_token",
    "filter_words",
    "FrequencyData",
    "ScoredSentence",
    "word_frequency",
    "rank_words",
    "frequency_listing",
    "build_frequency_data",
    "score_sentences",
    "parse_links",
    "fetch_translations",
    "TranslationPair",
    "compose_translations",
    "make_translations",
    "write_translations_tsv",
]
