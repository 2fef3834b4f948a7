"""
Resolve sentence links between two languages and fetch translation texts.
"""

from pathlib import Path

from tatoeba_tools.corpus import iter_links, iter_sentences


def collect_language_ids(
    corpus_path: str | Path,
    source: str,
    target: str,
    *,
    strict: bool = True,
) -> tuple[set[int], set[int]]:
    """Collect sentence IDs of the source and target languages.

    :returns: Tuple of (source IDs, target IDs).
    """
    source_ids = set()
    target_ids = set()
    for record in iter_sentences(corpus_path, strict=strict):
        if record.language == source:
            source_ids.add(record.id)
        elif record.language == target:
            target_ids.add(record.id)
    return source_ids, target_ids


def parse_links(
    corpus_path: str | Path,
    link_path: str | Path,
    source: str,
    target: str,
    *,
    strict: bool = True,
) -> dict[int, list[int]]:
    """Map source-language sentences to their target-language translations.

    Only links that point from a source sentence to a target sentence are
    kept. Targets are listed in link-file order, duplicates included.

    :param corpus_path: Corpus file path.
    :param link_path: Link file path.
    :param source: Source language code.
    :param target: Target language code.
    :param strict: Abort on malformed lines if True.
    :returns: Source ID to list of target IDs.
    """
    source_ids, target_ids = collect_language_ids(
        corpus_path, source, target, strict=strict
    )

    links: dict[int, list[int]] = {}
    for link in iter_links(link_path, strict=strict):
        if link.source_id in source_ids and link.target_id in target_ids:
            links.setdefault(link.source_id, []).append(link.target_id)
    return links


def fetch_translations(
    corpus_path: str | Path,
    links: dict[int, list[int]],
    *,
    strict: bool = True,
) -> dict[int, str]:
    """Read the text of every sentence referenced as a translation.

    :param corpus_path: Corpus file path.
    :param links: Source ID to target IDs, from :func:`parse_links`.
    :param strict: Abort on malformed lines if True.
    :returns: Target ID to sentence text.
    """
    required = {target_id for target_ids in links.values() for target_id in target_ids}

    translations = {}
    for record in iter_sentences(corpus_path, strict=strict):
        if record.id in required:
            translations[record.id] = record.text
    return translations
