"""
Shared pytest fixtures for all tests.
"""

import pytest


def write_tsv(path, rows):
    path.write_text(
        "".join("\t".join(str(cell) for cell in row) + "\n" for row in rows),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def corpus_path(tmp_path):
    """The three-sentence English/French corpus."""
    return write_tsv(
        tmp_path / "sentences.csv",
        [
            (1, "eng", "The cat sat."),
            (2, "eng", "The dog ran fast quickly."),
            (3, "fra", "Le chat."),
        ],
    )


@pytest.fixture
def links_path(tmp_path):
    """A link file pairing sentence 1 with sentence 3."""
    return write_tsv(tmp_path / "links.csv", [(1, 3)])


@pytest.fixture
def bilingual_paths(tmp_path):
    """A larger corpus with several links per sentence, in both directions."""
    corpus = write_tsv(
        tmp_path / "bilingual.csv",
        [
            (10, "eng", "I see a dog."),
            (11, "fra", "Je vois un chien."),
            (12, "eng", "I see."),
            (13, "fra", "Je vois."),
            (14, "deu", "Ich sehe."),
            (15, "eng", "A dog."),
            (16, "fra", "Un chien."),
            (17, "eng", "I see a cat."),
            (18, "eng", "42"),
        ],
    )
    links = write_tsv(
        tmp_path / "bilingual_links.csv",
        [
            (11, 10),
            (10, 11),
            (12, 14),
            (12, 13),
            (12, 13),
            (15, 16),
            (15, 11),
            (17, 99),
        ],
    )
    return corpus, links
