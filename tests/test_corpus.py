"""Tests for corpus and link file reading."""

import pytest

from conftest import write_tsv
from tatoeba_tools.corpus import (
    CorpusFormatError,
    LinkRecord,
    SentenceRecord,
    iter_links,
    iter_sentences,
    list_languages,
    parse_link,
    parse_sentence,
    read_lines,
)


class TestParseSentence:
    def test_three_columns(self):
        assert parse_sentence("1\teng\tThe cat sat.") == SentenceRecord(1, "eng", "The cat sat.")

    def test_extra_columns_ignored(self):
        record = parse_sentence("7\tfra\tLe chat.\tCK\t2020-01-01")
        assert record == SentenceRecord(7, "fra", "Le chat.")

    def test_empty_text_allowed(self):
        assert parse_sentence("5\teng\t").text == ""

    def test_missing_column(self):
        with pytest.raises(ValueError):
            parse_sentence("1\teng")

    @pytest.mark.parametrize("bad_id", ["", "x", "-1", "1.5", " 1", "+1"])
    def test_bad_id(self, bad_id):
        with pytest.raises(ValueError):
            parse_sentence(f"{bad_id}\teng\tHi.")


class TestParseLink:
    def test_two_columns(self):
        assert parse_link("1\t3") == LinkRecord(1, 3)

    def test_extra_columns_ignored(self):
        assert parse_link("1\t3\tx") == LinkRecord(1, 3)

    def test_missing_column(self):
        with pytest.raises(ValueError):
            parse_link("1")


class TestReaders:
    def test_read_lines_strips_terminators(self, tmp_path):
        path = tmp_path / "lines.txt"
        path.write_bytes(b"a\r\nb\nc")
        assert list(read_lines(path)) == ["a", "b", "c"]

    def test_invalid_utf8_is_fatal_even_when_lenient(self, tmp_path):
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"1\tfra\tCaf\xc3\xa9.\n2\tfra\tCaf\xe9.\n")
        with pytest.raises(CorpusFormatError) as exc_info:
            list(iter_sentences(path, strict=False))
        assert exc_info.value.line_number == 2
        assert "invalid UTF-8" in str(exc_info.value)

    def test_iter_sentences(self, corpus_path):
        records = list(iter_sentences(corpus_path))
        assert [r.id for r in records] == [1, 2, 3]
        assert records[2].language == "fra"

    def test_blank_lines_skipped(self, tmp_path):
        path = tmp_path / "blank.csv"
        path.write_text("1\teng\tHi.\n\n2\teng\tBye.\n", encoding="utf-8")
        assert [r.id for r in iter_sentences(path)] == [1, 2]

    def test_error_reports_line(self, tmp_path):
        path = write_tsv(tmp_path / "bad.csv", [(1, "eng", "Hi."), (2, "eng")])
        with pytest.raises(CorpusFormatError) as exc_info:
            list(iter_sentences(path))
        assert exc_info.value.line_number == 2
        assert exc_info.value.path == str(path)
        assert isinstance(exc_info.value, ValueError)

    def test_lenient_skips(self, tmp_path, capsys):
        path = write_tsv(tmp_path / "bad.csv", [(1, "eng", "Hi."), (2, "eng"), (3, "eng", "Yo.")])
        assert [r.id for r in iter_sentences(path, strict=False)] == [1, 3]
        assert "Warning" in capsys.readouterr().err

    def test_iter_links_keeps_order_and_duplicates(self, tmp_path):
        path = write_tsv(tmp_path / "links.csv", [(1, 3), (1, 2), (1, 3)])
        assert list(iter_links(path)) == [LinkRecord(1, 3), LinkRecord(1, 2), LinkRecord(1, 3)]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(iter_links(tmp_path / "missing.csv"))


class TestListLanguages:
    def test_first_appearance_order(self, bilingual_paths):
        corpus, _ = bilingual_paths
        languages, count = list_languages(corpus)
        assert languages == ["eng", "fra", "deu"]
        assert count == 9

    def test_reports_new_languages_as_seen(self, tmp_path):
        path = write_tsv(
            tmp_path / "s.csv",
            [(1, "eng", "Hi."), (2, "fra", "Salut."), (3, "eng", "Yo."), ("bad", "deu", "Hallo.")],
        )
        seen = []
        with pytest.raises(CorpusFormatError):
            list_languages(path, on_language=seen.append)
        assert seen == ["eng", "fra"]

    def test_empty_corpus(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        assert list_languages(path) == ([], 0)
