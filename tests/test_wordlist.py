import logging

import pytest

from seqtrie import WordList


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("deck\ndid\n\ndog\nDogs\ndoggie\ndoe\ndo\nx-ray\ncan't\n", encoding="utf-8")
    return path


def test_loads_explicit_path(word_file, caplog):
    with caplog.at_level(logging.INFO, logger="seqtrie"):
        wl = WordList(str(word_file), search_paths=())

    assert len(wl) == 7
    assert "DOGS" in wl.words
    assert "X-RAY" not in wl.words
    assert "Loaded 7 words" in caplog.text


def test_membership_is_case_insensitive(word_file):
    wl = WordList(str(word_file), search_paths=())

    assert wl.is_valid("dog") is True
    assert "DoGgIe" in wl
    assert "dogg" not in wl
    assert wl.trie.search("DOGG", is_prefix=True) is True


def test_has_prefix(word_file):
    wl = WordList(str(word_file), search_paths=())

    assert wl.has_prefix("dog") is True
    assert wl.has_prefix("DOGG") is True
    assert wl.has_prefix("dz") is False
    assert wl.has_prefix("") is True


def test_length_limits(word_file):
    wl = WordList(str(word_file), min_length=3, max_length=4, search_paths=())

    assert wl.words == {"DECK", "DID", "DOG", "DOGS", "DOE"}
    assert wl.trie.search("DO") is False
    assert wl.trie.search("DO", is_prefix=True) is True


def test_falls_through_search_paths(tmp_path, word_file):
    empty = tmp_path / "empty.txt"
    empty.write_text("\n\n", encoding="utf-8")

    wl = WordList(search_paths=[str(tmp_path / "missing.txt"), str(empty), str(word_file)])

    assert len(wl) == 7


def test_missing_files_leave_list_empty(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="seqtrie"):
        wl = WordList(str(tmp_path / "nope.txt"), search_paths=())

    assert len(wl) == 0
    assert wl.is_valid("anything") is False
    assert wl.has_prefix("") is True
    assert "No word file found" in caplog.text


def test_add_filters_and_inserts(tmp_path):
    wl = WordList(str(tmp_path / "nope.txt"), min_length=2, search_paths=())

    assert wl.add("  hello\n") is True
    assert wl.add("a") is False
    assert wl.add("hi5") is False
    assert wl.add("") is False

    assert wl.words == {"HELLO"}
    assert "hello" in wl
    assert wl.has_prefix("hel") is True
