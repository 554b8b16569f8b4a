"""Tests for levenshtein_distance()."""

from cfaudit.paths.levenshtein import levenshtein_distance


def test_identical_strings():
    assert levenshtein_distance("photo.jpg", "photo.jpg") == 0


def test_empty_and_none():
    assert levenshtein_distance("", "") == 0
    assert levenshtein_distance(None, "abc") == 3
    assert levenshtein_distance("abc", None) == 3


def test_single_edits():
    assert levenshtein_distance("photo.jpg", "photo1.jpg") == 1  # insertion
    assert levenshtein_distance("photo1.jpg", "photo.jpg") == 1  # deletion
    assert levenshtein_distance("photo.jpg", "phot0.jpg") == 1  # substitution


def test_classic_example():
    assert levenshtein_distance("kitten", "sitting") == 3


def test_symmetric():
    assert levenshtein_distance("flaw", "lawn") == levenshtein_distance("lawn", "flaw") == 2
