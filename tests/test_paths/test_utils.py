"""Tests for cfaudit.paths.utils."""

import pytest

from cfaudit.paths.utils import (
    get_parent_path,
    has_double_slashes,
    is_locale_segment,
    remove_double_slashes,
    remove_locale_from_path,
)


# ---------------------------------------------------------------------------
# remove_locale_from_path
# ---------------------------------------------------------------------------

class TestRemoveLocaleFromPath:
    """Tests for remove_locale_from_path()."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_falsy_input_returned_unchanged(self, value):
        assert remove_locale_from_path(value) == value

    def test_two_letter_locale(self):
        assert remove_locale_from_path("/content/dam/US/images/photo.jpg") == "/content/dam/images/photo.jpg"
        assert remove_locale_from_path("/content/dam/fr/images/photo.jpg") == "/content/dam/images/photo.jpg"

    def test_five_letter_locale(self):
        assert remove_locale_from_path("/content/dam/en-US/images/photo.jpg") == "/content/dam/images/photo.jpg"
        assert remove_locale_from_path("/content/dam/fr_FR/images/photo.jpg") == "/content/dam/images/photo.jpg"

    def test_multiple_locales(self):
        assert remove_locale_from_path("/content/dam/en-US/US/images/photo.jpg") == "/content/dam/images/photo.jpg"

    def test_non_locale_segments_untouched(self):
        assert remove_locale_from_path("/content/dam/images/photo.jpg") == "/content/dam/images/photo.jpg"
        assert remove_locale_from_path("/content/dam/123/images/photo.jpg") == "/content/dam/123/images/photo.jpg"

    def test_outside_dam_unchanged(self):
        assert remove_locale_from_path("/") == "/"
        assert remove_locale_from_path("/en-US") == "/en-US"
        assert remove_locale_from_path("/content/site/en-US/page") == "/content/site/en-US/page"

    def test_trailing_slash_kept_when_nothing_removed(self):
        assert remove_locale_from_path("/content/dam/images/") == "/content/dam/images/"
        assert remove_locale_from_path("/content/dam/123/") == "/content/dam/123/"
        assert remove_locale_from_path("/content/dam/") == "/content/dam/"

    def test_trailing_slash_dropped_when_locale_removed(self):
        assert remove_locale_from_path("/content/dam/en-US/") == "/content/dam"


# ---------------------------------------------------------------------------
# get_parent_path
# ---------------------------------------------------------------------------

class TestGetParentPath:
    """Tests for get_parent_path()."""

    @pytest.mark.parametrize("path", ["/", "/content", "/content/dam", "/content/dam/"])
    def test_root_paths_have_no_parent(self, path):
        assert get_parent_path(path) is None

    @pytest.mark.parametrize("path", [None, "", "en-US", "/en-US"])
    def test_invalid_input(self, path):
        assert get_parent_path(path) is None

    def test_parent_of_valid_paths(self):
        assert get_parent_path("/content/dam/en-US") == "/content/dam"
        assert get_parent_path("/content/dam/en-US/images") == "/content/dam/en-US"
        assert get_parent_path("/content/dam/en-US/images/photo.jpg") == "/content/dam/en-US/images"

    def test_trailing_slash_ignored(self):
        assert get_parent_path("/content/dam/en-US/") == "/content/dam"


# ---------------------------------------------------------------------------
# Double slashes
# ---------------------------------------------------------------------------

class TestHasDoubleSlashes:
    """Tests for has_double_slashes()."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_falsy_input(self, value):
        assert has_double_slashes(value) is False

    def test_detects_runs(self):
        assert has_double_slashes("/content/dam//images/photo.jpg")
        assert has_double_slashes("/content////dam/images/photo.jpg")

    def test_clean_paths(self):
        assert not has_double_slashes("/content/dam/images/photo.jpg")
        assert not has_double_slashes("/content/dam/")
        assert not has_double_slashes("/")

    def test_scheme_slashes_ignored(self):
        assert not has_double_slashes("http://example.com/path")
        assert not has_double_slashes("https://example.com/path")
        assert not has_double_slashes("ftp://example.com/path")

    def test_detects_runs_after_scheme(self):
        assert has_double_slashes("http://example.com//path")
        assert has_double_slashes("https://example.com/path//file")


class TestRemoveDoubleSlashes:
    """Tests for remove_double_slashes()."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_falsy_input_returned_unchanged(self, value):
        assert remove_double_slashes(value) == value

    def test_collapses_runs(self):
        assert remove_double_slashes("/content/dam//images/photo.jpg") == "/content/dam/images/photo.jpg"
        assert remove_double_slashes("/content////dam/images/photo.jpg") == "/content/dam/images/photo.jpg"
        assert remove_double_slashes("//////content/dam/images/photo.jpg") == "/content/dam/images/photo.jpg"

    def test_preserves_scheme(self):
        assert remove_double_slashes("https://example.com/path") == "https://example.com/path"
        assert remove_double_slashes("http://example.com//path") == "http://example.com/path"
        assert remove_double_slashes("https://example.com///path//file") == "https://example.com/path/file"

    def test_mixed(self):
        assert (
            remove_double_slashes("https://example.com///content//dam///images//photo.jpg")
            == "https://example.com/content/dam/images/photo.jpg"
        )

    def test_clean_paths_unchanged(self):
        assert remove_double_slashes("/content/dam/") == "/content/dam/"
        assert remove_double_slashes("/") == "/"


def test_is_locale_segment():
    """Locale segments are 2-letter or xx-YY / xx_YY codes."""
    assert is_locale_segment("en-US")
    assert is_locale_segment("fr_FR")
    assert is_locale_segment("us")
    assert not is_locale_segment("123")
    assert not is_locale_segment("images")
    assert not is_locale_segment("")
    assert not is_locale_segment(None)
