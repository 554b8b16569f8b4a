"""Tests for Locale."""

import pytest

from cfaudit.domain.locale import FIVE_LETTER_PATTERN, TWO_LETTER_PATTERN, Locale, LocaleType


def test_patterns():
    """Five-letter and two-letter patterns match only their shapes."""
    for code in ("en-US", "fr_FR", "de-DE"):
        assert FIVE_LETTER_PATTERN.match(code)
    for code in ("en", "en-US-", "en-US-X", "en_US_"):
        assert not FIVE_LETTER_PATTERN.match(code)
    for code in ("US", "fr"):
        assert TWO_LETTER_PATTERN.match(code)
    for code in ("U", "USA", ""):
        assert not TWO_LETTER_PATTERN.match(code)


class TestFromCode:
    """Tests for Locale.from_code()."""

    @pytest.mark.parametrize("code", [None, "", "   ", "invalid", "e1-US"])
    def test_rejects_non_locales(self, code):
        assert Locale.from_code(code) is None

    def test_five_letter_hyphen(self):
        locale = Locale.from_code("en-US")
        assert locale.type is LocaleType.FIVE_LETTER_LOCALE
        assert (locale.language, locale.country) == ("en", "US")

    def test_five_letter_underscore(self):
        locale = Locale.from_code("en_US")
        assert locale.code == "en_US"
        assert (locale.language, locale.country) == ("en", "US")

    def test_two_letter(self):
        locale = Locale.from_code("us")
        assert locale.code == "us"
        assert locale.type is LocaleType.TWO_LETTER_COUNTRY
        assert locale.language is None
        assert locale.country == "US"

    def test_strips_whitespace(self):
        assert Locale.from_code("  en-US  ").code == "en-US"


class TestFromPath:
    """Tests for Locale.from_path()."""

    def test_no_path(self):
        assert Locale.from_path(None) is None

    def test_no_locale(self):
        assert Locale.from_path("/content/dam/images/photo.jpg") is None

    @pytest.mark.parametrize(
        "path, code, kind",
        [
            ("/content/dam/en-US/images/photo.jpg", "en-US", LocaleType.FIVE_LETTER_LOCALE),
            ("/content/dam/en_US/images/photo.jpg", "en_US", LocaleType.FIVE_LETTER_LOCALE),
            ("/content/dam/US/images/photo.jpg", "US", LocaleType.TWO_LETTER_COUNTRY),
        ],
    )
    def test_extracts_first_locale(self, path, code, kind):
        locale = Locale.from_path(path)
        assert locale.code == code
        assert locale.type is kind


class TestReplaceInPath:
    """Tests for Locale.replace_in_path()."""

    def test_replaces_segment(self):
        locale = Locale.from_code("en-US")
        assert (
            locale.replace_in_path("/content/dam/en-US/images/photo.jpg", "fr-FR")
            == "/content/dam/fr-FR/images/photo.jpg"
        )

    def test_missing_segment_unchanged(self):
        locale = Locale.from_code("en-US")
        assert (
            locale.replace_in_path("/content/dam/fr-FR/images/photo.jpg", "de-DE")
            == "/content/dam/fr-FR/images/photo.jpg"
        )

    def test_no_code_or_path(self):
        assert Locale(None).replace_in_path("/content/dam/en-US/a.jpg", "fr-FR") == "/content/dam/en-US/a.jpg"
        assert Locale.from_code("en-US").replace_in_path(None, "fr-FR") is None


def test_is_valid_and_to_dict():
    """is_valid() needs a code; to_dict() exposes all fields."""
    assert Locale("en-US").is_valid()
    assert not Locale("").is_valid()
    assert not Locale(None).is_valid()
    assert Locale("en-US", LocaleType.FIVE_LETTER_LOCALE, "en", "US").to_dict() == {
        "code": "en-US",
        "type": "FIVE_LETTER_LOCALE",
        "language": "en",
        "country": "US",
    }
