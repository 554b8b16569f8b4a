"""
Language tree: which locales can stand in for one another.

Locales are grouped under a root (``fr-FR`` for the French family, ``US``
for the English-speaking countries). When a localised path is broken, its
siblings in the same group are tried, then the English fallbacks.
"""

from __future__ import annotations

import re

from cfaudit.domain.locale import FIVE_LETTER_PATTERN, TWO_LETTER_PATTERN

COUNTRY_CODE_GROUPS: dict[str, list[str]] = {
    "FR": ["FR", "MC"],
    "DE": ["DE", "AT", "LI"],
    "US": ["US", "GB", "CA", "AU", "NZ", "IE"],
    "ES": ["ES", "MX", "AR", "CO"],
    "IT": ["IT", "SM", "VA"],
    "CN": ["CN", "TW", "HK"],
    "RU": ["RU", "BY", "KZ"],
}

LOCALE_CODE_GROUPS: dict[str, list[str]] = {
    "fr-FR": ["fr-FR", "ca-FR", "fr-CA", "fr-BE", "fr-CH"],
    "de-DE": ["de-DE", "de-AT", "de-CH"],
    "en-US": ["en-US", "en-GB", "en-CA", "en-AU", "en-NZ"],
    "es-ES": ["es-ES", "es-MX", "es-AR", "ca-ES"],
    "it-IT": ["it-IT", "it-CH"],
    "zh-CN": ["zh-CN", "zh-TW", "zh-HK"],
    "ru-RU": ["ru-RU", "ru-BY"],
}

COUNTRY_TO_ROOT: dict[str, str] = {
    member: root for root, members in COUNTRY_CODE_GROUPS.items() for member in members
}

LOCALE_TO_ROOT: dict[str, str] = {
    member: root for root, members in LOCALE_CODE_GROUPS.items() for member in members
}

ENGLISH_FALLBACKS = [
    "us", "US", "en-us", "en_us", "en-US", "en_US",
    "gb", "GB", "en-gb", "en_gb", "en-GB", "en_GB",
]

SEPARATORS = ("-", "_")


def generate_case_variations(locale: str | None) -> list[str]:
    """Spell ``locale`` in every case and separator combination.

    The original spelling is excluded. ``fr-FR`` yields ``fr-fr``,
    ``FR-fr``, ``FR-FR``, ``fr_fr``, ``fr_FR``, ``FR_fr`` and ``FR_FR``.
    """
    if not locale:
        return []

    if TWO_LETTER_PATTERN.match(locale):
        variations = [locale.lower(), locale.upper()]
    elif FIVE_LETTER_PATTERN.match(locale):
        language, country = re.split(r"[-_]", locale)
        variations = []
        for sep in SEPARATORS:
            variations.extend(
                [
                    f"{language.lower()}{sep}{country.lower()}",
                    f"{language.lower()}{sep}{country.upper()}",
                    f"{language.upper()}{sep}{country.lower()}",
                    f"{language.upper()}{sep}{country.upper()}",
                ]
            )
    else:
        return []

    return [variation for variation in variations if variation != locale]


def find_root_for_locale(locale: str | None) -> str | None:
    """Return the group root ``locale`` belongs to, or None if unknown."""
    if not locale:
        return None
    if TWO_LETTER_PATTERN.match(locale):
        if locale in COUNTRY_CODE_GROUPS:
            return locale
        return COUNTRY_TO_ROOT.get(locale)
    if locale in LOCALE_CODE_GROUPS:
        return locale
    return LOCALE_TO_ROOT.get(locale)


def find_english_fallbacks() -> list[str]:
    return list(ENGLISH_FALLBACKS)


def find_similar_language_roots(locale: str | None) -> list[str]:
    """Candidate locale codes to try in place of ``locale``, best first.

    Order: case/separator variations, then the other members of the
    locale's group, then the English fallbacks. Duplicates and the original
    code are removed.
    """
    if not locale:
        return []

    candidates = generate_case_variations(locale)

    root = find_root_for_locale(locale)
    if root is not None:
        groups = COUNTRY_CODE_GROUPS if TWO_LETTER_PATTERN.match(locale) else LOCALE_CODE_GROUPS
        candidates.extend(groups.get(root, []))

    candidates.extend(find_english_fallbacks())

    # dict keeps first-seen order
    return [code for code in dict.fromkeys(candidates) if code != locale]
