"""
Property-based tests for internationalization (i18n) module.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from domain_addr.enums import (
    DnsErrorCode,
    DomainErrorCode,
    LabelErrorCode,
    RuleListErrorCode,
    TokenizeErrorCode,
)
from domain_addr.i18n import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    TRANSLATIONS,
    get_all_message_keys,
    get_error_message,
    get_message,
    get_missing_translations,
    has_translation,
    validate_translations,
)


ALL_ERROR_CODES = [
    code.value
    for enum_class in (TokenizeErrorCode, LabelErrorCode, DomainErrorCode, DnsErrorCode, RuleListErrorCode)
    for code in enum_class
]


class TestTranslationCoverageProperty:
    """Both languages have all message translations."""

    def test_all_languages_have_all_translations(self) -> None:
        assert len(get_all_message_keys()) > 0

        for language in SUPPORTED_LANGUAGES:
            missing = get_missing_translations(language)
            assert len(missing) == 0, (
                f"Language '{language}' is missing translations for: {missing}"
            )

        assert all(not missing for missing in validate_translations().values())

    @given(key=st.sampled_from(list(TRANSLATIONS.keys())))
    @settings(max_examples=100)
    def test_every_key_has_both_languages(self, key: str) -> None:
        for language in SUPPORTED_LANGUAGES:
            assert has_translation(key, language)
            assert TRANSLATIONS[key][language].strip()

    @given(code=st.sampled_from(ALL_ERROR_CODES))
    def test_every_error_code_has_a_message(self, code: str) -> None:
        for language in SUPPORTED_LANGUAGES:
            assert has_translation(f"error.{code}", language)
            assert get_error_message(code, language) != f"error.{code}"


class TestGetMessage:
    """Lookup, fallback and formatting."""

    def test_languages_differ(self) -> None:
        assert get_message("check.valid", "de") == "Gültig"
        assert get_message("check.valid", "en") == "Valid"

    def test_formatting(self) -> None:
        assert get_message("check.summary", "en", valid=2, total=3) == "2 of 3 names valid"

    def test_missing_format_argument_keeps_template(self) -> None:
        assert get_message("check.summary", "en", valid=2) == TRANSLATIONS["check.summary"]["en"]

    def test_unknown_key_returns_key(self) -> None:
        assert get_message("no.such.key", "en") == "no.such.key"

    @given(language=st.one_of(st.none(), st.text(max_size=5)))
    def test_unsupported_language_falls_back_to_default(self, language) -> None:
        expected = language if language in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE
        assert get_message("check.invalid", language) == TRANSLATIONS["check.invalid"][expected]
