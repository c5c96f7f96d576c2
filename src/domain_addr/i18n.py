"""
Internationalization (i18n) module for the domain-addr package.

Provides translations for all user-facing CLI messages in German (de) and
English (en). Library exceptions carry English messages; the CLI translates
their error codes through the ``error.<code>`` keys below.
"""

from typing import Optional


# Supported languages
SUPPORTED_LANGUAGES = frozenset({"de", "en"})
DEFAULT_LANGUAGE = "en"


# Translation dictionary with all messages
# Structure: {message_key: {language_code: translated_message}}
TRANSLATIONS: dict[str, dict[str, str]] = {
    # Tokenizer and label errors
    "error.empty_input": {
        "de": "Name ist leer",
        "en": "Name is empty",
    },
    "error.empty_label": {
        "de": "Name enthält ein leeres Label",
        "en": "Name contains an empty label",
    },
    "error.multiple_trailing_dots": {
        "de": "Name endet mit mehr als einem Punkt",
        "en": "Name has more than one trailing dot",
    },
    "error.too_many_labels": {
        "de": "Name hat zu viele Labels",
        "en": "Name has too many labels",
    },
    "error.too_long": {
        "de": "Name oder Label ist zu lang",
        "en": "Name or label is too long",
    },
    "error.ip_address": {
        "de": "Eingabe ist eine IP-Adresse",
        "en": "Input is an IP address",
    },
    "error.empty": {
        "de": "Label ist leer",
        "en": "Label is empty",
    },
    "error.invalid_char": {
        "de": "Label enthält ungültige Zeichen",
        "en": "Label contains invalid characters",
    },
    "error.leading_or_trailing_hyphen": {
        "de": "Label beginnt oder endet mit einem Bindestrich",
        "en": "Label starts or ends with a hyphen",
    },
    "error.idna_error": {
        "de": "IDNA-Kodierung fehlgeschlagen",
        "en": "IDNA encoding failed",
    },

    # Domain and DNS name errors
    "error.invalid_syntax": {
        "de": "Name ist syntaktisch ungültig",
        "en": "Name is syntactically invalid",
    },
    "error.invalid_label": {
        "de": "Name enthält ein ungültiges Label",
        "en": "Name contains an invalid label",
    },
    "error.not_a_registrable_domain": {
        "de": "Name ist ein öffentliches Suffix ohne registrierbares Label",
        "en": "Name is a public suffix without a registrable label",
    },
    "error.numeric_tld": {
        "de": "Top-Level-Label darf nicht rein numerisch sein",
        "en": "Top-level label must not be all numeric",
    },
    "error.is_ip_address": {
        "de": "Eingabe ist eine IP-Adresse, kein Domainname",
        "en": "Input is an IP address, not a domain name",
    },
    "error.no_valid_root": {
        "de": "DNS-Name hat keine gültige Stammdomain",
        "en": "DNS name has no valid root domain",
    },

    # Rule list errors
    "error.invalid_rule": {
        "de": "Ungültige Regel in der Suffixliste",
        "en": "Invalid rule in the suffix list",
    },
    "error.read_error": {
        "de": "Suffixliste konnte nicht gelesen werden",
        "en": "Could not read the suffix list",
    },
    "error.write_error": {
        "de": "Suffixliste konnte nicht geschrieben werden",
        "en": "Could not write the suffix list",
    },
    "error.download_error": {
        "de": "Suffixliste konnte nicht heruntergeladen werden",
        "en": "Could not download the suffix list",
    },

    # Name check output
    "check.valid": {
        "de": "Gültig",
        "en": "Valid",
    },
    "check.invalid": {
        "de": "Ungültig",
        "en": "Invalid",
    },
    "check.root_label": {
        "de": "Stammdomain",
        "en": "Root",
    },
    "check.suffix_label": {
        "de": "Suffix",
        "en": "Suffix",
    },
    "check.prefix_label": {
        "de": "Präfix",
        "en": "Prefix",
    },
    "check.section_label": {
        "de": "Abschnitt",
        "en": "Section",
    },
    "check.unknown_suffix": {
        "de": "nicht gelistet (Standardregel)",
        "en": "not listed (default rule)",
    },
    "check.summary": {
        "de": "{valid} von {total} Namen gültig",
        "en": "{valid} of {total} names valid",
    },

    # CLI messages
    "cli.config_loaded": {
        "de": "Konfiguration geladen aus {path}",
        "en": "Configuration loaded from {path}",
    },
    "cli.config_not_found": {
        "de": "Konfigurationsdatei nicht gefunden: {path}",
        "en": "Configuration file not found: {path}",
    },
    "cli.config_created": {
        "de": "Konfigurationsdatei erstellt: {path}",
        "en": "Configuration file created: {path}",
    },
    "cli.config_exists": {
        "de": "Konfigurationsdatei existiert bereits: {path} (--force zum Überschreiben)",
        "en": "Configuration file already exists: {path} (use --force to overwrite)",
    },
    "cli.config_save_failed": {
        "de": "Konfiguration konnte nicht gespeichert werden: {path}",
        "en": "Could not save configuration: {path}",
    },
    "cli.config_valid": {
        "de": "Konfiguration ist gültig",
        "en": "Configuration is valid",
    },
    "cli.config_invalid": {
        "de": "Konfiguration ist ungültig",
        "en": "Configuration is invalid",
    },
    "cli.input_not_found": {
        "de": "Eingabedatei nicht gefunden: {path}",
        "en": "Input file not found: {path}",
    },
    "cli.input_empty": {
        "de": "Keine Namen in Datei gefunden: {path}",
        "en": "No names found in file: {path}",
    },
    "cli.output_written": {
        "de": "Ergebnisse gespeichert in {path}",
        "en": "Results written to {path}",
    },
    "cli.update_started": {
        "de": "Lade Suffixliste von {url}",
        "en": "Downloading suffix list from {url}",
    },
    "cli.update_completed": {
        "de": "Suffixliste gespeichert: {path} ({count} Regeln)",
        "en": "Suffix list saved: {path} ({count} rules)",
    },
    "cli.update_failed": {
        "de": "Aktualisierung der Suffixliste fehlgeschlagen",
        "en": "Suffix list update failed",
    },
    "cli.interrupted": {
        "de": "Abgebrochen",
        "en": "Interrupted",
    },

    # Self-test messages
    "selftest.header": {
        "de": "Selbsttest der Suffixregeln",
        "en": "Suffix rule self-test",
    },
    "selftest.config_validation": {
        "de": "Konfigurationsprüfung",
        "en": "Configuration validation",
    },
    "selftest.warnings": {
        "de": "Warnungen:",
        "en": "Warnings:",
    },
    "selftest.known_answers": {
        "de": "Referenzprüfungen",
        "en": "Known-answer checks",
    },
    "selftest.duration": {
        "de": "Dauer",
        "en": "Duration",
    },
    "selftest.passed": {
        "de": "Selbsttest bestanden",
        "en": "Self-test passed",
    },
    "selftest.failed": {
        "de": "Selbsttest fehlgeschlagen",
        "en": "Self-test failed",
    },
    "selftest.config_valid": {
        "de": "Konfiguration gültig",
        "en": "Configuration valid",
    },
    "selftest.config_invalid": {
        "de": "Konfiguration ungültig: {errors}",
        "en": "Configuration invalid: {errors}",
    },
    "selftest.rules_loaded": {
        "de": "Suffixliste geladen ({count} Regeln)",
        "en": "Suffix list loaded ({count} rules)",
    },
    "selftest.rules_failed": {
        "de": "Suffixliste konnte nicht geladen werden: {error}",
        "en": "Could not load suffix list: {error}",
    },
    "selftest.check_passed": {
        "de": "OK: {name}",
        "en": "OK: {name}",
    },
    "selftest.check_failed": {
        "de": "FEHLER: {name} (erwartet {expected}, erhalten {actual})",
        "en": "FAILED: {name} (expected {expected}, got {actual})",
    },
}


def get_message(
    key: str,
    language: Optional[str] = None,
    **kwargs,
) -> str:
    """
    Get a translated message by key.

    Args:
        key: The message key (e.g., 'error.numeric_tld')
        language: Language code ('de' or 'en'). Defaults to DEFAULT_LANGUAGE.
        **kwargs: Format arguments for the message template

    Returns:
        The translated and formatted message string.
        If the key is not found, returns the key itself.
        If the language is not found, falls back to DEFAULT_LANGUAGE.

    Examples:
        >>> get_message('check.valid', 'de')
        'Gültig'
        >>> get_message('check.summary', 'en', valid=2, total=3)
        '2 of 3 names valid'
    """
    # Use default language if not specified or invalid
    if language is None or language not in SUPPORTED_LANGUAGES:
        language = DEFAULT_LANGUAGE

    translations = TRANSLATIONS.get(key)

    if translations is None:
        # Key not found, return the key itself
        return key

    message = translations.get(language)

    if message is None:
        message = translations.get(DEFAULT_LANGUAGE)

    if message is None:
        return key

    # Unformatted template when an argument is missing
    if kwargs:
        try:
            message = message.format(**kwargs)
        except KeyError:
            return message

    return message


def get_error_message(code: str, language: Optional[str] = None) -> str:
    """Translate an error code from an AddrError into a short message."""
    return get_message(f"error.{code}", language)


def get_all_message_keys() -> set[str]:
    """
    Get all available message keys.

    Returns:
        Set of all message keys in the translation dictionary.
    """
    return set(TRANSLATIONS.keys())


def has_translation(key: str, language: str) -> bool:
    """
    Check if a translation exists for a key and language.

    Args:
        key: The message key
        language: The language code

    Returns:
        True if translation exists, False otherwise.
    """
    translations = TRANSLATIONS.get(key)
    if translations is None:
        return False
    return language in translations


def get_missing_translations(language: str) -> set[str]:
    """Get all message keys that are missing translations for a language."""
    missing = set()
    for key, translations in TRANSLATIONS.items():
        if language not in translations:
            missing.add(key)
    return missing


def validate_translations() -> dict[str, set[str]]:
    """
    Validate that all languages have all translations.

    Returns:
        Dictionary mapping language codes to sets of missing message keys.
        Empty sets indicate complete translations.
    """
    result = {}
    for language in SUPPORTED_LANGUAGES:
        result[language] = get_missing_translations(language)
    return result
