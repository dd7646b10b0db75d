"""Locale tables, the registry that holds them, and translation helpers."""

from .parser import LocaleSyntaxError, ParsedLocale, load_locale_file, parse_locale_source
from .registry import LocaleRegistry, UnknownLocale, get_registry, load_registry
from .table import LocaleEntry, LocaleTable, MissingTranslation
from .translator import Translator, placeholders, substitute

__all__ = [
    "LocaleEntry",
    "LocaleRegistry",
    "LocaleSyntaxError",
    "LocaleTable",
    "MissingTranslation",
    "ParsedLocale",
    "Translator",
    "UnknownLocale",
    "get_registry",
    "load_locale_file",
    "load_registry",
    "parse_locale_source",
    "placeholders",
    "substitute",
]
