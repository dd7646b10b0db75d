"""Locale manifest configuration."""

from .manifest import (
    ConfigurationError,
    LocaleManifest,
    LocaleManifestEntry,
    load_manifest,
    locale_directory,
    locale_source_path,
)

__all__ = [
    "ConfigurationError",
    "LocaleManifest",
    "LocaleManifestEntry",
    "load_manifest",
    "locale_directory",
    "locale_source_path",
]
