"""Registry of locale tables keyed by locale code."""

from __future__ import annotations

import logging
from functools import cache
from pathlib import Path

from kivilocale.config import (
    LocaleManifest,
    load_manifest,
    locale_directory,
    locale_source_path,
)

from .parser import load_locale_file
from .table import LocaleTable

logger = logging.getLogger(__name__)


class UnknownLocale(LookupError):
    """Raised when no table is registered for a locale code."""

    def __init__(self, locale: str) -> None:
        super().__init__(locale)
        self.locale = locale

    def __str__(self) -> str:
        return f"No locale table registered for {self.locale!r}"


class LocaleRegistry:
    """Holds the installed locale tables.

    Components that need translations receive a registry instead of reaching
    for module state, so tests can build registries with any set of locales.
    Tables are registered once during start-up and only read afterwards.
    """

    def __init__(self, default_locale: str | None = None, namespace: str | None = None) -> None:
        self._tables: dict[str, LocaleTable] = {}
        self._default_locale = default_locale
        self.namespace = namespace

    @property
    def default_locale(self) -> str | None:
        if self._default_locale is not None:
            return self._default_locale
        return next(iter(self._tables), None)

    def register(self, locale: str, table: LocaleTable) -> None:
        """Install ``table`` for ``locale``, replacing any existing table."""

        if table.locale != locale:
            raise ValueError(
                f"Cannot register the {table.locale!r} table under locale {locale!r}"
            )

        existing = self._tables.get(locale)
        if existing is None:
            logger.debug("Registered locale %s with %d entries", locale, len(table))
        elif existing == table:
            logger.debug("Locale %s re-registered with identical entries", locale)
        else:
            logger.warning("Replacing registered table for locale %s", locale)

        if table.duplicate_keys:
            logger.warning(
                "Locale %s defines %d duplicate keys; later entries win: %s",
                locale,
                len(table.duplicate_keys),
                ", ".join(table.duplicate_keys),
            )

        self._tables[locale] = table

    def get(self, locale: str) -> LocaleTable:
        try:
            return self._tables[locale]
        except KeyError:
            raise UnknownLocale(locale) from None

    def resolve(self, locale: str, key: str) -> str:
        return self.get(locale).resolve(key)

    def locales(self) -> list[str]:
        return sorted(self._tables)

    def normalise_locale(self, locale: str | None) -> str | None:
        """Map a locale hint such as ``de-DE`` onto a registered code."""

        if not locale:
            return self.default_locale

        normalized = locale.strip().lower().replace("_", "-").split("-")[0]
        return normalized if normalized in self._tables else self.default_locale

    def __contains__(self, locale: object) -> bool:
        return locale in self._tables

    def __len__(self) -> int:
        return len(self._tables)


def load_registry(manifest: LocaleManifest, directory: Path | None = None) -> LocaleRegistry:
    """Build a registry holding every locale declared in ``manifest``.

    Locale sources are looked up in ``directory``, defaulting to the packaged
    translations.
    """

    registry = LocaleRegistry(default_locale=manifest.default_locale, namespace=manifest.namespace)
    for entry in manifest.locales:
        parsed = load_locale_file(locale_source_path(entry, directory), locale=entry.code)
        if parsed.namespace and parsed.namespace != manifest.namespace:
            logger.warning(
                "Locale %s is declared for namespace %s, expected %s",
                entry.code,
                parsed.namespace,
                manifest.namespace,
            )
        registry.register(entry.code, parsed.to_table())
    return registry


@cache
def get_registry() -> LocaleRegistry:
    """Return the registry built from the configured manifest."""

    return load_registry(load_manifest(), locale_directory())


__all__ = ["LocaleRegistry", "UnknownLocale", "get_registry", "load_registry"]
