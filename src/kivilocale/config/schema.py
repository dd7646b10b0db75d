"""Pydantic models describing the locale manifest."""

from __future__ import annotations

import re
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_LOCALE_CODE = re.compile(r"^[a-z]{2,3}$")


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class LocaleManifestEntry(ImmutableModel):
    """A locale declared in the manifest and the source file backing it."""

    code: str
    filename: str | None = Field(default=None, alias="file")
    name: str | None = None

    @field_validator("code", mode="before")
    @classmethod
    def _normalise_code(cls, value: object) -> str:
        if not isinstance(value, str):
            raise ConfigurationError("Locale codes must be strings")
        code = value.strip().lower()
        if not _LOCALE_CODE.match(code):
            raise ConfigurationError(f"Invalid locale code: {value!r}")
        return code

    @property
    def resolved_filename(self) -> str:
        return self.filename or f"{self.code}.js"


class LocaleManifest(ImmutableModel):
    """Top-level manifest listing the installed locales."""

    namespace: str = "kivi"
    default_locale: str
    locales: tuple[LocaleManifestEntry, ...]

    @field_validator("default_locale", mode="before")
    @classmethod
    def _normalise_default(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _validate_locales(self) -> LocaleManifest:
        if not self.locales:
            raise ConfigurationError("Manifest must declare at least one locale")

        codes = [entry.code for entry in self.locales]
        duplicates = sorted({code for code in codes if codes.count(code) > 1})
        if duplicates:
            raise ConfigurationError(f"Duplicate locale codes in manifest: {duplicates}")

        if self.default_locale not in codes:
            raise ConfigurationError(
                f"Default locale {self.default_locale!r} is not declared in the manifest"
            )
        return self

    @property
    def codes(self) -> Sequence[str]:
        return tuple(entry.code for entry in self.locales)

    def get_entry(self, code: str) -> LocaleManifestEntry:
        for entry in self.locales:
            if entry.code == code:
                return entry
        raise KeyError(code)


__all__ = [
    "ConfigurationError",
    "ImmutableModel",
    "LocaleManifest",
    "LocaleManifestEntry",
]
