"""Manifest loader wrapping the schema models."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import ConfigurationError, LocaleManifest, LocaleManifestEntry

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
MANIFEST_FILE = CONFIG_DIRECTORY / "manifest.yaml"
TRANSLATIONS_DIRECTORY = Path(__file__).resolve().parents[1] / "translations"
MANIFEST_ENV_VAR = "KIVILOCALE_MANIFEST"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def manifest_path() -> Path:
    """Return the manifest location, honouring ``KIVILOCALE_MANIFEST``."""

    override = os.getenv(MANIFEST_ENV_VAR)
    return Path(override) if override else MANIFEST_FILE


def parse_manifest(raw_manifest: dict[str, Any]) -> LocaleManifest:
    try:
        return LocaleManifest.model_validate(raw_manifest)
    except ValidationError as error:
        raise ConfigurationError(f"Manifest validation failed: {error}") from error


@lru_cache(maxsize=4)
def _read_manifest(path: Path) -> LocaleManifest:
    if not path.exists():
        raise FileNotFoundError(f"Locale manifest not found: {path}")

    return parse_manifest(_load_yaml(path))


def load_manifest(path: Path | None = None) -> LocaleManifest:
    """Load the locale manifest, caching the parsed result per file.

    Without an explicit ``path`` the location is looked up on every call, so a
    changed ``KIVILOCALE_MANIFEST`` takes effect immediately.
    """

    return _read_manifest(Path(path) if path else manifest_path())


def locale_directory(path: Path | None = None) -> Path:
    """Return the directory holding the locale sources for a manifest.

    The bundled manifest points at the packaged ``translations`` directory;
    any other manifest keeps its locale files next to itself.
    """

    path = Path(path) if path else manifest_path()
    if path.resolve() == MANIFEST_FILE:
        return TRANSLATIONS_DIRECTORY
    return path.resolve().parent


def locale_source_path(entry: LocaleManifestEntry, directory: Path | None = None) -> Path:
    """Resolve the locale source file backing a manifest entry."""

    return (directory or TRANSLATIONS_DIRECTORY) / entry.resolved_filename


__all__ = [
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "LocaleManifest",
    "LocaleManifestEntry",
    "MANIFEST_ENV_VAR",
    "MANIFEST_FILE",
    "TRANSLATIONS_DIRECTORY",
    "load_manifest",
    "locale_directory",
    "locale_source_path",
    "manifest_path",
    "parse_manifest",
]
