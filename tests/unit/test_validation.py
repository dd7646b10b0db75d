"""Tests for static locale source checks."""

from __future__ import annotations

from pathlib import Path

import pytest

from kivilocale.config import load_manifest, locale_source_path
from kivilocale.localization import load_locale_file, parse_locale_source
from kivilocale.localization.validation import (
    find_duplicate_keys,
    find_placeholder_mismatches,
    validate_locale,
)

REPO_ROOT = Path(__file__).resolve().parents[2]


def test_reports_duplicate_keys_with_all_values() -> None:
    parsed = parse_locale_source(
        'setupLocale({"Copy":"Kopieren","Copy":"Kopie","Yes":"Ja"});', "de"
    )

    assert find_duplicate_keys(parsed) == {"Copy": ["Kopieren", "Kopie"]}


def test_reports_placeholder_mismatches() -> None:
    parsed = parse_locale_source(
        'setupLocale({"Import from #1":"Importieren","Field #{title}":"Feld #{name}"});',
        "de",
    )

    mismatches = find_placeholder_mismatches(parsed)

    assert [mismatch.key for mismatch in mismatches] == ["Import from #1", "Field #{title}"]
    assert mismatches[0].missing == frozenset({"#1"})
    assert mismatches[1].missing == frozenset({"#{title}"})
    assert mismatches[1].unexpected == frozenset({"#{name}"})


def test_report_messages() -> None:
    parsed = parse_locale_source(
        'setupLocale({"A":"a","A":"a","B #1":"b"});', "de"
    )

    report = validate_locale(parsed)

    assert not report.ok
    assert report.messages() == [
        "[duplicate] de: 'A' defined 2 times (identical values)",
        "[placeholder] de: 'B #1' missing #1",
    ]


def test_shipped_catalogues_have_consistent_placeholders() -> None:
    manifest = load_manifest()

    for entry in manifest.locales:
        parsed = load_locale_file(locale_source_path(entry), locale=entry.code)
        report = validate_locale(parsed)

        assert report.placeholder_mismatches == []
        assert list(report.duplicates) == ["The IBAN is missing."]
        assert len(parsed.entries) == 141


def test_validate_translations_script(capsys: pytest.CaptureFixture[str]) -> None:
    import importlib.util

    spec = importlib.util.spec_from_file_location(
        "validate_translations", REPO_ROOT / "scripts" / "validate_translations.py"
    )
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    assert module.main([]) == 0
    assert module.main(["--fail-on-duplicates"]) == 1

    output = capsys.readouterr().out
    assert "[duplicate] de: 'The IBAN is missing.' defined 2 times (identical values)" in output
