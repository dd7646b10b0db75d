"""Static checks over authored locale entries."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field

from .parser import ParsedLocale
from .translator import placeholders


@dataclass(frozen=True)
class PlaceholderMismatch:
    key: str
    value: str
    missing: frozenset[str]
    unexpected: frozenset[str]


@dataclass(frozen=True)
class ValidationReport:
    """Issues found in a single locale source."""

    locale: str
    duplicates: dict[str, list[str]] = field(default_factory=dict)
    placeholder_mismatches: list[PlaceholderMismatch] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.duplicates and not self.placeholder_mismatches

    def messages(self) -> list[str]:
        lines: list[str] = []
        for key, values in self.duplicates.items():
            variants = "identical values" if len(set(values)) == 1 else "conflicting values"
            lines.append(
                f"[duplicate] {self.locale}: {key!r} defined {len(values)} times ({variants})"
            )
        for mismatch in self.placeholder_mismatches:
            details = []
            if mismatch.missing:
                details.append(f"missing {', '.join(sorted(mismatch.missing))}")
            if mismatch.unexpected:
                details.append(f"unexpected {', '.join(sorted(mismatch.unexpected))}")
            lines.append(f"[placeholder] {self.locale}: {mismatch.key!r} {'; '.join(details)}")
        return lines


def find_duplicate_keys(parsed: ParsedLocale) -> dict[str, list[str]]:
    """Return keys authored more than once with every value given for them."""

    values: dict[str, list[str]] = defaultdict(list)
    for entry in parsed.entries:
        values[entry.key].append(entry.value)
    return {key: found for key, found in values.items() if len(found) > 1}


def find_placeholder_mismatches(parsed: ParsedLocale) -> list[PlaceholderMismatch]:
    """Return entries whose value does not carry the key's placeholders."""

    mismatches: list[PlaceholderMismatch] = []
    for entry in parsed.entries:
        expected = placeholders(entry.key)
        found = placeholders(entry.value)
        if expected != found:
            mismatches.append(
                PlaceholderMismatch(
                    key=entry.key,
                    value=entry.value,
                    missing=frozenset(expected - found),
                    unexpected=frozenset(found - expected),
                )
            )
    return mismatches


def validate_locale(parsed: ParsedLocale) -> ValidationReport:
    return ValidationReport(
        locale=parsed.locale,
        duplicates=find_duplicate_keys(parsed),
        placeholder_mismatches=find_placeholder_mismatches(parsed),
    )


__all__ = [
    "PlaceholderMismatch",
    "ValidationReport",
    "find_duplicate_keys",
    "find_placeholder_mismatches",
    "validate_locale",
]
