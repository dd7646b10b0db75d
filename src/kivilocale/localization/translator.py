"""Consumer-side helper that looks up and fills in translated strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .table import LocaleTable, MissingTranslation

PLACEHOLDER_PATTERN = re.compile(r"#\{\w+\}|#\d+")


def placeholders(text: str) -> set[str]:
    """Return the ``#1`` / ``#{name}`` tokens found in ``text``."""

    return set(PLACEHOLDER_PATTERN.findall(text))


def substitute(text: str, *args: Any, **kwargs: Any) -> str:
    """Replace positional ``#n`` or named ``#{name}`` tokens in ``text``."""

    if args and kwargs:
        raise TypeError("Use either positional or named placeholder values, not both")

    for index, value in enumerate(args, start=1):
        text = text.replace(f"#{index}", str(value))
    for name, value in kwargs.items():
        text = text.replace(f"#{{{name}}}", str(value))
    return text


@dataclass(frozen=True)
class Translator:
    """Callable helper for retrieving localized strings from one table.

    Keys without a (non-empty) translation are shown as written.
    """

    table: LocaleTable

    @property
    def locale(self) -> str:
        return self.table.locale

    def lookup(self, key: str) -> str:
        try:
            return self.table.resolve(key) or key
        except MissingTranslation:
            return key

    def __call__(self, key: str, *args: Any, **kwargs: Any) -> str:
        return substitute(self.lookup(key), *args, **kwargs)


__all__ = ["PLACEHOLDER_PATTERN", "Translator", "placeholders", "substitute"]
