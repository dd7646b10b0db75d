"""Immutable locale tables mapping canonical strings to localized text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


class MissingTranslation(KeyError):
    """Raised when a key has no entry in a locale table."""

    def __init__(self, locale: str, key: str) -> None:
        super().__init__(key)
        self.locale = locale
        self.key = key

    def __str__(self) -> str:
        return f"No {self.locale!r} translation for {self.key!r}"


@dataclass(frozen=True)
class LocaleEntry:
    """A single authored pair of canonical key and localized value."""

    key: str
    value: str


class LocaleTable(Mapping[str, str]):
    """Read-only lookup table for exactly one locale.

    Tables are built from an ordered sequence of pairs. When a key is supplied
    more than once the later value replaces the earlier one, and the key is
    remembered in :attr:`duplicate_keys` so catalogue checks can flag it.
    """

    __slots__ = ("_locale", "_messages", "_duplicates")

    def __init__(
        self,
        locale: str,
        pairs: Iterable[LocaleEntry | tuple[str, str]] | Mapping[str, str] = (),
    ) -> None:
        if not locale:
            raise ValueError("Locale tables require a locale code")

        if isinstance(pairs, Mapping):
            pairs = pairs.items()

        messages: dict[str, str] = {}
        duplicates: list[str] = []
        for pair in pairs:
            key, value = (pair.key, pair.value) if isinstance(pair, LocaleEntry) else pair
            if key in messages and key not in duplicates:
                duplicates.append(key)
            messages[str(key)] = str(value)

        self._locale = locale
        self._messages = MappingProxyType(messages)
        self._duplicates = tuple(duplicates)

    @classmethod
    def from_pairs(
        cls, locale: str, pairs: Iterable[LocaleEntry | tuple[str, str]]
    ) -> LocaleTable:
        return cls(locale, pairs)

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def duplicate_keys(self) -> tuple[str, ...]:
        """Keys that were supplied more than once, in authoring order."""

        return self._duplicates

    @property
    def messages(self) -> Mapping[str, str]:
        return self._messages

    def resolve(self, key: str) -> str:
        """Return the localized value for ``key``.

        Raises :class:`MissingTranslation` when the key is absent; deciding
        what to show instead is left to the caller.
        """

        try:
            return self._messages[key]
        except KeyError:
            raise MissingTranslation(self._locale, key) from None

    def entries(self) -> tuple[LocaleEntry, ...]:
        return tuple(LocaleEntry(key, value) for key, value in self._messages.items())

    def __getitem__(self, key: str) -> str:
        return self.resolve(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocaleTable):
            return NotImplemented
        return self._locale == other._locale and dict(self._messages) == dict(other._messages)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LocaleTable(locale={self._locale!r}, entries={len(self)})"


__all__ = ["LocaleEntry", "LocaleTable", "MissingTranslation"]
