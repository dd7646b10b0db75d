"""Reader for ``setupLocale`` locale source files.

Locale data is authored as a single call registering a mapping literal, for
example::

    namespace("kivi").setupLocale({
    "Yes":"Ja",
    "No":"Nein"
    });

The two-argument form ``setupLocale("de", {...})`` is accepted as well. Entries
are returned in authoring order with duplicates retained so that table
construction and catalogue checks see exactly what was written.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from .table import LocaleEntry, LocaleTable

logger = logging.getLogger(__name__)

_STRING = r'"(?:[^"\\\n]|\\.)*"'
_HEADER_PATTERN = re.compile(
    r"""
    \A\s*
    (?:namespace\(\s*(?P<namespace>"[^"]*")\s*\)\s*\.\s*)?
    setupLocale\(\s*
    (?:(?P<locale>"[^"]*")\s*,\s*)?
    \{
    """,
    re.VERBOSE,
)
_ENTRY_PATTERN = re.compile(rf"\s*(?P<key>{_STRING})\s*:\s*(?P<value>{_STRING})\s*")
_FOOTER_PATTERN = re.compile(r"\s*\}\s*\)\s*;?\s*\Z")
_ESCAPE_PATTERN = re.compile(r"\\(u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|.)", re.DOTALL)
_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


class LocaleSyntaxError(ValueError):
    """Raised when a locale source file cannot be parsed."""

    def __init__(self, message: str, line: int | None = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


@dataclass(frozen=True)
class ParsedLocale:
    """Entries read from a locale source file, in authoring order."""

    locale: str
    namespace: str | None
    entries: tuple[LocaleEntry, ...]

    def to_table(self) -> LocaleTable:
        return LocaleTable.from_pairs(self.locale, self.entries)


def _unescape(literal: str) -> str:
    def replace(match: re.Match[str]) -> str:
        token = match.group(1)
        if token[0] in "ux" and len(token) > 1:
            return chr(int(token[1:], 16))
        return _SIMPLE_ESCAPES.get(token, token)

    decoded = _ESCAPE_PATTERN.sub(replace, literal[1:-1])
    # Join \uD83D\uDE00-style surrogate pairs into one code point.
    return decoded.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


def _line_of(text: str, position: int) -> int:
    """Line number of the first non-blank character at or after ``position``."""

    remainder = text[position:]
    position += len(remainder) - len(remainder.lstrip())
    return text.count("\n", 0, position) + 1


def parse_locale_source(
    text: str,
    locale: str | None = None,
    *,
    default_locale: str | None = None,
) -> ParsedLocale:
    """Parse locale source text into a :class:`ParsedLocale`.

    ``locale`` takes precedence over a code given in the call itself, which in
    turn takes precedence over ``default_locale``.
    """

    header = _HEADER_PATTERN.match(text)
    if header is None:
        raise LocaleSyntaxError("expected a setupLocale({...}) call", line=1)

    namespace = _unescape(header.group("namespace")) if header.group("namespace") else None
    declared = _unescape(header.group("locale")) if header.group("locale") else None
    code = locale or declared or default_locale
    if not code:
        raise LocaleSyntaxError("no locale code given and none declared in the source")

    entries: list[LocaleEntry] = []
    position = header.end()
    while True:
        # An empty mapping, or a trailing comma after the last entry.
        if _FOOTER_PATTERN.match(text, position) is not None:
            break

        match = _ENTRY_PATTERN.match(text, position)
        if match is None:
            raise LocaleSyntaxError("expected a \"key\":\"value\" entry", _line_of(text, position))
        entries.append(LocaleEntry(_unescape(match.group("key")), _unescape(match.group("value"))))
        position = match.end()

        if text.startswith(",", position):
            position += 1
            continue

        if _FOOTER_PATTERN.match(text, position) is None:
            raise LocaleSyntaxError(
                "expected ',' or the closing '});'", _line_of(text, position)
            )
        break

    logger.debug("Parsed %d entries for locale %s", len(entries), code)
    return ParsedLocale(locale=code, namespace=namespace, entries=tuple(entries))


def load_locale_file(path: Path | str, locale: str | None = None) -> ParsedLocale:
    """Read and parse a locale source file.

    The locale code falls back to the code declared in the file and then to
    the file stem (``de.js`` registers ``de``).
    """

    source = Path(path)
    text = source.read_text(encoding="utf-8-sig")
    try:
        return parse_locale_source(text, locale, default_locale=source.stem)
    except LocaleSyntaxError as exc:
        raise LocaleSyntaxError(f"{source.name}: {exc}") from exc


__all__ = ["LocaleSyntaxError", "ParsedLocale", "load_locale_file", "parse_locale_source"]
