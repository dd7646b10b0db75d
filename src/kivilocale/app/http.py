"""HTTP helper utilities shared across Flask blueprints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from flask import jsonify

from kivilocale.localization import MissingTranslation, UnknownLocale


@dataclass(frozen=True)
class ProblemResponse:
    """Lightweight representation of an RFC 7807-style error payload."""

    error: str
    status: int
    message: str | None = None
    extra: Mapping[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return the serialisable payload, with extra fields merged in."""

        payload: dict[str, Any] = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        if self.extra:
            payload.update(self.extra)
        return payload

    def to_response(self) -> tuple[Any, int]:
        """Convert the problem payload into a Flask response tuple."""

        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    **extra: Any,
) -> ProblemResponse:
    """Build a problem payload; extra keyword arguments join the body."""

    return ProblemResponse(error=error, status=status, message=message, extra=extra or None)


def lookup_problem(error: UnknownLocale | MissingTranslation) -> ProblemResponse:
    """Describe a failed locale or key lookup as a 404 problem payload.

    Missing keys carry both the locale and the key so clients can report
    which string still needs a translation.
    """

    if isinstance(error, MissingTranslation):
        return problem_response(
            "missing_translation",
            status=404,
            message=str(error),
            locale=error.locale,
            key=error.key,
        )
    return problem_response("unknown_locale", status=404, message=str(error), locale=error.locale)


__all__ = ["ProblemResponse", "lookup_problem", "problem_response"]
