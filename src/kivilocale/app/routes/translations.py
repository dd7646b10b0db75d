"""Expose registered locale tables to front-end consumers."""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from kivilocale.app.http import lookup_problem, problem_response
from kivilocale.localization import (
    LocaleRegistry,
    LocaleTable,
    MissingTranslation,
    Translator,
)

logger = logging.getLogger(__name__)

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")


def _registry() -> LocaleRegistry:
    return current_app.extensions["kivilocale.registry"]


def _table_payload(registry: LocaleRegistry, table: LocaleTable) -> dict[str, Any]:
    return {
        "locale": table.locale,
        "namespace": registry.namespace,
        "available_locales": registry.locales(),
        "messages": dict(table.messages),
    }


@blueprint.get("/")
def get_default_translations():
    """Return the table for the requested or default locale."""

    registry = _registry()
    locale = registry.normalise_locale(request.args.get("locale"))
    if locale is None:
        return problem_response(
            "unknown_locale", status=404, message="No locales are registered"
        ).to_response()
    return jsonify(_table_payload(registry, registry.get(locale))), 200


@blueprint.get("/<locale>")
def get_locale_translations(locale: str):
    """Return the table registered for a specific locale code."""

    registry = _registry()
    return jsonify(_table_payload(registry, registry.get(locale))), 200


@blueprint.get("/<locale>/resolve")
def resolve_translation(locale: str):
    """Resolve one key, filling ``#1``-style placeholders from ``arg`` values."""

    key = request.args.get("key")
    if not key:
        raise BadRequest("Query parameter 'key' is required")

    table = _registry().get(locale)
    try:
        table.resolve(key)
    except MissingTranslation as exc:
        logger.info("Missing %s translation requested: %r", locale, key)
        return lookup_problem(exc).to_response()

    value = Translator(table)(key, *request.args.getlist("arg"))
    return jsonify({"locale": locale, "key": key, "value": value}), 200
