"""Application factory serving the registered locale tables."""

from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import BadRequest

from kivilocale.localization import LocaleRegistry, UnknownLocale, get_registry
from kivilocale.version import get_project_version

from .http import lookup_problem, problem_response
from .routes import register_routes


def create_app(registry: LocaleRegistry | None = None) -> Flask:
    """Create and configure the Flask application instance.

    Without an explicit ``registry`` the one built from the configured
    manifest is used.
    """

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["kivilocale.registry"] = registry if registry is not None else get_registry()

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        installed: LocaleRegistry = app.extensions["kivilocale.registry"]
        return jsonify(
            {
                "status": "ok",
                "version": get_project_version(),
                "locales": installed.locales(),
                "default_locale": installed.default_locale,
            }
        )

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    @app.errorhandler(UnknownLocale)
    def handle_unknown_locale(error: UnknownLocale):
        return lookup_problem(error).to_response()

    return app
