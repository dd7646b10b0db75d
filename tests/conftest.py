"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from kivilocale.app import create_app  # noqa: E402
from kivilocale.localization import LocaleRegistry, LocaleTable  # noqa: E402


@pytest.fixture()
def app() -> Flask:
    """Return an application serving the configured locale tables."""

    application = create_app()
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()


@pytest.fixture()
def small_registry() -> LocaleRegistry:
    """A registry holding two tiny hand-written locales."""

    registry = LocaleRegistry(default_locale="de", namespace="kivi")
    registry.register("de", LocaleTable("de", [("Yes", "Ja"), ("No", "Nein")]))
    registry.register("fr", LocaleTable("fr", [("Yes", "Oui"), ("No", "Non")]))
    return registry
