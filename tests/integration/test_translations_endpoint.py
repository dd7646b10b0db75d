"""Integration tests for the translations API."""

from __future__ import annotations

from http import HTTPStatus

from flask.testing import FlaskClient

from kivilocale.app import create_app
from kivilocale.localization import LocaleRegistry


def test_translations_endpoint_returns_default_table(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/")
    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()

    assert payload["locale"] == "de"
    assert payload["namespace"] == "kivi"
    assert payload["available_locales"] == ["de"]
    assert payload["messages"]["Create invoice"] == "Buchung erstellen"
    assert payload["messages"]["The IBAN is missing."] == "Die IBAN fehlt."
    assert len(payload["messages"]) == 140


def test_translations_endpoint_normalises_locale_hint(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/?locale=de-AT")
    assert response.status_code == HTTPStatus.OK
    assert response.get_json()["locale"] == "de"


def test_translations_endpoint_respects_locale_path(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/de")
    assert response.status_code == HTTPStatus.OK
    assert response.get_json()["messages"]["Yes"] == "Ja"


def test_unknown_locale_returns_problem(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/fr")
    assert response.status_code == HTTPStatus.NOT_FOUND
    payload = response.get_json()

    assert payload["error"] == "unknown_locale"
    assert payload["locale"] == "fr"


def test_resolve_endpoint_substitutes_arguments(client: FlaskClient) -> None:
    response = client.get(
        "/api/v1/translations/de/resolve",
        query_string={"key": "Import documents from #1", "arg": "WebDAV"},
    )
    assert response.status_code == HTTPStatus.OK
    assert response.get_json() == {
        "locale": "de",
        "key": "Import documents from #1",
        "value": "Importiere Dateien von Quelle 'WebDAV'",
    }


def test_resolve_endpoint_reports_missing_translation(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/de/resolve", query_string={"key": "Maybe"})
    assert response.status_code == HTTPStatus.NOT_FOUND
    payload = response.get_json()

    assert payload["error"] == "missing_translation"
    assert payload["key"] == "Maybe"


def test_resolve_endpoint_requires_key(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/de/resolve")
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.get_json()["error"] == "bad_request"


def test_injected_registry_is_served(small_registry: LocaleRegistry) -> None:
    client = create_app(small_registry).test_client()

    response = client.get("/api/v1/translations/fr")
    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()
    assert payload["available_locales"] == ["de", "fr"]
    assert payload["messages"] == {"Yes": "Oui", "No": "Non"}


def test_empty_registry_has_no_default_table() -> None:
    client = create_app(LocaleRegistry()).test_client()

    response = client.get("/api/v1/translations/")
    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.get_json()["error"] == "unknown_locale"
