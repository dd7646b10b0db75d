"""Integration tests for application endpoints."""

from http import HTTPStatus

from flask.testing import FlaskClient

from kivilocale.version import get_project_version


def test_health_endpoint(client: FlaskClient) -> None:
    """Ensure the health endpoint returns a successful status payload."""
    response = client.get("/health")
    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()
    assert payload["status"] == "ok"
    assert payload["version"] == get_project_version()
    assert payload["locales"] == ["de"]
    assert payload["default_locale"] == "de"
    assert response.mimetype == "application/json"
