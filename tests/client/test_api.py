"""Tests for the REST client (mocked HTTP session)."""

from unittest.mock import Mock, patch
import pytest
import requests
from arrconf.client import ArrClient
from arrconf.utils.errors import NotFoundError, RemoteError


def _response(status_code=200, body=None, text=None, reason="OK"):
    response = Mock(status_code=status_code, reason=reason)
    response.ok = status_code < 400
    if body is not None:
        response.json = Mock(return_value=body)
        response.content = b"{}"
        response.text = str(body)
    else:
        response.json = Mock(side_effect=ValueError("No JSON object could be decoded"))
        response.content = (text or "").encode()
        response.text = text or ""
    return response


@pytest.fixture
def session():
    session = Mock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def client(session):
    return ArrClient("http://lidarr.local:8686/", "secret", timeout=12.0, session=session)


class TestRequests:
    """Request construction."""

    def test_api_key_header(self, client, session):
        assert session.headers["X-Api-Key"] == "secret"

    def test_get_url_and_timeout(self, client, session):
        session.request.return_value = _response(body={"id": 3, "name": "n"})

        assert client.get("notification", 3) == {"id": 3, "name": "n"}
        session.request.assert_called_once_with(
            "GET", "http://lidarr.local:8686/api/v1/notification/3", json=None, timeout=12.0
        )

    def test_timeout_override(self, client, session):
        session.request.return_value = _response(body=[])

        client.list("indexer", timeout=1.5)
        assert session.request.call_args.kwargs["timeout"] == 1.5

    def test_create_posts_payload(self, client, session):
        session.request.return_value = _response(status_code=201, body={"id": 9})

        client.create("downloadclient", {"name": "t"})
        method, url = session.request.call_args.args
        assert method == "POST"
        assert url.endswith("/api/v1/downloadclient")
        assert session.request.call_args.kwargs["json"] == {"name": "t"}

    def test_update_embeds_id(self, client, session):
        session.request.return_value = _response(status_code=202, body={"id": 4})

        client.update("customformat", 4, {"name": "cf"})
        method, url = session.request.call_args.args
        assert method == "PUT"
        assert url.endswith("/api/v1/customformat/4")
        assert session.request.call_args.kwargs["json"] == {"name": "cf", "id": 4}

    def test_delete_with_empty_body(self, client, session):
        session.request.return_value = _response(text="")

        assert client.delete("indexer", 2) is None
        assert session.request.call_args.args[0] == "DELETE"


class TestErrors:
    """Failure classification."""

    def test_not_found(self, client, session):
        session.request.return_value = _response(status_code=404, text="", reason="Not Found")

        with pytest.raises(NotFoundError) as exc_info:
            client.get("notification", 42, kind="notification_gotify")
        assert exc_info.value.status_code == 404
        assert exc_info.value.kind == "notification_gotify"

    def test_validation_errors_are_readable(self, client, session):
        session.request.return_value = _response(
            status_code=400,
            reason="Bad Request",
            body=[{"propertyName": "Host", "errorMessage": "'Host' must not be empty."}],
        )

        with pytest.raises(RemoteError) as exc_info:
            client.create("downloadclient", {}, kind="download_client_transmission")
        message = str(exc_info.value)
        assert message.startswith("Unable to create download_client_transmission, got error:")
        assert "Host: 'Host' must not be empty." in message

    def test_message_body(self, client, session):
        session.request.return_value = _response(status_code=500, reason="Server Error", body={"message": "boom"})

        with pytest.raises(RemoteError, match="boom"):
            client.list("indexer")

    def test_network_failure(self, client, session):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(RemoteError, match="refused") as exc_info:
            client.get("indexer", 1)
        assert not isinstance(exc_info.value, NotFoundError)

    def test_malformed_json(self, client, session):
        session.request.return_value = _response(text="<html>")

        with pytest.raises(RemoteError, match="malformed response"):
            client.get("indexer", 1)

    def test_list_requires_array(self, client, session):
        session.request.return_value = _response(body={"id": 1})

        with pytest.raises(RemoteError, match="expected a list"):
            client.list("notification")


class TestSession:
    """Default session construction."""

    @patch('arrconf.client.api.requests.Session')
    def test_default_session(self, mock_session_class):
        mock_session_class.return_value.headers = {}

        client = ArrClient("http://lidarr.local", "k")
        assert client.session is mock_session_class.return_value
        assert client.session.headers["X-Api-Key"] == "k"
