import http

import httpx
import pytest

from opmlkit.http_client import Client, get_client


class TestClient:
    @pytest.fixture
    def requests(self):
        return []

    @pytest.fixture
    def transport(self, requests):
        def _handle(request):
            requests.append(request)
            return httpx.Response(http.HTTPStatus.NOT_FOUND, content=b"gone")

        return httpx.MockTransport(_handle)

    def test_stream_status_not_checked(self, transport):
        with Client(transport=transport).stream("https://example.com") as response:
            assert response.status_code == http.HTTPStatus.NOT_FOUND

    def test_default_user_agent(self, transport, requests):
        with Client(transport=transport).stream("https://example.com"):
            pass
        assert requests[0].headers["User-Agent"] == f"python-httpx/{httpx.__version__}"

    def test_headers(self, transport, requests):
        with Client({"Accept": "text/x-opml"}, transport=transport).stream(
            "https://example.com"
        ):
            pass
        assert requests[0].headers["Accept"] == "text/x-opml"

    def test_user_agent_from_settings(self, transport, requests, monkeypatch):
        monkeypatch.setenv("OPMLKIT_USER_AGENT", "Feedreader/1.0")
        with Client(transport=transport).stream("https://example.com"):
            pass
        assert requests[0].headers["User-Agent"] == "Feedreader/1.0"

    def test_stream(self, transport):
        with Client(transport=transport).stream("https://example.com") as response:
            assert response.read() == b"gone"

    def test_default_timeout(self, mocker):
        mock_client = mocker.patch("httpx.Client")
        Client()
        assert "timeout" not in mock_client.call_args.kwargs

    def test_timeout_from_settings(self, mocker, monkeypatch):
        monkeypatch.setenv("OPMLKIT_HTTP_TIMEOUT", "2.5")
        mock_client = mocker.patch("httpx.Client")
        Client()
        assert mock_client.call_args.kwargs["timeout"] == 2.5

    def test_timeout_argument(self, mocker, monkeypatch):
        monkeypatch.setenv("OPMLKIT_HTTP_TIMEOUT", "2.5")
        mock_client = mocker.patch("httpx.Client")
        Client(timeout=10)
        assert mock_client.call_args.kwargs["timeout"] == 10

    def test_follow_redirects_from_settings(self, mocker, monkeypatch):
        monkeypatch.setenv("OPMLKIT_FOLLOW_REDIRECTS", "false")
        mock_client = mocker.patch("httpx.Client")
        Client()
        assert mock_client.call_args.kwargs["follow_redirects"] is False

    def test_close(self, mocker):
        mock_client = mocker.patch("httpx.Client")
        Client().close()
        mock_client.return_value.close.assert_called_once()


class TestGetClient:
    def test_cached(self):
        assert get_client() is get_client()
