"""
API Smoke Tests

Tests for the FastAPI endpoints:
1. GET /health and GET / return ok
2. GET /checksum with and without text
3. GET /hash with and without text
4. GET /hash degrades to an error body when the algorithm is missing
5. Hardening headers and the error envelope
"""

import hashlib
import zlib

import pytest
from fastapi.testclient import TestClient

from api import __version__
from api.app import create_app
from api.deps import DEFAULT_TEXT, resolve_text
from api.routes.digest import HASH_ERROR_BODY
from core.config.runtime import RuntimeConfig, SecurityConfig
from core.crypto import hashing
from core.schemas.errors import InvalidArgumentException, InvalidInputException


DEFAULT_CRC = format(zlib.crc32(DEFAULT_TEXT.encode("utf-8")), "x")
DEFAULT_SHA = hashlib.sha256(DEFAULT_TEXT.encode("utf-8")).hexdigest()


class TestHealth:
    """GET /health and GET /."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "ok": True,
            "service": "sslserver-api",
            "version": __version__,
        }

    def test_root_same_as_health(self, client):
        assert client.get("/").json() == client.get("/health").json()


class TestResolveText:
    """Default substitution for the text parameter."""

    def test_default_literal(self):
        assert DEFAULT_TEXT == "Hello World Check Sum!"

    @pytest.mark.parametrize("text", [None, ""])
    def test_absent_or_empty_uses_default(self, text):
        assert resolve_text(text) == DEFAULT_TEXT

    def test_whitespace_is_kept(self):
        assert resolve_text(" ") == " "


class TestChecksumEndpoint:
    """GET /checksum."""

    def test_abc(self, client):
        response = client.get("/checksum", params={"text": "abc"})

        assert response.status_code == 200
        assert response.text == "Data: abc | Checksum: 352441c2"
        assert response.headers["content-type"].startswith("text/plain")

    def test_default(self, client):
        response = client.get("/checksum")

        assert response.status_code == 200
        assert response.text == f"Data: Hello World Check Sum! | Checksum: {DEFAULT_CRC}"

    def test_empty_text_same_as_absent(self, client):
        assert client.get("/checksum?text=").text == client.get("/checksum").text

    def test_unicode_text(self, client):
        text = "héllo wörld"
        expected = format(zlib.crc32(text.encode("utf-8")), "x")

        response = client.get("/checksum", params={"text": text})

        assert response.text == f"Data: {text} | Checksum: {expected}"


class TestHashEndpoint:
    """GET /hash."""

    def test_abc(self, client):
        response = client.get("/hash", params={"text": "abc"})

        assert response.status_code == 200
        assert response.text == (
            "Data: abc | Hash: "
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_default(self, client):
        response = client.get("/hash")

        assert response.status_code == 200
        assert response.text == f"Data: Hello World Check Sum! | Hash: {DEFAULT_SHA}"

    def test_empty_text_same_as_absent(self, client):
        assert client.get("/hash?text=").text == client.get("/hash").text

    def test_digest_is_64_lowercase_hex(self, client):
        body = client.get("/hash", params={"text": "some data"}).text
        digest = body.rsplit(" | Hash: ", 1)[1]

        assert len(digest) == 64
        assert digest == digest.lower()
        int(digest, 16)

    def test_algorithm_unavailable_returns_error_body(self, client, monkeypatch, caplog):
        monkeypatch.setattr(hashing, "DIGEST_ALGORITHM", "no-such-digest")

        with caplog.at_level("ERROR", logger="api.routes.digest"):
            response = client.get("/hash", params={"text": "abc"})

        assert response.status_code == 200
        assert response.text == HASH_ERROR_BODY
        assert any("Hash generation failed" in r.getMessage() for r in caplog.records)

    def test_checksum_unaffected_by_missing_digest(self, client, monkeypatch):
        monkeypatch.setattr(hashing, "DIGEST_ALGORITHM", "no-such-digest")

        assert client.get("/checksum?text=abc").text == "Data: abc | Checksum: 352441c2"


class TestSecurityHeaders:
    """Hardening headers from SecurityHeadersMiddleware."""

    def test_headers_present(self, client):
        headers = client.get("/checksum").headers

        assert headers["x-content-type-options"] == "nosniff"
        assert headers["x-frame-options"] == "DENY"
        assert headers["referrer-policy"] == "no-referrer"
        assert "permissions-policy" in headers
        assert headers["content-security-policy"] == "default-src 'self'"

    def test_no_hsts_over_http(self, client):
        assert "strict-transport-security" not in client.get("/hash").headers

    def test_hsts_over_https(self, app):
        https_client = TestClient(app, base_url="https://testserver")

        headers = https_client.get("/hash").headers

        assert headers["strict-transport-security"] == "max-age=31536000; includeSubDomains"

    def test_docs_skip_csp(self, client):
        response = client.get("/docs")

        assert response.status_code == 200
        assert "content-security-policy" not in response.headers

    def test_headers_disabled(self):
        config = RuntimeConfig(security=SecurityConfig(headers_enabled=False))
        plain_client = TestClient(create_app(config))

        headers = plain_client.get("/checksum").headers

        assert "x-frame-options" not in headers


class TestErrorHandlers:
    """Digest exceptions that escape a route become JSON envelopes."""

    @pytest.fixture
    def failing_client(self, app):
        @app.get("/_raise/input")
        def raise_input():
            raise InvalidInputException()

        @app.get("/_raise/argument")
        def raise_argument():
            raise InvalidArgumentException("bad length", argument="length")

        @app.get("/_raise/unexpected")
        def raise_unexpected():
            raise RuntimeError("boom")

        return TestClient(app, raise_server_exceptions=False)

    def test_invalid_input_is_400(self, failing_client):
        response = failing_client.get("/_raise/input")

        assert response.status_code == 400
        body = response.json()
        assert body["ok"] is False
        assert body["error"]["code"] == "INVALID_INPUT"

    def test_invalid_argument_is_400(self, failing_client):
        response = failing_client.get("/_raise/argument")

        assert response.status_code == 400
        assert response.json()["error"]["details"] == {"argument": "length"}

    def test_unexpected_is_500_without_message(self, failing_client):
        response = failing_client.get("/_raise/unexpected")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "INTERNAL_ERROR"
        assert "boom" not in error["message"]
        assert error["details"] == {"type": "RuntimeError"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
