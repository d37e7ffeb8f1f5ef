"""Tests for httpx clients with outcome evaluation hooks."""

import httpx
import pytest

from verdict.core.http_client import create_async_http_client, create_http_client
from verdict.evaluator import OutcomeEvaluator
from verdict.exceptions import (
    FailBodyMatchError,
    SuccessBodyMismatchError,
    SuccessStatusMismatchError,
)


def _transport(status_code: int, body: str) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=body)

    return httpx.MockTransport(handler)


class TestSyncClient:
    """Test the synchronous client factory."""

    def test_accepted_response_returned(self, login_evaluator):
        """Test accepted responses reach the caller."""
        with create_http_client(login_evaluator, transport=_transport(200, "SUCCESS")) as client:
            response = client.post("https://example.test/login")

        assert response.status_code == 200
        assert response.text == "SUCCESS"

    def test_rejected_response_raises(self, login_evaluator):
        """Test fail rules raise from the request call."""
        transport = _transport(200, "Incorrect password")
        with create_http_client(login_evaluator, transport=transport) as client:
            with pytest.raises(FailBodyMatchError, match=r"^\[test\]\[F_BODY_0\]"):
                client.post("https://example.test/login")

    def test_existing_hooks_kept(self, login_evaluator):
        """Test caller hooks run before the evaluator hook."""
        seen = []
        with create_http_client(
            login_evaluator,
            transport=_transport(404, "SUCCESS"),
            event_hooks={"response": [lambda r: seen.append(r.status_code)]},
        ) as client:
            with pytest.raises(SuccessStatusMismatchError):
                client.get("https://example.test/")

        assert seen == [404]

    def test_timeout_override(self, login_evaluator):
        """Test a single timeout overrides the granular settings."""
        with create_http_client(login_evaluator, timeout=3.0) as client:
            assert client.timeout == httpx.Timeout(3.0)

    def test_granular_timeouts(self, login_evaluator):
        """Test granular timeout keywords."""
        with create_http_client(login_evaluator, connect_timeout=1.0, read_timeout=2.0) as client:
            assert client.timeout.connect == 1.0
            assert client.timeout.read == 2.0


class TestAsyncClient:
    """Test the asynchronous client factory."""

    @pytest.mark.asyncio
    async def test_accepted_response_returned(self, login_evaluator):
        """Test accepted responses reach the caller."""
        transport = _transport(201, "PASS")
        async with create_async_http_client(login_evaluator, transport=transport) as client:
            response = await client.get("https://example.test/")

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_rejected_response_raises(self, login_evaluator):
        """Test rejected responses raise from the awaited request."""
        transport = _transport(302, "SUCCESS")
        async with create_async_http_client(login_evaluator, transport=transport) as client:
            with pytest.raises(SuccessStatusMismatchError) as exc_info:
                await client.get("https://example.test/")

        assert "got HTTP 302" in str(exc_info.value)


def _login_redirect_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/login":
            return httpx.Response(302, headers={"location": "/home"}, text="")
        return httpx.Response(200, text="SUCCESS")

    return httpx.MockTransport(handler)


REDIRECT_RULES = {"success": {"status": [200], "body": ["SUCCESS"]}}


class TestRedirects:
    """Test that only the final response of a redirect chain is evaluated."""

    def test_followed_redirect_evaluates_final_response(self):
        """Test a 302 -> 200 login flow is accepted."""
        evaluator = OutcomeEvaluator(REDIRECT_RULES)
        with create_http_client(
            evaluator, transport=_login_redirect_transport(), follow_redirects=True
        ) as client:
            response = client.get("https://example.test/login")

        assert response.status_code == 200
        assert [r.status_code for r in response.history] == [302]

    def test_followed_redirect_final_response_still_rejected(self):
        """Test rules still apply to the final response."""
        evaluator = OutcomeEvaluator({"success": {"status": [201]}})
        with create_http_client(
            evaluator, transport=_login_redirect_transport(), follow_redirects=True
        ) as client:
            with pytest.raises(SuccessStatusMismatchError) as exc_info:
                client.get("https://example.test/login")

        assert exc_info.value.status_code == 200

    def test_unfollowed_redirect_is_evaluated(self):
        """Test a redirect returned to the caller is the final response."""
        evaluator = OutcomeEvaluator(REDIRECT_RULES)
        with create_http_client(evaluator, transport=_login_redirect_transport()) as client:
            with pytest.raises(SuccessBodyMismatchError):
                client.get("https://example.test/login")

    @pytest.mark.asyncio
    async def test_async_followed_redirect(self):
        """Test the async client skips redirect hops too."""
        evaluator = OutcomeEvaluator(REDIRECT_RULES)
        async with create_async_http_client(
            evaluator, transport=_login_redirect_transport(), follow_redirects=True
        ) as client:
            response = await client.get("https://example.test/login")

        assert response.text == "SUCCESS"
