"""httpx client factories with outcome evaluation installed.

The caller keeps performing requests; every response is read and passed
through the evaluator's event hook, so a rejected response raises an
OutcomeError from the request call itself:

    evaluator = OutcomeEvaluator(rules)
    with create_http_client(evaluator) as client:
        client.post(url, data=form)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from verdict.core.config import settings

if TYPE_CHECKING:
    from verdict.evaluator.service import OutcomeEvaluator


def _build_timeout(**kwargs) -> httpx.Timeout:
    # Allow single timeout override, otherwise granular timeouts from settings
    timeout_override = kwargs.pop("timeout", None)
    if timeout_override is not None:
        return httpx.Timeout(timeout_override)
    return httpx.Timeout(
        connect=kwargs.pop("connect_timeout", settings.httpx_connect_timeout),
        read=kwargs.pop("read_timeout", settings.httpx_read_timeout),
        write=kwargs.pop("write_timeout", settings.httpx_write_timeout),
        pool=kwargs.pop("pool_timeout", settings.httpx_pool_timeout),
    )


def _split_timeout_kwargs(kwargs: dict) -> tuple[httpx.Timeout, dict]:
    keys = ("timeout", "connect_timeout", "read_timeout", "write_timeout", "pool_timeout")
    timeout_kwargs = {k: kwargs.pop(k) for k in keys if k in kwargs}
    return _build_timeout(**timeout_kwargs), kwargs


def _skip_redirects(hook):
    # Redirect hops also fire "response" hooks; only the final response is evaluated
    def hook_final_response(response: httpx.Response) -> None:
        if response.has_redirect_location:
            return
        hook(response)

    return hook_final_response


def _askip_redirects(hook):
    async def hook_final_response(response: httpx.Response) -> None:
        if response.has_redirect_location:
            return
        await hook(response)

    return hook_final_response


def create_http_client(evaluator: OutcomeEvaluator, **kwargs) -> httpx.Client:
    """Create a synchronous client whose responses are evaluated.

    With follow_redirects=True intermediate redirect responses are not
    evaluated. The setting is read once here, so pass it to the factory
    rather than per request.

    Args:
        evaluator: Evaluator whose response_hook is installed
        **kwargs: Timeout overrides (timeout, connect_timeout, read_timeout,
            write_timeout, pool_timeout); anything else goes to httpx.Client

    Returns:
        A new httpx.Client; close it when done.
    """
    timeout, client_kwargs = _split_timeout_kwargs(dict(kwargs))
    hook = evaluator.response_hook
    if client_kwargs.get("follow_redirects"):
        hook = _skip_redirects(hook)
    hooks = dict(client_kwargs.pop("event_hooks", None) or {})
    hooks["response"] = [*hooks.get("response", []), hook]
    return httpx.Client(timeout=timeout, event_hooks=hooks, **client_kwargs)


def create_async_http_client(evaluator: OutcomeEvaluator, **kwargs) -> httpx.AsyncClient:
    """Create an asynchronous client whose responses are evaluated.

    Same arguments as create_http_client().
    """
    timeout, client_kwargs = _split_timeout_kwargs(dict(kwargs))
    hook = evaluator.aresponse_hook
    if client_kwargs.get("follow_redirects"):
        hook = _askip_redirects(hook)
    hooks = dict(client_kwargs.pop("event_hooks", None) or {})
    hooks["response"] = [*hooks.get("response", []), hook]
    return httpx.AsyncClient(timeout=timeout, event_hooks=hooks, **client_kwargs)
