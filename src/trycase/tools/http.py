"""Safe async HTTP calls over a caller-supplied ``httpx.AsyncClient``.

Every coroutine awaits the client once and resolves to a Result: the
``httpx.Response`` (or its text/bytes/decoded JSON) on success, an HttpError
when the call could not be made or failed in transport. Responses with a
non-success status stay successes unless ``ensure_success`` is requested.

JSON variants compose the HTTP call with the JSON toolkit and fail with an
HttpJsonError that records which phase failed.

Example:
    >>> async with httpx.AsyncClient(base_url="https://api.example.com") as client:
    ...     result = await try_get_json(client, "/users/1", User)
    ...     if result.is_err() and result.unwrap_err().is_http_error:
    ...         print(result.unwrap_err().http_error.request_uri)

Keyword arguments not named here (headers, params, timeout, ...) pass through
unchanged to ``client.request``; timeouts and cancellation are the client's.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Literal, TypeVar, Union

import httpx

from trycase.foundation.config import SettingsError, get_settings
from trycase.foundation.errors import (
    HttpError,
    HttpJsonError,
    MissingArgumentError,
    Result,
    attempt_async,
    rejected,
)

from .serialization import JsonOptions, try_deserialize, try_serialize_bytes

T = TypeVar("T")

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]
Url = Union[str, httpx.URL]
Content = Union[str, bytes, None]

logger = logging.getLogger("trycase.http")


# ─────────────────────────────────────────────────────────────────────────────
# Preconditions & Classification
# ─────────────────────────────────────────────────────────────────────────────

def _check(client: httpx.AsyncClient | None, url: Url | None) -> HttpError | None:
    """Reject a missing client or a None/blank URI without touching the network."""
    uri = None if url is None else str(url)
    if client is None:
        return HttpError(
            request_uri=uri, message="HttpClient cannot be None", original_exception=MissingArgumentError("client"),
        )
    if uri is None or not uri.strip():
        return HttpError(
            request_uri=uri,
            message="Request URI cannot be None or empty",
            original_exception=MissingArgumentError("url", "Request URI cannot be None or empty"),
        )
    return None


def _classifier(method: str, uri: str) -> Callable[[Exception], HttpError]:
    def classify(e: Exception) -> HttpError:
        if isinstance(e, SettingsError):
            return HttpError(request_uri=uri, message=str(e), original_exception=e)
        if isinstance(e, httpx.HTTPStatusError):
            status = e.response.status_code
            return HttpError(
                request_uri=uri,
                status_code=status,
                message=f"HTTP {method} request to {uri} returned status {status}",
                original_exception=e,
            )
        if isinstance(e, (httpx.TimeoutException, TimeoutError)):
            message = f"HTTP {method} request timed out for URI: {uri}"
        elif isinstance(e, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
            message = f"Invalid request URI for HTTP {method}: {uri}"
        elif isinstance(e, httpx.RequestError):
            message = f"HTTP {method} request failed for URI: {uri}"
        else:
            message = f"Unexpected error during HTTP {method} request to URI: {uri}"
        return HttpError(request_uri=uri, message=message, original_exception=e)
    return classify


# ─────────────────────────────────────────────────────────────────────────────
# Core
# ─────────────────────────────────────────────────────────────────────────────

async def _request(
    client: httpx.AsyncClient | None,
    method: HttpMethod,
    url: Url | None,
    read: Callable[[httpx.Response], Awaitable[T]],
    *,
    ensure_success: bool | None,
    **kwargs: Any,
) -> Result[T, HttpError]:
    if (error := _check(client, url)) is not None:
        return rejected(error)
    uri = str(url)

    async def call() -> T:
        strict = get_settings().http.ensure_success if ensure_success is None else ensure_success
        response = await client.request(method, url, **kwargs)
        logger.debug("%s %s -> %s", method, uri, response.status_code)
        if strict:
            response.raise_for_status()
        return await read(response)

    return await attempt_async(call, _classifier(method, uri))


async def _response(response: httpx.Response) -> httpx.Response:
    return response


async def _text(response: httpx.Response) -> str:
    await response.aread()
    return response.text


async def _bytes(response: httpx.Response) -> bytes:
    return await response.aread()


async def try_send(
    client: httpx.AsyncClient | None,
    method: HttpMethod,
    url: Url | None,
    content: Content = None,
    *,
    ensure_success: bool | None = None,
    **kwargs: Any,
) -> Result[httpx.Response, HttpError]:
    """Send a request with any verb. ``ensure_success`` defaults to settings (False)."""
    if content is not None:
        kwargs["content"] = content
    return await _request(client, method, url, _response, ensure_success=ensure_success, **kwargs)


# ─────────────────────────────────────────────────────────────────────────────
# Verbs
# ─────────────────────────────────────────────────────────────────────────────

async def try_get(client: httpx.AsyncClient | None, url: Url | None, **kwargs: Any) -> Result[httpx.Response, HttpError]:
    return await try_send(client, "GET", url, **kwargs)


async def try_post(
    client: httpx.AsyncClient | None, url: Url | None, content: Content = None, **kwargs: Any,
) -> Result[httpx.Response, HttpError]:
    return await try_send(client, "POST", url, content, **kwargs)


async def try_put(
    client: httpx.AsyncClient | None, url: Url | None, content: Content = None, **kwargs: Any,
) -> Result[httpx.Response, HttpError]:
    return await try_send(client, "PUT", url, content, **kwargs)


async def try_patch(
    client: httpx.AsyncClient | None, url: Url | None, content: Content = None, **kwargs: Any,
) -> Result[httpx.Response, HttpError]:
    return await try_send(client, "PATCH", url, content, **kwargs)


async def try_delete(client: httpx.AsyncClient | None, url: Url | None, **kwargs: Any) -> Result[httpx.Response, HttpError]:
    return await try_send(client, "DELETE", url, **kwargs)


async def try_get_string(
    client: httpx.AsyncClient | None, url: Url | None, *, ensure_success: bool | None = None, **kwargs: Any,
) -> Result[str, HttpError]:
    """GET and return the decoded response text."""
    return await _request(client, "GET", url, _text, ensure_success=ensure_success, **kwargs)


async def try_get_bytes(
    client: httpx.AsyncClient | None, url: Url | None, *, ensure_success: bool | None = None, **kwargs: Any,
) -> Result[bytes, HttpError]:
    """GET and return the raw response body."""
    return await _request(client, "GET", url, _bytes, ensure_success=ensure_success, **kwargs)


# ─────────────────────────────────────────────────────────────────────────────
# JSON Integration
# ─────────────────────────────────────────────────────────────────────────────

def _decode(response: httpx.Response, target: Any, options: JsonOptions | None) -> Result[Any, HttpJsonError]:
    return try_deserialize(response.content, target, options).map_err(HttpJsonError.from_json)


async def try_get_json(
    client: httpx.AsyncClient | None,
    url: Url | None,
    target: Any = Any,
    options: JsonOptions | None = None,
    **kwargs: Any,
) -> Result[Any, HttpJsonError]:
    """GET and decode the body as JSON into ``target``. HTTP failure short-circuits decoding."""
    sent = await try_get(client, url, **kwargs)
    return sent.map_err(HttpJsonError.from_http).flat_map(lambda r: _decode(r, target, options))


async def _send_json(
    method: HttpMethod,
    client: httpx.AsyncClient | None,
    url: Url | None,
    value: Any,
    response_type: Any,
    options: JsonOptions | None,
    **kwargs: Any,
) -> Result[Any, HttpJsonError]:
    if (error := _check(client, url)) is not None:
        return rejected(HttpJsonError.from_http(error))

    body = try_serialize_bytes(value, options)
    if body.is_err():
        return rejected(HttpJsonError.from_json(body.unwrap_err()))

    headers = httpx.Headers(kwargs.pop("headers", None))
    headers.setdefault("Content-Type", "application/json")
    sent = (await try_send(client, method, url, body.unwrap(), headers=headers, **kwargs)).map_err(HttpJsonError.from_http)
    if response_type is None:
        return sent
    return sent.flat_map(lambda r: _decode(r, response_type, options))


async def try_post_json(
    client: httpx.AsyncClient | None,
    url: Url | None,
    value: Any,
    response_type: Any = None,
    options: JsonOptions | None = None,
    **kwargs: Any,
) -> Result[Any, HttpJsonError]:
    """POST ``value`` encoded as JSON.

    Without ``response_type`` the success payload is the ``httpx.Response``;
    with it, the response body decoded into that type.
    """
    return await _send_json("POST", client, url, value, response_type, options, **kwargs)


async def try_put_json(
    client: httpx.AsyncClient | None,
    url: Url | None,
    value: Any,
    response_type: Any = None,
    options: JsonOptions | None = None,
    **kwargs: Any,
) -> Result[Any, HttpJsonError]:
    """PUT ``value`` encoded as JSON. See try_post_json."""
    return await _send_json("PUT", client, url, value, response_type, options, **kwargs)


async def try_patch_json(
    client: httpx.AsyncClient | None,
    url: Url | None,
    value: Any,
    response_type: Any = None,
    options: JsonOptions | None = None,
    **kwargs: Any,
) -> Result[Any, HttpJsonError]:
    """PATCH ``value`` encoded as JSON. See try_post_json."""
    return await _send_json("PATCH", client, url, value, response_type, options, **kwargs)
