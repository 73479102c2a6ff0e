"""
Typed JSON fetch wrapper.

``fetch_json`` performs one GET, checks the status, parses the body as JSON,
and returns it typed as the caller's requested shape. The shape is a promise
to the type checker only: the body is cast, never inspected. If the server
sends something else, no error is raised and the caller receives whatever the
server sent. Use ``fetch_model`` when the shape must hold at runtime.

Known limitations: no retries, no timeout configuration (httpx defaults
apply), no cancellation of a request once it is in flight.

Usage:
    from fetchtick.client.fetch import fetch_json, fetch_model
    from fetchtick.domain.models import Todo, TodoPayload

    payload = await fetch_json(url, TodoPayload)   # trusted, unchecked
    todo = await fetch_model(url, Todo)            # validated
"""

from __future__ import annotations

from typing import Any, Optional, Type, TypeVar, cast

import httpx
import pydantic

from fetchtick.errors import HttpStatusError, ParseError, TransportError, ValidationError
from fetchtick.utils.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=pydantic.BaseModel)

_JSON_HEADERS = {"Accept": "application/json"}


async def _get_json(client: httpx.AsyncClient, url: str) -> Any:
    try:
        response = await client.get(url, headers=_JSON_HEADERS)
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        err = TransportError(url, exc)
        log.error("Error fetching API data: %s", err, extra={"url": url})
        raise err from exc

    if not response.is_success:
        err = HttpStatusError(url, response.status_code, response.reason_phrase)
        log.error(
            "Error fetching API data: %s",
            err,
            extra={"url": url, "status_code": response.status_code},
        )
        raise err

    try:
        body = response.json()
    except ValueError as exc:
        err = ParseError(url, exc)
        log.error("Error fetching API data: %s", err, extra={"url": url})
        raise err from exc

    log.debug("Fetched API data", extra={"url": url, "status_code": response.status_code})
    return body


async def fetch_json(
    url: str,
    shape: Optional[Type[T]] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> T:
    """
    GET ``url`` and return its JSON body typed as ``shape``.

    Parameters
    ----------
    url : str
        Request target. Only the checks httpx itself performs are applied.
    shape : type, optional
        Expected result type, e.g. ``TodoPayload``. Used for static typing
        only; the body is NOT validated against it.
    client : httpx.AsyncClient, optional
        Client to send the request with. The caller keeps ownership. When
        omitted, a client is opened for this one request and closed after.

    Raises
    ------
    TransportError
        The request could not be sent or no response arrived.
    HttpStatusError
        The status code was outside 200-299.
    ParseError
        The body was not valid JSON.
    """
    del shape  # static typing only
    if client is not None:
        return cast(T, await _get_json(client, url))
    async with httpx.AsyncClient() as owned:
        return cast(T, await _get_json(owned, url))


async def fetch_model(
    url: str,
    model: Type[M],
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> M:
    """
    GET ``url`` and validate its JSON body into ``model``.

    Raises the same errors as ``fetch_json``, plus ``ValidationError`` when
    the body does not match the model.
    """
    body: Any = await fetch_json(url, client=client)
    try:
        return model.model_validate(body)
    except pydantic.ValidationError as exc:
        err = ValidationError(url, model.__name__, exc.errors())
        log.error(
            "Error fetching API data: %s",
            err,
            extra={"url": url, "model": model.__name__},
        )
        raise err from exc


__all__ = ["fetch_json", "fetch_model"]
