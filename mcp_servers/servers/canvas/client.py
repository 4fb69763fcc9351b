"""
Canvas REST API client.

Single point of outbound communication with Canvas. Every request carries
the configured bearer token, and every failure (HTTP error status, network
problem, undecodable body) is raised as one CanvasError so tool handlers
only ever have to deal with a single exception type.

Collections are walked with fetch_all(), which follows Canvas' page-numbered
pagination until a short page comes back.
"""

import json
from typing import Any, Dict, List, Optional

import httpx

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred in Canvas client"


class CanvasError(Exception):
    """Normalized error for any failed Canvas request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_from_response(response: httpx.Response) -> CanvasError:
    """Build a CanvasError from a non-2xx response.

    Canvas reports application errors as ``{"errors": ...}``; when present,
    that payload is carried verbatim. Otherwise the HTTP failure itself is
    described.
    """
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict) and "errors" in payload:
        return CanvasError(json.dumps(payload["errors"]), response.status_code)

    reason = response.reason_phrase or "HTTP error"
    return CanvasError(
        f"{response.status_code} {reason} for url {response.request.url}",
        response.status_code,
    )


def _error_from_exception(exc: BaseException) -> CanvasError:
    description = str(exc)
    if description:
        return CanvasError(description)
    # Some httpx exceptions (bare timeouts) carry no message
    if isinstance(exc, httpx.HTTPError):
        return CanvasError(type(exc).__name__)
    return CanvasError(UNKNOWN_ERROR_MESSAGE)


class CanvasClient:
    """
    Thin async wrapper around the Canvas REST API.

    The base URL and token are fixed for the lifetime of the client. The
    underlying httpx.AsyncClient is created once and reused for every call;
    pass ``transport`` to substitute a fake upstream (tests use
    httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: str,
        api_token: str,
        timeout: float = 30.0,
        per_page: int = 100,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.per_page = per_page
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers={"Authorization": f"Bearer {api_token}"},
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self):
        await self._http.aclose()

    # ── Verbs ──────────────────────────────────────────────────────────

    async def fetch(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET a resource and return its decoded JSON body."""
        return await self._request("GET", path, params=params)

    async def create(
        self,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """POST a JSON body."""
        return await self._request("POST", path, params=params, body=body if body is not None else {})

    async def replace(
        self,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """PUT a JSON body."""
        return await self._request("PUT", path, params=params, body=body if body is not None else {})

    async def remove(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """DELETE a resource."""
        return await self._request("DELETE", path, params=params)

    # ── Pagination ─────────────────────────────────────────────────────

    async def fetch_all(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        max_pages: Optional[int] = None,
    ) -> List[Any]:
        """
        Fetch every page of a collection endpoint.

        Requests page 1, 2, ... and concatenates the results in page order.
        The walk continues only while a page holds exactly ``per_page``
        records; a short, empty or oversized page ends it. There is no
        iteration cap unless the caller passes ``max_pages``; exceeding it
        raises instead of returning a truncated list.

        Any failed page aborts the whole walk: the error propagates and the
        records gathered so far are dropped.
        """
        base_params = dict(params or {})
        per_page = base_params.pop("per_page", None) or self.per_page

        results: List[Any] = []
        page = 1
        while True:
            if max_pages is not None and page > max_pages:
                raise CanvasError(
                    f"Pagination of {path} exceeded {max_pages} pages"
                )

            data = await self.fetch(path, {**base_params, "page": page, "per_page": per_page})
            if not isinstance(data, list):
                raise CanvasError(
                    f"Expected a list from {path} (page {page}), got {type(data).__name__}"
                )

            results.extend(data)
            # Upstreams that ignore per_page send an oversized page; stop there too
            if len(data) != per_page:
                return results
            page += 1

    # ── Internals ──────────────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        try:
            response = await self._http.request(
                method,
                path,
                params=_clean_params(params),
                json=body,
            )
        except Exception as e:
            raise _error_from_exception(e) from e

        if not response.is_success:
            raise _error_from_response(response)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise CanvasError(f"Could not decode response from {path}: {e}") from e


def _clean_params(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Drop unset query parameters and lower-case booleans for Canvas."""
    if not params:
        return None
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned
