"""HTTP adapter – BoundedHttpClient."""
from __future__ import annotations

import json
import time
from typing import Any, Mapping

import httpx

from sheetgen_client.adapters.http.config import DEFAULT_HEADERS, ClientConfig
from sheetgen_client.adapters.http.request_spec import RequestSpec, merge_headers
from sheetgen_client.kernel.errors import RequestError
from sheetgen_client.observability.logging import get_logger
from sheetgen_client.resilience.timeouts import TimeoutPolicy

_log = get_logger(__name__)

def _detail_message(detail: Any) -> str | None:
    if isinstance(detail, str):
        return detail or None
    if isinstance(detail, list) and detail:
        # FastAPI validation errors: [{"loc": [...], "msg": "...", "type": "..."}]
        return "; ".join(
            str(item.get("msg", item)) if isinstance(item, dict) else str(item)
            for item in detail
        )
    if detail:
        return str(detail)
    return None


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None
    return _detail_message(detail) or RequestError.http_status(response.status_code).message


class BoundedHttpClient:
    """Async JSON client where every call settles within ``config.timeout_ms``.

    Each call opens its own ``httpx.AsyncClient`` and is raced against its own
    countdown, so concurrent calls share nothing but the read-only config.
    Extra keyword arguments (``transport``, ``verify``, ...) are forwarded to
    ``httpx.AsyncClient``. Redirects are followed unless
    ``follow_redirects=False`` is passed.
    """

    def __init__(self, config: ClientConfig, **kwargs: Any) -> None:
        self._config = config
        self._timeout = TimeoutPolicy(config.timeout_ms)
        kwargs.setdefault("follow_redirects", True)
        self._client_kwargs = kwargs

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def request(self, path: str, spec: RequestSpec | None = None) -> Any:
        """Send one request to ``base_url + path`` and return the JSON body.

        Raises
        ------
        RequestError
            On timeout, transport failure, non-2xx status or a body that is
            not valid JSON.
        """
        if not path.startswith("/"):
            raise ValueError(f"path must start with '/', got {path!r}")
        spec = spec or RequestSpec()
        url = self._config.base_url + path
        headers = merge_headers(self._config.headers, spec.headers)
        content = spec.content()

        _log.debug("http.request", method=spec.method, url=url)
        started = time.perf_counter()
        try:
            response = await self._timeout.execute(
                lambda: self._send(spec.method, url, headers, content)
            )
            result = self._parse(response)
        except RequestError as exc:
            _log.warning("http.request.failed", method=spec.method, url=url, reason=exc.message)
            raise
        _log.debug(
            "http.response",
            method=spec.method,
            url=url,
            status=response.status_code,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return result

    async def post(
        self,
        path: str,
        payload: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Serialise *payload* to JSON and POST it to *path*."""
        spec = RequestSpec(
            method="POST",
            headers=merge_headers(DEFAULT_HEADERS, headers),
            body=json.dumps(payload).encode("utf-8"),
        )
        return await self.request(path, spec)

    async def _send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        content: bytes | None,
    ) -> httpx.Response:
        # httpx's own timeout is off: the TimeoutPolicy race is the only clock.
        async with httpx.AsyncClient(timeout=None, **self._client_kwargs) as client:
            try:
                return await client.request(method, url, headers=headers, content=content)
            except httpx.TimeoutException as exc:
                raise RequestError.timeout(cause=exc) from exc
            except httpx.HTTPError as exc:
                reason = str(exc) or type(exc).__name__
                raise RequestError(f"Network error: {reason}", cause=exc) from exc

    @staticmethod
    def _parse(response: httpx.Response) -> Any:
        if not response.is_success:
            raise RequestError(_error_message(response))
        try:
            return response.json()
        except ValueError as exc:
            raise RequestError(f"Invalid JSON response: {exc}", cause=exc) from exc


__all__ = ["BoundedHttpClient"]
