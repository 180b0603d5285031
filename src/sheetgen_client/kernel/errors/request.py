"""Request errors: every failure of a call to the generation service."""

from __future__ import annotations

from sheetgen_client.kernel.errors.base import BaseError

TIMEOUT_MESSAGE = "Request timeout"


class RequestError(BaseError):
    """A request to the remote service did not produce a usable JSON body.

    Covers timeouts, transport failures, non-2xx responses and unparseable
    bodies. Only ``message`` distinguishes them; callers display it as-is.
    """

    default_code = "request_error"

    @classmethod
    def timeout(cls, cause: BaseException | None = None) -> "RequestError":
        return cls(TIMEOUT_MESSAGE, cause=cause)

    @classmethod
    def http_status(cls, status_code: int) -> "RequestError":
        return cls(f"HTTP Error: {status_code}")


__all__ = ["TIMEOUT_MESSAGE", "RequestError"]
