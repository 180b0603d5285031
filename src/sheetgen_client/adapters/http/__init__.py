"""HTTP adapter – bounded async HTTP client."""
from sheetgen_client.adapters.http.client import BoundedHttpClient
from sheetgen_client.adapters.http.config import DEFAULT_HEADERS, ClientConfig
from sheetgen_client.adapters.http.request_spec import RequestSpec, merge_headers

__all__ = ["BoundedHttpClient", "ClientConfig", "DEFAULT_HEADERS", "RequestSpec", "merge_headers"]
