"""Excel – ExcelAPI facade over the generation service."""
from __future__ import annotations

import functools
from typing import Any

from sheetgen_client.adapters.http import BoundedHttpClient, ClientConfig
from sheetgen_client.config import EnvSettingsLoader, SheetGenSettings
from sheetgen_client.excel.models import GenerationResult
from sheetgen_client.kernel.errors import RequestError
from sheetgen_client.observability.logging import get_logger

_log = get_logger(__name__)

GENERATE_PATH = "/excel/from-prompt"
DOWNLOAD_PATH = "/excel/download/"


class ExcelAPI:
    """Generate spreadsheets from prompts and locate them for download.

    Holds nothing but the shared client; every call is independent. Errors
    from the client (:class:`~sheetgen_client.kernel.errors.RequestError`)
    propagate unchanged; a 2xx body that is not a generation result is
    reported as one too.
    """

    def __init__(self, client: BoundedHttpClient) -> None:
        self._client = client

    @classmethod
    def from_config(cls, config: ClientConfig, **client_kwargs: Any) -> "ExcelAPI":
        return cls(BoundedHttpClient(config, **client_kwargs))

    @property
    def client(self) -> BoundedHttpClient:
        return self._client

    async def generate_from_prompt(self, prompt: str) -> GenerationResult:
        # Empty prompts are rejected by the caller, not here.
        _log.info("excel.generate", prompt_length=len(prompt))
        body = await self._client.post(GENERATE_PATH, {"prompt": prompt})
        try:
            return GenerationResult.from_dict(body)
        except TypeError as exc:
            _log.warning("excel.generate.malformed", reason=str(exc))
            raise RequestError(f"Malformed generation result: {exc}", cause=exc) from exc

    def download_url(self, filename: str) -> str:
        """Absolute download URL. *filename* must already be URL-safe."""
        return self._client.base_url + DOWNLOAD_PATH + filename


@functools.lru_cache(maxsize=1)
def get_excel_api() -> ExcelAPI:
    """Process-wide facade configured from ``SHEETGEN_*`` environment variables."""
    settings = EnvSettingsLoader().load(SheetGenSettings)
    return ExcelAPI.from_config(ClientConfig.from_settings(settings))


__all__ = ["DOWNLOAD_PATH", "GENERATE_PATH", "ExcelAPI", "get_excel_api"]
