"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── RequestError         (request.py)
    └── ConfigError          (sheetgen_client.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from sheetgen_client.kernel.errors.base import BaseError
from sheetgen_client.kernel.errors.request import RequestError

__all__ = ["BaseError", "RequestError"]
