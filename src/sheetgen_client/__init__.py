"""
sheetgen_client – async client for the spreadsheet generation service.

Import path convention::

    from sheetgen_client.excel import ExcelAPI, get_excel_api
    from sheetgen_client.adapters.http import BoundedHttpClient, ClientConfig
    from sheetgen_client.kernel.errors import RequestError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
