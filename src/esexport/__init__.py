"""
esexport - Export documents from a search engine index via the scroll API.

Quick Start
-----------
    from esexport import ExportClient, FilterSet

    with ExportClient() as client:
        total = client.walk(
            lambda batch: print(len(batch)),
            filters=FilterSet(term={"logtype": "access"}),
        )

Configuration
-------------
Set these environment variables (or use a .env file):

    ESEXPORT_URL         - Engine base URL (default http://localhost:9200)
    ESEXPORT_INDEX       - Index to export
    ESEXPORT_BATCH_SIZE  - Hits per scroll request (default 100)
    ESEXPORT_INTERVAL_MS - Pause between scroll requests (default 0)
    ESEXPORT_TIMEOUT_MS  - Timeout per request (default 10000)
    ESEXPORT_PROXY_URL   - Optional proxy for all requests

Command Line
------------
    esexport -i logs-2024.01 -c sid,ts --tf logtype:access -o out.txt

Exceptions
----------
    InvalidArgumentError - Bad endpoint, index or batch size (nothing sent)
    TransportError       - Request failed or response unreadable
    EngineError          - Engine rejected the query or scroll request
    ProtocolError        - Engine returned hits without a scroll cursor
"""

__version__ = "0.1.0"

from esexport.client import ExportClient
from esexport.config import ExportSettings
from esexport.filters import FilterSet, build_conditions, build_query
from esexport.response import Hit
from esexport.scroll import search, walk
from esexport.writer import ColumnWriter
from esexport.exceptions import (
    EsExportError,
    InvalidArgumentError,
    TransportError,
    EngineError,
    ProtocolError,
)

__all__ = [
    "ExportClient",
    "ExportSettings",
    "FilterSet",
    "Hit",
    "ColumnWriter",
    "build_conditions",
    "build_query",
    "walk",
    "search",
    "EsExportError",
    "InvalidArgumentError",
    "TransportError",
    "EngineError",
    "ProtocolError",
    "__version__",
]
