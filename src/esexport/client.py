"""ExportClient - main entry point for esexport."""

from __future__ import annotations

from typing import Optional

import httpx

from esexport.config import ExportSettings
from esexport.exceptions import TransportError
from esexport.filters import FilterSet
from esexport.response import Hit
from esexport.scroll import Consumer, search, walk


class ExportClient:
    """
    Client for exporting documents from a search engine index.
    
    Reads configuration from environment variables (ESEXPORT_*) automatically.
    The underlying httpx.Client is created from the settings (timeout,
    proxy) and reused for every request; pass your own to share a
    connection pool between clients.
    
    Example:
        with ExportClient() as client:
            total = client.walk(lambda batch: print(len(batch)))
            
    Attributes:
        settings: ExportSettings instance with connection and filter options
    """
    
    def __init__(
        self,
        settings: Optional[ExportSettings] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the export client.
        
        Args:
            settings: Optional ExportSettings instance. If not provided,
                     settings are loaded from environment variables.
            http_client: Optional httpx.Client. If not provided, one is
                     built from the settings on first use.
        """
        self.settings = settings or ExportSettings()
        self._client = http_client
        self._owns_client = http_client is None
    
    def __enter__(self) -> "ExportClient":
        """Context manager entry."""
        self._get_client()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
    
    def close(self) -> None:
        """Close the httpx client if this instance created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None
    
    def _get_client(self) -> httpx.Client:
        """Get or create httpx client."""
        if self._client is None:
            self._client = build_http_client(self.settings)
            self._owns_client = True
        return self._client
    
    def walk(
        self,
        consumer: Consumer,
        filters: Optional[FilterSet] = None,
        index: Optional[str] = None,
    ) -> int:
        """
        Scroll through the index and hand each batch to `consumer`.
        
        Args:
            consumer: Called once per non-empty batch of hits
            filters: Match criteria (default: parsed from settings)
            index: Index to export (default: settings.index)
            
        Returns:
            Number of hits handed to the consumer
            
        Raises:
            InvalidArgumentError: If index or batch size is unusable
            TransportError: If a request fails
            EngineError: If the engine rejects a request
            ProtocolError: If the engine breaks the scroll contract
        """
        return walk(
            self._get_client(),
            self.settings.url,
            index if index is not None else self.settings.index,
            self.settings.batch_size,
            self.settings.pacing_interval,
            filters if filters is not None else self.settings.filter_set,
            consumer,
        )
    
    def search(
        self,
        filters: Optional[FilterSet] = None,
        index: Optional[str] = None,
        size: Optional[int] = None,
    ) -> tuple[int, list[Hit]]:
        """
        Run a single filtered search without scrolling.
        
        Args:
            filters: Match criteria (default: parsed from settings)
            index: Index to search (default: settings.index)
            size: Hits to return (default: settings.batch_size)
            
        Returns:
            Tuple of (engine-reported total matches, first page of hits)
        """
        return search(
            self._get_client(),
            self.settings.url,
            index if index is not None else self.settings.index,
            size if size is not None else self.settings.batch_size,
            filters if filters is not None else self.settings.filter_set,
        )


def build_http_client(settings: ExportSettings) -> httpx.Client:
    """
    Build an httpx.Client with the configured timeout and proxy.
    
    Raises:
        TransportError: If the proxy URL is unusable
    """
    try:
        return httpx.Client(
            timeout=settings.timeout,
            proxy=settings.proxy_url or None,
        )
    except (ValueError, httpx.InvalidURL) as e:
        raise TransportError(f"Invalid proxy url {settings.proxy_url!r}: {e}") from e
