"""Configuration management via environment variables."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from esexport.filters import FilterSet, parse_filter_spec


class ExportSettings(BaseSettings):
    """
    Export job configuration.
    
    All values are read from environment variables prefixed with ESEXPORT_.
    A .env file in the current directory is loaded automatically.
    
    Attributes:
        url: Engine base URL
        index: Name of the index to export
        columns: Comma-separated source fields written per hit
        batch_size: Hits requested per scroll turn
        interval_ms: Pause between scroll turns, in milliseconds
        term_filter: Exact matches, as "field:value,field:value"
        wildcard_filter: Wildcard matches, same format
        regexp_filter: Regular-expression matches, same format
        proxy_url: Optional proxy for all requests (e.g. socks5://127.0.0.1:1080)
        timeout_ms: Per-request timeout, in milliseconds
        outfile: File the exported rows are appended to
    
    Example:
        # ESEXPORT_INDEX=logs-2024.01
        # ESEXPORT_TERM_FILTER=logtype:access
        
        settings = ExportSettings()
        print(settings.filter_set)
    """
    
    url: str = "http://localhost:9200"
    index: str = ""
    columns: str = "sid"
    batch_size: int = 100
    interval_ms: int = 0
    term_filter: str = ""
    wildcard_filter: str = ""
    regexp_filter: str = ""
    proxy_url: Optional[str] = None
    timeout_ms: int = 10000
    outfile: str = "output.txt"
    
    model_config = SettingsConfigDict(
        env_prefix="ESEXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
    
    @property
    def column_list(self) -> list[str]:
        """Requested columns, blanks dropped."""
        return [c.strip() for c in self.columns.split(",") if c.strip()]
    
    @property
    def filter_set(self) -> FilterSet:
        """Parse the three filter strings into a FilterSet."""
        return FilterSet(
            term=parse_filter_spec(self.term_filter),
            wildcard=parse_filter_spec(self.wildcard_filter),
            regexp=parse_filter_spec(self.regexp_filter),
        )
    
    @property
    def pacing_interval(self) -> float:
        """Pause between scroll turns, in seconds."""
        return self.interval_ms / 1000.0
    
    @property
    def timeout(self) -> float:
        """Per-request timeout, in seconds."""
        return self.timeout_ms / 1000.0
