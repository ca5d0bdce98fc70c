"""Tests for esexport.config module."""

import pytest
from pydantic import ValidationError

from esexport.config import ExportSettings
from esexport.filters import FilterSet


class TestExportSettings:
    """Tests for ExportSettings configuration."""
    
    def test_defaults(self):
        """Settings have usable defaults apart from the index."""
        settings = ExportSettings()
        
        assert settings.url == "http://localhost:9200"
        assert settings.index == ""
        assert settings.batch_size == 100
        assert settings.interval_ms == 0
        assert settings.timeout_ms == 10000
        assert settings.proxy_url is None
        assert settings.outfile == "output.txt"
        assert settings.column_list == ["sid"]
    
    def test_loads_from_explicit_values(self):
        """Settings can be created with explicit values."""
        settings = ExportSettings(
            url="http://es:9200",
            index="logs",
            batch_size=500,
            proxy_url="socks5://127.0.0.1:1080",
        )
        
        assert settings.url == "http://es:9200"
        assert settings.index == "logs"
        assert settings.batch_size == 500
        assert settings.proxy_url == "socks5://127.0.0.1:1080"
    
    def test_loads_from_environment_variables(self, monkeypatch):
        """Settings load from ESEXPORT_* environment variables."""
        monkeypatch.setenv("ESEXPORT_URL", "http://env-es:9200")
        monkeypatch.setenv("ESEXPORT_INDEX", "env-index")
        monkeypatch.setenv("ESEXPORT_BATCH_SIZE", "250")
        monkeypatch.setenv("ESEXPORT_TERM_FILTER", "logtype:access")
        
        settings = ExportSettings()
        
        assert settings.url == "http://env-es:9200"
        assert settings.index == "env-index"
        assert settings.batch_size == 250
        assert settings.filter_set.term == {"logtype": "access"}
    
    def test_invalid_number_raises_error(self, monkeypatch):
        """Non-numeric batch size raises ValidationError."""
        monkeypatch.setenv("ESEXPORT_BATCH_SIZE", "lots")
        
        with pytest.raises(ValidationError):
            ExportSettings()
    
    def test_filter_set_from_strings(self):
        """The three filter strings become one FilterSet."""
        settings = ExportSettings(
            term_filter="logtype:access,host:web-1",
            wildcard_filter="path:/api/*",
            regexp_filter="agent:(curl)|(wget)",
        )
        
        assert settings.filter_set == FilterSet(
            term={"logtype": "access", "host": "web-1"},
            wildcard={"path": "/api/*"},
            regexp={"agent": "(curl)|(wget)"},
        )
    
    def test_column_list_drops_blanks(self):
        """Blank column names are dropped."""
        settings = ExportSettings(columns="sid, ts,,host,")
        
        assert settings.column_list == ["sid", "ts", "host"]
    
    def test_durations_in_seconds(self):
        """Millisecond settings convert to seconds."""
        settings = ExportSettings(interval_ms=50, timeout_ms=2500)
        
        assert settings.pacing_interval == 0.05
        assert settings.timeout == 2.5
