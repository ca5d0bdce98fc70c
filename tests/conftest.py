"""Shared pytest fixtures for esexport tests."""

import httpx
import pytest

from esexport.config import ExportSettings

ES_URL = "http://es.test:9200"


def hit(doc_id, **source):
    """Build one raw hit as the engine returns it."""
    return {"_id": doc_id, "_index": "logs", "_source": source}


def page(hits, scroll_id="cursor-1", total=None):
    """Build a raw search/scroll response body."""
    return {
        "_scroll_id": scroll_id,
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": len(hits) if total is None else total,
            "hits": hits,
        },
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ESEXPORT_* variables from the outer shell out of the tests."""
    for name in (
        "URL", "INDEX", "COLUMNS", "BATCH_SIZE", "INTERVAL_MS",
        "TERM_FILTER", "WILDCARD_FILTER", "REGEXP_FILTER",
        "PROXY_URL", "TIMEOUT_MS", "OUTFILE",
    ):
        monkeypatch.delenv(f"ESEXPORT_{name}", raising=False)


@pytest.fixture
def mock_settings():
    """Return settings pointing at the mocked engine."""
    return ExportSettings(url=ES_URL, index="logs", batch_size=10)


@pytest.fixture
def es_url():
    """Base URL for the mocked engine."""
    return ES_URL


@pytest.fixture
def http_client():
    """Plain httpx client; respx intercepts its requests."""
    with httpx.Client(timeout=5.0) as client:
        yield client
