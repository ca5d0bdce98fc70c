"""Scroll-based walk over a filtered index."""

import json
import logging
import time
from typing import Any, Callable, Optional

import httpx
from pydantic import ValidationError

from esexport.exceptions import (
    EngineError,
    InvalidArgumentError,
    ProtocolError,
    TransportError,
)
from esexport.filters import FilterSet, build_query
from esexport.response import Hit, ScrollResponse

logger = logging.getLogger(__name__)

SCROLL_LEASE = "1m"

Consumer = Callable[[list[Hit]], None]


def walk(
    client: httpx.Client,
    endpoint: str,
    index: str,
    batch_size: int,
    pacing_interval: float,
    filters: Optional[FilterSet],
    consumer: Consumer,
) -> int:
    """
    Export every hit matching `filters`, one batch at a time.
    
    Opens a scroll cursor with a filtered search, then keeps exchanging
    the latest cursor for the next batch until the engine returns an
    empty one. Each non-empty batch is handed to `consumer` exactly
    once. Between turns the walk sleeps for `pacing_interval` seconds.
    
    The scroll lease is fixed at one minute per turn. The consumer and
    the pacing pause together must fit inside it, or the cursor expires
    on the server and the next turn fails.
    
    Args:
        client: httpx.Client used for every request of the walk
        endpoint: Engine base URL (e.g. "http://localhost:9200")
        index: Index to export
        batch_size: Hits requested per turn (> 0)
        pacing_interval: Seconds to wait between turns (0 for none)
        filters: Match criteria; None matches everything
        consumer: Called once per batch; exceptions it raises are
                  logged and do not stop the walk
        
    Returns:
        Number of hits handed to the consumer
        
    Raises:
        InvalidArgumentError: If endpoint, index or batch_size is unusable
        TransportError: If a request fails or a response can't be decoded
        EngineError: If the engine rejects a request
        ProtocolError: If a response reports hits but carries no cursor
        
    Example:
        with httpx.Client(timeout=10.0) as client:
            total = walk(client, "http://localhost:9200", "logs", 500, 0.0,
                         FilterSet(term={"level": "error"}), print)
    """
    _check_target(endpoint, index, batch_size)
    base_url = endpoint.rstrip("/")
    
    body = build_query(filters, batch_size)
    logger.debug("query str: %s", json.dumps(body))
    response, raw = _post(
        client,
        f"{base_url}/{index}/_search",
        body,
        params={"scroll": SCROLL_LEASE},
    )
    scroll_id, batch = _unpack(response, body, raw)
    
    count = 0
    while batch:
        _deliver(consumer, batch)
        count += len(batch)
        logger.info("count: %d", count)
        
        if pacing_interval > 0:
            time.sleep(pacing_interval)
        
        body = {"scroll": SCROLL_LEASE, "scroll_id": scroll_id}
        response, raw = _post(client, f"{base_url}/_search/scroll", body)
        scroll_id, batch = _unpack(response, body, raw)
    
    return count


def search(
    client: httpx.Client,
    endpoint: str,
    index: str,
    size: int,
    filters: Optional[FilterSet] = None,
) -> tuple[int, list[Hit]]:
    """
    Run a single filtered search without opening a scroll cursor.
    
    Args:
        client: httpx.Client to send the request with
        endpoint: Engine base URL
        index: Index to search
        size: Maximum hits to return (> 0)
        filters: Match criteria; None matches everything
        
    Returns:
        Tuple of (engine-reported total matches, first page of hits)
        
    Raises:
        InvalidArgumentError: If endpoint, index or size is unusable
        TransportError: If the request fails or the response can't be decoded
        EngineError: If the engine rejects the query
    """
    _check_target(endpoint, index, size)
    
    body = build_query(filters, size)
    response, _ = _post(client, f"{endpoint.rstrip('/')}/{index}/_search", body)
    if response.total == 0:
        return 0, []
    return response.total, response.batch


def _check_target(endpoint: Any, index: Any, size: Any) -> None:
    """Reject unusable arguments before anything goes on the wire."""
    if not isinstance(endpoint, str) or not endpoint:
        raise InvalidArgumentError("endpoint must be a non-empty string")
    if not isinstance(index, str) or not index:
        raise InvalidArgumentError("index name must be a non-empty string")
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidArgumentError(f"batch size must be a positive integer, got {size!r}")


def _post(
    client: httpx.Client,
    url: str,
    body: dict,
    params: Optional[dict] = None,
) -> tuple[ScrollResponse, str]:
    """
    Send one request and decode the response envelope.
    
    Returns:
        Tuple of (decoded envelope, raw response body)
    
    Raises:
        TransportError: If the request fails or the body isn't a search response
        EngineError: If the envelope reports a failure
    """
    payload = json.dumps(body)
    
    try:
        response = client.post(url, params=params, json=body)
    except (httpx.RequestError, httpx.InvalidURL) as e:
        logger.error("post error, post body: %s, error: %s", payload, e)
        raise TransportError(
            f"Request to {url} failed: {e}", request_body=payload
        ) from e
    
    try:
        data = response.json()
    except ValueError as e:
        raise TransportError(
            f"Malformed response from {url} "
            f"(HTTP {response.status_code}): {response.text}",
            request_body=payload,
            response_body=response.text,
        ) from e
    
    if not isinstance(data, dict):
        raise TransportError(
            f"Unexpected response from {url}: {response.text}",
            request_body=payload,
            response_body=response.text,
        )
    
    # Some proxies and older engines leave the status out of error bodies
    if data.get("status") is None and response.status_code >= 400:
        data = {**data, "status": response.status_code}
    
    try:
        envelope = ScrollResponse.model_validate(data)
    except ValidationError as e:
        raise TransportError(
            f"Malformed response from {url}: {e}",
            request_body=payload,
            response_body=response.text,
        ) from e
    
    if envelope.failed:
        message = envelope.error or response.text
        raise EngineError(
            f"Engine rejected request (status {envelope.status}): {message}",
            status=envelope.status,
            request_body=payload,
            response_body=response.text,
        )
    
    return envelope, response.text


def _unpack(
    response: ScrollResponse,
    request_body: dict,
    response_body: str,
) -> tuple[Optional[str], list[Hit]]:
    """
    Extract the cursor and batch from a successful response.
    
    A response with no matches ends the walk and needs no cursor.
    
    Raises:
        ProtocolError: If matches are reported without a cursor
    """
    if response.total == 0:
        return None, []
    
    if not response.scroll_id:
        kind = "first" if "query" in request_body else "scroll"
        raise ProtocolError(
            f"missing cursor on non-empty {kind} response",
            request_body=json.dumps(request_body),
            response_body=response_body,
        )
    
    return response.scroll_id, response.batch


def _deliver(consumer: Consumer, batch: list[Hit]) -> None:
    """Hand a batch to the consumer, keeping its failures out of the walk."""
    try:
        consumer(batch)
    except Exception:
        logger.exception("consumer failed on a batch of %d hits", len(batch))
