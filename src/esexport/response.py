"""Decoding of search and scroll responses."""

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Hit(BaseModel):
    """
    One result record.
    
    Attributes:
        id: Document identifier (``_id``)
        source: Document fields (``_source``), values as decoded from JSON
    """
    
    model_config = ConfigDict(populate_by_name=True)
    
    id: str = Field(alias="_id")
    source: dict[str, Any] = Field(default_factory=dict, alias="_source")
    
    @field_validator("source", mode="before")
    @classmethod
    def _source_or_empty(cls, value: Any) -> Any:
        # _source is null when source storage is disabled for the index
        return {} if value is None else value


class HitsEnvelope(BaseModel):
    """The ``hits`` section, with ``total`` normalized to a plain int."""
    
    total: Optional[int] = None
    hits: list[Hit] = Field(default_factory=list)
    
    @field_validator("total", mode="before")
    @classmethod
    def _normalize_total(cls, value: Any) -> Any:
        # 7.x and later: {"value": N, "relation": "eq"}
        if isinstance(value, dict):
            return value.get("value")
        return value
    
    @field_validator("hits", mode="before")
    @classmethod
    def _hits_or_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ScrollResponse(BaseModel):
    """
    Parsed body of a ``_search`` or ``_search/scroll`` response.
    
    ``error`` is rendered to a string whatever its wire shape, and
    ``hits.total`` to an int, so callers never look at the raw JSON.
    
    Attributes:
        status: Engine status; 0 means success
        error: Rendered error payload, if any
        scroll_id: Cursor for the next scroll turn, if any
        hits: Hits section
    """
    
    model_config = ConfigDict(populate_by_name=True)
    
    status: int = 0
    error: Optional[str] = None
    scroll_id: Optional[str] = Field(default=None, alias="_scroll_id")
    hits: HitsEnvelope = Field(default_factory=HitsEnvelope)
    
    @field_validator("status", mode="before")
    @classmethod
    def _status_or_zero(cls, value: Any) -> Any:
        return 0 if value is None else value
    
    @field_validator("error", mode="before")
    @classmethod
    def _render_error(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return json.dumps(value)
    
    @field_validator("hits", mode="before")
    @classmethod
    def _hits_section_or_empty(cls, value: Any) -> Any:
        return {} if value is None else value
    
    @property
    def failed(self) -> bool:
        """True when the engine reported an application-level failure."""
        return self.status != 0
    
    @property
    def total(self) -> int:
        """
        Engine-reported number of matches.
        
        Falls back to the number of returned hits when the engine
        omits the total (track_total_hits disabled).
        """
        if self.hits.total is None:
            return len(self.hits.hits)
        return self.hits.total
    
    @property
    def batch(self) -> list[Hit]:
        """Hits carried by this response."""
        return self.hits.hits
