"""Translate field filters into the engine's boolean query."""

import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class FilterSet:
    """
    Field match criteria applied to an export.
    
    Every (field, pattern) pair across the three mappings must match;
    the same field may appear in more than one mapping. An empty
    pattern is a real match target, not an absent filter.
    
    Attributes:
        term: Exact-value matches
        wildcard: Wildcard-pattern matches (``*`` and ``?``)
        regexp: Regular-expression matches
    """
    
    term: dict[str, str] = field(default_factory=dict)
    wildcard: dict[str, str] = field(default_factory=dict)
    regexp: dict[str, str] = field(default_factory=dict)


def build_conditions(filters: FilterSet | None) -> list[dict[str, Any]]:
    """
    Build one condition per (field, pattern) pair.
    
    Term conditions come first, then wildcard, then regexp. An empty
    FilterSet gives an empty list, which the engine reads as match-all.
    
    Args:
        filters: Criteria to translate (None behaves like an empty set)
        
    Returns:
        List of condition dicts for a bool "must" clause
        
    Example:
        build_conditions(FilterSet(term={"logtype": "access"}))
        # [{"term": {"logtype": "access"}}]
    """
    if filters is None:
        return []
    
    conditions: list[dict[str, Any]] = []
    for kind, mapping in (
        ("term", filters.term),
        ("wildcard", filters.wildcard),
        ("regexp", filters.regexp),
    ):
        for name, pattern in mapping.items():
            conditions.append({kind: {name: pattern}})
    return conditions


def build_query(filters: FilterSet | None, size: int) -> dict[str, Any]:
    """Request body for a filtered search returning `size` hits per page."""
    return {
        "query": {"bool": {"must": build_conditions(filters)}},
        "size": size,
    }


def parse_filter_spec(spec: str | None) -> dict[str, str]:
    """
    Parse a "field:pattern,field:pattern" string into a mapping.
    
    Entries that don't split into exactly one field and one pattern
    are skipped. Whitespace around both parts is trimmed; an empty
    pattern is kept.
    
    Args:
        spec: Filter string as given on the command line
        
    Returns:
        Field-to-pattern mapping (later duplicates win)
    """
    result: dict[str, str] = {}
    if not spec:
        return result
    
    for entry in spec.split(","):
        if entry == "":
            continue
        parts = entry.split(":")
        if len(parts) != 2:
            logger.warning("skipping malformed filter entry %r", entry)
            continue
        result[parts[0].strip()] = parts[1].strip()
    return result
