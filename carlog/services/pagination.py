"""
Page/limit handling shared by every list operation.
"""

import math
import re
from typing import Any, NamedTuple, Optional

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100
# Largest OFFSET the database driver can bind (signed 64-bit)
MAX_OFFSET = 2**63 - 1

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

class PaginationParams(NamedTuple):
    page: int
    limit: int
    skip: int

def _to_int(value: Any) -> Optional[int]:
    """Read the leading integer of ``value``: "2.5" is 2, "1e3" is 1, "abc" is None."""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # More digits than int() accepts from a string
        return None

def get_pagination_params(page: Any = None, limit: Any = None) -> PaginationParams:
    """
    Build pagination parameters from raw query values.

    Missing or non-numeric values fall back to the defaults (page 1, limit
    20). The limit is clamped to 1..100 and the page to at least 1, and to
    at most the last page whose offset the database can still bind.
    """
    page_value = _to_int(page) or DEFAULT_PAGE
    limit_value = _to_int(limit) or DEFAULT_LIMIT

    limit_value = min(MAX_LIMIT, max(1, limit_value))
    page_value = min(MAX_OFFSET // limit_value + 1, max(1, page_value))
    return PaginationParams(page=page_value, limit=limit_value, skip=(page_value - 1) * limit_value)

def build_pagination_meta(page: int, limit: int, total: int) -> dict:
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "totalPages": math.ceil(total / limit) if limit else 0,
    }

def paginate(query, params: PaginationParams, *order_by):
    """
    Run the count and page queries for ``query``.

    Returns ``(items, meta)``.
    """
    total = query.order_by(None).count()
    items = query.order_by(*order_by).offset(params.skip).limit(params.limit).all()
    return items, build_pagination_meta(params.page, params.limit, total)
