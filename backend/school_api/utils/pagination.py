"""Paging, sorting and include parameters of list endpoints."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def parse_int(raw: str | None, default: int) -> int:
    """Read the leading integer of `raw`.

    A missing or non-numeric value, or one that reads as zero, yields
    `default`. Anything else (including negatives) is returned as-is.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    return int(match.group(1)) or default


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int
    descending: bool
    include: str

    @classmethod
    def from_query(cls, page: str | None, limit: str | None, sort: str | None, include: str | None) -> "PageRequest":
        return cls(
            page=parse_int(page, DEFAULT_PAGE),
            limit=parse_int(limit, DEFAULT_LIMIT),
            descending=sort != "asc",
            include=include or "",
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def sort_order(self) -> str:
        return "DESC" if self.descending else "ASC"

    def meta(self, total_items: int) -> dict:
        """Build the `meta` block of a list envelope."""
        return {
            "totalItems": total_items,
            "totalPages": math.ceil(total_items / self.limit),
            "currentPage": self.page,
            "itemsPerPage": self.limit,
            "sortOrder": self.sort_order,
            "includedRelations": self.include or "none",
        }
