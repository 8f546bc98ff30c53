"""
rent_car.pagination

Query-string pagination parsing.

Responsibilities:
- Turn raw `page`/`limit` strings into positive integers with defaults.
- Enforce the configured upper bound on `limit` by rejecting, not clamping.
"""

from __future__ import annotations

from dataclasses import dataclass

from rent_car.errors import MalformedInputError

# Largest OFFSET a signed 64-bit SQL integer can hold.
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True, slots=True)
class Page:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError as e:
        raise MalformedInputError(f"{name} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise MalformedInputError(f"{name} must be positive, got {value}")
    return value


def parse_pagination(
    page: str | None,
    limit: str | None,
    *,
    default_limit: int,
    max_limit: int,
) -> Page:
    parsed_page = 1 if page is None or page == "" else _positive_int("page", page)
    if limit is None or limit == "":
        parsed_limit = default_limit
    else:
        parsed_limit = _positive_int("limit", limit)
        if parsed_limit > max_limit:
            raise MalformedInputError(f"limit must not exceed {max_limit}, got {parsed_limit}")
    result = Page(page=parsed_page, limit=parsed_limit)
    if result.offset > MAX_OFFSET:
        raise MalformedInputError(f"page {parsed_page} is out of range for limit {parsed_limit}")
    return result


# --- Module Notes -----------------------------------------------------------
# Defaults and the limit bound come from `Settings`; only the SQL offset ceiling lives here.
