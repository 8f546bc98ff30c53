"""
rent_car.validation

Identifier validation for single-entity addressing.

Responsibilities:
- Accept only canonical textual UUIDs (8-4-4-4-12 hex, any letter case).
- Reject everything else before storage is touched.
"""

from __future__ import annotations

import re
import uuid

from rent_car.errors import MalformedInputError

# `uuid.UUID()` also accepts braces, `urn:uuid:` prefixes and bare hex; those are not canonical.
CANONICAL_UUID_PATTERN = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
_CANONICAL_UUID = re.compile(CANONICAL_UUID_PATTERN)


def validate_uuid(value: str) -> uuid.UUID:
    if not isinstance(value, str) or _CANONICAL_UUID.fullmatch(value) is None:
        raise MalformedInputError(f"invalid UUID format: {value!r}")
    return uuid.UUID(value)


# --- Module Notes -----------------------------------------------------------
# Used by `api.deps.order_id_path` for every route that addresses one order.
