"""
JSON envelope used for every persisted collection.

Payloads look like ``{"schema_version": 1, "records": [...]}`` so that a
format change is detected instead of silently misread.
"""

import json

from stockroom.core.exceptions import CorruptCollectionError, SchemaVersionError
from stockroom.core.interfaces import Record

SCHEMA_VERSION = 1


def encode_collection(records: list[Record]) -> str:
    """Serialize records into a versioned JSON envelope."""
    return json.dumps(
        {"schema_version": SCHEMA_VERSION, "records": records},
        ensure_ascii=False,
        separators=(",", ":"),
    )


def decode_collection(key: str, payload: str | None) -> list[Record]:
    """Parse a versioned JSON envelope; a missing payload is an empty collection."""
    if payload is None:
        return []
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, TypeError) as e:
        raise CorruptCollectionError(key, f"malformed JSON: {e}") from e

    if not isinstance(data, dict) or "records" not in data:
        raise CorruptCollectionError(key, "missing collection envelope")

    version = data.get("schema_version")
    if version != SCHEMA_VERSION:
        raise SchemaVersionError(key, version, SCHEMA_VERSION)

    records = data["records"]
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise CorruptCollectionError(key, "records must be an array of objects")
    return records
