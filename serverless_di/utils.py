"""
Item helpers for table clients.

- Primary-key presence checks used to split a batch into valid/invalid items
- Conversion of plain Python values into items the boto3 resource layer accepts
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from pydantic import BaseModel


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _as_mapping(item: Any) -> Mapping[str, Any]:
    if isinstance(item, BaseModel):
        return item.model_dump(exclude_none=True)
    if isinstance(item, Mapping):
        return item
    return {}


def is_valid_dynamo_item(primary_keys: Iterable[str], item: Any) -> bool:
    """Check that ``item`` carries a value for every primary-key attribute.

    Only presence is checked: ``None`` and ``""`` count as missing, any other
    value (including ``0`` and ``False``) is accepted regardless of type.

    Args:
        primary_keys: Key attribute names declared for the table
        item: Candidate record (mapping or Pydantic model)

    Returns:
        True if every key attribute is present and non-empty
    """
    fields = _as_mapping(item)
    return all(key in fields and not _is_empty(fields[key]) for key in primary_keys)


def partition_items(primary_keys: Iterable[str], items: Iterable[Any]) -> Tuple[List[Any], List[Any]]:
    """Split ``items`` into ``(valid, invalid)`` preserving input order."""
    keys = list(primary_keys)
    valid: List[Any] = []
    invalid: List[Any] = []
    for item in items:
        if is_valid_dynamo_item(keys, item):
            valid.append(item)
        else:
            invalid.append(item)
    return valid, invalid


def create_dynamo_item(item: Any) -> Dict[str, Any]:
    """Convert a record into a DynamoDB item for the boto3 resource API.

    Pydantic models are dumped without ``None`` fields, floats become
    ``Decimal`` and datetimes become ISO strings, recursively.

    Args:
        item: Record to store

    Returns:
        DynamoDB item dictionary
    """
    def convert(obj):
        if isinstance(obj, BaseModel):
            return convert(obj.model_dump(exclude_none=True))
        elif isinstance(obj, Mapping):
            return {k: convert(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [convert(v) for v in obj]
        elif isinstance(obj, float):
            # boto3 rejects float
            return Decimal(str(obj))
        elif isinstance(obj, datetime):
            return obj.isoformat()
        else:
            return obj

    return convert(_as_mapping(item))
