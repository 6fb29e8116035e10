"""
JSON codec for record classes.

Keys are the kebab-case wire names (field aliases), in schema
declaration order. Absent fields and empty lists are omitted.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from jresponse.core.exceptions import JSONParsingError, MalformedInputError

logger = logging.getLogger(__name__)


def prune_empty(value: Any) -> Any:
    """
    Recursively drop None values and empty lists from dumped data.

    Args:
        value: Output of model_dump()

    Returns:
        Same structure without absent entries
    """
    if isinstance(value, dict):
        return {k: prune_empty(v) for k, v in value.items() if v is not None and v != []}
    if isinstance(value, list):
        return [prune_empty(v) for v in value]
    return value


def read_json(model_cls: type[BaseModel], data: bytes | str) -> Any:
    """
    Parse raw JSON into a fresh record.

    Args:
        model_cls: Record class to populate
        data: Raw JSON document

    Returns:
        Populated record of type model_cls

    Raises:
        JSONParsingError: If the JSON is invalid or does not fit the schema
    """
    record_type = model_cls.__name__
    try:
        record = model_cls.model_validate_json(data)
    except ValidationError as e:
        raise JSONParsingError(
            f"JSON does not match {record_type} schema: {e}",
            record_type=record_type,
        ) from e

    logger.debug(f"Parsed {record_type} from {len(data)} bytes of JSON")
    return record


def write_json(record: BaseModel, indent: int | None = None) -> bytes:
    """
    Serialize a record to JSON bytes.

    Args:
        record: Record to serialize
        indent: Indentation width; compact output when None

    Returns:
        UTF-8 encoded JSON

    Raises:
        MalformedInputError: If the record cannot be serialized
    """
    record_type = type(record).__name__
    try:
        data = prune_empty(record.model_dump(mode="json", by_alias=True, exclude_none=True))
        separators = None if indent is not None else (",", ":")
        text = json.dumps(data, indent=indent, separators=separators, ensure_ascii=False)
        output = text.encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise MalformedInputError(
            f"Cannot serialize {record_type} to JSON: {e}",
            record_type=record_type,
        ) from e

    logger.debug(f"Serialized {record_type} to {len(output)} bytes of JSON")
    return output
