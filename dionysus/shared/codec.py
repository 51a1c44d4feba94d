"""
Wire codec policy.

Maps field names and date values between the backend's JSON and in-memory
records. Wire keys are snake_case; records expose snake_case attributes and
serialize through a snake_case alias generator, so attributes declared in
another convention still reach the wire as snake_case.

Dates are parsed according to a single policy shared by every response:

- ``strict``: ``yyyy-MM-dd'T'HH:mm:ss.SSS`` followed by ``Z`` or a ``+HH:MM``
  offset, e.g. ``2024-01-01T00:00:00.000+00:00``. Anything else is rejected.
- ``iso8601``: any ISO-8601 value pydantic accepts.
"""

import dataclasses
import json
import re
from datetime import datetime, timezone
from enum import Enum
from functools import lru_cache
from typing import Annotated, Any, Type, TypeVar, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, TypeAdapter, ValidationError, ValidationInfo
from pydantic_core import PydanticSerializationError

from .exceptions import DataEncodingError, DataParsingError

T = TypeVar('T')

STRICT_DATE_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}(?:Z|[+-]\d{2}:\d{2})$"
)
STRICT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def to_snake_case(name: str) -> str:
    """Convert camelCase to snake_case; snake_case names pass through unchanged"""
    return _CAMEL_BOUNDARY.sub(r"_\1", name).lower()


class DateFormat(str, Enum):
    """Date decoding policies"""
    STRICT = "strict"
    ISO8601 = "iso8601"


def parse_strict_datetime(value: str) -> datetime:
    """Parse a millisecond-precision timestamp with a numeric zone offset"""
    if not STRICT_DATE_PATTERN.match(value):
        raise ValueError(f"Invalid date, expected yyyy-MM-ddTHH:mm:ss.SSS+HH:MM: {value!r}")
    return datetime.strptime(value, STRICT_DATE_FORMAT)


def format_strict_datetime(value: datetime) -> str:
    """Format a datetime in the strict wire pattern; naive values are taken as UTC"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="milliseconds")


def _decode_datetime(value: Any, info: ValidationInfo) -> Any:
    if isinstance(value, datetime):
        return value
    context = info.context or {}
    if DateFormat(context.get("date_format", DateFormat.STRICT)) is DateFormat.STRICT:
        if not isinstance(value, str):
            raise ValueError(f"Invalid date, expected a string: {value!r}")
        return parse_strict_datetime(value)
    # pydantic's own ISO-8601 parsing takes over
    return value


ApiDateTime = Annotated[
    datetime,
    BeforeValidator(_decode_datetime),
    PlainSerializer(format_strict_datetime, return_type=str, when_used="json"),
]


class WireModel(BaseModel):
    """Base record exchanged with the backend"""

    model_config = ConfigDict(alias_generator=to_snake_case, populate_by_name=True)


def to_wire_keys(value: Any) -> Any:
    """Recursively convert mapping keys to snake_case and dates to the wire pattern"""
    if isinstance(value, BaseModel):
        return to_wire_keys(value.model_dump(mode="json", by_alias=True))
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_wire_keys(dataclasses.asdict(value))
    if isinstance(value, dict):
        return {
            (to_snake_case(key) if isinstance(key, str) else key): to_wire_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [to_wire_keys(item) for item in value]
    if isinstance(value, datetime):
        return format_strict_datetime(value)
    return value


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


class CodecPolicy:
    """Encodes request bodies and decodes response bodies"""

    def __init__(self, date_format: Union[DateFormat, str] = DateFormat.STRICT):
        self.date_format = DateFormat(date_format)

    def encode(self, payload: Any) -> bytes:
        """Serialize a payload to JSON bytes with snake_case keys"""
        try:
            return json.dumps(to_wire_keys(payload), ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError, PydanticSerializationError) as e:
            raise DataEncodingError(
                f"Could not serialize {type(payload).__name__}: {e}",
                source_type=type(payload).__name__,
                original_data=payload
            ) from e

    def decode(self, content: bytes, target: Type[T]) -> T:
        """Parse JSON bytes into ``target`` applying key and date translation"""
        target_name = getattr(target, "__name__", str(target))
        text = content.decode("utf-8", errors="replace") if content else ""
        if not text.strip():
            raise DataParsingError("Empty response body", target_type=target_name)

        try:
            raw = json.loads(text)
        except ValueError as e:
            raise DataParsingError(
                f"Response is not valid JSON: {e}",
                target_type=target_name,
                raw_content=text
            ) from e

        try:
            return _adapter(target).validate_python(
                to_wire_keys(raw),
                context={"date_format": self.date_format}
            )
        except ValidationError as e:
            raise DataParsingError(
                f"Response does not match {target_name}: {e}",
                target_type=target_name,
                raw_content=text
            ) from e
