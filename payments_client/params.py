"""
Wire types shared by every resource: timestamps, metadata, expandable
references, list envelopes, range filters and the query-string encoder.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import (
    Annotated,
    Any,
    ClassVar,
    Dict,
    Generic,
    List,
    Literal,
    Mapping,
    Optional,
    Protocol,
    Tuple,
    TypeVar,
    Union,
    runtime_checkable,
)
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

T = TypeVar("T")

# unix seconds
Timestamp = int

Metadata = Dict[str, str]

# three-letter ISO 4217 code, lowercase on the wire
Currency = Annotated[str, StringConstraints(pattern=r"^[a-z]{3}$")]

# either the bare id or, when requested with expand[], the full object
Expandable = Union[str, T]


@runtime_checkable
class Object(Protocol):
    """
    Anything the list, cache and expansion helpers can handle generically:
    an identifier plus a static type tag.
    """

    id: str

    @property
    def object(self) -> str: ...


def expandable_id(value: Any) -> Optional[str]:
    """
    Identifier behind an expandable reference, expanded or not.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return value.get("id")
    return value.id


def is_expanded(value: Any) -> bool:
    return value is not None and not isinstance(value, str)


def timestamp_to_datetime(ts: Timestamp) -> datetime:
    return datetime.fromtimestamp(ts, tz=timezone.utc)


class WireModel(BaseModel):
    """
    Base for anything that goes over the wire. Absent optional fields are
    left out of the output entirely, never sent as null.
    """

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


class ApiObject(WireModel):
    """
    Immutable snapshot of a server-side object.

    Subclasses set OBJECT_NAME; it is shared by every instance and never
    serialized.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    OBJECT_NAME: ClassVar[str] = ""

    def __hash__(self) -> int:
        # snapshots of the same object share a cache slot
        return hash((type(self), self.id))

    @property
    def object(self) -> str:
        return self.OBJECT_NAME


class ListObject(WireModel, Generic[T]):
    """
    A single page of a paginated list endpoint, in server order.
    """

    model_config = ConfigDict(frozen=True)

    object: Literal["list"] = "list"
    data: List[T] = Field(default_factory=list)
    has_more: bool
    url: str
    total_count: Optional[int] = None

    @property
    def first_id(self) -> Optional[str]:
        return expandable_id(self.data[0]) if self.data else None

    @property
    def last_id(self) -> Optional[str]:
        return expandable_id(self.data[-1]) if self.data else None

    @property
    def next_page_cursor(self) -> Optional[str]:
        """starting_after value for the following page, or None on the last one."""
        if not self.has_more:
            return None
        return self.last_id


class RangeBounds(WireModel):
    """
    Open/closed bounds on a timestamp filter; unset bounds are not sent.
    """

    gt: Optional[Timestamp] = None
    gte: Optional[Timestamp] = None
    lt: Optional[Timestamp] = None
    lte: Optional[Timestamp] = None


# an exact timestamp or a set of bounds
RangeQuery = Union[Timestamp, RangeBounds]


def _flatten(prefix: str, value: Any, pairs: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_none=True)
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, pairs)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _flatten(f"{prefix}[]", item, pairs)
    elif isinstance(value, bool):
        pairs.append((prefix, "true" if value else "false"))
    elif isinstance(value, Enum):
        pairs.append((prefix, str(value.value)))
    else:
        pairs.append((prefix, str(value)))


def encode_query(values: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """
    Flatten a mapping into bracket-notation query pairs.

        {"created": {"gt": 1}}   -> [("created[gt]", "1")]
        {"expand": ["a", "b"]}   -> [("expand[]", "a"), ("expand[]", "b")]

    None values and empty sequences produce nothing.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in values.items():
        _flatten(key, value, pairs)
    return pairs


class QueryParams(WireModel):
    """
    Base for request parameter records sent as a query string.
    Fields are encoded in declaration order.
    """

    model_config = ConfigDict(extra="forbid")

    def to_query(self) -> List[Tuple[str, str]]:
        return encode_query(self.model_dump(exclude_none=True))

    def to_query_string(self) -> str:
        return urlencode(self.to_query(), safe="[]")
