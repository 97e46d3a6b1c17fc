"""MongoDB object id wrapper that may be empty."""

from __future__ import annotations

from typing import Any, Mapping

from bson import ObjectId
from bson.errors import InvalidId


class Id:
    """A 12-byte MongoDB object id, or no id at all.

    The id holds a 4-byte creation timestamp, a 5-byte per-process random
    value and a 3-byte counter.
    """

    __slots__ = ("_oid",)

    def __init__(self, value: "str | ObjectId | Id | None" = None) -> None:
        if value is None or isinstance(value, ObjectId):
            self._oid: ObjectId | None = value
        elif isinstance(value, Id):
            self._oid = value._oid
        elif isinstance(value, str):
            try:
                self._oid = ObjectId(value)
            except (InvalidId, TypeError) as exc:
                raise ValueError(f"invalid object id: {value!r}") from exc
        else:
            raise TypeError(f"cannot make an Id from {type(value).__name__}")

    @classmethod
    def from_bson_document(cls, doc: Mapping[str, Any]) -> "Id":
        """Return the id held in a document's ``_id`` field."""
        oid = doc["_id"]
        if not isinstance(oid, ObjectId):
            raise TypeError("document _id is not an object id")
        return cls(oid)

    @property
    def oid(self) -> ObjectId | None:
        """The raw object id, or None when empty."""
        return self._oid

    def created_at(self) -> int:
        """Seconds since the unix epoch at creation, or -1 when empty."""
        if self._oid is None:
            return -1
        return int(self._oid.generation_time.timestamp())

    def __str__(self) -> str:
        return str(self._oid) if self._oid is not None else ""

    def __repr__(self) -> str:
        return f"Id({str(self)!r})" if self._oid is not None else "Id()"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Id):
            return self._oid == other._oid
        if isinstance(other, ObjectId):
            return self._oid is not None and self._oid == other
        if isinstance(other, str):
            return self._oid is not None and str(self._oid) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._oid)

    def __bool__(self) -> bool:
        return self._oid is not None