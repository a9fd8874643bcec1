"""Conversion of UUIDs to and from database column values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from nacoskit.uuidgen.uuid import NIL, SIZE, UUID, UUIDError, from_bytes, from_string


def uuid_value(u: UUID) -> str:
    """Return the database representation of a UUID: its canonical string."""
    return str(u)


def scan_uuid(src: Any) -> UUID:
    """Build a UUID from a database value.

    A 16-byte value is read as raw bytes; any other bytes or string value is
    parsed as text.
    """
    if isinstance(src, (bytes, bytearray)):
        if len(src) == SIZE:
            return from_bytes(src)
        return from_string(bytes(src))
    if isinstance(src, str):
        return from_string(src)
    raise UUIDError(f"uuid: cannot convert {type(src).__name__} to UUID")


@dataclass
class NullUUID:
    """A UUID that may be NULL in the database."""

    uuid: UUID = field(default=NIL)
    valid: bool = False

    def value(self) -> str | None:
        """Return the database value, or None when NULL."""
        if not self.valid:
            return None
        return uuid_value(self.uuid)

    def scan(self, src: Any) -> None:
        """Load from a database value; None makes this NULL."""
        if src is None:
            self.uuid, self.valid = NIL, False
            return
        self.valid = True
        self.uuid = scan_uuid(src)