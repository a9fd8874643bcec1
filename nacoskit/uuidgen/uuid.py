"""Universally unique identifiers as described by RFC 4122 and DCE 1.1."""

from __future__ import annotations

from enum import IntEnum

SIZE = 16

_URN_PREFIX = "urn:uuid:"
_BYTE_GROUPS = (8, 4, 4, 4, 12)
_DASH_POSITIONS = (8, 13, 18, 23)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class UUIDError(ValueError):
    """Raised when a UUID cannot be built from the given input."""


class Version(IntEnum):
    """UUID algorithm versions."""

    V1 = 1
    V2 = 2
    V3 = 3
    V4 = 4
    V5 = 5


class Variant(IntEnum):
    """UUID layout variants."""

    NCS = 0
    RFC4122 = 1
    MICROSOFT = 2
    FUTURE = 3


class Domain(IntEnum):
    """DCE security domains."""

    PERSON = 0
    GROUP = 1
    ORG = 2


class UUID:
    """An immutable 16-byte identifier."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes | bytearray = bytes(SIZE)) -> None:
        data = bytes(data)
        if len(data) != SIZE:
            raise UUIDError(
                f"uuid: UUID must be exactly 16 bytes long, got {len(data)} bytes"
            )
        self._data = data

    def version(self) -> int:
        """Return the algorithm version stored in the UUID."""
        return self._data[6] >> 4

    def variant(self) -> Variant:
        """Return the layout variant stored in the UUID."""
        octet = self._data[8]
        if octet >> 7 == 0x00:
            return Variant.NCS
        if octet >> 6 == 0x02:
            return Variant.RFC4122
        if octet >> 5 == 0x06:
            return Variant.MICROSOFT
        return Variant.FUTURE

    def with_version(self, version: int) -> UUID:
        """Return a copy with the version bits set."""
        data = bytearray(self._data)
        data[6] = (data[6] & 0x0F) | ((int(version) << 4) & 0xFF)
        return UUID(data)

    def with_variant(self, variant: int) -> UUID:
        """Return a copy with the variant bits set."""
        data = bytearray(self._data)
        octet = data[8]
        if variant == Variant.NCS:
            data[8] = octet & (0xFF >> 1)
        elif variant == Variant.RFC4122:
            data[8] = (octet & (0xFF >> 2)) | (0x02 << 6)
        elif variant == Variant.MICROSOFT:
            data[8] = (octet & (0xFF >> 3)) | (0x06 << 5)
        else:
            data[8] = (octet & (0xFF >> 3)) | (0x07 << 5)
        return UUID(data)

    def __bytes__(self) -> bytes:
        return self._data

    def __str__(self) -> str:
        h = self._data.hex()
        return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:]}"

    def __repr__(self) -> str:
        return f"UUID('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)


NIL = UUID()


def equal(u1: UUID, u2: UUID) -> bool:
    """Return whether two UUIDs hold the same bytes."""
    return bytes(u1) == bytes(u2)


def from_bytes(data: bytes | bytearray) -> UUID:
    """Build a UUID from exactly 16 raw bytes."""
    return UUID(data)


def from_bytes_or_nil(data: bytes | bytearray) -> UUID:
    """Like from_bytes, but return the nil UUID on bad input."""
    try:
        return from_bytes(data)
    except UUIDError:
        return NIL


def _decode_hex(text: str, original: str) -> bytes:
    if not all(ch in _HEX_DIGITS for ch in text):
        raise UUIDError(f"uuid: invalid hex in UUID: {original}")
    return bytes.fromhex(text)


def _decode_hash_like(text: str, original: str) -> UUID:
    return UUID(_decode_hex(text, original))


def _decode_canonical(text: str, original: str) -> UUID:
    if any(text[pos] != "-" for pos in _DASH_POSITIONS):
        raise UUIDError(f"uuid: incorrect UUID format {original}")
    parts = []
    start = 0
    for length in _BYTE_GROUPS:
        parts.append(_decode_hex(text[start:start + length], original))
        start += length + 1
    return UUID(b"".join(parts))


def _decode_plain(text: str, original: str) -> UUID:
    if len(text) == 32:
        return _decode_hash_like(text, original)
    if len(text) == 36:
        return _decode_canonical(text, original)
    raise UUIDError(f"uuid: incorrect UUID length: {original}")


def _decode_braced(text: str) -> UUID:
    if text[0] != "{" or text[-1] != "}":
        raise UUIDError(f"uuid: incorrect UUID format {text}")
    return _decode_plain(text[1:-1], text)


def _decode_urn(text: str) -> UUID:
    if not text.startswith(_URN_PREFIX):
        raise UUIDError(f"uuid: incorrect UUID format: {text}")
    return _decode_plain(text[len(_URN_PREFIX):], text)


def from_string(text: str | bytes) -> UUID:
    """Parse a canonical, hash-like, braced or URN UUID string."""
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError as exc:
            raise UUIDError(f"uuid: incorrect UUID format: {text!r}") from exc
    length = len(text)
    if length == 32:
        return _decode_hash_like(text, text)
    if length == 36:
        return _decode_canonical(text, text)
    if length == 38:
        return _decode_braced(text)
    if length in (41, 45):
        return _decode_urn(text)
    raise UUIDError(f"uuid: incorrect UUID length: {text}")


def from_string_or_nil(text: str | bytes) -> UUID:
    """Like from_string, but return the nil UUID on bad input."""
    try:
        return from_string(text)
    except UUIDError:
        return NIL


NAMESPACE_DNS = from_string("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_URL = from_string("6ba7b811-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_OID = from_string("6ba7b812-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_X500 = from_string("6ba7b814-9dad-11d1-80b4-00c04fd430c8")