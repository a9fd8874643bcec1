import pytest

from nacoskit.uuidgen.uuid import (
    NAMESPACE_DNS,
    NAMESPACE_URL,
    NIL,
    UUID,
    UUIDError,
    Variant,
    Version,
    equal,
    from_bytes,
    from_bytes_or_nil,
    from_string,
    from_string_or_nil,
)

RAW = bytes(
    [0x6B, 0xA7, 0xB8, 0x10, 0x9D, 0xAD, 0x11, 0xD1,
     0x80, 0xB4, 0x00, 0xC0, 0x4F, 0xD4, 0x30, 0xC8]
)
CANONICAL = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"
NIL_TEXT = "00000000-0000-0000-0000-000000000000"


def test_bytes():
    assert bytes(UUID(RAW)) == RAW


def test_string():
    parsed = from_string(CANONICAL)
    assert parsed.__str__() == CANONICAL
    assert equal(parsed, NAMESPACE_DNS) is True
    assert NAMESPACE_DNS.__str__() == CANONICAL


def test_equal():
    assert equal(NAMESPACE_DNS, NAMESPACE_DNS) is True
    assert equal(NAMESPACE_DNS, NAMESPACE_URL) is False


def test_version():
    data = bytearray(16)
    data[6] = 0x10
    assert UUID(data).version() == Version.V1


def test_set_version():
    assert UUID().with_version(4).version() == Version.V4


def test_with_version_does_not_mutate():
    u = UUID()
    u.with_version(4)
    assert u.version() == 0


@pytest.mark.parametrize(
    "octet, expected",
    [
        (0x00, Variant.NCS),
        (0x80, Variant.RFC4122),
        (0xC0, Variant.MICROSOFT),
        (0xE0, Variant.FUTURE),
    ],
)
def test_variant(octet, expected):
    data = bytearray(16)
    data[8] = octet
    assert UUID(data).variant() == expected


def test_set_variant():
    u = UUID()
    for variant in (Variant.NCS, Variant.RFC4122, Variant.MICROSOFT, Variant.FUTURE):
        u = u.with_variant(variant)
        assert u.variant() == variant


def test_from_bytes():
    assert from_bytes(RAW) == UUID(RAW)
    with pytest.raises(UUIDError):
        from_bytes(b"")


def test_marshal_binary():
    assert bytes(UUID(RAW)) == RAW


def test_unmarshal_binary_wrong_length():
    with pytest.raises(UUIDError):
        UUID(b"")


@pytest.mark.parametrize(
    "text",
    [
        CANONICAL,
        "{6ba7b810-9dad-11d1-80b4-00c04fd430c8}",
        "urn:uuid:6ba7b810-9dad-11d1-80b4-00c04fd430c8",
        "6ba7b8109dad11d180b400c04fd430c8",
        "urn:uuid:6ba7b8109dad11d180b400c04fd430c8",
        "6BA7B810-9DAD-11D1-80B4-00C04FD430C8",
    ],
)
def test_from_string(text):
    assert from_string(text) == UUID(RAW)


def test_from_string_empty():
    with pytest.raises(UUIDError):
        from_string("")


@pytest.mark.parametrize("length", range(36))
def test_from_string_short(length):
    with pytest.raises(UUIDError):
        from_string("6ba7b810-9dad-11d1-80b4-00c04fd430c"[:length])


@pytest.mark.parametrize(
    "text",
    [
        "6ba7b810-9dad-11d1-80b4-00c04fd430c8=",
        "6ba7b810-9dad-11d1-80b4-00c04fd430c8}",
        "{6ba7b810-9dad-11d1-80b4-00c04fd430c8}f",
        "6ba7b810-9dad-11d1-80b4-00c04fd430c800c04fd430c8",
    ],
)
def test_from_string_long(text):
    with pytest.raises(UUIDError):
        from_string(text)


@pytest.mark.parametrize(
    "text",
    [
        "6ba7b8109dad11d180b400c04fd430c86ba7b8109dad11d180b400c04fd430c8",
        "urn:uuid:{6ba7b810-9dad-11d1-80b4-00c04fd430c8}",
        "uuid:urn:6ba7b810-9dad-11d1-80b4-00c04fd430c8",
        "uuid:urn:6ba7b8109dad11d180b400c04fd430c8",
        "6ba7b8109-dad-11d1-80b4-00c04fd430c8",
        "6ba7b810-9dad1-1d1-80b4-00c04fd430c8",
        "6ba7b810-9dad-11d18-0b4-00c04fd430c8",
        "6ba7b810-9dad-11d1-80b40-0c04fd430c8",
        "6ba7b810+9dad+11d1+80b4+00c04fd430c8",
        "(6ba7b810-9dad-11d1-80b4-00c04fd430c8}",
        "{6ba7b810-9dad-11d1-80b4-00c04fd430c8>",
        "zba7b810-9dad-11d1-80b4-00c04fd430c8",
        "6ba7b810-9dad11d180b400c04fd430c8",
        "6ba7b8109dad-11d180b400c04fd430c8",
        "6ba7b8109dad11d1-80b400c04fd430c8",
        "6ba7b8109dad11d180b4-00c04fd430c8",
        "6ba7b810 9dad 11d1 80b4 00c04fd430c",
    ],
)
def test_from_string_invalid(text):
    with pytest.raises(UUIDError):
        from_string(text)


def test_from_string_or_nil():
    assert from_string_or_nil("") == NIL
    assert from_string_or_nil(CANONICAL) == UUID(RAW)


def test_from_bytes_or_nil():
    assert from_bytes_or_nil(b"") == NIL
    assert from_bytes_or_nil(RAW) == UUID(RAW)


def test_marshal_text():
    assert str(UUID(RAW)).encode() == CANONICAL.encode()


def test_unmarshal_text():
    assert from_string(CANONICAL.encode()) == UUID(RAW)
    with pytest.raises(UUIDError):
        from_string(b"")


def test_string_round_trip():
    u = UUID(RAW)
    assert from_string(str(u)) == u


def test_nil_string():
    assert str(from_bytes(bytes(16))) == NIL_TEXT
    assert from_string(NIL_TEXT) == NIL


def test_hash_consistent_with_equality():
    assert {UUID(RAW), from_string(CANONICAL)} == {UUID(RAW)}