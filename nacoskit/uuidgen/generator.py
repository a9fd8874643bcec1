"""UUID generation for versions 1 to 5."""

from __future__ import annotations

import hashlib
import os
import struct
import threading
import time
from typing import Callable

import psutil

from nacoskit.uuidgen.uuid import UUID, UUIDError, Domain, Variant, Version

# Difference in 100-nanosecond intervals between the UUID epoch
# (October 15, 1582) and the Unix epoch (January 1, 1970).
EPOCH_START = 122192928000000000

EpochFunc = Callable[[], int]
HwAddrFunc = Callable[[], bytes]
RandSource = Callable[[int], bytes]

_POSIX_UID = (os.getuid() if hasattr(os, "getuid") else -1) & 0xFFFFFFFF
_POSIX_GID = (os.getgid() if hasattr(os, "getgid") else -1) & 0xFFFFFFFF


def _read_full(rand: RandSource, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``rand``, calling it as often as needed."""
    buf = bytearray()
    while len(buf) < size:
        try:
            chunk = rand(size - len(buf))
        except OSError as exc:
            raise UUIDError(f"uuid: failed to read random bytes: {exc}") from exc
        if not chunk:
            raise UUIDError("uuid: unexpected end of random data")
        buf += chunk
    return bytes(buf[:size])


def default_hw_addr_func() -> bytes:
    """Return the hardware address of the first interface that has one."""
    for addresses in psutil.net_if_addrs().values():
        for address in addresses:
            if address.family != psutil.AF_LINK or not address.address:
                continue
            digits = address.address.replace(":", "").replace("-", "")
            try:
                raw = bytes.fromhex(digits)
            except ValueError:
                continue
            if len(raw) >= 6 and any(raw):
                return raw
    raise UUIDError("uuid: no HW address found")


def _from_hash(algorithm: str, ns: UUID, name: str) -> UUID:
    digest = hashlib.new(algorithm, bytes(ns) + name.encode("utf-8")).digest()
    return UUID(digest[:16])


class Generator:
    """RFC 4122 UUID generator with pluggable clock, hardware address and randomness."""

    def __init__(
        self,
        epoch_func: EpochFunc | None = None,
        hw_addr_func: HwAddrFunc | None = None,
        rand: RandSource | None = None,
    ) -> None:
        self._epoch_func = epoch_func or time.time_ns
        self._hw_addr_func = hw_addr_func or default_hw_addr_func
        self._rand = rand or os.urandom

        self._clock_once_lock = threading.Lock()
        self._clock_initialised = False
        self._hw_once_lock = threading.Lock()
        self._hw_initialised = False
        self._storage_lock = threading.Lock()

        self._last_time = 0
        self._clock_sequence = 0
        self._hardware_addr = bytes(6)

    def _epoch(self) -> int:
        return EPOCH_START + self._epoch_func() // 100

    def _get_clock_sequence(self) -> tuple[int, int]:
        with self._clock_once_lock:
            if not self._clock_initialised:
                self._clock_initialised = True
                self._clock_sequence = int.from_bytes(_read_full(self._rand, 2), "big")

        with self._storage_lock:
            now = self._epoch()
            # The clock did not move since the last UUID: bump the sequence.
            if now <= self._last_time:
                self._clock_sequence = (self._clock_sequence + 1) & 0xFFFF
            self._last_time = now
            return now, self._clock_sequence

    def _get_hardware_addr(self) -> bytes:
        with self._hw_once_lock:
            if not self._hw_initialised:
                self._hw_initialised = True
                try:
                    hw_addr = bytes(self._hw_addr_func())
                except (OSError, ValueError):
                    hw_addr = None
                if hw_addr is not None:
                    self._hardware_addr = hw_addr[:6].ljust(6, b"\x00")
                else:
                    # No real interface: use random bytes with the multicast bit set.
                    random_addr = bytearray(_read_full(self._rand, 6))
                    random_addr[0] |= 0x01
                    self._hardware_addr = bytes(random_addr)
        return self._hardware_addr

    def new_v1(self) -> UUID:
        """Return a UUID built from the current time and the hardware address."""
        now, clock_seq = self._get_clock_sequence()
        head = struct.pack(
            ">IHHH",
            now & 0xFFFFFFFF,
            (now >> 32) & 0xFFFF,
            (now >> 48) & 0xFFFF,
            clock_seq,
        )
        u = UUID(head + self._get_hardware_addr())
        return u.with_version(Version.V1).with_variant(Variant.RFC4122)

    def new_v2(self, domain: int) -> UUID:
        """Return a DCE security UUID for the POSIX UID or GID."""
        data = bytearray(bytes(self.new_v1()))
        if domain == Domain.PERSON:
            data[0:4] = struct.pack(">I", _POSIX_UID)
        elif domain == Domain.GROUP:
            data[0:4] = struct.pack(">I", _POSIX_GID)
        data[9] = int(domain) & 0xFF
        return UUID(data).with_version(Version.V2).with_variant(Variant.RFC4122)

    def new_v3(self, ns: UUID, name: str) -> UUID:
        """Return a UUID from the MD5 hash of a namespace and a name."""
        u = _from_hash("md5", ns, name)
        return u.with_version(Version.V3).with_variant(Variant.RFC4122)

    def new_v4(self) -> UUID:
        """Return a random UUID."""
        u = UUID(_read_full(self._rand, 16))
        return u.with_version(Version.V4).with_variant(Variant.RFC4122)

    def new_v5(self, ns: UUID, name: str) -> UUID:
        """Return a UUID from the SHA-1 hash of a namespace and a name."""
        u = _from_hash("sha1", ns, name)
        return u.with_version(Version.V5).with_variant(Variant.RFC4122)


_GLOBAL = Generator()


def new_v1() -> UUID:
    """Return a time and hardware address based UUID."""
    return _GLOBAL.new_v1()


def new_v2(domain: int) -> UUID:
    """Return a DCE security UUID."""
    return _GLOBAL.new_v2(domain)


def new_v3(ns: UUID, name: str) -> UUID:
    """Return an MD5 name-based UUID."""
    return _GLOBAL.new_v3(ns, name)


def new_v4() -> UUID:
    """Return a random UUID."""
    return _GLOBAL.new_v4()


def new_v5(ns: UUID, name: str) -> UUID:
    """Return a SHA-1 name-based UUID."""
    return _GLOBAL.new_v5(ns, name)