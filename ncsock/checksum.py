"""Internet checksums for IPv4 headers and IPv4/IPv6 pseudo-headers."""

from __future__ import annotations

import ipaddress
import struct

IP_PROTO_UDP = 17

_Address4 = str | int | bytes | ipaddress.IPv4Address
_Address6 = str | int | bytes | ipaddress.IPv6Address


def _sum_words(data: bytes, total: int = 0) -> int:
    """Add the big-endian 16-bit words of ``data`` to ``total``."""
    if len(data) % 2:
        data += b"\x00"
    return total + sum(word for (word,) in struct.iter_unpack("!H", data))


def _carry(total: int) -> int:
    """Fold carries into 16 bits and return the one's complement."""
    while total >> 16:
        total = (total & 0xFFFF) + (total >> 16)
    return ~total & 0xFFFF


def in_cksum(data: bytes) -> int:
    """Return the Internet checksum of ``data`` as a host integer."""
    return _carry(_sum_words(bytes(data)))


def ip4_pseudoheader_check(
    saddr: _Address4, daddr: _Address4, proto: int, segment: bytes
) -> int:
    """Checksum of an upper-layer segment under the IPv4 pseudo-header."""
    segment = bytes(segment)
    if len(segment) > 0xFFFF:
        raise ValueError("segment is too long for an IPv4 pseudo-header")
    pseudo = struct.pack(
        "!4s4sBBH",
        ipaddress.IPv4Address(saddr).packed,
        ipaddress.IPv4Address(daddr).packed,
        0,
        proto & 0xFF,
        len(segment),
    )
    result = _carry(_sum_words(segment, _sum_words(pseudo)))
    # A computed UDP checksum of zero is transmitted as all ones.
    if proto == IP_PROTO_UDP and result == 0:
        result = 0xFFFF
    return result


def ip6_pseudoheader_check(
    saddr: _Address6, daddr: _Address6, next_header: int, segment: bytes
) -> int:
    """Checksum of an upper-layer segment under the IPv6 pseudo-header."""
    segment = bytes(segment)
    if len(segment) > 0xFFFFFFFF:
        raise ValueError("segment is too long for an IPv6 pseudo-header")
    pseudo = struct.pack(
        "!16s16sI3xB",
        ipaddress.IPv6Address(saddr).packed,
        ipaddress.IPv6Address(daddr).packed,
        len(segment),
        next_header & 0xFF,
    )
    result = _carry(_sum_words(segment, _sum_words(pseudo)))
    if next_header == IP_PROTO_UDP and result == 0:
        result = 0xFFFF
    return result