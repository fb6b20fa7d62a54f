"""Construction of ICMPv4, ICMPv6 and IGMP packets."""

from __future__ import annotations

import enum
import struct

from .checksum import in_cksum, ip6_pseudoheader_check
from .ip import IPPROTO_ICMP, IPPROTO_ICMPV6, IPPROTO_IGMP, build_ip6_pkt, build_ip_pkt

ICMP_MAX_PAYLOAD_LEN = 1500
IGMP_MAX_PAYLOAD_LEN = 1500
ICMP6_ECHO = 128

ICMP_NET_UNREACH = 0
ICMP_HOST_UNREACH = 1
ICMP_PROT_UNREACH = 2
ICMP_PORT_UNREACH = 3
ICMP_FRAG_NEEDED = 4
ICMP_SR_FAILED = 5
ICMP_POINTINDIC_ER = 0
ICMP_EXC_TTL = 0
ICMP_EXC_FRAGTIME = 1
ICMP_REDIR_NET = 0
ICMP_REDIR_HOST = 1
ICMP_REDIR_NETTOS = 2
ICMP_REDIR_HOSTTOS = 3

_ADDRESS_MASK_REQUEST = 17
_IGMP_HEADER_TYPES = frozenset({0x11, 0x12, 0x16, 0x17, 0x22})


class IcmpType(enum.IntEnum):
    """ICMPv4 message types."""

    ECHOREPLY = 0
    DEST_UNREACH = 3
    REDIRECT = 5
    ECHO = 8
    TIME_EXCEEDED = 11
    PARAMETERPROB = 12
    TIMESTAMP = 13
    TIMESTAMPREPLY = 14
    INFO_REQUEST = 15
    INFO_REPLY = 16
    EXT_ECHO = 42
    EXT_ECHOREPLY = 43


def _finish(body: bytes, length: int) -> bytes:
    """Cut ``body`` to ``length`` bytes and fill in its checksum at offset 2."""
    message = body[:length]
    if len(message) < 4:
        return message
    checksum = in_cksum(message)
    return message[:2] + struct.pack("!H", checksum) + message[4:]


def build_icmp_pkt(
    saddr,
    daddr,
    ttl: int,
    ipid: int,
    tos: int,
    df: bool,
    ipopt: bytes,
    seq: int,
    ident: int,
    ptype: int,
    pcode: int,
    data: bytes = b"",
) -> bytes:
    """Build an IPv4 packet carrying an ICMP message.

    Echo requests get an 8-byte header, timestamp and address-mask requests
    their zeroed fields; other types carry only the bytes given as data.
    """
    data = bytes(data or b"")
    if ptype == IcmpType.ECHO:
        base, prefix = 8, b""
    elif ptype == IcmpType.TIMESTAMP and pcode == 0:
        base, prefix = 20, bytes(12)
    elif ptype == _ADDRESS_MASK_REQUEST and pcode == 0:
        base, prefix = 12, bytes(4)
    else:
        base, prefix = 0, b""
    payload = data[: ICMP_MAX_PAYLOAD_LEN - len(prefix)]
    body = struct.pack(
        "!BBHHH", ptype & 0xFF, pcode & 0xFF, 0, ident & 0xFFFF, seq & 0xFFFF
    ) + prefix + payload
    message = _finish(body, base + len(payload))
    return build_ip_pkt(saddr, daddr, IPPROTO_ICMP, ttl, ipid, tos, df, ipopt, message)


def build_icmp6_pkt(
    saddr,
    daddr,
    tc: int,
    flowlabel: int,
    hoplimit: int,
    seq: int,
    ident: int,
    ptype: int,
    pcode: int,
    data: bytes = b"",
) -> bytes:
    """Build an IPv6 packet carrying an ICMPv6 message."""
    data = bytes(data or b"")
    message = struct.pack("!BBH", ptype & 0xFF, pcode & 0xFF, 0)
    if ptype == ICMP6_ECHO:
        message += struct.pack("!HH", ident & 0xFFFF, seq & 0xFFFF)
    message += data
    checksum = ip6_pseudoheader_check(saddr, daddr, IPPROTO_ICMPV6, message)
    message = message[:2] + struct.pack("!H", checksum) + message[4:]
    return build_ip6_pkt(saddr, daddr, tc, flowlabel, IPPROTO_ICMPV6, hoplimit, message)


def build_igmp_pkt(
    saddr,
    daddr,
    ttl: int,
    ipid: int,
    tos: int,
    df: bool,
    ipopt: bytes,
    igmp_type: int,
    code: int,
    data: bytes = b"",
) -> bytes:
    """Build an IPv4 packet carrying an IGMP message."""
    data = bytes(data or b"")
    base = 8 if igmp_type in _IGMP_HEADER_TYPES else 0
    payload = data[:IGMP_MAX_PAYLOAD_LEN]
    body = struct.pack("!BBHI", igmp_type & 0xFF, code & 0xFF, 0, 0) + payload
    message = _finish(body, base + len(payload))
    return build_ip_pkt(saddr, daddr, IPPROTO_IGMP, ttl, ipid, tos, df, ipopt, message)