"""Construction of raw IPv4 and IPv6 packets."""

from __future__ import annotations

import ipaddress
import random
import struct

from .checksum import in_cksum

IPPROTO_ICMP = 1
IPPROTO_IGMP = 2
IPPROTO_TCP = 6
IPPROTO_UDP = 17
IPPROTO_ICMPV6 = 58

IP_VERSION = 4
IP_HEADER_LEN = 20
IP6_HEADER_LEN = 40
MAX_IHL_LEN = 60
DEFAULT_TOS = 0
MAX_TTL = 255
DEFAULT_TTL = 121

IP_RF = 0x8000
IP_DF = 0x4000
IP_MF = 0x2000
IP_DM = 0x1FFF

_rng = random.Random()


def build_ip_header(
    packet_len: int,
    ipopt: bytes,
    tos: int,
    ident: int,
    frag_off: int,
    ttl: int,
    proto: int,
    saddr,
    daddr,
) -> bytes:
    """Return an IPv4 header with options and a valid checksum."""
    ipopt = bytes(ipopt or b"")
    if len(ipopt) % 4:
        raise ValueError("IP options length must be a multiple of 4")
    if IP_HEADER_LEN + len(ipopt) > MAX_IHL_LEN:
        raise ValueError("IP options are too long")
    if not 0 <= packet_len <= 0xFFFF:
        raise ValueError("IPv4 packet length out of range")
    ihl = 5 + len(ipopt) // 4
    header = struct.pack(
        "!BBHHHBBH4s4s",
        (IP_VERSION << 4) | ihl,
        tos & 0xFF,
        packet_len,
        ident & 0xFFFF,
        frag_off & 0xFFFF,
        ttl & 0xFF,
        proto & 0xFF,
        0,
        ipaddress.IPv4Address(saddr).packed,
        ipaddress.IPv4Address(daddr).packed,
    ) + ipopt
    checksum = struct.pack("!H", in_cksum(header))
    return header[:10] + checksum + header[12:]


def build_ip_pkt(
    saddr,
    daddr,
    proto: int,
    ttl: int,
    ipid: int,
    tos: int,
    df: bool,
    ipopt: bytes = b"",
    data: bytes = b"",
) -> bytes:
    """Build an IPv4 packet around ``data``; a ttl of -1 picks a random one."""
    ipopt = bytes(ipopt or b"")
    data = bytes(data or b"")
    if ttl == -1:
        ttl = _rng.randint(37, 208)
    packet_len = IP_HEADER_LEN + len(ipopt) + len(data)
    header = build_ip_header(
        packet_len, ipopt, tos, ipid, IP_DF if df else 0, ttl, proto, saddr, daddr
    )
    return header + data


def build_ip6_pkt(
    source,
    victim,
    tc: int,
    flowlabel: int,
    nexthdr: int,
    hoplimit: int,
    data: bytes = b"",
) -> bytes:
    """Build an IPv6 packet around ``data``; a hoplimit of -1 picks a random one."""
    data = bytes(data or b"")
    if len(data) > 0xFFFF:
        raise ValueError("IPv6 payload is too long")
    if hoplimit == -1:
        hoplimit = _rng.randint(23, 37)
    first_word = (6 << 28) | ((tc & 0xFF) << 20) | (flowlabel & 0xFFFFF)
    header = struct.pack(
        "!IHBB16s16s",
        first_word,
        len(data),
        nexthdr & 0xFF,
        hoplimit & 0xFF,
        ipaddress.IPv6Address(source).packed,
        ipaddress.IPv6Address(victim).packed,
    )
    return header + data