"""Construction of UDP datagrams and complete UDP/IPv4 and UDP/IPv6 packets."""

from __future__ import annotations

import struct

from .checksum import ip4_pseudoheader_check, ip6_pseudoheader_check
from .ip import IPPROTO_UDP, build_ip6_pkt, build_ip_pkt

UDP_HDR_LEN = 8


def build_udp(sport: int, dport: int, data: bytes = b"") -> bytes:
    """Build a UDP datagram with a zero checksum."""
    data = bytes(data or b"")
    length = UDP_HDR_LEN + len(data)
    if length > 0xFFFF:
        raise ValueError("UDP datagram is too long")
    return struct.pack("!HHHH", sport & 0xFFFF, dport & 0xFFFF, length, 0) + data


def _with_checksum(datagram: bytes, checksum: int) -> bytes:
    return datagram[:6] + struct.pack("!H", checksum) + datagram[8:]


def build_udp_pkt(
    saddr,
    daddr,
    ttl: int,
    ipid: int,
    tos: int,
    df: bool,
    ipopt: bytes,
    sport: int,
    dport: int,
    data: bytes = b"",
) -> bytes:
    """Build an IPv4 packet carrying a checksummed UDP datagram."""
    datagram = build_udp(sport, dport, data)
    datagram = _with_checksum(
        datagram, ip4_pseudoheader_check(saddr, daddr, IPPROTO_UDP, datagram)
    )
    return build_ip_pkt(saddr, daddr, IPPROTO_UDP, ttl, ipid, tos, df, ipopt, datagram)


def build_udp6_pkt(
    source,
    victim,
    tc: int,
    flowlabel: int,
    hoplimit: int,
    sport: int,
    dport: int,
    data: bytes = b"",
) -> bytes:
    """Build an IPv6 packet carrying a checksummed UDP datagram."""
    datagram = build_udp(sport, dport, data)
    datagram = _with_checksum(
        datagram, ip6_pseudoheader_check(source, victim, IPPROTO_UDP, datagram)
    )
    return build_ip6_pkt(source, victim, tc, flowlabel, IPPROTO_UDP, hoplimit, datagram)