"""Construction of TCP segments and complete TCP/IPv4 and TCP/IPv6 packets."""

from __future__ import annotations

import enum
import struct

from .checksum import ip4_pseudoheader_check, ip6_pseudoheader_check
from .ip import IPPROTO_TCP, build_ip6_pkt, build_ip_pkt

TCP_HEADER_LEN = 20
MAX_TCP_OPTIONS_LEN = 40
DEFAULT_WINDOW = 1024

SYN_PACKET = 1
XMAS_PACKET = 2
FIN_PACKET = 3
NULL_PACKET = 4
ACK_PACKET = 5
WINDOW_PACKET = 6
MAIMON_PACKET = 7
PSH_PACKET = 8


class TcpFlag(enum.IntFlag):
    """Bits of the TCP flags byte."""

    FIN = 0x01
    SYN = 0x02
    RST = 0x04
    PSH = 0x08
    ACK = 0x10
    URG = 0x20
    ECE = 0x40
    CWR = 0x80


def build_tcp(
    sport: int,
    dport: int,
    seq: int = 0,
    ack: int = 0,
    reserved: int = 0,
    flags: int = 0,
    window: int = 0,
    urp: int = 0,
    tcpopt: bytes = b"",
    data: bytes = b"",
) -> bytes:
    """Build a TCP segment with a zero checksum.

    A window of 0 is replaced by the default of 1024.
    """
    tcpopt = bytes(tcpopt or b"")
    data = bytes(data or b"")
    if len(tcpopt) % 4:
        raise ValueError("TCP options length must be a multiple of 4")
    if len(tcpopt) > MAX_TCP_OPTIONS_LEN:
        raise ValueError("TCP options are too long")
    offset = 5 + len(tcpopt) // 4
    header = struct.pack(
        "!HHIIBBHHH",
        sport & 0xFFFF,
        dport & 0xFFFF,
        seq & 0xFFFFFFFF,
        ack & 0xFFFFFFFF,
        (offset << 4) | (reserved & 0x0F),
        int(flags) & 0xFF,
        (window or DEFAULT_WINDOW) & 0xFFFF,
        0,
        urp & 0xFFFF,
    )
    return header + tcpopt + data


def _with_checksum(segment: bytes, checksum: int) -> bytes:
    return segment[:16] + struct.pack("!H", checksum) + segment[18:]


def build_tcp_pkt(
    saddr,
    daddr,
    ttl: int,
    ipid: int,
    tos: int,
    df: bool,
    ipopt: bytes,
    sport: int,
    dport: int,
    seq: int,
    ack: int,
    reserved: int,
    flags: int,
    window: int,
    urp: int,
    tcpopt: bytes = b"",
    data: bytes = b"",
) -> bytes:
    """Build an IPv4 packet carrying a checksummed TCP segment."""
    segment = build_tcp(sport, dport, seq, ack, reserved, flags, window, urp, tcpopt, data)
    segment = _with_checksum(
        segment, ip4_pseudoheader_check(saddr, daddr, IPPROTO_TCP, segment)
    )
    return build_ip_pkt(saddr, daddr, IPPROTO_TCP, ttl, ipid, tos, df, ipopt, segment)


def build_tcp6_pkt(
    source,
    victim,
    tc: int,
    flowlabel: int,
    hoplimit: int,
    sport: int,
    dport: int,
    seq: int,
    ack: int,
    reserved: int,
    flags: int,
    window: int,
    urp: int,
    tcpopt: bytes = b"",
    data: bytes = b"",
) -> bytes:
    """Build an IPv6 packet carrying a checksummed TCP segment."""
    segment = build_tcp(sport, dport, seq, ack, reserved, flags, window, urp, tcpopt, data)
    segment = _with_checksum(
        segment, ip6_pseudoheader_check(source, victim, IPPROTO_TCP, segment)
    )
    return build_ip6_pkt(source, victim, tc, flowlabel, IPPROTO_TCP, hoplimit, segment)