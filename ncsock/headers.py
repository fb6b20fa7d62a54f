"""Decoding of protocol headers and payloads from captured Ethernet frames."""

from __future__ import annotations

import ipaddress
import struct
from dataclasses import dataclass

from .ip import IP_HEADER_LEN, IPPROTO_ICMP, IPPROTO_TCP, IPPROTO_UDP

ETH_HEADER_LEN = 14
ETH_P_IP = 0x0800
TCP_HEADER_LEN = 20
UDP_HEADER_LEN = 8
ICMP_HEADER_LEN = 8
IGMP_HEADER_LEN = 8

_TRANSPORT_OFFSET = ETH_HEADER_LEN + IP_HEADER_LEN


def _require(frame: bytes, end: int) -> None:
    if len(frame) < end:
        raise ValueError(f"frame is too short: need {end} bytes, have {len(frame)}")


@dataclass(frozen=True)
class IPHeader:
    """Fixed part of an IPv4 header."""

    version: int
    ihl: int
    tos: int
    tot_len: int
    ident: int
    frag_off: int
    ttl: int
    protocol: int
    check: int
    saddr: str
    daddr: str

    @classmethod
    def from_bytes(cls, data: bytes) -> "IPHeader":
        _require(data, IP_HEADER_LEN)
        (ver_ihl, tos, tot_len, ident, frag_off, ttl, protocol, check,
         saddr, daddr) = struct.unpack_from("!BBHHHBBH4s4s", data)
        return cls(
            version=ver_ihl >> 4,
            ihl=ver_ihl & 0x0F,
            tos=tos,
            tot_len=tot_len,
            ident=ident,
            frag_off=frag_off,
            ttl=ttl,
            protocol=protocol,
            check=check,
            saddr=str(ipaddress.IPv4Address(saddr)),
            daddr=str(ipaddress.IPv4Address(daddr)),
        )


@dataclass(frozen=True)
class TCPHeader:
    """Fixed part of a TCP header."""

    sport: int
    dport: int
    seq: int
    ack: int
    off: int
    x2: int
    flags: int
    win: int
    sum: int
    urp: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "TCPHeader":
        _require(data, TCP_HEADER_LEN)
        (sport, dport, seq, ack, off_x2, flags, win, checksum,
         urp) = struct.unpack_from("!HHIIBBHHH", data)
        return cls(sport, dport, seq, ack, off_x2 >> 4, off_x2 & 0x0F,
                   flags, win, checksum, urp)


@dataclass(frozen=True)
class UDPHeader:
    """UDP header."""

    sport: int
    dport: int
    ulen: int
    check: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "UDPHeader":
        _require(data, UDP_HEADER_LEN)
        return cls(*struct.unpack_from("!HHHH", data))


@dataclass(frozen=True)
class ICMPHeader:
    """ICMPv4 header with the bytes that follow it."""

    type: int
    code: int
    checksum: int
    id: int
    seq: int
    data: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "ICMPHeader":
        _require(data, ICMP_HEADER_LEN)
        icmp_type, code, checksum, ident, seq = struct.unpack_from("!BBHHH", data)
        return cls(icmp_type, code, checksum, ident, seq, bytes(data[ICMP_HEADER_LEN:]))


@dataclass(frozen=True)
class IGMPHeader:
    """IGMP header with the bytes that follow it."""

    type: int
    code: int
    check: int
    var: int
    data: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "IGMPHeader":
        _require(data, IGMP_HEADER_LEN)
        igmp_type, code, check, var = struct.unpack_from("!BBHI", data)
        return cls(igmp_type, code, check, var, bytes(data[IGMP_HEADER_LEN:]))


def ext_iphdr(frame: bytes) -> IPHeader:
    """IPv4 header following the Ethernet header of ``frame``."""
    return IPHeader.from_bytes(bytes(frame)[ETH_HEADER_LEN:])


def ext_tcphdr(frame: bytes) -> TCPHeader:
    """TCP header following a 20-byte IPv4 header."""
    return TCPHeader.from_bytes(bytes(frame)[_TRANSPORT_OFFSET:])


def ext_udphdr(frame: bytes) -> UDPHeader:
    """UDP header following a 20-byte IPv4 header."""
    return UDPHeader.from_bytes(bytes(frame)[_TRANSPORT_OFFSET:])


def ext_icmphdr(frame: bytes) -> ICMPHeader:
    """ICMP header following a 20-byte IPv4 header."""
    return ICMPHeader.from_bytes(bytes(frame)[_TRANSPORT_OFFSET:])


def ext_igmphdr(frame: bytes) -> IGMPHeader:
    """IGMP header following a 20-byte IPv4 header."""
    return IGMPHeader.from_bytes(bytes(frame)[_TRANSPORT_OFFSET:])


def ext_payload(frame: bytes) -> bytes | None:
    """Application payload of a TCP, UDP or ICMP frame.

    Returns None for frames that are not IPv4 or carry another protocol;
    raises ValueError when the frame is truncated or its lengths disagree.
    """
    frame = bytes(frame)
    _require(frame, ETH_HEADER_LEN)
    (ethertype,) = struct.unpack_from("!H", frame, 12)
    if ethertype != ETH_P_IP:
        return None
    ip = ext_iphdr(frame)
    if ip.protocol == IPPROTO_TCP:
        header_len = ext_tcphdr(frame).off * 4
        size = ip.tot_len - (IP_HEADER_LEN + header_len)
    elif ip.protocol == IPPROTO_UDP:
        header_len = UDP_HEADER_LEN
        size = ext_udphdr(frame).ulen - UDP_HEADER_LEN
    elif ip.protocol == IPPROTO_ICMP:
        header_len = ICMP_HEADER_LEN
        size = ip.tot_len - (IP_HEADER_LEN + ICMP_HEADER_LEN)
    else:
        return None
    if size < 0:
        raise ValueError("header lengths exceed the declared packet length")
    start = _TRANSPORT_OFFSET + header_len
    _require(frame, start + size)
    return frame[start:start + size]