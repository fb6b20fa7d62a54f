import struct

import pytest

from ncsock.headers import (
    ETH_HEADER_LEN,
    ext_icmphdr,
    ext_igmphdr,
    ext_iphdr,
    ext_payload,
    ext_tcphdr,
    ext_udphdr,
)
from ncsock.icmp import IcmpType, build_icmp_pkt, build_igmp_pkt
from ncsock.ip import (
    IP_HEADER_LEN,
    IP_VERSION,
    IPPROTO_IGMP,
    IPPROTO_TCP,
    IPPROTO_UDP,
    build_ip_pkt,
)
from ncsock.tcp import DEFAULT_WINDOW, TcpFlag, build_tcp_pkt
from ncsock.udp import UDP_HDR_LEN, build_udp_pkt

SRC = "10.0.0.1"
DST = "10.0.0.2"


def eth(packet, ethertype=0x0800):
    return bytes(6) + bytes(6) + struct.pack("!H", ethertype) + packet


def tcp_frame(data=b"hello"):
    return eth(build_tcp_pkt(SRC, DST, 64, 7, 0, True, b"", 1234, 80, 100, 0, 0,
                             TcpFlag.SYN, 0, 0, b"", data))


def test_ip_header_fields():
    frame = tcp_frame()
    ip = ext_iphdr(frame)
    assert ip.version == IP_VERSION
    assert ip.ihl * 4 == IP_HEADER_LEN
    assert ip.ttl == 64
    assert ip.ident == 7
    assert ip.protocol == IPPROTO_TCP
    assert ip.saddr == SRC
    assert ip.daddr == DST
    assert ip.tot_len == len(frame) - ETH_HEADER_LEN


def test_tcp_header_fields():
    tcp = ext_tcphdr(tcp_frame())
    assert tcp.sport == 1234
    assert tcp.dport == 80
    assert tcp.seq == 100
    assert tcp.flags == TcpFlag.SYN
    assert tcp.win == DEFAULT_WINDOW
    assert tcp.off * 4 == 20


def test_tcp_payload():
    assert ext_payload(tcp_frame(b"hello")) == b"hello"
    assert ext_payload(tcp_frame(b"")) == b""


def test_udp_header_and_payload():
    frame = eth(build_udp_pkt(SRC, DST, 64, 1, 0, False, b"", 5353, 53, b"query"))
    udp = ext_udphdr(frame)
    assert (udp.sport, udp.dport) == (5353, 53)
    assert udp.ulen == UDP_HDR_LEN + len(b"query")
    assert ext_iphdr(frame).protocol == IPPROTO_UDP
    assert ext_payload(frame) == b"query"


def test_icmp_header_and_payload():
    frame = eth(build_icmp_pkt(SRC, DST, 64, 1, 0, True, b"", 3, 9, IcmpType.ECHO, 0, b"abc"))
    icmp = ext_icmphdr(frame)
    assert icmp.type == IcmpType.ECHO
    assert (icmp.id, icmp.seq) == (9, 3)
    assert icmp.data == b"abc"
    assert ext_payload(frame) == b"abc"


def test_igmp_header():
    frame = eth(build_igmp_pkt(SRC, DST, 1, 1, 0, True, b"", 0x11, 0, b""))
    igmp = ext_igmphdr(frame)
    assert igmp.type == 0x11
    assert ext_iphdr(frame).protocol == IPPROTO_IGMP
    assert ext_payload(frame) is None


def test_non_ip_frame_has_no_payload():
    assert ext_payload(eth(tcp_frame()[ETH_HEADER_LEN:], ethertype=0x86DD)) is None


def test_unknown_protocol_has_no_payload():
    frame = eth(build_ip_pkt(SRC, DST, 99, 64, 1, 0, False, b"", b"xyz"))
    assert ext_payload(frame) is None


def test_truncated_frame_raises():
    frame = tcp_frame(b"hello")
    with pytest.raises(ValueError):
        ext_payload(frame[:-2])
    with pytest.raises(ValueError):
        ext_tcphdr(frame[:ETH_HEADER_LEN + IP_HEADER_LEN + 4])
    with pytest.raises(ValueError):
        ext_payload(b"\x00" * 5)