# ncsock

A library for building raw network packets as bytes, reading headers back out of
captured Ethernet frames, and a handful of helpers that a network scanner needs.

| Module | What it gives you |
| --- | --- |
| `ncsock.checksum` | `in_cksum`, `ip4_pseudoheader_check`, `ip6_pseudoheader_check` |
| `ncsock.ip` | `build_ip_header`, `build_ip_pkt`, `build_ip6_pkt` |
| `ncsock.tcp` | `TcpFlag`, `build_tcp`, `build_tcp_pkt`, `build_tcp6_pkt` |
| `ncsock.udp` | `build_udp`, `build_udp_pkt`, `build_udp6_pkt` |
| `ncsock.icmp` | `IcmpType`, `build_icmp_pkt`, `build_icmp6_pkt`, `build_igmp_pkt` |
| `ncsock.headers` | `IPHeader`, `TCPHeader`, `UDPHeader`, `ICMPHeader`, `IGMPHeader`, `ext_iphdr`, `ext_tcphdr`, `ext_udphdr`, `ext_icmphdr`, `ext_igmphdr`, `ext_payload` |
| `ncsock.encoding` | `base64_encode`, `base64_decode`, `read_binary_file` |
| `ncsock.base` | `NodeKind`, `this_is`, `get_this_is`, timing, speed profile, URL, word search and random value helpers |
| `ncsock.netinfo` | `get_dns`, `get_ip`, `get_active_interface_name`, `get_local_ip` |
| `ncsock.jsonlog` | `HostDetails`, `PortDetails` and functions that append a JSON results log piece by piece |

Addresses given to the packet builders may be dotted strings, integers, packed
bytes or `ipaddress` objects.

## Installation

```
pip install .
```

`psutil` is installed as a dependency; `ncsock.netinfo.get_local_ip` uses it.

## Examples

Build a TCP SYN packet inside an IPv4 header. The TCP checksum is computed over
the IPv4 pseudo-header, the IP header checksum over the header itself:

```python
from ncsock.tcp import TcpFlag, build_tcp_pkt

packet = build_tcp_pkt(
    "192.0.2.1", "192.0.2.2", ttl=64, ipid=1, tos=0, df=True, ipopt=b"",
    sport=40000, dport=80, seq=1, ack=0, reserved=0,
    flags=TcpFlag.SYN, window=1024, urp=0, tcpopt=b"", data=b"",
)
```

A `ttl` of `-1` (or a `hoplimit` of `-1` for IPv6) picks a random value, and a
TCP `window` of `0` becomes 1024.

Build an ICMP echo request and a UDP/IPv6 datagram:

```python
from ncsock.icmp import IcmpType, build_icmp_pkt
from ncsock.udp import build_udp6_pkt

echo = build_icmp_pkt(
    "192.0.2.1", "192.0.2.2", ttl=64, ipid=1, tos=0, df=False, ipopt=b"",
    seq=1, ident=1, ptype=IcmpType.ECHO, pcode=0, data=b"ping",
)
datagram = build_udp6_pkt("2001:db8::1", "2001:db8::2", 0, 0, 64, 5353, 53, b"query")
```

Read headers back from a captured Ethernet frame (a 14-byte Ethernet header
followed by an IPv4 packet with a 20-byte header):

```python
from ncsock.headers import ext_iphdr, ext_tcphdr, ext_payload

frame = bytes(12) + b"\x08\x00" + packet
ext_iphdr(frame).protocol   # 6
ext_tcphdr(frame).dport     # 80
ext_payload(frame)          # b""
```

`ext_payload` returns `None` for frames that are not IPv4 or carry something
other than TCP, UDP or ICMP, and raises `ValueError` for truncated frames.

Classify a target:

```python
from ncsock.base import this_is, get_this_is

get_this_is(this_is("192.0.2.0/24"))         # "CIDR"
get_this_is(this_is("192.0.2.1-192.0.2.9"))  # "RANGE"
get_this_is(this_is("https://example.com"))  # "URL"
```

Write a results log:

```python
from ncsock.jsonlog import (
    HostDetails, PortDetails, start_array, save_host, save_port, close_info, close_array,
)

passwd = "password"
start_array("out.json")
save_host("out.json", HostDetails(ip_address="192.0.2.2", dns_name="example.com", rtt=10.5))
save_port("out.json", PortDetails(port=80, protocol="HTTP", passwd=passwd))
close_info("out.json")
close_array("out.json")
```

Values are written as given, without JSON escaping. `set_comma` and `skip_line`
separate entries, and `fix_file` cuts the file at its last comma.

## Errors

Functions raise instead of returning status codes: `ValueError` for malformed
input (bad base64, option lengths that are not a multiple of 4, oversized
payloads, truncated frames, `random_num` with minimum above maximum), `OSError`
from `get_ip` when a name does not resolve and from the file functions.
`get_dns` returns `"n/a"` when there is no reverse name, and
`get_active_interface_name` and `get_local_ip` return `None` when nothing is found.

## What it does not do

Packet builders only return bytes. The package opens no raw sockets: it does not
send packets, capture replies, ping, port-scan or log in to services, and it has
no command-line program. Sending what it builds is up to you and usually needs
root privileges (`ncsock.base.check_root_perms` tells you whether you have them).

## Tests

```
pip install .[test]
pytest
```