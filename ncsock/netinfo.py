"""Name resolution and local network interface information."""

from __future__ import annotations

import ipaddress
import socket
from pathlib import Path

import psutil

NOT_AVAILABLE = "n/a"
SYS_CLASS_NET = "/sys/class/net"


def get_dns(ip: str, port: int = 80) -> str:
    """Reverse-resolve an IPv4 address to a host name, or "n/a"."""
    try:
        socket.inet_pton(socket.AF_INET, ip)
    except (OSError, ValueError):
        return NOT_AVAILABLE
    try:
        host, _ = socket.getnameinfo((ip, port), socket.NI_NAMEREQD)
    except OSError:
        return NOT_AVAILABLE
    return host


def get_ip(dns: str) -> str:
    """Resolve a host name to its first IPv4 address; raise OSError on failure."""
    results = socket.getaddrinfo(dns, None, socket.AF_INET, socket.SOCK_STREAM)
    if not results:
        raise OSError(f"no IPv4 address for {dns!r}")
    return results[0][4][0]


def get_active_interface_name(root: str = SYS_CLASS_NET) -> str | None:
    """Name of the first network interface whose operstate is "up"."""
    try:
        entries = sorted(Path(root).iterdir())
    except OSError:
        return None
    for entry in entries:
        if not entry.is_symlink():
            continue
        try:
            with open(entry / "operstate", encoding="ascii", errors="replace") as handle:
                state = handle.readline(15)
        except OSError:
            continue
        if state == "up\n":
            return entry.name
    return None


def get_local_ip() -> str | None:
    """First non-loopback IPv4 address of this host, or None."""
    for addresses in psutil.net_if_addrs().values():
        for address in addresses:
            if address.family != socket.AF_INET:
                continue
            if not ipaddress.IPv4Address(address.address).is_loopback:
                return address.address
    return None