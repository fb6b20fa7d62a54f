"""Target classification, timing helpers, string helpers and randomness."""

from __future__ import annotations

import datetime
import enum
import os
import random
import re
import socket
import time

DEFAULT_DICTIONARY = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

OUTRAGEOUS_SPEED = 5
FIERCE_SPEED = 4
FAST_SPEED = 3
BALANCED_SPEED = 2
NOT_SPEED = 1

_TIMEOUT_FACTORS = (6, 5, 4, 3, 2)
_PING_TIMEOUTS = (3000, 2000, 1000, 600, 400)
_THREAD_LIMITS = (100, 500, 1000, 1500, 2000)

_rng = random.Random()
_ATOI = re.compile(r"\s*([+-]?\d+)")


class NodeKind(enum.IntEnum):
    """What kind of target a command-line node names."""

    CIDR = 0
    IPV4 = 1
    RANGE = 2
    URL = 3
    DNS = 4


_KIND_NAMES = {
    NodeKind.URL: "URL",
    NodeKind.DNS: "DNS",
    NodeKind.CIDR: "CIDR",
    NodeKind.RANGE: "RANGE",
    NodeKind.IPV4: "IPv4",
}


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def dns_or_ip(node: str) -> bool:
    """Return True if ``node`` is a dotted IPv4 address."""
    try:
        socket.inet_pton(socket.AF_INET, node)
    except (OSError, ValueError):
        return False
    return True


def this_is(node: str) -> NodeKind:
    """Classify a target as URL, CIDR, range, IPv4 address or host name."""
    if node.startswith(("http://", "https://")):
        return NodeKind.URL
    slash = node.find("/")
    if slash != -1 and 0 <= _atoi(node[slash + 1:]) <= 32:
        return NodeKind.CIDR
    dash = node.find("-")
    if dash > 0 and dash < len(node) - 1:
        return NodeKind.RANGE
    return NodeKind.IPV4 if dns_or_ip(node) else NodeKind.DNS


def get_this_is(kind: int) -> str:
    """Return the display name of a node kind, or "-1" if unknown."""
    try:
        return _KIND_NAMES[NodeKind(kind)]
    except ValueError:
        return "-1"


def check_root_perms() -> bool:
    """Return True when running with an effective uid of root."""
    return os.geteuid() == 0


def delay(ms: int) -> None:
    """Sleep for ``ms`` milliseconds."""
    time.sleep(ms / 1000)


def get_time() -> str:
    """Current local time as HH:MM:SS."""
    return time.strftime("%H:%M:%S", time.localtime())


def get_current_date() -> str:
    """Current local date as YYYY-MM-DD."""
    today = datetime.date.today()
    return f"{today.year}-{today.month:02d}-{today.day:02d}"


def _speed_index(speed: int) -> int | None:
    return speed - 1 if 1 <= speed <= 5 else None


def calculate_timeout(rtt: float, speed: int) -> int:
    """Scale a round-trip time by the speed profile; -1 for an unknown speed."""
    index = _speed_index(speed)
    if index is None:
        return -1
    return int(_TIMEOUT_FACTORS[index] * rtt)


def calculate_ping_timeout(speed: int) -> int:
    """Ping timeout in milliseconds for a speed profile; 0 if unknown."""
    index = _speed_index(speed)
    return 0 if index is None else _PING_TIMEOUTS[index]


def calculate_threads(speed: int, length: int) -> int:
    """Thread count for a speed profile, capped by the number of jobs."""
    index = _speed_index(speed)
    limit = 0 if index is None else _THREAD_LIMITS[index]
    return min(limit, length)


def clean_url(url: str) -> str:
    """Strip the http(s) scheme and any path, leaving the host part."""
    for prefix in ("https://", "http://"):
        if url.startswith(prefix):
            url = url[len(prefix):]
            break
    return url.split("/", 1)[0]


def find_word(buffer: str, word: str) -> int:
    """Case-insensitive position of ``word`` in ``buffer``, or -1."""
    if len(word) > len(buffer):
        return -1
    return buffer.lower().find(word.lower())


def random_num(minimum: int, maximum: int) -> int:
    """Random integer in the inclusive range [minimum, maximum]."""
    if minimum > maximum:
        raise ValueError("minimum is greater than maximum")
    return _rng.randint(minimum, maximum)


def generate_rare_port() -> int:
    """Random port from the dynamic range 49151-65535."""
    return random_num(49151, 65535)


def generate_seq() -> int:
    """Random non-zero 32-bit TCP sequence number."""
    return random_num(1, 4294967294)


def generate_ipv4() -> str:
    """Random dotted IPv4 address."""
    return ".".join(str(_rng.randrange(256)) for _ in range(4))


def generate_ident() -> int:
    """Random 16-bit identifier."""
    return _rng.getrandbits(16)


def generate_random_str(length: int, dictionary: str = DEFAULT_DICTIONARY) -> str:
    """Random string of ``length`` characters drawn from ``dictionary``."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not dictionary:
        raise ValueError("dictionary must not be empty")
    return "".join(_rng.choice(dictionary) for _ in range(length))