import datetime
import ipaddress
import time
from unittest import mock

import pytest

from ncsock import base
from ncsock.base import NodeKind


@pytest.mark.parametrize(
    "node, kind",
    [
        ("http://example.com", NodeKind.URL),
        ("https://example.com/path", NodeKind.URL),
        ("192.168.1.0/24", NodeKind.CIDR),
        ("10.0.0.1-10.0.0.5", NodeKind.RANGE),
        ("example.com", NodeKind.DNS),
        ("10.0.0.1", NodeKind.IPV4),
        ("-abc", NodeKind.DNS),
        ("abc-", NodeKind.DNS),
        ("host/64", NodeKind.DNS),
        ("host/abc", NodeKind.CIDR),
    ],
)
def test_this_is(node, kind):
    assert base.this_is(node) is kind


@pytest.mark.parametrize(
    "kind, name",
    [
        (NodeKind.URL, "URL"),
        (NodeKind.DNS, "DNS"),
        (NodeKind.CIDR, "CIDR"),
        (NodeKind.RANGE, "RANGE"),
        (NodeKind.IPV4, "IPv4"),
        (99, "-1"),
    ],
)
def test_get_this_is(kind, name):
    assert base.get_this_is(kind) == name


def test_dns_or_ip():
    assert base.dns_or_ip("127.0.0.1") is True
    assert base.dns_or_ip("example.com") is False
    assert base.dns_or_ip("256.1.1.1") is False


def test_check_root_perms():
    with mock.patch("os.geteuid", return_value=0):
        assert base.check_root_perms() is True
    with mock.patch("os.geteuid", return_value=1000):
        assert base.check_root_perms() is False


def test_delay_sleeps():
    start = time.monotonic()
    result = base.delay(20)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed >= 0.015


def test_get_time_format():
    value = base.get_time()
    assert len(value) == 8
    hours, minutes, seconds = (int(part) for part in value.split(":"))
    assert 0 <= hours < 24
    assert 0 <= minutes < 60
    assert 0 <= seconds < 61


def test_get_current_date():
    assert base.get_current_date() == datetime.date.today().isoformat()


def test_calculate_timeout():
    values = [base.calculate_timeout(1.0, s) for s in range(1, 6)]
    assert values == [6, 5, 4, 3, 2]
    assert base.calculate_timeout(1.0, 0) == -1
    assert base.calculate_timeout(1.0, 6) == -1


def test_calculate_ping_timeout():
    assert [base.calculate_ping_timeout(s) for s in range(1, 6)] == [3000, 2000, 1000, 600, 400]
    assert base.calculate_ping_timeout(9) == 0


def test_calculate_threads():
    assert base.calculate_threads(5, 100000) == 2000
    assert base.calculate_threads(1, 100000) == 100
    assert base.calculate_threads(3, 7) == 7
    assert base.calculate_threads(0, 7) == 0


@pytest.mark.parametrize(
    "url",
    ["https://example.com/a/b", "http://example.com/", "example.com", "example.com/index.html"],
)
def test_clean_url(url):
    assert base.clean_url(url) == "example.com"


def test_find_word_case_insensitive():
    buffer, word = "Welcome to the ADMIN panel", "admin"
    pos = base.find_word(buffer, word)
    assert pos >= 0
    assert buffer[pos:pos + len(word)].lower() == word


def test_find_word_missing_and_too_long():
    assert base.find_word("short", "absent") == -1
    assert base.find_word("abc", "abcd") == -1


def test_random_num():
    assert base.random_num(3, 3) == 3
    assert all(1 <= base.random_num(1, 5) <= 5 for _ in range(100))
    with pytest.raises(ValueError):
        base.random_num(5, 1)


def test_generators_in_range():
    for _ in range(50):
        assert 49151 <= base.generate_rare_port() <= 65535
        assert 1 <= base.generate_seq() <= 4294967294
        assert 0 <= base.generate_ident() <= 0xFFFF
        ipaddress.IPv4Address(base.generate_ipv4())


def test_generate_random_str():
    text = base.generate_random_str(32)
    assert len(text) == 32
    assert set(text) <= set(base.DEFAULT_DICTIONARY)
    assert set(base.generate_random_str(10, "xy")) <= {"x", "y"}
    assert base.generate_random_str(0) == ""


def test_generate_random_str_errors():
    with pytest.raises(ValueError):
        base.generate_random_str(5, "")
    with pytest.raises(ValueError):
        base.generate_random_str(-1)