"""Incremental writing of scan results as a JSON array of hosts."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

PathLike = str | os.PathLike


@dataclass(frozen=True)
class HostDetails:
    """A scanned host."""

    ip_address: str
    dns_name: str
    rtt: float


@dataclass(frozen=True)
class PortDetails:
    """A port found on a host; empty optional fields are left out."""

    port: int
    protocol: str
    passwd: str
    type_target: str = ""
    content: str = ""
    screenshot: str = ""
    http_title: str = ""


def _append(path: PathLike, text: str) -> None:
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(text)


def save_host(path: PathLike, host: HostDetails) -> None:
    """Open a host object and its ports list."""
    _append(
        path,
        "    {\n"
        f'        "ip_address": "{host.ip_address}",\n'
        '        "details": {\n'
        f'            "dns_name": "{host.dns_name}",\n'
        f'            "rtt": {host.rtt:f},\n'
        '            "ports": [\n',
    )


def save_port(path: PathLike, port: PortDetails) -> None:
    """Write one port object."""
    lines = [
        "                {\n",
        f'                    "port": {port.port},\n',
        f'                    "protocol": "{port.protocol}",\n',
    ]
    if port.http_title:
        lines.append(f'                    "http_title": "{port.http_title}",\n')
    if port.screenshot:
        lines.append(f'                    "screenshot": "{port.screenshot}",\n')
    if port.type_target:
        lines.append(f'                     "type_target": "{port.type_target}",\n')
    if port.content:
        lines.append(f'                    "content": "{port.content}",\n')
    lines.append(f'                    "passwd": "{port.passwd}"\n')
    lines.append("                }")
    _append(path, "".join(lines))


def set_comma(path: PathLike) -> None:
    """Append a comma."""
    _append(path, ",")


def skip_line(path: PathLike) -> None:
    """Append a newline."""
    _append(path, "\n")


def close_info(path: PathLike) -> None:
    """Close the ports list and the host object."""
    _append(path, "\n            ]\n        }\n    }")


def start_array(path: PathLike) -> None:
    """Open the top-level array."""
    _append(path, "[\n")


def close_array(path: PathLike) -> None:
    """Close the top-level array."""
    _append(path, "]")


def fix_file(path: PathLike) -> None:
    """Cut the file at its last comma, dropping the comma and all after it."""
    target = Path(path)
    text = target.read_text(encoding="utf-8")
    comma = text.rfind(",")
    if comma != -1:
        text = text[:comma]
    target.write_text(text, encoding="utf-8")