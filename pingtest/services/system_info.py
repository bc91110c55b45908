"""Local hostname and primary IPv4 address."""
import ipaddress
import socket

import psutil

from pingtest.errors import SystemInfoError
from pingtest.schemas.system import SystemInfo


def first_non_loopback_ipv4(interfaces: dict[str, list]) -> str | None:
    for addrs in interfaces.values():
        for addr in addrs:
            if addr.family != socket.AF_INET:
                continue
            try:
                ip = ipaddress.IPv4Address(addr.address)
            except ValueError:
                continue
            if not ip.is_loopback:
                return str(ip)
    return None


def get_system_info() -> SystemInfo:
    try:
        hostname = socket.gethostname()
    except OSError as e:
        raise SystemInfoError(f"hostname lookup failed: {e}") from e
    try:
        interfaces = psutil.net_if_addrs()
    except OSError as e:
        raise SystemInfoError(f"interface enumeration failed: {e}") from e

    ip_address = first_non_loopback_ipv4(interfaces)
    if ip_address is None:
        raise SystemInfoError("no IP address found")
    return SystemInfo(hostname=hostname, ip_address=ip_address)
