"""Host argument validation."""
import re

from pingtest.errors import InvalidHostError

MAX_HOST_LENGTH = 253

# Hostnames, IPv4 and IPv6 literals only. Shell metacharacters and
# whitespace are refused.
HOST_PATTERN = re.compile(r"^[A-Za-z0-9._:-]+$")


def validate_host(host: str | None) -> str:
    """Return the stripped host or raise InvalidHostError."""
    host = (host or "").strip()
    if not host:
        raise InvalidHostError("host is empty")
    if len(host) > MAX_HOST_LENGTH:
        raise InvalidHostError(f"host longer than {MAX_HOST_LENGTH} characters")
    if not HOST_PATTERN.match(host):
        raise InvalidHostError(f"host contains invalid characters: {host!r}")
    return host
