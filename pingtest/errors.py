"""Exceptions raised by pingtest services."""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pingtest.schemas.ping import PingResult


class PingtestError(Exception):
    pass


class InvalidHostError(PingtestError, ValueError):
    """Host string is empty, too long or contains characters a hostname cannot."""


class PingError(PingtestError):
    """ICMP probe failed. ``result`` holds the statistics collected before the failure."""

    def __init__(self, message: str, result: "PingResult"):
        super().__init__(message)
        self.result = result


class SystemInfoError(PingtestError):
    pass
