"""Single entry point for the ping and system info operations used by the routers."""
from pingtest.config import settings
from pingtest.schemas.ping import PingResult
from pingtest.schemas.system import SystemInfo
from pingtest.services.pinger import Pinger
from pingtest.services.system_info import get_system_info


class Commands:
    def __init__(self, pinger: Pinger):
        self.pinger = pinger

    def ping(self, host: str) -> PingResult:
        return self.pinger.ping(host)

    def get_system_info(self) -> SystemInfo:
        return get_system_info()


def get_commands() -> Commands:
    pinger = Pinger(
        count=settings.ping_count,
        timeout=settings.ping_timeout,
        interval=settings.ping_interval,
        size=settings.ping_size,
        echo_timeout=settings.ping_echo_timeout,
    )
    return Commands(pinger)
