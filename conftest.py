import os
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("PINGTEST_PING_COUNT", "4")
os.environ.setdefault("PINGTEST_PING_TIMEOUT", "10")
os.environ.setdefault("PINGTEST_PING_INTERVAL", "0")

from pingtest.errors import PingError, SystemInfoError
from pingtest.main import app
from pingtest.schemas.ping import PingResult
from pingtest.schemas.system import SystemInfo
from pingtest.services.commands import get_commands


class FakeCommands:
    """Stands in for Commands; records calls and replays canned results or errors."""

    def __init__(self):
        self.ping_result = PingResult(successful=True, time=timedelta(milliseconds=123), packets=4)
        self.ping_error: PingError | None = None
        self.system_info = SystemInfo(hostname="test-host", ip_address="192.168.1.100")
        self.system_info_error: SystemInfoError | None = None
        self.ping_calls: list[str] = []
        self.system_info_calls = 0

    def ping(self, host: str) -> PingResult:
        self.ping_calls.append(host)
        if self.ping_error:
            raise self.ping_error
        return self.ping_result

    def get_system_info(self) -> SystemInfo:
        self.system_info_calls += 1
        if self.system_info_error:
            raise self.system_info_error
        return self.system_info


@pytest.fixture
def fake_commands():
    return FakeCommands()


@pytest.fixture(scope="function")
def client(fake_commands):
    app.dependency_overrides[get_commands] = lambda: fake_commands
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
