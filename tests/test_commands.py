from pingtest.config import settings
from pingtest.services.commands import get_commands


def test_get_commands_builds_pinger_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "ping_echo_timeout", 2.5)
    monkeypatch.setattr(settings, "ping_count", 6)

    pinger = get_commands().pinger

    assert pinger.echo_timeout == 2.5
    assert pinger.count == 6
    assert pinger.timeout == settings.ping_timeout
