from pingtest.errors import SystemInfoError


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_system_info_success(client, fake_commands):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"hostname": "test-host", "ip_address": "192.168.1.100"}
    assert fake_commands.system_info_calls == 1


def test_system_info_failure(client, fake_commands):
    fake_commands.system_info_error = SystemInfoError("failed to retrieve system info")
    r = client.get("/")
    assert r.status_code == 500
    assert r.text == "Error retrieving system info\n"
    assert fake_commands.system_info_calls == 1


def test_unknown_route_error_is_plain_text(client):
    r = client.get("/no-such-route")
    assert r.status_code == 404
    assert r.text == "Not Found\n"
    assert r.headers["content-type"].startswith("text/plain")


def test_wrong_method_error_is_plain_text(client):
    r = client.post("/ping", params={"host": "example.com"})
    assert r.status_code == 405
    assert r.text == "Method Not Allowed\n"
