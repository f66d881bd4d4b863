"""Tests for the uvicorn runner."""

import logging

from app import server
from Security.security_config import SECURITY_SETTINGS


class FakeServer:
    instances = []

    def __init__(self, config):
        self.config = config
        self.ran = False
        FakeServer.instances.append(self)

    def run(self):
        self.ran = True


def test_main_configures_and_runs_uvicorn(monkeypatch, caplog):
    FakeServer.instances = []
    monkeypatch.setattr(server.uvicorn, "Server", FakeServer)
    caplog.set_level(logging.INFO, logger="search.server")

    server.main()

    fake = FakeServer.instances[0]
    assert fake.ran is True
    assert fake.config.app == "app.main:app"
    assert fake.config.port == SECURITY_SETTINGS["PORT"]
    # The runner announces the start; uvicorn reports the bound socket itself.
    assert f"Starting web server on {SECURITY_SETTINGS['HOST']}:{SECURITY_SETTINGS['PORT']}" in caplog.text
    assert "listening" not in caplog.text
