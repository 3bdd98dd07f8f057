"""Shared fixtures: testing app, client, recorded mail transport and a fake clock."""

from __future__ import annotations

import pytest

from app import create_app
from extensions import mailer, rate_limiter


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def app():
    application = create_app("testing")
    yield application
    rate_limiter.reset()


@pytest.fixture()
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(rate_limiter, "clock", fake)
    return fake


@pytest.fixture()
def sent_messages(monkeypatch):
    """Replace SMTP delivery with an in-memory outbox."""
    outbox = []
    monkeypatch.setattr(mailer, "send", outbox.append)
    return outbox


@pytest.fixture()
def valid_payload():
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "+44 20 7946 0000",
        "message": "I would like to talk about a project.",
        "sharedSecret": "test-shared-secret",
    }
