"""
Portfolio Site Test Configuration and Fixtures
Shared pytest fixtures for all test modules.
"""
import smtplib
import threading

import pytest

from app import create_app
from config import MailSettings


# =============================================================================
# Fake mail transports
# =============================================================================


class RecordingTransport:
    """Transport that keeps every message it is asked to send."""

    def __init__(self, settings):
        self.settings = settings
        self.sent = []

    def send(self, mail):
        self.sent.append(mail)


class FailingTransport:
    """Transport that always fails the way an SMTP relay rejecting a login does."""

    error_text = "auth failed"

    def __init__(self, settings):
        self.settings = settings

    def send(self, mail):
        raise smtplib.SMTPException(self.error_text)


class TransportRecorder:
    """Transport factory that remembers each transport it creates."""

    def __init__(self, transport_class=RecordingTransport):
        self.transport_class = transport_class
        self.transports = []

    def __call__(self, settings):
        transport = self.transport_class(settings)
        self.transports.append(transport)
        return transport

    @property
    def messages(self):
        return [mail for t in self.transports for mail in getattr(t, "sent", [])]


class RendezvousTransport:
    """
    Transport whose sends only finish once ``parties`` sends are in flight
    at the same time; fails any message whose body mentions "fail".
    """

    def __init__(self, barrier):
        self.barrier = barrier

    def __call__(self, settings):
        return self

    def send(self, mail):
        self.barrier.wait()
        if "fail" in mail.body:
            raise smtplib.SMTPRecipientsRefused({mail.recipient: (550, b"rejected")})


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's shell environment out of the app config."""
    for name in (
        "GMAIL_USER",
        "GMAIL_PASS",
        "PORT",
        "FORCE_HTTPS",
        "SESSION_SECRET",
        "MAIL_TIMEOUT",
        "FLASK_ENV",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mail_settings():
    """Mail settings for the site owner's mailbox."""
    return MailSettings(username="owner@example.com", password="secret")


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def recorder():
    return TransportRecorder()


@pytest.fixture
def app(recorder):
    """Testing app whose mail transport records instead of sending."""
    return create_app("testing", transport_factory=recorder)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def failing_client():
    """Client for an app whose relay rejects every send."""
    app = create_app("testing", transport_factory=FailingTransport)
    return app.test_client()


@pytest.fixture
def rendezvous():
    """Factory for transports that require two concurrent sends."""
    return RendezvousTransport(threading.Barrier(2, timeout=5))
