"""Shared fixtures: an app wired to an in-memory mail sender."""

import pytest

from app import create_app
from config import TestingConfig
from utils.email import DeliveryError


class FakeSender:
    """Records sent emails, or fails every send when `error` is set"""

    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def send(self, to_email, email):
        if self.error is not None:
            raise self.error
        self.sent.append((to_email, email))


@pytest.fixture
def sender():
    return FakeSender()


@pytest.fixture
def failing_sender():
    error = DeliveryError(
        "Failed to connect to SMTP server: [Errno 111] Connection refused "
        "(relay@test.local / test-app-password @ smtp.test.local)"
    )
    return FakeSender(error=error)


@pytest.fixture
def app(sender):
    return create_app(TestingConfig, sender=sender)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def failing_client(failing_sender):
    app = create_app(TestingConfig, sender=failing_sender)
    return app.test_client()


@pytest.fixture
def valid_contact():
    return {
        "name": "Jordan",
        "email": "jordan@x.com",
        "message": "Please contact me about pricing.",
    }


@pytest.fixture
def valid_inquiry():
    return {
        "name": "Priya Natarajan",
        "email": "priya@example.com",
        "phone": "+1 555 010 2000",
        "chargerType": "Level 2 Home Charger",
    }
