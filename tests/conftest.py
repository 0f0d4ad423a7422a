"""Shared test fixtures for the tracker UI tests."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from logic.notifier import Notifier
from webhook.base import WebhookClient
from webhook.service import TrackerService
from webhook_config import load_webhook_config

WEBHOOK_URL = "https://automation.example.com/webhook/tracker"
CHART_URL = "https://charts.example.com/chart"


def make_response(status_code, body=None):
    """Build a real requests.Response carrying `body` as JSON, text, or nothing."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.encoding = "utf-8"
    if body is None:
        resp._content = b""
    elif isinstance(body, (dict, list)):
        resp._content = json.dumps(body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    else:
        resp._content = str(body).encode("utf-8")
        resp.headers["Content-Type"] = "text/plain"
    return resp


class RecordingNotifier(Notifier):
    def __init__(self):
        self.events = []

    def success(self, title, message=""):
        self.events.append(("success", title, message))

    def warning(self, title, message=""):
        self.events.append(("warning", title, message))

    def error(self, title, message=""):
        self.events.append(("error", title, message))


@pytest.fixture
def config():
    return load_webhook_config(
        {
            "WEBHOOK_URL": WEBHOOK_URL,
            "WEBHOOK_TIMEOUT": "5",
            "WEBHOOK_LONG_TIMEOUT": "45",
            "PERSIST_ACK_DELAY": "2",
            "CHART_SERVICE_URL": CHART_URL,
            "ASSISTANT_NAME": "Abidin",
        }
    )


@pytest.fixture
def mock_session():
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def sleep_calls():
    return []


@pytest.fixture
def service(config, mock_session, sleep_calls):
    client = WebhookClient(config.base_url, session=mock_session)
    return TrackerService(client, config, sleep=sleep_calls.append)


@pytest.fixture
def notifier():
    return RecordingNotifier()
