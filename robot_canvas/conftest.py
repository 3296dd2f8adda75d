"""Pytest configuration and shared fixtures."""

import json

import pytest
import requests

from robot_canvas.config import Settings

PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk"
    "YPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

REACH_PLAN = {
    "trajectory": [
        {
            "step_id": 1,
            "description": "Reach",
            "angles": {"shoulder": 30, "elbow": 0},
            "target_coords": {"x": 700, "y": 250},
            "gripper": "open",
            "duration": 1.2,
        }
    ]
}


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Stands in for requests.Session and records every POST."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, headers=None, json=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def gemini_reply(text):
    """Wraps planner text the way generateContent returns it."""
    return FakeResponse(payload={"candidates": [{"content": {"parts": [{"text": text}]}}]})


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-key")


@pytest.fixture
def png_base64():
    return PNG_BASE64


@pytest.fixture
def reach_plan():
    return json.loads(json.dumps(REACH_PLAN))


@pytest.fixture
def connection_error():
    return requests.exceptions.ConnectionError("connection refused")
