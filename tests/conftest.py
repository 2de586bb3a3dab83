"""
Pytest configuration and fixtures for gateway tests.
"""
import sqlite3
from contextlib import ExitStack

import httpx
import pytest
from fastapi.testclient import TestClient

from gateway.load_secrets import GatewaySettings
from gateway.main import create_app


def build_empty_board(size: int = 3) -> dict:
    rows = ["." * (row + 1) for row in range(size)]
    return {"size": size, "turn": 0, "players": ["B", "R"], "layout": "/".join(rows)}


class FakeEngine:
    """Answers like the game engine and records every call it receives."""

    def __init__(self):
        self.calls = []
        self.move_payload = {
            "board": {"size": 3, "turn": 0, "players": ["B", "R"], "layout": "B/.R/..."},
            "winner": None,
        }
        self.failure = None
        self.error_status = None
        self.error_text = ""
        self.raw_text = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append((request.method, request.url.path, request.content))
        if self.failure is not None:
            raise self.failure
        if self.error_status is not None:
            return httpx.Response(self.error_status, text=self.error_text)
        if self.raw_text is not None:
            return httpx.Response(200, text=self.raw_text)
        if request.url.path == "/execute-move":
            return httpx.Response(200, json=self.move_payload)
        if request.url.path == "/reset":
            return httpx.Response(200, json=build_empty_board())
        if request.url.path == "/status":
            return httpx.Response(200, text="OK")
        return httpx.Response(404, text="Not Found")


@pytest.fixture
def empty_board():
    """Factory for an empty triangular board in the engine's notation."""
    return build_empty_board


@pytest.fixture
def fake_engine():
    return FakeEngine()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "users.sqlite3"


@pytest.fixture
def settings(db_path):
    return GatewaySettings(
        database_url=f"sqlite+aiosqlite:///{db_path}",
        engine_url="http://engine.test",
        hash_iterations=1000,
        store_timeout=2.0,
    )


@pytest.fixture
def make_client(settings, fake_engine):
    """Build a started TestClient; keyword overrides are applied to the settings."""
    stack = ExitStack()

    def _make(raise_server_exceptions: bool = True, **overrides) -> TestClient:
        app_settings = settings.model_copy(update=overrides)
        app = create_app(app_settings, httpx.MockTransport(fake_engine.handler))
        return stack.enter_context(
            TestClient(app, raise_server_exceptions=raise_server_exceptions)
        )

    with stack:
        yield _make


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def stored_users(db_path):
    """Read the users table directly from the SQLite file."""

    def _read():
        with sqlite3.connect(db_path) as conn:
            return conn.execute(
                "SELECT username, hash_password, age, country, score, created_at FROM users"
            ).fetchall()

    return _read


@pytest.fixture
def new_user():
    return {"username": "testUser", "password": "testPass", "age": 25, "country": "Spain"}
