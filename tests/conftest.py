import threading
from contextlib import contextmanager

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.deps import get_connector
from app.main import create_app


class FakeConnection:
    def __init__(self, closed=False):
        self.closed = closed


class FakeConnector:
    """Counts every handle it hands out and every release."""

    def __init__(self, handle=None, exc=None):
        self.handle = handle
        self.exc = exc
        self.opened = 0
        self.released = 0
        self.calls = []
        self._lock = threading.Lock()

    @contextmanager
    def __call__(self, url, username, password):
        with self._lock:
            self.calls.append((url, username, password))
        if self.exc is not None:
            raise self.exc
        with self._lock:
            self.opened += 1
        try:
            yield self.handle
        finally:
            with self._lock:
                self.released += 1

    @property
    def open_now(self):
        return self.opened - self.released


@pytest.fixture
def sqlite_url(tmp_path):
    return f"sqlite:///{tmp_path / 'probe.db'}"


@pytest.fixture
def unreachable_url(tmp_path):
    # sqlite cannot create a file inside a missing directory
    return f"sqlite:///{tmp_path / 'missing' / 'dir' / 'probe.db'}"


@pytest.fixture
def make_client():
    def _make(settings, connector=None):
        app = create_app(settings)
        if connector is not None:
            app.dependency_overrides[get_connector] = lambda: connector
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, sqlite_url):
    return make_client(Settings(DB_URL=sqlite_url))
