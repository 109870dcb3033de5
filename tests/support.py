"""Shared helpers for store and API tests."""

import os
import shutil
import tempfile
import unittest

from fastapi.testclient import TestClient

from shortfeed.main import app
from shortfeed.storage import FileStorage, SqlStorage, get_store


def make_store(backend: str, root: str):
    """Build a fresh backend rooted in a temp directory."""
    if backend == "sql":
        return SqlStorage(f"sqlite:///{os.path.join(root, 'shortfeed-test.db')}")
    return FileStorage(os.path.join(root, "data"))


class StoreTestCase(unittest.TestCase):
    """Gives each test its own empty backend; subclasses pick the backend."""

    backend = "file"

    def setUp(self) -> None:
        self.tmpdir = tempfile.mkdtemp(prefix="shortfeed-")
        self.store = make_store(self.backend, self.tmpdir)

    def tearDown(self) -> None:
        if isinstance(self.store, SqlStorage):
            self.store.engine.dispose()
        shutil.rmtree(self.tmpdir, ignore_errors=True)


class ApiTestCase(StoreTestCase):
    """Routes the app's storage dependency to the per-test backend."""

    def setUp(self) -> None:
        super().setUp()
        app.dependency_overrides[get_store] = lambda: self.store
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        super().tearDown()

    def signup(self, username: str = "alice", password: str = "secret1", client=None):
        client = client or self.client
        return client.post("/api/auth/signup", json={"username": username, "password": password})

    def login(self, username: str = "alice", password: str = "secret1", client=None):
        client = client or self.client
        return client.post("/api/auth/login", json={"username": username, "password": password})
