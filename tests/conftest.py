"""Shared pytest fixtures."""

from collections.abc import Callable
from typing import Any

import pytest
from pymongo.errors import DuplicateKeyError
from solders.keypair import Keypair

from walletscore.app import App
from walletscore.config import Config
from walletscore.core.core import Core


class FakeCursor:
    """In-memory stand-in for AsyncCursor supporting sort/limit and async iteration."""

    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self._docs = docs

    def sort(self, key: str, direction: int) -> "FakeCursor":
        self._docs = sorted(self._docs, key=lambda d: d[key], reverse=direction < 0)
        return self

    def limit(self, n: int) -> "FakeCursor":
        self._docs = self._docs[:n]
        return self

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for doc in self._docs:
            yield doc


class FakeCollection:
    """In-memory collection honoring unique single-field indexes."""

    def __init__(self) -> None:
        self.docs: list[dict[str, Any]] = []
        self.unique_fields: set[str] = set()

    async def create_index(self, keys: list[tuple[str, int]], unique: bool = False, **_: Any) -> None:
        if unique and len(keys) == 1:
            self.unique_fields.add(keys[0][0])

    async def insert_one(self, doc: dict[str, Any]) -> None:
        for field in self.unique_fields:
            if any(d.get(field) == doc.get(field) for d in self.docs):
                raise DuplicateKeyError(f"E11000 duplicate key error: {field}")
        self.docs.append(dict(doc))

    def find(self, query: dict[str, Any]) -> FakeCursor:
        return FakeCursor([dict(d) for d in self.docs if _matches(d, query)])

    async def find_one(self, query: dict[str, Any], sort: list[tuple[str, int]] | None = None) -> dict[str, Any] | None:
        cursor = self.find(query)
        for key, direction in reversed(sort or []):
            cursor.sort(key, direction)
        async for doc in cursor:
            return doc
        return None


class FakeDatabase:
    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {}

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
    return all(doc.get(k) == v for k, v in query.items())


@pytest.fixture
def config():
    return Config(
        database_url="mongodb://localhost:27017/walletscore_test",
        session_secret_key="test-secret",
        _env_file=None,
    )


@pytest.fixture
def database():
    return FakeDatabase()


@pytest.fixture
async def core(config, database):
    """Core wired to the in-memory database, with indexes created."""
    core = Core(config, database)
    await core.on_start()
    return core


@pytest.fixture
async def app(config, database):
    app = App(config, database)
    async with app.lifespan():
        yield app


@pytest.fixture
def keypair():
    return Keypair()


@pytest.fixture
def wallet(keypair):
    return str(keypair.pubkey())


@pytest.fixture
def sign(keypair) -> Callable[[str], str]:
    """Sign a text message with the wallet key, returning the base-58 signature."""

    def _sign(message: str) -> str:
        return str(keypair.sign_message(message.encode("utf-8")))

    return _sign
