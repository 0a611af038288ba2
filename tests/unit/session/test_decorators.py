"""Unit tests for the @transactional decorator."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from mp_session.session import AsyncSession, Session, transactional
from mp_session.testing.fakes import AsyncCallRecorder, CallRecorder


class Repository:
    def __init__(self, session: Session[Any] | None) -> None:
        self._session = session
        self.saved: list[str] = []

    @transactional()
    def save(self, item: str) -> str:
        self.saved.append(item)
        return item

    @transactional()
    def save_all(self, items: list[str]) -> int:
        for item in items:
            self.save(item)
        return len(items)


class AsyncRepository:
    def __init__(self, session: AsyncSession[Any]) -> None:
        self.db = session
        self.saved: list[str] = []

    @transactional("db")
    async def save(self, item: str) -> None:
        await asyncio.sleep(0)
        self.saved.append(item)

    @transactional("db")
    async def save_all(self, items: list[str]) -> None:
        for item in items:
            await self.save(item)


class TestTransactionalSync:
    def test_wraps_call_in_transaction(self) -> None:
        rec = CallRecorder()
        repo = Repository(Session(rec.config()))
        assert repo.save("a") == "a"
        assert rec.names() == ["initialize", "finalize"]

    def test_nested_decorated_calls_coalesce(self) -> None:
        rec = CallRecorder()
        repo = Repository(Session(rec.config()))
        assert repo.save_all(["a", "b", "c"]) == 3
        assert repo.saved == ["a", "b", "c"]
        assert rec.names() == ["initialize", "finalize"]

    def test_runs_directly_without_session(self) -> None:
        repo = Repository(None)
        assert repo.save("a") == "a"
        assert repo.saved == ["a"]

    def test_explicit_session_instance(self) -> None:
        rec = CallRecorder()
        session: Session[Any] = Session(rec.config())

        @transactional(session)
        def work(x: int) -> int:
            assert session.phase == "action"
            return x * 2

        assert work(21) == 42
        assert rec.names() == ["initialize", "finalize"]

    def test_preserves_metadata(self) -> None:
        assert Repository.save.__name__ == "save"

    def test_rejects_async_session_for_plain_function(self) -> None:
        session: AsyncSession[Any] = AsyncSession(AsyncCallRecorder().config())

        @transactional(session)
        def work() -> None:
            return None

        with pytest.raises(TypeError, match="needs a Session"):
            work()

    def test_attribute_lookup_requires_self(self) -> None:
        @transactional()
        def work() -> None:
            return None

        with pytest.raises(TypeError, match="can only decorate methods"):
            work()

    def test_free_function_with_plain_argument_is_rejected(self) -> None:
        calls: list[int] = []

        @transactional()
        def work(x: int) -> None:
            calls.append(x)

        with pytest.raises(TypeError, match="can only decorate methods"):
            work(3)
        assert calls == []

    def test_instance_without_session_attribute_runs_directly(self) -> None:
        class Plain:
            @transactional()
            def work(self) -> str:
                return "direct"

        assert Plain().work() == "direct"


class TestTransactionalAsync:
    def test_nested_decorated_calls_coalesce(self) -> None:
        rec = AsyncCallRecorder()
        repo = AsyncRepository(AsyncSession(rec.config()))
        asyncio.run(repo.save_all(["a", "b"]))
        assert repo.saved == ["a", "b"]
        assert rec.names() == ["initialize", "finalize"]

    def test_rejects_sync_session_for_coroutine(self) -> None:
        session: Session[Any] = Session(CallRecorder().config())

        @transactional(session)
        async def work() -> None:
            return None

        with pytest.raises(TypeError, match="needs an AsyncSession"):
            asyncio.run(work())
