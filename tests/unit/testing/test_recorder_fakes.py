"""Unit tests for the callback recorders in mp_session.testing.fakes."""

from __future__ import annotations

import asyncio

import pytest

from mp_session.session import AsyncSessionConfig, Phase, SessionConfig
from mp_session.testing import AsyncCallRecorder, CallRecorder


class TestCallRecorder:
    def test_records_calls_in_order(self) -> None:
        rec = CallRecorder(state=7)
        assert rec.initialize() == 7
        rec.finalize(7)
        assert rec.calls == [("initialize", ()), ("finalize", (7,))]
        assert rec.count("finalize") == 1

    def test_fail_on_raises_configured_error(self) -> None:
        err = ValueError("boom")
        rec = CallRecorder(fail_on="finalize", error=err)
        with pytest.raises(ValueError) as exc_info:
            rec.finalize(None)
        assert exc_info.value is err
        assert rec.names() == ["finalize"]

    def test_config_without_error_handler(self) -> None:
        cfg = CallRecorder().config(with_error_handler=False)
        assert isinstance(cfg, SessionConfig)
        assert cfg.handle_error is None


class TestAsyncCallRecorder:
    def test_callbacks_are_awaitable(self) -> None:
        rec = AsyncCallRecorder(state="s")

        async def run() -> None:
            assert await rec.initialize() == "s"
            await rec.handle_error(RuntimeError("x"), Phase.ACTION, "s")
            await rec.finalize("s")

        asyncio.run(run())
        assert rec.names() == ["initialize", "handle_error", "finalize"]

    def test_config_type(self) -> None:
        assert isinstance(AsyncCallRecorder().config(), AsyncSessionConfig)
