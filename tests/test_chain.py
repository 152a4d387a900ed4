"""Tests for switchyard.dispatch.chain — cursor-driven chain executor."""

from typing import Any

import pytest

from switchyard.dispatch.chain import Chain


class TestChain:
    async def test_runs_links_in_order(self) -> None:
        calls: list[str] = []

        async def a(request: Any, response: Any, advance: Any) -> None:
            calls.append("a")
            await advance()

        async def b(request: Any, response: Any, advance: Any) -> None:
            calls.append("b")
            await advance()

        chain = Chain([a, b], None, None)
        await chain.advance()
        assert calls == ["a", "b"]
        assert chain.exhausted
        assert chain.cursor == 2

    async def test_sync_links_return_advance(self) -> None:
        calls: list[str] = []

        def a(request: Any, response: Any, advance: Any) -> Any:
            calls.append("a")
            return advance()

        async def b(request: Any, response: Any, advance: Any) -> None:
            calls.append("b")

        chain = Chain([a, b], None, None)
        await chain.advance()
        assert calls == ["a", "b"]
        assert not chain.exhausted

    async def test_link_receives_request_and_response(self) -> None:
        seen: list[tuple[Any, Any]] = []

        async def link(request: Any, response: Any, advance: Any) -> None:
            seen.append((request, response))

        await Chain([link], "req", "res").advance()
        assert seen == [("req", "res")]

    async def test_short_circuit(self) -> None:
        calls: list[str] = []

        async def stop(request: Any, response: Any, advance: Any) -> None:
            calls.append("stop")

        async def never(request: Any, response: Any, advance: Any) -> None:
            calls.append("never")

        exhausted: list[bool] = []

        async def on_exhausted() -> None:
            exhausted.append(True)

        chain = Chain([stop, never], None, None, on_exhausted=on_exhausted)
        await chain.advance()
        assert calls == ["stop"]
        assert exhausted == []
        assert chain.cursor == 0

    async def test_on_exhausted_runs_once(self) -> None:
        count = 0

        async def on_exhausted() -> None:
            nonlocal count
            count += 1

        async def twice(request: Any, response: Any, advance: Any) -> None:
            await advance()
            await advance()

        chain = Chain([twice], None, None, on_exhausted=on_exhausted)
        await chain.advance()
        assert count == 1

    async def test_empty_chain_exhausts_immediately(self) -> None:
        ran: list[bool] = []

        async def on_exhausted() -> None:
            ran.append(True)

        chain = Chain([], None, None, on_exhausted=on_exhausted)
        assert len(chain) == 0
        await chain.advance()
        assert ran == [True]

    async def test_link_exception_propagates(self) -> None:
        async def boom(request: Any, response: Any, advance: Any) -> None:
            raise ValueError("boom")

        chain = Chain([boom], None, None)
        with pytest.raises(ValueError, match="boom"):
            await chain.advance()


class TestSyncAdvance:
    async def test_called_without_return_continues(self) -> None:
        calls: list[str] = []

        def a(request: Any, response: Any, advance: Any) -> None:
            calls.append("a")
            advance()
            calls.append("a returns")

        async def b(request: Any, response: Any, advance: Any) -> None:
            calls.append("b")
            await advance()

        exhausted: list[bool] = []

        async def on_exhausted() -> None:
            exhausted.append(True)

        chain = Chain([a, b], None, None, on_exhausted=on_exhausted)
        await chain.advance()
        assert calls == ["a", "a returns", "b"]
        assert exhausted == [True]
        assert chain.cursor == 2

    async def test_cursor_moves_on_call(self) -> None:
        cursors: list[int] = []
        chain: Chain

        def a(request: Any, response: Any, advance: Any) -> None:
            advance()
            cursors.append(chain.cursor)

        async def b(request: Any, response: Any, advance: Any) -> None:
            return None

        chain = Chain([a, b], None, None)
        await chain.advance()
        assert cursors == [1]

    async def test_awaited_step_runs_once(self) -> None:
        calls: list[str] = []

        async def a(request: Any, response: Any, advance: Any) -> None:
            step = advance()
            await step
            await step

        async def b(request: Any, response: Any, advance: Any) -> None:
            calls.append("b")

        await Chain([a, b], None, None).advance()
        assert calls == ["b"]

    async def test_dropped_step_after_async_link(self) -> None:
        calls: list[str] = []

        async def a(request: Any, response: Any, advance: Any) -> None:
            advance()

        async def b(request: Any, response: Any, advance: Any) -> None:
            calls.append("b")

        await Chain([a, b], None, None).advance()
        assert calls == ["b"]
