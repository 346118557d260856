"""Tests for async helpers"""

import asyncio

import pytest

from deployment_catalog.utils.async_utils import gather_all, run_async


class TestGatherAll:

    @pytest.mark.asyncio
    async def test_keeps_input_order(self):
        async def delayed(value, delay):
            await asyncio.sleep(delay)
            return value

        results = await gather_all([delayed("slow", 0.02), delayed("fast", 0)])

        assert results == ["slow", "fast"]

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await gather_all([]) == []

    @pytest.mark.asyncio
    async def test_first_failure_cancels_outstanding(self):
        cancelled = asyncio.Event()

        async def hangs():
            try:
                await asyncio.sleep(60)
            except asyncio.CancelledError:
                cancelled.set()
                raise

        async def fails():
            await asyncio.sleep(0)
            raise PermissionError("denied")

        with pytest.raises(PermissionError):
            await gather_all([hangs(), fails()])

        assert cancelled.is_set()


class TestRunAsync:

    def test_without_running_loop(self):
        async def answer():
            return 42

        assert run_async(answer()) == 42

    @pytest.mark.asyncio
    async def test_inside_running_loop(self):
        async def answer():
            return 42

        assert run_async(answer()) == 42

    def test_propagates_errors(self):
        async def boom():
            raise FileNotFoundError("gone")

        with pytest.raises(FileNotFoundError):
            run_async(boom())
