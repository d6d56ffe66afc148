"""Tests for blocking behavior in SharedList."""

import asyncio

import pytest

from doublylinked import ListClosedError, SharedList


@pytest.mark.asyncio
async def test_pop_front_blocks_until_available() -> None:
    """Test that pop_front() blocks until a value is pushed."""
    shared = SharedList[int]()

    result = None

    async def consumer() -> None:
        nonlocal result
        result = await shared.pop_front()

    # Start consumer (will block)
    task = asyncio.create_task(consumer())
    await asyncio.sleep(0.01)  # Let it block

    assert result is None

    await shared.push_back(100)
    await task

    assert result == 100


@pytest.mark.asyncio
async def test_pop_back_blocks_until_available() -> None:
    """Test that pop_back() blocks until a value is pushed."""
    shared = SharedList[str]()

    task = asyncio.create_task(shared.pop_back())
    await asyncio.sleep(0.01)
    assert not task.done()

    await shared.push_front("late")
    assert await task == "late"


@pytest.mark.asyncio
async def test_pop_timeout() -> None:
    """Test pop_front() with timeout."""
    shared = SharedList[int]()

    with pytest.raises(asyncio.TimeoutError):
        await shared.pop_front(timeout=0.1)


@pytest.mark.asyncio
async def test_pop_timeout_success() -> None:
    """Test pop_front() succeeds before timeout."""
    shared = SharedList[int]()

    async def delayed_push() -> None:
        await asyncio.sleep(0.05)
        await shared.push_back(100)

    task = asyncio.create_task(delayed_push())
    value = await shared.pop_front(timeout=1.0)
    await task

    assert value == 100


@pytest.mark.asyncio
async def test_close_wakes_waiters() -> None:
    """Test that closing raises in pops that are waiting."""
    shared = SharedList[int]()

    tasks = [
        asyncio.create_task(shared.pop_front()),
        asyncio.create_task(shared.pop_back()),
    ]
    await asyncio.sleep(0.01)

    await shared.close()

    for task in tasks:
        with pytest.raises(ListClosedError):
            await task
