"""Example with a producer and several consumers sharing one list."""

import asyncio
import random

from doublylinked import SharedList


async def worker(
    shared: SharedList[dict],
    worker_id: str,
    fail_rate: float = 0.2,
) -> None:
    """
    Worker that takes tasks from the front and retries failures first.

    Args:
        shared: The list to process from
        worker_id: Identifier for this worker
        fail_rate: Probability of simulated failure (0.0 to 1.0)
    """
    processed = 0

    while True:
        try:
            # Take next task (timeout after 1 second of no work)
            task = await shared.pop_front(timeout=1.0)
        except asyncio.TimeoutError:
            # No more work available
            break

        print(f"[{worker_id}] Processing task-{task['task_id']:02d}...")
        await asyncio.sleep(random.uniform(0.05, 0.15))

        if random.random() < fail_rate:
            # Simulated failure - put it back at the front for retry
            print(f"[{worker_id}] ✗ Failed task-{task['task_id']:02d} - will retry")
            await shared.push_front(task)
        else:
            print(f"[{worker_id}] ✓ Completed task-{task['task_id']:02d}")
            processed += 1

    print(f"[{worker_id}] Finished - processed {processed} items")


async def main() -> None:
    """Run multiple workers processing from a shared list."""
    print("=== Shared List Work Queue ===\n")

    async with SharedList[dict]() as shared:
        num_tasks = 20
        print(f"Adding {num_tasks} tasks...\n")
        for i in range(num_tasks):
            await shared.push_back({"task_id": i, "data": f"payload-{i}"})

        print("Starting 3 workers...\n")
        await asyncio.gather(
            worker(shared, "Worker-A", fail_rate=0.3),
            worker(shared, "Worker-B", fail_rate=0.2),
            worker(shared, "Worker-C", fail_rate=0.1),
        )

        print(f"\nRemaining: {await shared.size()}")


if __name__ == "__main__":
    asyncio.run(main())
