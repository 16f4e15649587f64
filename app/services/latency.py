import asyncio
import random


def pick_latency_ms(min_ms: int, max_ms: int, rng: random.Random | None = None) -> int:
    """Pick a delay in milliseconds, uniformly in [min_ms, max_ms)."""
    if max_ms <= min_ms:
        raise ValueError("max_ms must be greater than min_ms")
    return (rng or random).randrange(min_ms, max_ms)


async def simulate_latency(min_ms: int, max_ms: int, rng: random.Random | None = None) -> int:
    """Suspend the current task for a random bounded delay; return the delay used.

    The returned value is below max_ms. The wall-clock sleep can run a few
    milliseconds past it, by however late the event loop wakes the task.
    """
    latency_ms = pick_latency_ms(min_ms, max_ms, rng)
    await asyncio.sleep(latency_ms / 1000)
    return latency_ms
