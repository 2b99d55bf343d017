"""
Example 03: Asynchronous Sequences

AsyncRangeProducer suspends on every pull before resolving.
async for awaits each pull in turn - nothing runs in parallel.
"""

import asyncio
import time

from iteration_protocols import AsyncRangeProducer, consume_async


async def main():
    print("async for over AsyncRangeProducer(1, 5):")
    async for element in AsyncRangeProducer(1, 5, delay_seconds=0.1):
        print(f"  {element}")

    print("\nSame thing through the consumer loop:")
    start = time.perf_counter()
    stats = await consume_async(
        AsyncRangeProducer(1, 5, delay_seconds=0.1), lambda value: print(f"  {value}")
    )
    print(f"  {stats.total_items} items in {time.perf_counter() - start:.2f}s")


if __name__ == "__main__":
    asyncio.run(main())

    print("\n✅ Six pulls x 0.1s: five values plus the terminal cursor!")
