"""
Example 05: Bounding a Slow Pull

Producers never hear that a consumer lost interest. Wrapping each pull
with a timeout is how a consumer gives up on a slow step.
"""

import asyncio

from iteration_protocols import AsyncRangeProducer, pull_with_timeout


async def main():
    slow = AsyncRangeProducer(1, 3, delay_seconds=1.0)
    iterator = slow.create_iterator()

    try:
        cursor = await pull_with_timeout(iterator, timeout=0.2)
        print(f"  Got {cursor}")
    except asyncio.TimeoutError:
        print("  Pull took longer than 0.2s - giving up")


if __name__ == "__main__":
    print("Pulling from a producer that needs 1s per value:")
    asyncio.run(main())

    print("\n✅ The timeout cancels the in-flight pull!")
