"""
Example 02: A Custom Lazy Sequence

RangeProducer computes each value on demand and keeps its own position.
It is its own iterator, so once drained it stays drained.
"""

from iteration_protocols import RangeProducer


if __name__ == "__main__":
    numbers = RangeProducer(1, 3)

    print("First pass:")
    for element in numbers:
        print(f"  {element}")

    print("\nSecond pass over the same producer:")
    print(f"  {list(numbers)}")  # []

    print("\nInverted bounds produce nothing:")
    print(f"  {list(RangeProducer(3, 1))}")  # []

    print("\n✅ Build a new RangeProducer to count again!")
