"""
Example 01: Manual Cursor Iteration

Every sequence hands out an iterator whose pull() returns a Cursor:
a value plus a done flag. A for loop just keeps pulling until done.
"""

from iteration_protocols import IterableSequence


if __name__ == "__main__":
    source = IterableSequence([1, 2, 3])
    iterator = source.create_iterator()

    print("Pulling by hand:")
    print(f"  {iterator.pull()}")  # Cursor(value=1, done=False)
    print(f"  {iterator.pull()}")  # Cursor(value=2, done=False)
    print(f"  {iterator.pull()}")  # Cursor(value=3, done=False)
    print(f"  {iterator.pull()}")  # Cursor(value=None, done=True)

    print("\nLetting a for loop do the pulling:")
    for element in source:
        print(f"  {element}")

    print("\n✅ A list can be iterated again: each create_iterator() starts fresh!")
