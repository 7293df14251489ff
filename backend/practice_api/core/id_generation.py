"""Id Generation — server-side id assignment for new entities.

Invariants:
    - A generated id is always greater than every id the store has ever held
    - Product ids are timestamp-shaped (milliseconds since epoch)
    - User ids are small sequential integers

Design Decisions:
    - Generators receive the highest id ever seen instead of the current list:
      an id freed by a delete is never handed out again
    - now_ms is an argument, not a clock read: keeps this module pure
"""

from typing import Callable

IdGenerator = Callable[[int], int]


def next_sequential_id(highest_seen: int) -> int:
    """Next id in a 1, 2, 3, ... sequence."""
    return highest_seen + 1


def next_timestamp_id(highest_seen: int, now_ms: int) -> int:
    """Current time in ms, bumped forward if that would repeat an id.

    Two creates inside the same millisecond (or a clock stepping backwards)
    get consecutive ids rather than a duplicate.
    """
    return max(now_ms, highest_seen + 1)


def timestamp_id_generator(clock: Callable[[], float]) -> IdGenerator:
    """Bind a wall clock (seconds, float) to next_timestamp_id."""

    def generate(highest_seen: int) -> int:
        return next_timestamp_id(highest_seen, int(clock() * 1000))

    return generate
