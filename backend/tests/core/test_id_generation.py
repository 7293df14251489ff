"""Id Generation — verifies ids never repeat and keep their expected shape.

Tests:
    - Sequential ids continue from the highest id ever seen
    - Timestamp ids follow the clock but never go backwards or repeat
"""

from practice_api.core.id_generation import (
    next_sequential_id, next_timestamp_id, timestamp_id_generator,
)


def test_sequential_starts_at_one():
    assert next_sequential_id(0) == 1


def test_sequential_continues_from_highest_seen():
    assert next_sequential_id(3) == 4


def test_timestamp_uses_clock_when_ahead():
    assert next_timestamp_id(highest_seen=3, now_ms=1_700_000_000_000) == 1_700_000_000_000


def test_timestamp_bumps_on_same_millisecond():
    assert next_timestamp_id(highest_seen=1_000, now_ms=1_000) == 1_001


def test_timestamp_never_goes_backwards():
    assert next_timestamp_id(highest_seen=5_000, now_ms=4_000) == 5_001


def test_generator_reads_clock_in_seconds():
    generate = timestamp_id_generator(lambda: 1_700_000_000.5)
    assert generate(0) == 1_700_000_000_500


def test_generator_with_frozen_clock_yields_increasing_ids():
    generate = timestamp_id_generator(lambda: 10.0)
    first = generate(0)
    second = generate(first)
    assert (first, second) == (10_000, 10_001)
