from datetime import UTC, datetime

from src.adapters.clock import FixedClock, SystemClock


def test_system_clock():
    clock = SystemClock()
    now = clock.now_utc()
    assert isinstance(now, datetime)
    assert now.tzinfo is not None
    diff = abs((datetime.now(UTC) - now).total_seconds())
    assert diff < 1.0


def test_fixed_clock_advance():
    clock = FixedClock(datetime(2025, 1, 31, 12, 0, tzinfo=UTC))
    clock.advance(90)
    assert clock.now_utc() == datetime(2025, 1, 31, 12, 1, 30, tzinfo=UTC)
