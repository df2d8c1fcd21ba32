from datetime import timedelta, timezone

from geo_route.sim.clock import ManualClock, WallClock


def test_manual_clock_steps_per_reading():
    clock = ManualClock(t=10.0, step=0.5)
    assert [clock.now(), clock.now(), clock.now()] == [10.0, 10.5, 11.0]
    clock.advance(5.0)
    assert clock.now() == 16.5


def test_to_wall_in_utc_and_offset():
    clock = ManualClock()
    assert clock.to_wall(0.0).strftime("%Y-%m-%d %H:%M:%S") == "1970-01-01 00:00:00"
    pkt = timezone(timedelta(hours=5))
    assert clock.to_wall(3600.0, pkt).hour == 6


def test_wall_clock_is_monotone_enough():
    clock = WallClock()
    a = clock.now()
    b = clock.now()
    assert b >= a
