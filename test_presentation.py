"""
Tests for the RSVP presentation ticker.
"""

from core.presentation import MIN_TICK_MS, RsvpTicker


def test_ticks_through_every_item():
    ticker = RsvpTicker(item_count=3, speed_ms=500)

    assert ticker.visible_index == 0
    assert ticker.tick() is False
    assert ticker.visible_index == 1
    assert ticker.tick() is False
    assert ticker.tick() is True

    assert ticker.done
    assert not ticker.running
    assert ticker.visible_index == 2


def test_tick_after_done_is_ignored():
    ticker = RsvpTicker(item_count=1, speed_ms=500)
    assert ticker.tick() is True
    assert ticker.tick() is False
    assert ticker.position == 1


def test_hold_keeps_position():
    ticker = RsvpTicker(item_count=3, speed_ms=500)
    ticker.tick()
    ticker.hold()

    assert not ticker.running
    assert ticker.tick() is False
    assert ticker.position == 1

    ticker.release()
    assert ticker.running
    ticker.tick()
    assert ticker.position == 2


def test_empty_round_is_done_immediately():
    ticker = RsvpTicker(item_count=0, speed_ms=500)
    assert ticker.done
    assert ticker.progress_label() == "Showing 0 / 0"


def test_interval_has_a_floor():
    assert RsvpTicker(item_count=2, speed_ms=20).interval_ms == MIN_TICK_MS
    assert RsvpTicker(item_count=2, speed_ms=700).interval_ms == 700


def test_restart_resets_position_and_pause():
    ticker = RsvpTicker(item_count=2, speed_ms=500)
    ticker.tick()
    ticker.tick()
    ticker.hold()

    ticker.restart(item_count=4)

    assert ticker.position == 0
    assert ticker.running
    assert ticker.item_count == 4


def test_progress_label():
    ticker = RsvpTicker(item_count=4, speed_ms=500)
    assert ticker.progress_label() == "Showing 1 / 4"
    ticker.tick()
    assert ticker.progress_label() == "Showing 2 / 4"


def test_poll_waits_a_full_interval():
    ticker = RsvpTicker(item_count=3, speed_ms=500)

    assert ticker.poll(10.0) is False
    assert ticker.position == 0
    assert ticker.poll(10.2) is False
    assert ticker.position == 0
    assert ticker.poll(10.5) is False
    assert ticker.position == 1


def test_poll_completes_presentation():
    ticker = RsvpTicker(item_count=2, speed_ms=500)
    ticker.poll(0.0)
    ticker.poll(0.5)
    assert ticker.poll(1.0) is True
    assert ticker.done


def test_release_restarts_the_interval():
    ticker = RsvpTicker(item_count=3, speed_ms=500)
    ticker.poll(0.0)
    ticker.hold()

    assert ticker.poll(5.0) is False
    ticker.release()

    # Long after the last tick, but the interval starts again on release
    assert ticker.poll(30.0) is False
    assert ticker.position == 0
    assert ticker.poll(30.5) is False
    assert ticker.position == 1
