"""End-to-end timing scenarios driven through the polling engine."""
from __future__ import annotations

from vgtimer import (
    Engine,
    ManualClock,
    PhaseSpec,
    TimerGroup,
    TimerKind,
    format_readout,
    make_readout_system,
    make_update_system,
)


def _green_only(clock: ManualClock) -> TimerGroup:
    return TimerGroup(
        {TimerKind.GREEN: PhaseSpec(8000, 7000, 0, label="Green circle")},
        clock=clock,
    )


def test_green_circle_cycle():
    clock = ManualClock(0)
    group = _green_only(clock)
    engine = Engine(group)
    engine.add_system(make_update_system())

    group.reset_all_and_start()
    (green,) = group.readouts(0)
    assert green.to_activation == 0
    assert green.to_strike == 7000

    clock.set(7000)
    engine.step()
    (green,) = group.readouts(7000)
    assert green.to_strike == 0

    clock.set(15000)
    engine.step()
    assert group.next_activation(TimerKind.GREEN) == 15000
    (green,) = group.readouts(15000)
    assert green.to_activation == 0
    assert green.to_strike == 7000


def test_polling_at_100ms_never_drifts():
    clock = ManualClock(0)
    group = _green_only(clock)
    engine = Engine(group)
    engine.add_system(make_update_system())
    group.reset_all_and_start()

    for _ in range(10 * 60 * 10):  # ten minutes of ticks
        clock.advance(100)
        engine.step()

    start = group.next_activation(TimerKind.GREEN)
    assert start % 15000 == 0
    assert 0 <= clock.now_ms() - start <= 7000


def test_resume_after_suspension_catches_up_one_cycle_per_tick():
    clock = ManualClock(0)
    group = _green_only(clock)
    engine = Engine(group)
    engine.add_system(make_update_system())
    group.reset_all_and_start()

    clock.set(60_050)
    starts = []
    for _ in range(5):
        engine.step()
        starts.append(group.next_activation(TimerKind.GREEN))
    assert starts == [15000, 30000, 45000, 60000, 60000]


def test_labels_for_display():
    clock = ManualClock(0)
    group = _green_only(clock)
    engine = Engine(group)
    lines: list[str] = []
    engine.add_system(make_update_system())
    engine.add_system(
        make_readout_system(lambda rs: lines.extend(line for r in rs for line in format_readout(r)))
    )
    group.reset_all_and_start()
    clock.set(1_850)
    engine.step()
    assert lines == ["Green circle: 0.0", "Strikes in: 5.1"]
