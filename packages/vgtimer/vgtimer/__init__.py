"""vgtimer - Phase timers for a cyclical encounter, driven by a polling loop."""

from vgtimer.clock import ManualClock, SystemClock, TimeSource
from vgtimer.engine import Engine, make_readout_system, make_update_system
from vgtimer.format import format_readout, format_remaining
from vgtimer.group import GroupState, Readout, TimerGroup
from vgtimer.kinds import DEFAULT_SPECS, PhaseSpec, TimerKind
from vgtimer.timer import PhaseTimer
from vgtimer.types import TickContext, TimerNotStartedError

__all__ = [
    "Engine",
    "TimerGroup",
    "GroupState",
    "Readout",
    "PhaseTimer",
    "PhaseSpec",
    "TimerKind",
    "DEFAULT_SPECS",
    "SystemClock",
    "ManualClock",
    "TimeSource",
    "TickContext",
    "TimerNotStartedError",
    "format_remaining",
    "format_readout",
    "make_update_system",
    "make_readout_system",
]
