"""Vale Guardian Timer - encounter phase timers in a small pygame window."""
from __future__ import annotations

import argparse
import logging
import os
import signal
import sys

import pygame

from vgtimer import (
    Engine,
    Readout,
    TimerGroup,
    format_readout,
    make_readout_system,
    make_update_system,
)
from vgtimer_triggers import (
    ChordError,
    TriggerQueue,
    chord_from_parts,
    load_config,
    make_trigger_system,
    resolve_bindings,
)
from vgtimer_triggers.config import DEFAULT_CONFIG_PATH

from ui.constants import FPS, SCREEN_H, SCREEN_W, WINDOW_POS, WINDOW_TITLE
from ui.panel import TimerPanel

logger = logging.getLogger("vg-timer-overlay")

_MODIFIER_MASKS = (
    (pygame.KMOD_CTRL, "ctrl"),
    (pygame.KMOD_SHIFT, "shift"),
    (pygame.KMOD_ALT, "alt"),
    (pygame.KMOD_META, "meta"),
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Vale Guardian encounter timers")
    p.add_argument("--config", default=DEFAULT_CONFIG_PATH,
                   help=f"key binding file (default: {DEFAULT_CONFIG_PATH})")
    p.add_argument("--tps", type=int, default=10,
                   help="timer updates per second (default: 10)")
    p.add_argument("--global-hotkeys", action="store_true",
                   help="listen for bindings system-wide (requires pynput)")
    p.add_argument("--headless", action="store_true",
                   help="no window; print timers to the terminal, global hotkeys only")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p.parse_args()


def key_event_chord(event: pygame.event.Event) -> str | None:
    """Canonical chord for a KEYDOWN event, or None for unbindable keys."""
    mods = {name for mask, name in _MODIFIER_MASKS if event.mod & mask}
    try:
        return chord_from_parts(pygame.key.name(event.key), mods)
    except ChordError:
        return None


def print_readouts(readouts: list[Readout]) -> None:
    text = "  ".join(line for r in readouts for line in format_readout(r))
    sys.stdout.write(f"\r{text}\x1b[K")
    sys.stdout.flush()


def run_headless(engine: Engine, queue: TriggerQueue) -> None:
    """Drive the engine at its own cadence until interrupted."""
    from hotkeys import start_global_hotkeys

    listeners = []

    def stop_listeners(group: TimerGroup) -> None:
        for listener in listeners:
            listener.stop()

    engine.add_system(make_readout_system(print_readouts))
    engine.on_start(lambda group: listeners.append(start_global_hotkeys(queue)))
    engine.on_stop(stop_listeners)
    signal.signal(signal.SIGINT, lambda signum, frame: engine.request_stop())
    engine.run_forever()
    sys.stdout.write("\n")


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    bindings = resolve_bindings(load_config(args.config))
    queue = TriggerQueue(bindings)
    group = TimerGroup()
    engine = Engine(group, tps=args.tps)
    engine.add_system(make_trigger_system(queue))
    engine.add_system(make_update_system())

    if args.headless:
        run_headless(engine, queue)
        return

    panel = TimerPanel(group)
    engine.add_system(make_readout_system(panel.update))

    listener = None
    if args.global_hotkeys:
        from hotkeys import start_global_hotkeys
        listener = start_global_hotkeys(queue)

    os.environ.setdefault("SDL_VIDEO_WINDOW_POS", "%d,%d" % WINDOW_POS)
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()

    # Tick accumulator for fixed-rate timer updates
    tick_interval = 1.0 / engine.tps
    accumulator = 0.0

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and listener is None:
                chord = key_event_chord(event)
                if chord is not None:
                    queue.submit(chord)

        while accumulator >= tick_interval:
            engine.step()
            accumulator -= tick_interval

        panel.set_running(group.is_running)
        panel.draw(screen)
        pygame.display.flip()

    if listener is not None:
        listener.stop()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
