"""Traffic-light controller simulated in 100 ms ticks, with a small command line."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterator
from dataclasses import dataclass

from .panel import displayed_seconds, mode_label, render_status
from .signals import (
    OFF,
    TICK_MS,
    BuzzerStep,
    Frame,
    MatrixStep,
    Mode,
    Phase,
    buzzer_schedule,
    matrix_schedule,
    rgb_led_state,
    solid_frame,
)
from .ssd1306 import SSD1306

INITIAL_REMAINING_MS = 20000


@dataclass(frozen=True)
class Snapshot:
    """Everything the outputs show at one moment."""

    mode: Mode
    phase: Phase
    remaining_ms: int
    frame: Frame
    rgb: tuple[bool, bool, bool]
    buzzer_level: int
    elapsed_ms: int


class TrafficLight:
    """Runs the matrix and buzzer schedules, reacting to mode changes as the device does.

    A mode change is noticed at the end of each step: the running segment is cut
    short and the remaining segments of the old cycle each run once before the
    new mode's cycle starts.
    """

    def __init__(self, mode: Mode = Mode.NORMAL) -> None:
        self.mode = Mode(mode)
        self.phase = Phase.GREEN
        self.remaining_ms = INITIAL_REMAINING_MS
        self.frame: Frame = solid_frame(OFF)
        self.elapsed_ms = 0
        self._ticks = 0

        self._matrix_mode = self.mode
        self._matrix: Iterator[MatrixStep] = matrix_schedule(self.mode)
        self._last_segment: int | None = None

        self._buzzer_mode = self.mode
        self._buzzer: Iterator[BuzzerStep] = buzzer_schedule(self.mode)
        self._buzz_step = next(self._buzzer)
        self._buzz_left = self._buzz_step.duration_ms

    def press_button(self) -> Mode:
        """Switch to the next mode and return it."""
        self.mode = self.mode.next()
        return self.mode

    def tick(self) -> Snapshot:
        """Start the next 100 ms window and return the state shown during it."""
        if self._ticks:
            self._advance_buzzer(TICK_MS)
            self.elapsed_ms += TICK_MS
        step = self._next_matrix_step()
        self.phase = step.phase
        self.remaining_ms = step.remaining_ms
        self.frame = step.frame
        self._last_segment = step.segment
        self._ticks += 1
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        """The current state of every output."""
        return Snapshot(
            mode=self.mode,
            phase=self.phase,
            remaining_ms=self.remaining_ms,
            frame=self.frame,
            rgb=rgb_led_state(self.phase),
            buzzer_level=self._buzz_step.level,
            elapsed_ms=self.elapsed_ms,
        )

    def _next_matrix_step(self) -> MatrixStep:
        skip = self._last_segment if self.mode != self._matrix_mode else None
        for step in self._matrix:
            if skip is not None and step.segment == skip:
                continue
            return step
        self._matrix_mode = self.mode
        self._matrix = matrix_schedule(self.mode)
        return next(self._matrix)

    def _advance_buzzer(self, ms: int) -> None:
        while ms > 0:
            taken = min(ms, self._buzz_left)
            ms -= taken
            self._buzz_left -= taken
            if self._buzz_left == 0:
                self._next_buzzer_step()

    def _next_buzzer_step(self) -> None:
        finished = self._buzz_step
        skip = finished.segment if finished.checks_mode and self.mode != self._buzzer_mode else None
        for step in self._buzzer:
            if skip is not None and step.segment == skip:
                continue
            break
        else:
            self._buzzer_mode = self.mode
            self._buzzer = buzzer_schedule(self.mode)
            step = next(self._buzzer)
        self._buzz_step = step
        self._buzz_left = step.duration_ms


_MODE_NAMES = {
    "normal": Mode.NORMAL,
    "noturno": Mode.NOTURNO,
    "alto-fluxo": Mode.ALTO_FLUXO,
    "baixo-fluxo": Mode.BAIXO_FLUXO,
}


def _screen_text(display: SSD1306) -> str:
    return "\n".join(
        "".join("#" if display.get_pixel(x, y) else "." for x in range(display.width))
        for y in range(display.height)
    )


def _status_line(shot: Snapshot) -> str:
    rgb = "".join("1" if on else "0" for on in shot.rgb)
    return (
        f"t={shot.elapsed_ms / 1000:6.1f}s  {mode_label(shot.mode):<12}  "
        f"{shot.phase.name:<9}  {displayed_seconds(shot.phase, shot.remaining_ms):>2} s  "
        f"rgb={rgb}  buzzer={shot.buzzer_level}"
    )


def main(argv: list[str] | None = None) -> int:
    """Simulate the traffic light and print its state once per second."""
    parser = argparse.ArgumentParser(prog="semaforo", description="Simulate the smart traffic light.")
    parser.add_argument("--mode", choices=sorted(_MODE_NAMES), default="normal", help="starting mode")
    parser.add_argument("--seconds", type=float, default=45.0, help="simulated time to run")
    parser.add_argument(
        "--press-at", type=float, action="append", default=[], metavar="SECONDS",
        help="press the mode button at this simulated time (repeatable)",
    )
    parser.add_argument("--display", action="store_true", help="print the OLED screen at the end")
    parser.add_argument("--realtime", action="store_true", help="run at wall-clock speed")
    args = parser.parse_args(argv)

    if args.seconds < 0:
        parser.error("--seconds must not be negative")

    light = TrafficLight(_MODE_NAMES[args.mode])
    presses = sorted(round(t * 1000 / TICK_MS) for t in args.press_at)
    ticks = round(args.seconds * 1000 / TICK_MS)
    per_second = 1000 // TICK_MS

    for tick in range(ticks):
        while presses and presses[0] <= tick:
            presses.pop(0)
            light.press_button()
        shot = light.tick()
        if tick % per_second == 0:
            print(_status_line(shot))
        if args.realtime:
            time.sleep(TICK_MS / 1000)

    if args.display:
        screen = SSD1306()
        render_status(screen, light.mode, light.phase, light.remaining_ms)
        print(_screen_text(screen))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())