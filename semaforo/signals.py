"""Traffic-light modes, phases and the timed output patterns each mode drives."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

NUM_LEDS = 25
TICK_MS = 100
BUZZER_DUTY = 75


class Mode(IntEnum):
    """Operating modes, cycled in this order by the mode button."""

    NORMAL = 0
    NOTURNO = 1
    ALTO_FLUXO = 2
    BAIXO_FLUXO = 3

    def next(self) -> "Mode":
        """Return the mode that follows this one."""
        return Mode((self.value + 1) % len(Mode))


class Phase(IntEnum):
    """Signal phases; the last two are the night-mode blink states."""

    GREEN = 0
    YELLOW = 1
    RED = 2
    BLINK_ON = 3
    BLINK_OFF = 4


def rgb_to_grb(r: int, g: int, b: int) -> int:
    """Pack an RGB colour into the 24-bit GRB word the LED matrix expects."""
    for channel in (r, g, b):
        if not 0 <= channel <= 0xFF:
            raise ValueError(f"colour channel out of range: {channel}")
    return (g << 16) | (r << 8) | b


OFF = rgb_to_grb(0, 0, 0)
GREEN = rgb_to_grb(0, 10, 0)
RED = rgb_to_grb(10, 0, 0)
YELLOW = rgb_to_grb(10, 10, 0)


def _pattern(*bits: int) -> tuple[bool, ...]:
    return tuple(bool(bit) for bit in bits)


DIGIT_PATTERNS: tuple[tuple[bool, ...], ...] = (
    _pattern(0, 1, 1, 1, 0, 0, 1, 0, 1, 0, 0, 1, 0, 1, 0, 0, 1, 0, 1, 0, 0, 1, 1, 1, 0),
    _pattern(0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0, 0, 0),
    _pattern(0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 1, 1, 1, 0, 0, 0, 0, 1, 0, 0, 1, 1, 1, 0),
    _pattern(0, 1, 1, 1, 0, 0, 0, 0, 1, 0, 0, 1, 1, 0, 0, 0, 0, 0, 1, 0, 0, 1, 1, 1, 0),
    _pattern(0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 1, 1, 0, 0, 1, 0, 1, 0, 0, 1, 0, 1, 0),
    _pattern(0, 1, 1, 1, 0, 0, 0, 0, 1, 0, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 1, 1, 1, 0),
    _pattern(0, 1, 1, 1, 0, 0, 1, 0, 1, 0, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 0, 1, 1, 1, 0),
    _pattern(0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 1, 1, 0),
    _pattern(0, 1, 1, 1, 0, 0, 1, 0, 1, 0, 0, 1, 1, 1, 0, 0, 1, 0, 1, 0, 0, 1, 1, 1, 0),
    _pattern(0, 1, 1, 1, 0, 0, 0, 0, 1, 0, 0, 1, 1, 1, 0, 0, 1, 0, 1, 0, 0, 1, 1, 1, 0),
)

Frame = tuple[int, ...]


def solid_frame(color: int) -> Frame:
    """A matrix frame with every LED set to ``color``."""
    return (color,) * NUM_LEDS


def matrix_frame(number: int, color: int) -> Frame:
    """A frame showing the countdown digit ``number`` (0-5); anything else is blank."""
    if not 0 <= number <= 5:
        return solid_frame(OFF)
    return tuple(color if lit else OFF for lit in DIGIT_PATTERNS[number])


@dataclass(frozen=True)
class MatrixStep:
    """One 100 ms tick of the matrix: what is shown and the time left in the phase."""

    segment: int
    phase: Phase
    remaining_ms: int
    frame: Frame
    duration_ms: int = TICK_MS


@dataclass(frozen=True)
class BuzzerStep:
    """One stretch of buzzer output at a fixed PWM level."""

    segment: int
    level: int
    duration_ms: int
    checks_mode: bool


@dataclass(frozen=True)
class _Countdown:
    phase: Phase
    ticks: int
    color: int


@dataclass(frozen=True)
class _Hold:
    phase: Phase
    ticks: int
    color: int
    counts_down: bool


_MATRIX_SEGMENTS: dict[Mode, tuple[_Countdown | _Hold, ...]] = {
    Mode.NORMAL: (
        _Countdown(Phase.GREEN, 200, GREEN),
        _Hold(Phase.YELLOW, 30, YELLOW, False),
        _Countdown(Phase.RED, 200, RED),
    ),
    Mode.NOTURNO: (
        _Hold(Phase.BLINK_ON, 5, YELLOW, True),
        _Hold(Phase.BLINK_OFF, 15, OFF, True),
    ),
    Mode.ALTO_FLUXO: (
        _Countdown(Phase.GREEN, 250, GREEN),
        _Hold(Phase.YELLOW, 30, YELLOW, False),
        _Countdown(Phase.RED, 150, RED),
    ),
    Mode.BAIXO_FLUXO: (
        _Countdown(Phase.RED, 250, RED),
        _Hold(Phase.YELLOW, 30, YELLOW, False),
        _Countdown(Phase.GREEN, 150, GREEN),
    ),
}


def matrix_schedule(mode: Mode) -> Iterator[MatrixStep]:
    """Yield the matrix ticks of one full cycle of ``mode``, segment by segment."""
    for index, segment in enumerate(_MATRIX_SEGMENTS[Mode(mode)]):
        for i in range(segment.ticks):
            remaining = (segment.ticks - i) * TICK_MS
            if isinstance(segment, _Countdown):
                seconds = remaining // 1000
                frame = solid_frame(segment.color) if seconds > 5 else matrix_frame(seconds, segment.color)
            else:
                frame = solid_frame(segment.color)
                if not segment.counts_down:
                    remaining = 0
            yield MatrixStep(index, segment.phase, remaining, frame)


_LED_STATES: dict[Phase, tuple[bool, bool, bool]] = {
    Phase.GREEN: (False, True, False),
    Phase.YELLOW: (True, True, False),
    Phase.RED: (True, False, False),
    Phase.BLINK_ON: (True, True, False),
    Phase.BLINK_OFF: (False, False, False),
}


def rgb_led_state(phase: int) -> tuple[bool, bool, bool]:
    """The (red, green, blue) outputs of the RGB LED for ``phase``; unknown phases are dark."""
    try:
        return _LED_STATES[Phase(phase)]
    except ValueError:
        return (False, False, False)


# (repetitions, on_ms, off_ms) per segment
_BUZZER_SEGMENTS: dict[Mode, tuple[tuple[int, int, int], ...]] = {
    Mode.NORMAL: ((20, 200, 800), (7, 200, 228), (10, 500, 1500)),
    Mode.NOTURNO: ((1, 200, 1800),),
    Mode.ALTO_FLUXO: ((25, 200, 800), (7, 200, 228), (7, 500, 1643)),
    Mode.BAIXO_FLUXO: ((12, 500, 1583), (7, 200, 228), (15, 200, 800)),
}


def buzzer_schedule(mode: Mode) -> Iterator[BuzzerStep]:
    """Yield the buzzer on/off stretches of one full cycle of ``mode``.

    The mode is re-checked only after each off stretch, which ``checks_mode`` marks.
    """
    for index, (count, on_ms, off_ms) in enumerate(_BUZZER_SEGMENTS[Mode(mode)]):
        for _ in range(count):
            yield BuzzerStep(index, BUZZER_DUTY, on_ms, False)
            yield BuzzerStep(index, 0, off_ms, True)


class ButtonEdgeDetector:
    """Reports presses of an active-low, pulled-up button as falling edges."""

    def __init__(self) -> None:
        self.last_level = True

    def update(self, level: bool) -> bool:
        """Feed the current pin level; return True on a press."""
        level = bool(level)
        pressed = self.last_level and not level
        self.last_level = level
        return pressed