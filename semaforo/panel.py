"""Status screen of the traffic light: countdown, mode name and progress bar."""

from __future__ import annotations

from .signals import Mode, Phase
from .ssd1306 import SSD1306

TITLE = "Semaf. Intelig."
BAR_WIDTH = 40
BAR_HEIGHT = 10

_TOTALS: dict[tuple[Mode, Phase], int] = {
    (Mode.NORMAL, Phase.GREEN): 20,
    (Mode.NORMAL, Phase.RED): 20,
    (Mode.ALTO_FLUXO, Phase.GREEN): 25,
    (Mode.ALTO_FLUXO, Phase.RED): 15,
    (Mode.BAIXO_FLUXO, Phase.GREEN): 15,
    (Mode.BAIXO_FLUXO, Phase.RED): 25,
}

_LABELS: dict[Mode, str] = {
    Mode.NORMAL: "Modo Normal",
    Mode.NOTURNO: "Modo Noturno",
    Mode.ALTO_FLUXO: "Alto Fluxo",
    Mode.BAIXO_FLUXO: "Baixo Fluxo",
}


def phase_total_seconds(mode: int, phase: int) -> int:
    """Full length in seconds of a green or red phase in ``mode``."""
    key = (Mode(mode), Phase(phase))
    try:
        return _TOTALS[key]
    except KeyError:
        raise ValueError(f"no timed phase {key[1].name} in mode {key[0].name}") from None


def displayed_seconds(phase: int, remaining_ms: int) -> int:
    """Whole seconds shown on the counter; yellow always shows zero."""
    if phase == Phase.YELLOW:
        return 0
    return remaining_ms // 1000


def progress_width(mode: int, phase: int, remaining_ms: int, bar_width: int = BAR_WIDTH) -> int:
    """Filled width of the progress bar, proportional to the whole seconds left."""
    if phase not in (Phase.GREEN, Phase.RED):
        return 0
    return (remaining_ms // 1000) * bar_width // phase_total_seconds(mode, phase)


def mode_label(mode: int) -> str:
    """Name of ``mode`` as shown on the screen."""
    return _LABELS[Mode(mode)]


def render_status(display: SSD1306, mode: int, phase: int, remaining_ms: int) -> None:
    """Redraw the whole status screen into ``display``'s frame buffer."""
    display.fill(False)
    display.draw_string(TITLE, 7, 0)
    display.draw_string(f"{displayed_seconds(phase, remaining_ms)} s", 50, 13)
    display.draw_string(mode_label(mode), 25, 25)

    if mode == Mode.NOTURNO:
        return
    filled = progress_width(mode, phase, remaining_ms)
    y_start = 40 if display.height == 64 else 20
    x_start = (display.width - BAR_WIDTH) // 2
    for y in range(y_start, y_start + BAR_HEIGHT):
        display.line(x_start, y, x_start + filled, y, True)