import pytest

from semaforo.panel import (
    BAR_WIDTH,
    TITLE,
    displayed_seconds,
    mode_label,
    phase_total_seconds,
    progress_width,
    render_status,
)
from semaforo.signals import Mode, Phase, matrix_schedule
from semaforo.ssd1306 import SSD1306


def _rows(display, y0, y1):
    return [[display.get_pixel(x, y) for x in range(display.width)] for y in range(y0, y1)]


@pytest.mark.parametrize(
    "mode, phase, total",
    [
        (Mode.NORMAL, Phase.GREEN, 20),
        (Mode.NORMAL, Phase.RED, 20),
        (Mode.ALTO_FLUXO, Phase.GREEN, 25),
        (Mode.ALTO_FLUXO, Phase.RED, 15),
        (Mode.BAIXO_FLUXO, Phase.GREEN, 15),
        (Mode.BAIXO_FLUXO, Phase.RED, 25),
    ],
)
def test_phase_total_seconds(mode, phase, total):
    assert phase_total_seconds(mode, phase) == total


@pytest.mark.parametrize(
    "mode, phase",
    [(Mode.NOTURNO, Phase.GREEN), (Mode.NORMAL, Phase.YELLOW), (Mode.NOTURNO, Phase.BLINK_ON)],
)
def test_phase_total_seconds_rejects_untimed(mode, phase):
    with pytest.raises(ValueError):
        phase_total_seconds(mode, phase)


def test_displayed_seconds_yellow_is_zero():
    assert displayed_seconds(Phase.YELLOW, 5000) == 0


def test_displayed_seconds_truncates():
    assert displayed_seconds(Phase.GREEN, 19900) == 19
    assert displayed_seconds(Phase.RED, 999) == 0


def test_progress_width_full_at_start_of_phase():
    for mode in (Mode.NORMAL, Mode.ALTO_FLUXO, Mode.BAIXO_FLUXO):
        for phase in (Phase.GREEN, Phase.RED):
            start = phase_total_seconds(mode, phase) * 1000
            assert progress_width(mode, phase, start) == BAR_WIDTH


def test_progress_width_zero_outside_timed_phases():
    assert progress_width(Mode.NORMAL, Phase.YELLOW, 3000) == 0
    assert progress_width(Mode.NORMAL, Phase.BLINK_OFF, 1500) == 0


def test_progress_width_shrinks_within_bar_over_a_cycle():
    for mode in (Mode.NORMAL, Mode.ALTO_FLUXO, Mode.BAIXO_FLUXO):
        previous = None
        previous_segment = None
        for step in matrix_schedule(mode):
            width = progress_width(mode, step.phase, step.remaining_ms)
            assert 0 <= width <= BAR_WIDTH
            if step.segment == previous_segment and previous is not None:
                assert width <= previous
            previous, previous_segment = width, step.segment


def test_mode_labels():
    assert mode_label(Mode.NORMAL) == "Modo Normal"
    assert mode_label(Mode.NOTURNO) == "Modo Noturno"
    assert mode_label(Mode.ALTO_FLUXO) == "Alto Fluxo"
    assert mode_label(Mode.BAIXO_FLUXO) == "Baixo Fluxo"


def test_mode_label_rejects_unknown():
    with pytest.raises(ValueError):
        mode_label(7)


def test_render_draws_title_and_counter():
    screen = SSD1306()
    render_status(screen, Mode.NORMAL, Phase.GREEN, 19900)

    title = SSD1306()
    title.draw_string(TITLE, 7, 0)
    assert _rows(screen, 0, 8) == _rows(title, 0, 8)

    counter = SSD1306()
    counter.draw_string("19 s", 50, 13)
    assert _rows(screen, 13, 21) == _rows(counter, 13, 21)


def test_render_draws_mode_label():
    screen = SSD1306()
    render_status(screen, Mode.ALTO_FLUXO, Phase.YELLOW, 0)
    label = SSD1306()
    label.draw_string(mode_label(Mode.ALTO_FLUXO), 25, 25)
    assert _rows(screen, 25, 33) == _rows(label, 25, 33)


def test_render_clears_previous_frame():
    screen = SSD1306()
    screen.pixel(127, 63, True)
    render_status(screen, Mode.NORMAL, Phase.GREEN, 20000)
    assert screen.get_pixel(127, 63) is False


def test_render_full_bar_on_64_row_display():
    screen = SSD1306()
    render_status(screen, Mode.NORMAL, Phase.GREEN, 20000)
    x_start = (screen.width - BAR_WIDTH) // 2
    for y in range(40, 50):
        assert all(screen.get_pixel(x, y) for x in range(x_start, x_start + BAR_WIDTH + 1))
        assert screen.get_pixel(x_start - 1, y) is False
        assert screen.get_pixel(x_start + BAR_WIDTH + 1, y) is False
    assert screen.get_pixel(x_start, 50) is False


def test_render_no_bar_in_night_mode():
    screen = SSD1306()
    render_status(screen, Mode.NOTURNO, Phase.BLINK_ON, 500)
    blank = SSD1306()
    assert _rows(screen, 40, 50) == _rows(blank, 40, 50)
    x_start = (screen.width - BAR_WIDTH) // 2
    assert [screen.get_pixel(x_start, y) for y in range(40, 50)] == [False] * 10

    label = SSD1306()
    label.draw_string(mode_label(Mode.NOTURNO), 25, 25)
    assert _rows(screen, 25, 33) == _rows(label, 25, 33)


def test_render_yellow_bar_is_single_column():
    screen = SSD1306()
    render_status(screen, Mode.NORMAL, Phase.YELLOW, 0)
    x_start = (screen.width - BAR_WIDTH) // 2
    lit = [x for x in range(screen.width) if screen.get_pixel(x, 45)]
    assert lit == [x_start]