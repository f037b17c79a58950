import pytest

from semaforo.app import INITIAL_REMAINING_MS, TrafficLight, main
from semaforo.signals import (
    BUZZER_DUTY,
    GREEN,
    RED,
    YELLOW,
    Mode,
    Phase,
    matrix_frame,
    rgb_led_state,
    solid_frame,
)


def _run(light, ticks):
    shot = None
    for _ in range(ticks):
        shot = light.tick()
    return shot


def test_initial_snapshot():
    shot = TrafficLight().snapshot()
    assert shot.mode is Mode.NORMAL
    assert shot.phase is Phase.GREEN
    assert shot.remaining_ms == INITIAL_REMAINING_MS == 20000
    assert shot.buzzer_level == BUZZER_DUTY


def test_first_tick_shows_solid_green():
    shot = TrafficLight().tick()
    assert shot.phase is Phase.GREEN
    assert shot.remaining_ms == 20000
    assert shot.frame == solid_frame(GREEN)
    assert shot.rgb == (False, True, False)
    assert shot.elapsed_ms == 0


def test_normal_countdown_and_yellow():
    light = TrafficLight()
    shot = _run(light, 200)
    assert shot.phase is Phase.GREEN
    assert shot.frame == matrix_frame(0, GREEN)
    shot = light.tick()
    assert shot.phase is Phase.YELLOW
    assert shot.remaining_ms == 0
    assert shot.frame == solid_frame(YELLOW)
    assert shot.rgb == rgb_led_state(Phase.YELLOW)


def test_normal_red_phase_after_yellow():
    light = TrafficLight()
    shot = _run(light, 231)
    assert shot.phase is Phase.RED
    assert shot.remaining_ms == 20000
    assert shot.frame == solid_frame(RED)


def test_cycle_repeats():
    light = TrafficLight()
    _run(light, 430)
    shot = light.tick()
    assert shot.phase is Phase.GREEN
    assert shot.remaining_ms == 20000


def test_press_cycles_modes():
    light = TrafficLight()
    seen = [light.press_button() for _ in range(4)]
    assert seen == [Mode.NOTURNO, Mode.ALTO_FLUXO, Mode.BAIXO_FLUXO, Mode.NORMAL]


def test_mode_change_cuts_each_remaining_segment_short():
    light = TrafficLight()
    light.tick()
    light.press_button()
    shot = light.tick()
    assert shot.mode is Mode.NOTURNO
    assert shot.phase is Phase.YELLOW
    assert light.tick().phase is Phase.RED
    shot = light.tick()
    assert shot.phase is Phase.BLINK_ON
    assert shot.remaining_ms == 500


def test_returning_to_same_mode_keeps_running():
    light = TrafficLight()
    first = light.tick()
    for _ in range(4):
        light.press_button()
    second = light.tick()
    assert second.phase is Phase.GREEN
    assert second.remaining_ms < first.remaining_ms


def test_night_mode_blinks():
    light = TrafficLight(Mode.NOTURNO)
    phases = [light.tick().phase for _ in range(21)]
    assert phases[:5] == [Phase.BLINK_ON] * 5
    assert phases[5:20] == [Phase.BLINK_OFF] * 15
    assert phases[20] is Phase.BLINK_ON


def test_buzzer_beep_timing():
    light = TrafficLight()
    levels = [light.tick().buzzer_level for _ in range(11)]
    assert levels[0] == BUZZER_DUTY
    assert levels[1] == BUZZER_DUTY
    assert levels[2:10] == [0] * 8
    assert levels[10] == BUZZER_DUTY


def test_elapsed_time_advances_per_tick():
    light = TrafficLight()
    shot = _run(light, 15)
    assert shot.elapsed_ms == 14 * 100


def test_main_prints_status(capsys):
    assert main(["--mode", "noturno", "--seconds", "2"]) == 0
    out = capsys.readouterr().out
    assert "Modo Noturno" in out
    assert len(out.strip().splitlines()) == 2


def test_main_press_and_display(capsys):
    assert main(["--seconds", "1", "--press-at", "0.5", "--display"]) == 0
    out = capsys.readouterr().out
    assert "#" in out
    assert "Modo Normal" in out


def test_main_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        main(["--mode", "turbo"])


def test_main_rejects_negative_time():
    with pytest.raises(SystemExit):
        main(["--seconds", "-1"])