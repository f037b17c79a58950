# semaforo

A software model of a smart traffic light. It steps through its modes in
100 ms ticks and works out what each output shows:

- a 5x5 LED matrix (25 GRB colour words per frame) that shows solid green,
  yellow or red, and counts down from 5 to 0 in the last seconds of a green
  or red phase;
- an RGB status lamp, as a `(red, green, blue)` tuple of booleans;
- a buzzer level (PWM duty 75 or 0) following a beep pattern per phase;
- a 128x64 SSD1306-style monochrome frame buffer showing the title
  `Semaf. Intelig.`, the seconds left, the mode name and a progress bar.

## Modes

| Mode (`Mode`)  | Label on screen | Sequence                             |
|----------------|-----------------|--------------------------------------|
| `NORMAL`       | Modo Normal     | green 20 s, yellow 3 s, red 20 s     |
| `NOTURNO`      | Modo Noturno    | yellow blinking: 0.5 s on, 1.5 s off |
| `ALTO_FLUXO`   | Alto Fluxo      | green 25 s, yellow 3 s, red 15 s     |
| `BAIXO_FLUXO`  | Baixo Fluxo     | red 25 s, yellow 3 s, green 15 s     |

A button press moves to the next mode in that order, wrapping back to
`NORMAL`. The change is noticed at the end of the current step: the running
segment is cut short, the remaining segments of the old cycle each run once,
and then the new mode's cycle starts. The matrix and the buzzer follow this
rule independently, the buzzer checking only after each silent stretch.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
semaforo
```

Simulates 45 seconds in `normal` mode and prints one status line per
simulated second: elapsed time, mode label, phase, seconds shown on the
counter, RGB lamp bits and buzzer level.

Options:

- `--mode {alto-fluxo,baixo-fluxo,normal,noturno}`: starting mode
  (default `normal`).
- `--seconds N`: simulated time to run (default 45; must not be negative).
- `--press-at SECONDS`: press the mode button at this simulated time; may be
  given more than once.
- `--display`: at the end, print the status screen as 64 lines of `#` and
  `.` characters.
- `--realtime`: sleep 100 ms per tick so the simulation runs at wall-clock
  speed.

## Library use

```python
from semaforo.app import TrafficLight
from semaforo.signals import Mode

light = TrafficLight(Mode.NORMAL)
shot = light.tick()          # advance 100 ms; returns a Snapshot
print(shot.phase, shot.remaining_ms, shot.rgb, shot.buzzer_level)
light.press_button()         # switch to the next mode, returns it
print(light.snapshot())
```

A `Snapshot` holds `mode`, `phase`, `remaining_ms`, `frame`, `rgb`,
`buzzer_level` and `elapsed_ms`.

The building blocks can be used on their own:

- `semaforo.signals`: `Mode` (with `Mode.next()`), `Phase`, `rgb_to_grb`,
  `solid_frame`, `matrix_frame`, `rgb_led_state`, the generators
  `matrix_schedule` (yielding `MatrixStep`) and `buzzer_schedule` (yielding
  `BuzzerStep`) for one full cycle of a mode, and `ButtonEdgeDetector`,
  whose `update(level)` returns `True` on the falling edge of an
  active-low button.
- `semaforo.panel`: `render_status(display, mode, phase, remaining_ms)`
  redraws the status screen into a display's frame buffer.
  `phase_total_seconds`, `displayed_seconds`, `progress_width` and
  `mode_label` compute what it shows.
- `semaforo.ssd1306`: `SSD1306` is an in-memory frame buffer (default
  128x64, address `0x3C`) with `pixel`, `get_pixel`, `fill`, `rect`,
  `line`, `hline`, `vline`, `draw_char` and `draw_string`. `config()`,
  `command()` and `send_data()` write the controller's command and data
  bytes to a bus, which is any object with a `write(address, data)` method;
  `RecordingBus`, the default, keeps each write in its `writes` list.
  `Command` lists the controller's opcodes.
- `semaforo.font`: `glyph(char)` returns the eight column bytes of a
  printable ASCII character; other characters come back as a space.

## What it does not do

This package only models the traffic light. It drives no real hardware:
there is no I2C, GPIO, PWM or LED-strip driver, so the display bytes go to
whatever bus object you pass in, and matrix frames, lamp states and buzzer
levels are returned as values. The command line reads no physical button;
presses are given with `--press-at`.