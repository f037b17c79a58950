"""Simulated smart traffic light: mode schedules, LED matrix frames, RGB lamp, buzzer pattern and SSD1306 status screen."""

__version__ = "0.1.0"
__all__ = ["font", "ssd1306", "signals", "panel", "app"]