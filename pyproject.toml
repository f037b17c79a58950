[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "semaforo"
version = "0.1.0"
description = "Simulated smart traffic light with a 5x5 LED matrix, RGB lamp, buzzer schedule and SSD1306 status display"
requires-python = ">=3.10"
dependencies = []
keywords = ["traffic-light", "simulation", "ssd1306", "led-matrix", "oled", "frame-buffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
semaforo = "semaforo.app:main"

[tool.hatch.build.targets.wheel]
packages = ["semaforo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
