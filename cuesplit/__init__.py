"""cuesplit: split single-file album images using CUE sheets."""

__version__ = "1.0.0"
