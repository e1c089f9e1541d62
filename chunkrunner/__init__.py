"""A side-scrolling platformer on an endless world of noise-generated chunks."""

__version__ = "1.0.0"