"""ChadGPT: a line-oriented task list bot."""

__version__ = "0.1.0"
