"""Classic algorithm and data-structure tasks, most with command-line front ends."""

__version__ = "0.1.0"