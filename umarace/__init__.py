"""Terminal racing game with betting and skills, and a few small console games."""

__version__ = "0.1.0"