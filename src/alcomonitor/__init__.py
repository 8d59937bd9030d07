"""Alcomonitor - live alcohol sensor readings with a top-10 highscore board."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
