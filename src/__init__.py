"""tvogen — Transparent Value Object generator."""

__version__ = "0.1.0"
