"""xunscout — Xunsearch driver for searchable models."""

__version__ = "0.1.0"
