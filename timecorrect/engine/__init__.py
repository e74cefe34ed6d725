"""Correction engine: history filtering, multiplier application, recording."""
