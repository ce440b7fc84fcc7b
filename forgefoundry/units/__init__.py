"""Unit fan-out resolution and generation."""
