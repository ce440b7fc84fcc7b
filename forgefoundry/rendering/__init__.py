"""Template engines and file output."""
