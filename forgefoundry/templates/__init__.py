"""Template discovery, resolution and file generation."""
