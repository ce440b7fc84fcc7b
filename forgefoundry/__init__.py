"""Forgefoundry - declarative component scaffolder.

Generates directories, unit folders and rendered files from a YAML mode
configuration and a directory of annotated templates.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
