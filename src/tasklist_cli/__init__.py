"""tasklist-cli - a local task list manager for the terminal."""

__version__ = "0.3.0"
