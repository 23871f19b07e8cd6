"""podium: authenticated top-3 extraction over hint-and-verify sorting."""

__version__ = "0.1.0"
