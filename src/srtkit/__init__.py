"""Parse, query, edit and write SRT subtitle files."""

__version__ = "0.1.0"
