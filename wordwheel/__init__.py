"""Word-wheel puzzle engine: grid synthesis, guess validation and session tracking."""

__version__ = "0.1.0"
