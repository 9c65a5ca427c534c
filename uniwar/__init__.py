"""Building blocks for a multi-player real-time space war game: galaxy, scoring, score file, message framing and terminal views."""

__version__ = "0.1.0"