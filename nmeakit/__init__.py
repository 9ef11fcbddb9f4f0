"""Typed parsing of NMEA 0183 sentences, tag blocks and coordinates."""

__version__ = "0.1.0"

__all__ = ["types", "tagblock", "base", "radar", "vessel", "environment", "parser"]