"""VoiceTasker: a to-do list driven by action directives embedded in chat replies."""

__version__ = "0.1.0"
