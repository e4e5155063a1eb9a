"""SigilForge — procedural sigil-path generation service."""

__version__ = "0.1.0"
