"""DevLog: team daily developer log API."""

__version__ = "1.0.0"
