"""taskpad - an in-memory console task list manager."""

__version__ = "0.1.0"
