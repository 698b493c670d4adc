"""File-backed record repositories for the store management API."""

__version__ = "0.1.0"
