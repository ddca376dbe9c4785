"""NoteHub — multi-tenant notes service."""

__version__ = "0.1.0"
