"""Terminal front-end for the journal."""

from .app import JournalApp

__all__ = ["JournalApp"]
