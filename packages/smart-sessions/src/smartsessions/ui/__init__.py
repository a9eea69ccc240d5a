"""Textual front end for smart-sessions.

PUBLIC API:
  - SmartSessionsApp: Picker application
"""

from .app import SmartSessionsApp

__all__ = ["SmartSessionsApp"]
