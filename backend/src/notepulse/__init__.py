"""
NotePulse Backend - notes, tags and mentions for the NotePulse app

Authenticated CRUD over a user's notes with tag/mention autocompletion.
"""

__version__ = "0.1.0"
