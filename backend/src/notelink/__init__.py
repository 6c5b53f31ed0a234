"""
NoteLink Backend - personal notes with owner-scoped access

Users sign up, log in with a bearer token, and manage their own notes.
Sharing a note hands the recipient an independent copy.
"""

__version__ = "1.0.0"
