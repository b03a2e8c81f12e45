"""Features module for the notes service.

- notes: Note entity, in-memory repository and HTTP routes
"""
