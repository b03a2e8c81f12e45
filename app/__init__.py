"""In-memory notes service."""
