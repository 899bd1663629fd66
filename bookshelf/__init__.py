"""Flask services for listing, creating, updating, deleting and rendering books stored in MongoDB."""

__version__ = "0.1.0"