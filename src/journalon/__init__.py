"""Journalon - journals kept in a remote content-addressed store."""

__version__ = "0.1.0"
