"""Core configuration and constants for the querylab server."""
