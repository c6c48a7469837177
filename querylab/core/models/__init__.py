"""Pydantic models shared by the database layer and the web API."""
