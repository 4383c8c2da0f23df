"""Pydantic request/response schemas for the presentation API."""
