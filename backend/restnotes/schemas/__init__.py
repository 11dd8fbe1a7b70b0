"""Pydantic request and response schemas (the API contract)."""
