"""API request/response schemas and caller identity."""
