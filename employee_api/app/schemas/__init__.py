"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON exchanged over HTTP (camelCase keys) while
Python code works with snake_case attributes.
"""
