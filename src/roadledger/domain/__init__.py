"""Domain layer: city/road types, error taxonomy, and seed data.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
