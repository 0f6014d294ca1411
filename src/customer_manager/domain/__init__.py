"""Domain layer — value types for Customer payloads.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
