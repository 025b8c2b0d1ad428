"""Domain layer — records, query state, and pure rules.

This layer depends only on stdlib and pydantic.
It must never import from services, controllers, output, commands, or config.
"""
