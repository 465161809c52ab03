"""Domain layer — car model, builder rules, report rendering, error types.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
