"""Domain layer — lamp model, encoder, decoder, and toggle rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
