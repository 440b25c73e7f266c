"""Domain layer — entries, binding tags, field kinds, and coercion rules.

This layer depends only on stdlib and pydantic.
It must never import from the decoder, extractor, config, or commands.
"""
