"""Domain layer: command values, the parser, and the membership registry.

This layer depends only on stdlib.
It must never import from services, output, commands, or config.
"""
