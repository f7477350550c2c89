"""Domain layer — the hash index and its input rules.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
