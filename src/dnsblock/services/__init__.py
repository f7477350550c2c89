"""Service layer — loading, querying, and reporting over a HashTable.

Services may import from the domain layer.
They must never import from commands, output, or config.
"""
