"""Infrastructure layer — document-format adapters and filesystem writes.

This layer may import from the domain layer (errors, enums).
It must never import from services, commands, or output.
"""
