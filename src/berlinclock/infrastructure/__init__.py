"""Infrastructure layer — state file, time sources, and the decode oracle.

Adapters for the collaborators around the pure domain. May import from the
domain layer, never from services, commands, or output.
"""
