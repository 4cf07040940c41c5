# wordhoard\core\__init__.py
"""
Core Domain Layer.

This package contains the pure business logic and entities of the system:
- Record types and the moderation protocol (no I/O).
- Interfaces (Ports) that the storage adapters must implement.
- Use cases that orchestrate shard reads and writes.

Nothing in here depends on FastAPI or on a concrete storage medium.
"""
