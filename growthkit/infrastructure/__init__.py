"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- store/: Key-value entity store (memory and Redis backends)
- persistence/: Repository implementations on top of the entity store
- security/: Password hashing and JWT bearer tokens
"""
