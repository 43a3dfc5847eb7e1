"""
DOMAIN LAYER - Marketplace rules and calculators

This layer contains:
- Entities: Business objects with identity (User, Tool, Contribution, Review)
- Value Objects: Immutable types (UserId, ToolId, UserEmail, ...)
- Ports: Interfaces/abstractions that infrastructure implements
- Services: Pure domain logic (significance test, subject-line scoring, headlines)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Redis, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
