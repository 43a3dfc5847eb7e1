"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS): signup, unlock, reviews, admin moderation
- queries/   → Read operations (CQRS): catalog, profiles, calculators
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes) and actor lookup

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities, repositories, domain services
"""
