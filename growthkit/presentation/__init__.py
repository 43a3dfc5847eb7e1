"""
Presentation Layer - HTTP routers, request models and request-scoped dependencies.
"""
