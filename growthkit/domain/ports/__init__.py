"""
PORTS - Interfaces the domain needs, implemented by infrastructure.
"""
