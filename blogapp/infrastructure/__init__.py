"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from core/ domain logic except the error types
    - All store failures mapped to DatabaseError before leaving this layer
"""
