"""Blog Application Package — users, posts, likes, and comments over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
