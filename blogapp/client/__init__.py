"""Client Layer — HTTP client and page renderer for the blog API.

Invariants:
    - Talks to the server only over HTTP (never imports services/ or models/)
    - Login and liked state live here, never on the server
"""
