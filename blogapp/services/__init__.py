"""Services Layer — resource handlers between the routes and the store.

Invariants:
    - One service class per resource, constructed per request with its AsyncSession
    - Services raise BlogError subclasses; routes never build error responses
"""
