"""
CRUD API application package.

Layers:
    - domain: Error taxonomy raised by business logic. No framework imports.
    - shared: Cross-cutting concerns (error mapping, logging).
    - core: Configuration.
"""
