"""
Domain layer package.

Contains the error taxonomy raised by business logic.
No framework imports, no IO, no side effects.
"""
