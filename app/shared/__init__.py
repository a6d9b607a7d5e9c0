"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error handling and mapping
- Logging configuration
"""
