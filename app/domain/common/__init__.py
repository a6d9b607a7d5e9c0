"""
Common domain layer.

Error taxonomy shared by every CRUD bounded context.
No framework imports allowed.
"""
