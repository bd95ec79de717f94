"""
Service layer.

Services hold the business rules and talk to storage only through the
repository they are constructed with.
"""
