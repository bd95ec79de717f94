"""
Version 1 of the Book API.

Breaking changes belong in a new version subpackage (e.g. ``v2``) so
that existing clients keep working.
"""
